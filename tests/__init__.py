"""
Test suite for sort-key

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/property/      : Hypothesis property tests for key invariants
- tests/scenarios/     : Long-running seeded insertion scenarios
"""

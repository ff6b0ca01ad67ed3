"""
Core value type, digit arithmetic, and errors.

Everything here is pure and independent of the caller's ordered collection.
"""

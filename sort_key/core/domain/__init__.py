"""
Domain models and value objects.

Contains the SortKey value type.
"""

from sort_key.core.domain.sort_key import SortKey

__all__ = [
    "SortKey",
]

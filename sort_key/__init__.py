"""
sort-key — order-preserving fractional sort keys

Ключ, который можно вставить между любыми двумя существующими ключами
без перенумерации соседей.

    >>> from sort_key import SortKey
    >>> head = SortKey.default()
    >>> tail = head.after()
    >>> head < head.between(tail) < tail
    True
"""

from sort_key.core.domain.sort_key import SortKey
from sort_key.core.errors import InvalidFormatError, SortKeyContractViolation, SortKeyError
from sort_key.core.math.alphabet import (
    ALPHABET,
    MAX,
    MID,
    MIN,
    is_valid_char,
    is_valid_digit,
    to_char,
    to_digit,
)
from sort_key.core.math.digit_arithmetic import DEFAULT_DELTA
from sort_key.generator import GeneratorConfig, SortKeyGenerator, is_strictly_increasing

__version__ = "0.1.0"

__all__ = [
    # Value type
    "SortKey",
    # Errors
    "InvalidFormatError",
    "SortKeyContractViolation",
    "SortKeyError",
    # Alphabet
    "ALPHABET",
    "MAX",
    "MID",
    "MIN",
    "is_valid_char",
    "is_valid_digit",
    "to_char",
    "to_digit",
    # Generation
    "DEFAULT_DELTA",
    "GeneratorConfig",
    "SortKeyGenerator",
    "is_strictly_increasing",
]

"""
Core math modules для sort-key

Base-36 алфавит и арифметика дробей над последовательностями цифр.
"""

# Digit Alphabet
from sort_key.core.math.alphabet import (
    # Constants
    ALPHABET,
    BASE,
    MAX,
    MID,
    MIN,
    MIN_CHAR,
    NEXT_MIN,
    # Predicates
    is_valid_char,
    is_valid_digit,
    # Conversion
    to_char,
    to_digit,
)

# Digit Arithmetic
from sort_key.core.math.digit_arithmetic import (
    DEFAULT_DELTA,
    average_digits,
    decrement_padded,
    digit_at,
    increment_padded,
    midpoint_digits,
    strip_trailing_min,
    truncate_above,
)

__all__ = [
    # Digit Alphabet — Constants
    "ALPHABET",
    "BASE",
    "MAX",
    "MID",
    "MIN",
    "MIN_CHAR",
    "NEXT_MIN",
    # Digit Alphabet — Predicates
    "is_valid_char",
    "is_valid_digit",
    # Digit Alphabet — Conversion
    "to_char",
    "to_digit",
    # Digit Arithmetic — Constants
    "DEFAULT_DELTA",
    # Digit Arithmetic — Functions
    "average_digits",
    "decrement_padded",
    "digit_at",
    "increment_padded",
    "midpoint_digits",
    "strip_trailing_min",
    "truncate_above",
]

"""
Digit Alphabet — base-36 алфавит ключей сортировки

Модуль задаёт отображение между символом алфавита и его порядковым значением:
- '0'-'9' → 0-9
- 'a'-'z' → 10-35

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Алфавит фиксирован: ровно 36 символов, регистр важен
2. to_char / to_digit — взаимно обратная биекция на допустимом диапазоне
3. Значение вне диапазона → SortKeyContractViolation (проверять заранее через предикаты)
"""

from typing import Final

from sort_key.core.errors import SortKeyContractViolation

# =============================================================================
# АЛФАВИТ
# =============================================================================

ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

# Минимальная цифра (неявный бесконечный суффикс любого ключа)
MIN: Final[int] = 0

# Граница borrow/carry: последний разряд никогда не становится MIN
NEXT_MIN: Final[int] = MIN + 1

# Максимальная цифра
MAX: Final[int] = len(ALPHABET) - 1

# Основание системы счисления
BASE: Final[int] = MAX - MIN + 1

# Середина алфавита: 18 → 'i', стартовый ключ пустой коллекции
MID: Final[int] = (MIN + MAX + 1) // 2

MIN_CHAR: Final[str] = ALPHABET[MIN]

A2I: Final[dict[str, int]] = {ch: i for i, ch in enumerate(ALPHABET)}


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_valid_char(c: str) -> bool:
    """
    Проверка, что c — один символ алфавита.

    Examples:
        >>> is_valid_char("a")
        True
        >>> is_valid_char("A")
        False
    """
    return isinstance(c, str) and len(c) == 1 and ("0" <= c <= "9" or "a" <= c <= "z")


def is_valid_digit(i: int) -> bool:
    """Проверка, что i — допустимая цифра в [MIN, MAX]."""
    return isinstance(i, int) and not isinstance(i, bool) and MIN <= i <= MAX


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_char(i: int) -> str:
    """
    Конверсия: цифра → символ алфавита.

    Args:
        i: цифра в [MIN, MAX]

    Returns:
        Символ алфавита

    Raises:
        SortKeyContractViolation: если i вне диапазона

    Examples:
        >>> to_char(10)
        'a'
        >>> to_char(35)
        'z'
    """
    if not is_valid_digit(i):
        raise SortKeyContractViolation(f"`to_char` must receive valid value: {i!r} is invalid")
    return ALPHABET[i]


def to_digit(c: str) -> int:
    """
    Конверсия: символ алфавита → цифра.

    Args:
        c: символ '0'-'9' или 'a'-'z'

    Returns:
        Цифра в [MIN, MAX]

    Raises:
        SortKeyContractViolation: если c не принадлежит алфавиту
    """
    if not is_valid_char(c):
        raise SortKeyContractViolation(f"`to_digit` must receive valid char: {c!r} is invalid")
    return A2I[c]

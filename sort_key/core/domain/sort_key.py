"""
SortKey — Order-preserving fractional sort key

Immutable Pydantic модель: непустой кортеж base-36 цифр, дробь строго внутри (0, 1).
Между любыми двумя ключами можно вставить новый без перенумерации соседей.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits непустой
2. Каждая цифра в [MIN, MAX]
3. Последняя цифра != MIN (лексикографический порядок == числовой, включая префиксы)
4. Ключ никогда не изменяется: before/after/between возвращают новый экземпляр

Нарушение инвариантов при конструировании → SortKeyContractViolation.
Единственная ожидаемая ошибка — разбор строки → InvalidFormatError.
"""

import logging
from typing import Any, Optional, Sequence

from pydantic import BaseModel, Field, field_validator, model_serializer, model_validator

from sort_key.core.errors import InvalidFormatError, SortKeyContractViolation
from sort_key.core.math.alphabet import MID, MIN, MIN_CHAR, is_valid_char, is_valid_digit, to_char, to_digit
from sort_key.core.math.digit_arithmetic import (
    DEFAULT_DELTA,
    decrement_padded,
    increment_padded,
    midpoint_digits,
    strip_trailing_min,
)

logger = logging.getLogger(__name__)


class SortKey(BaseModel):
    """
    Дробный ключ сортировки.

    Сравнение — лексикографическое по digits (строгий префикс меньше).
    Строковая форма — конкатенация символов алфавита, например "i" для default().

    Examples:
        >>> k = SortKey.parse("abc")
        >>> k.before() < k < k.after()
        True
    """

    digits: tuple[int, ...] = Field(
        default=(MID,), description="Цифры base-36 дроби, старший разряд первым"
    )

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Валидация
    # -------------------------------------------------------------------------

    @model_validator(mode="before")
    @classmethod
    def decode_string(cls, data: Any) -> Any:
        """Строковая форма ключа принимается как вход модели."""
        if isinstance(data, str):
            return {"digits": _decode(data)}
        return data

    @field_validator("digits", mode="before")
    @classmethod
    def reject_non_int_digits(cls, v: Any) -> Any:
        """Цифры — только int (без bool): lax-конверсия pydantic не применяется."""
        if isinstance(v, (list, tuple)):
            for d in v:
                if not isinstance(d, int) or isinstance(d, bool):
                    raise SortKeyContractViolation(
                        f"`SortKey` shouldn't contain invalid digit: {d!r}"
                    )
        return v

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Проверка инвариантов ключа (нарушение — ошибка вызывающего кода)."""
        if not v:
            raise SortKeyContractViolation("`SortKey` shouldn't be empty")
        for d in v:
            if not is_valid_digit(d):
                raise SortKeyContractViolation(f"`SortKey` shouldn't contain invalid digit: {d!r}")
        if v[-1] == MIN:
            raise SortKeyContractViolation(f"`SortKey` shouldn't end with {MIN}")
        return v

    @model_serializer
    def serialize(self) -> str:
        return self.render()

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def default(cls) -> "SortKey":
        """Стартовый ключ пустой коллекции: середина алфавита ("i")."""
        return cls()

    @classmethod
    def parse(cls, s: str) -> "SortKey":
        """
        Разбор строковой формы ключа.

        Args:
            s: строка из символов алфавита, не заканчивается на '0'

        Returns:
            SortKey

        Raises:
            InvalidFormatError: если строка не проходит is_valid_string
                (пустая, символ вне алфавита, завершающий '0')
        """
        return cls(digits=_decode(s))

    @staticmethod
    def is_valid_string(s: str) -> bool:
        """
        Проверка строковой формы.

        Examples:
            >>> SortKey.is_valid_string("012")
            True
            >>> SortKey.is_valid_string("120")
            False
        """
        if not isinstance(s, str) or not s:
            return False
        if not all(is_valid_char(c) for c in s):
            return False
        return s[-1] != MIN_CHAR

    @classmethod
    def _from_generated(cls, digits: Sequence[int]) -> "SortKey":
        normalized = strip_trailing_min(digits)
        if len(normalized) != len(digits):
            logger.warning(
                "Generated digits ended with MIN, normalized: %s -> %s",
                list(digits),
                normalized,
            )
        return cls(digits=tuple(normalized))

    # -------------------------------------------------------------------------
    # Генерация ключей
    # -------------------------------------------------------------------------

    def before(self, delta: int = DEFAULT_DELTA) -> "SortKey":
        """
        Ключ строго меньше текущего.

        Args:
            delta: число дополнительных разрядов после точки расхождения (> 0).
                Больше delta — длиннее ключ, но больше места для вставок рядом.

        Raises:
            SortKeyContractViolation: если delta <= 0
        """
        return self._from_generated(decrement_padded(self.digits, delta))

    def after(self, delta: int = DEFAULT_DELTA) -> "SortKey":
        """
        Ключ строго больше текущего.

        Raises:
            SortKeyContractViolation: если delta <= 0
        """
        return self._from_generated(increment_padded(self.digits, delta))

    def between(self, other: "SortKey") -> "SortKey":
        """
        Кратчайший ключ строго между self и other (порядок аргументов любой).

        Raises:
            SortKeyContractViolation: если self == other
        """
        return self._from_generated(midpoint_digits(self.digits, other.digits))

    def try_between(self, other: "SortKey") -> Optional["SortKey"]:
        """Как between(), но для равных ключей возвращает None."""
        if self == other:
            return None
        return self.between(other)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def render(self) -> str:
        """Строковая форма ключа (обратна parse)."""
        return "".join(to_char(d) for d in self.digits)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SortKey({self.render()!r})"

    def __len__(self) -> int:
        return len(self.digits)

    # -------------------------------------------------------------------------
    # Порядок
    # -------------------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SortKey):
            return NotImplemented
        return self.digits < other.digits

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SortKey):
            return NotImplemented
        return self.digits <= other.digits

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SortKey):
            return NotImplemented
        return self.digits > other.digits

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SortKey):
            return NotImplemented
        return self.digits >= other.digits


def _decode(s: str) -> tuple[int, ...]:
    if not SortKey.is_valid_string(s):
        logger.debug("Rejected SortKey string: %r", s)
        raise InvalidFormatError(s)
    return tuple(to_digit(c) for c in s)

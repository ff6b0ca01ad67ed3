"""Иерархия исключений sort-key.

Два класса ошибок:
- InvalidFormatError — ожидаемая ошибка разбора строки (возвращается вызывающему)
- SortKeyContractViolation — нарушение контракта (баг вызывающего кода)
"""


class SortKeyError(Exception):
    """Базовое исключение для всех ошибок sort-key."""


class SortKeyContractViolation(SortKeyError):
    """
    Нарушение контракта: невалидная последовательность digits, delta <= 0,
    between() с равными ключами, декодирование символа вне алфавита.

    Не предназначено для перехвата и retry. Намеренно НЕ наследует ValueError:
    pydantic не оборачивает такое исключение в ValidationError.
    """


class InvalidFormatError(SortKeyError, ValueError):
    """
    Строка не является валидной кодировкой SortKey.

    Attributes:
        value: исходная отклонённая строка (без изменений)
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"SortKey invalid format: {value}")

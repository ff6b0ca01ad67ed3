"""
Digit Arithmetic — арифметика base-36 дробей над списками цифр

Модуль содержит чистые функции, на которых построены before/after/between:
- Padding + borrow pass (уменьшение ключа)
- Padding + carry pass (увеличение ключа)
- Fixed-point среднее двух дробей (сумма с переносом + деление на 2)
- Truncation среднего до минимальной длины
- Нормализация: удаление хвостовых MIN

Последовательность цифр трактуется как дробь 0.d0 d1 d2 ... в base 36
с неявным бесконечным суффиксом MIN.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные последовательности не изменяются (всегда возвращается новый список)
2. delta <= 0 → SortKeyContractViolation
3. Постусловия (результат < / > / между входами) проверяются assert
"""

from typing import Final, Sequence

from sort_key.core.errors import SortKeyContractViolation
from sort_key.core.math.alphabet import BASE, MAX, MIN, NEXT_MIN

# Глубина padding по умолчанию для before/after
DEFAULT_DELTA: Final[int] = 3


def digit_at(digits: Sequence[int], at: int) -> int:
    """Цифра в позиции at; за концом последовательности — MIN."""
    return digits[at] if at < len(digits) else MIN


def _check_delta(delta: int) -> None:
    if not isinstance(delta, int) or isinstance(delta, bool) or delta <= 0:
        raise SortKeyContractViolation(f"delta must be positive, got {delta!r}")


# =============================================================================
# BORROW / CARRY
# =============================================================================


def decrement_padded(digits: Sequence[int], delta: int = DEFAULT_DELTA) -> list[int]:
    """
    Последовательность строго меньше digits с запасом delta разрядов.

    Алгоритм:
    1. Копируем цифры до первой > MIN включительно (первая позиция, где возможен borrow)
    2. Дописываем delta цифр из digits (MIN, если digits закончились)
    3. Borrow pass по последним delta + 1 позициям, от младшей к старшей:
       - младшая позиция: NEXT_MIN → MAX, borrow продолжается
       - любая позиция: MIN → MAX, borrow продолжается
       - иначе: уменьшаем на 1 и останавливаемся

    Args:
        digits: исходные цифры (валидный ключ)
        delta: глубина padding (> 0)

    Returns:
        Новый список цифр, лексикографически меньше digits

    Raises:
        SortKeyContractViolation: если delta <= 0

    Examples:
        >>> decrement_padded([0, 1], 3)
        [0, 0, 35, 35, 35]
    """
    _check_delta(delta)

    res: list[int] = []
    for d in digits:
        res.append(d)
        if d > MIN:
            break

    for _ in range(delta):
        res.append(digit_at(digits, len(res)))

    for i in range(delta + 1):
        at = len(res) - i - 1
        d = res[at]
        if (i == 0 and d == NEXT_MIN) or d == MIN:
            res[at] = MAX
            continue
        res[at] = d - 1
        break

    assert res < list(digits), f"`before` should satisfy post-condition: {list(digits)} -> {res}"
    return res


def increment_padded(digits: Sequence[int], delta: int = DEFAULT_DELTA) -> list[int]:
    """
    Последовательность строго больше digits с запасом delta разрядов.

    Зеркально decrement_padded:
    1. Копируем цифры до первой < MAX включительно
    2. Дописываем delta цифр (MIN, если digits закончились)
    3. Carry pass: младшая позиция MAX → NEXT_MIN, остальные MAX → MIN,
       первая иная цифра увеличивается на 1

    Examples:
        >>> increment_padded([35, 35, 35], 3)
        [35, 35, 35, 0, 0, 1]
    """
    _check_delta(delta)

    res: list[int] = []
    for d in digits:
        res.append(d)
        if d < MAX:
            break

    for _ in range(delta):
        res.append(digit_at(digits, len(res)))

    for i in range(delta + 1):
        at = len(res) - i - 1
        d = res[at]
        if d == MAX:
            res[at] = NEXT_MIN if i == 0 else MIN
            continue
        res[at] = d + 1
        break

    assert res > list(digits), f"`after` should satisfy post-condition: {list(digits)} -> {res}"
    return res


# =============================================================================
# AVERAGE + TRUNCATION
# =============================================================================


def average_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Точное среднее (a + b) / 2 как base-36 дробь длины max(len) + 1.

    1. Сумма от младшего разряда к старшему; переполнение разряда (кроме первого)
       переносится в более старший разряд. Первый разряд поглощает переполнение.
    2. Деление на 2 от старшего разряда к младшему; нечётный остаток
       переносится в следующий (младший) разряд как BASE, как при делении столбиком.

    Examples:
        >>> average_digits([33], [33, 0, 1])
        [33, 0, 0, 18]
    """
    length = max(len(a), len(b))
    acc = [MIN] * (length + 1)

    # a + b
    for at in range(length - 1, -1, -1):
        acc[at] += digit_at(a, at) - MIN
        acc[at] += digit_at(b, at) - MIN
        if at > 0 and acc[at] > MAX:
            acc[at] -= BASE
            acc[at - 1] += 1

    # / 2
    last = len(acc) - 1
    for at in range(len(acc)):
        if at < last and acc[at] % 2 == 1:
            acc[at + 1] += BASE
        acc[at] //= 2

    return acc


def truncate_above(mean: Sequence[int], low: Sequence[int]) -> list[int]:
    """
    Минимальный префикс mean, который уже превышает low.

    Обрезаем после первой позиции, где цифра mean больше цифры low
    (MIN за концом low). Если такой позиции нет среди первых len(mean) - 1,
    mean возвращается целиком.
    """
    for at in range(len(mean) - 1):
        if mean[at] > digit_at(low, at):
            return list(mean[: at + 1])
    return list(mean)


def midpoint_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Кратчайшая последовательность строго между a и b (a != b, порядок любой).

    Raises:
        SortKeyContractViolation: если a и b равны
    """
    a, b = tuple(a), tuple(b)
    if a == b:
        raise SortKeyContractViolation(
            "`between` should satisfy pre-condition: inputs shouldn't be equal"
        )

    low, high = (a, b) if a < b else (b, a)
    res = truncate_above(average_digits(a, b), low)

    assert tuple(res) > low, f"`between` should satisfy post-condition: {low} {high} {res}"
    assert tuple(res) < high, f"`between` should satisfy post-condition: {low} {high} {res}"
    return res


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def strip_trailing_min(digits: Sequence[int]) -> list[int]:
    """Удаление хвостовых MIN (неявный суффикс не меняет значение дроби)."""
    end = len(digits)
    while end > 0 and digits[end - 1] == MIN:
        end -= 1
    return list(digits[:end])

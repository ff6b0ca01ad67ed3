"""Key Generator — выделение ключей для промежутков упорядоченной коллекции.

Коллекция принадлежит вызывающему коду (список SortKey по возрастанию).
Генератор только вычисляет ключ для нужного промежутка:
- Пустая коллекция → initial()
- Перед головой → head.before(delta)
- После хвоста → tail.after(delta)
- Между соседями → left.between(right)

spread() выдаёт серию равномерно распределённых коротких ключей — примитив
для внешнего rebalancing. Политика rebalancing (когда и что сокращать)
остаётся за вызывающим кодом.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from sort_key.core.domain.sort_key import SortKey
from sort_key.core.errors import SortKeyContractViolation
from sort_key.core.math.digit_arithmetic import DEFAULT_DELTA

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class GeneratorConfig:
    """Конфигурация генератора ключей.

    delta — глубина padding для before/after на границах коллекции.
    """

    delta: int = DEFAULT_DELTA

    def __post_init__(self) -> None:
        if not isinstance(self.delta, int) or isinstance(self.delta, bool) or self.delta <= 0:
            raise SortKeyContractViolation(f"delta must be positive, got {self.delta!r}")


# =============================================================================
# HELPERS
# =============================================================================


def is_strictly_increasing(keys: Sequence[SortKey]) -> bool:
    """Проверка, что ключи строго возрастают (дубликатов нет)."""
    return all(keys[i - 1] < keys[i] for i in range(1, len(keys)))


# =============================================================================
# GENERATOR
# =============================================================================


class SortKeyGenerator:
    """Генератор ключей для промежутков упорядоченной коллекции.

    Не хранит состояния кроме frozen config: экземпляр можно разделять
    между потоками.
    """

    def __init__(self, config: GeneratorConfig | None = None):
        """Инициализация генератора.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or GeneratorConfig()

    def initial(self) -> SortKey:
        """Первый ключ пустой коллекции."""
        return SortKey.default()

    def midpoint(self, left: Optional[SortKey], right: Optional[SortKey]) -> SortKey:
        """Ключ строго внутри промежутка (left, right).

        None на любой стороне означает отсутствие границы.

        Args:
            left: нижняя граница (или None)
            right: верхняя граница (или None)

        Returns:
            SortKey: left < key < right

        Raises:
            SortKeyContractViolation: если left >= right
        """
        if left is None and right is None:
            key = self.initial()
        elif left is None:
            key = right.before(self.config.delta)
        elif right is None:
            key = left.after(self.config.delta)
        else:
            if not left < right:
                raise SortKeyContractViolation(
                    f"`midpoint` requires left < right, got {left} >= {right}"
                )
            key = left.between(right)

        logger.debug("Allocated key %s for gap (%s, %s)", key, left, right)
        return key

    def key_for_index(self, keys: Sequence[SortKey], index: int) -> SortKey:
        """Ключ для вставки в позицию index строго возрастающей последовательности.

        После keys.insert(index, key) последовательность остаётся строго возрастающей.

        Raises:
            IndexError: если index вне [0, len(keys)]
        """
        if not 0 <= index <= len(keys):
            raise IndexError(f"index {index} out of range for {len(keys)} keys")

        left = keys[index - 1] if index > 0 else None
        right = keys[index] if index < len(keys) else None
        return self.midpoint(left, right)

    def spread(
        self,
        count: int,
        left: Optional[SortKey] = None,
        right: Optional[SortKey] = None,
    ) -> list[SortKey]:
        """Серия из count строго возрастающих ключей внутри (left, right).

        Ключи выделяются сбалансированной бисекцией: середина промежутка,
        затем рекурсивно обе половины. Так ключи остаются короткими.

        Args:
            count: число ключей (>= 0)
            left: нижняя граница (или None)
            right: верхняя граница (или None)

        Returns:
            Список ключей по возрастанию

        Raises:
            ValueError: если count < 0
            SortKeyContractViolation: если left >= right
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        keys: list[SortKey] = []
        self._fill(keys, count, left, right)
        logger.debug("Spread %d keys over gap (%s, %s)", count, left, right)
        return keys

    def _fill(
        self,
        out: list[SortKey],
        count: int,
        left: Optional[SortKey],
        right: Optional[SortKey],
    ) -> None:
        if count == 0:
            return
        mid = self.midpoint(left, right)
        below = count // 2
        self._fill(out, below, left, mid)
        out.append(mid)
        self._fill(out, count - below - 1, mid, right)

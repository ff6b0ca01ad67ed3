"""
Тесты для Key Generator

Проверяет:
1. GeneratorConfig: default delta, delta <= 0 → contract violation
2. midpoint: семантика промежутков (None = без границы)
3. key_for_index: вставка в любую позицию сохраняет строгий порядок
4. spread: равномерная серия ключей внутри промежутка
"""

import logging

import pytest

from sort_key.core.domain.sort_key import SortKey
from sort_key.core.errors import SortKeyContractViolation
from sort_key.generator import GeneratorConfig, SortKeyGenerator, is_strictly_increasing


def key(s: str) -> SortKey:
    return SortKey.parse(s)


@pytest.fixture
def generator() -> SortKeyGenerator:
    return SortKeyGenerator()


# =============================================================================
# ТЕСТЫ: Config
# =============================================================================


class TestGeneratorConfig:
    """Тесты GeneratorConfig."""

    def test_default_delta(self) -> None:
        assert GeneratorConfig().delta == 3
        assert SortKeyGenerator().config == GeneratorConfig()

    @pytest.mark.parametrize("delta", [0, -1, True])
    def test_non_positive_delta(self, delta: int) -> None:
        with pytest.raises(SortKeyContractViolation):
            GeneratorConfig(delta=delta)

    def test_custom_delta_applied(self) -> None:
        gen = SortKeyGenerator(GeneratorConfig(delta=1))
        assert str(gen.midpoint(key("i"), None)) == "i1"
        assert str(gen.midpoint(None, key("i"))) == "hz"


# =============================================================================
# ТЕСТЫ: midpoint
# =============================================================================


class TestMidpoint:
    """Тесты midpoint."""

    def test_unbounded(self, generator: SortKeyGenerator) -> None:
        assert generator.midpoint(None, None) == SortKey.default()
        assert generator.initial() == SortKey.default()

    def test_head_and_tail(self, generator: SortKeyGenerator) -> None:
        assert str(generator.midpoint(None, key("i"))) == "hzzz"
        assert str(generator.midpoint(key("i"), None)) == "i001"

    def test_interior(self, generator: SortKeyGenerator) -> None:
        assert str(generator.midpoint(key("3"), key("j"))) == "b"

    def test_unordered_bounds_rejected(self, generator: SortKeyGenerator) -> None:
        with pytest.raises(SortKeyContractViolation):
            generator.midpoint(key("j"), key("3"))

        with pytest.raises(SortKeyContractViolation):
            generator.midpoint(key("j"), key("j"))

    def test_allocation_logged(
        self, generator: SortKeyGenerator, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="sort_key.generator.key_generator"):
            generator.midpoint(key("3"), key("j"))

        assert "Allocated key b" in caplog.text


# =============================================================================
# ТЕСТЫ: key_for_index
# =============================================================================


class TestKeyForIndex:
    """Тесты key_for_index."""

    def test_empty_collection(self, generator: SortKeyGenerator) -> None:
        assert generator.key_for_index([], 0) == SortKey.default()

    @pytest.mark.parametrize("index", [0, 1, 2, 3])
    def test_insert_keeps_order(self, generator: SortKeyGenerator, index: int) -> None:
        keys = [key("3"), key("i"), key("x")]
        keys.insert(index, generator.key_for_index(keys, index))
        assert len(keys) == 4
        assert is_strictly_increasing(keys)

    @pytest.mark.parametrize("index", [-1, 4])
    def test_out_of_range(self, generator: SortKeyGenerator, index: int) -> None:
        with pytest.raises(IndexError):
            generator.key_for_index([key("3"), key("i"), key("x")], index)


# =============================================================================
# ТЕСТЫ: spread
# =============================================================================


class TestSpread:
    """Тесты spread."""

    def test_zero(self, generator: SortKeyGenerator) -> None:
        assert generator.spread(0) == []

    def test_negative_count(self, generator: SortKeyGenerator) -> None:
        with pytest.raises(ValueError):
            generator.spread(-1)

    def test_unbounded_three(self, generator: SortKeyGenerator) -> None:
        assert [str(k) for k in generator.spread(3)] == ["hzzz", "i", "i001"]

    @pytest.mark.parametrize("count", [1, 2, 7, 50, 200])
    def test_bounded(self, generator: SortKeyGenerator, count: int) -> None:
        low, high = key("3"), key("j")
        keys = generator.spread(count, low, high)

        assert len(keys) == count
        assert is_strictly_increasing([low, *keys, high])

    def test_keys_stay_short(self, generator: SortKeyGenerator) -> None:
        """Бисекция: 1000 ключей в (1, z) остаются короткими."""
        keys = generator.spread(1000, key("1"), key("z"))
        assert max(len(k) for k in keys) <= 5

    def test_half_open_gap(self, generator: SortKeyGenerator) -> None:
        keys = generator.spread(20, key("i"), None)
        assert is_strictly_increasing([key("i"), *keys])


class TestIsStrictlyIncreasing:
    """Тесты is_strictly_increasing."""

    def test_cases(self) -> None:
        assert is_strictly_increasing([])
        assert is_strictly_increasing([key("a")])
        assert is_strictly_increasing([key("a"), key("b")])
        assert not is_strictly_increasing([key("b"), key("a")])
        assert not is_strictly_increasing([key("a"), key("a")])

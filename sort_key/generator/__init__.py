"""Key Generator — выделение ключей для промежутков упорядоченной коллекции."""

from .key_generator import (
    GeneratorConfig,
    SortKeyGenerator,
    is_strictly_increasing,
)

__all__ = [
    "GeneratorConfig",
    "SortKeyGenerator",
    "is_strictly_increasing",
]

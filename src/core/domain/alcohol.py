"""
Alcohol — объёмная доля спирта (%ABV)
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar

from src.core.math.numerical_safeguards import quantize, validate_in_range


@total_ordering
@dataclass(frozen=True, eq=False)
class PercentAlcoholByVolume:
    """
    Объёмная доля спирта в процентах, диапазон [0, 100].

    Равенство и порядок по сотым долям процента.
    """

    value: float

    COMPARISON_DECIMALS: ClassVar[int] = 2

    def __post_init__(self) -> None:
        validate_in_range(self.value, "ABV", min_value=0.0, max_value=100.0)
        object.__setattr__(self, "value", float(self.value))

    def _comparable(self) -> int:
        return quantize(self.value, self.COMPARISON_DECIMALS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PercentAlcoholByVolume):
            return NotImplemented
        return self._comparable() == other._comparable()

    def __lt__(self, other: "PercentAlcoholByVolume") -> bool:
        if not isinstance(other, PercentAlcoholByVolume):
            return NotImplemented
        return self._comparable() < other._comparable()

    def __hash__(self) -> int:
        return hash(self._comparable())

    def __str__(self) -> str:
        return f"{self.value:.2f}% ABV"

"""
Potential Alcohol — потенциальный %ABV по концентрации сахара

Линейная модель (коэффициент Warcollier):

    %ABV = 0.06 × сахар (g/L)     (≈ 16.67 g/L сахара на 1 %ABV)

Предполагается полное сбраживание сахара, объём спирта при 20 °C.
"""

from typing import TYPE_CHECKING, Final

from src.core.domain.alcohol import PercentAlcoholByVolume
from src.core.domain.gravity import SpecificGravity
from src.core.domain.measures import MassConcentration
from src.core.errors import MalformedQuantityError

if TYPE_CHECKING:
    from src.substance.apple_juice import AppleJuice


WARCOLLIER_FACTOR: Final[float] = 0.06


def potential_abv_value(sugar_grams_per_liter: float) -> float:
    """%ABV по сахару в g/L (float, без валидации диапазона)."""
    return WARCOLLIER_FACTOR * sugar_grams_per_liter


class PotentialAlcoholCalculator:
    """Прямая и обратная модель сахар ↔ %ABV. Stateless."""

    def potential_alcohol(self, sugar_concentration: MassConcentration) -> PercentAlcoholByVolume:
        """
        Потенциальный %ABV при сбраживании всего сахара.

        Raises:
            MalformedQuantityError: Если sugar_concentration отсутствует
            OutOfSupportedRangeError: Если результат > 100 %ABV

        Examples:
            >>> calc = PotentialAlcoholCalculator()
            >>> round(calc.potential_alcohol(MassConcentration.from_grams_per_liter(100)).value, 2)
            6.0
        """
        if not isinstance(sugar_concentration, MassConcentration):
            raise MalformedQuantityError("Sugar concentration is required to determine potential alcohol")
        return PercentAlcoholByVolume(potential_abv_value(sugar_concentration.grams_per_liter))

    def sugar_concentration(self, target_abv: PercentAlcoholByVolume) -> MassConcentration:
        """
        Концентрация сахара, нужная для достижения target_abv.

        Raises:
            MalformedQuantityError: Если target_abv отсутствует
        """
        if not isinstance(target_abv, PercentAlcoholByVolume):
            raise MalformedQuantityError("Target ABV is required to determine sugar concentration")
        return MassConcentration.from_grams_per_liter(target_abv.value / WARCOLLIER_FACTOR)


class JuicePotentialAlcohol:
    """
    Потенциальный %ABV яблочного сока заданного сорта.

    Минимум и максимум соответствуют сахаристости ±2σ от средней
    по профилю сорта.
    """

    def __init__(self, apple_juice: "AppleJuice"):
        if apple_juice is None:
            raise MalformedQuantityError("Properties of the apple juice are required by this calculator")
        self.apple_juice = apple_juice

    def minimum(self, specific_gravity: SpecificGravity) -> PercentAlcoholByVolume:
        profile = self.apple_juice.sugar_concentration_profile()
        return self._abv(profile.minimum_sugar_concentration(specific_gravity))

    def average(self, specific_gravity: SpecificGravity) -> PercentAlcoholByVolume:
        profile = self.apple_juice.sugar_concentration_profile()
        return self._abv(profile.average_sugar_concentration(specific_gravity))

    def maximum(self, specific_gravity: SpecificGravity) -> PercentAlcoholByVolume:
        profile = self.apple_juice.sugar_concentration_profile()
        return self._abv(profile.maximum_sugar_concentration(specific_gravity))

    @staticmethod
    def _abv(sugar: MassConcentration) -> PercentAlcoholByVolume:
        return PercentAlcoholByVolume(potential_abv_value(sugar.grams_per_liter))

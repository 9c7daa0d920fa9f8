"""
Apple Juice — свойства яблочного сока, нужные для построения AqueousSolution

Сорт сока описывается двумя характеристиками:
- профиль сахаристости: коэффициент c и σ такие, что
  сахар (g/L) ≈ c × (SG − 1), минимум/максимум при c ∓ 2σ
- концентрация всех сухих веществ как функция SG

Таблицы региональных сортов в проект не входят; GenericAppleJuice
задаёт усреднённый сок.
"""

from typing import Final, Protocol

from pydantic import BaseModel, Field

from src.calculate.brix import BrixCalculator
from src.core.domain.gravity import SpecificGravity
from src.core.domain.measures import MassConcentration, Volume
from src.core.errors import MalformedQuantityError
from src.substance.solution import AqueousSolution
from src.substance.water import WATER_DENSITY_AT_20_C


# =============================================================================
# SUGAR CONCENTRATION PROFILE
# =============================================================================


class SugarConcentrationProfile(BaseModel):
    """
    Профиль сахаристости сорта сока.

    Immutable модель (frozen=True). NaN, Inf и отрицательные значения
    отклоняются с ValidationError.

    При SG < 1 сахаристость принимается равной нулю.
    """

    average_coefficient: float = Field(
        ..., ge=0, allow_inf_nan=False, description="g/L сахара на единицу (SG − 1)"
    )
    standard_deviation: float = Field(
        ..., ge=0, allow_inf_nan=False, description="σ коэффициента по выборке сока"
    )

    model_config = {"frozen": True}

    def average_sugar_concentration(self, specific_gravity: SpecificGravity) -> MassConcentration:
        return self._sugar(self.average_coefficient, specific_gravity)

    def minimum_sugar_concentration(self, specific_gravity: SpecificGravity) -> MassConcentration:
        """Сахаристость на 2σ ниже средней."""
        return self._sugar(self.average_coefficient - 2 * self.standard_deviation, specific_gravity)

    def maximum_sugar_concentration(self, specific_gravity: SpecificGravity) -> MassConcentration:
        """Сахаристость на 2σ выше средней."""
        return self._sugar(self.average_coefficient + 2 * self.standard_deviation, specific_gravity)

    @staticmethod
    def _sugar(coefficient: float, specific_gravity: SpecificGravity) -> MassConcentration:
        if not isinstance(specific_gravity, SpecificGravity):
            raise MalformedQuantityError("Specific gravity is required to determine sugar concentration")
        return MassConcentration.from_grams_per_liter(
            max(0.0, coefficient * (specific_gravity.value - 1.0))
        )


# =============================================================================
# APPLE JUICE
# =============================================================================


class AppleJuice(Protocol):
    """Интерфейс сорта яблочного сока."""

    def sugar_concentration_profile(self) -> SugarConcentrationProfile:
        ...

    def total_solids_concentration(self, specific_gravity: SpecificGravity) -> MassConcentration:
        ...


GENERIC_SUGAR_COEFFICIENT: Final[float] = 2130.0
GENERIC_SUGAR_STANDARD_DEVIATION: Final[float] = 120.0


class GenericAppleJuice:
    """
    Усреднённый яблочный сок.

    Сахар: 2130 × (SG − 1) g/L, σ = 120.
    Сухие вещества: SG × ρw(20 °C) × °Bx / 100.
    """

    def __init__(self) -> None:
        self._profile = SugarConcentrationProfile(
            average_coefficient=GENERIC_SUGAR_COEFFICIENT,
            standard_deviation=GENERIC_SUGAR_STANDARD_DEVIATION,
        )
        self._brix_calculator = BrixCalculator()

    def sugar_concentration_profile(self) -> SugarConcentrationProfile:
        return self._profile

    def total_solids_concentration(self, specific_gravity: SpecificGravity) -> MassConcentration:
        """
        Концентрация всех сухих веществ (сахар + SFDE).

        Raises:
            MalformedQuantityError: Если specific_gravity отсутствует
        """
        if not isinstance(specific_gravity, SpecificGravity):
            raise MalformedQuantityError("Specific gravity is required to determine total solids")

        brix = self._brix_calculator.brix_from_specific_gravity(specific_gravity).value
        solution_density = specific_gravity.value * WATER_DENSITY_AT_20_C.grams_per_liter
        return MassConcentration.from_grams_per_liter(solution_density * brix / 100.0)


def sample_solution(
    apple_juice: AppleJuice, specific_gravity: SpecificGravity, volume: Volume
) -> AqueousSolution:
    """
    AqueousSolution для образца сока с измеренной SG.

    Сахар берётся как средний по профилю сорта.

    Args:
        apple_juice: Сорт сока
        specific_gravity: Измеренная SG
        volume: Объём образца

    Returns:
        Снимок раствора, готовый для ChaptalizationCalculator
    """
    profile = apple_juice.sugar_concentration_profile()
    return AqueousSolution(
        specific_gravity=specific_gravity,
        solids=apple_juice.total_solids_concentration(specific_gravity),
        sugar=profile.average_sugar_concentration(specific_gravity),
        volume=volume,
    )

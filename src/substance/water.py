"""
Water — плотность чистой воды при стандартном давлении

Кусочная полиномиальная регрессия по температуре в °C:

    ρ(T) = 999.85 + 0.0531·T − 0.0075·T² + 0.00004·T³ − 0.0000001·T⁴

Выше 50 °C вычитается поправка (полином от x = T − 50),
выше 70 °C добавляется вторая поправка (полином от y = T − 70).

Точность: ±0.1 g/L на [0, 100] °C, ±0.05 g/L на [10, 20] °C.
Вне диапазона жидкой воды → OutOfSupportedRangeError.
"""

from typing import Final

from src.core.domain.measures import MassConcentration, Temperature
from src.core.domain.units import TemperatureUnit
from src.core.errors import MalformedQuantityError, OutOfSupportedRangeError


# =============================================================================
# CONSTANTS
# =============================================================================

STANDARD_FREEZING_POINT: Final[Temperature] = Temperature(0.0, TemperatureUnit.CELSIUS)
STANDARD_BOILING_POINT: Final[Temperature] = Temperature(100.0, TemperatureUnit.CELSIUS)

# Границы поправочных полиномов, °C
FIRST_CORRECTION_THRESHOLD_C: Final[float] = 50.0
SECOND_CORRECTION_THRESHOLD_C: Final[float] = 70.0


# =============================================================================
# DENSITY MODEL
# =============================================================================


def water_density(temperature: Temperature) -> MassConcentration:
    """
    Плотность чистой воды при заданной температуре.

    Args:
        temperature: Температура воды, [0, 100] °C включительно
            (сравнение по сотым долям °C)

    Returns:
        Плотность как MassConcentration (g/L)

    Raises:
        MalformedQuantityError: Если temperature не Temperature
        OutOfSupportedRangeError: Если вода при этой температуре не жидкая

    Examples:
        >>> round(water_density(Temperature(20, TemperatureUnit.CELSIUS)).grams_per_liter, 3)
        998.216
    """
    if not isinstance(temperature, Temperature):
        raise MalformedQuantityError("Temperature is required to determine the density of water")

    if temperature.is_cooler_than(STANDARD_FREEZING_POINT) or temperature.is_warmer_than(
        STANDARD_BOILING_POINT
    ):
        raise OutOfSupportedRangeError(
            "water temperature (°C)",
            temperature.value_in(TemperatureUnit.CELSIUS),
            min_value=0.0,
            max_value=100.0,
            detail="pure water at standard pressure is not a liquid at this temperature",
        )

    celsius = temperature.value_in(TemperatureUnit.CELSIUS)
    return MassConcentration.from_grams_per_liter(_density_grams_per_liter(celsius))


def _density_grams_per_liter(t: float) -> float:
    density = 999.85 + 0.0531 * t - 0.0075 * t**2 + 0.00004 * t**3 - 0.0000001 * t**4

    if t > FIRST_CORRECTION_THRESHOLD_C:
        x = t - FIRST_CORRECTION_THRESHOLD_C
        density -= 0.0299 + 0.0267 * x - 0.0019 * x**2 + 0.00009 * x**3 - 0.0000009 * x**4

    if t > SECOND_CORRECTION_THRESHOLD_C:
        y = t - SECOND_CORRECTION_THRESHOLD_C
        density += 0.0463 + 0.0024 * y + 0.0006 * y**2

    return density


# Опорная плотность для пересчёта SG → масса раствора
WATER_DENSITY_AT_20_C: Final[MassConcentration] = water_density(
    Temperature(20.0, TemperatureUnit.CELSIUS)
)

"""
Units — закрытые перечисления единиц измерения по размерностям

Поддерживаются только единицы, реально нужные для расчётов сидра:
- температура: Celsius, Fahrenheit
- масса: g, kg, oz, lb
- объём: mL, L, US gal

Коэффициенты массы и объёма точные (NIST Handbook 44).
ЗАПРЕЩЕНО смешивать размерности: конверсия только через
src.core.domain.conversions.lookup.
"""

from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class TemperatureUnit(str, Enum):
    """Единицы температуры"""

    CELSIUS = "°C"
    FAHRENHEIT = "°F"


class MassUnit(str, Enum):
    """Единицы массы"""

    GRAMS = "g"
    KILOGRAMS = "kg"
    OUNCES = "oz"
    POUNDS = "lb"


class VolumeUnit(str, Enum):
    """Единицы объёма"""

    MILLILITERS = "mL"
    LITERS = "L"
    US_GALLONS = "gal"


# =============================================================================
# ТОЧНЫЕ КОЭФФИЦИЕНТЫ (NIST Handbook 44)
# =============================================================================

GRAMS_PER_KILOGRAM: Final[float] = 1000.0
GRAMS_PER_POUND: Final[float] = 453.59237
GRAMS_PER_OUNCE: Final[float] = 28.349523125
KILOGRAMS_PER_POUND: Final[float] = 0.45359237
KILOGRAMS_PER_OUNCE: Final[float] = 0.028349523125
OUNCES_PER_POUND: Final[float] = 16.0

MILLILITERS_PER_LITER: Final[float] = 1000.0
MILLILITERS_PER_US_GALLON: Final[float] = 3785.411784
LITERS_PER_US_GALLON: Final[float] = 3.785411784

# Аффинное преобразование °C → °F: F = C * 9/5 + 32
FAHRENHEIT_PER_CELSIUS_DEGREE: Final[float] = 9.0 / 5.0
FAHRENHEIT_AT_ZERO_CELSIUS: Final[float] = 32.0

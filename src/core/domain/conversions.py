"""
Conversions — таблицы функций пересчёта между единицами одной размерности

Каждая пара единиц (включая тождественную) разрешается в
ConversionFunction с операцией apply(value) и закэшированной обратной.

Все функции пересчёта являются частными случаями аффинного преобразования:
    y = (x - input_offset) * numerator / denominator + output_offset

Для массы и объёма смещения нулевые (чистый коэффициент),
для температуры используется стандартная формула °C ↔ °F.

Таблицы строятся один раз при импорте и неизменяемы (MappingProxyType).
"""

from dataclasses import dataclass
from functools import cached_property
from types import MappingProxyType
from typing import Final, Mapping

from src.core.domain.units import (
    FAHRENHEIT_AT_ZERO_CELSIUS,
    GRAMS_PER_KILOGRAM,
    GRAMS_PER_OUNCE,
    GRAMS_PER_POUND,
    KILOGRAMS_PER_OUNCE,
    KILOGRAMS_PER_POUND,
    LITERS_PER_US_GALLON,
    MILLILITERS_PER_LITER,
    MILLILITERS_PER_US_GALLON,
    OUNCES_PER_POUND,
    MassUnit,
    TemperatureUnit,
    VolumeUnit,
)
from src.core.errors import MalformedQuantityError

Unit = TemperatureUnit | MassUnit | VolumeUnit


# =============================================================================
# CONVERSION FUNCTION
# =============================================================================


@dataclass(frozen=True)
class ConversionFunction:
    """
    Функция пересчёта значения из одной единицы в другую.

    y = (x - input_offset) * numerator / denominator + output_offset

    Обратная функция вычисляется один раз и кэшируется;
    обратная к обратной равна исходной.
    """

    numerator: float
    denominator: float = 1.0
    input_offset: float = 0.0
    output_offset: float = 0.0

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise MalformedQuantityError("Conversion denominator cannot be zero (divide by zero)")

    def apply(self, value: float) -> float:
        """Пересчёт значения."""
        return (value - self.input_offset) * self.numerator / self.denominator + self.output_offset

    @cached_property
    def inverse(self) -> "ConversionFunction":
        """Обратная функция пересчёта."""
        if self.numerator == 0:
            return ConversionFunction(0.0)
        return ConversionFunction(
            numerator=self.denominator,
            denominator=self.numerator,
            input_offset=self.output_offset,
            output_offset=self.input_offset,
        )


IDENTITY: Final[ConversionFunction] = ConversionFunction(1.0)


# =============================================================================
# ТАБЛИЦЫ
# =============================================================================

_KILOGRAMS_TO_GRAMS = ConversionFunction(GRAMS_PER_KILOGRAM)
_POUNDS_TO_KILOGRAMS = ConversionFunction(KILOGRAMS_PER_POUND)
_POUNDS_TO_GRAMS = ConversionFunction(GRAMS_PER_POUND)
_POUNDS_TO_OUNCES = ConversionFunction(OUNCES_PER_POUND)
_OUNCES_TO_KILOGRAMS = ConversionFunction(KILOGRAMS_PER_OUNCE)
_OUNCES_TO_GRAMS = ConversionFunction(GRAMS_PER_OUNCE)

MASS_CONVERSIONS: Final[Mapping[tuple[MassUnit, MassUnit], ConversionFunction]] = MappingProxyType(
    {
        (MassUnit.KILOGRAMS, MassUnit.KILOGRAMS): IDENTITY,
        (MassUnit.KILOGRAMS, MassUnit.GRAMS): _KILOGRAMS_TO_GRAMS,
        (MassUnit.KILOGRAMS, MassUnit.POUNDS): _POUNDS_TO_KILOGRAMS.inverse,
        (MassUnit.KILOGRAMS, MassUnit.OUNCES): _OUNCES_TO_KILOGRAMS.inverse,
        (MassUnit.GRAMS, MassUnit.KILOGRAMS): _KILOGRAMS_TO_GRAMS.inverse,
        (MassUnit.GRAMS, MassUnit.GRAMS): IDENTITY,
        (MassUnit.GRAMS, MassUnit.POUNDS): _POUNDS_TO_GRAMS.inverse,
        (MassUnit.GRAMS, MassUnit.OUNCES): _OUNCES_TO_GRAMS.inverse,
        (MassUnit.POUNDS, MassUnit.KILOGRAMS): _POUNDS_TO_KILOGRAMS,
        (MassUnit.POUNDS, MassUnit.GRAMS): _POUNDS_TO_GRAMS,
        (MassUnit.POUNDS, MassUnit.POUNDS): IDENTITY,
        (MassUnit.POUNDS, MassUnit.OUNCES): _POUNDS_TO_OUNCES,
        (MassUnit.OUNCES, MassUnit.KILOGRAMS): _OUNCES_TO_KILOGRAMS,
        (MassUnit.OUNCES, MassUnit.GRAMS): _OUNCES_TO_GRAMS,
        (MassUnit.OUNCES, MassUnit.POUNDS): _POUNDS_TO_OUNCES.inverse,
        (MassUnit.OUNCES, MassUnit.OUNCES): IDENTITY,
    }
)

_LITERS_TO_MILLILITERS = ConversionFunction(MILLILITERS_PER_LITER)
_US_GALLONS_TO_LITERS = ConversionFunction(LITERS_PER_US_GALLON)
_US_GALLONS_TO_MILLILITERS = ConversionFunction(MILLILITERS_PER_US_GALLON)

VOLUME_CONVERSIONS: Final[Mapping[tuple[VolumeUnit, VolumeUnit], ConversionFunction]] = MappingProxyType(
    {
        (VolumeUnit.LITERS, VolumeUnit.LITERS): IDENTITY,
        (VolumeUnit.LITERS, VolumeUnit.MILLILITERS): _LITERS_TO_MILLILITERS,
        (VolumeUnit.LITERS, VolumeUnit.US_GALLONS): _US_GALLONS_TO_LITERS.inverse,
        (VolumeUnit.MILLILITERS, VolumeUnit.LITERS): _LITERS_TO_MILLILITERS.inverse,
        (VolumeUnit.MILLILITERS, VolumeUnit.MILLILITERS): IDENTITY,
        (VolumeUnit.MILLILITERS, VolumeUnit.US_GALLONS): _US_GALLONS_TO_MILLILITERS.inverse,
        (VolumeUnit.US_GALLONS, VolumeUnit.LITERS): _US_GALLONS_TO_LITERS,
        (VolumeUnit.US_GALLONS, VolumeUnit.MILLILITERS): _US_GALLONS_TO_MILLILITERS,
        (VolumeUnit.US_GALLONS, VolumeUnit.US_GALLONS): IDENTITY,
    }
)

# F = (C - 0) * 9 / 5 + 32
_CELSIUS_TO_FAHRENHEIT = ConversionFunction(
    numerator=9.0,
    denominator=5.0,
    output_offset=FAHRENHEIT_AT_ZERO_CELSIUS,
)

TEMPERATURE_CONVERSIONS: Final[
    Mapping[tuple[TemperatureUnit, TemperatureUnit], ConversionFunction]
] = MappingProxyType(
    {
        (TemperatureUnit.CELSIUS, TemperatureUnit.CELSIUS): IDENTITY,
        (TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT): _CELSIUS_TO_FAHRENHEIT,
        (TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS): _CELSIUS_TO_FAHRENHEIT.inverse,
        (TemperatureUnit.FAHRENHEIT, TemperatureUnit.FAHRENHEIT): IDENTITY,
    }
)

_TABLES: Final[dict[type, Mapping]] = {
    TemperatureUnit: TEMPERATURE_CONVERSIONS,
    MassUnit: MASS_CONVERSIONS,
    VolumeUnit: VOLUME_CONVERSIONS,
}


# =============================================================================
# LOOKUP
# =============================================================================


def lookup(from_unit: Unit, to_unit: Unit) -> ConversionFunction:
    """
    Поиск функции пересчёта между двумя единицами одной размерности.

    Args:
        from_unit: Исходная единица
        to_unit: Целевая единица

    Returns:
        ConversionFunction для пары (from_unit, to_unit)

    Raises:
        MalformedQuantityError: Если единица отсутствует (None), не является
            поддерживаемой единицей, или единицы разных размерностей

    Examples:
        >>> lookup(MassUnit.POUNDS, MassUnit.OUNCES).apply(1.0)
        16.0
        >>> lookup(TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT).apply(100.0)
        212.0
    """
    if from_unit is None or to_unit is None:
        raise MalformedQuantityError("Conversion to or from absent units is not possible")

    table = _TABLES.get(type(from_unit))
    if table is None:
        raise MalformedQuantityError(f"Unsupported unit of measurement: {from_unit!r}")

    function = table.get((from_unit, to_unit)) if isinstance(to_unit, type(from_unit)) else None
    if function is None:
        raise MalformedQuantityError(
            f"Cannot convert {from_unit!r} to {to_unit!r}: different dimensions"
        )

    return function

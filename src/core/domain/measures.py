"""
Measures — неизменяемые физические величины с единицами измерения

Temperature, Mass, Volume, MassConcentration.

Каждая величина:
- хранит значение в опорной единице (°C, g, mL, g/L)
- валидируется при создании (MalformedQuantityError)
- пересчитывается только через таблицы conversions.lookup
- сравнивается по округлённой проекции, а не по сырому float

Разрешение сравнения (шаг квантования):
- Temperature: 0.01 °C
- Mass: 0.01 g
- Volume: 1 µL (0.001 mL)
- MassConcentration: 0.01 g/L
"""

from dataclasses import dataclass, field
from functools import total_ordering
from typing import ClassVar, Final

from src.core.domain.conversions import lookup
from src.core.domain.units import MassUnit, TemperatureUnit, VolumeUnit
from src.core.errors import MalformedQuantityError
from src.core.math.numerical_safeguards import (
    quantize,
    validate_finite,
    validate_non_negative,
)


def _require_unit(unit: object, unit_type: type, quantity_name: str) -> None:
    if not isinstance(unit, unit_type):
        raise MalformedQuantityError(
            f"{quantity_name} cannot be represented without units of measurement, got {unit!r}"
        )


# =============================================================================
# TEMPERATURE
# =============================================================================


@total_ordering
@dataclass(frozen=True, eq=False)
class Temperature:
    """
    Температура.

    Опорная единица: градус Цельсия. Пересчёт °C ↔ °F без потерь
    в пределах точности float. Равенство и порядок по сотым долям °C.
    """

    value: float
    unit: TemperatureUnit
    _celsius: float = field(init=False, repr=False)

    COMPARISON_DECIMALS: ClassVar[int] = 2

    def __post_init__(self) -> None:
        _require_unit(self.unit, TemperatureUnit, "Temperature")
        validate_finite(self.value, "temperature")
        object.__setattr__(
            self, "_celsius", lookup(self.unit, TemperatureUnit.CELSIUS).apply(float(self.value))
        )

    def value_in(self, unit: TemperatureUnit) -> float:
        """Значение температуры в заданных единицах."""
        _require_unit(unit, TemperatureUnit, "Temperature")
        return lookup(TemperatureUnit.CELSIUS, unit).apply(self._celsius)

    def is_warmer_than(self, other: "Temperature") -> bool:
        return self > other

    def is_cooler_than(self, other: "Temperature") -> bool:
        return self < other

    def _comparable(self) -> int:
        return quantize(self._celsius, self.COMPARISON_DECIMALS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self._comparable() == other._comparable()

    def __lt__(self, other: "Temperature") -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self._comparable() < other._comparable()

    def __hash__(self) -> int:
        return hash(self._comparable())

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit.value}"


# =============================================================================
# MASS
# =============================================================================


@total_ordering
@dataclass(frozen=True, eq=False)
class Mass:
    """
    Масса (неотрицательная).

    Опорная единица: грамм. Равенство и порядок по сотым долям грамма.
    """

    value: float
    unit: MassUnit
    _grams: float = field(init=False, repr=False)

    COMPARISON_DECIMALS: ClassVar[int] = 2

    def __post_init__(self) -> None:
        _require_unit(self.unit, MassUnit, "Mass")
        validate_non_negative(self.value, "mass")
        object.__setattr__(self, "_grams", lookup(self.unit, MassUnit.GRAMS).apply(float(self.value)))

    def value_in(self, unit: MassUnit) -> float:
        """Значение массы в заданных единицах."""
        _require_unit(unit, MassUnit, "Mass")
        return lookup(MassUnit.GRAMS, unit).apply(self._grams)

    def _comparable(self) -> int:
        return quantize(self._grams, self.COMPARISON_DECIMALS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mass):
            return NotImplemented
        return self._comparable() == other._comparable()

    def __lt__(self, other: "Mass") -> bool:
        if not isinstance(other, Mass):
            return NotImplemented
        return self._comparable() < other._comparable()

    def __hash__(self) -> int:
        return hash(self._comparable())

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit.value}"


# =============================================================================
# VOLUME
# =============================================================================


@total_ordering
@dataclass(frozen=True, eq=False)
class Volume:
    """
    Объём (неотрицательный).

    Опорная единица: миллилитр. Равенство и порядок по микролитрам.
    """

    value: float
    unit: VolumeUnit
    _milliliters: float = field(init=False, repr=False)

    COMPARISON_DECIMALS: ClassVar[int] = 3

    def __post_init__(self) -> None:
        _require_unit(self.unit, VolumeUnit, "Volume")
        validate_non_negative(self.value, "volume")
        object.__setattr__(
            self,
            "_milliliters",
            lookup(self.unit, VolumeUnit.MILLILITERS).apply(float(self.value)),
        )

    def value_in(self, unit: VolumeUnit) -> float:
        """Значение объёма в заданных единицах."""
        _require_unit(unit, VolumeUnit, "Volume")
        return lookup(VolumeUnit.MILLILITERS, unit).apply(self._milliliters)

    def is_zero(self) -> bool:
        """True если объём меньше разрешения сравнения (1 µL)."""
        return self._comparable() == 0

    def _comparable(self) -> int:
        return quantize(self._milliliters, self.COMPARISON_DECIMALS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Volume):
            return NotImplemented
        return self._comparable() == other._comparable()

    def __lt__(self, other: "Volume") -> bool:
        if not isinstance(other, Volume):
            return NotImplemented
        return self._comparable() < other._comparable()

    def __hash__(self) -> int:
        return hash(self._comparable())

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit.value}"


ONE_LITER: Final[Volume] = Volume(1.0, VolumeUnit.LITERS)


# =============================================================================
# MASS CONCENTRATION
# =============================================================================


@total_ordering
@dataclass(frozen=True, eq=False)
class MassConcentration:
    """
    Массовая концентрация (масса на объём).

    Плотность чистого вещества — тоже MassConcentration (масса вещества
    на его собственный объём), отдельного типа Density нет.

    Равенство и порядок по сотым долям g/L.
    """

    mass: Mass
    volume: Volume

    COMPARISON_DECIMALS: ClassVar[int] = 2

    def __post_init__(self) -> None:
        if not isinstance(self.mass, Mass) or not isinstance(self.volume, Volume):
            raise MalformedQuantityError(
                "MassConcentration requires knowledge of both mass and volume"
            )
        if self.volume.is_zero():
            raise MalformedQuantityError(
                "MassConcentration is undefined when the mass does not occupy any volume"
            )

    @classmethod
    def from_grams_per_liter(cls, grams_per_liter: float) -> "MassConcentration":
        """
        Концентрация, заданная в g/L.

        Raises:
            MalformedQuantityError: Если значение отрицательное или NaN/Inf
        """
        return cls(Mass(grams_per_liter, MassUnit.GRAMS), ONE_LITER)

    def value_in(self, mass_unit: MassUnit, volume_unit: VolumeUnit) -> float:
        """Значение концентрации в заданных единицах массы и объёма."""
        return self.mass.value_in(mass_unit) / self.volume.value_in(volume_unit)

    @property
    def grams_per_liter(self) -> float:
        return self.value_in(MassUnit.GRAMS, VolumeUnit.LITERS)

    def _comparable(self) -> int:
        return quantize(self.grams_per_liter, self.COMPARISON_DECIMALS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MassConcentration):
            return NotImplemented
        return self._comparable() == other._comparable()

    def __lt__(self, other: "MassConcentration") -> bool:
        if not isinstance(other, MassConcentration):
            return NotImplemented
        return self._comparable() < other._comparable()

    def __hash__(self) -> int:
        return hash(self._comparable())

    def __str__(self) -> str:
        return f"{self.grams_per_liter:.2f} g/L"

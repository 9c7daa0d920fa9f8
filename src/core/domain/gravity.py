"""
Gravity — безразмерные показатели плотности и сухих веществ

- SpecificGravity: отношение плотности раствора к плотности воды,
  поддерживаемый диапазон [0.990, 1.100] включительно
- Brix: °Bx для раствора сахарозы в воде, диапазон [0, 25]
- DegreesBrix: °Bx как процент сухих веществ по массе (сок), >= 0;
  верхняя граница задаётся калькулятором, а не типом

Выход за физический диапазон → OutOfSupportedRangeError,
NaN/Inf → MalformedQuantityError.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar, Final

from src.core.domain.measures import Temperature
from src.core.errors import MalformedQuantityError
from src.core.math.numerical_safeguards import quantize, validate_in_range


# =============================================================================
# SPECIFIC GRAVITY
# =============================================================================

SPECIFIC_GRAVITY_MIN: Final[float] = 0.990
SPECIFIC_GRAVITY_MAX: Final[float] = 1.100


@total_ordering
@dataclass(frozen=True, eq=False)
class SpecificGravity:
    """
    Удельная плотность (SG).

    Равенство и порядок по миллионным долям (ниже разрешения
    любого ареометра).
    """

    value: float

    MINIMUM_SUPPORTED_VALUE: ClassVar[float] = SPECIFIC_GRAVITY_MIN
    MAXIMUM_SUPPORTED_VALUE: ClassVar[float] = SPECIFIC_GRAVITY_MAX
    COMPARISON_DECIMALS: ClassVar[int] = 6

    def __post_init__(self) -> None:
        _validate_specific_gravity(self.value, "specific gravity")
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def from_hydrometer(
        cls,
        measured_value: float,
        measured_temperature: Temperature,
        calibration_temperature: Temperature,
    ) -> "SpecificGravity":
        """
        SG с поправкой на температуру пробы.

        Ареометр откалиброван при calibration_temperature; показание снято
        при measured_temperature. Поправочный коэффициент равен отношению
        плотностей воды:

            SG = measured_value * ρw(calibration) / ρw(measured)

        Args:
            measured_value: Сырое показание ареометра
            measured_temperature: Температура пробы
            calibration_temperature: Температура калибровки ареометра

        Returns:
            Скорректированная SpecificGravity

        Raises:
            MalformedQuantityError: Если показание NaN/Inf или температура отсутствует
            OutOfSupportedRangeError: Если показание или скорректированное
                значение вне [0.990, 1.100], либо температура вне
                диапазона жидкой воды
        """
        from src.substance.water import water_density

        _validate_specific_gravity(measured_value, "measured specific gravity")

        if not isinstance(measured_temperature, Temperature) or not isinstance(
            calibration_temperature, Temperature
        ):
            raise MalformedQuantityError(
                "Both measured and calibration temperatures are required for hydrometer correction"
            )

        correction = (
            water_density(calibration_temperature).grams_per_liter
            / water_density(measured_temperature).grams_per_liter
        )
        corrected = correction * measured_value

        _validate_specific_gravity(corrected, "corrected specific gravity")
        return cls(corrected)

    def _comparable(self) -> int:
        return quantize(self.value, self.COMPARISON_DECIMALS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpecificGravity):
            return NotImplemented
        return self._comparable() == other._comparable()

    def __lt__(self, other: "SpecificGravity") -> bool:
        if not isinstance(other, SpecificGravity):
            return NotImplemented
        return self._comparable() < other._comparable()

    def __hash__(self) -> int:
        return hash(self._comparable())

    def __str__(self) -> str:
        return f"{self.value:.3f}"


def _validate_specific_gravity(value: float, name: str) -> None:
    validate_in_range(
        value,
        name,
        min_value=SPECIFIC_GRAVITY_MIN,
        max_value=SPECIFIC_GRAVITY_MAX,
        detail="specific gravities between 0.990 and 1.100, inclusive, are supported",
    )


# =============================================================================
# BRIX (сахароза в воде)
# =============================================================================

BRIX_MAX: Final[float] = 25.0


@total_ordering
@dataclass(frozen=True, eq=False)
class Brix:
    """
    °Bx раствора сахарозы в воде.

    Значения выше 25 °Bx в сидроделии практически не встречаются
    и не поддерживаются.
    """

    value: float

    COMPARISON_DECIMALS: ClassVar[int] = 5

    def __post_init__(self) -> None:
        validate_in_range(
            self.value,
            "Brix",
            min_value=0.0,
            max_value=BRIX_MAX,
            detail="Brix values in excess of 25 are not supported for sugar water",
        )
        object.__setattr__(self, "value", float(self.value))

    def _comparable(self) -> int:
        return quantize(self.value, self.COMPARISON_DECIMALS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Brix):
            return NotImplemented
        return self._comparable() == other._comparable()

    def __lt__(self, other: "Brix") -> bool:
        if not isinstance(other, Brix):
            return NotImplemented
        return self._comparable() < other._comparable()

    def __hash__(self) -> int:
        return hash(self._comparable())


# =============================================================================
# DEGREES BRIX (сухие вещества сока)
# =============================================================================


@total_ordering
@dataclass(frozen=True, eq=False)
class DegreesBrix:
    """
    °Bx как процент сухих веществ по массе.

    Для сока это не строго сахароза: кислоты, пектины и прочие
    растворённые вещества тоже входят в показание.
    """

    value: float

    COMPARISON_DECIMALS: ClassVar[int] = 5

    def __post_init__(self) -> None:
        validate_in_range(self.value, "degrees Brix", min_value=0.0)
        object.__setattr__(self, "value", float(self.value))

    def _comparable(self) -> int:
        return quantize(self.value, self.COMPARISON_DECIMALS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DegreesBrix):
            return NotImplemented
        return self._comparable() == other._comparable()

    def __lt__(self, other: "DegreesBrix") -> bool:
        if not isinstance(other, DegreesBrix):
            return NotImplemented
        return self._comparable() < other._comparable()

    def __hash__(self) -> int:
        return hash(self._comparable())

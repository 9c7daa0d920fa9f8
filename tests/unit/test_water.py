"""
Тесты модели плотности чистой воды

Проверяет:
1. Точность регрессии по табличным значениям (±0.1 g/L, ±0.05 g/L на 10–20 °C)
2. Отказ вне диапазона жидкой воды
3. Монотонность, кроме точек стыка поправок (50 °C, 70 °C)
"""

import pytest

from src.core.domain.measures import Temperature
from src.core.domain.units import TemperatureUnit
from src.core.errors import MalformedQuantityError, OutOfSupportedRangeError
from src.substance.water import (
    STANDARD_BOILING_POINT,
    STANDARD_FREEZING_POINT,
    WATER_DENSITY_AT_20_C,
    water_density,
)


def density_at(celsius: float) -> float:
    return water_density(Temperature(celsius, TemperatureUnit.CELSIUS)).grams_per_liter


class TestConstants:
    """Константы воды"""

    def test_freezing_point(self) -> None:
        assert STANDARD_FREEZING_POINT.value_in(TemperatureUnit.CELSIUS) == 0.0

    def test_boiling_point(self) -> None:
        assert STANDARD_BOILING_POINT.value_in(TemperatureUnit.CELSIUS) == 100.0

    def test_density_at_20_c(self) -> None:
        assert WATER_DENSITY_AT_20_C.grams_per_liter == pytest.approx(998.2, abs=0.05)


class TestDensityAccuracy:
    """Табличные значения плотности"""

    @pytest.mark.parametrize(
        "celsius, expected",
        [
            (0.0, 999.8),
            (4.0, 1000.0),
            (5.0, 1000.0),
            (25.0, 997.0),
            (30.0, 995.7),
            (35.0, 994.1),
            (40.0, 992.2),
            (45.0, 990.2),
            (50.0, 988.1),
            (60.0, 983.2),
            (70.0, 977.8),
            (80.0, 971.8),
            (90.0, 965.3),
            (100.0, 958.6),
        ],
    )
    def test_within_tenth_gram_per_liter(self, celsius: float, expected: float) -> None:
        assert density_at(celsius) == pytest.approx(expected, abs=0.1)

    @pytest.mark.parametrize("celsius, expected", [(10.0, 999.7), (20.0, 998.2)])
    def test_within_twentieth_gram_per_liter_between_10_and_20(
        self, celsius: float, expected: float
    ) -> None:
        assert density_at(celsius) == pytest.approx(expected, abs=0.05)

    def test_fahrenheit_input(self) -> None:
        density = water_density(Temperature(60.0, TemperatureUnit.FAHRENHEIT))
        assert density.grams_per_liter == pytest.approx(999.0, abs=0.05)


class TestDensityDomain:
    """Диапазон жидкой воды"""

    def test_ice(self) -> None:
        with pytest.raises(OutOfSupportedRangeError, match="not a liquid"):
            water_density(Temperature(31.99, TemperatureUnit.FAHRENHEIT))

    def test_vapor(self) -> None:
        with pytest.raises(OutOfSupportedRangeError, match="not a liquid"):
            water_density(Temperature(212.01, TemperatureUnit.FAHRENHEIT))

    def test_bounds_inclusive(self) -> None:
        water_density(STANDARD_FREEZING_POINT)
        water_density(STANDARD_BOILING_POINT)

    def test_missing_temperature(self) -> None:
        with pytest.raises(MalformedQuantityError):
            water_density(None)


class TestDensityShape:
    """Форма кривой плотности"""

    def test_decreasing_above_4_c(self) -> None:
        """Плотность строго убывает с ростом температуры от 4 °C"""
        densities = [density_at(float(t)) for t in range(4, 101)]
        assert all(a > b for a, b in zip(densities, densities[1:]))

    def test_increasing_from_freezing_to_maximum(self) -> None:
        assert density_at(0.0) < density_at(3.0)

    def test_step_at_first_breakpoint(self) -> None:
        """Выше 50 °C поправка вычитается скачком"""
        assert density_at(50.001) < density_at(50.0)

    def test_step_at_second_breakpoint(self) -> None:
        """Выше 70 °C вторая поправка даёт локальный рост"""
        assert density_at(70.001) > density_at(70.0)

"""
Тесты AqueousSolution и моделей яблочного сока

Проверяет:
1. Неизменяемость и валидацию типов полей (pydantic)
2. Sugar-free dry extract
3. Профиль сахаристости сорта и GenericAppleJuice
4. Сборку образца сока sample_solution
"""

import math

import pytest
from pydantic import ValidationError

from src.core.domain.gravity import SpecificGravity
from src.core.domain.measures import ONE_LITER, MassConcentration, Volume
from src.core.domain.units import VolumeUnit
from src.core.errors import MalformedQuantityError
from src.substance.apple_juice import GenericAppleJuice, SugarConcentrationProfile, sample_solution
from src.substance.solution import AqueousSolution


def juice_solution(sugar: float = 85.2, solids: float = 103.7) -> AqueousSolution:
    return AqueousSolution(
        specific_gravity=SpecificGravity(1.040),
        solids=MassConcentration.from_grams_per_liter(solids),
        sugar=MassConcentration.from_grams_per_liter(sugar),
        volume=ONE_LITER,
    )


class TestAqueousSolution:
    """Тесты AqueousSolution"""

    def test_fields(self) -> None:
        solution = juice_solution()
        assert solution.specific_gravity == SpecificGravity(1.040)
        assert solution.sugar.grams_per_liter == pytest.approx(85.2)
        assert solution.volume == ONE_LITER

    def test_sugar_free_dry_extract(self) -> None:
        assert juice_solution().sugar_free_dry_extract.grams_per_liter == pytest.approx(18.5)

    def test_frozen(self) -> None:
        solution = juice_solution()
        with pytest.raises(ValidationError):
            solution.volume = Volume(2.0, VolumeUnit.LITERS)

    def test_missing_field(self) -> None:
        with pytest.raises(ValidationError):
            AqueousSolution(
                specific_gravity=SpecificGravity(1.040),
                solids=MassConcentration.from_grams_per_liter(103.7),
                sugar=MassConcentration.from_grams_per_liter(85.2),
            )

    def test_wrong_field_type(self) -> None:
        with pytest.raises(ValidationError):
            AqueousSolution(
                specific_gravity=1.040,
                solids=MassConcentration.from_grams_per_liter(103.7),
                sugar=MassConcentration.from_grams_per_liter(85.2),
                volume=ONE_LITER,
            )

    def test_equal_within_tolerance(self) -> None:
        assert juice_solution(sugar=85.2) == juice_solution(sugar=85.204)

    def test_sugar_above_solids_not_rejected(self) -> None:
        """sugar <= solids конструктор не проверяет"""
        solution = juice_solution(sugar=120.0, solids=100.0)
        with pytest.raises(MalformedQuantityError):
            solution.sugar_free_dry_extract


class TestSugarConcentrationProfile:
    """Профиль сахаристости"""

    def test_average_minimum_maximum(self) -> None:
        profile = SugarConcentrationProfile(average_coefficient=2130, standard_deviation=120)
        sg = SpecificGravity(1.040)
        assert profile.average_sugar_concentration(sg).grams_per_liter == pytest.approx(85.2)
        assert profile.minimum_sugar_concentration(sg).grams_per_liter == pytest.approx(75.6)
        assert profile.maximum_sugar_concentration(sg).grams_per_liter == pytest.approx(94.8)

    def test_below_water_is_sugar_free(self) -> None:
        profile = SugarConcentrationProfile(average_coefficient=2130, standard_deviation=120)
        assert profile.average_sugar_concentration(SpecificGravity(0.995)).grams_per_liter == 0.0

    def test_minimum_never_negative(self) -> None:
        profile = SugarConcentrationProfile(average_coefficient=100, standard_deviation=120)
        assert profile.minimum_sugar_concentration(SpecificGravity(1.050)).grams_per_liter == 0.0

    @pytest.mark.parametrize(
        "coefficient, deviation",
        [(-1.0, 120.0), (2130.0, -1.0), (math.nan, 120.0), (2130.0, math.inf)],
    )
    def test_invalid_profile(self, coefficient: float, deviation: float) -> None:
        with pytest.raises(ValidationError):
            SugarConcentrationProfile(average_coefficient=coefficient, standard_deviation=deviation)

    def test_value_equality(self) -> None:
        a = SugarConcentrationProfile(average_coefficient=2130, standard_deviation=120)
        b = SugarConcentrationProfile(average_coefficient=2130.0, standard_deviation=120.0)
        assert a == b

    def test_missing_specific_gravity(self) -> None:
        profile = SugarConcentrationProfile(average_coefficient=2130, standard_deviation=120)
        with pytest.raises(MalformedQuantityError):
            profile.average_sugar_concentration(None)


class TestGenericAppleJuice:
    """Усреднённый яблочный сок"""

    def test_profile(self) -> None:
        profile = GenericAppleJuice().sugar_concentration_profile()
        assert profile.average_coefficient == 2130.0
        assert profile.standard_deviation == 120.0

    def test_total_solids(self) -> None:
        solids = GenericAppleJuice().total_solids_concentration(SpecificGravity(1.040))
        assert solids.grams_per_liter == pytest.approx(103.7, abs=0.1)

    def test_total_solids_of_water(self) -> None:
        solids = GenericAppleJuice().total_solids_concentration(SpecificGravity(1.0))
        assert solids.grams_per_liter == 0.0

    def test_missing_specific_gravity(self) -> None:
        with pytest.raises(MalformedQuantityError):
            GenericAppleJuice().total_solids_concentration(None)

    def test_sample_solution(self) -> None:
        volume = Volume(20.0, VolumeUnit.LITERS)
        solution = sample_solution(GenericAppleJuice(), SpecificGravity(1.040), volume)
        assert solution.sugar.grams_per_liter == pytest.approx(85.2)
        assert solution.solids.grams_per_liter == pytest.approx(103.7, abs=0.1)
        assert solution.volume == volume
        assert solution.sugar <= solution.solids

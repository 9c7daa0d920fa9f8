"""
Тесты Numerical Safeguards и иерархии ошибок

Проверяет:
1. Квантование round half away from zero
2. Отказ NaN/Inf как некорректного ввода
3. Различимость MalformedQuantityError и OutOfSupportedRangeError
"""

import math

import pytest

from src.core.errors import MalformedQuantityError, OutOfSupportedRangeError, QuantityError
from src.core.math.numerical_safeguards import (
    is_valid_float,
    quantize,
    validate_finite,
    validate_in_range,
    validate_non_negative,
)


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite(self) -> None:
        assert is_valid_float(1.0)
        assert is_valid_float(-0.0)

    def test_nan_and_inf(self) -> None:
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


class TestQuantize:
    """Тесты квантования"""

    def test_basic(self) -> None:
        assert quantize(1.234, 2) == 123
        assert quantize(1.236, 2) == 124

    def test_half_away_from_zero(self) -> None:
        assert quantize(2.5, 0) == 3
        assert quantize(-2.5, 0) == -3

    def test_noise_below_resolution_absorbed(self) -> None:
        """Шум float ниже разрешения не меняет проекцию"""
        assert quantize(0.1 + 0.2, 2) == quantize(0.3, 2)

    def test_zero_decimals(self) -> None:
        assert quantize(998.4, 0) == 998


class TestValidateFinite:
    """Тесты для validate_finite"""

    def test_accepts_numbers(self) -> None:
        validate_finite(0, "x")
        validate_finite(-12.5, "x")

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite(self, value) -> None:
        with pytest.raises(MalformedQuantityError):
            validate_finite(value, "x")

    def test_nan_and_inf_messages_differ(self) -> None:
        """Отказ идёт через is_valid_float, но сообщение различает NaN и Inf"""
        with pytest.raises(MalformedQuantityError, match="got NaN"):
            validate_finite(math.nan, "x")
        with pytest.raises(MalformedQuantityError, match="must be finite"):
            validate_finite(-math.inf, "x")

    @pytest.mark.parametrize("value", [None, "1.0", True])
    def test_rejects_non_numbers(self, value) -> None:
        with pytest.raises(MalformedQuantityError, match="must be a number"):
            validate_finite(value, "x")


class TestValidateNonNegative:
    """Тесты для validate_non_negative"""

    def test_zero_allowed(self) -> None:
        validate_non_negative(0.0, "mass")

    def test_negative_rejected(self) -> None:
        with pytest.raises(MalformedQuantityError, match="cannot be less than zero"):
            validate_non_negative(-0.001, "mass")


class TestValidateInRange:
    """Тесты для validate_in_range"""

    def test_bounds_inclusive(self) -> None:
        validate_in_range(0.990, "sg", min_value=0.990, max_value=1.100)
        validate_in_range(1.100, "sg", min_value=0.990, max_value=1.100)

    def test_above_max(self) -> None:
        with pytest.raises(OutOfSupportedRangeError) as exc_info:
            validate_in_range(1.2, "sg", min_value=0.990, max_value=1.100)
        error = exc_info.value
        assert error.value == 1.2
        assert error.min_value == 0.990
        assert error.max_value == 1.100
        assert "1.2" in str(error)
        assert "[0.99, 1.1]" in str(error)

    def test_unbounded_side_in_message(self) -> None:
        with pytest.raises(OutOfSupportedRangeError, match=r"\[0, \+inf\]"):
            validate_in_range(-1.0, "degrees Brix", min_value=0.0)

    def test_detail_appended(self) -> None:
        with pytest.raises(OutOfSupportedRangeError, match="too sweet"):
            validate_in_range(30.0, "Brix", max_value=25.0, detail="too sweet")

    def test_nan_is_malformed_not_out_of_range(self) -> None:
        with pytest.raises(MalformedQuantityError):
            validate_in_range(math.nan, "sg", min_value=0.990, max_value=1.100)


class TestErrorHierarchy:
    """Два вида ошибок различимы"""

    def test_common_base(self) -> None:
        assert issubclass(MalformedQuantityError, QuantityError)
        assert issubclass(OutOfSupportedRangeError, QuantityError)

    def test_out_of_range_is_not_value_error(self) -> None:
        """Отказ по физическому диапазону не ловится как ValueError"""
        assert issubclass(MalformedQuantityError, ValueError)
        assert not issubclass(OutOfSupportedRangeError, ValueError)

"""
Numerical Safeguards — проверки и квантование для физических величин

Модуль обеспечивает:
- Проверку float на NaN/Inf
- Квантование значения на сетку 10^-n для сравнения без шума float
- Валидацию с разделением ошибок: некорректный ввод vs вне диапазона

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не проходят валидацию (MalformedQuantityError)
2. Квантование детерминировано: round half away from zero
3. Нарушение физического диапазона → OutOfSupportedRangeError,
   а не MalformedQuantityError
"""

import math

from src.core.errors import MalformedQuantityError, OutOfSupportedRangeError


# =============================================================================
# NaN/Inf
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# КВАНТОВАНИЕ
# =============================================================================


def quantize(value: float, decimals: int) -> int:
    """
    Проекция значения на целочисленную сетку шага 10^-decimals.

    Используется для сравнения величин с точностью измерения:
    две величины, отличающиеся только шумом float ниже разрешения,
    получают одинаковую проекцию.
    Округление half away from zero (как math.floor(x + 0.5) для x >= 0).

    Args:
        value: Значение в опорных единицах
        decimals: Количество значащих десятичных знаков

    Returns:
        Целое число шагов

    Examples:
        >>> quantize(1.234, 2)
        123
        >>> quantize(0.125, 2)
        13
        >>> quantize(-0.125, 2)
        -13
    """
    scaled = value * (10 ** decimals)

    if scaled >= 0:
        return math.floor(scaled + 0.5)
    return math.ceil(scaled - 0.5)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение является конечным числом.

    Raises:
        MalformedQuantityError: Если value NaN, Inf или не число
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedQuantityError(f"{name} must be a number, got {value!r}")

    if not is_valid_float(value):
        if math.isnan(value):
            raise MalformedQuantityError(f"{name} must be represented by a number, got NaN")
        raise MalformedQuantityError(f"{name} must be finite, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение конечное и неотрицательное.

    Raises:
        MalformedQuantityError: Если value < 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value < 0:
        raise MalformedQuantityError(f"{name} cannot be less than zero, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
    detail: str = "",
) -> None:
    """
    Валидация, что конечное значение лежит в физическом диапазоне (включительно).

    Args:
        value: Проверяемое значение
        name: Имя величины (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)
        detail: Пояснение к диапазону (optional)

    Raises:
        MalformedQuantityError: Если value NaN/Inf
        OutOfSupportedRangeError: Если value вне [min_value, max_value]
    """
    validate_finite(value, name)

    if (min_value is not None and value < min_value) or (
        max_value is not None and value > max_value
    ):
        raise OutOfSupportedRangeError(name, value, min_value, max_value, detail)

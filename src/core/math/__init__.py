"""
Core math modules

Численные примитивы: проверка float, квантование для сравнения, валидация диапазонов.
"""

from src.core.math.numerical_safeguards import (
    is_valid_float,
    quantize,
    validate_finite,
    validate_in_range,
    validate_non_negative,
)

__all__ = [
    "is_valid_float",
    "quantize",
    "validate_finite",
    "validate_in_range",
    "validate_non_negative",
]

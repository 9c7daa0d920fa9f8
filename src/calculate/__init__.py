"""
Calculators — эмпирические регрессии и решатель шаптализации.
"""

from src.calculate.brix import (
    MAXIMUM_BRIX_FOR_SG_REGRESSION,
    MAXIMUM_SG_FOR_BRIX_REGRESSION,
    MINIMUM_SG_FOR_BRIX_REGRESSION,
    BrixCalculator,
    brix_regression,
    specific_gravity_regression,
)
from src.calculate.potential_alcohol import (
    WARCOLLIER_FACTOR,
    JuicePotentialAlcohol,
    PotentialAlcoholCalculator,
    potential_abv_value,
)
from src.calculate.chaptalization import (
    MAXIMUM_TARGET_ABV,
    MINIMUM_SPECIFIC_GRAVITY,
    ChaptalizationCalculator,
    ChaptalizationConfig,
    ChaptalizationResult,
    bisection_iteration_bound,
)

__all__ = [
    # Brix
    "MAXIMUM_BRIX_FOR_SG_REGRESSION",
    "MAXIMUM_SG_FOR_BRIX_REGRESSION",
    "MINIMUM_SG_FOR_BRIX_REGRESSION",
    "BrixCalculator",
    "brix_regression",
    "specific_gravity_regression",
    # Potential alcohol
    "WARCOLLIER_FACTOR",
    "PotentialAlcoholCalculator",
    "JuicePotentialAlcohol",
    "potential_abv_value",
    # Chaptalization
    "MINIMUM_SPECIFIC_GRAVITY",
    "MAXIMUM_TARGET_ABV",
    "ChaptalizationConfig",
    "ChaptalizationResult",
    "ChaptalizationCalculator",
    "bisection_iteration_bound",
]

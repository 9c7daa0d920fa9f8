"""
Substances — модели веществ: вода, водные растворы, сахарная вода, яблочный сок.
"""

from src.substance.water import (
    STANDARD_BOILING_POINT,
    STANDARD_FREEZING_POINT,
    WATER_DENSITY_AT_20_C,
    water_density,
)
from src.substance.solution import AqueousSolution
from src.substance.sugar_water import SugarWater
from src.substance.apple_juice import (
    AppleJuice,
    GenericAppleJuice,
    SugarConcentrationProfile,
    sample_solution,
)

__all__ = [
    # Water
    "STANDARD_FREEZING_POINT",
    "STANDARD_BOILING_POINT",
    "WATER_DENSITY_AT_20_C",
    "water_density",
    # Solutions
    "AqueousSolution",
    "SugarWater",
    # Apple juice
    "AppleJuice",
    "GenericAppleJuice",
    "SugarConcentrationProfile",
    "sample_solution",
]

"""
Domain value objects.

Физические величины с единицами измерения: Temperature, Mass, Volume,
MassConcentration, SpecificGravity, Brix, DegreesBrix, PercentAlcoholByVolume.
"""

from src.core.domain.units import MassUnit, TemperatureUnit, VolumeUnit
from src.core.domain.conversions import ConversionFunction, lookup
from src.core.domain.measures import (
    ONE_LITER,
    Mass,
    MassConcentration,
    Temperature,
    Volume,
)
from src.core.domain.gravity import Brix, DegreesBrix, SpecificGravity
from src.core.domain.alcohol import PercentAlcoholByVolume

__all__ = [
    # Units
    "TemperatureUnit",
    "MassUnit",
    "VolumeUnit",
    # Conversions
    "ConversionFunction",
    "lookup",
    # Measures
    "Temperature",
    "Mass",
    "Volume",
    "ONE_LITER",
    "MassConcentration",
    # Gravity
    "SpecificGravity",
    "Brix",
    "DegreesBrix",
    # Alcohol
    "PercentAlcoholByVolume",
]

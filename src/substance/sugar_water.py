"""
SugarWater — раствор сахарозы в чистой воде
"""

import logging

from src.calculate.brix import brix_regression
from src.core.domain.gravity import Brix, SpecificGravity
from src.core.errors import MalformedQuantityError

logger = logging.getLogger(__name__)


class SugarWater:
    """Сахарная вода: °Bx по SG, диапазон результата [0, 25]."""

    def brix(self, specific_gravity: SpecificGravity) -> Brix:
        """
        °Bx сахарной воды по SG.

        Отрицательные значения регрессии означают отсутствие сахара
        и приводятся к 0.

        Raises:
            MalformedQuantityError: Если specific_gravity отсутствует
            OutOfSupportedRangeError: Если результат > 25 °Bx
        """
        if not isinstance(specific_gravity, SpecificGravity):
            raise MalformedQuantityError("Specific gravity must be known to determine Brix")

        value = brix_regression(specific_gravity.value)
        if value < 0:
            logger.debug("Negative sugar water Brix %.6f forced to zero", value)
            value = 0.0
        return Brix(value)

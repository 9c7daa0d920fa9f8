"""
Brix ↔ Specific Gravity — две независимые эмпирические регрессии

1. SG из °Bx (кубическая регрессия по таблице NBS C440):
       SG = 1 + (3.8687·b + 0.013048·b² + 0.0000487·b³) / 1000
   Точность ±0.03 °SG (°SG = 1000·(SG − 1)) до 44 °Bx.

2. °Bx из SG (кубическая регрессия):
       b = ((182.4601·sg − 775.6821)·sg + 1262.7794)·sg − 669.5622
   Точность ±0.003 °Bx до 1.17875 SG (≈ 40 °Bx).

Регрессии НЕ являются взаимно обратными: round-trip сходится только
в пределах погрешности каждой из них.

°Bx здесь трактуется как доля всех сухих веществ по массе, а не только
сахарозы. Для яблочного сока это допустимое приближение, для произвольных
растворов сахаров — нет.
"""

import logging
from typing import Final

from src.core.domain.gravity import Brix, DegreesBrix, SpecificGravity
from src.core.errors import MalformedQuantityError, OutOfSupportedRangeError

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

MAXIMUM_BRIX_FOR_SG_REGRESSION: Final[float] = 44.0
MAXIMUM_SG_FOR_BRIX_REGRESSION: Final[float] = 1.17875

# Ниже этого SG регрессия даёт малые отрицательные °Bx
MINIMUM_SG_FOR_BRIX_REGRESSION: Final[float] = 1.0000185477666315


# =============================================================================
# REGRESSIONS (float)
# =============================================================================


def specific_gravity_regression(brix_value: float) -> float:
    """
    SG из °Bx без проверки диапазона SG.

    Используется решателем шаптализации, где промежуточные SG могут
    выходить за [0.990, 1.100].

    Raises:
        OutOfSupportedRangeError: Если brix_value > 44
    """
    if brix_value > MAXIMUM_BRIX_FOR_SG_REGRESSION:
        raise OutOfSupportedRangeError(
            "degrees Brix",
            brix_value,
            min_value=0.0,
            max_value=MAXIMUM_BRIX_FOR_SG_REGRESSION,
            detail="the specific gravity regression is not valid above 44°Bx",
        )
    b = brix_value
    return 1.0 + (3.8687 * b + 0.013048 * b**2 + 0.0000487 * b**3) / 1000.0


def brix_regression(sg_value: float) -> float:
    """°Bx из SG без ограничения снизу (может быть слегка отрицательным)."""
    return ((182.4601 * sg_value - 775.6821) * sg_value + 1262.7794) * sg_value - 669.5622


# =============================================================================
# CALCULATOR
# =============================================================================


class BrixCalculator:
    """
    Калькулятор пересчёта °Bx ↔ SG.

    Stateless: экземпляр можно разделять между потоками.
    """

    def specific_gravity_from_brix(self, degrees_brix: DegreesBrix | Brix) -> SpecificGravity:
        """
        SG раствора по °Bx.

        Args:
            degrees_brix: Доля сухих веществ по массе (DegreesBrix или Brix)

        Returns:
            SpecificGravity

        Raises:
            MalformedQuantityError: Если degrees_brix отсутствует
            OutOfSupportedRangeError: Если °Bx > 44 или результат вне
                диапазона SpecificGravity

        Examples:
            >>> BrixCalculator().specific_gravity_from_brix(DegreesBrix(0)).value
            1.0
        """
        if not isinstance(degrees_brix, (DegreesBrix, Brix)):
            raise MalformedQuantityError(
                "Specific gravity cannot be determined without knowledge of degrees Brix"
            )
        return SpecificGravity(specific_gravity_regression(degrees_brix.value))

    def brix_from_specific_gravity(self, specific_gravity: SpecificGravity) -> DegreesBrix:
        """
        °Bx раствора по SG.

        Ниже SG 1.0000185477666315 регрессия даёт отрицательные значения,
        физически бессмысленные: результат принудительно равен 0.

        Args:
            specific_gravity: Удельная плотность раствора

        Returns:
            DegreesBrix (>= 0)

        Raises:
            MalformedQuantityError: Если specific_gravity отсутствует
            OutOfSupportedRangeError: Если SG > 1.17875
        """
        if not isinstance(specific_gravity, SpecificGravity):
            raise MalformedQuantityError("Specific gravity must be known to determine degrees Brix")

        sg = specific_gravity.value
        if sg > MAXIMUM_SG_FOR_BRIX_REGRESSION:
            raise OutOfSupportedRangeError(
                "specific gravity",
                sg,
                max_value=MAXIMUM_SG_FOR_BRIX_REGRESSION,
                detail="the Brix regression is not valid above 1.17875",
            )
        if sg < MINIMUM_SG_FOR_BRIX_REGRESSION:
            logger.debug("Brix regression clamped to zero for SG %.6f", sg)
            return DegreesBrix(0.0)

        return DegreesBrix(brix_regression(sg))

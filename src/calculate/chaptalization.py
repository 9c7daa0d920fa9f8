"""
Chaptalization — сколько сахара добавить, чтобы получить целевой %ABV

Добавка сахара увеличивает массу раствора, а значит и его объём:
часть добавки «разбавляется» сама собой. Зависимость
«граммы сахара → потенциальный %ABV» поэтому нелинейна, и обратная
функция в замкнутом виде неизвестна. Решение ищется бисекцией по
симуляции баланса масс.

Баланс масс (на исходный литр, добавка a g):
    сахар_tot   = сахар + a
    solids_tot  = solids + a
    масса       = SG × ρw(20 °C) + a
    °Bx         = solids_tot / масса × 100
    SG'         = SG(°Bx)                       (регрессия Brix → SG)
    расширение  = масса / (SG' × ρw(20 °C))
    концентрации делятся на расширение, объём умножается на него

Границы поиска (g/L):
    low  = наивная оценка (сахар для цели − текущий сахар, без учёта объёма)
    high = 1.5 × наивная оценка
Расширение объёма всегда даёт ответ >= наивной оценки.

Сходимость: ширина интервала <= 0.01 g/L, число итераций
ограничено ⌈log2((high − low) / 0.01)⌉.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. SG исходного раствора < 1.035 → OutOfSupportedRangeError
2. Целевой %ABV > 15.0 → OutOfSupportedRangeError (без клиппинга)
3. Если потенциальный %ABV уже >= цели → ровно 0 g
4. Промежуточные SG внутри поиска могут превышать 1.100:
   симуляция работает на float и не строит SpecificGravity
"""

import logging
import math
from dataclasses import dataclass
from typing import Final, NamedTuple

from src.calculate.brix import specific_gravity_regression
from src.calculate.potential_alcohol import PotentialAlcoholCalculator, potential_abv_value
from src.core.domain.alcohol import PercentAlcoholByVolume
from src.core.domain.gravity import SpecificGravity
from src.core.domain.measures import Mass, MassConcentration, Volume
from src.core.domain.units import MassUnit, VolumeUnit
from src.core.errors import MalformedQuantityError, OutOfSupportedRangeError
from src.substance.solution import AqueousSolution
from src.substance.water import WATER_DENSITY_AT_20_C

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

MINIMUM_SPECIFIC_GRAVITY: Final[float] = 1.035
MAXIMUM_TARGET_ABV: Final[float] = 15.0

# Ширина интервала бисекции, при которой поиск останавливается (g/L)
CONVERGENCE_TOLERANCE_G_PER_L: Final[float] = 0.01

# high = multiplier × наивная оценка
UPPER_BOUND_MULTIPLIER: Final[float] = 1.5


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ChaptalizationConfig:
    """Конфигурация решателя шаптализации."""

    minimum_specific_gravity: float = MINIMUM_SPECIFIC_GRAVITY
    maximum_target_abv: float = MAXIMUM_TARGET_ABV
    convergence_tolerance_g_per_l: float = CONVERGENCE_TOLERANCE_G_PER_L
    upper_bound_multiplier: float = UPPER_BOUND_MULTIPLIER

    def __post_init__(self) -> None:
        if not self.convergence_tolerance_g_per_l > 0:
            raise ValueError(
                f"convergence_tolerance_g_per_l must be positive, got {self.convergence_tolerance_g_per_l}"
            )
        if not self.upper_bound_multiplier >= 1.0:
            raise ValueError(
                f"upper_bound_multiplier must be >= 1.0, got {self.upper_bound_multiplier}"
            )


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ChaptalizationResult:
    """Результат решателя шаптализации."""

    sugar_to_add: Mass  # Масса сахара на весь объём раствора
    addition_per_liter: MassConcentration  # Найденная добавка на исходный литр
    naive_addition_per_liter: MassConcentration  # Оценка без учёта роста объёма
    iterations: int  # Число шагов бисекции (0 для fast path)


class _SimulatedSolution(NamedTuple):
    specific_gravity: float
    solids_g_per_l: float
    sugar_g_per_l: float
    expansion: float  # Литров раствора на исходный литр


# =============================================================================
# CALCULATOR
# =============================================================================


class ChaptalizationCalculator:
    """
    Решатель шаптализации.

    Stateless: конфигурация неизменяема, экземпляр можно разделять.
    """

    def __init__(self, config: ChaptalizationConfig | None = None):
        """
        Args:
            config: конфигурация решателя (опционально, используется default)
        """
        self.config = config or ChaptalizationConfig()
        self._potential_alcohol = PotentialAlcoholCalculator()

    def sugar_to_add(self, solution: AqueousSolution, target_abv: PercentAlcoholByVolume) -> Mass:
        """
        Масса сахара, которую нужно добавить в раствор для target_abv.

        Args:
            solution: Исходный сок/сусло
            target_abv: Желаемый потенциальный %ABV

        Returns:
            Mass в граммах; 0 g если цель уже достигнута

        Raises:
            MalformedQuantityError: Если аргументы отсутствуют
            OutOfSupportedRangeError: Если SG < 1.035 или target_abv > 15.0
        """
        return self.plan(solution, target_abv).sugar_to_add

    def plan(
        self, solution: AqueousSolution, target_abv: PercentAlcoholByVolume
    ) -> ChaptalizationResult:
        """
        Полный результат поиска: масса, добавка на литр, наивная оценка, итерации.

        Raises:
            MalformedQuantityError: Если аргументы отсутствуют
            OutOfSupportedRangeError: Если SG < 1.035 или target_abv > 15.0
        """
        if not isinstance(solution, AqueousSolution) or not isinstance(
            target_abv, PercentAlcoholByVolume
        ):
            raise MalformedQuantityError("Both a solution and a target ABV are required")

        sg = solution.specific_gravity.value
        if sg < self.config.minimum_specific_gravity:
            raise OutOfSupportedRangeError(
                "specific gravity",
                sg,
                min_value=self.config.minimum_specific_gravity,
                detail="chaptalization is not supported for juices with a lower original gravity",
            )
        if target_abv.value > self.config.maximum_target_abv:
            raise OutOfSupportedRangeError(
                "target ABV",
                target_abv.value,
                max_value=self.config.maximum_target_abv,
                detail="chaptalization is not supported for higher target potential alcohol",
            )

        current_abv = self._potential_alcohol.potential_alcohol(solution.sugar)
        if current_abv >= target_abv:
            logger.debug("Potential ABV %s already meets target %s", current_abv, target_abv)
            return ChaptalizationResult(
                sugar_to_add=Mass(0.0, MassUnit.GRAMS),
                addition_per_liter=MassConcentration.from_grams_per_liter(0.0),
                naive_addition_per_liter=MassConcentration.from_grams_per_liter(0.0),
                iterations=0,
            )

        current_sugar = solution.sugar.grams_per_liter
        target_sugar = self._potential_alcohol.sugar_concentration(target_abv).grams_per_liter

        naive = target_sugar - current_sugar
        low = naive
        high = self.config.upper_bound_multiplier * naive
        logger.debug("Chaptalization bounds: low=%.4f g/L high=%.4f g/L", low, high)

        iterations = 0
        while high - low > self.config.convergence_tolerance_g_per_l:
            mid = (low + high) / 2
            amended = self._simulate_addition(solution, mid)
            if potential_abv_value(amended.sugar_g_per_l) < target_abv.value:
                low = mid
            else:
                high = mid
            iterations += 1

        per_liter = (low + high) / 2
        liters = solution.volume.value_in(VolumeUnit.LITERS)
        logger.debug(
            "Chaptalization converged in %d iterations: %.4f g/L (naive %.4f g/L)",
            iterations,
            per_liter,
            naive,
        )

        return ChaptalizationResult(
            sugar_to_add=Mass(per_liter * liters, MassUnit.GRAMS),
            addition_per_liter=MassConcentration.from_grams_per_liter(per_liter),
            naive_addition_per_liter=MassConcentration.from_grams_per_liter(naive),
            iterations=iterations,
        )

    def apply_addition(self, solution: AqueousSolution, sugar_added: Mass) -> AqueousSolution:
        """
        Новое состояние раствора после добавки сахара.

        sugar_added задаёт массу на весь объём раствора; баланс масс считается
        на исходный литр (sugar_added / объём в литрах). Добавка, равная
        нулю на сетке Mass (меньше 0.005 g), возвращает исходный раствор:
        баланс масс не выполняется. Чуть выше этого порога SG пересчитывается
        через регрессию сухих веществ и может оказаться на миллионные доли
        ниже исходной, так как регрессии °Bx → SG и SG → °Bx не совпадают
        точно.

        Args:
            solution: Исходный раствор
            sugar_added: Масса добавленного сахара

        Returns:
            Новый AqueousSolution (исходный не изменяется)

        Raises:
            MalformedQuantityError: Если аргументы отсутствуют или сахар
                добавляется в нулевой объём
            OutOfSupportedRangeError: Если итоговый °Bx > 44 или итоговая
                SG вне [0.990, 1.100]
        """
        if not isinstance(solution, AqueousSolution) or not isinstance(sugar_added, Mass):
            raise MalformedQuantityError("Both a solution and a sugar mass are required")

        if sugar_added == Mass(0.0, MassUnit.GRAMS):
            return solution
        if solution.volume.is_zero():
            raise MalformedQuantityError("Sugar cannot be added to a solution that occupies no volume")

        liters = solution.volume.value_in(VolumeUnit.LITERS)
        per_liter = sugar_added.value_in(MassUnit.GRAMS) / liters

        amended = self._simulate_addition(solution, per_liter)
        return AqueousSolution(
            specific_gravity=SpecificGravity(amended.specific_gravity),
            solids=MassConcentration.from_grams_per_liter(amended.solids_g_per_l),
            sugar=MassConcentration.from_grams_per_liter(amended.sugar_g_per_l),
            volume=Volume(liters * amended.expansion, VolumeUnit.LITERS),
        )

    @staticmethod
    def _simulate_addition(solution: AqueousSolution, added_g_per_l: float) -> _SimulatedSolution:
        water_density = WATER_DENSITY_AT_20_C.grams_per_liter

        total_sugar = solution.sugar.grams_per_liter + added_g_per_l
        total_solids = solution.solids.grams_per_liter + added_g_per_l
        total_mass = solution.specific_gravity.value * water_density + added_g_per_l

        brix = total_solids / total_mass * 100
        specific_gravity = specific_gravity_regression(brix)
        expansion = total_mass / (specific_gravity * water_density)

        return _SimulatedSolution(
            specific_gravity=specific_gravity,
            solids_g_per_l=total_solids / expansion,
            sugar_g_per_l=total_sugar / expansion,
            expansion=expansion,
        )


def bisection_iteration_bound(naive_g_per_l: float, config: ChaptalizationConfig | None = None) -> int:
    """
    Верхняя граница числа итераций бисекции для заданной наивной оценки.

    ⌈log2((multiplier − 1) × naive / tolerance)⌉, но не меньше 0.
    """
    config = config or ChaptalizationConfig()
    width = (config.upper_bound_multiplier - 1.0) * naive_g_per_l
    if width <= config.convergence_tolerance_g_per_l:
        return 0
    return math.ceil(math.log2(width / config.convergence_tolerance_g_per_l))

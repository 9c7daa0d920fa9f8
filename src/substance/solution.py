"""
AqueousSolution — снимок состояния сока/сусла

Неизменяемая агрегатная модель: SG, концентрация сухих веществ,
концентрация сахара, объём. Каждое изменение (например, добавка сахара)
создаёт новый экземпляр.
"""

from pydantic import BaseModel, Field

from src.core.domain.gravity import SpecificGravity
from src.core.domain.measures import MassConcentration, Volume


class AqueousSolution(BaseModel):
    """
    Водный раствор: сок, сусло или сахарная вода.

    Immutable модель (frozen=True). Поля — доменные value objects
    (frozen dataclasses): готовые экземпляры принимаются без повторной
    валидации, отсутствующее или чужое значение даёт ValidationError.

    ВНИМАНИЕ: соотношение sugar <= solids конструктор НЕ проверяет,
    за него отвечает вызывающий код. При sugar > solids расчёт
    sugar_free_dry_extract завершится MalformedQuantityError.
    """

    specific_gravity: SpecificGravity = Field(..., description="Удельная плотность раствора")
    solids: MassConcentration = Field(..., description="Концентрация всех сухих веществ")
    sugar: MassConcentration = Field(..., description="Концентрация сахара")
    volume: Volume = Field(..., description="Объём раствора")

    model_config = {"frozen": True}

    @property
    def sugar_free_dry_extract(self) -> MassConcentration:
        """
        Сухие вещества без сахара (SFDE): solids − sugar.

        Raises:
            MalformedQuantityError: Если sugar > solids
        """
        return MassConcentration.from_grams_per_liter(
            self.solids.grams_per_liter - self.sugar.grams_per_liter
        )

"""
Errors — два различимых вида ошибок для физических величин

1. MalformedQuantityError — некорректный ввод (нет единиц, NaN, Inf,
   отрицательная масса/объём). Всегда ошибка вызывающего кода.
2. OutOfSupportedRangeError — значение корректно, но вне области,
   для которой построена эмпирическая модель.

OutOfSupportedRangeError намеренно НЕ является ValueError:
`except ValueError` не перехватывает отказ по физическому диапазону.
"""


class QuantityError(Exception):
    """Базовый класс ошибок физических величин."""


class MalformedQuantityError(QuantityError, ValueError):
    """
    Некорректный ввод: отсутствуют единицы, NaN, бесконечность,
    отрицательная величина там, где допустимы только неотрицательные.
    """


class OutOfSupportedRangeError(QuantityError):
    """
    Значение корректно сформировано, но лежит вне поддерживаемого
    физического диапазона модели.

    Attributes:
        name: Имя величины (для сообщения)
        value: Отклонённое значение
        min_value: Нижняя граница диапазона (None если не ограничена)
        max_value: Верхняя граница диапазона (None если не ограничена)
    """

    def __init__(
        self,
        name: str,
        value: float,
        min_value: float | None = None,
        max_value: float | None = None,
        detail: str = "",
    ):
        self.name = name
        self.value = value
        self.min_value = min_value
        self.max_value = max_value

        message = (
            f"{name} {value!r} is outside the supported range "
            f"[{_format_bound(min_value, '-inf')}, {_format_bound(max_value, '+inf')}]"
        )
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


def _format_bound(value: float | None, unbounded: str) -> str:
    return unbounded if value is None else f"{value:g}"

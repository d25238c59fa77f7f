"""
Temporal — Типы значений времени

Календарный движок — библиотека whenever:
- Instant: точка на шкале UTC без часового пояса
- ZonedDateTime: момент времени, наблюдаемый в IANA часовом поясе
- Date: календарная дата (год, месяц, день) без времени суток
- Time: время суток без даты

Все типы immutable; любые "изменения" возвращают новое значение.
"""

from typing import TypeAlias

from pydantic import BaseModel, Field
from whenever import Date, Instant, Time, ZonedDateTime

# Вход большинства функций: абсолютный момент или момент с часовым поясом
TemporalInput: TypeAlias = Instant | ZonedDateTime

# Вход функций, которые дополнительно принимают календарную дату + часовой пояс
DateLikeInput: TypeAlias = Instant | ZonedDateTime | Date


class Interval(BaseModel):
    """
    Интервал времени [start, end] (обе границы включительно).

    Порядок границ не проверяется: для start > end функции each_*
    возвращают пустой список, is_within_interval — False.
    """

    start: Instant | ZonedDateTime = Field(..., description="Начало интервала")
    end: Instant | ZonedDateTime = Field(..., description="Конец интервала")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


__all__ = [
    "Date",
    "DateLikeInput",
    "Instant",
    "Interval",
    "TemporalInput",
    "Time",
    "ZonedDateTime",
]

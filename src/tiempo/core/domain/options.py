"""
Options — Модели параметров функций

Immutable Pydantic модели (frozen=True), которые передаются последним
аргументом в функции форматирования, округления и сравнения расстояний.
Значение None вместо модели равносильно модели со значениями по умолчанию.
"""

from typing import ClassVar, Literal

from pydantic import BaseModel, Field, field_validator

from tiempo.core.config import (
    DEFAULT_LOCALE,
    HOUR_ROUNDING_INCREMENTS,
    MINUTE_ROUNDING_INCREMENTS,
    SECOND_ROUNDING_INCREMENTS,
)

RoundingMode = Literal["round", "ceil", "floor"]
IsoMode = Literal["utc", "offset"]
Iso9075Mode = Literal["utc", "local"]
Iso9075Representation = Literal["complete", "date", "time"]
DistanceUnit = Literal["second", "minute", "hour", "day", "week", "month", "year"]
DistanceStyle = Literal["long", "short", "narrow"]


# =============================================================================
# FORMATTING
# =============================================================================


class FormatPlainDateOptions(BaseModel):
    """Параметры format_plain_date."""

    locale: str = Field(DEFAULT_LOCALE, min_length=1, description="BCP 47 локаль (например, 'es-ES')")

    model_config = {"frozen": True}


class FormatOptions(BaseModel):
    """
    Параметры format.

    Если задан time_zone, значение сначала переводится в этот часовой пояс
    через Instant; иначе Instant -> UTC, ZonedDateTime без изменений.
    """

    locale: str = Field(DEFAULT_LOCALE, min_length=1, description="BCP 47 локаль")
    time_zone: str | None = Field(None, description="IANA часовой пояс для вывода")

    model_config = {"frozen": True}


class SimpleFormatOptions(BaseModel):
    """
    Параметры simple_format.

    year:
    - auto: год выводится, только если он не совпадает с текущим
    - always / never: всегда / никогда
    """

    locale: str = Field(DEFAULT_LOCALE, min_length=1, description="BCP 47 локаль")
    time: Literal["12h", "24h"] | None = Field(None, description="Добавить время суток")
    time_zone: str | None = Field(None, description="IANA часовой пояс (для Instant по умолчанию UTC)")
    year: Literal["auto", "always", "never"] = Field("auto", description="Политика вывода года")

    model_config = {"frozen": True}


class ToIsoOptions(BaseModel):
    """Параметры to_iso: 'utc' -> ...Z, 'offset' -> ...±hh:mm."""

    mode: IsoMode = "utc"

    model_config = {"frozen": True}


class ToIso9075Options(BaseModel):
    """Параметры to_iso9075."""

    mode: Iso9075Mode = Field("utc", description="'local' использует часы ZonedDateTime")
    representation: Iso9075Representation = Field("complete", description="Дата, время или оба")

    model_config = {"frozen": True}


class IntlFormatDistanceOptions(BaseModel):
    """
    Параметры intl_format_distance.

    unit=None — единица выбирается автоматически по величине разницы.
    """

    unit: DistanceUnit | None = Field(None, description="Принудительная единица")
    locale: str = Field(DEFAULT_LOCALE, min_length=1, description="BCP 47 локаль")
    style: DistanceStyle = Field("long", description="Длина подписи единицы")

    model_config = {"frozen": True}


# =============================================================================
# ROUNDING
# =============================================================================


class _RoundOptions(BaseModel):
    """Общая часть параметров round_to_nearest_*."""

    allowed_increments: ClassVar[frozenset[int]] = frozenset({1})

    mode: RoundingMode = Field("round", description="round (half-expand), ceil или floor")
    nearest_to: int = Field(1, description="Шаг округления в единицах функции")

    model_config = {"frozen": True}

    @field_validator("nearest_to")
    @classmethod
    def validate_nearest_to(cls, v: int) -> int:
        """Шаг должен делить старшую единицу без остатка"""
        if v not in cls.allowed_increments:
            allowed = ", ".join(str(i) for i in sorted(cls.allowed_increments))
            raise ValueError(f"nearest_to must be one of {allowed}, got {v}")
        return v


class RoundToNearestHourOptions(_RoundOptions):
    """Параметры round_to_nearest_hour."""

    allowed_increments: ClassVar[frozenset[int]] = HOUR_ROUNDING_INCREMENTS


class RoundToNearestMinuteOptions(_RoundOptions):
    """Параметры round_to_nearest_minute."""

    allowed_increments: ClassVar[frozenset[int]] = MINUTE_ROUNDING_INCREMENTS


class RoundToNearestSecondOptions(_RoundOptions):
    """Параметры round_to_nearest_second."""

    allowed_increments: ClassVar[frozenset[int]] = SECOND_ROUNDING_INCREMENTS

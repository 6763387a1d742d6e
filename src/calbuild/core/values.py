"""
Concrete date/time values and the constructors resolvers call.

Dates are stdlib `datetime.date`. Times carry nanosecond precision, which the
stdlib lacks, so `LocalTime` and `LocalDateTime` are frozen Pydantic v2 models.

Responsibilities
- Construct dates from (year, month, day), epoch day, or (year, day-of-year).
- Construct times from (hour, minute, second, nano) or nano-of-day.
- Translate every constructor failure into InvalidValueError.

Style
- Zero-IO (stdlib + pydantic only).
- Constructors never coerce; out-of-range input is an error. Only `date_of_clamped`
  shrinks an overshooting day-of-month, for the year, month and quarter folds.

Examples:
    >>> from calbuild.core.values import date_of_epoch_day, time_of_nano_of_day
    >>> date_of_epoch_day(0)
    datetime.date(1970, 1, 1)
    >>> str(time_of_nano_of_day(3_600_000_000_000))
    '01:00'
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import (
    EPOCH_DATE,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from .errors import InvalidValueError

__all__ = [
    "LocalTime",
    "LocalDateTime",
    "date_of",
    "date_of_clamped",
    "date_of_epoch_day",
    "date_of_year_day",
    "epoch_day_of",
    "is_leap_year",
    "time_of",
    "time_of_nano_of_day",
    "datetime_of",
]


class LocalTime(BaseModel):
    """
    Time-of-day with nanosecond precision.

    Attributes:
        hour (int): In [0, 23].
        minute (int): In [0, 59].
        second (int): In [0, 59].
        nano (int): In [0, 999_999_999].

    Raises:
        pydantic.ValidationError: If a component is outside its range. Use `time_of`
            to get InvalidValueError instead.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)
    second: int = Field(0, ge=0, le=59)
    nano: int = Field(0, ge=0, le=NANOS_PER_SECOND - 1)

    @property
    def nano_of_day(self) -> int:
        return (
            self.hour * NANOS_PER_HOUR
            + self.minute * NANOS_PER_MINUTE
            + self.second * NANOS_PER_SECOND
            + self.nano
        )

    def to_time(self) -> time:
        """Convert to `datetime.time`, truncating to microseconds."""
        return time(self.hour, self.minute, self.second, self.nano // 1_000)

    def __str__(self) -> str:
        text = f"{self.hour:02d}:{self.minute:02d}"
        if self.second or self.nano:
            text += f":{self.second:02d}"
            if self.nano:
                if self.nano % 1_000_000 == 0:
                    text += f".{self.nano // 1_000_000:03d}"
                elif self.nano % 1_000 == 0:
                    text += f".{self.nano // 1_000:06d}"
                else:
                    text += f".{self.nano:09d}"
        return text


class LocalDateTime(BaseModel):
    """
    A date paired with a time-of-day.

    Attributes:
        local_date (date): Calendar date.
        local_time (LocalTime): Time-of-day.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    local_date: date
    local_time: LocalTime

    def to_datetime(self) -> datetime:
        """Convert to a naive `datetime.datetime`, truncating to microseconds."""
        return datetime.combine(self.local_date, self.local_time.to_time())

    def __str__(self) -> str:
        return f"{self.local_date.isoformat()}T{self.local_time}"


# ============================================================================
# Constructors
# ============================================================================


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def date_of(year: int, month: int, day: int) -> date:
    """
    Build a date from year, month-of-year, and day-of-month.

    Raises:
        InvalidValueError: If the combination is not a valid ISO date.
    """
    try:
        return date(year, month, day)
    except (ValueError, OverflowError) as exc:
        raise InvalidValueError(
            f"invalid date year={year} month={month} day={day}: {exc}"
        ) from exc


_MONTH_LENGTHS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def date_of_clamped(year: int, month: int, day: int) -> date:
    """
    Like `date_of`, but shrink `day` to the last day of the month when it overshoots.

    Raises:
        InvalidValueError: If month is not in 1..12 or year is outside 1..9999.
    """
    if not 1 <= month <= 12:
        raise InvalidValueError(f"invalid date year={year} month={month} day={day}")
    last = _MONTH_LENGTHS[month - 1] + (1 if month == 2 and is_leap_year(year) else 0)
    return date_of(year, month, min(day, last))


def date_of_epoch_day(epoch_day: int) -> date:
    """
    Build a date from a count of days since 1970-01-01.

    Raises:
        InvalidValueError: If the result falls outside the representable range.
    """
    try:
        return EPOCH_DATE + timedelta(days=epoch_day)
    except (ValueError, OverflowError) as exc:
        raise InvalidValueError(f"invalid epoch day {epoch_day}: {exc}") from exc


def date_of_year_day(year: int, day_of_year: int) -> date:
    """
    Build a date from a year and 1-based day-of-year.

    Raises:
        InvalidValueError: If the year is out of range or the day does not exist in it.
    """
    length = 366 if is_leap_year(year) else 365
    if not 1 <= day_of_year <= length:
        raise InvalidValueError(
            f"invalid day of year {day_of_year} for year {year} (1..{length})"
        )
    start = date_of(year, 1, 1)
    try:
        return start + timedelta(days=day_of_year - 1)
    except OverflowError as exc:
        raise InvalidValueError(f"invalid day of year {day_of_year} for year {year}") from exc


def epoch_day_of(d: date) -> int:
    return d.toordinal() - EPOCH_DATE.toordinal()


def time_of(hour: int, minute: int, second: int = 0, nano: int = 0) -> LocalTime:
    """
    Build a time-of-day.

    Raises:
        InvalidValueError: If any component is out of range.
    """
    try:
        return LocalTime(hour=hour, minute=minute, second=second, nano=nano)
    except ValidationError as exc:
        raise InvalidValueError(
            f"invalid time hour={hour} minute={minute} second={second} nano={nano}"
        ) from exc


def time_of_nano_of_day(nano_of_day: int) -> LocalTime:
    """
    Build a time-of-day from nanoseconds since midnight.

    Raises:
        InvalidValueError: If nano_of_day is outside [0, 86_399_999_999_999].
    """
    if not 0 <= nano_of_day < NANOS_PER_DAY:
        raise InvalidValueError(f"invalid nano of day {nano_of_day}")
    hour, rem = divmod(nano_of_day, NANOS_PER_HOUR)
    minute, rem = divmod(rem, NANOS_PER_MINUTE)
    second, nano = divmod(rem, NANOS_PER_SECOND)
    return LocalTime(hour=hour, minute=minute, second=second, nano=nano)


def datetime_of(d: date, t: LocalTime) -> LocalDateTime:
    return LocalDateTime(local_date=d, local_time=t)

"""
Pluggable calendar systems ("chronologies") and the ISO implementation.

A chronology is consumed, never owned, by the resolver. It must be immutable and
side-effect free: every operation is a query or a construction.

Responsibilities
- Define the `Chronology` protocol the generic resolver folds through.
- Provide `IsoChronology` (the proleptic Gregorian calendar) and its singleton `ISO`.
- Keep a small registry so configuration can name a chronology by id.
- Pair a resolved date with its chronology in `ChronoDateView`.

Notes:
    - Year and month folds keep the day-of-month where it exists and otherwise use the
      last day of the month; a day_of_month fold never clamps (day 31 on a 30-day
      month is an error).
    - Extension fields are applied through their own `fold` when the chronology
      has no native rule for them.

Examples:
    >>> from datetime import date
    >>> from calbuild.core.chrono import ISO, chronology_of
    >>> from calbuild.core.fields import StandardField
    >>> chronology_of("iso8601") is ISO
    True
    >>> ISO.fold_field(date(2000, 1, 15), StandardField.MONTH_OF_YEAR, 2)
    datetime.date(2000, 2, 15)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Final, Protocol, runtime_checkable

from .errors import InvalidValueError, UnresolvableError
from .fields import (
    DateTimeField,
    Duration,
    ExtensionField,
    StandardField,
    TemporalUnit,
    field_value,
)
from .values import (
    date_of,
    date_of_clamped,
    date_of_epoch_day,
    date_of_year_day,
    is_leap_year,
)

__all__ = [
    "Chronology",
    "IsoChronology",
    "ISO",
    "ChronoDateView",
    "register_chronology",
    "chronology_of",
    "available_chronologies",
]

logger = logging.getLogger(__name__)

Clock = Callable[[], date]


@runtime_checkable
class Chronology(Protocol):
    """Calendar-system capability consumed by the generic resolver."""

    @property
    def id(self) -> str: ...

    @property
    def calendar_type(self) -> str: ...

    def fold_field(self, current: date, field: DateTimeField, value: int) -> date:
        """Apply one observation to `current`; raise InvalidValueError if invalid."""
        ...

    def estimated_duration(self, unit: TemporalUnit) -> Duration:
        """Estimated length of `unit`; used only for ordering."""
        ...

    def date_now(self, clock: Clock | None = None) -> date: ...


class IsoChronology:
    """
    The ISO-8601 calendar system (proleptic Gregorian).

    Notes:
      Standard fields fold as follows:
        * year / month_of_year: replace that component, shrinking day-of-month
          to the last day of the resulting month
        * day_of_month: replace the day, no clamping
        * day_of_year: keep the year, set the ordinal day
        * epoch_day: replace the whole date
        * day_of_week: move within the Monday-start week
        * time-of-day fields: range-checked, date unchanged
    """

    __slots__ = ()

    @property
    def id(self) -> str:
        return "ISO"

    @property
    def calendar_type(self) -> str:
        return "iso8601"

    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    def date(self, year: int, month: int, day: int) -> date:
        return date_of(year, month, day)

    def date_now(self, clock: Clock | None = None) -> date:
        return clock() if clock is not None else date.today()

    def estimated_duration(self, unit: TemporalUnit) -> Duration:
        return unit.estimated_duration

    def fold_field(self, current: date, field: DateTimeField, value: int) -> date:
        if isinstance(field, ExtensionField):
            if field.fold is None:
                raise InvalidValueError(
                    f"{self.id} chronology cannot apply field {field.name!r}"
                )
            return field.fold(current, value)

        if field is StandardField.YEAR:
            return date_of_clamped(value, current.month, current.day)
        if field is StandardField.MONTH_OF_YEAR:
            _check_range(field, value)
            return date_of_clamped(current.year, value, current.day)
        if field is StandardField.DAY_OF_MONTH:
            return date_of(current.year, current.month, value)
        if field is StandardField.DAY_OF_YEAR:
            return date_of_year_day(current.year, value)
        if field is StandardField.EPOCH_DAY:
            return date_of_epoch_day(value)
        if field is StandardField.DAY_OF_WEEK:
            _check_range(field, value)
            try:
                return current + timedelta(days=value - current.isoweekday())
            except OverflowError as exc:
                raise InvalidValueError(
                    f"day_of_week {value} moves {current} out of range"
                ) from exc

        # Remaining standard fields are time-of-day and do not move the date.
        _check_range(field, value)
        return current

    def __repr__(self) -> str:
        return "IsoChronology()"


def _check_range(field: StandardField, value: int) -> None:
    lo, hi = field.value_range
    if not lo <= value <= hi:
        raise InvalidValueError(
            f"invalid value for {field_value(field)}: {value} (valid {lo}..{hi})"
        )


ISO: Final[IsoChronology] = IsoChronology()


@dataclass(frozen=True)
class ChronoDateView:
    """
    A resolved date viewed through the chronology that produced it.

    Attributes:
        local_date (date): The resolved date.
        chronology (Chronology): Calendar system used for resolution.
    """

    local_date: date
    chronology: Chronology

    def __str__(self) -> str:
        return f"{self.local_date.isoformat()}[{self.chronology.id}]"


# ============================================================================
# Registry
# ============================================================================

_REGISTRY: dict[str, Chronology] = {}


def register_chronology(chrono: Chronology) -> None:
    """
    Make `chrono` discoverable by id and calendar type (case-insensitive).

    Re-registering the same key replaces the previous entry.
    """
    for key in (chrono.id, chrono.calendar_type):
        _REGISTRY[key.lower()] = chrono
    logger.debug("registered chronology %s (%s)", chrono.id, chrono.calendar_type)


def chronology_of(name: str) -> Chronology:
    """
    Look up a registered chronology by id or calendar type.

    Raises:
        UnresolvableError: If nothing is registered under `name`.
    """
    try:
        return _REGISTRY[(name or "").lower()]
    except KeyError:
        raise UnresolvableError(
            f"unknown chronology {name!r}; available: {available_chronologies()}"
        ) from None


def available_chronologies() -> list[str]:
    return sorted({c.id for c in _REGISTRY.values()})


register_chronology(ISO)

"""
Canonical field model: temporal units, standard fields, and extension fields.

Defines the identifiers the field store is keyed by and the units whose estimated
durations drive resolution priority. Includes lower_snake naming helpers used by
IO adapters to map column names onto fields.

Responsibilities
- Define `TemporalUnit` and its ISO estimated durations.
- Define the closed, totally ordered `StandardField` enumeration.
- Define `ExtensionField`, the open variant for calendar- or domain-specific fields.
- Provide normalization helpers (`is_lower_snake`, `field_from_value`).

Design principles
-----------------
1) One naming standard:
   - Enum classes: PascalCase
   - Enum member names: UPPER_SNAKE
   - Serialized values (column names, config): lower_snake

2) Standard fields are declared fine-to-coarse:
   - Declaration index is the field's rank; a larger rank is a coarser field.
   - `StandardField.YEAR > StandardField.MONTH_OF_YEAR > StandardField.DAY_OF_MONTH`.
   - New members may be added anywhere as long as the order stays total.

3) Extension fields are opaque:
   - The core only asks for their base unit (to estimate a duration for sorting).
   - An optional `fold` lets a chronology apply a field it does not know natively.

Field table
-----------
| Field            | Base unit | Valid range (informational)          |
|------------------|-----------|--------------------------------------|
| nano_of_second   | nanos     | 0 .. 999_999_999                     |
| nano_of_day      | nanos     | 0 .. 86_399_999_999_999              |
| second_of_minute | seconds   | 0 .. 59                              |
| minute_of_hour   | minutes   | 0 .. 59                              |
| hour_of_day      | hours     | 0 .. 23                              |
| day_of_week      | days      | 1 .. 7 (Monday = 1)                  |
| day_of_month     | days      | 1 .. 31                              |
| day_of_year      | days      | 1 .. 366                             |
| epoch_day        | days      | date-range dependent                 |
| month_of_year    | months    | 1 .. 12                              |
| year             | years     | 1 .. 9999                            |

Examples
--------
>>> from calbuild.core.fields import StandardField, TemporalUnit, field_from_value
>>> StandardField.YEAR > StandardField.DAY_OF_MONTH
True
>>> field_from_value("month_of_year") is StandardField.MONTH_OF_YEAR
True
>>> TemporalUnit.YEARS.estimated_duration > TemporalUnit.MONTHS.estimated_duration
True

Tags
----
fields, enums, units, ordering, lower_snake, helpers
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Final, NamedTuple, Union

from .constants import (
    NANOS_PER_DAY,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_YEAR,
)
from .errors import GrammarError
from .typing import DateFold

__all__ = [
    "Duration",
    "TemporalUnit",
    "StandardField",
    "ExtensionField",
    "DateTimeField",
    # helpers/validators
    "is_lower_snake",
    "assert_lower_snake",
    "is_standard",
    "field_value",
    "base_unit_of",
    "value_range_of",
    "field_from_value",
]


class Duration(NamedTuple):
    """
    Estimated length of a unit as (seconds, nanos).

    Compared lexicographically; used only to order fields, never for arithmetic.
    """

    seconds: int
    nanos: int = 0


# ============================================================================
# UNITS
# ============================================================================


class TemporalUnit(Enum):
    """
    Units that fields are measured in.

    Notes:
      Estimated durations follow the ISO calendar: a year is 365.2425 days,
      a month one twelfth of that, a quarter three months.
    """

    NANOS = "nanos"
    MICROS = "micros"
    MILLIS = "millis"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    HALF_DAYS = "half_days"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    QUARTERS = "quarters"
    YEARS = "years"
    DECADES = "decades"
    CENTURIES = "centuries"
    MILLENNIA = "millennia"
    ERAS = "eras"
    FOREVER = "forever"

    @property
    def estimated_duration(self) -> Duration:
        return _ESTIMATED_DURATIONS[self]


_ESTIMATED_DURATIONS: Final[dict[TemporalUnit, Duration]] = {
    TemporalUnit.NANOS: Duration(0, 1),
    TemporalUnit.MICROS: Duration(0, 1_000),
    TemporalUnit.MILLIS: Duration(0, 1_000_000),
    TemporalUnit.SECONDS: Duration(1),
    TemporalUnit.MINUTES: Duration(60),
    TemporalUnit.HOURS: Duration(3_600),
    TemporalUnit.HALF_DAYS: Duration(SECONDS_PER_DAY // 2),
    TemporalUnit.DAYS: Duration(SECONDS_PER_DAY),
    TemporalUnit.WEEKS: Duration(7 * SECONDS_PER_DAY),
    TemporalUnit.MONTHS: Duration(SECONDS_PER_YEAR // 12),
    TemporalUnit.QUARTERS: Duration(SECONDS_PER_YEAR // 4),
    TemporalUnit.YEARS: Duration(SECONDS_PER_YEAR),
    TemporalUnit.DECADES: Duration(SECONDS_PER_YEAR * 10),
    TemporalUnit.CENTURIES: Duration(SECONDS_PER_YEAR * 100),
    TemporalUnit.MILLENNIA: Duration(SECONDS_PER_YEAR * 1_000),
    TemporalUnit.ERAS: Duration(SECONDS_PER_YEAR * 1_000_000_000),
    TemporalUnit.FOREVER: Duration(2**63 - 1, NANOS_PER_SECOND - 1),
}


# ============================================================================
# STANDARD FIELDS (CLOSED, ORDERED)
# ============================================================================


@total_ordering
class StandardField(Enum):
    """
    Built-in calendrical fields, declared from finest to coarsest.

    Serialized values are used in:
      - FieldStore reprs and keys
      - polars column names read by calbuild.io.frames
      - configuration and logs

    Notes:
      Comparison follows declaration order, so sorting in reverse yields the
      coarse-to-fine order the generic resolver folds in.
    """

    NANO_OF_SECOND = "nano_of_second"
    NANO_OF_DAY = "nano_of_day"
    SECOND_OF_MINUTE = "second_of_minute"
    MINUTE_OF_HOUR = "minute_of_hour"
    HOUR_OF_DAY = "hour_of_day"
    DAY_OF_WEEK = "day_of_week"
    DAY_OF_MONTH = "day_of_month"
    DAY_OF_YEAR = "day_of_year"
    EPOCH_DAY = "epoch_day"
    MONTH_OF_YEAR = "month_of_year"
    YEAR = "year"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def base_unit(self) -> TemporalUnit:
        return _BASE_UNITS[self]

    @property
    def value_range(self) -> tuple[int, int]:
        return _VALUE_RANGES[self]

    @property
    def is_date_based(self) -> bool:
        return self.base_unit not in _TIME_UNITS

    def __lt__(self, other: object) -> bool:
        if isinstance(other, StandardField):
            return self.rank < other.rank
        return NotImplemented


_RANKS: Final[dict[StandardField, int]] = {f: i for i, f in enumerate(StandardField)}

_TIME_UNITS: Final[frozenset[TemporalUnit]] = frozenset(
    {
        TemporalUnit.NANOS,
        TemporalUnit.MICROS,
        TemporalUnit.MILLIS,
        TemporalUnit.SECONDS,
        TemporalUnit.MINUTES,
        TemporalUnit.HOURS,
        TemporalUnit.HALF_DAYS,
    }
)

_BASE_UNITS: Final[dict[StandardField, TemporalUnit]] = {
    StandardField.NANO_OF_SECOND: TemporalUnit.NANOS,
    StandardField.NANO_OF_DAY: TemporalUnit.NANOS,
    StandardField.SECOND_OF_MINUTE: TemporalUnit.SECONDS,
    StandardField.MINUTE_OF_HOUR: TemporalUnit.MINUTES,
    StandardField.HOUR_OF_DAY: TemporalUnit.HOURS,
    StandardField.DAY_OF_WEEK: TemporalUnit.DAYS,
    StandardField.DAY_OF_MONTH: TemporalUnit.DAYS,
    StandardField.DAY_OF_YEAR: TemporalUnit.DAYS,
    StandardField.EPOCH_DAY: TemporalUnit.DAYS,
    StandardField.MONTH_OF_YEAR: TemporalUnit.MONTHS,
    StandardField.YEAR: TemporalUnit.YEARS,
}

_VALUE_RANGES: Final[dict[StandardField, tuple[int, int]]] = {
    StandardField.NANO_OF_SECOND: (0, NANOS_PER_SECOND - 1),
    StandardField.NANO_OF_DAY: (0, NANOS_PER_DAY - 1),
    StandardField.SECOND_OF_MINUTE: (0, 59),
    StandardField.MINUTE_OF_HOUR: (0, 59),
    StandardField.HOUR_OF_DAY: (0, 23),
    StandardField.DAY_OF_WEEK: (1, 7),
    StandardField.DAY_OF_MONTH: (1, 31),
    StandardField.DAY_OF_YEAR: (1, 366),
    # date.min .. date.max expressed as epoch days
    StandardField.EPOCH_DAY: (-719_162, 2_932_896),
    StandardField.MONTH_OF_YEAR: (1, 12),
    StandardField.YEAR: (1, 9999),
}


# ============================================================================
# EXTENSION FIELDS (OPEN)
# ============================================================================


@dataclass(frozen=True, slots=True)
class ExtensionField:
    """
    A field outside the standard enumeration.

    Attributes:
        name (str): lower_snake identifier (e.g., "quarter_of_year").
        base_unit (TemporalUnit): Unit whose estimated duration ranks this field.
        value_range (tuple[int, int] | None): Informational inclusive range.
        fold (DateFold | None): Applies a value of this field to a date; used by
            chronologies that have no native rule for the field.

    Notes:
        Identity is (name, base_unit); the fold callable does not take part in
        equality or hashing.

    Examples:
        >>> from calbuild.core.fields import ExtensionField, TemporalUnit
        >>> ExtensionField("week_of_quarter", TemporalUnit.WEEKS).name
        'week_of_quarter'
    """

    name: str
    base_unit: TemporalUnit
    value_range: tuple[int, int] | None = field(default=None, compare=False)
    fold: DateFold | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        assert_lower_snake(self.name, "extension field name")
        if self.name in _STANDARD_VALUES:
            raise GrammarError(f"extension field name clashes with a standard field: {self.name!r}")

    def __str__(self) -> str:
        return self.name


DateTimeField = Union[StandardField, ExtensionField]


# ============================================================================
# Helpers & Validators (zero I/O)
# ============================================================================

_LOWER_SNAKE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")
_STANDARD_VALUES: Final[frozenset[str]] = frozenset(f.value for f in StandardField)


def is_lower_snake(value: str) -> bool:
    """
    Check whether a string is lower_snake.

    Examples:
      >>> is_lower_snake("day_of_month")
      True
      >>> is_lower_snake("DayOfMonth")
      False
    """
    return bool(_LOWER_SNAKE_RE.match(value or ""))


def assert_lower_snake(value: str, what: str = "value") -> None:
    """
    Validate that a string is lower_snake.

    Raises:
      GrammarError: If value is not lower_snake.
    """
    if not is_lower_snake(value):
        raise GrammarError(f"{what} must be lower_snake (got: {value!r})")


def is_standard(f: DateTimeField) -> bool:
    return isinstance(f, StandardField)


def field_value(f: DateTimeField) -> str:
    """Serialized lower_snake name for either field variant."""
    if isinstance(f, StandardField):
        return f.value
    return f.name


def base_unit_of(f: DateTimeField) -> TemporalUnit:
    return f.base_unit


def value_range_of(f: DateTimeField) -> tuple[int, int] | None:
    return f.value_range


def field_from_value(s: str, extensions: Iterable[ExtensionField] = ()) -> DateTimeField:
    """
    Parse a lower_snake field name.

    Args:
      s (str): Lower_snake field name (e.g., "day_of_month").
      extensions (Iterable[ExtensionField]): Extension fields to consult after the
        standard enumeration.

    Returns:
      DateTimeField: The matching standard or extension field.

    Raises:
      GrammarError: If s is not lower_snake or names no known field.

    Examples:
      >>> from calbuild.core.quarter import QUARTER_OF_YEAR
      >>> field_from_value("quarter_of_year", [QUARTER_OF_YEAR]) == QUARTER_OF_YEAR
      True
    """
    assert_lower_snake(s, "field name")
    if s in _STANDARD_VALUES:
        return StandardField(s)
    for ext in extensions:
        if ext.name == s:
            return ext
    raise GrammarError(f"unknown field name: {s!r}")

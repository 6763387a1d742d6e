"""
Quarter-of-year: Q1 (January-March) through Q4 (October-December).

`QuarterOfYear` is a small cyclic enum that feeds the resolver through the
`QUARTER_OF_YEAR` extension field. The field's fold moves a date into the target
quarter keeping its position within the quarter and its day-of-month, shrunk to the
last day of the target month when needed.

Notes:
    - Use `.value` (1..4), never the member's position, for the numeric quarter.
    - `roll` normalizes any offset modulo 4, so large and negative offsets are fine.

Examples:
    >>> from calbuild.core.quarter import QuarterOfYear
    >>> QuarterOfYear.of_month(8)
    <QuarterOfYear.Q3: 3>
    >>> QuarterOfYear.Q4.roll(1)
    <QuarterOfYear.Q1: 1>
    >>> QuarterOfYear.Q2.first_month()
    4
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Final

from .errors import InvalidValueError
from .fields import ExtensionField, TemporalUnit
from .store import FieldStore
from .values import date_of_clamped

__all__ = ["QuarterOfYear", "QUARTER_OF_YEAR"]


class QuarterOfYear(Enum):
    """
    The four quarters of the ISO year.

    Serialized values appear in:
      - FieldStore entries keyed by QUARTER_OF_YEAR
      - polars columns named "quarter_of_year"
    """

    Q1 = 1
    Q2 = 2
    Q3 = 3
    Q4 = 4

    @classmethod
    def of(cls, quarter_of_year: int) -> QuarterOfYear:
        """
        Obtain a quarter from its numeric value.

        Raises:
            InvalidValueError: If quarter_of_year is not in 1..4.
        """
        try:
            return cls(quarter_of_year)
        except ValueError:
            raise InvalidValueError(
                f"Invalid value for QuarterOfYear: {quarter_of_year}"
            ) from None

    @classmethod
    def of_month(cls, month_of_year: int) -> QuarterOfYear:
        """
        Obtain the quarter containing a month (1..12).

        Raises:
            InvalidValueError: If month_of_year is not in 1..12.
        """
        if not 1 <= month_of_year <= 12:
            raise InvalidValueError(f"Invalid value for MonthOfYear: {month_of_year}")
        return cls.of((month_of_year - 1) // 3 + 1)

    @classmethod
    def from_date(cls, d: date) -> QuarterOfYear:
        return cls.of_month(d.month)

    @classmethod
    def from_store(cls, store: FieldStore) -> QuarterOfYear:
        """
        Read the quarter recorded in a store.

        Raises:
            MissingFieldError: If the store holds no QUARTER_OF_YEAR value.
            InvalidValueError: If the recorded value is not in 1..4.
        """
        return cls.of(store.get(QUARTER_OF_YEAR))

    def next(self) -> QuarterOfYear:
        return self.roll(1)

    def previous(self) -> QuarterOfYear:
        return self.roll(-1)

    def roll(self, quarters: int) -> QuarterOfYear:
        """Add `quarters` (positive or negative), wrapping Q4 -> Q1."""
        members = list(QuarterOfYear)
        return members[(self.value - 1 + quarters % 4) % 4]

    def first_month(self) -> int:
        """Month-of-year (1, 4, 7, 10) that opens this quarter."""
        return (self.value - 1) * 3 + 1

    def months(self) -> tuple[int, int, int]:
        first = self.first_month()
        return (first, first + 1, first + 2)

    def to_store(self) -> FieldStore:
        """Materialize as a single QUARTER_OF_YEAR observation."""
        return FieldStore.of(QUARTER_OF_YEAR, self.value)

    def __str__(self) -> str:
        return self.name


def _fold_quarter(current: date, value: int) -> date:
    target = QuarterOfYear.of(value)
    month = target.first_month() + (current.month - 1) % 3
    return date_of_clamped(current.year, month, current.day)


QUARTER_OF_YEAR: Final[ExtensionField] = ExtensionField(
    "quarter_of_year",
    TemporalUnit.QUARTERS,
    value_range=(1, 4),
    fold=_fold_quarter,
)

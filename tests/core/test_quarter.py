"""Tests for `calbuild.core.quarter`."""

from datetime import date

import pytest

from calbuild.core.errors import InvalidValueError, MissingFieldError
from calbuild.core.fields import TemporalUnit
from calbuild.core.quarter import QUARTER_OF_YEAR, QuarterOfYear as Q
from calbuild.core.store import FieldStore


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_of_round_trips_value(n: int) -> None:
    assert Q.of(n).value == n


@pytest.mark.parametrize("n", [0, 5, -1, 100])
def test_of_rejects(n: int) -> None:
    with pytest.raises(InvalidValueError, match="QuarterOfYear"):
        Q.of(n)


@pytest.mark.parametrize(
    "month,expected",
    [(m, Q.Q1) for m in (1, 2, 3)]
    + [(m, Q.Q2) for m in (4, 5, 6)]
    + [(m, Q.Q3) for m in (7, 8, 9)]
    + [(m, Q.Q4) for m in (10, 11, 12)],
)
def test_of_month(month: int, expected: Q) -> None:
    assert Q.of_month(month) is expected
    assert Q.from_date(date(2012, month, 1)) is expected


@pytest.mark.parametrize("month", [0, 13])
def test_of_month_rejects(month: int) -> None:
    with pytest.raises(InvalidValueError):
        Q.of_month(month)


@pytest.mark.parametrize(
    "start,offset,expected",
    [
        (Q.Q4, 1, Q.Q1),
        (Q.Q1, -1, Q.Q4),
        (Q.Q2, 4, Q.Q2),
        (Q.Q2, 0, Q.Q2),
        (Q.Q3, -4, Q.Q3),
        (Q.Q1, 1_000_000_001, Q.Q2),
        (Q.Q1, -1_000_000_001, Q.Q4),
        (Q.Q3, 2**63 + 2, Q.Q1),
    ],
)
def test_roll(start: Q, offset: int, expected: Q) -> None:
    assert start.roll(offset) is expected


def test_next_and_previous_cycle() -> None:
    assert [q.next() for q in Q] == [Q.Q2, Q.Q3, Q.Q4, Q.Q1]
    assert [q.previous() for q in Q] == [Q.Q4, Q.Q1, Q.Q2, Q.Q3]


def test_first_month_and_months() -> None:
    assert [q.first_month() for q in Q] == [1, 4, 7, 10]
    assert Q.Q4.months() == (10, 11, 12)


def test_store_round_trip() -> None:
    store = Q.Q3.to_store()

    assert store.get(QUARTER_OF_YEAR) == 3
    assert Q.from_store(store) is Q.Q3
    with pytest.raises(MissingFieldError):
        Q.from_store(FieldStore())
    with pytest.raises(InvalidValueError):
        Q.from_store(FieldStore.of(QUARTER_OF_YEAR, 9))


def test_quarter_field_shape() -> None:
    assert QUARTER_OF_YEAR.name == "quarter_of_year"
    assert QUARTER_OF_YEAR.base_unit is TemporalUnit.QUARTERS
    assert QUARTER_OF_YEAR.value_range == (1, 4)


@pytest.mark.parametrize(
    "current,quarter,expected",
    [
        (date(2012, 2, 10), 3, date(2012, 8, 10)),
        (date(2012, 12, 31), 1, date(2012, 3, 31)),
        (date(2012, 4, 1), 4, date(2012, 10, 1)),
    ],
)
def test_fold_keeps_position_in_quarter(current: date, quarter: int, expected: date) -> None:
    assert QUARTER_OF_YEAR.fold(current, quarter) == expected


def test_fold_clamps_to_month_end() -> None:
    # January 31 -> April 30
    assert QUARTER_OF_YEAR.fold(date(2012, 1, 31), 2) == date(2012, 4, 30)
    assert QUARTER_OF_YEAR.fold(date(2013, 5, 31), 1) == date(2013, 2, 28)


def test_fold_rejects_unknown_quarter() -> None:
    with pytest.raises(InvalidValueError):
        QUARTER_OF_YEAR.fold(date(2012, 1, 31), 5)

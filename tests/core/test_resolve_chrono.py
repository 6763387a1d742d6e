"""Tests for the chronology-driven fold in `calbuild.core.resolve`."""

from __future__ import annotations

from datetime import date

import pytest

from calbuild.core.chrono import ISO, ChronoDateView
from calbuild.core.errors import InvalidValueError, UnresolvableError
from calbuild.core.fields import (
    DateTimeField,
    Duration,
    ExtensionField,
    StandardField as F,
    TemporalUnit,
)
from calbuild.core.quarter import QUARTER_OF_YEAR
from calbuild.core.resolve import (
    build_chrono_date_view,
    field_order,
    resolve_chrono_date,
    resolve_chrono_date_now,
    sort_fields,
)
from calbuild.core.store import FieldStore

SEED = date(2000, 1, 15)


class RecordingChronology:
    """ISO behaviour that records every fold step it is asked to perform."""

    def __init__(self) -> None:
        self.steps: list[tuple[DateTimeField, int]] = []

    @property
    def id(self) -> str:
        return "REC"

    @property
    def calendar_type(self) -> str:
        return "recording"

    def fold_field(self, current: date, field: DateTimeField, value: int) -> date:
        self.steps.append((field, value))
        return ISO.fold_field(current, field, value)

    def estimated_duration(self, unit: TemporalUnit) -> Duration:
        return ISO.estimated_duration(unit)

    def date_now(self, clock=None) -> date:
        return ISO.date_now(clock)


def test_year_applied_before_month_before_day() -> None:
    chrono = RecordingChronology()
    store = FieldStore().put(F.DAY_OF_MONTH, 29).put(F.MONTH_OF_YEAR, 2).put(F.YEAR, 2000)

    assert resolve_chrono_date(store, chrono, SEED) == date(2000, 2, 29)
    assert [f for f, _ in chrono.steps] == [F.YEAR, F.MONTH_OF_YEAR, F.DAY_OF_MONTH]


@pytest.mark.parametrize("seed", [SEED, date(2000, 1, 31), date(2000, 2, 29)])
def test_fails_at_day_step_in_non_leap_year(seed: date) -> None:
    chrono = RecordingChronology()
    store = FieldStore().put(F.DAY_OF_MONTH, 29).put(F.MONTH_OF_YEAR, 2).put(F.YEAR, 2001)

    with pytest.raises(InvalidValueError, match="day=29"):
        resolve_chrono_date(store, chrono, seed)

    # Year and month steps clamp the seed day; only the explicit day 29 is rejected.
    assert chrono.steps == [(F.YEAR, 2001), (F.MONTH_OF_YEAR, 2), (F.DAY_OF_MONTH, 29)]


@pytest.mark.parametrize("seed", [date(2000, 1, 31), date(2000, 2, 29)])
def test_seed_day_does_not_leak_past_month_end(seed: date) -> None:
    store = FieldStore().put(F.YEAR, 2000).put(F.MONTH_OF_YEAR, 2).put(F.DAY_OF_MONTH, 28)

    assert resolve_chrono_date(store, ISO, seed) == date(2000, 2, 28)


def test_leap_day_seed_moves_to_non_leap_year() -> None:
    store = FieldStore().put(F.YEAR, 2001).put(F.MONTH_OF_YEAR, 3).put(F.DAY_OF_MONTH, 1)

    assert resolve_chrono_date(store, ISO, date(2000, 2, 29)) == date(2001, 3, 1)


def test_year_month_without_day_keeps_clamped_seed_day() -> None:
    store = FieldStore().put(F.YEAR, 2001).put(F.MONTH_OF_YEAR, 4)

    assert resolve_chrono_date(store, ISO, date(2000, 1, 31)) == date(2001, 4, 30)


def test_empty_store_is_unresolvable() -> None:
    with pytest.raises(UnresolvableError):
        resolve_chrono_date(FieldStore(), ISO, SEED)
    with pytest.raises(UnresolvableError):
        resolve_chrono_date_now(FieldStore(), ISO)


def test_absent_fields_keep_seed_values() -> None:
    assert resolve_chrono_date(FieldStore.of(F.YEAR, 2012), ISO, SEED) == date(2012, 1, 15)


def test_extension_fields_sorted_by_estimated_duration() -> None:
    fields = [F.DAY_OF_MONTH, QUARTER_OF_YEAR, F.MONTH_OF_YEAR, F.YEAR, F.HOUR_OF_DAY]

    assert sort_fields(fields, ISO) == [
        F.YEAR,
        QUARTER_OF_YEAR,
        F.MONTH_OF_YEAR,
        F.DAY_OF_MONTH,
        F.HOUR_OF_DAY,
    ]


def test_standard_fields_sharing_a_unit_use_rank() -> None:
    fields = [F.DAY_OF_MONTH, F.EPOCH_DAY, F.DAY_OF_WEEK, F.DAY_OF_YEAR]

    assert sort_fields(fields, ISO) == [F.EPOCH_DAY, F.DAY_OF_YEAR, F.DAY_OF_MONTH, F.DAY_OF_WEEK]


def test_mixed_ties_are_not_transitive() -> None:
    compare = field_order(ISO)
    daily = ExtensionField("day_of_cycle", TemporalUnit.DAYS)

    assert compare(daily, F.DAY_OF_MONTH) == 0
    assert compare(daily, F.EPOCH_DAY) == 0
    assert compare(F.EPOCH_DAY, F.DAY_OF_MONTH) < 0
    # The extension field sits between them and ties both ways, so this input already
    # counts as sorted and EPOCH_DAY stays behind DAY_OF_MONTH.
    assert sort_fields([F.DAY_OF_MONTH, daily, F.EPOCH_DAY], ISO) == [
        F.DAY_OF_MONTH,
        daily,
        F.EPOCH_DAY,
    ]
    assert sort_fields([F.DAY_OF_MONTH, F.EPOCH_DAY, daily], ISO) == [
        F.EPOCH_DAY,
        F.DAY_OF_MONTH,
        daily,
    ]


def test_quarter_and_year_resolve_through_iso() -> None:
    store = FieldStore().put(QUARTER_OF_YEAR, 3).put(F.YEAR, 2012)

    assert resolve_chrono_date(store, ISO, date(2000, 2, 10)) == date(2012, 8, 10)


def test_quarter_fold_clamps_month_end_seed() -> None:
    store = FieldStore().put(QUARTER_OF_YEAR, 2).put(F.YEAR, 2012)

    assert resolve_chrono_date(store, ISO, date(2000, 1, 31)) == date(2012, 4, 30)


def test_unknown_extension_field_is_rejected() -> None:
    opaque = ExtensionField("fiscal_week", TemporalUnit.WEEKS)
    store = FieldStore().put(opaque, 3).put(F.YEAR, 2012)

    with pytest.raises(InvalidValueError, match="fiscal_week"):
        resolve_chrono_date(store, ISO, SEED)


def test_time_fields_do_not_move_the_date() -> None:
    store = FieldStore().put(F.EPOCH_DAY, 0).put(F.HOUR_OF_DAY, 12).put(F.NANO_OF_SECOND, 5)

    assert resolve_chrono_date(store, ISO, SEED) == date(1970, 1, 1)


def test_now_wrapper_uses_clock() -> None:
    store = FieldStore.of(F.DAY_OF_MONTH, 1)

    assert resolve_chrono_date_now(store, ISO, clock=lambda: date(2012, 7, 6)) == date(2012, 7, 1)


def test_now_wrapper_on_month_end_clock() -> None:
    store = FieldStore().put(F.YEAR, 2012).put(F.MONTH_OF_YEAR, 4).put(F.DAY_OF_MONTH, 1)

    assert resolve_chrono_date_now(store, ISO, clock=lambda: date(2026, 10, 31)) == date(2012, 4, 1)


def test_chrono_date_view() -> None:
    view = build_chrono_date_view(FieldStore.of(F.EPOCH_DAY, 0), ISO, seed=SEED)

    assert view == ChronoDateView(local_date=date(1970, 1, 1), chronology=ISO)
    assert str(view) == "1970-01-01[ISO]"


def test_chrono_date_view_defaults_to_today() -> None:
    view = build_chrono_date_view(FieldStore.of(F.YEAR, 2000), ISO)

    assert view.local_date.year == 2000

"""Tests for `calbuild.core.store.FieldStore`."""

import pytest

from calbuild.core.errors import MissingFieldError
from calbuild.core.fields import StandardField
from calbuild.core.quarter import QUARTER_OF_YEAR
from calbuild.core.store import FieldStore


@pytest.mark.parametrize(
    "field,value",
    [
        (StandardField.YEAR, 2012),
        (StandardField.EPOCH_DAY, -719_162),
        (StandardField.NANO_OF_DAY, 2**63 - 1),
        (QUARTER_OF_YEAR, 3),
    ],
)
def test_put_get_remove(field, value) -> None:
    store = FieldStore()

    store.put(field, value)
    assert store.contains(field)
    assert store.get(field) == value

    store.remove(field)
    assert not store.contains(field)


def test_put_overwrites() -> None:
    store = FieldStore().put(StandardField.YEAR, 2011).put(StandardField.YEAR, 2012)

    assert store.get(StandardField.YEAR) == 2012
    assert len(store) == 1


def test_put_and_remove_chain() -> None:
    store = FieldStore()

    assert store.put(StandardField.YEAR, 1) is store
    assert store.remove(StandardField.YEAR) is store


def test_remove_absent_is_noop() -> None:
    store = FieldStore().put(StandardField.YEAR, 2012)

    store.remove(StandardField.DAY_OF_MONTH)
    store.remove(QUARTER_OF_YEAR)

    assert store.fields() == [StandardField.YEAR]


def test_get_missing_raises() -> None:
    with pytest.raises(MissingFieldError, match="day_of_month"):
        FieldStore().get(StandardField.DAY_OF_MONTH)
    with pytest.raises(MissingFieldError, match="quarter_of_year"):
        FieldStore().get(QUARTER_OF_YEAR)


def test_no_validation_on_put() -> None:
    store = FieldStore().put(StandardField.MONTH_OF_YEAR, 99)

    assert store.get(StandardField.MONTH_OF_YEAR) == 99


def test_standard_and_extension_views() -> None:
    store = (
        FieldStore()
        .put(QUARTER_OF_YEAR, 2)
        .put(StandardField.YEAR, 2012)
        .put(StandardField.DAY_OF_MONTH, 5)
    )

    assert store.standard_fields() == [StandardField.YEAR, StandardField.DAY_OF_MONTH]
    assert store.extension_fields() == [QUARTER_OF_YEAR]
    assert QUARTER_OF_YEAR in store
    assert list(store) == [QUARTER_OF_YEAR, StandardField.YEAR, StandardField.DAY_OF_MONTH]


def test_of_from_mapping_copy_and_equality() -> None:
    a = FieldStore.of(StandardField.EPOCH_DAY, 0)
    b = FieldStore.from_mapping({StandardField.EPOCH_DAY: 0})
    c = a.copy()

    assert a == b == c
    c.put(StandardField.YEAR, 1970)
    assert a != c
    assert repr(a) == "FieldStore({'epoch_day': 0})"

"""
Resolution of field stores into concrete dates, times, and date-times.

Two strategies are provided:

1) Fixed patterns over standard fields (`resolve_date`, `resolve_time`,
   `resolve_datetime`). Patterns are tried in priority order and the first full
   match wins; fields outside the matched pattern are ignored without any
   consistency check.

   | Priority | Date fields                            | Time fields                                                  |
   |----------|----------------------------------------|--------------------------------------------------------------|
   | 1        | year, month_of_year, day_of_month      | hour_of_day, minute_of_hour, second_of_minute, nano_of_second |
   | 2        | epoch_day                              | hour_of_day, minute_of_hour, second_of_minute                |
   | 3        | year, day_of_year                      | hour_of_day, minute_of_hour                                  |
   | 4        |                                        | nano_of_day                                                  |

2) A chronology-driven fold (`resolve_chrono_date`) over every field present,
   standard or extension. Fields are sorted coarse-to-fine and applied one at a
   time to a seed date, so years land before months and months before days. This
   keeps a day such as 29 valid when it only exists once the year is known.

Ordering rule (`field_order`)
- standard vs standard: enum rank, coarser first.
- anything involving an extension field: the chronology's estimated duration of
  each field's base unit, longer first.

Notes:
    - Resolvers read the store and never mutate it.
    - Values handed to (year, month, day) and (hour, minute, ...) constructors are
      narrowed to 32-bit ints first; epoch_day and nano_of_day pass through whole.
    - Failures raise UnresolvableError (no pattern / no fields) or InvalidValueError
      (rejected value). Nothing is defaulted.

Examples:
    >>> from datetime import date
    >>> from calbuild.core.chrono import ISO
    >>> from calbuild.core.fields import StandardField as F
    >>> from calbuild.core.resolve import resolve_chrono_date, resolve_date
    >>> from calbuild.core.store import FieldStore
    >>> store = FieldStore().put(F.YEAR, 2000).put(F.MONTH_OF_YEAR, 2).put(F.DAY_OF_MONTH, 29)
    >>> resolve_date(store)
    datetime.date(2000, 2, 29)
    >>> resolve_chrono_date(store, ISO, seed=date(1999, 1, 1))
    datetime.date(2000, 2, 29)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date
from functools import cmp_to_key
from typing import Final

from .chrono import ChronoDateView, Chronology, Clock
from .constants import INT32_MAX, INT32_MIN
from .errors import InvalidValueError, UnresolvableError
from .fields import DateTimeField, StandardField, field_value
from .store import FieldStore
from .values import (
    LocalDateTime,
    LocalTime,
    date_of,
    date_of_epoch_day,
    date_of_year_day,
    datetime_of,
    time_of,
    time_of_nano_of_day,
)

__all__ = [
    "DATE_PATTERNS",
    "TIME_PATTERNS",
    "resolve_date",
    "resolve_time",
    "resolve_datetime",
    "field_order",
    "sort_fields",
    "resolve_chrono_date",
    "resolve_chrono_date_now",
    "build_chrono_date_view",
]

logger = logging.getLogger(__name__)

_Y = StandardField.YEAR
_MOY = StandardField.MONTH_OF_YEAR
_DOM = StandardField.DAY_OF_MONTH
_DOY = StandardField.DAY_OF_YEAR
_ED = StandardField.EPOCH_DAY
_HOD = StandardField.HOUR_OF_DAY
_MOH = StandardField.MINUTE_OF_HOUR
_SOM = StandardField.SECOND_OF_MINUTE
_NOS = StandardField.NANO_OF_SECOND
_NOD = StandardField.NANO_OF_DAY


def _int32(store: FieldStore, field: StandardField) -> int:
    value = store.get(field)
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidValueError(
            f"value for {field_value(field)} does not fit in 32 bits: {value}"
        )
    return value


# Ordered (required fields, builder) pairs. First full match wins.
DATE_PATTERNS: Final[tuple[tuple[tuple[StandardField, ...], Callable[[FieldStore], date]], ...]] = (
    ((_Y, _MOY, _DOM), lambda s: date_of(_int32(s, _Y), _int32(s, _MOY), _int32(s, _DOM))),
    ((_ED,), lambda s: date_of_epoch_day(s.get(_ED))),
    ((_Y, _DOY), lambda s: date_of_year_day(_int32(s, _Y), _int32(s, _DOY))),
)

TIME_PATTERNS: Final[tuple[tuple[tuple[StandardField, ...], Callable[[FieldStore], LocalTime]], ...]] = (
    (
        (_HOD, _MOH, _SOM, _NOS),
        lambda s: time_of(_int32(s, _HOD), _int32(s, _MOH), _int32(s, _SOM), _int32(s, _NOS)),
    ),
    ((_HOD, _MOH, _SOM), lambda s: time_of(_int32(s, _HOD), _int32(s, _MOH), _int32(s, _SOM))),
    ((_HOD, _MOH), lambda s: time_of(_int32(s, _HOD), _int32(s, _MOH))),
    ((_NOD,), lambda s: time_of_nano_of_day(s.get(_NOD))),
)


def _has_all(store: FieldStore, fields: Iterable[StandardField]) -> bool:
    return all(store.contains(f) for f in fields)


def resolve_date(store: FieldStore) -> date:
    """
    Resolve a date from standard fields using the fixed pattern table.

    Args:
        store (FieldStore): Observations to read.

    Returns:
        date: The date built from the first matching pattern.

    Raises:
        UnresolvableError: If no pattern's fields are all present.
        InvalidValueError: If the matched values do not form a valid date.

    Notes:
        Extra fields are ignored. {year, month_of_year, day_of_month} alongside a
        contradicting epoch_day resolves from year/month/day and the epoch_day is
        never consulted.
    """
    for required, build in DATE_PATTERNS:
        if _has_all(store, required):
            logger.debug("date pattern matched: %s", [f.value for f in required])
            return build(store)
    raise UnresolvableError(f"insufficient fields to build a date: {store!r}")


def resolve_time(store: FieldStore) -> LocalTime:
    """
    Resolve a time-of-day from standard fields using the fixed pattern table.

    Missing lower-precision components (seconds, nanos) are zero.

    Raises:
        UnresolvableError: If no pattern's fields are all present.
        InvalidValueError: If the matched values do not form a valid time.
    """
    for required, build in TIME_PATTERNS:
        if _has_all(store, required):
            logger.debug("time pattern matched: %s", [f.value for f in required])
            return build(store)
    raise UnresolvableError(f"insufficient fields to build a time: {store!r}")


def resolve_datetime(store: FieldStore) -> LocalDateTime:
    """Resolve date and time independently and pair them; either failure propagates."""
    return datetime_of(resolve_date(store), resolve_time(store))


# ============================================================================
# Generic chronology-driven resolution
# ============================================================================


def field_order(chronology: Chronology) -> Callable[[DateTimeField, DateTimeField], int]:
    """
    Comparator placing coarser fields first.

    Args:
        chronology (Chronology): Supplies estimated unit durations when either
            operand is an extension field.

    Returns:
        Callable: cmp-style function (negative when the first field sorts first).

    Notes:
        Two standard fields compare by rank; any pair involving an extension field
        compares by estimated base-unit duration. Mixed ties are not transitive: a
        DAYS extension field ties with both DAY_OF_MONTH and EPOCH_DAY while those
        two are strictly ordered, so the relative order in such a mix can depend on
        store insertion order. Sorting is stable and never fails either way.
    """

    def compare(a: DateTimeField, b: DateTimeField) -> int:
        if isinstance(a, StandardField) and isinstance(b, StandardField):
            ka, kb = a.rank, b.rank
        else:
            ka = chronology.estimated_duration(a.base_unit)
            kb = chronology.estimated_duration(b.base_unit)
        # descending
        return (ka < kb) - (ka > kb)

    return compare


def sort_fields(fields: Iterable[DateTimeField], chronology: Chronology) -> list[DateTimeField]:
    """Sort fields coarse-to-fine under `chronology` (stable for ties)."""
    return sorted(fields, key=cmp_to_key(field_order(chronology)))


def resolve_chrono_date(store: FieldStore, chronology: Chronology, seed: date) -> date:
    """
    Fold every stored field into `seed` under `chronology`, coarsest first.

    Args:
        store (FieldStore): Observations, standard and extension.
        chronology (Chronology): Calendar system performing each fold.
        seed (date): Starting date. Fields absent from the store keep the seed's value.

    Returns:
        date: The date after the last fold.

    Raises:
        UnresolvableError: If the store is empty.
        InvalidValueError: If the chronology rejects any fold step; no partial result
            is returned.
    """
    if not len(store):
        raise UnresolvableError("no fields to resolve a date from")
    current = seed
    for f in sort_fields(store.fields(), chronology):
        value = store.get(f)
        current = chronology.fold_field(current, f, value)
        logger.debug("folded %s=%s -> %s", field_value(f), value, current)
    return current


def resolve_chrono_date_now(
    store: FieldStore, chronology: Chronology, clock: Clock | None = None
) -> date:
    """Like `resolve_chrono_date`, seeded with today's date in `chronology`."""
    return resolve_chrono_date(store, chronology, chronology.date_now(clock))


def build_chrono_date_view(
    store: FieldStore, chronology: Chronology, seed: date | None = None
) -> ChronoDateView:
    """Resolve through `chronology` and pair the date with it (seed defaults to today)."""
    if seed is None:
        resolved = resolve_chrono_date_now(store, chronology)
    else:
        resolved = resolve_chrono_date(store, chronology, seed)
    return ChronoDateView(local_date=resolved, chronology=chronology)

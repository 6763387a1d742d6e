"""
Batch resolution of polars DataFrames whose columns are field names.

Purpose
- Treat each row of a DataFrame as a bag of field observations and resolve it with
  calbuild.core.resolve, appending the result as a typed column.

Column mapping
- Columns named after a StandardField value ("year", "epoch_day", ...) or one of the
  supplied extension fields ("quarter_of_year") are consumed; others pass through.
- Consumed columns must have an integer dtype. Nulls mean "not observed" for that row.

Output dtypes
- "date" / "chrono_date" → pl.Date
- "time" → pl.Time (microsecond precision)
- "datetime" → pl.Datetime("us")

Notes
- Resolution errors are not swallowed: the first failing row raises IoFrameError with
  the core error chained.
- With kind "chrono_date" and no seed, every row is seeded with the same "today".

Examples
```python
import polars as pl
from calbuild.io import FrameSettings, resolve_frame

df = pl.DataFrame({"year": [2012, 2013], "day_of_year": [60, 60]})
resolve_frame(df)["resolved"].to_list()  # [date(2012, 2, 29), date(2013, 3, 1)]
```
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

import polars as pl

from calbuild.core.chrono import Chronology
from calbuild.core.errors import CalendricalError, GrammarError
from calbuild.core.fields import DateTimeField, ExtensionField, field_from_value
from calbuild.core.resolve import (
    resolve_chrono_date,
    resolve_date,
    resolve_datetime,
    resolve_time,
)
from calbuild.core.store import FieldStore

from .config import FrameSettings
from .errors import IoFrameError

__all__ = [
    "field_columns",
    "store_from_row",
    "resolve_frame",
]

logger = logging.getLogger(__name__)

_OUTPUT_DTYPES: dict[str, object] = {
    "date": pl.Date,
    "chrono_date": pl.Date,
    "time": pl.Time,
    "datetime": pl.Datetime("us"),
}


def field_columns(
    df: pl.DataFrame, extensions: Iterable[ExtensionField] = ()
) -> dict[str, DateTimeField]:
    """
    Map the DataFrame's field-named columns to fields.

    Raises:
        IoFrameError: If a field column does not have an integer dtype.
    """
    exts = tuple(extensions)
    found: dict[str, DateTimeField] = {}
    for col in df.columns:
        try:
            f = field_from_value(col, exts)
        except GrammarError:
            continue
        dtype = df.schema[col]
        if not dtype.is_integer():
            raise IoFrameError(f"field column {col!r} must be an integer dtype, got {dtype}")
        found[col] = f
    return found


def store_from_row(row: Mapping[DateTimeField, Any]) -> FieldStore:
    """Build a store from one row, skipping null observations."""
    store = FieldStore()
    for f, v in row.items():
        if v is not None:
            store.put(f, v)
    return store


def _resolver(settings: FrameSettings, chrono: Chronology, seed: date | None):
    kind = settings.kind
    if kind == "date":
        return resolve_date
    if kind == "time":
        return lambda s: resolve_time(s).to_time()
    if kind == "datetime":
        return lambda s: resolve_datetime(s).to_datetime()
    fold_seed = seed if seed is not None else chrono.date_now()
    return lambda s: resolve_chrono_date(s, chrono, fold_seed)


def resolve_frame(
    df: pl.DataFrame,
    settings: FrameSettings | None = None,
    *,
    extensions: Iterable[ExtensionField] = (),
) -> pl.DataFrame:
    """
    Resolve every row of `df` and append the result column.

    Args:
        df (pl.DataFrame): Frame with field-named integer columns.
        settings (FrameSettings | None): Resolution settings (default: FrameSettings()).
        extensions (Iterable[ExtensionField]): Extension fields to recognize as columns.

    Returns:
        pl.DataFrame: `df` plus `settings.output_column` (minus field columns when
        `settings.drop_fields`).

    Raises:
        IoFrameError: If no field columns are present or a row fails to resolve.
        IoConfigError: If the chronology or seed settings are invalid.
    """
    s = settings or FrameSettings()
    columns = field_columns(df, extensions)
    if not columns:
        raise IoFrameError(f"no field columns found in {df.columns!r}")

    chrono = s.chronology_impl()
    resolve = _resolver(s, chrono, s.seed_date())
    fields = list(columns.values())

    results: list[Any] = []
    for i, row in enumerate(df.select(list(columns)).iter_rows()):
        store = store_from_row(dict(zip(fields, row)))
        try:
            results.append(resolve(store))
        except CalendricalError as exc:
            raise IoFrameError(f"row {i}: {exc}") from exc

    logger.debug("resolved %d rows as %s into %r", len(results), s.kind, s.output_column)
    out = df.with_columns(pl.Series(s.output_column, results, dtype=_OUTPUT_DTYPES[s.kind]))
    if s.drop_fields:
        out = out.drop([c for c in columns if c != s.output_column])
    return out

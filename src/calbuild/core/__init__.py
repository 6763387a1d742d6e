"""
Core package aggregator for calbuild contracts (fields, store, values, chronologies, resolvers).

## Contracts (single source of truth)
- Fields: units, the ordered StandardField enum, ExtensionField, lower_snake helpers.
- Store: FieldStore, the mutable field → value accumulator.
- Values: LocalTime/LocalDateTime models and date/time constructors.
- Chronologies: the Chronology protocol, IsoChronology, registry, ChronoDateView.
- Resolve: fixed-pattern builders and the coarse-to-fine chronology fold.
- Quarter: QuarterOfYear and the QUARTER_OF_YEAR extension field.
- Errors/Constants/Typing: error taxonomy, numeric constants, aliases.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Naming policy: enum `.value` and field names are lower_snake.
- Stores are not synchronized; use one store per resolution task.

## Downstream usage
- calbuild.io: maps polars column names to fields via `field_from_value` and resolves
  each row with `resolve_*`.

## Examples
```python
from datetime import date

from calbuild.core.chrono import ISO
from calbuild.core.fields import StandardField
from calbuild.core.quarter import QuarterOfYear
from calbuild.core.resolve import resolve_chrono_date, resolve_date
from calbuild.core.store import FieldStore

store = FieldStore().put(StandardField.YEAR, 2012).put(StandardField.DAY_OF_YEAR, 60)
resolve_date(store)  # date(2012, 2, 29)

store = QuarterOfYear.Q3.to_store().put(StandardField.YEAR, 2012)
resolve_chrono_date(store, ISO, seed=date(2000, 2, 10))  # date(2012, 8, 10)
```
"""

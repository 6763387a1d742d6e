"""
calbuild.io: Configuration and polars batch resolution.

## Responsibilities
- Load FrameSettings with precedence env > TOML > defaults.
- Resolve DataFrames whose columns are field names, row by row, into typed date/time columns.

## Public API
- FrameSettings: configuration for batch resolution.
- resolve_frame: resolve every row of a DataFrame and append the result column.

## Import DAG discipline
- Depends only on stdlib, polars, and calbuild.core.*.
- calbuild.core MUST NOT import this package.

## Examples
```python
import polars as pl
from calbuild.core.quarter import QUARTER_OF_YEAR
from calbuild.io import FrameSettings, resolve_frame

df = pl.DataFrame({"year": [2012], "quarter_of_year": [3]})
settings = FrameSettings(kind="chrono_date", seed="2000-02-10")
resolve_frame(df, settings, extensions=[QUARTER_OF_YEAR])  # resolved = 2012-08-10
```
"""

from __future__ import annotations

from .config import FrameSettings
from .frames import resolve_frame

__all__ = [
    "FrameSettings",
    "resolve_frame",
]

"""
Numeric constants shared by value constructors, chronologies, and resolvers.

This module is zero-IO and uses only the Python standard library.

Notes:
    - Epoch day 0 is 1970-01-01 (ISO proleptic calendar).
    - The estimated year length is the mean Gregorian year (365.2425 days).
    - INT32_MIN/INT32_MAX bound the values the fixed-pattern resolvers hand to
      date/time constructors.
"""

from __future__ import annotations

from datetime import date
from typing import Final

__all__ = [
    "EPOCH_DATE",
    "INT32_MIN",
    "INT32_MAX",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_DAY",
    "SECONDS_PER_YEAR",
]

EPOCH_DATE: Final[date] = date(1970, 1, 1)

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

NANOS_PER_SECOND: Final[int] = 1_000_000_000
NANOS_PER_MINUTE: Final[int] = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: Final[int] = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: Final[int] = 24 * NANOS_PER_HOUR

SECONDS_PER_DAY: Final[int] = 86_400
# 365.2425 days
SECONDS_PER_YEAR: Final[int] = 31_556_952

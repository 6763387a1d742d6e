"""
Lightweight typing aliases used across the core field model and resolvers.

Provides minimal NewTypes and aliases to improve readability and static checks.
This module contains no runtime logic and is zero-IO.

Examples:
    Use aliases in annotations.

    >>> from calbuild.core.typing import EpochDay, FieldValue
    >>> def next_day(n: EpochDay) -> EpochDay:
    ...     return EpochDay(int(n) + 1)
    >>> next_day(EpochDay(0))
    1
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import NewType

__all__ = [
    "FieldValue",
    "EpochDay",
    "NanoOfDay",
    "DateFold",
]

# Stored field values are 64-bit signed integers; Python ints are unbounded.
FieldValue = int

EpochDay = NewType("EpochDay", int)
NanoOfDay = NewType("NanoOfDay", int)

# Applies one (value) observation of an extension field to a date.
DateFold = Callable[[date, int], date]

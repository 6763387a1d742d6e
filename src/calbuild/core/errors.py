"""
Core exception types raised by the field store, value constructors, and resolvers.

Provides typed exceptions for calendrical failures:
- MissingFieldError when a field value is read but was never recorded.
- UnresolvableError when no recognized field combination is present.
- InvalidValueError when a date/time constructor or chronology fold rejects a value.
- GrammarError for field-name normalization failures.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - All calendrical errors derive from CalendricalError (a ValueError), so callers
      can catch the family in one place.
    - Resolvers never retry or coerce: errors surface to the immediate caller.

Examples:
    Catch a missing-field lookup.

    >>> from calbuild.core.errors import MissingFieldError
    >>> from calbuild.core.fields import StandardField
    >>> from calbuild.core.store import FieldStore
    >>> try:
    ...     FieldStore().get(StandardField.YEAR)
    ... except MissingFieldError as e:
    ...     msg = str(e)
    >>> "year" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "CalendricalError",
    "MissingFieldError",
    "UnresolvableError",
    "InvalidValueError",
    "GrammarError",
]


class CalendricalError(ValueError):
    """Base class for field-store and resolution failures."""


class MissingFieldError(CalendricalError):
    """A field was read from a store that holds no value for it."""


class UnresolvableError(CalendricalError):
    """No recognized field pattern matched, or there was nothing to fold."""


class InvalidValueError(CalendricalError):
    """A constructor or chronology fold rejected a numeric value (out of range, non-existent date)."""


class GrammarError(ValueError):
    """Field-name normalization failure (e.g., not lower_snake or unknown field name)."""

"""
Custom exceptions for the calbuild.io module.

Purpose
- Provide IO-layer specific error types for configuration and batch frame resolution.
- Keep calbuild.core as the source of truth for calendrical errors (see calbuild.core.errors).

Source of truth and boundaries
- calbuild.core.errors.{MissingFieldError, UnresolvableError, InvalidValueError} are raised
  by the field store, constructors, and resolvers.
- calbuild.io raises Io* errors for configuration and frame concerns:
  - IoConfigError: invalid or unsupported configuration.
  - IoFrameError: a DataFrame has no usable field columns, or one of its rows failed to
    resolve (the core error is chained as __cause__).

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for IO-related errors in calbuild.io.

    Notes:
        Use this as a catch-all for IO-layer failures, distinct from calbuild.core errors.
    """


class IoConfigError(IoError):
    """
    Raised when IO configuration is invalid or unsupported.

    Examples:
        - Unknown chronology id
        - Seed that is not an ISO YYYY-MM-DD date
    """


class IoFrameError(IoError):
    """
    Raised when a DataFrame cannot be resolved row by row.

    Notes:
        The failing row index is included in the message; the underlying core error is
        available as ``__cause__``.
    """

"""
Mutable accumulator of field observations.

`FieldStore` holds at most one integer value per field. Standard and extension
fields share a single mapping (the field union is the key), so containment and
lookup treat both variants identically.

Notes:
    - Re-adding a field overwrites silently.
    - No range or cross-field validation happens here; invalid values surface only
      when a resolver hands them to a constructor or chronology.
    - Not synchronized. One store per resolution task; see calbuild.core.resolve.

Examples:
    >>> from calbuild.core.fields import StandardField
    >>> from calbuild.core.store import FieldStore
    >>> store = FieldStore().put(StandardField.YEAR, 2012).put(StandardField.MONTH_OF_YEAR, 7)
    >>> store.get(StandardField.YEAR)
    2012
    >>> StandardField.MONTH_OF_YEAR in store
    True
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from .errors import MissingFieldError
from .fields import DateTimeField, ExtensionField, StandardField, field_value

__all__ = ["FieldStore"]


class FieldStore:
    """
    Field → value accumulator with chained mutation.

    Examples:
        >>> from calbuild.core.fields import StandardField
        >>> FieldStore.of(StandardField.EPOCH_DAY, 0)
        FieldStore({'epoch_day': 0})
    """

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[DateTimeField, int] = {}

    @classmethod
    def of(cls, field: DateTimeField, value: int) -> FieldStore:
        """Create a store seeded with a single observation."""
        return cls().put(field, value)

    @classmethod
    def from_mapping(cls, mapping: Mapping[DateTimeField, int]) -> FieldStore:
        store = cls()
        for f, v in mapping.items():
            store.put(f, v)
        return store

    def contains(self, field: DateTimeField) -> bool:
        return field in self._values

    def get(self, field: DateTimeField) -> int:
        """
        Return the recorded value for `field`.

        Raises:
            MissingFieldError: If no value has been recorded.
        """
        try:
            return self._values[field]
        except KeyError:
            raise MissingFieldError(
                f"no value recorded for field {field_value(field)!r}"
            ) from None

    def put(self, field: DateTimeField, value: int) -> FieldStore:
        """Record (or overwrite) the value for `field`; returns self for chaining."""
        self._values[field] = value
        return self

    def remove(self, field: DateTimeField) -> FieldStore:
        """Forget any value for `field`; absent fields are a no-op."""
        self._values.pop(field, None)
        return self

    def fields(self) -> list[DateTimeField]:
        return list(self._values)

    def standard_fields(self) -> list[StandardField]:
        return [f for f in self._values if isinstance(f, StandardField)]

    def extension_fields(self) -> list[ExtensionField]:
        return [f for f in self._values if isinstance(f, ExtensionField)]

    def items(self) -> list[tuple[DateTimeField, int]]:
        return list(self._values.items())

    def copy(self) -> FieldStore:
        return FieldStore.from_mapping(self._values)

    def __contains__(self, field: object) -> bool:
        return field in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[DateTimeField]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldStore):
            return self._values == other._values
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{field_value(f)!r}: {v}" for f, v in self._values.items())
        return f"FieldStore({{{body}}})"

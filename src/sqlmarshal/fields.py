"""Ordered, duplicate rejecting collections of column name/value pairs."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from sqlmarshal.errors import DuplicateFieldError


class FieldWithValue(NamedTuple):
    """A column name and its SQL literal."""

    name: str
    value: str


class FieldsWithValue:
    """Column name/value pairs kept in insertion order.

    Names are unique; adding a name twice raises DuplicateFieldError.
    """

    def __init__(self, *fields: FieldWithValue) -> None:
        self._fields: dict[str, FieldWithValue] = {}
        self.add(*fields)

    def add(self, *fields: FieldWithValue) -> None:
        """Add fields, raising DuplicateFieldError without adding any on a collision."""
        seen: set[str] = set()
        for f in fields:
            if f.name in self._fields or f.name in seen:
                raise DuplicateFieldError(f.name)
            seen.add(f.name)
        for f in fields:
            self._fields[f.name] = f

    def merge(self, other: FieldsWithValue) -> None:
        """Append every field of other, failing on any overlapping name."""
        self.add(*other)

    def pop(self, name: str) -> FieldWithValue | None:
        """Remove and return the named field, or None if it is absent."""
        return self._fields.pop(name, None)

    def pairs(self, separator: str) -> list[str]:
        """Return ``name<separator>value`` for every field in order."""
        return [f"{f.name}{separator}{f.value}" for f in self._fields.values()]

    def names(self) -> list[str]:
        return list(self._fields)

    def values(self) -> list[str]:
        return [f.value for f in self._fields.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[FieldWithValue]:
        return iter(list(self._fields.values()))

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldsWithValue({', '.join(self.pairs('='))})"

"""Type definitions for the sqlmarshal library."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SQLKind(Enum):
    """Abstract SQL kinds a record field can map to."""

    INVALID = "invalid"
    FOREIGN_KEY = "foreign_key"

    # Character strings
    CHAR = "char"
    VARCHAR = "varchar"
    NCHAR = "nchar"
    NVARCHAR = "nvarchar"

    # Bit strings
    BIT = "bit"
    BIT_VARYING = "varbit"

    # Numbers
    INT = "integer"
    SMALL_INT = "smallint"
    BIG_INT = "bigint"
    FLOAT = "float"
    REAL = "real"
    DOUBLE = "double"
    NUMERIC = "numeric"
    DECIMAL = "decimal"

    @property
    def is_scalar(self) -> bool:
        """Return whether this kind is stored in a single column of its own."""
        return self not in (SQLKind.INVALID, SQLKind.FOREIGN_KEY)


# Mapping from kind names to SQLKind values
SQL_KIND_NAMES: dict[str, SQLKind] = {kind.value: kind for kind in SQLKind if kind.is_scalar}

# Column name a foreign key points to when the referenced record declares no primary key
SURROGATE_ID = "_ID"


@dataclass(frozen=True)
class TokenizedField:
    """A single column of a tokenized record: name, kind and key flags.

    Foreign key fields carry the tokenized schema of the record they
    reference; every other field carries a scalar kind and no reference.
    """

    name: str
    kind: SQLKind
    is_primary_key: bool = False
    is_unique: bool = False
    references: TokenizedSchema | None = None

    def __post_init__(self) -> None:
        if self.kind is SQLKind.INVALID:
            raise ValueError(f"Field '{self.name}' has no valid SQL kind")
        if (self.kind is SQLKind.FOREIGN_KEY) != (self.references is not None):
            raise ValueError(
                f"Field '{self.name}' must reference a schema if and only if it is a foreign key"
            )

    @property
    def is_foreign_key(self) -> bool:
        return self.kind is SQLKind.FOREIGN_KEY


@dataclass(frozen=True)
class TokenizedSchema:
    """Driver independent shape of one record type.

    Fields keep declaration order, which drives the column order of every
    generated statement.
    """

    name: str
    fields: tuple[TokenizedField, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple.
        object.__setattr__(self, "fields", tuple(self.fields))

    def primary(self) -> list[str]:
        """Return the names of the primary key fields in declaration order."""
        return [f.name for f in self.fields if f.is_primary_key]

    def get_field(self, name: str) -> TokenizedField | None:
        """Get a field by name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def field_kind(self, name: str) -> SQLKind | None:
        """Return the SQL kind of the named field, or None if there is no such field."""
        f = self.get_field(name)
        if f is None:
            return None
        return f.kind


@dataclass(frozen=True)
class FieldDefinition:
    """A column to be rendered by a driver during CREATE."""

    name: str
    kind: SQLKind


@dataclass(frozen=True)
class FKDefinition:
    """A foreign key constraint to be rendered by a driver during CREATE."""

    names: tuple[str, ...]
    remote_names: tuple[str, ...]
    remote_table: str

"""Exception types raised by sqlmarshal.

Every error derives from :class:`SQLMarshalError` and from the builtin
exception it refines, so callers may catch either.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sqlmarshal.types import SQLKind


class SQLMarshalError(Exception):
    """Base class for all sqlmarshal errors."""


class TokenizationError(SQLMarshalError, ValueError):
    """A record type could not be turned into a tokenized schema."""


class UnresolvableTypeError(TokenizationError):
    """A field's type has no SQL kind mapping."""

    def __init__(self, field_name: str, annotation: Any) -> None:
        self.field_name = field_name
        self.annotation = annotation
        super().__init__(
            f"cannot resolve SQL equivalent for {field_name!r} of type {_type_name(annotation)}"
        )


class ExpectedRecordError(TokenizationError):
    """A foreign key field does not point to a record type."""

    def __init__(self, field_name: str, annotation: Any) -> None:
        self.field_name = field_name
        self.annotation = annotation
        super().__init__(
            f"field {field_name!r}: expected a record type, got {_type_name(annotation)}"
        )


class CyclicReferenceError(TokenizationError):
    """Record types reference each other in a loop."""

    def __init__(self, chain: list[str]) -> None:
        self.chain = list(chain)
        super().__init__(f"cyclic record reference: {' -> '.join(self.chain)}")


class UndefinedSQLTypeError(SQLMarshalError, ValueError):
    """Neither the driver nor the fallback driver can render a kind."""

    def __init__(self, field_name: str, kind: SQLKind) -> None:
        self.field_name = field_name
        self.kind = kind
        super().__init__(
            f"cannot determine an SQL definition for field {field_name!r} of kind "
            f"{kind.name} in the provided driver or the fallback driver"
        )


class DuplicateFieldError(SQLMarshalError, ValueError):
    """A field name was added twice to a field collection."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"field {field_name!r} already present")


class EmptyStatementError(SQLMarshalError, ValueError):
    """The statement would have nothing to create, insert or update."""


class MismatchedFieldValueCountError(SQLMarshalError, ValueError):
    """Accumulated field names and values differ in length."""

    def __init__(self, fields: int, values: int) -> None:
        self.fields = fields
        self.values = values
        super().__init__(f"the amount of fields and values differ {fields} vs {values}")


class UnsupportedShapeError(SQLMarshalError, TypeError):
    """A value is neither a record nor an accepted mapping shape."""


def _type_name(annotation: Any) -> str:
    return getattr(annotation, "__name__", None) or repr(annotation)

"""Mapping of Python field annotations to SQL kinds."""

from __future__ import annotations

import dataclasses
import types
import typing
from typing import Annotated, Any, Union

from sqlmarshal.errors import ExpectedRecordError, UnresolvableTypeError
from sqlmarshal.types import SQLKind

_NONE_TYPE = type(None)

# Checked in order: bool is a subclass of int.
_NATIVE_KINDS: tuple[tuple[type, SQLKind], ...] = (
    (bool, SQLKind.INT),
    (int, SQLKind.SMALL_INT),
    (float, SQLKind.DOUBLE),
    (str, SQLKind.VARCHAR),
)


def is_record_type(annotation: Any) -> bool:
    """Check if an annotation is a record (dataclass) type."""
    return (
        isinstance(annotation, type)
        and typing.get_origin(annotation) is None
        and dataclasses.is_dataclass(annotation)
    )


def _annotated_parts(annotation: Any) -> tuple[Any, tuple[Any, ...]] | None:
    if typing.get_origin(annotation) is Annotated:
        base, *metadata = typing.get_args(annotation)
        return base, tuple(metadata)
    return None


def _optional_target(annotation: Any) -> Any | None:
    """Return T for Optional[T] / T | None, or None for any other annotation."""
    origin = typing.get_origin(annotation)
    if origin is not Union and origin is not types.UnionType:
        return None
    members = [a for a in typing.get_args(annotation) if a is not _NONE_TYPE]
    if len(members) != 1 or len(members) == len(typing.get_args(annotation)):
        return None
    return members[0]


def resolve_type(field_name: str, annotation: Any) -> SQLKind:
    """Resolve the SQL kind for a field annotation.

    Records and optional values (a reference to a record) resolve to a
    foreign key. ``Annotated[T, SQLKind.X]`` forces kind ``X``.

    Raises:
        UnresolvableTypeError: If the annotation has no SQL equivalent.
    """
    annotated = _annotated_parts(annotation)
    if annotated is not None:
        base, metadata = annotated
        for item in metadata:
            if isinstance(item, SQLKind) and item is not SQLKind.INVALID:
                return item
        return resolve_type(field_name, base)

    if is_record_type(annotation) or _optional_target(annotation) is not None:
        return SQLKind.FOREIGN_KEY

    # Parameterized generics such as list[int] may pass isinstance(x, type).
    if isinstance(annotation, type) and typing.get_origin(annotation) is None:
        for native, kind in _NATIVE_KINDS:
            if issubclass(annotation, native):
                return kind

    raise UnresolvableTypeError(field_name, annotation)


def referenced_record(field_name: str, annotation: Any) -> type:
    """Return the record type a foreign key field points to.

    At most one level of indirection (``Optional[Record]``) is removed.

    Raises:
        ExpectedRecordError: If what remains is not a record type.
    """
    target = annotation
    annotated = _annotated_parts(target)
    if annotated is not None:
        target = annotated[0]

    inner = _optional_target(target)
    if inner is not None:
        target = inner
        annotated = _annotated_parts(target)
        if annotated is not None:
            target = annotated[0]

    if not is_record_type(target):
        raise ExpectedRecordError(field_name, target)
    return target

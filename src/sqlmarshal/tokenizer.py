"""Tokenization of record types into driver independent schemas."""

from __future__ import annotations

import dataclasses
import typing
from typing import Any

from sqlmarshal.errors import CyclicReferenceError, TokenizationError, UnsupportedShapeError
from sqlmarshal.logging import get_logger
from sqlmarshal.resolver import is_record_type, referenced_record, resolve_type
from sqlmarshal.types import SQLKind, TokenizedField, TokenizedSchema

logger = get_logger(__name__)

# Field metadata key holding the tag string, e.g. field(metadata={"sql": "primary"})
TAG_KEY = "sql"
TAG_PRIMARY = "primary"
TAG_UNIQUE = "unique"


def parse_tags(tag: str | None) -> tuple[bool, bool]:
    """Parse a comma separated tag string into (is_primary_key, is_unique).

    Unknown tokens are ignored.
    """
    is_primary_key = False
    is_unique = False
    if not tag:
        return is_primary_key, is_unique
    for token in tag.split(","):
        token = token.strip()
        if token == TAG_PRIMARY:
            is_primary_key = True
        elif token == TAG_UNIQUE:
            is_unique = True
    return is_primary_key, is_unique


def sql_field(*, primary: bool = False, unique: bool = False, **kwargs: Any) -> Any:
    """Declare a dataclass field carrying key flags.

    Accepts every keyword of :func:`dataclasses.field`::

        @dataclass
        class Person:
            id: int = sql_field(primary=True)
            email: str = sql_field(unique=True, default="")
    """
    tokens = []
    if primary:
        tokens.append(TAG_PRIMARY)
    if unique:
        tokens.append(TAG_UNIQUE)
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_KEY] = ",".join(tokens)
    return dataclasses.field(metadata=metadata, **kwargs)


def check_primary_reference(field_name: str, references: TokenizedSchema) -> None:
    """Reject a primary key reference to a record that has no primary key.

    Such a reference links through the assumed surrogate column, which no
    instance can fill, so it cannot be part of a key.
    """
    if not references.primary():
        raise TokenizationError(
            f"field {field_name!r} is a primary key but references {references.name!r}, "
            "which has no primary key"
        )


def tokenize(record_type: type, name: str | None = None) -> TokenizedSchema:
    """Return the tokenized schema of a record type.

    Args:
        record_type: A dataclass type.
        name: Table name, defaults to the type's name.

    Raises:
        UnsupportedShapeError: If record_type is not a dataclass type.
        TokenizationError: If a field cannot be resolved, including nested records.
    """
    return _tokenize_record(record_type, name, ())


def _tokenize_record(
    record_type: type, name: str | None, chain: tuple[type, ...]
) -> TokenizedSchema:
    if not is_record_type(record_type):
        raise UnsupportedShapeError(f"expected a dataclass type, got {record_type!r}")
    if record_type in chain:
        raise CyclicReferenceError([t.__name__ for t in chain] + [record_type.__name__])
    chain = chain + (record_type,)

    try:
        hints = typing.get_type_hints(record_type, include_extras=True)
    except NameError as e:
        raise TokenizationError(
            f"cannot resolve annotations of {record_type.__name__!r}: {e}"
        ) from e

    fields: list[TokenizedField] = []
    for f in dataclasses.fields(record_type):
        annotation = hints.get(f.name, f.type)
        kind = resolve_type(f.name, annotation)
        is_primary_key, is_unique = parse_tags(f.metadata.get(TAG_KEY))

        references = None
        if kind is SQLKind.FOREIGN_KEY:
            target = referenced_record(f.name, annotation)
            try:
                references = _tokenize_record(target, None, chain)
            except CyclicReferenceError:
                raise
            except TokenizationError as e:
                raise TokenizationError(
                    f"resolving foreign key for field {f.name!r}: {e}"
                ) from e
            if is_primary_key:
                check_primary_reference(f.name, references)

        fields.append(
            TokenizedField(
                name=f.name,
                kind=kind,
                is_primary_key=is_primary_key,
                is_unique=is_unique,
                references=references,
            )
        )

    schema = TokenizedSchema(name=name or record_type.__name__, fields=tuple(fields))
    logger.debug("record_tokenized", table=schema.name, fields=len(schema.fields))
    return schema

"""Tokenization of dynamically shaped records given as column mappings.

Used when there is no record type to introspect::

    schema = tokenize_mapping("Person", {
        "id": Column(int, primary=True),
        "name": str,
        "team": (team_schema, ""),
    })

The result has the same shape as :func:`sqlmarshal.tokenizer.tokenize`
output, so statement crafting does not care where a schema came from.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlmarshal.errors import CyclicReferenceError, TokenizationError, UnresolvableTypeError, UnsupportedShapeError
from sqlmarshal.logging import get_logger
from sqlmarshal.resolver import referenced_record, resolve_type
from sqlmarshal.tokenizer import check_primary_reference, parse_tags, tokenize
from sqlmarshal.types import SQLKind, TokenizedField, TokenizedSchema

logger = get_logger(__name__)


@dataclass(frozen=True)
class Column:
    """Column spec for a mapping: a type plus key flags.

    ``type`` is an annotation understood by the type resolver, an
    ``SQLKind``, or a ``TokenizedSchema`` for a foreign key.
    """

    type: Any
    primary: bool = False
    unique: bool = False


def _as_column(spec: Any) -> Column:
    if isinstance(spec, Column):
        return spec
    if isinstance(spec, tuple) and len(spec) == 2 and isinstance(spec[1], str):
        is_primary_key, is_unique = parse_tags(spec[1])
        return Column(spec[0], primary=is_primary_key, unique=is_unique)
    return Column(spec)


def _tokenize_column(name: str, spec: Any) -> TokenizedField:
    column = _as_column(spec)
    target = column.type
    references = None

    if isinstance(target, TokenizedSchema):
        kind = SQLKind.FOREIGN_KEY
        references = target
    elif isinstance(target, SQLKind):
        if not target.is_scalar:
            raise UnresolvableTypeError(name, target)
        kind = target
    else:
        kind = resolve_type(name, target)
        if kind is SQLKind.FOREIGN_KEY:
            record_type = referenced_record(name, target)
            try:
                references = tokenize(record_type)
            except CyclicReferenceError:
                raise
            except TokenizationError as e:
                raise TokenizationError(f"resolving foreign key for field {name!r}: {e}") from e

    if references is not None and column.primary:
        check_primary_reference(name, references)

    return TokenizedField(
        name=name,
        kind=kind,
        is_primary_key=column.primary,
        is_unique=column.unique,
        references=references,
    )


def tokenize_mapping(name: str, columns: Mapping[str, Any]) -> TokenizedSchema:
    """Return the tokenized schema for an ordered mapping of column specs.

    Args:
        name: Table name; required since a mapping has no type name.
        columns: Column name to spec, in column order.

    Raises:
        UnsupportedShapeError: If name is empty or columns is not a mapping of names.
        TokenizationError: If a column cannot be resolved.
    """
    if not name:
        raise UnsupportedShapeError("a column mapping needs an explicit table name")
    if not isinstance(columns, Mapping):
        raise UnsupportedShapeError(f"expected a mapping of columns, got {type(columns).__name__}")

    fields: list[TokenizedField] = []
    for column_name, spec in columns.items():
        if not isinstance(column_name, str):
            raise UnsupportedShapeError(f"column names must be strings, got {column_name!r}")
        fields.append(_tokenize_column(column_name, spec))

    schema = TokenizedSchema(name=name, fields=tuple(fields))
    logger.debug("mapping_tokenized", table=schema.name, fields=len(schema.fields))
    return schema

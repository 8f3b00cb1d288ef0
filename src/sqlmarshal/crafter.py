"""Crafting of CREATE, INSERT and UPDATE statements from tokenized schemas.

Column order always follows field declaration order. CREATE lists column
definitions, then foreign key constraints, then the primary key. Foreign
key fields expand into one ``<field>_<remote pk>_fk`` column per primary
key column of the referenced record, in the referenced record's order.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from sqlmarshal.drivers import SQLDriver, define
from sqlmarshal.errors import (
    EmptyStatementError,
    MismatchedFieldValueCountError,
    TokenizationError,
    UnsupportedShapeError,
)
from sqlmarshal.fields import FieldsWithValue, FieldWithValue
from sqlmarshal.logging import get_logger
from sqlmarshal.stringify import stringify
from sqlmarshal.types import SURROGATE_ID, FieldDefinition, FKDefinition, SQLKind, TokenizedSchema

logger = get_logger(__name__)

CREATE_TEMPLATE = "CREATE TABLE {table} ({definitions});"
INSERT_TEMPLATE = "INSERT INTO {table} ({columns}) VALUES ({values});"
UPDATE_TEMPLATE = "UPDATE {table} SET {assignments} WHERE {conditions};"

_MISSING = object()


def fk_column_name(field_name: str, remote_name: str) -> str:
    """Return the local column name holding remote_name for a foreign key field."""
    return f"{field_name}_{remote_name}_fk"


def _field_value(instance: Any, name: str) -> Any:
    if isinstance(instance, Mapping):
        return instance.get(name, _MISSING)
    return getattr(instance, name, _MISSING)


def fields_and_types(
    schema: TokenizedSchema,
) -> tuple[list[FieldDefinition], list[FKDefinition], list[str]]:
    """Return column definitions, foreign key definitions and primary key names.

    A foreign key to a record without a primary key becomes a single BIGINT
    column named after the field, referencing an assumed ``_ID`` column.
    A foreign key tagged primary puts the columns it expands into in the
    primary key; the tokenizers reject one tagged primary that has no
    columns to expand into.
    """
    definitions: list[FieldDefinition] = []
    fks: list[FKDefinition] = []
    pks: list[str] = []

    for f in schema.fields:
        remote = f.references
        if remote is None:
            definitions.append(FieldDefinition(name=f.name, kind=f.kind))
            if f.is_primary_key:
                pks.append(f.name)
            continue

        pk = remote.primary()
        if not pk:
            definitions.append(FieldDefinition(name=f.name, kind=SQLKind.BIG_INT))
            fks.append(
                FKDefinition(names=(f.name,), remote_names=(SURROGATE_ID,), remote_table=remote.name)
            )
            continue

        names: list[str] = []
        for pk_name in pk:
            kind = remote.field_kind(pk_name)
            if kind is None:
                raise TokenizationError(
                    f"cannot determine the type for referenced pk {pk_name!r} in type {remote.name!r}"
                )
            name = fk_column_name(f.name, pk_name)
            names.append(name)
            definitions.append(FieldDefinition(name=name, kind=kind))
        fks.append(FKDefinition(names=tuple(names), remote_names=tuple(pk), remote_table=remote.name))
        if f.is_primary_key:
            pks.extend(names)

    return definitions, fks, pks


def primary_fields_and_values(
    remote: TokenizedSchema, field_name: str, value: Any
) -> FieldsWithValue:
    """Return the foreign key columns of field_name for the referenced record value."""
    fields = FieldsWithValue()
    for pk_name in remote.primary():
        literal = stringify(_field_value(value, pk_name))
        if literal is None:
            raise UnsupportedShapeError(
                f"cannot determine primary key values for field {field_name!r}, failed on {pk_name!r}"
            )
        fields.add(FieldWithValue(fk_column_name(field_name, pk_name), literal))
    return fields


def fields_and_values(schema: TokenizedSchema, instance: Any) -> FieldsWithValue:
    """Return the column/literal pairs of an instance in column order.

    Values that cannot be turned into a literal (None, missing, unsupported
    types) are skipped.
    """
    fields = FieldsWithValue()
    for f in schema.fields:
        value = _field_value(instance, f.name)

        if f.references is not None:
            if value is _MISSING or value is None:
                logger.debug("value_skipped", table=schema.name, field=f.name)
                continue
            fields.merge(primary_fields_and_values(f.references, f.name, value))
            continue

        literal = None if value is _MISSING else stringify(value)
        if literal is None:
            logger.debug("value_skipped", table=schema.name, field=f.name)
            continue
        fields.add(FieldWithValue(f.name, literal))
    return fields


def pks_fields_and_values(
    schema: TokenizedSchema, instance: Any
) -> tuple[FieldsWithValue, FieldsWithValue]:
    """Return fields_and_values split into (primary key columns, other columns).

    A foreign key that is part of the primary key contributes every column
    it expanded into.
    """
    fields = fields_and_values(schema, instance)
    conditions = FieldsWithValue()
    for f in schema.fields:
        if not f.is_primary_key:
            continue
        if f.references is not None:
            names = [fk_column_name(f.name, pk_name) for pk_name in f.references.primary()]
        else:
            names = [f.name]
        for name in names:
            popped = fields.pop(name)
            if popped is not None:
                conditions.add(popped)
    return conditions, fields


def craft_create(
    driver: SQLDriver,
    table: str,
    fields: Sequence[FieldDefinition],
    fks: Sequence[FKDefinition],
    pks: Sequence[str],
) -> str:
    """Return a CREATE TABLE statement.

    Raises:
        EmptyStatementError: If there are no fields.
        UndefinedSQLTypeError: If a field kind cannot be rendered.
    """
    if not fields:
        raise EmptyStatementError(f"the table {table!r} has no fields")

    definitions = [define(f.kind, f.name, driver) for f in fields]
    definitions.extend(driver.define_fk(fk.remote_table, fk.names, fk.remote_names) for fk in fks)
    pk_definition = driver.define_pk(pks)
    if pk_definition is not None:
        definitions.append(pk_definition)

    statement = CREATE_TEMPLATE.format(table=table, definitions=", ".join(definitions))
    logger.debug("statement_crafted", kind="create", table=table, columns=len(fields))
    return statement


def craft_insert(table: str, fields: FieldsWithValue) -> str:
    """Return an INSERT statement for the collected fields.

    Raises:
        EmptyStatementError: If there are no fields.
        MismatchedFieldValueCountError: If names and values differ in count.
    """
    names = fields.names()
    values = fields.values()
    if len(names) != len(values):
        raise MismatchedFieldValueCountError(len(names), len(values))
    if not names:
        raise EmptyStatementError(
            f"could not determine fields and values to insert into {table!r}, "
            "the resulting query would be invalid"
        )

    statement = INSERT_TEMPLATE.format(table=table, columns=", ".join(names), values=", ".join(values))
    logger.debug("statement_crafted", kind="insert", table=table, columns=len(names))
    return statement


def craft_update(table: str, conditions: FieldsWithValue, fields: FieldsWithValue) -> str:
    """Return an UPDATE statement setting fields where all conditions hold.

    Raises:
        EmptyStatementError: If there are no conditions or nothing to set.
    """
    if not len(conditions):
        raise EmptyStatementError(f"cannot update {table!r} without primary key values")
    if not len(fields):
        raise EmptyStatementError(f"nothing to update in {table!r} besides its primary key")

    statement = UPDATE_TEMPLATE.format(
        table=table,
        assignments=", ".join(fields.pairs("=")),
        conditions=" AND ".join(conditions.pairs("=")),
    )
    logger.debug("statement_crafted", kind="update", table=table, columns=len(fields))
    return statement

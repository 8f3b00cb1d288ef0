"""Marshaller: the public entry point binding a record to its schema."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlmarshal.crafter import (
    craft_create,
    craft_insert,
    craft_update,
    fields_and_types,
    fields_and_values,
    pks_fields_and_values,
)
from sqlmarshal.drivers import ANSI_DRIVER, SQLDriver
from sqlmarshal.errors import UnsupportedShapeError
from sqlmarshal.mapping import tokenize_mapping
from sqlmarshal.resolver import is_record_type
from sqlmarshal.tokenizer import tokenize
from sqlmarshal.types import TokenizedSchema


@dataclass(frozen=True)
class Marshaller:
    """Produces SQL statements for one record type.

    The schema is tokenized once at construction and reused by every call::

        m = Marshaller.new(Person)
        m.create()
        m.insert(Person(id=1, name="a"))
        m.update_primary_key(Person(id=1, name="b"))
    """

    schema: TokenizedSchema
    record_type: type | None = None

    @classmethod
    def new(cls, record: Any, name: str | None = None) -> Marshaller:
        """Create a marshaller for a record.

        Args:
            record: A dataclass type or instance, a mapping of column specs
                (see :func:`sqlmarshal.mapping.tokenize_mapping`) or an
                already tokenized schema.
            name: Table name override; required for mappings.

        Raises:
            UnsupportedShapeError: If record has none of the accepted shapes.
            TokenizationError: If the record cannot be tokenized.
        """
        if isinstance(record, TokenizedSchema):
            if name:
                record = dataclasses.replace(record, name=name)
            return cls(schema=record)
        if is_record_type(record):
            return cls(schema=tokenize(record, name), record_type=record)
        if dataclasses.is_dataclass(record):
            record_type = type(record)
            return cls(schema=tokenize(record_type, name), record_type=record_type)
        if isinstance(record, Mapping):
            return cls(schema=tokenize_mapping(name or "", record))
        raise UnsupportedShapeError(
            f"expected a dataclass, a column mapping or a tokenized schema, got {type(record).__name__}"
        )

    @property
    def name(self) -> str:
        """The table name."""
        return self.schema.name

    def create(self, driver: SQLDriver | None = None) -> str:
        """Return the CREATE TABLE statement, rendered by driver (ANSI by default)."""
        fields, fks, pks = fields_and_types(self.schema)
        return craft_create(driver or ANSI_DRIVER, self.name, fields, fks, pks)

    def insert(self, instance: Any) -> str:
        """Return the INSERT statement for instance."""
        self._check_instance(instance)
        return craft_insert(self.name, fields_and_values(self.schema, instance))

    def update_primary_key(self, instance: Any) -> str:
        """Return an UPDATE of instance's non key columns where its primary key matches."""
        self._check_instance(instance)
        conditions, fields = pks_fields_and_values(self.schema, instance)
        return craft_update(self.name, conditions, fields)

    def _check_instance(self, instance: Any) -> None:
        if self.record_type is not None:
            if not isinstance(instance, self.record_type):
                raise UnsupportedShapeError(
                    f"expected an instance of {self.record_type.__name__}, got {type(instance).__name__}"
                )
        elif instance is None:
            raise UnsupportedShapeError(f"expected a record for {self.name!r}, got None")


def new_marshaller(record: Any, name: str | None = None) -> Marshaller:
    """Create a marshaller for a record; see :meth:`Marshaller.new`."""
    return Marshaller.new(record, name)

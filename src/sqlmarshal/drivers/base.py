"""SQL driver capability: dialect specific rendering of columns and keys."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from sqlmarshal.types import SQLKind

FK_TEMPLATE = "FOREIGN KEY ({local}) REFERENCES {table} ({remote}) ON DELETE CASCADE ON UPDATE CASCADE"
PK_TEMPLATE = "PRIMARY KEY ({columns})"
COLUMN_TEMPLATE = "{name} {type}"


class SQLDriver(ABC):
    """Renders abstract SQL kinds and key constraints for one dialect."""

    name: str = ""

    @abstractmethod
    def define(self, kind: SQLKind, column_name: str) -> str | None:
        """Return the column definition for kind, or None if the dialect lacks it."""

    @abstractmethod
    def define_fk(
        self, remote_table: str, local_names: Sequence[str], remote_names: Sequence[str]
    ) -> str:
        """Return a foreign key constraint from local_names to remote_table(remote_names)."""

    @abstractmethod
    def define_pk(self, column_names: Sequence[str]) -> str | None:
        """Return the primary key constraint, or None if column_names is empty."""


class TypeTableDriver(SQLDriver):
    """Driver whose column types come from a kind -> type name table.

    Subclasses only set ``type_names``; kinds missing from the table are
    left to the fallback driver.
    """

    type_names: Mapping[SQLKind, str] = MappingProxyType({})

    def define(self, kind: SQLKind, column_name: str) -> str | None:
        type_name = self.type_names.get(kind)
        if type_name is None:
            return None
        return COLUMN_TEMPLATE.format(name=column_name, type=type_name)

    def define_fk(
        self, remote_table: str, local_names: Sequence[str], remote_names: Sequence[str]
    ) -> str:
        return FK_TEMPLATE.format(
            local=", ".join(local_names),
            table=remote_table,
            remote=", ".join(remote_names),
        )

    def define_pk(self, column_names: Sequence[str]) -> str | None:
        if not column_names:
            return None
        return PK_TEMPLATE.format(columns=", ".join(column_names))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"

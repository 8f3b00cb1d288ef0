"""PostgreSQL-specific type names.

Only the kinds PostgreSQL spells differently are listed; the rest fall back
to the ANSI driver.
"""

from __future__ import annotations

from types import MappingProxyType

from sqlmarshal.drivers.base import TypeTableDriver
from sqlmarshal.types import SQLKind


class PostgreSQLDriver(TypeTableDriver):
    """PostgreSQL SQL dialect implementation."""

    name = "postgresql"

    type_names = MappingProxyType({
        SQLKind.NCHAR: "CHAR",
        SQLKind.NVARCHAR: "VARCHAR",
        SQLKind.BIT_VARYING: "VARBIT",
        SQLKind.INT: "INTEGER",
        SQLKind.FLOAT: "REAL",
        SQLKind.DOUBLE: "DOUBLE PRECISION",
    })

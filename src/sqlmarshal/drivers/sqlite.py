"""SQLite type names, using its storage class affinities."""

from __future__ import annotations

from types import MappingProxyType

from sqlmarshal.drivers.base import TypeTableDriver
from sqlmarshal.types import SQLKind


class SQLiteDriver(TypeTableDriver):
    """SQLite dialect: every kind collapses onto INTEGER, REAL, TEXT or NUMERIC.

    Bit strings have no affinity of their own and fall back to ANSI.
    """

    name = "sqlite"

    type_names = MappingProxyType({
        SQLKind.CHAR: "TEXT",
        SQLKind.VARCHAR: "TEXT",
        SQLKind.NCHAR: "TEXT",
        SQLKind.NVARCHAR: "TEXT",
        SQLKind.INT: "INTEGER",
        SQLKind.SMALL_INT: "INTEGER",
        SQLKind.BIG_INT: "INTEGER",
        SQLKind.FLOAT: "REAL",
        SQLKind.REAL: "REAL",
        SQLKind.DOUBLE: "REAL",
        SQLKind.NUMERIC: "NUMERIC",
        SQLKind.DECIMAL: "NUMERIC",
    })

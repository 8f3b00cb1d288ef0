"""Reference driver rendering ANSI SQL types."""

from __future__ import annotations

from types import MappingProxyType

from sqlmarshal.drivers.base import TypeTableDriver
from sqlmarshal.types import SQLKind


class ANSISQLDriver(TypeTableDriver):
    """Driver for ANSI SQL; also the fallback for every other driver."""

    name = "ansi"

    # TODO: support sizes, e.g. VARCHAR(n), once field metadata can carry them.
    type_names = MappingProxyType({
        SQLKind.CHAR: "CHAR",
        SQLKind.VARCHAR: "VARCHAR",
        SQLKind.NCHAR: "NCHAR",
        SQLKind.NVARCHAR: "NVARCHAR",
        SQLKind.BIT: "BIT",
        SQLKind.BIT_VARYING: "BIT VARYING",
        SQLKind.INT: "INT",
        SQLKind.SMALL_INT: "SMALLINT",
        SQLKind.BIG_INT: "BIGINT",
        SQLKind.FLOAT: "FLOAT",
        SQLKind.REAL: "REAL",
        SQLKind.DOUBLE: "DOUBLE",
        SQLKind.NUMERIC: "NUMERIC",
        SQLKind.DECIMAL: "DECIMAL",
    })

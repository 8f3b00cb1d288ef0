"""SQL drivers and the driver-with-fallback lookup."""

from __future__ import annotations

from sqlmarshal.drivers.ansi import ANSISQLDriver
from sqlmarshal.drivers.base import SQLDriver, TypeTableDriver
from sqlmarshal.drivers.postgresql import PostgreSQLDriver
from sqlmarshal.drivers.sqlite import SQLiteDriver
from sqlmarshal.errors import UndefinedSQLTypeError
from sqlmarshal.types import SQLKind

ANSI_DRIVER = ANSISQLDriver()

_DRIVERS: dict[str, type[SQLDriver]] = {
    ANSISQLDriver.name: ANSISQLDriver,
    PostgreSQLDriver.name: PostgreSQLDriver,
    SQLiteDriver.name: SQLiteDriver,
}


def get_driver(name: str) -> SQLDriver:
    """Return a new driver for a dialect name."""
    driver_class = _DRIVERS.get(name.lower())
    if driver_class is None:
        raise KeyError(f"Unknown dialect '{name}'. Available: {list_dialects()}")
    return driver_class()


def list_dialects() -> list[str]:
    """List the registered dialect names."""
    return sorted(_DRIVERS)


def define(
    kind: SQLKind, name: str, driver: SQLDriver, fallback: SQLDriver = ANSI_DRIVER
) -> str:
    """Return the column definition from driver, else from fallback.

    Raises:
        UndefinedSQLTypeError: If neither driver knows the kind.
    """
    definition = driver.define(kind, name)
    if definition is None:
        definition = fallback.define(kind, name)
    if definition is None:
        raise UndefinedSQLTypeError(name, kind)
    return definition


__all__ = [
    "ANSI_DRIVER",
    "ANSISQLDriver",
    "PostgreSQLDriver",
    "SQLDriver",
    "SQLiteDriver",
    "TypeTableDriver",
    "define",
    "get_driver",
    "list_dialects",
]

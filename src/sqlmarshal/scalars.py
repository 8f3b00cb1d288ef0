"""Sized scalar annotations for record fields.

Python has a single ``int`` and a single ``float``; these aliases let a
record declare the width it means, which decides the SQL kind::

    @dataclass
    class Reading:
        sensor: int32
        value: float32
"""

from __future__ import annotations

from typing import Annotated

from sqlmarshal.types import SQLKind

int8 = Annotated[int, SQLKind.SMALL_INT]
int16 = Annotated[int, SQLKind.SMALL_INT]
int32 = Annotated[int, SQLKind.BIG_INT]
int64 = Annotated[int, SQLKind.BIG_INT]

# No unsigned distinction in SQL, every unsigned width widens to BIGINT.
uint8 = Annotated[int, SQLKind.BIG_INT]
uint16 = Annotated[int, SQLKind.BIG_INT]
uint32 = Annotated[int, SQLKind.BIG_INT]
uint64 = Annotated[int, SQLKind.BIG_INT]

float32 = Annotated[float, SQLKind.FLOAT]
float64 = Annotated[float, SQLKind.DOUBLE]

__all__ = [
    "int8",
    "int16",
    "int32",
    "int64",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "float32",
    "float64",
]

"""sqlmarshal - SQL CREATE, INSERT and UPDATE statements from record types."""

from sqlmarshal.drivers import (
    ANSISQLDriver,
    PostgreSQLDriver,
    SQLDriver,
    SQLiteDriver,
    get_driver,
)
from sqlmarshal.errors import (
    CyclicReferenceError,
    DuplicateFieldError,
    EmptyStatementError,
    ExpectedRecordError,
    MismatchedFieldValueCountError,
    SQLMarshalError,
    TokenizationError,
    UndefinedSQLTypeError,
    UnresolvableTypeError,
    UnsupportedShapeError,
)
from sqlmarshal.fields import FieldsWithValue, FieldWithValue
from sqlmarshal.mapping import Column, tokenize_mapping
from sqlmarshal.marshaller import Marshaller, new_marshaller
from sqlmarshal.parsing import RecordParser
from sqlmarshal.registry import RecordRegistry
from sqlmarshal.tokenizer import sql_field, tokenize
from sqlmarshal.types import (
    FieldDefinition,
    FKDefinition,
    SQLKind,
    TokenizedField,
    TokenizedSchema,
)

__all__ = [
    # Main API
    "Marshaller",
    "new_marshaller",
    "sql_field",
    "tokenize",
    "tokenize_mapping",
    "Column",
    "RecordParser",
    "RecordRegistry",
    # Drivers
    "SQLDriver",
    "ANSISQLDriver",
    "PostgreSQLDriver",
    "SQLiteDriver",
    "get_driver",
    # Schema types
    "SQLKind",
    "TokenizedField",
    "TokenizedSchema",
    "FieldDefinition",
    "FKDefinition",
    "FieldWithValue",
    "FieldsWithValue",
    # Errors
    "SQLMarshalError",
    "TokenizationError",
    "UnresolvableTypeError",
    "ExpectedRecordError",
    "CyclicReferenceError",
    "UndefinedSQLTypeError",
    "DuplicateFieldError",
    "EmptyStatementError",
    "MismatchedFieldValueCountError",
    "UnsupportedShapeError",
]

__version__ = "0.1.0"

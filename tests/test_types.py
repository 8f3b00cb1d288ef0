"""Tests for the schema type model."""

import dataclasses

import pytest

from sqlmarshal.types import (
    SQL_KIND_NAMES,
    SQLKind,
    TokenizedField,
    TokenizedSchema,
)


class TestSQLKind:
    """Tests for SQLKind enum."""

    def test_is_scalar(self):
        """Test that only invalid and foreign key kinds are not scalar."""
        assert SQLKind.VARCHAR.is_scalar is True
        assert SQLKind.BIG_INT.is_scalar is True
        assert SQLKind.FOREIGN_KEY.is_scalar is False
        assert SQLKind.INVALID.is_scalar is False

    def test_kind_names(self):
        """Test the name lookup table only holds scalar kinds."""
        assert SQL_KIND_NAMES["varchar"] is SQLKind.VARCHAR
        assert SQL_KIND_NAMES["varbit"] is SQLKind.BIT_VARYING
        assert SQL_KIND_NAMES["integer"] is SQLKind.INT
        assert "foreign_key" not in SQL_KIND_NAMES
        assert "invalid" not in SQL_KIND_NAMES


class TestTokenizedField:
    """Tests for TokenizedField."""

    def test_scalar_field(self):
        """Test a plain scalar field."""
        f = TokenizedField(name="ID", kind=SQLKind.SMALL_INT, is_primary_key=True)
        assert f.is_foreign_key is False
        assert f.references is None
        assert f.is_unique is False

    def test_foreign_key_requires_reference(self):
        """Test that a foreign key without a referenced schema is rejected."""
        with pytest.raises(ValueError, match="foreign key"):
            TokenizedField(name="Ref", kind=SQLKind.FOREIGN_KEY)

    def test_scalar_rejects_reference(self):
        """Test that a scalar field cannot carry a referenced schema."""
        with pytest.raises(ValueError):
            TokenizedField(name="ID", kind=SQLKind.INT, references=TokenizedSchema(name="R"))

    def test_invalid_kind_rejected(self):
        """Test that the invalid kind cannot be used for a field."""
        with pytest.raises(ValueError):
            TokenizedField(name="x", kind=SQLKind.INVALID)

    def test_frozen(self):
        """Test that fields cannot be mutated."""
        f = TokenizedField(name="ID", kind=SQLKind.INT)
        with pytest.raises(dataclasses.FrozenInstanceError):
            f.name = "other"  # type: ignore[misc]


class TestTokenizedSchema:
    """Tests for TokenizedSchema."""

    def _schema(self) -> TokenizedSchema:
        return TokenizedSchema(
            name="Pair",
            fields=[
                TokenizedField(name="A", kind=SQLKind.SMALL_INT, is_primary_key=True),
                TokenizedField(name="Label", kind=SQLKind.VARCHAR),
                TokenizedField(name="B", kind=SQLKind.BIG_INT, is_primary_key=True),
            ],
        )

    def test_fields_stored_as_tuple(self):
        """Test that a list of fields is frozen into a tuple."""
        schema = self._schema()
        assert isinstance(schema.fields, tuple)
        assert [f.name for f in schema.fields] == ["A", "Label", "B"]

    def test_primary_in_declaration_order(self):
        """Test primary key names keep declaration order."""
        assert self._schema().primary() == ["A", "B"]

    def test_primary_empty(self):
        """Test a schema without primary keys."""
        schema = TokenizedSchema(name="R", fields=[TokenizedField(name="x", kind=SQLKind.INT)])
        assert schema.primary() == []

    def test_field_kind(self):
        """Test looking up a field's kind."""
        schema = self._schema()
        assert schema.field_kind("B") is SQLKind.BIG_INT
        assert schema.field_kind("missing") is None

    def test_get_field(self):
        """Test looking up a field by name."""
        schema = self._schema()
        assert schema.get_field("Label").kind is SQLKind.VARCHAR
        assert schema.get_field("nope") is None

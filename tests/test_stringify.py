"""Tests for scalar to SQL literal conversion."""

import pytest

from sqlmarshal.stringify import stringify


class TestStringify:
    """Tests for stringify."""

    def test_booleans(self):
        """Test booleans become 1 and 0, not True/False."""
        assert stringify(True) == "1"
        assert stringify(False) == "0"

    def test_integers(self):
        """Test integers become decimal text."""
        assert stringify(0) == "0"
        assert stringify(-42) == "-42"
        assert stringify(2**63) == "9223372036854775808"

    def test_floats_fixed_notation(self):
        """Test floats use six fractional digits."""
        assert stringify(2.0) == "2.000000"
        assert stringify(-0.5) == "-0.500000"
        assert stringify(1e10) == "10000000000.000000"

    def test_strings_double_quoted(self):
        """Test strings are double quoted without escaping."""
        assert stringify("a") == '"a"'
        assert stringify("") == '""'
        assert stringify('say "hi"') == '"say "hi""'

    @pytest.mark.parametrize("value", [None, [1], {"a": 1}, b"bytes", object()])
    def test_unsupported(self, value):
        """Test values without a literal return None."""
        assert stringify(value) is None

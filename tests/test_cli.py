"""Tests for the command line interface."""

import json

import pytest

from sqlmarshal.cli import build_parser, main
from sqlmarshal.config import get_settings

RECORDS = """
# records used by the CLI tests
Reference {
    DifferentNameID: int [primary],
    Name: string
}

X {
    ID: int [primary],
    Name: string,
    Ref: Reference
}
"""


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def records_file(tmp_path):
    path = tmp_path / "records.sqlm"
    path.write_text(RECORDS, encoding="utf-8")
    return path


class TestMain:
    """Tests for main()."""

    def test_list(self, records_file, capsys):
        """Test listing the records of a file."""
        assert main(["list", str(records_file)]) == 0
        assert capsys.readouterr().out == "Reference\nX\n"

    def test_create(self, records_file, capsys):
        """Test printing a CREATE statement."""
        assert main(["create", str(records_file), "Reference"]) == 0
        assert capsys.readouterr().out == (
            "CREATE TABLE Reference (DifferentNameID SMALLINT, Name VARCHAR, "
            "PRIMARY KEY (DifferentNameID));\n"
        )

    def test_create_with_dialect(self, records_file, capsys):
        """Test the dialect option."""
        assert main(["create", str(records_file), "Reference", "--dialect", "sqlite"]) == 0
        assert capsys.readouterr().out == (
            "CREATE TABLE Reference (DifferentNameID INTEGER, Name TEXT, "
            "PRIMARY KEY (DifferentNameID));\n"
        )

    def test_dialect_from_environment(self, records_file, monkeypatch):
        """Test the default dialect comes from settings."""
        monkeypatch.setenv("SQLMARSHAL_DIALECT", "postgresql")
        assert build_parser().parse_args(["create", str(records_file), "X"]).dialect == "postgresql"

    def test_insert(self, records_file, capsys):
        """Test printing an INSERT statement from JSON values."""
        values = json.dumps({"ID": 1, "Name": "a", "Ref": {"DifferentNameID": 2}})
        assert main(["insert", str(records_file), "X", "--values", values]) == 0
        assert capsys.readouterr().out == (
            'INSERT INTO X (ID, Name, Ref_DifferentNameID_fk) VALUES (1, "a", 2);\n'
        )

    def test_update(self, records_file, capsys):
        """Test printing an UPDATE statement from JSON values."""
        assert main(["update", str(records_file), "X", "-V", '{"ID": 1, "Name": "a"}']) == 0
        assert capsys.readouterr().out == 'UPDATE X SET Name="a" WHERE ID=1;\n'

    def test_file_not_found(self, tmp_path, capsys):
        """Test a missing definition file."""
        assert main(["list", str(tmp_path / "missing.sqlm")]) == 1
        assert "Error: File not found" in capsys.readouterr().err

    def test_unknown_record(self, records_file, capsys):
        """Test an unknown record name."""
        assert main(["create", str(records_file), "Nope"]) == 1
        assert "Record 'Nope' not found" in capsys.readouterr().err

    def test_values_must_be_object(self, records_file, capsys):
        """Test values that are not a JSON object."""
        assert main(["insert", str(records_file), "X", "-V", "[1, 2]"]) == 1
        assert "JSON object" in capsys.readouterr().err

    def test_invalid_json(self, records_file, capsys):
        """Test malformed JSON values."""
        assert main(["insert", str(records_file), "X", "-V", "{"]) == 1
        assert capsys.readouterr().err.startswith("Error: ")

    def test_update_without_values_to_set(self, records_file, capsys):
        """Test statement errors are reported."""
        assert main(["update", str(records_file), "X", "-V", '{"ID": 1}']) == 1
        assert "nothing to update" in capsys.readouterr().err

    def test_syntax_error(self, tmp_path, capsys):
        """Test syntax errors in the definition file."""
        path = tmp_path / "broken.sqlm"
        path.write_text("X { ID int }", encoding="utf-8")

        assert main(["list", str(path)]) == 1
        assert "Syntax error" in capsys.readouterr().err

    def test_invalid_dialect_setting(self, records_file, capsys, monkeypatch):
        """Test a bad environment setting is reported, not raised."""
        monkeypatch.setenv("SQLMARSHAL_DIALECT", "mysql")

        assert main(["list", str(records_file)]) == 1
        assert capsys.readouterr().err.startswith("Error: Invalid settings")

    def test_unknown_dialect_rejected(self, records_file):
        """Test argparse rejects dialects without a driver."""
        with pytest.raises(SystemExit):
            main(["create", str(records_file), "X", "--dialect", "oracle"])

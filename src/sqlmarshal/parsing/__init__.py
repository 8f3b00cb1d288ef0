"""Parsing module for the record definition DSL."""

from sqlmarshal.parsing.record_parser import RecordParser, parse_file

__all__ = [
    "RecordParser",
    "parse_file",
]

"""Parser for the record definition DSL.

Example::

    # aliases name a type once
    define uuid as int64

    Reference {
        DifferentNameID: int [primary],
        Name: string
    }

    X {
        ID: uuid [primary, unique],
        Ref: Reference,
    }

Records may reference records declared later in the same text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import ply.yacc as yacc

from sqlmarshal.parsing.record_lexer import RecordLexer
from sqlmarshal.registry import AliasSpec, FieldSpec, RecordRegistry, RecordSpec


class RecordParser:
    """Parser for the record definition DSL."""

    tokens = RecordLexer.tokens

    def __init__(self) -> None:
        self.lexer = RecordLexer()
        self.lexer.build()
        self.parser: yacc.LRParser = None  # type: ignore
        self.registry: RecordRegistry = RecordRegistry()

    def p_schema(self, p: yacc.YaccProduction) -> None:
        """schema : statement_list"""
        p[0] = p[1]

    def p_schema_empty(self, p: yacc.YaccProduction) -> None:
        """schema :"""
        p[0] = []

    def p_statement_list_single(self, p: yacc.YaccProduction) -> None:
        """statement_list : statement"""
        p[0] = [p[1]]

    def p_statement_list_multiple(self, p: yacc.YaccProduction) -> None:
        """statement_list : statement_list statement"""
        p[0] = p[1]
        p[0].append(p[2])

    def p_statement(self, p: yacc.YaccProduction) -> None:
        """statement : alias_def
                     | record_def"""
        p[0] = p[1]

    def p_alias_def(self, p: yacc.YaccProduction) -> None:
        """alias_def : DEFINE IDENTIFIER AS IDENTIFIER"""
        p[0] = AliasSpec(name=p[2], target=p[4])

    def p_record_def(self, p: yacc.YaccProduction) -> None:
        """record_def : IDENTIFIER LBRACE field_list RBRACE
                      | IDENTIFIER LBRACE field_list COMMA RBRACE"""
        p[0] = RecordSpec(name=p[1], fields=p[3])

    def p_record_def_empty(self, p: yacc.YaccProduction) -> None:
        """record_def : IDENTIFIER LBRACE RBRACE"""
        p[0] = RecordSpec(name=p[1], fields=[])

    def p_field_list_single(self, p: yacc.YaccProduction) -> None:
        """field_list : field"""
        p[0] = [p[1]]

    def p_field_list_multiple(self, p: yacc.YaccProduction) -> None:
        """field_list : field_list COMMA field"""
        p[0] = p[1] + [p[3]]

    def p_field(self, p: yacc.YaccProduction) -> None:
        """field : IDENTIFIER COLON IDENTIFIER"""
        p[0] = FieldSpec(name=p[1], type_name=p[3])

    def p_field_tagged(self, p: yacc.YaccProduction) -> None:
        """field : IDENTIFIER COLON IDENTIFIER tags"""
        p[0] = FieldSpec(name=p[1], type_name=p[3], tags=p[4])

    def p_tags(self, p: yacc.YaccProduction) -> None:
        """tags : LBRACKET tag_list RBRACKET"""
        p[0] = p[2]

    def p_tags_empty(self, p: yacc.YaccProduction) -> None:
        """tags : LBRACKET RBRACKET"""
        p[0] = []

    def p_tag_list_single(self, p: yacc.YaccProduction) -> None:
        """tag_list : IDENTIFIER"""
        p[0] = [p[1]]

    def p_tag_list_multiple(self, p: yacc.YaccProduction) -> None:
        """tag_list : tag_list COMMA IDENTIFIER"""
        p[0] = p[1] + [p[3]]

    def p_error(self, p: yacc.YaccProduction) -> None:
        if p:
            raise SyntaxError(f"Syntax error at '{p.value}' (line {p.lineno})")
        else:
            raise SyntaxError("Syntax error at end of input")

    def build(self, **kwargs: Any) -> None:
        """Build the parser."""
        self.parser = yacc.yacc(module=self, **kwargs)

    def parse(self, data: str) -> RecordRegistry:
        """Parse record definitions and return a populated RecordRegistry.

        Raises:
            SyntaxError: On malformed input.
            ValueError: On duplicate record, alias or field names.
            TokenizationError: On unknown field types or cyclic records.
        """
        if self.parser is None:
            self.build(debug=False, write_tables=False)

        self.registry = RecordRegistry()
        self.lexer.lexer.lineno = 1

        specs = self.parser.parse(data, lexer=self.lexer.lexer)
        if specs is None:
            specs = []

        for spec in specs:
            self.registry.register(spec)

        # Tokenize every record once so unknown types and cycles fail here.
        for name in self.registry.list_records():
            self.registry.tokenize(name)

        return self.registry


def parse_file(path: Path | str) -> RecordRegistry:
    """Parse a file of record definitions."""
    if isinstance(path, str):
        path = Path(path)
    return RecordParser().parse(path.read_text(encoding="utf-8"))

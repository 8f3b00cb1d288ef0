"""Registry of records declared in the record definition DSL."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sqlmarshal import scalars
from sqlmarshal.errors import CyclicReferenceError, TokenizationError, UnresolvableTypeError
from sqlmarshal.mapping import Column, tokenize_mapping
from sqlmarshal.tokenizer import parse_tags
from sqlmarshal.types import SQL_KIND_NAMES, TokenizedSchema

# Native type names; they win over SQL kind names ("float" is a Python float).
NATIVE_TYPE_NAMES: dict[str, Any] = {
    "bool": bool,
    "int": int,
    "int8": scalars.int8,
    "int16": scalars.int16,
    "int32": scalars.int32,
    "int64": scalars.int64,
    "uint8": scalars.uint8,
    "uint16": scalars.uint16,
    "uint32": scalars.uint32,
    "uint64": scalars.uint64,
    "float": float,
    "float32": scalars.float32,
    "float64": scalars.float64,
    "string": str,
}

BUILTIN_TYPE_NAMES: dict[str, Any] = {**SQL_KIND_NAMES, **NATIVE_TYPE_NAMES}


@dataclass
class FieldSpec:
    """A record field as written: name, type name and tag tokens."""

    name: str
    type_name: str
    tags: list[str] = field(default_factory=list)


@dataclass
class RecordSpec:
    """A record as written."""

    name: str
    fields: list[FieldSpec] = field(default_factory=list)


@dataclass
class AliasSpec:
    """A ``define <name> as <type>`` alias."""

    name: str
    target: str


class RecordRegistry:
    """Registry of declared records and aliases."""

    def __init__(self) -> None:
        self._records: dict[str, RecordSpec] = {}
        self._aliases: dict[str, str] = {}

    def register(self, spec: RecordSpec | AliasSpec) -> None:
        """Register a record or alias."""
        if spec.name in self:
            raise ValueError(f"Type '{spec.name}' is already defined")
        if isinstance(spec, AliasSpec):
            self._aliases[spec.name] = spec.target
            return
        seen: set[str] = set()
        for f in spec.fields:
            if f.name in seen:
                raise ValueError(f"Field '{f.name}' is defined twice in '{spec.name}'")
            seen.add(f.name)
        self._records[spec.name] = spec

    def get(self, name: str) -> RecordSpec | None:
        """Get a record by name or alias."""
        return self._records.get(self.resolve_alias(name))

    def get_or_raise(self, name: str) -> RecordSpec:
        """Get a record by name or alias, raising if not found."""
        spec = self.get(name)
        if spec is None:
            raise KeyError(f"Record '{name}' not found")
        return spec

    def list_records(self) -> list[str]:
        """List record names in declaration order."""
        return list(self._records)

    def resolve_alias(self, name: str) -> str:
        """Follow aliases to the underlying type name."""
        chain = [name]
        while name in self._aliases:
            name = self._aliases[name]
            if name in chain:
                raise CyclicReferenceError(chain + [name])
            chain.append(name)
        return name

    def tokenize(self, name: str) -> TokenizedSchema:
        """Return the tokenized schema of a record.

        Raises:
            KeyError: If the record is unknown.
            TokenizationError: If a field type is unknown or records form a cycle.
        """
        return self._tokenize(self.resolve_alias(name), ())

    def _tokenize(self, name: str, chain: tuple[str, ...]) -> TokenizedSchema:
        spec = self.get_or_raise(name)
        if name in chain:
            raise CyclicReferenceError(list(chain) + [name])
        chain = chain + (name,)

        columns: dict[str, Column] = {}
        for f in spec.fields:
            is_primary_key, is_unique = parse_tags(",".join(f.tags))
            columns[f.name] = Column(
                self._field_type(f, chain), primary=is_primary_key, unique=is_unique
            )
        return tokenize_mapping(spec.name, columns)

    def _field_type(self, f: FieldSpec, chain: tuple[str, ...]) -> Any:
        type_name = self.resolve_alias(f.type_name)
        if type_name in self._records:
            try:
                return self._tokenize(type_name, chain)
            except CyclicReferenceError:
                raise
            except TokenizationError as e:
                raise TokenizationError(f"resolving foreign key for field {f.name!r}: {e}") from e
        target = BUILTIN_TYPE_NAMES.get(type_name)
        if target is None:
            raise UnresolvableTypeError(f.name, type_name)
        return target

    def __contains__(self, name: str) -> bool:
        return name in self._records or name in self._aliases or name in BUILTIN_TYPE_NAMES

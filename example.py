"""Example usage of the sqlmarshal library."""

from dataclasses import dataclass
from typing import Optional

from sqlmarshal import Marshaller, RecordParser, get_driver, sql_field
from sqlmarshal.scalars import int64


# Records as dataclasses
@dataclass
class Team:
    code: str = sql_field(primary=True)
    name: str = ""


@dataclass
class Player:
    id: int64 = sql_field(primary=True)
    name: str = sql_field(unique=True, default="")
    rating: float = 0.0
    team: Optional[Team] = None


players = Marshaller.new(Player)
player = Player(id=7, name="Ada", rating=1.5, team=Team("ENG", "England"))

print("ANSI:")
print(" ", players.create())
print("PostgreSQL:")
print(" ", players.create(get_driver("postgresql")))
print("SQLite:")
print(" ", players.create(get_driver("sqlite")))

print("\nStatements for", player)
print(" ", players.insert(player))
print(" ", players.update_primary_key(player))

# The same shape, declared in the record definition DSL
definitions = """
define id as int64

Team {
    code: string [primary],
    name: string
}

Player {
    id: id [primary],
    name: string [unique],
    rating: float,
    team: Team
}
"""

registry = RecordParser().parse(definitions)
from_dsl = Marshaller.new(registry.tokenize("Player"))

print("\nFrom the DSL:")
print(" ", from_dsl.create())
print(" ", from_dsl.insert({"id": 8, "name": "Grace", "team": {"code": "USA"}}))

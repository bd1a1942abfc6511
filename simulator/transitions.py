from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import NewType

from simulator.errors import DefinitionError, DuplicateTransition, InvalidDirection, MissingField

Symbol = NewType("Symbol", str)
State = NewType("State", str)

TRANSITION_FIELDS = ["from_state", "read_symbol", "write_symbol", "next_state"]


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"
    STAY = "S"

    @property
    def offset(self):
        return {"L": -1, "R": 1, "S": 0}[self.value]

    @classmethod
    def parse(cls, value):
        """Accept a Direction, 'L', 'R', 'S'/'N' or None (no move)."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.STAY
        key = str(value).strip().upper()
        if key == "N":
            return cls.STAY
        try:
            return cls(key)
        except ValueError:
            raise InvalidDirection(f"Unknown head movement: {value!r}") from None


@dataclass(frozen=True)
class Transition:
    from_state: State
    read_symbol: Symbol
    write_symbol: Symbol
    direction: Direction
    next_state: State

    @property
    def key(self):
        return (self.from_state, self.read_symbol)

    @classmethod
    def from_dict(cls, entry, index=None):
        """Build from a 7-tuple JSON entry. move_to may be absent or null (no move)."""
        where = "Transition" if index is None else f"Transition #{index}"
        if not isinstance(entry, Mapping):
            raise DefinitionError(f"{where} must be an object, got {type(entry).__name__}")
        missing = [key for key in TRANSITION_FIELDS if key not in entry]
        if missing:
            raise MissingField(f"{where} is missing required fields: {missing}")
        return cls(
            from_state=State(str(entry["from_state"])),
            read_symbol=Symbol(str(entry["read_symbol"])),
            write_symbol=Symbol(str(entry["write_symbol"])),
            direction=Direction.parse(entry.get("move_to")),
            next_state=State(str(entry["next_state"])),
        )

    def to_dict(self):
        return {
            "from_state": self.from_state,
            "read_symbol": self.read_symbol,
            "write_symbol": self.write_symbol,
            "move_to": self.direction.value,
            "next_state": self.next_state,
        }


class TransitionTable:
    """Deterministic (state, symbol) -> Transition map. Read-only once built."""

    def __init__(self, transitions=()):
        table = {}
        for transition in transitions:
            if transition.key in table:
                state, symbol = transition.key
                raise DuplicateTransition(
                    f"More than one transition for state {state!r} reading {symbol!r}"
                )
            table[transition.key] = transition
        self._table = table

    def lookup(self, state, symbol):
        """Return the matching Transition, or None when no rule applies."""
        return self._table.get((state, symbol))

    def __iter__(self):
        return iter(self._table.values())

    def __len__(self):
        return len(self._table)

    def __contains__(self, key):
        return key in self._table

    def __eq__(self, other):
        if not isinstance(other, TransitionTable):
            return NotImplemented
        return self._table == other._table

    def __hash__(self):
        return hash(frozenset(self._table.values()))

    def __repr__(self):
        return f"TransitionTable({len(self._table)} transitions)"

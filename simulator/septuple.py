import json
from pathlib import Path

from simulator.errors import DefinitionError, MissingField
from simulator.machine_definition import MachineDefinition

REQUIRED_FIELDS = [
    "alphabet",
    "blank_symbol",
    "input_symbols",
    "states",
    "initial_state",
    "final_states",
    "transitions",
]


def machine_from_dict(data, name=None):
    """Build a validated MachineDefinition from a parsed 7-tuple."""
    missing = [key for key in REQUIRED_FIELDS if key not in data]
    if missing:
        raise MissingField(f"Machine definition is missing required fields: {missing}")
    if not isinstance(data["transitions"], list):
        raise DefinitionError("'transitions' must be a list of transition objects")

    return MachineDefinition.create(
        alphabet=data["alphabet"],
        input_symbols=data["input_symbols"],
        blank_symbol=data["blank_symbol"],
        states=data["states"],
        initial_state=data["initial_state"],
        final_states=data["final_states"],
        transitions=data["transitions"],
        name=data.get("name", name),
    )


def from_json(text, name=None):
    return machine_from_dict(json.loads(text), name=name)


def load_machine(path):
    """Load a machine definition from a JSON file; the name defaults to the file stem."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Machine definition not found at: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return from_json(f.read(), name=path.stem)


def machine_to_dict(definition):
    """Serialise a definition back to the 7-tuple JSON shape, sorted for stable output."""
    return {
        "name": definition.name,
        "alphabet": sorted(definition.alphabet),
        "blank_symbol": definition.blank_symbol,
        "input_symbols": sorted(definition.input_symbols),
        "states": sorted(definition.states),
        "initial_state": definition.initial_state,
        "final_states": sorted(definition.final_states),
        "transitions": sorted(
            (t.to_dict() for t in definition.transitions),
            key=lambda t: (t["from_state"], t["read_symbol"]),
        ),
    }

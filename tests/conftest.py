from pathlib import Path

import pytest

from simulator.machine_definition import MachineDefinition

MACHINES_DIR = Path(__file__).resolve().parent.parent / "machines"


def _rule(from_state, read, write, move, next_state):
    return {
        "from_state": from_state,
        "read_symbol": read,
        "write_symbol": write,
        "move_to": move,
        "next_state": next_state,
    }


@pytest.fixture
def machines_dir():
    return MACHINES_DIR


@pytest.fixture
def scan_right_fields():
    """Scan right to the first blank, then step back once into the final state."""
    return {
        "alphabet": ["0", "1", "B"],
        "input_symbols": ["0", "1"],
        "blank_symbol": "B",
        "states": ["q0", "q1"],
        "initial_state": "q0",
        "final_states": ["q1"],
        "transitions": [
            _rule("q0", "0", "0", "R", "q0"),
            _rule("q0", "1", "1", "R", "q0"),
            _rule("q0", "B", "B", "L", "q1"),
        ],
    }


@pytest.fixture
def scan_right(scan_right_fields):
    return MachineDefinition.create(**scan_right_fields, name="scan_right")


@pytest.fixture
def looping():
    """Self-transition on every symbol; never runs out of rules."""
    return MachineDefinition.create(
        alphabet=["a", "_"],
        input_symbols=["a"],
        blank_symbol="_",
        states=["loop"],
        initial_state="loop",
        final_states=["loop"],
        transitions=[
            _rule("loop", "a", "a", "R", "loop"),
            _rule("loop", "_", "_", "R", "loop"),
        ],
        name="looping",
    )


@pytest.fixture
def left_walker():
    """Writes x and walks left until it meets an x."""
    return MachineDefinition.create(
        alphabet=["x", "_"],
        input_symbols=["x"],
        blank_symbol="_",
        states=["walk", "stop"],
        initial_state="walk",
        final_states=["stop"],
        transitions=[
            _rule("walk", "_", "x", "L", "walk"),
            _rule("walk", "x", "x", "L", "stop"),
        ],
        name="left_walker",
    )

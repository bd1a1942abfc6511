from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class Outcome(Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    HALTED = "halted"


class HaltReason(Enum):
    STEP_LIMIT_EXCEEDED = "step_limit_exceeded"
    LEFT_BOUNDARY = "left_boundary"


@dataclass(frozen=True)
class Snapshot:
    """Machine configuration before a step: state, visited tape window and head."""
    step: int
    state: str
    cells: Tuple[str, ...]
    head: int
    offset: int = 0

    @property
    def head_index(self):
        return self.head - self.offset

    def render(self):
        """Tape as a string with the head cell in brackets, e.g. '10[1]B'."""
        parts = []
        for i, symbol in enumerate(self.cells):
            parts.append(f"[{symbol}]" if i == self.head_index else symbol)
        return "".join(parts)

    def to_dict(self):
        return {
            "step": self.step,
            "state": self.state,
            "tape": "".join(self.cells),
            "head": self.head,
            "offset": self.offset,
        }


@dataclass(frozen=True)
class ExecutionResult:
    outcome: Outcome
    final_state: str
    tape: Tuple[str, ...]
    trace: Tuple[Snapshot, ...]
    steps: int
    blank: str
    reason: Optional[HaltReason] = None
    input_string: str = field(default="")

    @property
    def accepted(self):
        return self.outcome is Outcome.ACCEPTED

    @property
    def output(self):
        """Final tape with leading and trailing blanks removed."""
        cells = list(self.tape)
        while cells and cells[0] == self.blank:
            cells.pop(0)
        while cells and cells[-1] == self.blank:
            cells.pop()
        return "".join(cells)

    @property
    def label(self):
        if self.outcome is Outcome.HALTED:
            return f"HALTED ({self.reason.value})"
        return self.outcome.name

    def to_dict(self, include_trace=True):
        entry = {
            "input": self.input_string,
            "outcome": self.outcome.value,
            "reason": self.reason.value if self.reason else None,
            "final_state": self.final_state,
            "steps": self.steps,
            "tape": "".join(self.tape),
            "output": self.output,
        }
        if include_trace:
            entry["trace"] = [snapshot.to_dict() for snapshot in self.trace]
        return entry

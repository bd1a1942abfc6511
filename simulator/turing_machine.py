from collections import namedtuple

from simulator.errors import NoUndoError
from simulator.result import ExecutionResult, HaltReason, Outcome, Snapshot
from simulator.tape import Tape
from simulator.transitions import Direction

DEFAULT_MAX_STEPS = 10_000

# Everything needed to take back one applied transition.
Undo = namedtuple("Undo", ["state", "head", "symbol", "low", "high"])


class Executor:
    """
    Runs one input string on a MachineDefinition.

    The machine only stops when no transition matches the current
    (state, symbol) pair. Being in a final state does not stop it; it only
    decides between ACCEPTED and REJECTED once nothing applies. max_steps
    bounds the number of applied transitions.
    """

    def __init__(self, definition, input_string="", max_steps=DEFAULT_MAX_STEPS, left_bounded=False):
        if isinstance(max_steps, bool) or not isinstance(max_steps, int) or max_steps < 0:
            raise ValueError(f"max_steps must be a non-negative integer, got {max_steps!r}")
        definition.validate_input(input_string)
        self.definition = definition
        self.input_string = input_string
        self.max_steps = max_steps
        self.left_bounded = left_bounded
        self.reset()

    def reset(self):
        self.tape = Tape.from_input(self.input_string, self.definition.blank_symbol)
        self.current_state = self.definition.initial_state
        self.steps = 0
        self.outcome = None
        self.reason = None
        self.trace = [self._snapshot()]
        self.undos = []

    @property
    def halted(self):
        return self.outcome is not None

    def step(self):
        """Apply one transition. Returns the Outcome once the run is over, else None."""
        if self.halted:
            return self.outcome

        transition = self.definition.transitions.lookup(self.current_state, self.tape.read())
        if transition is None:
            if self.definition.is_final(self.current_state):
                self.outcome = Outcome.ACCEPTED
            else:
                self.outcome = Outcome.REJECTED
            return self.outcome

        if self.steps >= self.max_steps:
            return self._halt(HaltReason.STEP_LIMIT_EXCEEDED)
        if self.left_bounded and self.tape.head == 0 and transition.direction is Direction.LEFT:
            return self._halt(HaltReason.LEFT_BOUNDARY)

        self.undos.append(Undo(self.current_state, self.tape.head, self.tape.read(), self.tape.low, self.tape.high))
        self.tape.write(transition.write_symbol)
        self.tape.move(transition.direction)
        self.current_state = transition.next_state
        self.steps += 1
        self.trace.append(self._snapshot())
        return None

    def undo(self):
        """Take back the last applied transition."""
        if not self.undos:
            raise NoUndoError("Nothing to undo.")
        undo = self.undos.pop()
        self.tape.rewind(undo.head, undo.symbol, undo.low, undo.high)
        self.current_state = undo.state
        self.steps -= 1
        self.trace.pop()
        self.outcome = None
        self.reason = None

    def run(self):
        while not self.halted:
            self.step()
        return self.result()

    def result(self):
        if not self.halted:
            raise RuntimeError("Machine is still running; call step() or run() first.")
        return ExecutionResult(
            outcome=self.outcome,
            final_state=self.current_state,
            tape=self.tape.contents(),
            trace=tuple(self.trace),
            steps=self.steps,
            blank=self.definition.blank_symbol,
            reason=self.reason,
            input_string=self.input_string,
        )

    def visualize(self):
        """Print the tape window with a caret under the head."""
        snapshot = self.trace[-1]
        print(" ".join(snapshot.cells))
        print(" ".join("^" if i == snapshot.head_index else " " for i in range(len(snapshot.cells))).rstrip())
        print(f"Step: {self.steps}, State: {self.current_state}, Halted: {self.halted}")

    def _halt(self, reason):
        self.outcome = Outcome.HALTED
        self.reason = reason
        return self.outcome

    def _snapshot(self):
        cells, head, offset = self.tape.snapshot()
        return Snapshot(step=self.steps, state=self.current_state, cells=cells, head=head, offset=offset)


def run_machine(definition, input_string="", max_steps=DEFAULT_MAX_STEPS, left_bounded=False):
    """Run one input to completion and return its ExecutionResult."""
    return Executor(definition, input_string, max_steps=max_steps, left_bounded=left_bounded).run()

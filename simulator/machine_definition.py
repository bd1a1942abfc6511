from dataclasses import dataclass
from typing import FrozenSet, Optional

from simulator.errors import (
    BlankInInputSymbols,
    BlankNotInAlphabet,
    FinalStateNotInStates,
    InitialStateNotInStates,
    InvalidInputError,
    InvalidSymbol,
    UnknownState,
    UnknownSymbol,
)
from simulator.transitions import State, Symbol, Transition, TransitionTable


@dataclass(frozen=True)
class MachineDefinition:
    """
    A validated 7-tuple.

    Build it with MachineDefinition.create(); the constructor itself does not
    validate. Instances are immutable and safe to share between runs.
    """
    alphabet: FrozenSet[str]
    input_symbols: FrozenSet[str]
    blank_symbol: str
    states: FrozenSet[str]
    initial_state: str
    final_states: FrozenSet[str]
    transitions: TransitionTable
    name: Optional[str] = None

    @classmethod
    def create(cls, alphabet, input_symbols, blank_symbol, states, initial_state,
               final_states, transitions, name=None):
        """Validate the raw fields and return a MachineDefinition or raise DefinitionError."""
        alphabet = frozenset(Symbol(str(s)) for s in alphabet)
        input_symbols = frozenset(Symbol(str(s)) for s in input_symbols)
        blank_symbol = Symbol(str(blank_symbol))
        states = frozenset(State(str(q)) for q in states)
        initial_state = State(str(initial_state))
        final_states = frozenset(State(str(q)) for q in final_states)

        # the input string is split per character, so every symbol is one character
        wide = sorted(s for s in alphabet | input_symbols | {blank_symbol} if len(s) != 1)
        if wide:
            raise InvalidSymbol(f"Symbols must be exactly one character: {wide}")

        if blank_symbol not in alphabet:
            raise BlankNotInAlphabet(f"Blank symbol {blank_symbol!r} is not in the alphabet")
        unknown = input_symbols - alphabet
        if unknown:
            raise UnknownSymbol(f"Input symbols not in the alphabet: {sorted(unknown)}")
        if blank_symbol in input_symbols:
            raise BlankInInputSymbols(f"Blank symbol {blank_symbol!r} must not be an input symbol")
        if initial_state not in states:
            raise InitialStateNotInStates(f"Initial state {initial_state!r} is not in the state set")
        unknown = final_states - states
        if unknown:
            raise FinalStateNotInStates(f"Final states not in the state set: {sorted(unknown)}")

        table = transitions if isinstance(transitions, TransitionTable) else TransitionTable(
            t if isinstance(t, Transition) else Transition.from_dict(t, index=i)
            for i, t in enumerate(transitions)
        )
        for transition in table:
            for state in (transition.from_state, transition.next_state):
                if state not in states:
                    raise UnknownState(
                        f"Transition {_describe(transition)} references unknown state {state!r}"
                    )
            for symbol in (transition.read_symbol, transition.write_symbol):
                if symbol not in alphabet:
                    raise UnknownSymbol(
                        f"Transition {_describe(transition)} references unknown symbol {symbol!r}"
                    )

        return cls(
            alphabet=alphabet,
            input_symbols=input_symbols,
            blank_symbol=blank_symbol,
            states=states,
            initial_state=initial_state,
            final_states=final_states,
            transitions=table,
            name=name,
        )

    def validate_input(self, input_string):
        invalid = [symbol for symbol in input_string if symbol not in self.input_symbols]
        if invalid:
            raise InvalidInputError(input_string, invalid)

    def is_final(self, state):
        return state in self.final_states


def _describe(transition):
    return (
        f"d({transition.from_state}, {transition.read_symbol}) = "
        f"({transition.next_state}, {transition.write_symbol}, {transition.direction.value})"
    )

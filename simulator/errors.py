class DefinitionError(ValueError):
    """Base class for an invalid 7-tuple. Raised before any tape exists."""


class UnknownState(DefinitionError):
    pass


class UnknownSymbol(DefinitionError):
    pass


class InvalidSymbol(DefinitionError):
    pass


class BlankNotInAlphabet(DefinitionError):
    pass


class BlankInInputSymbols(DefinitionError):
    pass


class InitialStateNotInStates(DefinitionError):
    pass


class FinalStateNotInStates(DefinitionError):
    pass


class DuplicateTransition(DefinitionError):
    pass


class InvalidDirection(DefinitionError):
    pass


class MissingField(DefinitionError):
    pass


class InvalidInputError(ValueError):
    """Input string contains symbols outside the input alphabet."""

    def __init__(self, input_string, invalid_symbols):
        self.input_string = input_string
        self.invalid_symbols = sorted(set(invalid_symbols))
        super().__init__(
            f"Input {input_string!r} contains symbols outside the input alphabet: {self.invalid_symbols}"
        )


class NoUndoError(RuntimeError):
    """Nothing left to undo."""

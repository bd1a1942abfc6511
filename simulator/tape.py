from simulator.transitions import Direction


class Tape:
    """Sparse, two-way unbounded tape: only non-blank cells are stored."""

    def __init__(self, blank):
        self.blank = blank
        self.cells = {}
        self.head = 0
        self.low = 0
        self.high = 0

    @classmethod
    def from_input(cls, input_string, blank):
        """Seed the input left-to-right starting at position 0."""
        tape = cls(blank)
        for i, symbol in enumerate(input_string):
            if symbol != blank:
                tape.cells[i] = symbol
        tape.high = max(len(input_string) - 1, 0)
        return tape

    def read(self):
        return self.cells.get(self.head, self.blank)

    def write(self, symbol):
        if symbol == self.blank:
            self.cells.pop(self.head, None)
        else:
            self.cells[self.head] = symbol

    def move(self, direction):
        self.head += Direction.parse(direction).offset
        self.low = min(self.low, self.head)
        self.high = max(self.high, self.head)

    def rewind(self, head, symbol, low, high):
        """Put the head back, restore the cell under it and the visited extent."""
        self.head = head
        self.write(symbol)
        self.low = low
        self.high = high

    def contents(self):
        """Symbols from the leftmost to the rightmost visited position."""
        return tuple(self.cells.get(i, self.blank) for i in range(self.low, self.high + 1))

    def snapshot(self):
        """Return (cells, head, offset) where offset is the position of cells[0]."""
        return self.contents(), self.head, self.low

    def __repr__(self):
        return f"Tape(head={self.head}, range=[{self.low}, {self.high}], cells={len(self.cells)})"

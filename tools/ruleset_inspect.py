import argparse

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from simulator.septuple import load_machine

console = Console()

def ordered_symbols(definition):
    """Input symbols first, then the rest of the tape alphabet, blank last."""
    inputs = sorted(definition.input_symbols)
    extra = sorted(definition.alphabet - definition.input_symbols - {definition.blank_symbol})
    return inputs + extra + [definition.blank_symbol]

def ordered_states(definition):
    """Initial state first, then the others by name."""
    rest = sorted(definition.states - {definition.initial_state})
    return [definition.initial_state] + rest

def format_action(transition):
    if transition is None:
        return "HALT"
    return f"{transition.write_symbol}{transition.direction.value}{transition.next_state}"

def septuple_table(definition):
    """The 7-tuple as a two-column rich table."""
    table = Table(title=escape(f"Machine {definition.name or ''}".strip()), show_header=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("States", escape("{" + ", ".join(ordered_states(definition)) + "}"))
    table.add_row("Alphabet", escape("{" + ", ".join(ordered_symbols(definition)) + "}"))
    table.add_row("Input symbols", escape("{" + ", ".join(sorted(definition.input_symbols)) + "}"))
    table.add_row("Blank symbol", escape(definition.blank_symbol))
    table.add_row("Initial state", escape(definition.initial_state))
    table.add_row("Final states", escape("{" + ", ".join(sorted(definition.final_states)) + "}"))
    table.add_row("Transitions", str(len(definition.transitions)))
    return table

def transition_table(definition):
    """State x symbol grid; an empty cell means the machine stops there."""
    symbols = ordered_symbols(definition)
    table = Table(title="Transition Table", header_style="bold magenta")
    table.add_column("State", justify="center")
    for symbol in symbols:
        table.add_column(escape(symbol), justify="center")

    for state in ordered_states(definition):
        label = f"*{state}" if definition.is_final(state) else state
        row = [label]
        for symbol in symbols:
            row.append(format_action(definition.transitions.lookup(state, symbol)))
        table.add_row(*[escape(cell) for cell in row])
    return table

def latex_table(definition):
    symbols = ordered_symbols(definition)
    lines = [r"\begin{array}{c|" + "c" * len(symbols) + "}"]
    lines.append("State/Symbol & " + " & ".join([f"\\text{{{s}}}" for s in symbols]) + r" \\ \hline")
    for state in ordered_states(definition):
        actions = [format_action(definition.transitions.lookup(state, symbol)) for symbol in symbols]
        lines.append(" & ".join([state] + actions) + r" \\")
    lines.append(r"\end{array}")
    return "\n".join(lines)

def pretty_print_machine(definition, latex=False):
    console.print(septuple_table(definition))
    console.print(transition_table(definition))
    if latex:
        console.print("\n=== LaTeX Table ===")
        console.print(latex_table(definition), markup=False, highlight=False)

def main():
    parser = argparse.ArgumentParser(description="Turing Machine Definition Inspector")
    parser.add_argument("--machine", required=True, help="Path to a machine definition JSON file")
    parser.add_argument("--latex", action="store_true", help="Also print the transition table as a LaTeX array")
    args = parser.parse_args()

    definition = load_machine(args.machine)
    print(f"[INFO] Machine {definition.name}")
    pretty_print_machine(definition, latex=args.latex)

if __name__ == "__main__":
    main()

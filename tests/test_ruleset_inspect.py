"""Tests for tools.ruleset_inspect."""

from simulator.machine_definition import MachineDefinition
from simulator.septuple import load_machine
from tools.ruleset_inspect import (
    format_action,
    latex_table,
    ordered_states,
    ordered_symbols,
    pretty_print_machine,
)


class TestOrdering:
    def test_symbols_inputs_first_blank_last(self, machines_dir):
        definition = load_machine(machines_dir / "zero_n_one_n.json")
        assert ordered_symbols(definition) == ["0", "1", "X", "Y", "B"]

    def test_initial_state_first(self, scan_right):
        assert ordered_states(scan_right)[0] == "q0"


class TestFormatting:
    def test_missing_rule_is_halt(self):
        assert format_action(None) == "HALT"

    def test_action_compact_form(self, scan_right):
        assert format_action(scan_right.transitions.lookup("q0", "B")) == "BLq1"

    def test_latex_rows(self, scan_right):
        latex = latex_table(scan_right)
        assert latex.startswith(r"\begin{array}{c|ccc}")
        assert r"q1 & HALT & HALT & HALT \\" in latex

    def test_pretty_print_runs(self, scan_right, capsys):
        pretty_print_machine(scan_right, latex=True)
        out = capsys.readouterr().out
        assert "Transition Table" in out
        assert "LaTeX" in out

    def test_markup_like_names_are_printed_literally(self, capsys):
        definition = MachineDefinition.create(
            alphabet=["[", "/", "]", "_"],
            input_symbols=["[", "/", "]"],
            blank_symbol="_",
            states=["[b]", "[/x]"],
            initial_state="[b]",
            final_states=["[/x]"],
            transitions=[
                {"from_state": "[b]", "read_symbol": "[", "write_symbol": "/", "move_to": "R", "next_state": "[/x]"},
            ],
            name="[/]",
        )
        pretty_print_machine(definition)
        out = capsys.readouterr().out
        assert "[/x]" in out
        assert "[b]" in out
        assert "/R[/x]" in out

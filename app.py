# app.py

import argparse
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from config.config_loader import DEFAULT_CONFIG, load_config, validate_config
from logger.logger import JSONLogger
from simulator.errors import DefinitionError, InvalidInputError, NoUndoError
from simulator.evaluator import evaluate_batch, summarize
from simulator.result import Outcome
from simulator.septuple import load_machine
from simulator.turing_machine import Executor
from tools.ruleset_inspect import pretty_print_machine

console = Console()

OUTCOME_COLORS = {
    Outcome.ACCEPTED: "green",
    Outcome.REJECTED: "red",
    Outcome.HALTED: "yellow",
}

# === Utilities ===
def load_runtime_config(path="config/runtime_config.json"):
    if not Path(path).exists():
        console.print(f"[yellow]Config {path} not found, using defaults.[/yellow]")
        return DEFAULT_CONFIG.copy()
    return load_config(path, verbose=False)

def trace_table(result):
    table = Table(title="Trace", header_style="bold magenta")
    table.add_column("Step", justify="right")
    table.add_column("State", justify="center")
    table.add_column("Tape")
    table.add_column("Head", justify="right")
    for snapshot in result.trace:
        table.add_row(str(snapshot.step), escape(snapshot.state), escape(snapshot.render()), str(snapshot.head))
    return table

def show_result(result, show_trace=True):
    """Tested string, outcome, final tape and (optionally) the full trace."""
    color = OUTCOME_COLORS[result.outcome]
    console.print(f"\n[bold]Input:[/bold] {escape(repr(result.input_string))}")
    console.print(f"[bold]Result:[/bold] [{color}]{result.label}[/{color}] "
                  f"after {result.steps:,} steps in state {escape(result.final_state)}")
    console.print(f"[bold]Final tape:[/bold] {escape(''.join(result.tape))}   [bold]Output:[/bold] {escape(repr(result.output))}",
                  highlight=False)
    if show_trace:
        console.print(trace_table(result))

def show_configuration(executor):
    snapshot = executor.trace[-1]
    console.print(f"[cyan]Step {snapshot.step}[/cyan]  state [bold]{escape(snapshot.state)}[/bold]  "
                  f"head {snapshot.head}  tape {escape(snapshot.render())}", highlight=False)

def make_logger(config):
    if not config["log_runs"]:
        return None
    return JSONLogger(config["output_directory"], config["log_file_prefix"])

# === Interactive Mode ===
def read_valid_tape(definition):
    """Ask for tapes until one uses only input symbols. Returns None to go back."""
    symbols = ", ".join(sorted(definition.input_symbols))
    while True:
        tape = Prompt.ask(f"\nTape over {{{symbols}}} (type :q to go back)", default="")
        if tape == ":q":
            return None
        try:
            definition.validate_input(tape)
        except InvalidInputError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            continue
        return tape

def process_machine(executor, logger=None, show_trace=True):
    """Step through one run until the user leaves."""
    logged = False
    while True:
        show_configuration(executor)
        if executor.halted:
            result = executor.result()
            color = OUTCOME_COLORS[result.outcome]
            console.print(f"[{color}]{result.label}[/{color}]")
            if logger is not None and not logged:
                logger.log_result(result, executor.definition.name)
                logged = True

        choice = Prompt.ask("(n)ext, (p)revious, (r)un, (q)uit", choices=["n", "p", "r", "q"], default="n")
        if choice == "n":
            executor.step()
        elif choice == "p":
            try:
                executor.undo()
            except NoUndoError as e:
                console.print(f"[yellow]{e}[/yellow]")
        elif choice == "r":
            result = executor.run()
            show_result(result, show_trace=show_trace)
        elif choice == "q":
            return

def show_main_menu(definition):
    console.print(f"\n[bold cyan]Turing Machine Simulator[/bold cyan] - {escape(str(definition.name))}")
    console.print("[1] Test a tape")
    console.print("[2] Show machine definition")
    console.print("[3] Exit")

def interactive_main(definition, config):
    logger = make_logger(config)

    while True:
        show_main_menu(definition)
        choice = Prompt.ask("\nChoose an option", choices=["1", "2", "3"], default="3")

        if choice == "1":
            tape = read_valid_tape(definition)
            if tape is None:
                continue
            executor = Executor(definition, tape, max_steps=config["max_steps"],
                                left_bounded=config["left_bounded"])
            process_machine(executor, logger, show_trace=config["show_trace"])
        elif choice == "2":
            pretty_print_machine(definition)
        elif choice == "3":
            console.print("[bold green]Goodbye![/bold green]")
            break

# === CLI Mode for Automation ===
def cli_main(definition, inputs, config):
    results = evaluate_batch(definition, inputs, max_steps=config["max_steps"],
                             left_bounded=config["left_bounded"], workers=config["workers"])

    pretty_print_machine(definition)
    for result in results:
        show_result(result, show_trace=config["show_trace"])

    logger = make_logger(config)
    if logger is not None:
        logger.log_results(results, definition.name)

    summary = summarize(results)
    console.print(f"\n[bold]Accepted:[/bold] {summary['accepted']}  [bold]Rejected:[/bold] {summary['rejected']}  "
                  f"[bold]Halted:[/bold] {summary['halted']}  of {summary['total']}")
    return results

def build_parser():
    parser = argparse.ArgumentParser(description="Single-tape Turing Machine Simulator")
    parser.add_argument("machine", help="Path to a machine definition (7-tuple) JSON file")
    parser.add_argument("--input", "-i", action="append", dest="inputs",
                        help="Input string to test (repeatable); omit for interactive mode")
    parser.add_argument("--config", default="config/runtime_config.json", help="Runtime config JSON file")
    parser.add_argument("--max-steps", type=int, help="Step budget before a run is halted")
    parser.add_argument("--workers", type=int, help="Worker processes for batch runs")
    parser.add_argument("--left-bounded", action="store_true", help="Halt runs that move left of position 0")
    parser.add_argument("--no-trace", action="store_true", help="Do not print the step-by-step trace")
    parser.add_argument("--no-log", action="store_true", help="Do not write JSON run logs")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = load_runtime_config(args.config)
        apply_overrides(config, args)
    except (ValueError, TypeError) as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        sys.exit(1)

    try:
        definition = load_machine(args.machine)

        if args.inputs is not None:
            cli_main(definition, args.inputs, config)
        else:
            interactive_main(definition, config)
    except (DefinitionError, InvalidInputError, FileNotFoundError, json.JSONDecodeError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

def apply_overrides(config, args):
    """Command-line flags win over the config file."""
    if args.max_steps is not None:
        config["max_steps"] = args.max_steps
    if args.workers is not None:
        config["workers"] = args.workers
    if args.left_bounded:
        config["left_bounded"] = True
    if args.no_trace:
        config["show_trace"] = False
    if args.no_log:
        config["log_runs"] = False
    validate_config(config)

if __name__ == "__main__":
    main()

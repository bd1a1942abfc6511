# tools/simulate_pool.py

import argparse
import json
import os
from pathlib import Path
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from simulator.errors import InvalidInputError
from simulator.evaluator import evaluate_batch, summarize
from simulator.septuple import load_machine
from simulator.turing_machine import DEFAULT_MAX_STEPS

# === Utility Loaders ===
def load_input_pool(input_pool_file):
    with open(input_pool_file, "r", encoding="utf-8") as f:
        # one input per line; an empty line is the empty tape
        inputs = [line.rstrip("\r\n") for line in f]
    return inputs

def load_checkpoint(checkpoint_path):
    if checkpoint_path.exists():
        with open(checkpoint_path, "r", encoding="utf-8") as f:
            checkpoint = json.load(f)
        return checkpoint.get("completed", [])
    return []

def save_checkpoint(completed, checkpoint_path):
    with open(checkpoint_path, "w", encoding="utf-8") as f:
        json.dump({"completed": completed}, f, indent=4)

def console_message(msg):
    print(f"[{Path(os.getcwd()).name}] {msg}")

# === Main Simulation Runner ===
def simulate_pool(machine_file, input_pool_file, output_name="results", results_root="results",
                  batch_size=256, max_steps=DEFAULT_MAX_STEPS, left_bounded=False, workers=1):
    definition = load_machine(machine_file)
    pool_name = Path(input_pool_file).stem
    results_folder = Path(results_root) / pool_name
    results_folder.mkdir(parents=True, exist_ok=True)
    results_file = results_folder / f"{output_name}.jsonl"
    checkpoint_file = results_folder / f"{output_name}_checkpoint.json"

    all_inputs = load_input_pool(input_pool_file)
    completed = load_checkpoint(checkpoint_file)
    done = set(completed)

    pending_inputs = [s for s in all_inputs if s not in done]
    console_message(f"Loaded {len(all_inputs):,} total inputs. {len(pending_inputs):,} pending.")

    totals = {"total": 0, "accepted": 0, "rejected": 0, "halted": 0, "invalid": 0}

    with open(results_file, "a", encoding="utf-8") as results_fh:
        for batch_start in range(0, len(pending_inputs), batch_size):
            batch = pending_inputs[batch_start:batch_start + batch_size]
            console_message(f"Processing batch {batch_start // batch_size + 1} with {len(batch):,} inputs...")

            with Progress(
                    SpinnerColumn(),
                    BarColumn(),
                    "[progress.percentage]{task.percentage:>3.0f}%",
                    TextColumn("{task.completed}/{task.total} Inputs"),
                    TimeElapsedColumn()
            ) as progress:

                task = progress.add_task("[cyan]Simulating...", total=len(batch))

                valid = []
                batch_entries = []
                for input_string in batch:
                    try:
                        definition.validate_input(input_string)
                        valid.append(input_string)
                    except InvalidInputError as e:
                        console_message(f"[WARNING] Skipping {input_string!r}: {e}")
                        batch_entries.append({"machine": definition.name, "input": input_string,
                                              "outcome": "invalid", "error": str(e)})
                        totals["invalid"] += 1
                        progress.update(task, advance=1)

                results = evaluate_batch(definition, valid, max_steps=max_steps,
                                         left_bounded=left_bounded, workers=workers)
                for result in results:
                    entry = {"machine": definition.name}
                    entry.update(result.to_dict(include_trace=False))
                    batch_entries.append(entry)
                progress.update(task, advance=len(results))

                for key, count in summarize(results).items():
                    totals[key] += count
                totals["total"] += len(batch) - len(results)

                # === BULK WRITE once per batch ===
                for entry in batch_entries:
                    results_fh.write(json.dumps(entry) + "\n")
                results_fh.flush()

                completed.extend(batch)
                save_checkpoint(completed, checkpoint_file)
                console_message(f"[INFO] Batch completed. Checkpoint saved.")

    console_message("[SUCCESS] All inputs simulated. Results saved.")
    return totals


# === CLI ===
def main():
    parser = argparse.ArgumentParser(description="Run a pool of input strings against a Turing machine with checkpointing.")
    parser.add_argument("--machine", required=True, help="Path to the machine definition JSON file")
    parser.add_argument("--pool", required=True, help="Path to input pool file (one input string per line)")
    parser.add_argument("--output", default="results", help="Output result file name (default: results)")
    parser.add_argument("--batch_size", type=int, default=256, help="Batch size per save/checkpoint")
    parser.add_argument("--max_steps", type=int, default=DEFAULT_MAX_STEPS, help="Maximum steps before a run is halted")
    parser.add_argument("--left_bounded", action="store_true", help="Halt runs that move left of position 0")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes per batch")
    args = parser.parse_args()

    simulate_pool(
        args.machine,
        args.pool,
        args.output,
        batch_size=args.batch_size,
        max_steps=args.max_steps,
        left_bounded=args.left_bounded,
        workers=args.workers
    )

if __name__ == "__main__":
    main()

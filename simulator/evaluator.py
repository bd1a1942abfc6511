import multiprocessing
from functools import partial

from simulator.turing_machine import DEFAULT_MAX_STEPS, run_machine


def evaluate_batch(definition, inputs, max_steps=DEFAULT_MAX_STEPS, left_bounded=False, workers=1):
    """
    Run every input string against the same machine.

    Results come back in input order. The definition is read-only and every
    run owns its tape, so with workers > 1 the inputs are spread over a
    process pool.
    """
    inputs = list(inputs)
    for input_string in inputs:
        definition.validate_input(input_string)

    run_one = partial(run_machine, definition, max_steps=max_steps, left_bounded=left_bounded)

    if workers <= 1 or len(inputs) <= 1:
        return [run_one(input_string) for input_string in inputs]

    with multiprocessing.Pool(processes=min(workers, len(inputs))) as pool:
        return pool.map(run_one, inputs)


def summarize(results):
    """Count outcomes across a batch, keyed by outcome value."""
    summary = {"total": len(results), "accepted": 0, "rejected": 0, "halted": 0}
    for result in results:
        summary[result.outcome.value] += 1
    return summary

"""Tests for simulator.evaluator: many inputs against one machine."""

import pytest

from simulator.errors import InvalidInputError
from simulator.evaluator import evaluate_batch, summarize
from simulator.result import Outcome
from simulator.turing_machine import run_machine


class TestEvaluateBatch:
    def test_results_in_input_order(self, scan_right):
        inputs = ["", "0", "1101", "10"]
        results = evaluate_batch(scan_right, inputs)
        assert [r.input_string for r in results] == inputs

    def test_matches_single_runs(self, scan_right):
        inputs = ["0", "11", "0101"]
        assert evaluate_batch(scan_right, inputs) == [run_machine(scan_right, s) for s in inputs]

    def test_process_pool_matches_sequential(self, scan_right):
        inputs = ["0", "11", "0101", "1", "000"]
        assert evaluate_batch(scan_right, inputs, workers=2) == evaluate_batch(scan_right, inputs)

    def test_step_limit_passed_through(self, looping):
        results = evaluate_batch(looping, ["a", "aa"], max_steps=5)
        assert all(r.outcome is Outcome.HALTED and r.steps == 5 for r in results)

    def test_invalid_input_refused_before_any_run(self, scan_right):
        with pytest.raises(InvalidInputError):
            evaluate_batch(scan_right, ["0", "0x"])

    def test_empty_batch(self, scan_right):
        assert evaluate_batch(scan_right, []) == []


class TestSummarize:
    def test_counts_by_outcome(self, looping, scan_right):
        results = evaluate_batch(scan_right, ["0", "1"]) + evaluate_batch(looping, ["a"], max_steps=3)
        assert summarize(results) == {"total": 3, "accepted": 2, "rejected": 0, "halted": 1}

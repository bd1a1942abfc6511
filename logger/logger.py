import json
import os
from datetime import datetime, timezone

from simulator.result import Outcome

OUTCOME_FILES = {
    Outcome.ACCEPTED: "accepted_",
    Outcome.REJECTED: "rejected_",
    Outcome.HALTED: "halted_",
}

class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="tm_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log(self, entry: dict):
        """Log a single entry to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_batch(self, entries: list):
        """Log a batch of entries to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def rotate(self):
        """Force start a new main log file."""
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def log_result(self, result, machine_name=None):
        """Summary to the main log, full trace to the file for its outcome."""
        timestamp = datetime.now(timezone.utc).isoformat()
        summary = {"machine": machine_name, "timestamp": timestamp}
        summary.update(result.to_dict(include_trace=False))
        self.log(summary)

        detailed = {"machine": machine_name, "timestamp": timestamp}
        detailed.update(result.to_dict())
        self._log_to_file(f"{OUTCOME_FILES[result.outcome]}{self.today}.jsonl", [detailed])

    def log_results(self, results: list, machine_name=None):
        for result in results:
            self.log_result(result, machine_name)

"""JSONL logger recording the lock, every matched word and the final tally."""

import json
from typing import Callable, Optional


class BaseLogger:
    """Base class for JSONL loggers. A logger with no file is a no-op."""
    def __init__(self, log_file: Optional[str], open: Callable = open):
        self.log_file = log_file
        self.log_f = None
        self._open = open

    def start_logging(self):
        """Open the log file for writing."""
        if self.log_file:
            self.log_f = self._open(self.log_file, "w")

    def stop_logging(self):
        """Close the log file."""
        if self.log_f:
            self.log_f.close()
            self.log_f = None

    def _write_event(self, event: dict):
        """Write a dictionary as a JSON line to the log file."""
        if not self.log_f:
            return
        self.log_f.write(json.dumps(event) + "\n")
        self.log_f.flush()


class ResultLogger(BaseLogger):
    def log_lock(self, wheel_count: int, letters_per_wheel: int):
        event = {
            "event_type": "lock",
            "wheel_count": wheel_count,
            "letters_per_wheel": letters_per_wheel
        }
        self._write_event(event)

    def log_match(self, word: str, starts: list[int]):
        event = {
            "event_type": "match",
            "word": word,
            "alignments": len(starts),
            "starts": starts
        }
        self._write_event(event)

    def log_summary(self, total: int, words: int):
        event = {
            "event_type": "summary",
            "total": total,
            "words": words
        }
        self._write_event(event)

    def log_error(self, kind: str, message: str):
        event = {
            "event_type": "error",
            "kind": kind,
            "message": message
        }
        self._write_event(event)

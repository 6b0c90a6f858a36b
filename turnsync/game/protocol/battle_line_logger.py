"""Logs received protocol lines to file for debugging and analysis."""

import json
import os
from typing import Any, Dict, Optional, TextIO

TURN_PREFIX = "|turn|"


class BattleLineLogger:
    """Line observer that writes every received line to a JSON-lines file.

    Pass an instance as the MessageParser's line_observer. Each record carries
    the turn number in effect when the line arrived.
    """

    def __init__(
        self, agent_name: str, epoch_secs: int, log_dir: str = "/tmp/logs"
    ) -> None:
        """Initialize the line logger.

        Args:
            agent_name: Name of the agent being used
            epoch_secs: Timestamp in epoch seconds for the log filename
            log_dir: Directory the log file is created in
        """
        self._agent_name = agent_name
        self._epoch_secs = epoch_secs
        self._log_dir = log_dir
        self._current_turn_number = 0

        os.makedirs(self._log_dir, exist_ok=True)
        filename = f"{self._agent_name}_{self._epoch_secs}.txt"
        self._filepath = os.path.join(self._log_dir, filename)
        self._file: Optional[TextIO] = open(self._filepath, "w")

    @property
    def filepath(self) -> str:
        return self._filepath

    def __call__(self, line: str) -> None:
        self.log_line(line)

    def log_line(self, line: str) -> None:
        """Log one protocol line.

        Args:
            line: Raw line as received
        """
        if self._file is None:
            return

        if line.startswith(TURN_PREFIX):
            turn_text = line[len(TURN_PREFIX) :].split("|", 1)[0]
            if turn_text.isdigit():
                self._current_turn_number = int(turn_text)

        log_entry: Dict[str, Any] = {
            "turn_number": self._current_turn_number,
            "line": line,
        }
        self._file.write(f"{json.dumps(log_entry)}\n")
        self._file.flush()

    def close(self) -> None:
        """Close the log file."""
        if self._file is not None:
            self._file.close()
            self._file = None

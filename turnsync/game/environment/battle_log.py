"""Append-only record of the raw protocol lines seen in a battle."""

from typing import Dict, Iterator, List, Optional, Tuple

TURN_PREFIX = "|turn|"
REQUEST_PREFIX = "|request|"


class BattleLog:
    """Ordered, append-only sequence of raw protocol lines.

    The turn synchronizer owns the log and is the only writer. Decision
    delegates receive it to reconstruct the public battle state and should
    treat it as read-only.
    """

    def __init__(self) -> None:
        self._lines: List[str] = []

    def append(self, line: str) -> None:
        """Append a raw line. Lines are never removed or reordered."""
        self._lines.append(line)

    @property
    def lines(self) -> Tuple[str, ...]:
        """All lines in receipt order."""
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._lines))

    def lines_by_turn(self) -> Dict[int, List[str]]:
        """Group lines by the |turn|N marker that precedes them.

        Lines before the first turn marker (team preview, switch-ins, the first
        request) are grouped under turn 0. A turn marker line itself opens its
        turn's group.

        Returns:
            Dictionary mapping turn number to the lines of that turn
        """
        lines_by_turn: Dict[int, List[str]] = {}
        current_turn = 0
        for line in self._lines:
            if line.startswith(TURN_PREFIX):
                turn_text = line[len(TURN_PREFIX) :].split("|", 1)[0]
                if turn_text.isdigit():
                    current_turn = int(turn_text)
            lines_by_turn.setdefault(current_turn, []).append(line)
        return lines_by_turn

    def last_request_line(self) -> Optional[str]:
        """Most recent raw |request| line, or None if none was received."""
        for line in reversed(self._lines):
            if line.startswith(REQUEST_PREFIX):
                return line
        return None

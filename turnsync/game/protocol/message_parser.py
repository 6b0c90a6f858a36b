"""Classifies simulator protocol lines."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, FrozenSet, Iterable, Optional, Tuple

from absl import logging

from turnsync.game.exceptions import ProtocolError
from turnsync.game.schema.request_snapshot import RequestSnapshot

PROTOCOL_SIGIL = "|"

LineObserver = Callable[[str], None]


class LineKind(Enum):
    """What a protocol line means to the turn synchronizer."""

    BATTLE_UPDATE = "battle_update"
    REQUEST = "request"
    ERROR = "error"
    OPAQUE = "opaque"


@dataclass(frozen=True)
class ProtocolLine:
    """A classified protocol line.

    Attributes:
        raw_message: The line exactly as received
        kind: Classification of the line
        cmd: Command name (text between the first two "|"), "" for opaque
            lines without the sigil
        rest: Everything after the command separator, never re-split
        request: Decoded snapshot for REQUEST lines, None otherwise
    """

    raw_message: str
    kind: LineKind
    cmd: str = ""
    rest: str = ""
    request: Optional[RequestSnapshot] = None


def split_first(text: str, separator: str) -> Tuple[str, str]:
    """Split text on the first separator only.

    Examples:
        >>> split_first('request|{"a": "x|y"}', "|")
        ('request', '{"a": "x|y"}')
        >>> split_first("upkeep", "|")
        ('upkeep', '')
    """
    head, _, tail = text.partition(separator)
    return head, tail


def log_line(line: str) -> None:
    """Default line observer: logs each received line at debug level."""
    logging.debug("%s", line)


class MessageParser:
    """Turns raw protocol lines into ProtocolLine values.

    Battle-update commands are the commands that report a completed, observable
    action. The default set is deliberately small; pass extra_battle_update_commands
    to recognize more without touching the class constant.
    """

    BATTLE_UPDATE_COMMANDS: FrozenSet[str] = frozenset({"move", "switch", "teampreview"})

    def __init__(
        self,
        extra_battle_update_commands: Iterable[str] = (),
        line_observer: Optional[LineObserver] = None,
    ) -> None:
        """Initialize the parser.

        Args:
            extra_battle_update_commands: Commands to treat as battle updates in
                addition to BATTLE_UPDATE_COMMANDS
            line_observer: Called with every line before it is classified.
                Defaults to debug logging.
        """
        self._battle_update_commands = self.BATTLE_UPDATE_COMMANDS | frozenset(
            extra_battle_update_commands
        )
        self._line_observer = line_observer or log_line

    @property
    def battle_update_commands(self) -> FrozenSet[str]:
        return self._battle_update_commands

    def parse(self, line: str) -> ProtocolLine:
        """Classify a single line.

        Args:
            line: One protocol line, without its trailing newline

        Returns:
            The classified ProtocolLine

        Raises:
            ProtocolError: If the line is an |error| line
            DecodeError: If the line is a |request| line with a malformed payload
        """
        self._line_observer(line)

        if not line.startswith(PROTOCOL_SIGIL):
            return ProtocolLine(raw_message=line, kind=LineKind.OPAQUE)

        cmd, rest = split_first(line[len(PROTOCOL_SIGIL) :], PROTOCOL_SIGIL)

        if cmd == "error":
            raise ProtocolError(rest)

        if cmd == "request":
            return ProtocolLine(
                raw_message=line,
                kind=LineKind.REQUEST,
                cmd=cmd,
                rest=rest,
                request=RequestSnapshot.from_json(rest),
            )

        if cmd in self._battle_update_commands:
            return ProtocolLine(
                raw_message=line, kind=LineKind.BATTLE_UPDATE, cmd=cmd, rest=rest
            )

        return ProtocolLine(raw_message=line, kind=LineKind.OPAQUE, cmd=cmd, rest=rest)

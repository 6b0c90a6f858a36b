"""Custom exceptions for turn synchronization errors."""

from typing import Sequence


class TurnSyncError(Exception):
    """Base class for all errors raised by the turn-synchronization engine.

    None of these errors are retried by the engine. Retry policy, if any,
    belongs to whatever orchestrates the agent.
    """


class ProtocolError(TurnSyncError):
    """Exception raised when the simulator sends an |error| line.

    Attributes:
        error_text: The error message from the simulator
    """

    def __init__(self, error_text: str):
        """Initialize the ProtocolError.

        Args:
            error_text: The error message from the simulator
        """
        self.error_text = error_text
        super().__init__(error_text)


class DecodeError(TurnSyncError):
    """Exception raised when a |request| payload cannot be decoded.

    Attributes:
        raw_json: The payload text that failed to decode
        reason: Short description of what went wrong
    """

    def __init__(self, raw_json: str, reason: str):
        self.raw_json = raw_json
        self.reason = reason
        super().__init__(f"Malformed request payload ({reason}): {raw_json!r}")


class InvalidActionError(TurnSyncError):
    """Exception raised when a delegate returns an action outside the action space.

    This is a contract violation in the decision delegate. It is raised before
    anything is written to the stream.

    Attributes:
        action: The action the delegate returned
        action_space: The legal actions for the cycle
    """

    def __init__(self, action: object, action_space: Sequence[str]):
        self.action = action
        self.action_space = list(action_space)
        super().__init__(
            f"invalid action: {action!r} (legal actions: {', '.join(self.action_space)})"
        )


class UnsupportedDelegateError(TurnSyncError):
    """Exception raised when no concrete decision delegate was supplied."""

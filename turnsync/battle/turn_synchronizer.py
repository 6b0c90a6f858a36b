"""Fires exactly one decision per turn from the simulator's player stream."""

import asyncio
import inspect
from enum import Enum
from typing import Any, Dict, Optional

from absl import logging

from turnsync.agents.agent_interface import Agent
from turnsync.game.environment.battle_log import BattleLog
from turnsync.game.exceptions import (
    InvalidActionError,
    TurnSyncError,
    UnsupportedDelegateError,
)
from turnsync.game.protocol.message_parser import LineKind, MessageParser
from turnsync.game.schema.action_space import get_action_space
from turnsync.game.schema.request_snapshot import RequestSnapshot


class SyncState(Enum):
    """Rendezvous between the two signals that make a turn decidable.

    A decision is due only once both a battle update and a request have been
    received since the last decision.
    """

    NEED_BOTH = "need_both"
    NEED_UPDATE = "need_update"
    NEED_REQUEST = "need_request"
    READY = "ready"

    def on_battle_update(self) -> "SyncState":
        return _AFTER_BATTLE_UPDATE[self]

    def on_request(self) -> "SyncState":
        return _AFTER_REQUEST[self]


_AFTER_BATTLE_UPDATE: Dict[SyncState, SyncState] = {
    SyncState.NEED_BOTH: SyncState.NEED_REQUEST,
    SyncState.NEED_UPDATE: SyncState.READY,
    SyncState.NEED_REQUEST: SyncState.NEED_REQUEST,
    SyncState.READY: SyncState.READY,
}

_AFTER_REQUEST: Dict[SyncState, SyncState] = {
    SyncState.NEED_BOTH: SyncState.NEED_UPDATE,
    SyncState.NEED_UPDATE: SyncState.NEED_UPDATE,
    SyncState.NEED_REQUEST: SyncState.READY,
    SyncState.READY: SyncState.READY,
}


class TurnSynchronizer:
    """Consumes protocol chunks and runs one decision cycle per turn.

    For every inbound chunk, each line is classified and appended to the
    battle log. Once the whole chunk is processed, if both a battle update and
    a request have arrived since the last cycle, a decision cycle runs:

    1. Reset to NEED_BOTH.
    2. If the request is a wait request, stop (nothing is due).
    3. Enumerate the action space and ask the agent for an action.
    4. Raise InvalidActionError if the action is not in the action space.
    5. Write the action to the stream.

    Cycles are strictly serialized: the next chunk is not processed until the
    previous cycle's write has completed.
    """

    def __init__(
        self,
        stream: Any,
        agent: Optional[Agent],
        parser: Optional[MessageParser] = None,
    ) -> None:
        """Initialize the synchronizer.

        Args:
            stream: Player stream with async read() -> Optional[str] (None once
                the stream is closed) and async write(choice: str)
            agent: Decision delegate consulted once per turn
            parser: MessageParser used to classify lines (creates new one if None)

        Raises:
            UnsupportedDelegateError: If no agent with a choose_action method
                was supplied
        """
        if agent is None or not callable(getattr(agent, "choose_action", None)):
            raise UnsupportedDelegateError(
                f"a decision delegate with choose_action is required, got {agent!r}"
            )

        self._stream = stream
        self._agent = agent
        self._parser = parser or MessageParser()
        self._battle_log = BattleLog()
        self._state = SyncState.NEED_BOTH
        self._current_request: Optional[RequestSnapshot] = None
        self._decision_count = 0
        self._lock = asyncio.Lock()

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def current_request(self) -> Optional[RequestSnapshot]:
        return self._current_request

    @property
    def battle_log(self) -> BattleLog:
        return self._battle_log

    @property
    def decision_count(self) -> int:
        """Number of decision cycles that wrote an action."""
        return self._decision_count

    async def run(self) -> int:
        """Read and process chunks until the stream closes.

        Returns:
            The number of actions written

        Raises:
            ProtocolError: If the simulator sends an |error| line
            DecodeError: If a |request| payload is malformed
            InvalidActionError: If the agent returns an illegal action
        """
        logging.info("[TurnSynchronizer] Listening for protocol chunks")
        while True:
            chunk = await self._stream.read()
            if chunk is None:
                logging.info(
                    "[TurnSynchronizer] Stream closed after %d decisions",
                    self._decision_count,
                )
                return self._decision_count

            try:
                await self.receive(chunk)
            except TurnSyncError as e:
                logging.error("[TurnSynchronizer] %s: %s", type(e).__name__, e)
                raise

    async def receive(self, chunk: str) -> Optional[str]:
        """Process one inbound chunk.

        Args:
            chunk: One or more newline-separated protocol lines

        Returns:
            The action written to the stream, or None if no action was due
        """
        async with self._lock:
            for line in chunk.split("\n"):
                self._receive_line(line)

            if self._state is not SyncState.READY:
                return None

            return await self._run_decision_cycle()

    def _receive_line(self, line: str) -> None:
        """Classify a line, update the sync state and record the line.

        ProtocolError and DecodeError propagate from the parser, so an |error|
        line is never recorded and the rest of its chunk is not processed.
        Empty lines reach the parser's observer but are not recorded.
        """
        protocol_line = self._parser.parse(line)

        if protocol_line.kind is LineKind.REQUEST:
            self._current_request = protocol_line.request
            self._state = self._state.on_request()
        elif protocol_line.kind is LineKind.BATTLE_UPDATE:
            self._state = self._state.on_battle_update()

        if line:
            self._battle_log.append(line)

    async def _run_decision_cycle(self) -> Optional[str]:
        request = self._current_request
        assert request is not None
        self._state = SyncState.NEED_BOTH

        if request.wait:
            logging.debug("[TurnSynchronizer] Wait request, no action due")
            return None

        action_space = get_action_space(request)
        result = self._agent.choose_action(self._battle_log, action_space)
        action = await result if inspect.isawaitable(result) else result

        if not isinstance(action, str) or action not in action_space:
            raise InvalidActionError(action, action_space)

        logging.debug(
            "[TurnSynchronizer] Chose %s from %s", action, ", ".join(action_space)
        )
        await self._stream.write(action)
        self._decision_count += 1
        return action

"""Abstract base class for decision delegates."""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Sequence, Union

from turnsync.game.environment.battle_log import BattleLog
from turnsync.game.exceptions import UnsupportedDelegateError

ActionResult = Union[str, Awaitable[str]]


class Agent(ABC):
    """Abstract base class for all decision delegates.

    An agent is handed to the TurnSynchronizer at construction. Once per turn,
    the synchronizer calls choose_action with the battle log and the legal
    action space, and sends whatever the agent returns to the simulator.

    The interface follows these design principles:

    1. **Action Space Contract**: The returned action must be one of the
       strings in action_space. The synchronizer checks membership and raises
       InvalidActionError otherwise, before anything is written.

    2. **Read-Only Log**: The BattleLog holds every non-fatal line received so
       far, in order. Agents may read it to rebuild the public battle state but
       must not append to it.

    3. **Sync or Async**: choose_action may return the action directly or an
       awaitable resolving to it (e.g. when querying a model or a human). The
       synchronizer does not read further input until the action is written.

    Example Implementation:
        ```python
        class LastActionAgent(Agent):
            async def choose_action(
                self, battle_log: BattleLog, action_space: Sequence[str]
            ) -> str:
                return action_space[-1]
        ```

    Example Usage:
        ```python
        synchronizer = TurnSynchronizer(stream, agent=LastActionAgent())
        await synchronizer.run()
        ```
    """

    @abstractmethod
    def choose_action(
        self, battle_log: BattleLog, action_space: Sequence[str]
    ) -> ActionResult:
        """Choose one action from the action space.

        Args:
            battle_log: Every non-fatal protocol line received so far
            action_space: Legal action strings for this turn, in enumeration
                order (moves, mega moves, Z-moves, switches)

        Returns:
            One element of action_space, or an awaitable resolving to one

        Raises:
            UnsupportedDelegateError: If a subclass defers to this base
                implementation
        """
        raise UnsupportedDelegateError(
            f"{type(self).__name__}.choose_action must be overridden"
        )


class CallableAgent(Agent):
    """Adapts a plain function (sync or async) to the Agent interface.

    Example:
        ```python
        agent = CallableAgent(lambda battle_log, action_space: action_space[0])
        ```
    """

    def __init__(
        self, policy: Callable[[BattleLog, Sequence[str]], ActionResult]
    ) -> None:
        if not callable(policy):
            raise UnsupportedDelegateError(f"policy is not callable: {policy!r}")
        self._policy = policy

    def choose_action(
        self, battle_log: BattleLog, action_space: Sequence[str]
    ) -> ActionResult:
        return self._policy(battle_log, action_space)

"""First available agent that always picks the first legal action."""

from typing import Sequence

from turnsync.agents.agent_interface import Agent
from turnsync.game.environment.battle_log import BattleLog


class FirstAvailableAgent(Agent):
    """Agent that always picks the first action of the action space.

    Because the action space is ordered moves first, then mega moves, Z-moves
    and finally switches, this agent uses its first usable move whenever one
    exists and otherwise switches to the lowest-numbered healthy bench slot.

    This deterministic behavior makes this agent useful for:
    - Baseline comparisons (simplest possible strategy)
    - Testing and debugging (predictable, reproducible behavior)
    - Sanity checks for battle flow (ensures battles can complete)
    """

    async def choose_action(
        self, battle_log: BattleLog, action_space: Sequence[str]
    ) -> str:
        """Return the first legal action.

        Args:
            battle_log: Battle log (unused by this agent)
            action_space: Legal actions for this turn

        Returns:
            action_space[0]

        Raises:
            ValueError: If the action space is empty
        """
        if not action_space:
            raise ValueError("No available actions when an action is required")
        return action_space[0]

"""Random agent that selects random legal actions."""

import random
from typing import Optional, Sequence

from turnsync.agents.agent_interface import Agent
from turnsync.game.environment.battle_log import BattleLog


class RandomAgent(Agent):
    """Agent that picks random legal actions.

    With probability switch_probability the agent picks among the switch
    actions (when there are any); otherwise it picks among the remaining
    actions. If only one kind of action is legal, it picks among those.

    The randomness makes this agent useful as:
    - A baseline for comparing other agents
    - A testing opponent for human players
    - A sanity check for battle mechanics

    Attributes:
        switch_probability: Probability of choosing a switch over a move
    """

    def __init__(
        self, switch_probability: float = 0.1, seed: Optional[int] = None
    ) -> None:
        """Initialize RandomAgent.

        Args:
            switch_probability: Probability (0-1) of choosing a switch when both
                moves and switches are legal (default 0.1)
            seed: Seed for the agent's private random generator
        """
        if not 0.0 <= switch_probability <= 1.0:
            raise ValueError(
                f"switch_probability must be between 0 and 1, got {switch_probability}"
            )
        self.switch_probability = switch_probability
        self._rng = random.Random(seed)

    async def choose_action(
        self, battle_log: BattleLog, action_space: Sequence[str]
    ) -> str:
        """Choose a random legal action.

        Args:
            battle_log: Battle log (unused by this agent)
            action_space: Legal actions for this turn

        Returns:
            A randomly selected element of action_space

        Raises:
            ValueError: If the action space is empty
        """
        if not action_space:
            raise ValueError("No available actions when an action is required")

        switches = [action for action in action_space if action.startswith("switch ")]
        others = [action for action in action_space if not action.startswith("switch ")]

        if not switches or not others:
            return self._rng.choice(list(action_space))

        if self._rng.random() < self.switch_probability:
            return self._rng.choice(switches)
        return self._rng.choice(others)

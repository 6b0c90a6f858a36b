"""Agent that always returns the same action string."""

from typing import Sequence

from turnsync.agents.agent_interface import Agent
from turnsync.game.environment.battle_log import BattleLog


class FixedActionAgent(Agent):
    """Agent that returns a preconfigured action regardless of the turn.

    Intended for tests: the action is returned even when it is not legal, which
    lets callers exercise the synchronizer's validation.
    """

    def __init__(self, action: str) -> None:
        self.action = action

    def choose_action(self, battle_log: BattleLog, action_space: Sequence[str]) -> str:
        return self.action

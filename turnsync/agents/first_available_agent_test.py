"""Unit tests for FirstAvailableAgent."""

import unittest

from turnsync.agents.first_available_agent import FirstAvailableAgent
from turnsync.game.environment.battle_log import BattleLog


class FirstAvailableAgentTest(unittest.IsolatedAsyncioTestCase):
    """Test FirstAvailableAgent functionality."""

    def setUp(self) -> None:
        self.agent = FirstAvailableAgent()
        self.battle_log = BattleLog()

    async def test_agent_returns_first_move(self) -> None:
        action = await self.agent.choose_action(
            self.battle_log, ["move 2", "move 3", "move 2 mega", "switch 4"]
        )

        self.assertEqual(action, "move 2")

    async def test_agent_returns_first_switch_when_forced(self) -> None:
        action = await self.agent.choose_action(
            self.battle_log, ["switch 3", "switch 5"]
        )

        self.assertEqual(action, "switch 3")

    async def test_agent_returns_default_for_fallback(self) -> None:
        action = await self.agent.choose_action(self.battle_log, ["default"])

        self.assertEqual(action, "default")

    async def test_agent_is_deterministic(self) -> None:
        action_space = ["move 1", "move 4", "switch 2"]

        action1 = await self.agent.choose_action(self.battle_log, action_space)
        action2 = await self.agent.choose_action(self.battle_log, action_space)

        self.assertEqual(action1, action2)

    async def test_agent_raises_on_empty_action_space(self) -> None:
        with self.assertRaises(ValueError):
            await self.agent.choose_action(self.battle_log, [])


if __name__ == "__main__":
    unittest.main()

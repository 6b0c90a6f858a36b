"""Unit tests for RandomAgent."""

import unittest
from unittest.mock import patch

from turnsync.agents.random_agent import RandomAgent
from turnsync.game.environment.battle_log import BattleLog

MIXED_ACTION_SPACE = ["move 1", "move 3", "move 1 mega", "switch 2", "switch 5"]


class RandomAgentTest(unittest.IsolatedAsyncioTestCase):
    """Test RandomAgent functionality."""

    def setUp(self) -> None:
        self.agent = RandomAgent(seed=1234)
        self.battle_log = BattleLog()

    async def test_random_agent_returns_legal_action(self) -> None:
        for _ in range(50):
            action = await self.agent.choose_action(self.battle_log, MIXED_ACTION_SPACE)
            self.assertIn(action, MIXED_ACTION_SPACE)

    async def test_random_agent_picks_move_above_switch_probability(self) -> None:
        with patch.object(self.agent._rng, "random", return_value=0.5):
            with patch.object(self.agent._rng, "choice", side_effect=lambda xs: xs[-1]):
                action = await self.agent.choose_action(
                    self.battle_log, MIXED_ACTION_SPACE
                )

        self.assertEqual(action, "move 1 mega")

    async def test_random_agent_picks_switch_below_switch_probability(self) -> None:
        with patch.object(self.agent._rng, "random", return_value=0.05):
            with patch.object(self.agent._rng, "choice", side_effect=lambda xs: xs[0]):
                action = await self.agent.choose_action(
                    self.battle_log, MIXED_ACTION_SPACE
                )

        self.assertEqual(action, "switch 2")

    async def test_random_agent_with_only_switches(self) -> None:
        action_space = ["switch 2", "switch 4"]

        for _ in range(20):
            action = await self.agent.choose_action(self.battle_log, action_space)
            self.assertIn(action, action_space)

    async def test_same_seed_same_choices(self) -> None:
        agent1 = RandomAgent(seed=7)
        agent2 = RandomAgent(seed=7)

        choices1 = [
            await agent1.choose_action(self.battle_log, MIXED_ACTION_SPACE)
            for _ in range(10)
        ]
        choices2 = [
            await agent2.choose_action(self.battle_log, MIXED_ACTION_SPACE)
            for _ in range(10)
        ]

        self.assertEqual(choices1, choices2)

    async def test_random_agent_raises_on_empty_action_space(self) -> None:
        with self.assertRaises(ValueError):
            await self.agent.choose_action(self.battle_log, [])

    def test_invalid_switch_probability(self) -> None:
        with self.assertRaises(ValueError):
            RandomAgent(switch_probability=1.5)


if __name__ == "__main__":
    unittest.main()

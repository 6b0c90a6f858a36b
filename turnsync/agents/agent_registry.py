"""Agent registry for mapping agent names to agent classes."""

from typing import Callable, Dict, Optional

from turnsync.agents.agent_interface import Agent
from turnsync.agents.first_available_agent import FirstAvailableAgent
from turnsync.agents.random_agent import RandomAgent

AgentFactory = Callable[[Optional[int]], Agent]


class AgentRegistry:
    """Registry for managing available agent types.

    This registry maps agent names (used in CLI) to their corresponding
    agent factory functions. Factories receive an optional random seed, which
    deterministic agents ignore.

    Example Usage:
        ```python
        agent_names = AgentRegistry.get_available_agents()

        agent = AgentRegistry.create_agent("random", seed=7)

        if AgentRegistry.has_agent("first_move"):
            agent = AgentRegistry.create_agent("first_move")
        ```

    Attributes:
        _AGENT_MAP: Mapping from agent names to agent factory functions
    """

    _AGENT_MAP: Dict[str, AgentFactory] = {
        "random": lambda seed: RandomAgent(seed=seed),
        "first_move": lambda seed: FirstAvailableAgent(),
    }

    @classmethod
    def get_available_agents(cls) -> list[str]:
        """Get list of all available agent names.

        Returns:
            List of agent names that can be used with create_agent()
        """
        return sorted(cls._AGENT_MAP.keys())

    @classmethod
    def has_agent(cls, agent_name: str) -> bool:
        return agent_name.lower() in cls._AGENT_MAP

    @classmethod
    def create_agent(cls, agent_name: str, seed: Optional[int] = None) -> Agent:
        """Create an agent instance by name.

        Args:
            agent_name: Name of the agent to create (case insensitive)
            seed: Optional random seed passed to the factory

        Returns:
            Instance of the requested agent

        Raises:
            ValueError: If agent_name is not registered
        """
        normalized_name = agent_name.lower()

        if normalized_name not in cls._AGENT_MAP:
            available = ", ".join(cls.get_available_agents())
            raise ValueError(
                f"Unknown agent: '{agent_name}'. Available agents: {available}"
            )

        return cls._AGENT_MAP[normalized_name](seed)

    @classmethod
    def register_agent(cls, agent_name: str, agent_factory: AgentFactory) -> None:
        """Register a new agent type.

        Args:
            agent_name: Name to register the agent under (will be lowercased)
            agent_factory: Callable that takes an optional seed and creates an
                agent instance

        Raises:
            ValueError: If agent_name is already registered
        """
        normalized_name = agent_name.lower()

        if normalized_name in cls._AGENT_MAP:
            raise ValueError(f"Agent '{agent_name}' is already registered")

        cls._AGENT_MAP[normalized_name] = agent_factory

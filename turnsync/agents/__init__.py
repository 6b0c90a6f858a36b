"""Agent implementations and interfaces."""

from turnsync.agents.agent_interface import Agent, CallableAgent
from turnsync.agents.first_available_agent import FirstAvailableAgent
from turnsync.agents.fixed_action_agent import FixedActionAgent
from turnsync.agents.random_agent import RandomAgent

__all__ = [
    "Agent",
    "CallableAgent",
    "FirstAvailableAgent",
    "FixedActionAgent",
    "RandomAgent",
]

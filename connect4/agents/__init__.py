"""Agent implementations for Connect-4."""

from connect4.agents.base import Agent
from connect4.agents.computer import ComputerAgent
from connect4.agents.human import HumanAgent
from connect4.agents.random_agent import RandomAgent

__all__ = ["Agent", "ComputerAgent", "HumanAgent", "RandomAgent"]

"""Built-in agents."""

from unorules.agents.human_agent import HumanAgent
from unorules.agents.random_agent import RandomAgent

__all__ = ["HumanAgent", "RandomAgent"]

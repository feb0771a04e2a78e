"""Play agent implementations for headless runs.

Re-exports the base class and all concrete agent implementations so
consumers can do::

    from maze_escape.sim.play_agents import PlayAgent, RandomAgent
"""

from .base import BattleAction, PlayAgent
from .random_agent import RandomAgent

__all__ = ["BattleAction", "PlayAgent", "RandomAgent"]

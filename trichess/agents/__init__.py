from __future__ import annotations

from .base import Agent
from .q_agent import QLearningAgent
from .registry import get_agent, list_agents

__all__ = ["Agent", "QLearningAgent", "get_agent", "list_agents"]

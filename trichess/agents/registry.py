"""Environment-driven agent router for tournament harnesses.

Reads TRICHESS_AGENT to select the agent class when no name is given.

To add a new agent:
  1. Subclass Agent
  2. Add to _AGENTS dict below
"""
from __future__ import annotations

import os

from .base import Agent
from .q_agent import QLearningAgent

_AGENTS: dict[str, type[Agent]] = {
    "q_learning": QLearningAgent,
}

DEFAULT_AGENT = "q_learning"


def get_agent(name: str | None = None) -> Agent:
    """Return a new agent instance for the requested name or the TRICHESS_AGENT env var."""
    request = (name or os.getenv("TRICHESS_AGENT", DEFAULT_AGENT)).lower()
    cls = _AGENTS.get(request)
    if cls is None:
        raise ValueError(
            f"Unknown agent '{request}'. Available: {list(_AGENTS.keys())}"
        )
    return cls()


def list_agents() -> list[str]:
    return list(_AGENTS.keys())

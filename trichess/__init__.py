"""trichess — tabular Q-learning agent for three-player chess."""
from __future__ import annotations

__version__ = "0.1.0"

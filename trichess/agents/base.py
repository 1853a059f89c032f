"""Agent abstract base class consumed by tournament harnesses."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Hashable

from ..engine.base import Board


class Agent(ABC):
    """Base class for all three-player chess agents."""

    name: str = "Agent"

    @abstractmethod
    def play_move(self, board: Board) -> tuple[Hashable, Hashable] | None:
        """Return the (start, end) move for the player to move, or None if the game is over."""

    def final_board(self, board: Board) -> None:
        """Called once with the final board when a game ends."""

    def __str__(self) -> str:
        return self.name

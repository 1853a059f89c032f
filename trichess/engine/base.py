"""Abstract game-engine board for three-player chess.

Agents only read boards through this interface. An engine adapter implements
every method; the agent never mutates a board it is handed.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, Iterable


class Colour(str, Enum):
    """The three players, in turn order."""

    BLUE = "blue"
    GREEN = "green"
    RED = "red"


@dataclass(frozen=True)
class Piece:
    kind: str
    colour: Colour
    value: int


class Board(ABC):
    """Base class for all engine board adapters."""

    @abstractmethod
    def get_positions(self, colour: Colour) -> set[Hashable]:
        """Return every position occupied by a piece of the given colour."""

    @abstractmethod
    def all_positions(self) -> Iterable[Hashable]:
        """Return every position on the board, in a stable order."""

    @abstractmethod
    def is_legal_move(self, start: Hashable, end: Hashable) -> bool:
        """Return True if the player to move may move from start to end."""

    @abstractmethod
    def get_turn(self) -> Colour:
        ...

    @abstractmethod
    def get_move_count(self) -> int:
        """Number of moves played so far in the game, by all players."""

    @abstractmethod
    def game_over(self) -> bool:
        ...

    @abstractmethod
    def get_captured(self, colour: Colour) -> list[Any]:
        """Return the pieces captured so far by the given colour."""

    @abstractmethod
    def get_piece(self, position: Hashable) -> Any:
        """Return the piece at position. Pieces expose an integer `value`."""

    @abstractmethod
    def clone(self) -> "Board":
        """Return an independent deep copy of this board.

        Raises on engine failure; callers decide how to degrade.
        """

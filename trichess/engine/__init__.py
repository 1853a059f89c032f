"""Game-engine interface consumed by trichess agents.

The engine itself lives outside this package; adapters subclass Board.
"""
from __future__ import annotations

from .base import Board, Colour, Piece
from .moves import legal_actions

__all__ = ["Board", "Colour", "Piece", "legal_actions"]

"""Legal-action enumeration over the engine interface."""
from __future__ import annotations

from typing import Hashable

from .base import Board

Action = tuple[Hashable, Hashable]


def legal_actions(board: Board) -> list[Action]:
    """Return every legal (origin, destination) pair for the player to move.

    Origins are the mover's occupied squares, destinations every board square.
    Both are walked in board order so enumeration is stable across processes;
    duplicates are dropped, keeping the first occurrence.
    """
    squares = list(board.all_positions())
    occupied = board.get_positions(board.get_turn())
    seen: set[Action] = set()
    actions: list[Action] = []
    for origin in (p for p in squares if p in occupied):
        for destination in squares:
            action = (origin, destination)
            if action in seen or not board.is_legal_move(origin, destination):
                continue
            seen.add(action)
            actions.append(action)
    return actions

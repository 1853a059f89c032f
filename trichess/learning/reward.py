"""Material-value reward. Pure with respect to boards; only the memo is mutated."""
from __future__ import annotations

from ..engine.base import Board, Colour


def material_value(board: Board, colour: Colour) -> int:
    """Value of colour's remaining pieces plus the pieces it has captured."""
    own = sum(board.get_piece(p).value for p in board.get_positions(colour))
    captured = sum(piece.value for piece in board.get_captured(colour))
    return own + captured


class MaterialReward:
    """Reward for the agent's previous move, measured once the other two players have replied.

    The previous figure is memoized: it is computed from the stored previous
    board only when no memo exists, and after each call the memo holds the
    current figure for the next turn.
    """

    def __init__(self) -> None:
        self.previous_value: int | None = None

    def reset(self) -> None:
        self.previous_value = None

    def __call__(self, current: Board, previous: Board | None) -> int:
        # Fewer than three moves means the agent has not acted yet.
        if current.get_move_count() <= 2 or previous is None:
            return 0
        colour = current.get_turn()
        current_value = material_value(current, colour)
        if self.previous_value is None:
            self.previous_value = material_value(previous, colour)
        reward = current_value - self.previous_value
        self.previous_value = current_value
        return reward

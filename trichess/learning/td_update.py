"""Temporal-difference update rule and exploration function.

Q(s, a) <- (1 - eta) * Q(s, a) + eta * (r + gamma * max_a' Q(s', a'))

eta decays with the visit count of (s, a); the exploration function f makes
any pair visited fewer than min_visits times look maximally attractive.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any, Hashable

from ..engine.base import Board
from ..engine.moves import legal_actions
from .config import (
    DEFAULT_LR_NUMERATOR,
    DEFAULT_LR_OFFSET,
    DEFAULT_MIN_VISITS,
    LearningConfig,
)
from .state_key import state_action_key
from .store import LearningStore

logger = logging.getLogger("trichess.learning.td_update")

EXPLORATION_VALUE = sys.float_info.max


class NoLegalMovesError(RuntimeError):
    """Raised when the engine reports no legal moves for a non-terminal board."""


def learning_rate(
    visits: int,
    numerator: float = DEFAULT_LR_NUMERATOR,
    offset: float = DEFAULT_LR_OFFSET,
) -> float:
    """eta(n) = 20 / (19 + n). Strictly decreasing in n, tends to 0."""
    return numerator / (offset + visits)


def exploration(utility: float, visits: int, min_visits: int = DEFAULT_MIN_VISITS) -> float:
    """f(u, n): the largest float while n < min_visits, otherwise u unchanged."""
    return EXPLORATION_VALUE if visits < min_visits else utility


def max_q(store: LearningStore, board: Board) -> float:
    """Highest stored utility over every legal action from board.

    A finished game has no actions; its terminal entry is returned instead.
    """
    if board.game_over():
        return store.get_q(state_action_key(board, None))
    actions = legal_actions(board)
    if not actions:
        raise NoLegalMovesError("No moves reachable from the current board position.")
    return max(store.get_q(state_action_key(board, action)) for action in actions)


@dataclass
class Trajectory:
    """The agent's last observed (state, action, reward) and the anti-reversal slot."""

    previous_state: Board | None = None
    previous_action: tuple[Hashable, Hashable] | None = None
    previous_reward: float = 0
    two_ago_action: tuple[Hashable, Hashable] | None = None


class TDLearner:
    """Applies the TD update to a LearningStore after each observed transition."""

    def __init__(self, config: LearningConfig | None = None) -> None:
        config = config or LearningConfig()
        self.gamma = config.gamma
        self.lr_numerator = config.lr_numerator
        self.lr_offset = config.lr_offset

    def update(
        self,
        store: LearningStore,
        trajectory: Trajectory,
        current: Board,
        current_reward: float,
    ) -> dict[str, Any] | None:
        """Refresh Q/N from the transition previous_state -> current.

        Returns a summary of the touched entry, or None on the agent's first move.
        """
        if current.game_over():
            store.q[state_action_key(current, None)] = float(current_reward)

        if trajectory.previous_state is None:
            return None

        key = state_action_key(trajectory.previous_state, trajectory.previous_action)
        visits = store.visit(key)
        eta = learning_rate(visits, self.lr_numerator, self.lr_offset)
        target = trajectory.previous_reward + self.gamma * max_q(store, current)
        old = store.get_q(key)
        store.q[key] = (1 - eta) * old + eta * target
        logger.debug("Q update visits=%d eta=%.4f old=%.4f new=%.4f", visits, eta, old, store.q[key])
        return {"visits": visits, "eta": eta, "previous_q": old, "q": store.q[key]}

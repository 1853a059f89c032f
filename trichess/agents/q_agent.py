"""Q-learning agent: TD update on each turn, then exploration-biased move selection."""
from __future__ import annotations

import logging
from typing import Hashable

from ..engine.base import Board
from ..engine.moves import legal_actions
from ..learning.config import LearningConfig, load_learning_config
from ..learning.reward import MaterialReward
from ..learning.state_key import state_action_key
from ..learning.store import LearningStore
from ..learning.td_update import NoLegalMovesError, TDLearner, Trajectory, exploration
from .base import Agent

logger = logging.getLogger("trichess.agents.q_agent")

Action = tuple[Hashable, Hashable]


class QLearningAgent(Agent):
    """Tabular Q-learning agent for three-player chess.

    Each call to play_move rewards the agent's previous move by the material
    swing since then, applies the TD update, and picks the legal move with the
    highest exploration-adjusted utility. The move played two turns ago is
    skipped while any alternative exists.
    """

    name = "QLearningAgent"

    def __init__(
        self,
        config: LearningConfig | None = None,
        store: LearningStore | None = None,
    ) -> None:
        self.config = config or load_learning_config()
        if store is None:
            store = LearningStore(self.config.learning_dir)
            store.load()
        self.store = store
        self.learner = TDLearner(self.config)
        self.reward = MaterialReward()
        self.trajectory = Trajectory()
        self.moves_played = 0

    def _reset_trajectory(self) -> None:
        self.trajectory = Trajectory()
        self.reward.reset()

    def _select(self, board: Board, actions: list[Action]) -> Action:
        estimate: float | None = None
        guarded = self.trajectory.two_ago_action
        best_action, best_utility = None, float("-inf")
        fallback_action, fallback_utility = None, float("-inf")

        for action in actions:
            key = state_action_key(board, action)
            if key in self.store.q:
                utility = self.store.q[key]
            else:
                # Q is unchanged during selection, so the estimate is computed once.
                if estimate is None:
                    estimate = self.store.utility_estimate()
                utility = estimate
            adjusted = exploration(utility, self.store.get_n(key), self.config.min_visits)
            if action == guarded:
                if adjusted > fallback_utility:
                    fallback_action, fallback_utility = action, adjusted
                continue
            if adjusted > best_utility:
                best_action, best_utility = action, adjusted

        if best_action is None:
            best_action = fallback_action
        if best_action is None:
            raise NoLegalMovesError("No moves reachable from the current board position.")
        return best_action

    def _record_turn(self, board: Board, reward: float, action: Action) -> None:
        t = self.trajectory
        if t.previous_action is not None:
            t.two_ago_action = t.previous_action
        try:
            t.previous_state = board.clone()
        except Exception:
            logger.exception("Can't clone previous board state; skipping next update")
            t.previous_state = None
            self.reward.reset()
        t.previous_reward = reward
        t.previous_action = action

    def play_move(self, board: Board) -> Action | None:
        current_reward = self.reward(board, self.trajectory.previous_state)
        self.learner.update(self.store, self.trajectory, board, current_reward)
        if board.game_over():
            self._reset_trajectory()
            return None

        action = self._select(board, legal_actions(board))
        self._record_turn(board, current_reward, action)

        self.moves_played += 1
        if self.config.autosave_every > 0 and self.moves_played % self.config.autosave_every == 0:
            self.save()
        return action

    def final_board(self, board: Board) -> None:
        self._reset_trajectory()
        if self.config.save_on_final_board:
            self.save()

    def save(self) -> bool:
        """Persist the learning store. Returns False on failure."""
        ok = self.store.save()
        if not ok:
            logger.warning("Learning store not saved; continuing with in-memory tables")
        return ok

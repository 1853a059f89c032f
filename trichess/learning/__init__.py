"""trichess learning module — tabular Q-learning over state-action keys.

Utilities (Q) and visit counts (N) live in a LearningStore persisted under
.trichess/learning/. Updates follow the temporal-difference rule with a
visit-decayed learning rate; selection uses a visit-count exploration bonus.
"""
from __future__ import annotations

from .config import LearningConfig, load_learning_config
from .reward import MaterialReward, material_value
from .state_key import StateActionKey, state_action_key
from .store import LearningStore
from .td_update import (
    NoLegalMovesError,
    TDLearner,
    Trajectory,
    exploration,
    learning_rate,
    max_q,
)

__all__ = [
    "LearningConfig",
    "load_learning_config",
    "MaterialReward",
    "material_value",
    "StateActionKey",
    "state_action_key",
    "LearningStore",
    "NoLegalMovesError",
    "TDLearner",
    "Trajectory",
    "exploration",
    "learning_rate",
    "max_q",
]

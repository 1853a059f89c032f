"""Learning configuration. Safe defaults when configs/learning.toml is absent."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

DEFAULT_LEARNING_DIR = Path(".trichess") / "learning"
DEFAULT_GAMMA = 0.95
DEFAULT_MIN_VISITS = 10
DEFAULT_LR_NUMERATOR = 20.0
DEFAULT_LR_OFFSET = 19.0
DEFAULT_AUTOSAVE_EVERY = 0


@dataclass
class LearningConfig:
    learning_dir: Path = DEFAULT_LEARNING_DIR
    gamma: float = DEFAULT_GAMMA
    min_visits: int = DEFAULT_MIN_VISITS
    lr_numerator: float = DEFAULT_LR_NUMERATOR
    lr_offset: float = DEFAULT_LR_OFFSET
    autosave_every: int = DEFAULT_AUTOSAVE_EVERY
    save_on_final_board: bool = False


def load_learning_config(root: Path | None = None) -> LearningConfig:
    """Load config from <root>/configs/learning.toml, then apply env overrides.

    Relative learning_dir values are resolved against root.
    """
    root = Path(root) if root is not None else Path.cwd()
    config = LearningConfig(learning_dir=root / DEFAULT_LEARNING_DIR)

    config_path = root / "configs" / "learning.toml"
    if config_path.exists():
        try:
            data = tomllib.loads(config_path.read_text())
            if "learning" in data:
                cfg = data["learning"]
                if "learning_dir" in cfg:
                    config.learning_dir = root / Path(cfg["learning_dir"])
                config.gamma = float(cfg.get("gamma", DEFAULT_GAMMA))
                config.min_visits = int(cfg.get("min_visits", DEFAULT_MIN_VISITS))
                config.lr_numerator = float(cfg.get("lr_numerator", DEFAULT_LR_NUMERATOR))
                config.lr_offset = float(cfg.get("lr_offset", DEFAULT_LR_OFFSET))
                config.autosave_every = int(cfg.get("autosave_every", DEFAULT_AUTOSAVE_EVERY))
                config.save_on_final_board = bool(cfg.get("save_on_final_board", False))
        except (tomllib.TOMLDecodeError, OSError, ValueError, TypeError):
            pass

    # Env overrides
    if "TRICHESS_LEARNING_DIR" in os.environ:
        config.learning_dir = root / Path(os.environ["TRICHESS_LEARNING_DIR"])
    if "TRICHESS_GAMMA" in os.environ:
        try:
            config.gamma = float(os.environ["TRICHESS_GAMMA"])
        except ValueError:
            pass
    if "TRICHESS_MIN_VISITS" in os.environ:
        try:
            config.min_visits = int(os.environ["TRICHESS_MIN_VISITS"])
        except ValueError:
            pass
    if "TRICHESS_AUTOSAVE_EVERY" in os.environ:
        try:
            config.autosave_every = int(os.environ["TRICHESS_AUTOSAVE_EVERY"])
        except ValueError:
            pass

    return config

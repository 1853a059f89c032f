"""Q and N tables with JSON persistence. All writes go to the learning dir.

Each table is stored as an association list of {"key": ..., "value": ...}
records, one file per table, written wholesale on save.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from .state_key import StateActionKey

logger = logging.getLogger("trichess.learning.store")

Q_FILENAME = "q_values.json"
N_FILENAME = "visit_counts.json"


class LearningStore:
    """Utility table (Q) and visit-count table (N), keyed by StateActionKey."""

    def __init__(self, learning_dir: Path) -> None:
        self.learning_dir = Path(learning_dir)
        self.q: dict[StateActionKey, float] = {}
        self.n: dict[StateActionKey, int] = {}

    def get_q(self, key: StateActionKey, default: float = 0.0) -> float:
        return self.q.get(key, default)

    def get_n(self, key: StateActionKey) -> int:
        return self.n.get(key, 0)

    def visit(self, key: StateActionKey) -> int:
        """Increment the visit count for key and return the new count."""
        count = self.n.get(key, 0) + 1
        self.n[key] = count
        return count

    def utility_estimate(self) -> float:
        """Mean of every utility in Q, across all states. 0.0 when Q is empty."""
        if not self.q:
            return 0.0
        return sum(self.q.values()) / len(self.q)

    def _audit_log(self, message: str, **kwargs: object) -> None:
        audit_path = self.learning_dir / "audit.log"
        timestamp = datetime.now(timezone.utc).isoformat()
        line = f"{timestamp} {message}"
        if kwargs:
            line += " " + json.dumps(kwargs)
        with audit_path.open("a") as fh:
            fh.write(line + "\n")

    def _write_table(self, filename: str, table: dict) -> None:
        entries = [{"key": k.to_record(), "value": v} for k, v in table.items()]
        fd, tmp_name = tempfile.mkstemp(dir=self.learning_dir, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as fh:
                json.dump(entries, fh)
            os.replace(tmp_name, self.learning_dir / filename)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def save(self) -> bool:
        """Write both tables to disk. Returns False on failure, never raises."""
        try:
            self.learning_dir.mkdir(parents=True, exist_ok=True)
            self._write_table(Q_FILENAME, self.q)
            self._write_table(N_FILENAME, self.n)
            self._audit_log("store_saved", q_entries=len(self.q), n_entries=len(self.n))
        except (OSError, TypeError, ValueError):
            logger.exception("Could not save learning store to %s", self.learning_dir)
            return False
        logger.debug("Saved %d Q entries, %d N entries", len(self.q), len(self.n))
        return True

    def _read_table(self, filename: str, cast: type) -> dict:
        data = json.loads((self.learning_dir / filename).read_text())
        if not isinstance(data, list):
            raise ValueError(f"{filename}: expected a list of entries")
        return {StateActionKey.from_record(e["key"]): cast(e["value"]) for e in data}

    def load(self) -> bool:
        """Load both tables from disk. Falls back to empty tables on any failure."""
        try:
            q = self._read_table(Q_FILENAME, float)
            n = self._read_table(N_FILENAME, int)
        except FileNotFoundError:
            logger.info("No persisted tables in %s; beginning with empty storage", self.learning_dir)
            self.q, self.n = {}, {}
            return False
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Could not load learning store from %s: %s; beginning with empty storage", self.learning_dir, exc)
            self.q, self.n = {}, {}
            return False
        self.q, self.n = q, n
        logger.info("Loaded %d Q entries, %d N entries from %s", len(q), len(n), self.learning_dir)
        return True

    def clear(self) -> None:
        """Delete persisted tables and empty the in-memory ones."""
        for filename in (Q_FILENAME, N_FILENAME):
            (self.learning_dir / filename).unlink(missing_ok=True)
        self.q, self.n = {}, {}
        if self.learning_dir.exists():
            self._audit_log("store_cleared")

"""State-action keys: canonical, hashable identifiers for Q/N table entries.

A key captures where every piece of every player stands plus the move taken.
Position identifiers are canonicalized to strings so keys survive a
save/load cycle unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable

from ..engine.base import Board, Colour


def position_id(position: Hashable) -> str:
    """Canonical string identifier for an engine position."""
    if isinstance(position, Enum):
        return position.name
    return str(position)


@dataclass(frozen=True)
class StateActionKey:
    occupied: frozenset[str]
    action: tuple[str, str] | None
    # Derived cache; not part of identity.
    total_value: int = field(default=0, compare=False, hash=False)

    def to_record(self) -> dict[str, Any]:
        return {
            "occupied": sorted(self.occupied),
            "action": list(self.action) if self.action is not None else None,
            "total_value": self.total_value,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "StateActionKey":
        """Rebuild a key from to_record() output. Raises KeyError/TypeError/ValueError on bad input."""
        action = record["action"]
        if action is not None:
            origin, destination = action
            action = (str(origin), str(destination))
        return cls(
            occupied=frozenset(str(p) for p in record["occupied"]),
            action=action,
            total_value=int(record.get("total_value", 0)),
        )


def state_action_key(board: Board, action: tuple[Hashable, Hashable] | None) -> StateActionKey:
    """Build the key for taking `action` on `board`. None marks a terminal state."""
    positions: set[Hashable] = set()
    for colour in Colour:
        positions.update(board.get_positions(colour))
    total_value = sum(board.get_piece(p).value for p in positions)
    canonical_action = None
    if action is not None:
        canonical_action = (position_id(action[0]), position_id(action[1]))
    return StateActionKey(
        occupied=frozenset(position_id(p) for p in positions),
        action=canonical_action,
        total_value=total_value,
    )

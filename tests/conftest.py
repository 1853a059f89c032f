"""Shared fixtures: a scriptable in-memory board implementing the engine interface."""
import copy

import pytest

from trichess.engine.base import Board, Colour, Piece

SQUARES = ["a1", "a2", "a3", "b1", "b2", "b3", "c1", "c2", "c3"]


class FakeBoard(Board):
    def __init__(
        self,
        pieces,
        turn=Colour.BLUE,
        move_count=0,
        over=False,
        captured=None,
        legal=None,
        squares=None,
        fail_clone=False,
    ):
        self.pieces = dict(pieces)
        self.turn = turn
        self.move_count = move_count
        self.over = over
        self.captured = {c: list(v) for c, v in (captured or {}).items()}
        self.legal = list(legal or [])
        self.squares = list(squares or SQUARES)
        self.fail_clone = fail_clone

    def get_positions(self, colour):
        return {p for p, piece in self.pieces.items() if piece.colour == colour}

    def all_positions(self):
        return list(self.squares)

    def is_legal_move(self, start, end):
        return (start, end) in self.legal

    def get_turn(self):
        return self.turn

    def get_move_count(self):
        return self.move_count

    def game_over(self):
        return self.over

    def get_captured(self, colour):
        return list(self.captured.get(colour, []))

    def get_piece(self, position):
        return self.pieces[position]

    def clone(self):
        if self.fail_clone:
            raise RuntimeError("clone failed")
        return copy.deepcopy(self)


def pawn(colour):
    return Piece("pawn", colour, 1)


def knight(colour):
    return Piece("knight", colour, 3)


def rook(colour):
    return Piece("rook", colour, 5)


def standard_pieces():
    return {
        "a1": pawn(Colour.BLUE),
        "b1": knight(Colour.BLUE),
        "b2": knight(Colour.GREEN),
        "c3": rook(Colour.RED),
    }


@pytest.fixture
def make_board():
    """Factory for FakeBoard. Defaults to the standard piece layout with two blue moves."""

    def _make(pieces=None, **kwargs):
        kwargs.setdefault("legal", [("a1", "a2"), ("a1", "a3")])
        return FakeBoard(standard_pieces() if pieces is None else pieces, **kwargs)

    return _make


@pytest.fixture
def pieces():
    return {"pawn": pawn, "knight": knight, "rook": rook, "standard": standard_pieces}

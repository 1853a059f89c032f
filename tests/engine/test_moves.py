"""Tests for legal-action enumeration."""
from trichess.engine.base import Colour
from trichess.engine.moves import legal_actions


def test_only_legal_moves_of_player_to_move(make_board):
    board = make_board(legal=[("a1", "a2"), ("b2", "b3"), ("b1", "c1")])
    # b2 belongs to green; blue is to move.
    assert legal_actions(board) == [("a1", "a2"), ("b1", "c1")]


def test_enumeration_follows_board_order(make_board):
    board = make_board(legal=[("b1", "a3"), ("a1", "a3"), ("a1", "a2")])
    assert legal_actions(board) == [("a1", "a2"), ("a1", "a3"), ("b1", "a3")]


def test_duplicate_squares_yield_one_action(make_board):
    squares = ["a1", "a2", "a2", "b1"]
    board = make_board(legal=[("a1", "a2")], squares=squares)
    assert legal_actions(board) == [("a1", "a2")]


def test_green_to_move(make_board):
    board = make_board(turn=Colour.GREEN, legal=[("a1", "a2"), ("b2", "c2")])
    assert legal_actions(board) == [("b2", "c2")]


def test_no_legal_moves(make_board):
    assert legal_actions(make_board(legal=[])) == []

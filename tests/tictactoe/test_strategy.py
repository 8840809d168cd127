"""Unit tests for /src/tictactoe/strategy.py"""

import random

import pytest

from src.tictactoe.board import Board
from src.tictactoe.strategy import (
    choose_computer_square,
    defending_square,
    winning_square,
)
from tests.doubles import FirstChoice, LastChoice


# -- 1. WIN --
def test_completes_own_line() -> None:
    """Computer X holds 1 and 2, so 3 wins the round"""
    board = Board.from_layout("XX./.O./O..")
    assert choose_computer_square(board, "X", FirstChoice()) == 3


def test_winning_beats_blocking() -> None:
    """Both players are one square away: always take the win, never the block"""
    board = Board.from_layout("XX./OO./...")
    assert choose_computer_square(board, "X", FirstChoice()) == 3
    assert choose_computer_square(board, "O", FirstChoice()) == 6
    # even when the random source would pick the opponent's line first
    assert choose_computer_square(board, "X", LastChoice()) == 3
    assert choose_computer_square(board, "O", LastChoice()) == 6


def test_winning_line_picked_with_random_source() -> None:
    """Two winning lines (1-2-3 and 1-4-7): the injected random source decides which one"""
    board = Board.from_layout("XX./X../.OO")
    assert choose_computer_square(board, "X", FirstChoice()) == 3
    assert choose_computer_square(board, "X", LastChoice()) == 7


def test_winning_square_none_without_own_line() -> None:
    board = Board.from_layout("OO./.X./...")
    twin_lines = board.lines_with_twin_markers_and_unmarked()
    assert winning_square(board, "X", twin_lines, FirstChoice()) is None


# -- 2. BLOCK --
def test_blocks_opponent_line() -> None:
    """Computer X, opponent O holds 1 and 2: must block at 3"""
    board = Board.from_layout("OO./.X./...")
    assert choose_computer_square(board, "X", FirstChoice()) == 3


def test_blocks_diagonal() -> None:
    board = Board.from_layout("O../.O./X..")
    assert choose_computer_square(board, "X", FirstChoice()) == 9


def test_block_picked_with_random_source() -> None:
    """Opponent threatens 1-2-3 and 1-4-7: either block is fine, the random source picks"""
    board = Board.from_layout("OO./O../..X")
    assert choose_computer_square(board, "X", FirstChoice()) == 3
    assert choose_computer_square(board, "X", LastChoice()) == 7


def test_defending_square_takes_any_twin_line() -> None:
    """Our own lines qualify as well; choose_computer_square consults winning_square first"""
    board = Board.from_layout("XX./.../...")
    twin_lines = board.lines_with_twin_markers_and_unmarked()
    assert defending_square(board, twin_lines, FirstChoice()) == 3


# -- 3. MIDDLE --
@pytest.mark.parametrize("layout", [".../.../...", "X../.../...", "O.X/.../..."])
def test_takes_middle_square(layout: str) -> None:
    board = Board.from_layout(layout)
    assert choose_computer_square(board, "X", FirstChoice()) == 5


# -- 4. RANDOM --
@pytest.mark.parametrize("seed", range(10))
def test_random_unmarked_square_when_nothing_else_applies(seed: int) -> None:
    board = Board.from_layout("O../.X./...")
    square = choose_computer_square(board, "X", random.Random(seed))
    assert square in board.unmarked_squares()


def test_random_square_comes_from_random_source() -> None:
    board = Board.from_layout("O../.X./...")
    assert choose_computer_square(board, "X", FirstChoice()) == 2
    assert choose_computer_square(board, "X", LastChoice()) == 9


# -- GENERAL --
def test_does_not_touch_the_board() -> None:
    board = Board.from_layout("OO./.X./...")
    choose_computer_square(board, "X", FirstChoice())
    assert board.to_layout() == "OO./.X./..."


@pytest.mark.parametrize("seed", range(20))
def test_always_picks_an_unmarked_square(seed: int) -> None:
    """Play a whole round heuristic against heuristic: every choice must be legal"""
    rng = random.Random(seed)
    board = Board()
    markers = ["X", "O"]
    turn = 0
    while not board.someone_won() and not board.is_full():
        marker = markers[turn % 2]
        square = choose_computer_square(board, marker, rng)
        assert square in board.unmarked_squares()
        board.mark(square, marker)
        turn += 1

"""Unit tests for /src/tictactoe/square.py"""

from src.tictactoe.square import INITIAL_MARKER, MIDDLE_SQUARE, SQUARE_NUMBERS, Square


def test_new_square_is_unmarked() -> None:
    square = Square()
    assert square.marker == INITIAL_MARKER
    assert square.is_unmarked()
    assert not square.is_marked()


def test_marked_square() -> None:
    square = Square("X")
    assert square.is_marked()
    assert not square.is_unmarked()
    assert str(square) == "X"


def test_board_geometry() -> None:
    """Nine squares numbered 1-9, the middle one being 5"""
    assert SQUARE_NUMBERS == (1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert MIDDLE_SQUARE == 5

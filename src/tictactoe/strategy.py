"""
Move selection for the computer player.

Nothing is remembered between calls: the board changes every turn, so the decision is derived from scratch each time.
Priority order:
1. complete one of our own lines (win the round)
2. block any line that is one marker away from completion
3. take the middle square
4. any unmarked square
"""

import logging
from typing import Protocol, Sequence, TypeVar

from src.tictactoe.board import Board, Line
from src.tictactoe.square import MIDDLE_SQUARE

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Just the part of random.Random the strategy needs (tests swap in a stub)."""

    def choice(self, seq: Sequence[T]) -> T: ...


def choose_computer_square(board: Board, marker: str, rng: RandomSource) -> int:
    twin_lines = board.lines_with_twin_markers_and_unmarked()

    if twin_lines:
        square = winning_square(board, marker, twin_lines, rng)
        if square is not None:
            logger.debug("%s completes a line on square %d", marker, square)
            return square
        square = defending_square(board, twin_lines, rng)
        logger.debug("%s blocks on square %d", marker, square)
        return square

    if board.middle_square_available():
        logger.debug("%s takes the middle square", marker)
        return MIDDLE_SQUARE

    square = rng.choice(board.unmarked_squares())
    logger.debug("%s picks random square %d", marker, square)
    return square


def winning_square(
    board: Board, marker: str, twin_lines: list[Line], rng: RandomSource
) -> int | None:
    """Unmarked square of a randomly picked line we already hold two squares of. None if there is no such line."""
    own_lines = [line for line in twin_lines if marker in (board[number] for number in line)]
    if not own_lines:
        return None
    return _unmarked_square_of(board, rng.choice(own_lines))


def defending_square(board: Board, twin_lines: list[Line], rng: RandomSource) -> int:
    """
    Unmarked square of a randomly picked twin line, whoever holds it.

    Our own lines also qualify here, but winning_square is always consulted first.
    """
    return _unmarked_square_of(board, rng.choice(twin_lines))


def _unmarked_square_of(board: Board, line: Line) -> int:
    unmarked = board.unmarked_squares()
    return next(number for number in line if number in unmarked)

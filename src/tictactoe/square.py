"""
A single cell of the board

(placed in its own module as both the board and the console need to know what "unmarked" looks like)
"""

from dataclasses import dataclass

INITIAL_MARKER = " "

# Tic-Tac-Toe is always played on a 3x3 board, squares numbered 1-9 left-to-right, top-to-bottom.
BOARD_WIDTH = 3
SQUARE_NUMBERS = tuple(range(1, BOARD_WIDTH * BOARD_WIDTH + 1))
MIDDLE_SQUARE = 5


@dataclass
class Square:
    marker: str = INITIAL_MARKER

    def is_unmarked(self) -> bool:
        return self.marker == INITIAL_MARKER

    def is_marked(self) -> bool:
        return not self.is_unmarked()

    def __str__(self) -> str:
        return self.marker

"""The board knows where the markers are and which lines they form. It does not know whose turn it is."""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.tictactoe.square import (
    BOARD_WIDTH,
    INITIAL_MARKER,
    MIDDLE_SQUARE,
    SQUARE_NUMBERS,
    Square,
)

Line = tuple[int, int, int]

WINNING_LINES: tuple[Line, ...] = (
    # rows
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    # columns
    (1, 4, 7),
    (2, 5, 8),
    (3, 6, 9),
    # diagonals
    (1, 5, 9),
    (3, 5, 7),
)

# Used by from_layout / to_layout only. Easier to read than a space in test fixtures.
LAYOUT_EMPTY = "."


def _empty_squares() -> dict[int, Square]:
    return {number: Square() for number in SQUARE_NUMBERS}


@dataclass
class Board:
    squares: dict[int, Square] = field(default_factory=_empty_squares)

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board from a compact row notation.

        Rows are separated by slashes and read top to bottom, a dot is an unmarked square.
        ex. "XX./.O./..." means:
        * X on squares 1 and 2
        * O in the middle square (5)
        * everything else unmarked
        """
        characters = layout.replace("/", "")
        if len(characters) != len(SQUARE_NUMBERS):
            raise ValueError(f"Layout {layout!r} does not describe {len(SQUARE_NUMBERS)} squares.")

        board = cls()
        for number, character in zip(SQUARE_NUMBERS, characters):
            if character != LAYOUT_EMPTY:
                board[number] = character
        return board

    def to_layout(self) -> str:
        """Rows are separated by slashes, same notation as from_layout."""
        characters = [
            LAYOUT_EMPTY if self.squares[number].is_unmarked() else self[number]
            for number in SQUARE_NUMBERS
        ]
        return "/".join(
            "".join(characters[start : start + BOARD_WIDTH])
            for start in range(0, len(characters), BOARD_WIDTH)
        )

    def __getitem__(self, number: int) -> str:
        return self.squares[number].marker

    def __setitem__(self, number: int, marker: str) -> None:
        self.squares[number].marker = marker

    def marker(self, number: int) -> str:
        return self[number]

    def mark(self, number: int, marker: str) -> None:
        """Callers only ever pass unmarked squares; Player.move checks that before it gets here."""
        self[number] = marker

    def unmarked_squares(self) -> list[int]:
        return [number for number, square in self.squares.items() if square.is_unmarked()]

    def is_full(self) -> bool:
        return not self.unmarked_squares()

    def is_empty(self) -> bool:
        return len(self.unmarked_squares()) == len(SQUARE_NUMBERS)

    def middle_square_available(self) -> bool:
        return self.squares[MIDDLE_SQUARE].is_unmarked()

    def winning_marker(self) -> Optional[str]:
        """Marker on the first line (in WINNING_LINES order) that has three identical markers, if any."""
        for line in WINNING_LINES:
            if self._three_identical_markers(line):
                return self[line[0]]
        return None

    def someone_won(self) -> bool:
        return self.winning_marker() is not None

    def lines_with_twin_markers_and_unmarked(self) -> list[Line]:
        """
        Lines holding two identical markers and one unmarked square.

        Counting the unmarked square as a marker of its own, such a line shows exactly two distinct markers.
        Empty list if there is no such line.
        """
        return [line for line in WINNING_LINES if self._twin_markers_and_unmarked(line)]

    def reset(self) -> None:
        for square in self.squares.values():
            square.marker = INITIAL_MARKER

    def _markers(self, line: Line) -> list[str]:
        return [self[number] for number in line]

    def _three_identical_markers(self, line: Line) -> bool:
        markers = self._markers(line)
        return INITIAL_MARKER not in markers and len(set(markers)) == 1

    def _twin_markers_and_unmarked(self, line: Line) -> bool:
        markers = self._markers(line)
        return len(set(markers)) == 2 and markers.count(INITIAL_MARKER) == 1

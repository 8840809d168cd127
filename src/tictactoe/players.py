"""
Players share an identity (name, marker, round wins) and differ only in how they pick a square.

HumanPlayer asks a SquareSource (the console), ComputerPlayer runs the heuristic in strategy.py.
"""

import logging
import random
import string
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Protocol, Self

from src.core.exceptions import IllegalMoveError
from src.core.models import PlayerSummary
from src.tictactoe.board import Board
from src.tictactoe.strategy import RandomSource, choose_computer_square

logger = logging.getLogger(__name__)

COMPUTER_NAMES = ("Blue Chip", "Kazaam", "Steel")
COMPUTER_MARKERS = tuple(string.ascii_uppercase)


class SquareSource(Protocol):
    """Anything that can ask a person for a square. Must only return unmarked squares."""

    def ask_square(self, board: Board) -> int: ...


@dataclass
class Player(ABC):
    name: str
    marker: str
    wins: int = field(default=0, kw_only=True)

    @abstractmethod
    def choose_square(self, board: Board) -> int:
        """Pick an unmarked square. Does not touch the board."""

    def move(self, board: Board) -> int:
        """Choose a square, mark it with our marker and return its number."""
        square = self.choose_square(board)
        if square not in board.unmarked_squares():
            raise IllegalMoveError(
                f"{self.name} chose square {square!r}, which is not one of {board.unmarked_squares()}"
            )
        board.mark(square, self.marker)
        logger.debug("%s (%s) marked square %d", self.name, self.marker, square)
        return square

    def to_summary(self) -> PlayerSummary:
        return PlayerSummary(name=self.name, marker=self.marker, wins=self.wins)


@dataclass
class HumanPlayer(Player):
    squares: SquareSource = field(kw_only=True)

    def choose_square(self, board: Board) -> int:
        return self.squares.ask_square(board)


@dataclass
class ComputerPlayer(Player):
    rng: RandomSource = field(default_factory=random.Random, kw_only=True, repr=False)

    @classmethod
    def against(cls, human_marker: str, rng: RandomSource) -> Self:
        """Random name, random letter that the human is not already using."""
        name = rng.choice(COMPUTER_NAMES)
        marker = rng.choice([letter for letter in COMPUTER_MARKERS if letter != human_marker])
        return cls(name, marker, rng=rng)

    def choose_square(self, board: Board) -> int:
        return choose_computer_square(board, self.marker, self.rng)

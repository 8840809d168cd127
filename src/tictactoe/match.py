"""
The Match is the entrypoint into the domain layer for the console.
It sequences turns within a round, rounds within a match and matches within a session,
keeps the score, and reports everything that happens to a DisplaySink.

Phases:
ROUND_IN_PROGRESS -> ROUND_OVER -> SCORE_UPDATED -> ROUND_IN_PROGRESS (next round)
                                                 -> MATCH_OVER -> ROUND_IN_PROGRESS (new match) / TERMINATED
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

from src.core.config import WINS_NEEDED
from src.core.exceptions import GameStateError, InvalidSettingsError
from src.core.models import MatchEvent
from src.core.shared_types import EventKind, FirstMover, MatchPhase
from src.tictactoe.board import Board
from src.tictactoe.players import Player
from src.tictactoe.square import INITIAL_MARKER

logger = logging.getLogger(__name__)

FIRST_MOVER_PROMPT = "mark the first square in this round"
NEXT_ROUND_PROMPT = "play the next round"
NEW_MATCH_PROMPT = "play a new game"


class ConfirmationSource(Protocol):
    """Yes/no questions to the human."""

    def confirm(self, prompt: str) -> bool: ...


class DisplaySink(Protocol):
    """Presentation only: nothing returned from here affects the game."""

    def render(self, board: Board) -> None: ...
    def announce(self, event: MatchEvent) -> None: ...


@dataclass
class Match:
    board: Board
    human: Player
    computer: Player
    confirmation: ConfirmationSource
    display: DisplaySink
    first_mover: FirstMover = FirstMover.CHOOSE
    wins_needed: int = WINS_NEEDED
    phase: MatchPhase = field(default=MatchPhase.TERMINATED, init=False)
    current_marker: str = field(default=INITIAL_MARKER, init=False)

    def __post_init__(self) -> None:
        if self.human.marker == self.computer.marker:
            raise InvalidSettingsError(
                f"Both players use marker {self.human.marker!r}. Markers must differ."
            )
        if self.wins_needed < 1:
            raise InvalidSettingsError(f"wins_needed must be at least 1, got {self.wins_needed}")

    @property
    def players(self) -> tuple[Player, Player]:
        return (self.human, self.computer)

    # --- SESSION / MATCH LOOPS ---
    def play(self) -> None:
        """Play matches until the human declines a new one."""
        while True:
            self.play_match()
            if not self.confirmation.confirm(NEW_MATCH_PROMPT):
                break
            self._announce(EventKind.NEW_MATCH)
        self.phase = MatchPhase.TERMINATED
        self._announce(EventKind.GOODBYE)

    def play_match(self) -> Optional[Player]:
        """
        Play rounds until one player reaches wins_needed, or the human does not want another round.
        Returns the match winner (None if the match was abandoned).
        """
        self.start_match()
        while True:
            self.start_round()
            self.play_round()
            self.record_round()

            match_winner = self.match_winner()
            if match_winner is not None:
                self.phase = MatchPhase.MATCH_OVER
                logger.info("%s won the match %s", match_winner.name, self._score_line())
                self._announce(EventKind.MATCH_WON, match_winner)
                return match_winner

            if not self.confirmation.confirm(NEXT_ROUND_PROMPT):
                self.phase = MatchPhase.MATCH_OVER
                logger.info("match abandoned at %s", self._score_line())
                return None
            self._announce(EventKind.NEW_ROUND)

    def start_match(self) -> None:
        """Fresh tallies and a fresh board."""
        for player in self.players:
            player.wins = 0
        self.board.reset()
        self._announce(EventKind.MATCH_STARTED)

    # --- ROUND ---
    def start_round(self) -> None:
        self.board.reset()
        self.current_marker = self._decide_first_marker()
        self.phase = MatchPhase.ROUND_IN_PROGRESS
        self._announce(EventKind.FIRST_MOVER, self.current_player)
        self.display.render(self.board)

    def play_round(self) -> Optional[Player]:
        """Alternate turns until someone completes a line or the board is full. Returns the round winner (None on a tie)."""
        while not self.is_round_over():
            self.play_turn()
        self.phase = MatchPhase.ROUND_OVER
        return self.round_winner()

    def play_turn(self) -> int:
        """The current player marks a square, then the turn passes to the other marker."""
        if self.phase != MatchPhase.ROUND_IN_PROGRESS:
            raise GameStateError(f"Cannot play a turn. phase: {self.phase}")
        if self.is_round_over():
            raise GameStateError("Cannot play a turn. The round is already decided.")

        square = self.current_player.move(self.board)
        self._toggle_current_marker()
        self.display.render(self.board)
        logger.debug("board after move: %s", self.board.to_layout())
        return square

    def is_round_over(self) -> bool:
        return self.board.someone_won() or self.board.is_full()

    def round_winner(self) -> Optional[Player]:
        winning_marker = self.board.winning_marker()
        if winning_marker is None:
            return None
        return self._player_with_marker(winning_marker)

    def record_round(self) -> Optional[Player]:
        """Only place the tallies change. The winner is read off the board, returns it (None on a tie)."""
        if self.phase != MatchPhase.ROUND_OVER:
            raise GameStateError(f"Cannot record a round that is not over. phase: {self.phase}")

        winner = self.round_winner()
        if winner is None:
            logger.info("round tied")
            self._announce(EventKind.ROUND_TIED)
        else:
            winner.wins += 1
            logger.info("%s won the round", winner.name)
            self._announce(EventKind.ROUND_WON, winner)
        self.phase = MatchPhase.SCORE_UPDATED
        self._announce(EventKind.SCORE)
        return winner

    def match_winner(self) -> Optional[Player]:
        return next((player for player in self.players if player.wins >= self.wins_needed), None)

    @property
    def current_player(self) -> Player:
        return self._player_with_marker(self.current_marker)

    # -- PRIVATE HELPERS ---
    def _decide_first_marker(self) -> str:
        if self.first_mover == FirstMover.HUMAN:
            return self.human.marker
        if self.first_mover == FirstMover.COMPUTER:
            return self.computer.marker
        return (
            self.human.marker
            if self.confirmation.confirm(FIRST_MOVER_PROMPT)
            else self.computer.marker
        )

    def _toggle_current_marker(self) -> None:
        self.current_marker = (
            self.computer.marker
            if self.current_marker == self.human.marker
            else self.human.marker
        )

    def _player_with_marker(self, marker: str) -> Player:
        for player in self.players:
            if player.marker == marker:
                return player
        raise GameStateError(f"No player uses marker {marker!r}")

    def _score_line(self) -> str:
        return ", ".join(f"{player.name} {player.wins}" for player in self.players)

    def _announce(self, kind: EventKind, player: Optional[Player] = None) -> None:
        self.display.announce(
            MatchEvent(
                kind=kind,
                player=player.to_summary() if player is not None else None,
                scores=tuple(p.to_summary() for p in self.players),
                wins_needed=self.wins_needed,
            )
        )

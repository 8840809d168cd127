"""
Type definitions used across layers
"""

from enum import StrEnum


class MatchPhase(StrEnum):
    ROUND_IN_PROGRESS = "round in progress"
    ROUND_OVER = "round over"
    SCORE_UPDATED = "score updated"
    MATCH_OVER = "match over"
    TERMINATED = "terminated"


class FirstMover(StrEnum):
    """Who marks the first square of a round."""

    HUMAN = "human"
    COMPUTER = "computer"
    CHOOSE = "choose"  # ask the human at the start of every round


class EventKind(StrEnum):
    MATCH_STARTED = "match started"
    FIRST_MOVER = "first mover"
    NEW_ROUND = "new round"
    ROUND_WON = "round won"
    ROUND_TIED = "round tied"
    SCORE = "score"
    MATCH_WON = "match won"
    NEW_MATCH = "new match"
    GOODBYE = "goodbye"

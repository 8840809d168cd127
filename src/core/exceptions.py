"""
Exceptions shared across layers.

Domain code raises these where a rule is broken; the console layer decides how to present them.
"""


class GameError(Exception):
    """Base class for everything the game raises on purpose."""


class IllegalMoveError(GameError):
    """A move source handed back a square that is already marked or not on the board."""


class GameStateError(GameError):
    """Operation requested while the match is in a phase that does not allow it."""


class InvalidSettingsError(GameError):
    """Match settings that cannot be played with (e.g. both players on the same marker)."""


class InvalidInputError(GameError, ValueError):
    """
    Raised from the validators of the console input models.

    Subclasses ValueError so that pydantic collects it into a ValidationError.
    """

"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures shared by the domain and console tests. The doubles themselves live in tests/doubles.py.
"""

from itertools import cycle
from typing import Callable

import pytest

from tests.doubles import (
    FirstChoice,
    LastChoice,
    RecordingDisplay,
    ScriptedConfirmation,
    ScriptedPlayer,
)


@pytest.fixture
def first_choice() -> FirstChoice:
    return FirstChoice()


@pytest.fixture
def last_choice() -> LastChoice:
    return LastChoice()


@pytest.fixture
def scripted_player() -> Callable[..., ScriptedPlayer]:
    """Call the inner function with name, marker and the squares to play. repeat=True replays the squares every round."""

    def _create_player(
        name: str, marker: str, squares: list[int], repeat: bool = False
    ) -> ScriptedPlayer:
        script = cycle(squares) if repeat else iter(squares)
        return ScriptedPlayer(name, marker, script=script)

    return _create_player


@pytest.fixture
def confirmation() -> Callable[..., ScriptedConfirmation]:
    """Call the inner function with the answers to give, in order."""

    def _create(answers: list[bool] | None = None, default: bool = False) -> ScriptedConfirmation:
        return ScriptedConfirmation(answers, default)

    return _create


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()

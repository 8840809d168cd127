"""Settings for a console session. Built by the CLI, consumed when wiring up the Match."""

import logging
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.shared_types import FirstMover

WINS_NEEDED = 5


class MatchSettings(BaseModel):
    first_mover: FirstMover = FirstMover.CHOOSE
    wins_needed: int = Field(default=WINS_NEEDED, ge=1)
    seed: Optional[int] = None
    clear_screen: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

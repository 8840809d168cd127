"""Input models. Raw console answers go in, validated values come out."""

from pydantic import BaseModel, ValidationInfo, field_validator

from src.core.exceptions import InvalidInputError


class NameAnswer(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise InvalidInputError("Sorry, that is not a valid name.")
        return value.strip()


class MarkerAnswer(BaseModel):
    marker: str

    @field_validator("marker")
    @classmethod
    def validate_marker(cls, value: str) -> str:
        marker = value.strip().upper()
        # letters and digits only: "." and " " stand for unmarked squares
        if len(marker) != 1 or not marker.isalnum():
            raise InvalidInputError("Sorry, that is not a valid marker. Pick any single letter or number.")
        return marker


class PlayerSetup(NameAnswer, MarkerAnswer):
    """Both answers together, as handed to HumanPlayer."""


class SquareChoice(BaseModel):
    """
    A square picked by the human.

    The squares that are still unmarked must be passed as validation context:
    SquareChoice.model_validate({"square": answer}, context={"unmarked": board.unmarked_squares()})
    """

    square: int

    @field_validator("square", mode="before")
    @classmethod
    def validate_is_number(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            if not value.isdigit():
                raise InvalidInputError("Sorry, that's not a valid square.")
        return value

    @field_validator("square")
    @classmethod
    def validate_is_unmarked(cls, value: int, info: ValidationInfo) -> int:
        unmarked = (info.context or {}).get("unmarked", [])
        if value not in unmarked:
            raise InvalidInputError("Sorry, that's not a valid square.")
        return value


class YesNoAnswer(BaseModel):
    answer: str

    @field_validator("answer")
    @classmethod
    def validate_answer(cls, value: str) -> str:
        answer = value.strip().lower()
        if answer not in ("y", "n"):
            raise InvalidInputError("Sorry, that is not a valid answer.")
        return answer

    @property
    def is_yes(self) -> bool:
        return self.answer == "y"

"""
Console front-end. Implements the three collaborators the domain asks for:
* SquareSource (HumanPlayer asks it for a square)
* ConfirmationSource (Match asks it yes/no questions)
* DisplaySink (Match reports the board and what happened)

Input and output functions are injected so tests can script a whole session.
"""

from typing import Callable, TypeVar

from pydantic import ValidationError

from src.console.models import MarkerAnswer, NameAnswer, PlayerSetup, SquareChoice, YesNoAnswer
from src.core.models import MatchEvent, PlayerSummary
from src.core.shared_types import EventKind
from src.tictactoe.board import Board
from src.tictactoe.square import SQUARE_NUMBERS

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]
T = TypeVar("T")

CLEAR_SCREEN = "\033[2J\033[H"
PRESS_ENTER = "Press 'enter' to begin"

BOARD_TEMPLATE = """
     |     |
  {s1}  |  {s2}  |  {s3}
     |     |
-----+-----+-----
     |     |
  {s4}  |  {s5}  |  {s6}
     |     |
-----+-----+-----
     |     |
  {s7}  |  {s8}  |  {s9}
     |     |
"""


def joinor(numbers: list[int], separator: str = ", ", conjunction: str = "or") -> str:
    """[1, 2, 3] -> "1, 2, or 3" """
    words = [str(number) for number in numbers]
    if len(words) <= 1:
        return "".join(words)
    if len(words) == 2:
        return f" {conjunction} ".join(words)
    return f"{separator.join(words[:-1])}, {conjunction} {words[-1]}"


def draw_board(board: Board) -> str:
    return BOARD_TEMPLATE.format(**{f"s{number}": board[number] for number in SQUARE_NUMBERS})


class ConsoleUI:
    def __init__(
        self,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        clear_screen: bool = True,
    ) -> None:
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.clear_screen = clear_screen
        # set once the players are known (MATCH_STARTED), used as the header above the board
        self._legend = ""
        # set by ask_player_setup, tells the human's match win apart from the computer's
        self._human_marker = ""

    # --- SETUP ---
    def welcome(self) -> None:
        self.clear()
        self.output_fn("Welcome to Tic Tac Toe\n")

    def ask_player_setup(self) -> PlayerSetup:
        name = self._ask_until_valid(
            "Please enter your name",
            lambda answer: NameAnswer(name=answer).name,
        )
        marker = self._ask_until_valid(
            "Which marker would you like for this game? (pick any letter or number)",
            lambda answer: MarkerAnswer(marker=answer).marker,
        )
        self._human_marker = marker
        return PlayerSetup(name=name, marker=marker)

    def introduce_opponent(self, name: str, marker: str) -> None:
        self.output_fn(
            f"\nYour opponent for this game is {name} who will use the letter {marker} as a marker\n"
        )

    # --- SquareSource ---
    def ask_square(self, board: Board) -> int:
        unmarked = board.unmarked_squares()
        return self._ask_until_valid(
            f"Please select a square ({joinor(unmarked)})",
            lambda answer: SquareChoice.model_validate(
                {"square": answer}, context={"unmarked": unmarked}
            ).square,
        )

    # --- ConfirmationSource ---
    def confirm(self, prompt: str) -> bool:
        return self._ask_until_valid(
            f"Would you like to {prompt}? (y/n)",
            lambda answer: YesNoAnswer(answer=answer).is_yes,
        )

    # --- DisplaySink ---
    def render(self, board: Board) -> None:
        self.clear()
        if self._legend:
            self.output_fn(self._legend)
        self.output_fn(draw_board(board))

    def announce(self, event: MatchEvent) -> None:
        if event.kind == EventKind.MATCH_STARTED:
            self._legend = " ".join(f"{p.name} uses {p.marker}." for p in event.scores)
            self.output_fn(f"The first player to win {event.wins_needed} rounds wins the game")
        elif event.kind == EventKind.FIRST_MOVER and event.player is not None:
            self.output_fn(f"{event.player.name} starts the round.")
            self.pause()
        elif event.kind == EventKind.ROUND_WON and event.player is not None:
            self.output_fn(f"{event.player.name} has won the round")
        elif event.kind == EventKind.ROUND_TIED:
            self.output_fn("It's a tie!")
        elif event.kind == EventKind.SCORE:
            self.output_fn(self._format_score(event.scores))
        elif event.kind == EventKind.NEW_ROUND:
            self.output_fn("New Round\n")
        elif event.kind == EventKind.MATCH_WON and event.player is not None:
            if event.player.marker == self._human_marker:
                self.output_fn("Congratulations. You have won the game!\n")
            else:
                self.output_fn(f"{event.player.name} has won the game!\n")
        elif event.kind == EventKind.NEW_MATCH:
            self.output_fn("New Game!\n")
        elif event.kind == EventKind.GOODBYE:
            self.output_fn("Thank you for playing Tic Tac Toe. Goodbye")

    def pause(self) -> None:
        """Hold the announcements on screen until the human is ready. Only needed when the next render clears it."""
        if self.clear_screen:
            self.output_fn(PRESS_ENTER)
            self.input_fn("> ")

    def clear(self) -> None:
        if self.clear_screen:
            self.output_fn(CLEAR_SCREEN)

    # -- Internal helpers --
    def _ask_until_valid(self, prompt: str, parse: Callable[[str], T]) -> T:
        """Keep asking until parse stops raising a ValidationError. Prints the first error message on every retry."""
        while True:
            self.output_fn(prompt)
            try:
                return parse(self.input_fn("> "))
            except ValidationError as error:
                self.output_fn(self._first_message(error))

    @staticmethod
    def _first_message(error: ValidationError) -> str:
        message = error.errors()[0]["msg"]
        # pydantic prefixes messages of raised ValueErrors
        return message.removeprefix("Value error, ")

    @staticmethod
    def _format_score(scores: tuple[PlayerSummary, ...]) -> str:
        lines = ["\nThe score is:"]
        lines.extend(f"{summary.name} has {summary.wins}".rjust(17) for summary in scores)
        return "\n".join(lines) + "\n"

"""Console entrypoint: parse options, set up logging, wire the players and the Match together."""

import argparse
import logging
import random
import sys
from typing import Optional

from pydantic import ValidationError

from src.console.console import ConsoleUI
from src.core.config import WINS_NEEDED, MatchSettings
from src.core.shared_types import FirstMover
from src.tictactoe.board import Board
from src.tictactoe.match import Match
from src.tictactoe.players import ComputerPlayer, HumanPlayer

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tic-tac-toe",
        description="Tic Tac Toe against the computer. First to win five rounds wins the game.",
    )
    parser.add_argument(
        "--first-mover",
        choices=[mover.value for mover in FirstMover],
        default=FirstMover.CHOOSE.value,
        help="Who marks the first square of every round (default: ask every round).",
    )
    parser.add_argument(
        "--wins-needed",
        type=int,
        default=WINS_NEEDED,
        help=f"Round wins needed to take the game (default: {WINS_NEEDED}).",
    )
    parser.add_argument("--seed", type=int, help="Seed for the computer player's random choices.")
    parser.add_argument(
        "--no-clear", dest="clear_screen", action="store_false", help="Do not clear the screen between turns."
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level for the game trace on stderr.")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> MatchSettings:
    return MatchSettings(
        first_mover=FirstMover(args.first_mover),
        wins_needed=args.wins_needed,
        seed=args.seed,
        clear_screen=args.clear_screen,
        log_level=args.log_level,
    )


def configure_logging(settings: MatchSettings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_match(settings: MatchSettings, ui: ConsoleUI) -> Match:
    rng = random.Random(settings.seed)
    setup = ui.ask_player_setup()
    human = HumanPlayer(setup.name, setup.marker, squares=ui)
    computer = ComputerPlayer.against(human.marker, rng)
    ui.introduce_opponent(computer.name, computer.marker)
    return Match(
        board=Board(),
        human=human,
        computer=computer,
        confirmation=ui,
        display=ui,
        first_mover=settings.first_mover,
        wins_needed=settings.wins_needed,
    )


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = build_settings(args)
    except ValidationError as error:
        print(f"Invalid options: {error}", file=sys.stderr)
        return 2
    configure_logging(settings)

    ui = ConsoleUI(clear_screen=settings.clear_screen)
    try:
        ui.welcome()
        match = build_match(settings, ui)
        logger.info("starting session with %s", settings.model_dump())
        match.play()
    except KeyboardInterrupt:
        print()
        return 130
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())

# Don't complain about setting env var in the middle of imports.
# ruff: noqa: E402

import os
import typer
from typing import Annotated, Optional

# Disable pygame start-up text.
# This needs to be before first pygame import.
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from reversi.arguments import Arguments, GameArguments, PositionArguments
from reversi.config import get_show_hints, get_verbose
from reversi.mode.game import COLOR_NAMES, GameMode
from reversi.othello.board import Board

app = typer.Typer(pretty_exceptions_enable=False)

HELP_TEXT = "Commands: a field such as d3, hint, restart, new, quit"


class Terminal:
    def __init__(self, args: Arguments) -> None:
        self.mode = GameMode(args)

    def show(self) -> None:
        engine = self.mode.get_engine()
        details = self.mode.get_ui_details()
        score = details["score"]

        print(engine.board.to_text(details.get("hints", set())))

        if "game_over_text" in details:
            print(details["game_over_text"])
            print(f"Final score: Black {score.black} - White {score.white}")
        else:
            turn = COLOR_NAMES[details["turn"]]
            print(f"Black {score.black} - White {score.white}, {turn} to move")

    def handle(self, command: str) -> bool:
        command = command.strip().lower()

        if command in ["quit", "exit", "q"]:
            return False

        if command == "hint":
            self.mode.toggle_hints()
        elif command == "restart":
            self.mode.restart()
        elif command == "new":
            self.mode.new_game()
        elif command in ["help", "?"]:
            print(HELP_TEXT)
            return True
        else:
            self.play(command)

        self.show()
        return True

    def play(self, field: str) -> None:
        try:
            move = Board.field_to_index(field)
        except ValueError:
            print(f"Unknown command: {field}")
            print(HELP_TEXT)
            return

        if not self.mode.play(move):
            print(f"Invalid move: {field}")

    def __call__(self) -> None:
        self.show()

        while self.handle(typer.prompt(">", prompt_suffix=" ")):
            pass


@app.command()
def main(
    show_hints: Annotated[bool, typer.Option("--hints")] = get_show_hints(),
    verbose: Annotated[bool, typer.Option("-v")] = get_verbose(),
    problem: Annotated[Optional[str], typer.Option("-o")] = None,
    turn: Annotated[Optional[str], typer.Option("-t")] = None,
) -> None:
    game_args = GameArguments(show_hints, verbose)
    position_args = PositionArguments(problem, turn)
    args = Arguments(game_args, position_args)

    Terminal(args)()


if __name__ == "__main__":
    app()

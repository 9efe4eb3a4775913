# Don't complain about setting env var in the middle of imports.
# ruff: noqa: E402

import os
import typer
from typing import Annotated, Optional, Type

# Disable pygame start-up text.
# This needs to be before first pygame import.
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from reversi.arguments import Arguments, GameArguments, PositionArguments
from reversi.config import get_show_hints, get_verbose
from reversi.mode.base import BaseMode
from reversi.mode.game import GameMode
from reversi.window import Window

app = typer.Typer(pretty_exceptions_enable=False)

MODES = {
    "game": GameMode,
}


@app.command()
def main(
    show_hints: Annotated[bool, typer.Option("--hints")] = get_show_hints(),
    verbose: Annotated[bool, typer.Option("-v")] = get_verbose(),
    problem: Annotated[Optional[str], typer.Option("-o")] = None,
    turn: Annotated[Optional[str], typer.Option("-t")] = None,
    mode_name: Annotated[str, typer.Option("-m")] = "game",
) -> None:
    game_args = GameArguments(show_hints, verbose)
    position_args = PositionArguments(problem, turn)
    args = Arguments(game_args, position_args)

    try:
        mode_type: Type[BaseMode] = MODES[mode_name]
    except KeyError:
        print(f"Mode not found: {mode_name}")
        print("Available modes: ")
        for name in sorted(MODES.keys()):
            print(f"- {name}")
        exit(1)

    Window(mode_type, args).run()


if __name__ == "__main__":
    app()

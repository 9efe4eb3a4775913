from __future__ import annotations

from typing import Optional


class GameArguments:
    def __init__(self, show_hints: bool, verbose: bool) -> None:
        self.show_hints = show_hints
        self.verbose = verbose


class PositionArguments:
    def __init__(self, problem: Optional[str], turn: Optional[str]) -> None:
        self.problem = problem
        self.turn = turn


class Arguments:
    def __init__(self, game: GameArguments, position: PositionArguments) -> None:
        self.game = game
        self.position = position

    @classmethod
    def empty(cls) -> Arguments:
        return Arguments(
            GameArguments(False, False),
            PositionArguments(None, None),
        )

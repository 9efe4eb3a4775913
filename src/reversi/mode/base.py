from pygame.event import Event
from typing import Any

from reversi.arguments import Arguments
from reversi.othello.engine import BoardEngine


class BaseMode:
    def __init__(self, args: Arguments):
        pass

    def on_event(self, event: Event) -> None:
        pass

    def on_frame(self, event: Event) -> None:
        pass

    def on_move(self, move: tuple[int, int]) -> None:
        pass

    def get_engine(self) -> BoardEngine:
        raise NotImplementedError

    def get_ui_details(self) -> dict[str, Any]:
        return {}

from __future__ import annotations

from typing import Optional

from reversi.othello.board import BLACK, WHITE, Board


class Score:
    def __init__(self, black: int, white: int) -> None:
        self.black = black
        self.white = white

    @classmethod
    def from_board(cls, board: Board) -> Score:
        return Score(board.count(BLACK), board.count(WHITE))

    def __repr__(self) -> str:
        return f"Score(black={self.black}, white={self.white})"

    def as_tuple(self) -> tuple[int, int]:
        return (self.black, self.white)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Score):
            raise TypeError(f"Cannot compare Score with {type(other)}")

        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:  # pragma: nocover
        return hash(self.as_tuple())

    def get_winner(self) -> Optional[int]:
        if self.black > self.white:
            return BLACK
        if self.white > self.black:
            return WHITE
        return None

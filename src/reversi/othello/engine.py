from __future__ import annotations

from typing import Optional

from reversi.othello.board import (
    BLACK,
    WHITE,
    Board,
    InvalidMove,
    check_square,
    opponent,
)
from reversi.othello.score import Score


class BoardEngine:
    """
    BoardEngine owns one game: the board, the color to move and whether the game ended.

    Views read it through the query methods and change it only through
    `apply_move()` and `reset()`. Passing is never a move: when the player to
    move has no valid move the turn goes back to the other player, and when
    neither player can move the game is over.
    """

    def __init__(self) -> None:
        self.board = Board.start()
        self.turn = BLACK
        self.game_over = False

    @classmethod
    def from_board(cls, board: Board, turn: int) -> BoardEngine:
        assert turn in [BLACK, WHITE]

        engine = BoardEngine()
        engine.board = board
        engine.turn = turn

        if not engine.has_any_legal_move(turn):
            engine.turn = opponent(turn)

            if not engine.has_any_legal_move(engine.turn):
                engine.game_over = True

        return engine

    def __repr__(self) -> str:
        return f"BoardEngine({self.board}, {self.turn}, {self.game_over})"

    def reset(self) -> None:
        self.board = Board.start()
        self.turn = BLACK
        self.game_over = False

    def cell_at(self, row: int, col: int) -> int:
        return self.board.get_square(row, col)

    def score(self) -> Score:
        return Score.from_board(self.board)

    def side_to_move(self) -> int:
        return self.turn

    def is_over(self) -> bool:
        return self.game_over

    def is_game_end(self) -> bool:
        return self.board.is_game_end()

    def is_valid_move(self, row: int, col: int, player: int) -> bool:
        return self.board.is_valid_move(row, col, player)

    def legal_moves(self, player: int) -> set[tuple[int, int]]:
        return self.board.get_moves(player)

    def has_any_legal_move(self, player: int) -> bool:
        return self.board.has_moves(player)

    def apply_move(self, row: int, col: int, player: Optional[int] = None) -> bool:
        """
        Plays `player` on (row, col), flips, then hands over the turn.
        Returns False and changes nothing if the move can't be played.
        """

        check_square(row, col)

        if player is None:
            player = self.turn

        if self.game_over or player != self.turn:
            return False

        try:
            self.board = self.board.do_move(row, col, player)
        except InvalidMove:
            return False

        self.turn = opponent(player)

        if not self.has_any_legal_move(self.turn):
            # Opponent has to pass.
            self.turn = player

            if not self.has_any_legal_move(player):
                self.game_over = True

        return True

    def count_empties(self) -> int:
        return self.board.count_empties()

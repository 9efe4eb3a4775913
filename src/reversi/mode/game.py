from __future__ import annotations

import pygame
from pygame.event import Event
from typing import Any, Optional

from reversi.arguments import Arguments
from reversi.mode.base import BaseMode
from reversi.othello.board import BLACK, WHITE, Board, opponent
from reversi.othello.engine import BoardEngine
from reversi.othello.score import Score

COLOR_NAMES = {BLACK: "Black", WHITE: "White"}


def parse_turn(turn: Optional[str]) -> int:
    if turn is None or turn.lower() in ["black", "b", "x"]:
        return BLACK
    if turn.lower() in ["white", "w", "o"]:
        return WHITE
    raise ValueError(f'Invalid turn "{turn}"')


def get_result_text(score: Score) -> str:
    winner = score.get_winner()
    if winner is None:
        return "Draw!"
    return f"{COLOR_NAMES[winner]} wins!"


class GameMode(BaseMode):
    def __init__(self, args: Arguments) -> None:
        self.default_show_hints = args.game.show_hints
        self.verbose = args.game.verbose

        if args.position.problem is None:
            self.engine = BoardEngine()
        else:
            board = Board.from_problem(args.position.problem)
            self.engine = BoardEngine.from_board(board, parse_turn(args.position.turn))

        self.show_hints = self.default_show_hints
        self.game_over_visible = False
        self.check_game_end()

    def on_event(self, event: Event) -> None:
        if event.type != pygame.KEYDOWN:
            return

        if event.key == pygame.K_h:
            self.toggle_hints()
        elif event.key == pygame.K_r:
            self.restart()
        elif event.key == pygame.K_n:
            self.new_game()

    def on_move(self, move: tuple[int, int]) -> None:
        self.play(move)

    def play(self, move: tuple[int, int]) -> bool:
        row, col = move
        player = self.engine.side_to_move()

        if not self.engine.apply_move(row, col):
            return False

        if self.verbose:
            field = Board.index_to_field(move)
            print(f"{COLOR_NAMES[player]} plays {field}")

            if not self.engine.is_over() and self.engine.side_to_move() == player:
                print(f"{COLOR_NAMES[opponent(player)]} has to pass")

        self.check_game_end()
        return True

    def toggle_hints(self) -> None:
        self.show_hints = not self.show_hints

    def restart(self) -> None:
        self.engine.reset()
        self.show_hints = self.default_show_hints
        self.check_game_end()

    def new_game(self) -> None:
        self.game_over_visible = False
        self.restart()

    def check_game_end(self) -> None:
        # Both players being stuck ends the game, even if no move set the flag.
        if not (self.engine.is_over() or self.engine.is_game_end()):
            self.game_over_visible = False
            return

        if self.game_over_visible:
            return

        self.game_over_visible = True

        if self.verbose:
            score = self.engine.score()
            print(f"Game over: {get_result_text(score)} {score.black}-{score.white}")

    def get_engine(self) -> BoardEngine:
        return self.engine

    def get_ui_details(self) -> dict[str, Any]:
        score = self.engine.score()
        turn = self.engine.side_to_move()

        details: dict[str, Any] = {"score": score, "turn": turn}

        if self.show_hints and not self.game_over_visible:
            details["hints"] = self.engine.legal_moves(turn)

        if self.game_over_visible:
            details["game_over_text"] = get_result_text(score)

        return details

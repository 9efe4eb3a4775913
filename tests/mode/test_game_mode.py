import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

import pygame  # noqa:E402
import pytest  # noqa:E402
from typing import Optional  # noqa:E402

from reversi.arguments import Arguments, GameArguments, PositionArguments  # noqa:E402
from reversi.mode.game import GameMode, get_result_text, parse_turn  # noqa:E402
from reversi.othello.board import BLACK, WHITE, Board  # noqa:E402
from reversi.othello.score import Score  # noqa:E402

PROBLEM_LAST_MOVE = "XO------" + "-" * 56
PROBLEM_FINISHED = "X" + "-" * 63


def make_mode(
    show_hints: bool = False,
    verbose: bool = False,
    problem: Optional[str] = None,
    turn: Optional[str] = None,
) -> GameMode:
    args = Arguments(
        GameArguments(show_hints, verbose),
        PositionArguments(problem, turn),
    )
    return GameMode(args)


def key_event(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


@pytest.mark.parametrize(
    ["score", "expected"],
    [
        pytest.param(Score(40, 24), "Black wins!", id="black"),
        pytest.param(Score(10, 54), "White wins!", id="white"),
        pytest.param(Score(32, 32), "Draw!", id="draw"),
    ],
)
def test_get_result_text(score: Score, expected: str) -> None:
    assert get_result_text(score) == expected


@pytest.mark.parametrize(
    ["turn", "expected"],
    [
        pytest.param(None, BLACK, id="default"),
        pytest.param("black", BLACK, id="black"),
        pytest.param("X", BLACK, id="x"),
        pytest.param("White", WHITE, id="white"),
        pytest.param("o", WHITE, id="o"),
    ],
)
def test_parse_turn(turn: Optional[str], expected: int) -> None:
    assert parse_turn(turn) == expected


def test_parse_turn_error() -> None:
    with pytest.raises(ValueError):
        parse_turn("red")


def test_ui_details_start() -> None:
    details = make_mode().get_ui_details()
    assert details == {"score": Score(2, 2), "turn": BLACK}


def test_ui_details_hints() -> None:
    mode = make_mode(show_hints=True)
    details = mode.get_ui_details()
    assert details["hints"] == {(2, 3), (3, 2), (4, 5), (5, 4)}


def test_on_move() -> None:
    mode = make_mode()
    mode.on_move((2, 3))

    engine = mode.get_engine()
    assert engine.cell_at(3, 3) == BLACK
    assert engine.side_to_move() == WHITE
    assert mode.get_ui_details()["score"] == Score(4, 1)


def test_play_rejected() -> None:
    mode = make_mode()
    assert not mode.play((0, 0))
    assert mode.get_engine().board == Board.start()


def test_toggle_hints_key() -> None:
    mode = make_mode()

    mode.on_event(key_event(pygame.K_h))
    assert "hints" in mode.get_ui_details()

    mode.on_event(key_event(pygame.K_h))
    assert "hints" not in mode.get_ui_details()


def test_other_keys_ignored() -> None:
    mode = make_mode()
    mode.on_event(key_event(pygame.K_a))
    mode.on_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_h))
    assert "hints" not in mode.get_ui_details()


def test_restart_key() -> None:
    mode = make_mode()
    mode.on_move((2, 3))
    mode.toggle_hints()

    mode.on_event(key_event(pygame.K_r))

    assert mode.get_engine().board == Board.start()
    assert mode.get_ui_details() == {"score": Score(2, 2), "turn": BLACK}


def test_restart_keeps_configured_hints() -> None:
    mode = make_mode(show_hints=True)
    mode.toggle_hints()
    mode.restart()
    assert "hints" in mode.get_ui_details()


def test_game_over_text() -> None:
    mode = make_mode(problem=PROBLEM_LAST_MOVE)
    assert "game_over_text" not in mode.get_ui_details()

    mode.on_move((0, 2))

    details = mode.get_ui_details()
    assert details["game_over_text"] == "Black wins!"
    assert details["score"] == Score(3, 0)


def test_click_after_game_over_is_ignored() -> None:
    mode = make_mode(problem=PROBLEM_LAST_MOVE)
    mode.on_move((0, 2))
    board = mode.get_engine().board

    mode.on_move((0, 3))

    assert mode.get_engine().board == board
    assert "game_over_text" in mode.get_ui_details()


def test_finished_problem_shows_game_over() -> None:
    mode = make_mode(problem=PROBLEM_FINISHED, show_hints=True)
    details = mode.get_ui_details()
    assert details["game_over_text"] == "Black wins!"
    assert "hints" not in details


def test_new_game_key() -> None:
    mode = make_mode(problem=PROBLEM_LAST_MOVE)
    mode.on_move((0, 2))

    mode.on_event(key_event(pygame.K_n))

    assert mode.get_ui_details() == {"score": Score(2, 2), "turn": BLACK}
    assert not mode.get_engine().is_over()


def test_verbose_output(capsys: pytest.CaptureFixture[str]) -> None:
    mode = make_mode(verbose=True, problem="XO------" + "-" * 48 + "XO------")

    mode.on_move((0, 2))
    mode.on_move((7, 2))

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Black plays c1",
        "White has to pass",
        "Black plays c8",
        "Game over: Black wins! 6-0",
    ]


def test_quiet_by_default(capsys: pytest.CaptureFixture[str]) -> None:
    mode = make_mode()
    mode.on_move((2, 3))
    assert capsys.readouterr().out == ""

from __future__ import annotations

from copy import copy
from itertools import count
from typing import Iterable

ROWS = 8
COLS = 8

BLACK = -1
WHITE = 1
EMPTY = 0

DIRECTIONS = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]

PROBLEM_CHARS = {"X": BLACK, "O": WHITE, "-": EMPTY}


class InvalidMove(Exception):
    pass


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE]
    return -color


def on_board(row: int, col: int) -> bool:
    return row in range(ROWS) and col in range(COLS)


def check_square(row: int, col: int) -> None:
    if not on_board(row, col):
        raise ValueError(f"Square ({row}, {col}) is not on the board")


class Board:
    """
    Board stores the 64 squares of an othello board, row by row.
    It does not know whose turn it is, so every rule takes the color to play.
    """

    def __init__(self, squares: list[int]) -> None:
        assert len(squares) == ROWS * COLS
        self.squares = squares

    @classmethod
    def start(cls) -> Board:
        board = cls.empty()
        board.squares[3 * COLS + 3] = board.squares[4 * COLS + 4] = WHITE
        board.squares[3 * COLS + 4] = board.squares[4 * COLS + 3] = BLACK
        return board

    @classmethod
    def empty(cls) -> Board:
        return Board([EMPTY] * ROWS * COLS)

    @classmethod
    def from_problem(cls, problem: str) -> Board:
        chars = "".join(problem.split())

        if len(chars) != ROWS * COLS:
            raise ValueError(f"Expected 64 squares, got {len(chars)}")

        try:
            squares = [PROBLEM_CHARS[char] for char in chars.upper()]
        except KeyError as e:
            raise ValueError(f"Invalid square character {e}") from e

        return Board(squares)

    def to_problem(self) -> str:
        chars = {color: char for char, color in PROBLEM_CHARS.items()}
        return "".join(chars[square] for square in self.squares)

    def __repr__(self) -> str:
        return f"Board({self.to_problem()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.squares == other.squares

    def __hash__(self) -> int:  # pragma: nocover
        return hash(tuple(self.squares))

    def get_square(self, row: int, col: int) -> int:
        check_square(row, col)
        return self.squares[row * COLS + col]

    def count(self, color: int) -> int:
        assert color in [BLACK, WHITE]
        return self.squares.count(color)

    def count_discs(self) -> int:
        return ROWS * COLS - self.count_empties()

    def count_empties(self) -> int:
        return self.squares.count(EMPTY)

    def get_flips(self, row: int, col: int, color: int) -> list[tuple[int, int]]:
        check_square(row, col)

        if self.squares[row * COLS + col] != EMPTY:
            return []

        opp = opponent(color)
        flips: list[tuple[int, int]] = []

        for dy, dx in DIRECTIONS:
            line: list[tuple[int, int]] = []

            for d in count(1):
                y = row + dy * d
                x = col + dx * d

                if not on_board(y, x):
                    break

                square = self.squares[y * COLS + x]

                if square == opp:
                    line.append((y, x))
                    continue

                # Only a run of opponent discs closed by our own disc flips.
                if square == color:
                    flips += line
                break

        return flips

    def is_valid_move(self, row: int, col: int, color: int) -> bool:
        return len(self.get_flips(row, col, color)) > 0

    def get_moves(self, color: int) -> set[tuple[int, int]]:
        return {
            (row, col)
            for row in range(ROWS)
            for col in range(COLS)
            if self.is_valid_move(row, col, color)
        }

    def has_moves(self, color: int) -> bool:
        return any(
            self.is_valid_move(row, col, color)
            for row in range(ROWS)
            for col in range(COLS)
        )

    def is_game_end(self) -> bool:
        return not (self.has_moves(BLACK) or self.has_moves(WHITE))

    def do_move(self, row: int, col: int, color: int) -> Board:
        flips = self.get_flips(row, col, color)

        if not flips:
            raise InvalidMove

        child = Board(copy(self.squares))
        child.squares[row * COLS + col] = color

        for y, x in flips:
            child.squares[y * COLS + x] = color

        return child

    def to_text(self, hints: Iterable[tuple[int, int]] = ()) -> str:
        hint_set = set(hints)

        lines = ["+-a-b-c-d-e-f-g-h-+"]
        for row in range(ROWS):
            line = "{} ".format(row + 1)

            for col in range(COLS):
                square = self.squares[row * COLS + col]

                if square == BLACK:
                    line += "○ "
                elif square == WHITE:
                    line += "● "
                elif (row, col) in hint_set:
                    line += "· "
                else:
                    line += "  "
            lines.append(line + "|")
        lines.append("+-----------------+")

        return "\n".join(lines)

    def show(self, hints: Iterable[tuple[int, int]] = ()) -> None:
        print(self.to_text(hints))

    @classmethod
    def index_to_field(cls, index: tuple[int, int]) -> str:
        row, col = index
        if not on_board(row, col):
            raise ValueError
        return "abcdefgh"[col] + "12345678"[row]

    @classmethod
    def indexes_to_fields(cls, indexes: Iterable[tuple[int, int]]) -> str:
        return " ".join(cls.index_to_field(index) for index in indexes)

    @classmethod
    def field_to_index(cls, field: str) -> tuple[int, int]:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        col = ord(field[0]) - ord("a")
        row = ord(field[1]) - ord("1")
        return row, col

    @classmethod
    def fields_to_indexes(cls, fields: list[str]) -> list[tuple[int, int]]:
        return [cls.field_to_index(field) for field in fields]

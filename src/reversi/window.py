import pygame
from pygame.event import Event
from typing import Optional, Type

from reversi.arguments import Arguments
from reversi.config import get_square_size
from reversi.mode.base import BaseMode
from reversi.othello.board import BLACK, COLS, ROWS, WHITE
from reversi.othello.score import Score

STATUS_HEIGHT_PX = 50

FONT_SIZE = 36
SMALL_FONT_SIZE = 24

COLOR_WHITE_DISC = (255, 255, 255)
COLOR_BLACK_DISC = (0, 0, 0)
COLOR_BACKGROUND = (0, 128, 0)
COLOR_GRID_LINE = (0, 96, 0)
COLOR_STATUS_BACKGROUND = (40, 40, 40)
COLOR_STATUS_TEXT = (230, 230, 230)
COLOR_OVERLAY = (0, 0, 0, 180)

FRAME_RATE = 60


class NonMoveEvent(Exception):
    pass


class Window:
    def __init__(self, mode_type: Type[BaseMode], args: Arguments) -> None:
        pygame.init()
        self.args = args
        self.mode = mode_type(args)

        self.square_size = get_square_size()
        self.board_width_px = self.square_size * COLS
        self.board_height_px = self.square_size * ROWS
        self.disc_radius = self.square_size // 2 - 5
        self.hint_radius = self.square_size // 8

        self.screen = pygame.display.set_mode(
            (self.board_width_px, self.board_height_px + STATUS_HEIGHT_PX)
        )
        self.clock = pygame.time.Clock()

        pygame.display.set_caption("Reversi")

    def run(self) -> None:
        running = True
        event: Optional[Event] = None

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break

                try:
                    move = self.get_move_from_event(event)
                except NonMoveEvent:
                    self.mode.on_event(event)
                else:
                    self.mode.on_move(move)

            if event is not None:
                self.mode.on_frame(event)

            self.draw()
            self.clock.tick(FRAME_RATE)

        pygame.quit()

    def get_square_center(self, row: int, col: int) -> tuple[int, int]:
        x = col * self.square_size + self.square_size // 2
        y = row * self.square_size + self.square_size // 2
        return (x, y)

    def draw_disc(self, row: int, col: int, color: tuple[int, int, int]) -> None:
        center = self.get_square_center(row, col)
        pygame.draw.circle(self.screen, color, center, self.disc_radius)

    def draw_hint(self, row: int, col: int, color: tuple[int, int, int]) -> None:
        center = self.get_square_center(row, col)
        pygame.draw.circle(self.screen, color, center, self.hint_radius)

    def draw_text(
        self,
        text: str,
        center: tuple[int, int],
        color: tuple[int, int, int],
        font_size: int = FONT_SIZE,
    ) -> None:
        font = pygame.font.Font(None, font_size)
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect()
        text_rect.center = center
        self.screen.blit(text_surface, text_rect.topleft)

    def draw(self) -> None:
        engine = self.mode.get_engine()

        ui_details = self.mode.get_ui_details()
        hints: set[tuple[int, int]] = ui_details.pop("hints", set())
        score: Score = ui_details.pop("score", engine.score())
        turn: int = ui_details.pop("turn", engine.side_to_move())
        game_over_text: Optional[str] = ui_details.pop("game_over_text", None)

        if ui_details:
            print(
                "WARNING: found unused ui details key(s): "
                + ", ".join(sorted(ui_details))
            )

        if turn == WHITE:
            turn_color = COLOR_WHITE_DISC
        else:
            turn_color = COLOR_BLACK_DISC

        self.screen.fill(COLOR_BACKGROUND)

        for row in range(ROWS):
            for col in range(COLS):
                rect = (
                    col * self.square_size,
                    row * self.square_size,
                    self.square_size,
                    self.square_size,
                )
                pygame.draw.rect(self.screen, COLOR_GRID_LINE, rect, 1)

                square = engine.cell_at(row, col)

                if square == WHITE:
                    self.draw_disc(row, col, COLOR_WHITE_DISC)
                elif square == BLACK:
                    self.draw_disc(row, col, COLOR_BLACK_DISC)
                elif (row, col) in hints:
                    self.draw_hint(row, col, turn_color)

        self.draw_status(score, turn)

        if game_over_text is not None:
            self.draw_game_over(game_over_text, score)

        pygame.display.flip()

    def draw_status(self, score: Score, turn: int) -> None:
        top = self.board_height_px
        pygame.draw.rect(
            self.screen,
            COLOR_STATUS_BACKGROUND,
            ((0, top), (self.board_width_px, STATUS_HEIGHT_PX)),
        )

        if turn == BLACK:
            turn_text = "Black to move"
        else:
            turn_text = "White to move"

        text = f"Black {score.black} - White {score.white}    {turn_text}"
        center = (self.board_width_px // 2, top + STATUS_HEIGHT_PX // 2)
        self.draw_text(text, center, COLOR_STATUS_TEXT, SMALL_FONT_SIZE)

    def draw_game_over(self, game_over_text: str, score: Score) -> None:
        overlay = pygame.Surface(
            (self.board_width_px, self.board_height_px), pygame.SRCALPHA
        )
        overlay.fill(COLOR_OVERLAY)
        self.screen.blit(overlay, (0, 0))

        middle_x = self.board_width_px // 2
        middle_y = self.board_height_px // 2

        self.draw_text(game_over_text, (middle_x, middle_y - 40), COLOR_STATUS_TEXT)
        self.draw_text(
            f"Black: {score.black}  White: {score.white}",
            (middle_x, middle_y),
            COLOR_STATUS_TEXT,
        )
        self.draw_text(
            "Press N for a new game",
            (middle_x, middle_y + 40),
            COLOR_STATUS_TEXT,
            SMALL_FONT_SIZE,
        )

    def get_move_from_event(self, event: Event) -> tuple[int, int]:
        if event.type != pygame.MOUSEBUTTONDOWN:
            raise NonMoveEvent

        if event.button != pygame.BUTTON_LEFT:
            raise NonMoveEvent

        x, y = event.pos
        col: int = x // self.square_size
        row: int = y // self.square_size

        if not (row in range(ROWS) and col in range(COLS)):
            raise NonMoveEvent

        return (row, col)

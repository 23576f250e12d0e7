"""The playable game: session logic, key mapping and the pygame window."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .board import GRID_CELL_SIZE, SIZE, Board, Direction, text_color, tile_color  # noqa: E402
from .scores import DB_NAME, ScoreStore, ScoreStoreError  # noqa: E402

WINDOW_SIZE = (600, 700)
BOARD_PIXELS = 450
CELL_GAP = 12

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
}


def key_to_direction(key: int) -> Direction | None:
    """Return the move direction bound to a pygame key code, or None."""
    return _KEY_DIRECTIONS.get(key)


class GameSession:
    """A board together with the best score it is measured against."""

    def __init__(self, board: Board, store: ScoreStore | None = None) -> None:
        self.board = board
        self.store = store
        self.best = store.load_best() if store is not None else 0

    @property
    def score(self) -> int:
        """The score of the game in progress."""
        return self.board.score

    def new_game(self) -> None:
        """Start over with a fresh board and a zero score; the best score stays."""
        self.board.reset()

    def step(self, direction: Direction | int | None) -> bool:
        """Apply one move; return whether the board changed.

        When the move brings the score level with or above the best score,
        the best score is updated and stored.
        """
        if direction is None:
            return False
        if not self.board.move(direction):
            return False
        if self.best <= self.board.score:
            self.best = self.board.score
            if self.store is not None:
                self.store.save_best(self.best)
        return True

    def is_over(self) -> bool:
        """True when the winning tile is reached or no move is left."""
        board = self.board
        return board.is_won() or (board.is_full() and not board.can_move())


def _load_font(name: str, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(name, size)
    except (FileNotFoundError, OSError):
        return pygame.font.Font(None, size)


def _blit_centered_x(
    screen: pygame.Surface, surface: pygame.Surface, rect: pygame.Rect, y: int
) -> None:
    screen.blit(surface, (rect.x + (rect.w // 2 - surface.get_width() // 2), y))


def _draw_board(screen: pygame.Surface, board: Board, font: pygame.font.Font) -> None:
    width, height = screen.get_size()
    area = pygame.Rect(
        width // 2 - BOARD_PIXELS // 2, height - (BOARD_PIXELS + 32), BOARD_PIXELS, BOARD_PIXELS
    )
    pygame.draw.rect(screen, (187, 173, 160, 255), area)
    overlay = pygame.Surface((GRID_CELL_SIZE, GRID_CELL_SIZE), pygame.SRCALPHA)
    for i, row in enumerate(board.rows):
        for j, value in enumerate(row):
            cell = pygame.Rect(
                area.x + j * GRID_CELL_SIZE + CELL_GAP * (j + 1),
                area.y + i * GRID_CELL_SIZE + CELL_GAP * (i + 1),
                GRID_CELL_SIZE,
                GRID_CELL_SIZE,
            )
            overlay.fill(tile_color(value))
            screen.blit(overlay, cell.topleft)
            if value:
                label = font.render(str(value), True, text_color(value)[:3])
                screen.blit(
                    label,
                    (
                        cell.x + GRID_CELL_SIZE // 2 - label.get_width() // 2,
                        cell.y + GRID_CELL_SIZE // 2 - label.get_height() // 2,
                    ),
                )


def run(db_path: str | os.PathLike[str] = DB_NAME) -> None:
    """Open the game window and play until it is closed or the game ends."""
    with ScoreStore(db_path) as store:
        session = GameSession(Board(), store)
        pygame.init()
        try:
            _play(session)
        finally:
            pygame.quit()


def _play(session: GameSession) -> None:
    screen = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption("2048")
    clock = pygame.time.Clock()

    font = _load_font("Roboto-Regular.ttf", 64)
    font14 = _load_font("Roboto-Regular.ttf", 14)
    font16 = _load_font("Roboto-Regular.ttf", 16)
    semi_bold = _load_font("Roboto-SemiBold.ttf", 16)

    width = screen.get_width()
    title_x = width // 2 - BOARD_PIXELS // 2
    title = font.render("2048", True, (0, 0, 0))
    info = font16.render("Join the numbers and get to the 2048 tile!", True, (119, 110, 101))
    button_label = font16.render("New Game", True, (249, 246, 242))
    best_label = font14.render("BEST", True, (238, 228, 218))
    score_label = font14.render("SCORE", True, (238, 228, 218))

    button_rect = pygame.Rect(title_x + 335, 140, 115, 40)
    score_rect = pygame.Rect(title_x + BOARD_PIXELS - 106, 64, 106, 58)
    best_rect = pygame.Rect(title_x + BOARD_PIXELS - 225, 64, 106, 58)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if button_rect.collidepoint(event.pos):
                    session.new_game()
            elif event.type == pygame.KEYDOWN:
                session.step(key_to_direction(event.key))
        if session.is_over():
            running = False

        screen.fill((255, 255, 255))
        _draw_board(screen, session.board, font)

        screen.blit(title, (title_x, 16 + title.get_height()))
        screen.blit(info, (title_x, button_rect.bottom - info.get_height()))

        pygame.draw.rect(screen, (143, 122, 102), button_rect)
        screen.blit(
            button_label,
            (
                button_rect.x + (button_rect.w // 2 - button_label.get_width() // 2),
                button_rect.y + (button_rect.h // 2 - button_label.get_height() // 2),
            ),
        )

        pygame.draw.rect(screen, (187, 173, 160), score_rect)
        pygame.draw.rect(screen, (187, 173, 160), best_rect)
        for rect, label, value in (
            (score_rect, score_label, session.score),
            (best_rect, best_label, session.best),
        ):
            _blit_centered_x(screen, label, rect, rect.y + rect.h // 2 - label.get_height())
            number = semi_bold.render(str(value), True, (255, 255, 255))
            _blit_centered_x(screen, number, rect, rect.y + rect.h // 2 + number.get_height() // 5)

        pygame.display.flip()
        clock.tick(60)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the process exit status."""
    parser = argparse.ArgumentParser(description="Slide and merge tiles to reach 2048.")
    parser.add_argument("--db", default=DB_NAME, help="SQLite file holding the best score")
    args = parser.parse_args(argv)
    try:
        run(args.db)
    except ScoreStoreError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
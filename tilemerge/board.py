"""The 4x4 board: tile placement, sliding, merging and end-of-game checks."""

from __future__ import annotations

import enum
import random
from typing import Sequence

SIZE = 4
WIN_SCORE = 2048
GRID_CELL_SIZE = 97

Color = tuple[int, int, int, int]

_TILE_COLORS: dict[int, Color] = {
    0: (238, 228, 218, 96),
    2: (238, 228, 218, 255),
    4: (237, 224, 200, 255),
    8: (242, 177, 121, 255),
    16: (245, 149, 99, 255),
    32: (246, 124, 95, 255),
    64: (246, 94, 59, 255),
    128: (237, 207, 114, 255),
    256: (237, 204, 97, 255),
    512: (237, 200, 80, 255),
    1024: (237, 197, 63, 255),
    2048: (237, 194, 46, 255),
}

_LIGHT_TEXT: Color = (255, 255, 255, 255)
_DARK_TEXT: Color = (0, 0, 0, 255)


class Direction(enum.IntEnum):
    """Directions a move can slide the tiles in."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


def tile_color(value: int) -> Color:
    """Return the RGBA background colour of a cell holding ``value``."""
    try:
        return _TILE_COLORS[value]
    except KeyError:
        raise ValueError(f"no colour for tile value {value}") from None


def text_color(value: int) -> Color:
    """Return the RGBA colour of the number drawn on a cell holding ``value``."""
    return _LIGHT_TEXT if value >= 8 else _DARK_TEXT


def _slide(values: list[int]) -> tuple[list[int], int, bool]:
    """Slide one line of tiles towards index 0, merging equal neighbours."""
    cells = list(values)
    gained = 0
    moved = False
    for start in range(1, len(cells)):
        if not cells[start]:
            continue
        k = start
        while k > 0 and cells[k - 1] == 0:
            cells[k - 1], cells[k] = cells[k], 0
            k -= 1
            moved = True
        if k > 0 and cells[k - 1] == cells[k]:
            cells[k - 1] *= 2
            gained += cells[k - 1]
            cells[k] = 0
            moved = True
    return cells, gained, moved


def _lines(direction: Direction) -> list[list[tuple[int, int]]]:
    """Cell coordinates of every line, ordered so that tiles move towards index 0."""
    if direction in (Direction.UP, Direction.DOWN):
        lines = [[(r, c) for r in range(SIZE)] for c in range(SIZE)]
    else:
        lines = [[(r, c) for c in range(SIZE)] for r in range(SIZE)]
    if direction in (Direction.DOWN, Direction.RIGHT):
        lines = [line[::-1] for line in lines]
    return lines


class Board:
    """A square grid of tiles together with the running score."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cells = [[0] * SIZE for _ in range(SIZE)]
        self.score = 0
        self.reset()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], rng: random.Random | None = None) -> "Board":
        """Build a board holding exactly ``rows``, with no tiles added."""
        grid = [list(row) for row in rows]
        if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
            raise ValueError(f"board must be {SIZE}x{SIZE}")
        if any(not isinstance(v, int) or v < 0 for row in grid for v in row):
            raise ValueError("tile values must be non-negative integers")
        board = cls.__new__(cls)
        board._rng = rng if rng is not None else random.Random()
        board._cells = grid
        board.score = 0
        return board

    def reset(self) -> None:
        """Clear the board, zero the score and place two starting tiles."""
        self._cells = [[0] * SIZE for _ in range(SIZE)]
        self.score = 0
        positions = [(r, c) for r in range(SIZE) for c in range(SIZE)]
        for r, c in self._rng.sample(positions, 2):
            self._cells[r][c] = 4 if self._rng.randrange(10) == 4 else 2

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        """The tiles as a tuple of rows."""
        return tuple(tuple(row) for row in self._cells)

    def is_full(self) -> bool:
        """True when no cell is empty."""
        return all(all(row) for row in self._cells)

    def is_won(self) -> bool:
        """True when some cell holds the winning tile."""
        return any(value == WIN_SCORE for row in self._cells for value in row)

    def can_move(self) -> bool:
        """True when an empty cell or two equal neighbours remain."""
        cells = self._cells
        for r, row in enumerate(cells):
            for c, value in enumerate(row):
                if not value:
                    return True
                if c + 1 < SIZE and value == row[c + 1]:
                    return True
                if r + 1 < SIZE and value == cells[r + 1][c]:
                    return True
        return False

    def move(self, direction: Direction | int) -> bool:
        """Slide all tiles in ``direction``; return whether anything moved.

        A successful move adds merged values to the score and places a new
        2 or 4 tile on a random empty cell.
        """
        direction = Direction(direction)
        moved = False
        gained = 0
        for line in _lines(direction):
            values = [self._cells[r][c] for r, c in line]
            new_values, line_gain, line_moved = _slide(values)
            if line_moved:
                moved = True
                gained += line_gain
                for (r, c), value in zip(line, new_values):
                    self._cells[r][c] = value
        if not moved:
            return False
        self.score += gained
        self._spawn()
        return True

    def _spawn(self) -> None:
        empties = [(r, c) for r, row in enumerate(self._cells) for c, v in enumerate(row) if not v]
        r, c = self._rng.choice(empties)
        self._cells[r][c] = (self._rng.randrange(2) + 1) * 2

    def __str__(self) -> str:
        return "\n".join(", ".join(str(v) for v in row) for row in self._cells)
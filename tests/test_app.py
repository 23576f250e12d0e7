import random

import pygame
import pytest

from tilemerge.app import GameSession, key_to_direction, main
from tilemerge.board import Board, Direction
from tilemerge.scores import ScoreStore


def _empty():
    return [[0] * 4 for _ in range(4)]


@pytest.fixture
def store(tmp_path):
    with ScoreStore(tmp_path / "scores.db") as s:
        yield s


def _board(rows):
    return Board.from_rows(rows, random.Random(7))


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_UP, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
    ],
)
def test_arrow_keys_map_to_directions(key, expected):
    assert key_to_direction(key) is expected


def test_other_keys_map_to_none():
    assert key_to_direction(pygame.K_SPACE) is None


def test_step_merges_and_stores_best(store):
    rows = _empty()
    rows[0][0] = rows[0][1] = 2
    session = GameSession(_board(rows), store)
    assert session.best == 0
    assert session.step(Direction.LEFT) is True
    assert session.score == 4
    assert session.best == session.score
    assert store.load_best() == session.score


def test_step_without_movement_returns_false(store):
    rows = _empty()
    rows[0][0] = 2
    board = _board(rows)
    session = GameSession(board, store)
    assert session.step(Direction.LEFT) is False
    assert board.rows == tuple(tuple(r) for r in rows)
    assert session.best == 0


def test_step_none_does_nothing(store):
    rows = _empty()
    rows[3][3] = 2
    board = _board(rows)
    session = GameSession(board, store)
    assert session.step(None) is False
    assert board.rows == tuple(tuple(r) for r in rows)


def test_best_is_not_lowered(store):
    store.save_best(100)
    rows = _empty()
    rows[0][0] = rows[0][1] = 2
    session = GameSession(_board(rows), store)
    assert session.best == 100
    assert session.step(Direction.LEFT) is True
    assert session.best == 100
    assert store.load_best() == 100


def test_session_without_store_tracks_best():
    rows = _empty()
    rows[1][0] = rows[1][1] = 2
    session = GameSession(_board(rows))
    session.step(Direction.RIGHT)
    assert session.best == session.score
    assert session.score > 0


def test_new_game_resets_board_keeps_best(store):
    rows = _empty()
    rows[0][0] = rows[0][1] = 2
    session = GameSession(_board(rows), store)
    session.step(Direction.LEFT)
    best = session.best
    session.new_game()
    assert session.score == 0
    assert session.best == best
    tiles = [v for row in session.board.rows for v in row if v]
    assert len(tiles) == 2
    assert all(v in (2, 4) for v in tiles)


def test_is_over_when_won(store):
    rows = _empty()
    rows[2][2] = 2048
    assert GameSession(_board(rows), store).is_over() is True


def test_is_over_when_stuck(store):
    rows = [[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]]
    assert GameSession(_board(rows), store).is_over() is True


def test_not_over_with_full_board_and_merge(store):
    rows = [[2, 2, 4, 8], [4, 8, 16, 32], [8, 16, 32, 64], [16, 32, 64, 128]]
    assert GameSession(_board(rows), store).is_over() is False


def test_not_over_with_empty_cell(store):
    rows = _empty()
    rows[0][0] = 2
    assert GameSession(_board(rows), store).is_over() is False


def test_main_reports_unopenable_database(tmp_path, capsys):
    assert main(["--db", str(tmp_path)]) == 1
    assert capsys.readouterr().err.strip() != ""
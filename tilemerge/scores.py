"""Persistent storage of the best score in an SQLite database."""

from __future__ import annotations

import os
import sqlite3
from types import TracebackType

DB_NAME = "2048.db"


class ScoreStoreError(Exception):
    """Raised when the score database cannot be read or written."""


class ScoreStore:
    """The best score, kept in a single-row table of an SQLite file."""

    def __init__(self, path: str | os.PathLike[str] = DB_NAME) -> None:
        self.path = os.fspath(path)
        is_new = not os.path.exists(self.path)
        try:
            self._conn = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            raise ScoreStoreError(f"cannot open database: {exc}") from exc
        if is_new:
            self._initialise()

    def _initialise(self) -> None:
        try:
            with self._conn:
                self._conn.execute(
                    "CREATE TABLE IF NOT EXISTS scores "
                    "(id INTEGER PRIMARY KEY, best_score INTEGER);"
                )
                self._conn.execute("INSERT INTO scores (best_score) VALUES (0);")
        except sqlite3.Error as exc:
            self._conn.close()
            raise ScoreStoreError(f"failed to initialise database: {exc}") from exc

    def load_best(self) -> int:
        """Return the stored best score, or 0 if no score row exists."""
        try:
            row = self._conn.execute("SELECT best_score FROM scores WHERE id = 1;").fetchone()
        except sqlite3.Error as exc:
            raise ScoreStoreError(f"failed to read best score: {exc}") from exc
        return int(row[0]) if row is not None and row[0] is not None else 0

    def save_best(self, score: int) -> None:
        """Store ``score`` as the best score."""
        try:
            with self._conn:
                self._conn.execute("UPDATE scores SET best_score = ? WHERE id = 1;", (int(score),))
        except sqlite3.Error as exc:
            raise ScoreStoreError(f"failed to update score: {exc}") from exc

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __enter__(self) -> "ScoreStore":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
# tilemerge

This is a sliding-tile puzzle on a 4×4 grid. The arrow keys slide every tile
in one direction. When two tiles with the same number meet, they merge into
one tile that holds their sum. The sum is added to your score. Each move that
changes the board puts a new 2 or 4 tile on a random empty cell.

The window closes when a 2048 tile appears, or when the board is full and no
move can change it. The **New Game** button clears the board, places two new
tiles and sets the score to zero. The best score stays.

The best score is kept in a small SQLite database. Its default name is
`2048.db` in the current directory, and the file is created on the first run.

## Installing

```
pip install .
```

This needs `pygame`.

## Playing

```
tilemerge
```

To use a different score database:

```
tilemerge --db scores.db
```

The game looks for `Roboto-Regular.ttf` and `Roboto-SemiBold.ttf` in the
current directory. If a font file is missing, pygame's default font is used
instead. If the score database cannot be opened or written, the command
prints the error and exits with status 1.

## Using the pieces

`tilemerge.board` holds the game logic. It does not need a window:

```python
import random
from tilemerge.board import Board, Direction

board = Board(random.Random(1))
print(board)                      # rows of comma-separated values
if board.move(Direction.LEFT):
    print("moved, score:", board.score)
print(board.is_won(), board.is_full(), board.can_move())
```

- `Board.from_rows(rows)` builds a board with exactly the given 4×4 tiles and
  adds no tiles of its own.
- `Board.rows` returns the tiles as a tuple of tuples.
- `Board.reset()` starts the board over.
- `tile_color(value)` returns the RGBA colour used for a cell.
- `text_color(value)` returns the RGBA colour used for a cell's number.

`tilemerge.scores.ScoreStore` keeps the best score on disk. It raises
`ScoreStoreError` when the database cannot be read or written:

```python
from tilemerge.scores import ScoreStore

with ScoreStore("2048.db") as store:
    best = store.load_best()
    store.save_best(max(best, 512))
```

`tilemerge.app.GameSession(board, store)` joins a board and an optional
store:

- `step(direction)` plays one move. When the score matches or beats the
  best score, the best score is updated and saved.
- `new_game()` resets the board.
- `is_over()` reports whether the game has ended.

`key_to_direction(key)` maps pygame arrow-key codes to a `Direction`.
`run(db_path)` opens the game window.

## What it does not do

- There is no win or game-over screen. The window simply closes when the game
  ends.
- There is no undo.
- Only one best score is stored, not a list of scores.

## Tests

```
pip install .[test]
pytest
```
# reversi

A small, dependency-free set of building blocks for Reversi (Othello) in
Python 3.10 and later: the 8×8 board with its starting layout, the basic
value types, and the running state of one game.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `reversi.types`: `Cell` (`EMPTY`, `BLACK`, `WHITE`), `Player` (`BLACK`,
  `WHITE`, with `opposite()` and `to_cell()`), `Position` (a frozen
  row/column pair, with `is_valid()` and `Position.checked(row, col)`, which
  returns `None` for coordinates off the board) and `Move` (player,
  position, flipped positions and a UTC timestamp).
- `reversi.board`: `Board`, the 8×8 grid set up with white on (3, 3) and
  (4, 4) and black on (3, 4) and (4, 3). It offers `get_cell` (returns
  `None` off the board), `set_cell` (returns `False` off the board),
  `is_empty`, `count_pieces` (a `(black, white)` tuple), `display` (a text
  rendering using `●`, `○` and `.`), `copy` and the `rows` property.
- `reversi.state`: `GameStatus` (`IN_PROGRESS`, `PAUSED`, `FINISHED`) and
  `GameState`, which holds an id, the board, the player to move, the status,
  the move history and timestamps. Its methods are `switch_player`,
  `add_move`, `pause` (only from in progress), `resume` (only from paused),
  `finish(winner)` (records `winner` and `final_score`), `is_finished`,
  `is_paused`, `score` and `move_count`.

## Example

```python
from reversi.state import GameState
from reversi.types import Move, Player, Position

game = GameState()
print(game.board.display())

target = Position(2, 3)
flipped = [Position(3, 3)]
game.board.set_cell(target, Player.BLACK.to_cell())
for position in flipped:
    game.board.set_cell(position, Player.BLACK.to_cell())
game.add_move(Move(Player.BLACK, target, flipped))
game.switch_player()

print(game.score())        # (4, 1)
print(game.move_count())   # 1

game.finish(Player.BLACK)
print(game.is_finished(), game.winner, game.final_score)
```

## What this package does not do

It does not know the rules of play. Nothing here decides whether a
placement is legal, works out which pieces a placement flips, lists the
moves open to a player, handles passing, or detects the end of a game and
its winner; `Board.set_cell` places whatever it is given, and
`GameState.finish` takes the winner from the caller. There is no computer
opponent, no command-line program, no network server and no storage of
games.
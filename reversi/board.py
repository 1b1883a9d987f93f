"""The 8x8 board and the pieces on it."""

from __future__ import annotations

from collections import Counter

from .types import BOARD_SIZE, Cell, Position

_SYMBOLS = {Cell.EMPTY: ".", Cell.BLACK: "●", Cell.WHITE: "○"}


class Board:
    """An 8x8 board, set up with the four starting pieces."""

    def __init__(self) -> None:
        self._cells = [[Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._cells[3][3] = Cell.WHITE
        self._cells[3][4] = Cell.BLACK
        self._cells[4][3] = Cell.BLACK
        self._cells[4][4] = Cell.WHITE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        black, white = self.count_pieces()
        return f"Board(black={black}, white={white})"

    @property
    def rows(self) -> list[list[Cell]]:
        """A copy of the cells, row by row."""
        return [list(row) for row in self._cells]

    def get_cell(self, position: Position) -> Cell | None:
        """Return the cell at the position, or None if it is off the board."""
        if not position.is_valid():
            return None
        return self._cells[position.row][position.col]

    def set_cell(self, position: Position, cell: Cell) -> bool:
        """Set the cell at the position; return False if it is off the board."""
        if not position.is_valid():
            return False
        self._cells[position.row][position.col] = cell
        return True

    def is_empty(self, position: Position) -> bool:
        """Whether the position is on the board and holds no piece."""
        return self.get_cell(position) is Cell.EMPTY

    def count_pieces(self) -> tuple[int, int]:
        """Return (black, white) piece counts."""
        counts = Counter(cell for row in self._cells for cell in row)
        return counts[Cell.BLACK], counts[Cell.WHITE]

    def display(self) -> str:
        """Render the board as text, one row per line."""
        header = " ".join(str(i) for i in range(BOARD_SIZE))
        lines = [f"  {header}\n"]
        for index, row in enumerate(self._cells):
            body = "".join(f"{_SYMBOLS[cell]} " for cell in row)
            lines.append(f"{index} {body}\n")
        return "".join(lines)

    def copy(self) -> Board:
        """Return an independent copy of the board."""
        clone = Board.__new__(Board)
        clone._cells = [list(row) for row in self._cells]
        return clone
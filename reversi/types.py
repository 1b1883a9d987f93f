"""Basic value types of the game: cells, players, positions and moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

BOARD_SIZE = 8


class Cell(Enum):
    """State of one square of the board."""

    EMPTY = "Empty"
    BLACK = "Black"
    WHITE = "White"


class Player(Enum):
    """A side in the game; black moves first."""

    BLACK = "Black"
    WHITE = "White"

    def opposite(self) -> Player:
        """Return the other player."""
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    def to_cell(self) -> Cell:
        """Return the cell state holding this player's piece."""
        return Cell.BLACK if self is Player.BLACK else Cell.WHITE


@dataclass(frozen=True)
class Position:
    """A square on the board, addressed by row and column."""

    row: int
    col: int

    @classmethod
    def checked(cls, row: int, col: int) -> Position | None:
        """Return the position if it lies on the board, otherwise None."""
        position = cls(row, col)
        return position if position.is_valid() else None

    def is_valid(self) -> bool:
        """Whether the position lies on the 8x8 board."""
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Move:
    """One move: who played where, which pieces flipped, and when."""

    player: Player
    position: Position
    flipped: list[Position] = field(default_factory=list)
    timestamp: datetime = field(default_factory=_now)
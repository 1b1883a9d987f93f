"""Overall state of one game: board, turn, status and move history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from .board import Board
from .types import Move, Player


def _now() -> datetime:
    return datetime.now(timezone.utc)


class GameStatus(Enum):
    """Where a game stands in its life cycle."""

    IN_PROGRESS = "InProgress"
    FINISHED = "Finished"
    PAUSED = "Paused"


@dataclass
class GameState:
    """Everything about one game; black moves first.

    Once the game is finished, ``winner`` holds the winning player (None for
    a draw) and ``final_score`` the (black, white) piece counts at the end.
    """

    id: UUID = field(default_factory=uuid4)
    board: Board = field(default_factory=Board)
    current_player: Player = Player.BLACK
    status: GameStatus = GameStatus.IN_PROGRESS
    move_history: list[Move] = field(default_factory=list)
    winner: Player | None = None
    final_score: tuple[int, int] | None = None
    created_at: datetime = field(default_factory=_now)
    last_updated: datetime = field(default_factory=_now)

    def _touch(self) -> None:
        self.last_updated = _now()

    def is_finished(self) -> bool:
        """Whether the game has ended."""
        return self.status is GameStatus.FINISHED

    def is_paused(self) -> bool:
        """Whether the game is paused."""
        return self.status is GameStatus.PAUSED

    def switch_player(self) -> None:
        """Hand the turn to the other player."""
        self.current_player = self.current_player.opposite()
        self._touch()

    def add_move(self, game_move: Move) -> None:
        """Record a move in the history."""
        self.move_history.append(game_move)
        self._touch()

    def pause(self) -> None:
        """Pause the game; only a game in progress can be paused."""
        if self.status is GameStatus.IN_PROGRESS:
            self.status = GameStatus.PAUSED
            self._touch()

    def resume(self) -> None:
        """Resume a paused game."""
        if self.status is GameStatus.PAUSED:
            self.status = GameStatus.IN_PROGRESS
            self._touch()

    def finish(self, winner: Player | None) -> None:
        """End the game, recording the winner and the final score."""
        self.status = GameStatus.FINISHED
        self.winner = winner
        self.final_score = self.board.count_pieces()
        self._touch()

    def score(self) -> tuple[int, int]:
        """Return the current (black, white) piece counts."""
        return self.board.count_pieces()

    def move_count(self) -> int:
        """Return the number of moves played so far."""
        return len(self.move_history)
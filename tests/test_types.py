from datetime import datetime, timezone

from reversi.types import Cell, Move, Player, Position


def test_player_opposite():
    assert Player.BLACK.opposite() is Player.WHITE
    assert Player.WHITE.opposite() is Player.BLACK


def test_player_to_cell():
    assert Player.BLACK.to_cell() is Cell.BLACK
    assert Player.WHITE.to_cell() is Cell.WHITE


def test_position_new_valid():
    pos = Position.checked(3, 4)
    assert pos == Position(3, 4)


def test_position_new_invalid():
    assert Position.checked(8, 4) is None
    assert Position.checked(3, 8) is None
    assert Position.checked(10, 10) is None
    assert Position.checked(-1, 0) is None


def test_position_is_valid():
    assert Position(0, 0).is_valid()
    assert Position(7, 7).is_valid()
    assert not Position(8, 0).is_valid()
    assert not Position(0, 8).is_valid()


def test_position_hashable():
    assert len({Position(1, 2), Position(1, 2), Position(2, 1)}) == 2


def test_move_creation():
    pos = Position(3, 4)
    flipped = [Position(3, 3)]
    before = datetime.now(timezone.utc)
    move = Move(Player.BLACK, pos, flipped)
    after = datetime.now(timezone.utc)

    assert move.player is Player.BLACK
    assert move.position == pos
    assert move.flipped == flipped
    assert before <= move.timestamp <= after
from reversi.board import Board
from reversi.types import Cell, Position


def test_board_new_initial_state():
    board = Board()
    assert board.get_cell(Position(3, 3)) is Cell.WHITE
    assert board.get_cell(Position(3, 4)) is Cell.BLACK
    assert board.get_cell(Position(4, 3)) is Cell.BLACK
    assert board.get_cell(Position(4, 4)) is Cell.WHITE
    assert board.get_cell(Position(0, 0)) is Cell.EMPTY
    assert board.get_cell(Position(7, 7)) is Cell.EMPTY


def test_board_get_cell_invalid_position():
    board = Board()
    assert board.get_cell(Position(8, 0)) is None
    assert board.get_cell(Position(0, 8)) is None


def test_board_set_cell():
    board = Board()
    pos = Position(0, 0)
    assert board.set_cell(pos, Cell.BLACK) is True
    assert board.get_cell(pos) is Cell.BLACK


def test_board_set_cell_invalid_position():
    board = Board()
    assert board.set_cell(Position(8, 0), Cell.BLACK) is False
    assert board == Board()


def test_board_is_empty():
    board = Board()
    assert board.is_empty(Position(0, 0))
    assert not board.is_empty(Position(3, 3))
    assert not board.is_empty(Position(8, 8))


def test_board_count_pieces_initial():
    assert Board().count_pieces() == (2, 2)


def test_board_count_pieces_after_set():
    board = Board()
    board.set_cell(Position(0, 0), Cell.BLACK)
    board.set_cell(Position(3, 3), Cell.BLACK)
    assert board.count_pieces() == (4, 1)


def test_board_display():
    display = Board().display()
    assert "0 1 2 3 4 5 6 7" in display
    assert "●" in display
    assert "○" in display
    assert "." in display
    assert len(display.splitlines()) == 9


def test_board_copy_is_independent():
    board = Board()
    clone = board.copy()
    assert clone == board
    clone.set_cell(Position(0, 0), Cell.WHITE)
    assert board.get_cell(Position(0, 0)) is Cell.EMPTY
    assert clone != board


def test_rows_is_a_copy():
    board = Board()
    rows = board.rows
    assert len(rows) == 8
    assert all(len(row) == 8 for row in rows)
    rows[0][0] = Cell.BLACK
    assert board.get_cell(Position(0, 0)) is Cell.EMPTY
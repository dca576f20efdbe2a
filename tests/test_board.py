import pytest

from src.lib.s0_coordinates import Coord
from src.lib.s3_storage import Board, FLAGGED_MINE, Tile, TileKind, UNREVEALED
from src.lib.s7_debug import format_board


def test_new_board_is_unrevealed():
    board = Board(9, 9)
    assert board.count(TileKind.UNREVEALED) == 81
    assert len(board.unrevealed()) == 81
    assert not board.is_solved


@pytest.mark.parametrize("rows,cols", [(0, 9), (9, 0), (-1, 3)])
def test_invalid_dimensions(rows, cols):
    with pytest.raises(ValueError):
        Board(rows, cols)


def test_out_of_range_access():
    board = Board(9, 9)
    with pytest.raises(ValueError):
        board.get(Coord(9, 0))
    with pytest.raises(ValueError):
        board.neighbors(Coord(-1, 0))


def test_neighbor_counts_by_position():
    board = Board(16, 30)
    assert len(board.neighbors(Coord(0, 0))) == 3
    assert len(board.neighbors(Coord(15, 29))) == 3
    assert len(board.neighbors(Coord(0, 10))) == 5
    assert len(board.neighbors(Coord(8, 10))) == 8


def test_neighbors_stay_in_range_without_duplicates():
    board = Board(9, 9)
    for coord in board.positions():
        neighbors = board.neighbors(coord)
        assert len(neighbors) == len(set(neighbors))
        assert coord not in neighbors
        assert all(board.in_bounds(n) for n in neighbors)


def test_neighbors_filter_by_kind():
    board = Board.from_rows(["1 M", "E 2"])
    center = Coord(0, 0)
    assert board.neighbors(center, {TileKind.FLAGGED_MINE}) == [Coord(0, 1)]
    assert board.neighbors(center, {TileKind.UNREVEALED}) == [Coord(1, 0)]
    assert board.neighbors(center, {TileKind.NUMBER}) == [Coord(1, 1)]


def test_number_is_set_once():
    board = Board(2, 2)
    assert board.set_number(Coord(0, 0), 3)
    assert not board.set_number(Coord(0, 0), 3)
    with pytest.raises(ValueError):
        board.set_number(Coord(0, 0), 2)


def test_flag_is_terminal():
    board = Board(2, 2)
    assert board.flag(Coord(0, 1))
    assert not board.flag(Coord(0, 1))
    assert board.get(Coord(0, 1)) == FLAGGED_MINE
    with pytest.raises(ValueError):
        board.set_number(Coord(0, 1), 1)

    board.set_number(Coord(1, 1), 1)
    with pytest.raises(ValueError):
        board.flag(Coord(1, 1))


def test_tile_values_are_bounded():
    with pytest.raises(ValueError):
        Tile.number(9)
    with pytest.raises(ValueError):
        Tile(TileKind.UNREVEALED, 1)
    assert Tile.from_char("E") == UNREVEALED


def test_text_form_round_trip_and_printing():
    rows = ["0 1 E", "1 M 2"]
    board = Board.from_rows(rows)

    assert board.to_rows() == rows
    assert board.copy() == board
    assert format_board(board, "Grille :") == "Grille :\n0 1 E\n1 M 2"


def test_from_rows_rejects_ragged_input():
    with pytest.raises(ValueError):
        Board.from_rows(["0 1", "1"])
    with pytest.raises(ValueError):
        Board.from_rows(["0 X"])

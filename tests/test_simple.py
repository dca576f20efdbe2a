import pytest

from src.lib.s0_coordinates import Coord
from src.lib.s3_storage import Board, Tile
from src.lib.s4_solver import ActionKind, BoardEffects, Deduction, Strategy, apply_simple, apply_targets, deduce


class RecordingEffects(BoardEffects):
    def __init__(self):
        self.calls = []

    def reveal(self, board, coord):
        self.calls.append(("reveal", coord))

    def flag(self, board, coord):
        self.calls.append(("flag", coord))


def test_flags_when_candidates_match_the_number():
    board = Board.from_rows(["1 1", "E 1"])
    effects = RecordingEffects()

    result = apply_simple(board, Coord(0, 0), effects)

    assert result.changed
    assert result.deductions == [Deduction(Coord(1, 0), ActionKind.FLAG)]
    assert board.get(Coord(1, 0)).is_flagged
    assert effects.calls == [("flag", Coord(1, 0))]


def test_reveals_when_all_mines_are_flagged():
    board = Board.from_rows(["1 M", "E E"])
    effects = RecordingEffects()

    result = apply_simple(board, Coord(0, 0), effects)

    assert result.reveal_count == 2
    assert effects.calls == [("reveal", Coord(1, 0)), ("reveal", Coord(1, 1))]
    # Une révélation ne modifie pas la grille : seule la relecture écrit les nombres
    assert board.get(Coord(1, 0)).is_unrevealed


def test_no_change_when_counts_do_not_resolve():
    board = Board.from_rows(["2 E", "E E"])
    result = apply_simple(board, Coord(0, 0), RecordingEffects())

    assert not result.changed
    assert not result
    assert board.to_rows() == ["2 E", "E E"]


def test_resolved_tile_reports_no_change():
    board = Board.from_rows(["1 M", "1 1"])
    assert not apply_simple(board, Coord(0, 0), BoardEffects()).changed


def test_blank_tile_reveals_its_neighbors():
    board = Board.from_rows(["0 E", "E E"])
    result = deduce(board, Coord(0, 0), Strategy.SIMPLE)
    assert result.strategy == Strategy.SIMPLE
    assert result.reveal_count == 3


def test_simple_requires_a_number():
    board = Board.from_rows(["E M"])
    with pytest.raises(ValueError):
        apply_simple(board, Coord(0, 0), BoardEffects())
    with pytest.raises(ValueError):
        apply_simple(board, Coord(0, 1), BoardEffects())


def test_targets_opened_by_a_cascade_are_skipped():
    class CascadeEffects(BoardEffects):
        def reveal(self, board, coord):
            # Ouvrir (1, 0) ouvre aussi (1, 1)
            board.set_number(coord, 0)
            board.set_number(Coord(1, 1), 1)

    board = Board.from_rows(["1 M", "E E"])
    applied = apply_targets(board, [Coord(1, 1), Coord(1, 0)], ActionKind.REVEAL, CascadeEffects())

    assert applied == [Deduction(Coord(1, 0), ActionKind.REVEAL)]
    assert board.get(Coord(1, 1)) == Tile.number(1)

import pytest

from src.lib.s0_coordinates import Coord
from src.lib.s3_storage import Board
from src.lib.s4_solver import (
    ActionKind,
    BoardEffects,
    DeductionEngine,
    PivotRule,
    Strategy,
    apply_pivot,
    apply_simple,
    match_pivot_rule,
)
from src.lib.s4_solver.pivot import Constraint

A, B, C = Coord(5, 0), Coord(5, 1), Coord(5, 2)


def test_one_two_one_needs_pivot():
    board = Board.from_rows(["1 2 1", "E E E"])
    for coord in board.positions():
        if board.get(coord).is_number:
            assert not apply_simple(board, coord, BoardEffects()).changed

    result = apply_pivot(board, Coord(0, 0), BoardEffects())

    assert result.changed
    assert result.strategy == Strategy.PIVOT
    assert result.pivot == Coord(0, 1)
    assert result.rule == PivotRule.PIVOT_EXCESS_MINES
    assert [d.coord for d in result.deductions] == [Coord(1, 2)]
    assert board.to_rows() == ["1 2 1", "E E M"]


def test_pivot_is_idempotent_once_applied():
    board = Board.from_rows(["1 2 1", "E E E"])
    engine = DeductionEngine()
    assert engine.pivot(board, Coord(0, 0)).changed
    assert not engine.pivot(board, Coord(0, 0)).changed
    assert board.to_rows() == ["1 2 1", "E E M"]


def test_followup_simple_pass_finishes_the_pattern():
    board = Board.from_rows(["1 2 1", "E E E"])
    engine = DeductionEngine()
    engine.apply(Strategy.PIVOT, board, Coord(0, 0))

    result = engine.apply(Strategy.SIMPLE, board, Coord(0, 2))

    assert [(d.coord, d.action) for d in result.deductions] == [(Coord(1, 1), ActionKind.REVEAL)]


def test_no_numbered_neighbor_means_no_pivot():
    board = Board.from_rows(["E E E", "E 1 E", "E E E"])
    result = apply_pivot(board, Coord(1, 1), BoardEffects())
    assert not result.changed
    assert result.pivot is None


def test_pivot_requires_a_number():
    board = Board.from_rows(["E 1"])
    with pytest.raises(ValueError):
        apply_pivot(board, Coord(0, 0), BoardEffects())


def test_origin_subset_makes_pivot_exclusive_safe():
    origin = Constraint(results={A, B}, bomb_counter=0, expected=1)
    pivot = Constraint(results={A, B, C}, bomb_counter=0, expected=1)
    assert match_pivot_rule(origin, pivot) == (PivotRule.ORIGIN_SUBSET_SAFE, {C})


def test_pivot_subset_makes_origin_exclusive_safe():
    origin = Constraint(results={A, B, C}, bomb_counter=0, expected=1)
    pivot = Constraint(results={A, B}, bomb_counter=0, expected=1)
    assert match_pivot_rule(origin, pivot) == (PivotRule.PIVOT_SUBSET_SAFE, {C})


def test_origin_excess_mines_are_flagged():
    origin = Constraint(results={A, B, C}, bomb_counter=0, expected=2)
    pivot = Constraint(results={A, B}, bomb_counter=0, expected=1)
    assert match_pivot_rule(origin, pivot) == (PivotRule.ORIGIN_EXCESS_MINES, {C})


def test_unrelated_constraints_do_not_match():
    origin = Constraint(results={A, B}, bomb_counter=0, expected=1)
    pivot = Constraint(results={B, C}, bomb_counter=0, expected=1)
    assert match_pivot_rule(origin, pivot) == (None, set())


def test_directions_are_tried_left_first():
    # Les deux pivots (gauche et droite) donnent une déduction : la gauche gagne
    board = Board.from_rows(["1 2 1", "E E E"])
    result = apply_pivot(board, Coord(0, 1), BoardEffects())
    assert result.pivot == Coord(0, 0)
    assert result.rule == PivotRule.ORIGIN_EXCESS_MINES
    assert [d.coord for d in result.deductions] == [Coord(1, 2)]

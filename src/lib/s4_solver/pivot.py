"""Règle PIVOT : comparaison des contraintes de deux cases nombres adjacentes.

Quand le comptage simple ne donne plus rien, on compare la case d'origine T
avec une case nombre voisine orthogonale P (le pivot). Chaque case contraint
ses voisins non révélés : T en attend `expected` mines, P en attend
`pivot_expected`. La zone partagée ne peut pas contenir plus de mines que la
plus petite des deux attentes, ce qui force parfois les zones exclusives.

Exemple (origine = le 1 central, pivot = le 2 à sa droite) :

    0 0 0 0
    2 1 2 1
    E E E E

Le pivot attend une mine de plus que l'origine, et n'a qu'une case exclusive
(ligne 3, colonne 4) : elle est forcément minée.
"""

from dataclasses import dataclass
from typing import Optional, Set, Tuple

from src.lib.s0_coordinates.types import Coord
from src.lib.s3_storage.board import Board
from src.lib.s3_storage.types import TileKind
from .effects import BoardEffects, apply_targets
from .types import ActionKind, DeductionResult, PivotRule, Strategy

# Directions de pivot, dans l'ordre d'essai
PIVOT_DIRECTIONS: Tuple[Tuple[str, int, int], ...] = (
    ("left", 0, -1),
    ("right", 0, 1),
    ("up", -1, 0),
    ("down", 1, 0),
)


@dataclass
class Constraint:
    """Inconnues d'une case nombre et nombre de mines encore attendues."""
    results: Set[Coord]
    bomb_counter: int
    expected: int


def read_constraint(board: Board, coord: Coord) -> Constraint:
    tile = board.get(coord)
    results = set(board.neighbors(coord, {TileKind.UNREVEALED}))
    bomb_counter = len(board.neighbors(coord, {TileKind.FLAGGED_MINE}))
    return Constraint(results=results, bomb_counter=bomb_counter, expected=tile.value - bomb_counter)


def match_pivot_rule(origin: Constraint, pivot: Constraint) -> Tuple[Optional[PivotRule], Set[Coord]]:
    """
    Retourne la première règle applicable et ses cibles, ou (None, ∅).
    Les règles de marquage désignent des mines, les autres des cases sûres.
    """
    expected = origin.expected
    pivot_expected = pivot.expected
    intersection = origin.results & pivot.results
    not_intersection = (origin.results | pivot.results) - intersection
    pivot_not_intersection = pivot.results - intersection

    if pivot_expected > expected and pivot_expected - expected == len(pivot_not_intersection) > 0:
        return PivotRule.PIVOT_EXCESS_MINES, pivot_not_intersection
    if pivot_expected == expected:
        if pivot.results == intersection and not_intersection:
            return PivotRule.PIVOT_SUBSET_SAFE, not_intersection
        if origin.results == intersection and pivot_not_intersection:
            return PivotRule.ORIGIN_SUBSET_SAFE, pivot_not_intersection
        if not not_intersection and pivot_not_intersection:
            return PivotRule.NO_EXCLUSIVE_SAFE, pivot_not_intersection
    if expected - pivot_expected == len(not_intersection) > 0:
        return PivotRule.ORIGIN_EXCESS_MINES, not_intersection
    return None, set()


RULE_ACTIONS = {
    PivotRule.PIVOT_EXCESS_MINES: ActionKind.FLAG,
    PivotRule.PIVOT_SUBSET_SAFE: ActionKind.REVEAL,
    PivotRule.ORIGIN_SUBSET_SAFE: ActionKind.REVEAL,
    PivotRule.NO_EXCLUSIVE_SAFE: ActionKind.REVEAL,
    PivotRule.ORIGIN_EXCESS_MINES: ActionKind.FLAG,
}


def apply_pivot(board: Board, coord: Coord, effects: BoardEffects) -> DeductionResult:
    """
    Essaie les quatre pivots orthogonaux (gauche, droite, haut, bas).
    S'arrête au premier pivot qui produit une déduction.
    """
    tile = board.get(coord)
    if not tile.is_number:
        raise ValueError(f"PIVOT attend une case nombre en {coord.to_tuple()}, trouvé {tile.kind.value}")

    result = DeductionResult(coord=coord, strategy=Strategy.PIVOT)
    origin = read_constraint(board, coord)

    for _name, d_row, d_col in PIVOT_DIRECTIONS:
        pivot_coord = coord.offset(d_row, d_col)
        if not board.in_bounds(pivot_coord) or not board.get(pivot_coord).is_number:
            continue

        rule, targets = match_pivot_rule(origin, read_constraint(board, pivot_coord))
        if rule is None:
            continue

        deductions = apply_targets(board, targets, RULE_ACTIONS[rule], effects)
        if deductions:
            result.deductions = deductions
            result.pivot = pivot_coord
            result.rule = rule
            return result

    return result

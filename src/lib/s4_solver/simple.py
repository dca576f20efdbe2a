"""Règle SIMPLE : comptage des voisins d'une seule case nombre."""

from src.lib.s0_coordinates.types import Coord
from src.lib.s3_storage.board import Board
from src.lib.s3_storage.types import TileKind
from .effects import BoardEffects, apply_targets
from .types import ActionKind, DeductionResult, Strategy


def apply_simple(board: Board, coord: Coord, effects: BoardEffects) -> DeductionResult:
    """
    Pour une case Number(n) :
    - n mines déjà marquées autour → tous les voisins non révélés sont sûrs ;
    - mines marquées + non révélés == n → tous les non révélés sont des mines ;
    - sinon aucune déduction.
    """
    tile = board.get(coord)
    if not tile.is_number:
        raise ValueError(f"SIMPLE attend une case nombre en {coord.to_tuple()}, trouvé {tile.kind.value}")

    result = DeductionResult(coord=coord, strategy=Strategy.SIMPLE)
    flagged = board.neighbors(coord, {TileKind.FLAGGED_MINE})
    candidates = board.neighbors(coord, {TileKind.UNREVEALED})

    if len(flagged) == tile.value:
        result.deductions = apply_targets(board, candidates, ActionKind.REVEAL, effects)
    elif len(flagged) + len(candidates) == tile.value:
        result.deductions = apply_targets(board, candidates, ActionKind.FLAG, effects)

    return result

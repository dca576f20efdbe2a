"""Moteur de déduction : point d'entrée des stratégies SIMPLE et PIVOT."""

from typing import Optional

from src.lib.s0_coordinates.types import Coord
from src.lib.s3_storage.board import Board
from .effects import BoardEffects
from .pivot import apply_pivot
from .simple import apply_simple
from .types import DeductionResult, Strategy


class DeductionEngine:
    """Applique une stratégie à une case nombre. Ne lit jamais de pixels."""

    def __init__(self, effects: Optional[BoardEffects] = None):
        self.effects = effects or BoardEffects()

    def simple(self, board: Board, coord: Coord) -> DeductionResult:
        return apply_simple(board, coord, self.effects)

    def pivot(self, board: Board, coord: Coord) -> DeductionResult:
        return apply_pivot(board, coord, self.effects)

    def apply(self, strategy: Strategy, board: Board, coord: Coord) -> DeductionResult:
        if strategy == Strategy.PIVOT:
            return self.pivot(board, coord)
        return self.simple(board, coord)


# === API fonctionnelle ===

def deduce(board: Board, coord: Coord, strategy: Strategy = Strategy.SIMPLE,
           effects: Optional[BoardEffects] = None) -> DeductionResult:
    """Applique une stratégie (API simplifiée)."""
    return DeductionEngine(effects).apply(strategy, board, coord)

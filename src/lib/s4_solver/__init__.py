"""Module s4_solver : Déductions logiques (SIMPLE + PIVOT).

API publique :
    DeductionEngine(effects).apply(strategy, board, coord) → DeductionResult
"""

from .types import ActionKind, Strategy, PivotRule, Deduction, DeductionResult
from .effects import BoardEffects, apply_targets
from .simple import apply_simple
from .pivot import apply_pivot, match_pivot_rule, read_constraint, PIVOT_DIRECTIONS
from .engine import DeductionEngine, deduce

__all__ = [
    # Types
    "ActionKind",
    "Strategy",
    "PivotRule",
    "Deduction",
    "DeductionResult",
    # Effets
    "BoardEffects",
    "apply_targets",
    # Stratégies
    "apply_simple",
    "apply_pivot",
    "match_pivot_rule",
    "read_constraint",
    "PIVOT_DIRECTIONS",
    # Moteur
    "DeductionEngine",
    "deduce",
]

"""Types pour le module s4_solver."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from src.lib.s0_coordinates.types import Coord


class ActionKind(Enum):
    """Type d'action sur une case."""
    REVEAL = auto()
    FLAG = auto()


class Strategy(Enum):
    """Stratégie de déduction."""
    SIMPLE = auto()
    PIVOT = auto()


class PivotRule(Enum):
    """Règle PIVOT ayant produit une déduction."""
    PIVOT_EXCESS_MINES = auto()     # Le pivot attend plus de mines : son exclusif est miné
    PIVOT_SUBSET_SAFE = auto()      # Inconnues du pivot ⊆ partage : l'exclusif d'origine est sûr
    ORIGIN_SUBSET_SAFE = auto()     # Inconnues d'origine ⊆ partage : l'exclusif du pivot est sûr
    NO_EXCLUSIVE_SAFE = auto()      # Rien hors du partage côté origine : l'exclusif du pivot est sûr
    ORIGIN_EXCESS_MINES = auto()    # L'origine attend plus de mines : son exclusif est miné


@dataclass(frozen=True)
class Deduction:
    """Action déduite et appliquée sur une case."""
    coord: Coord
    action: ActionKind

    def to_tuple(self):
        return (self.coord.row, self.coord.col, self.action.name)


@dataclass
class DeductionResult:
    """Résultat d'un appel de stratégie sur une case nombre."""
    coord: Coord
    strategy: Strategy
    deductions: List[Deduction] = field(default_factory=list)
    pivot: Optional[Coord] = None
    rule: Optional[PivotRule] = None

    @property
    def changed(self) -> bool:
        return len(self.deductions) > 0

    @property
    def reveal_count(self) -> int:
        return sum(1 for d in self.deductions if d.action == ActionKind.REVEAL)

    @property
    def flag_count(self) -> int:
        return sum(1 for d in self.deductions if d.action == ActionKind.FLAG)

    def __bool__(self) -> bool:
        return self.changed

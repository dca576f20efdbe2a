"""Types pour le module s6_executor."""

from dataclasses import dataclass

from src.lib.s0_coordinates.types import Coord
from src.lib.s4_solver.types import ActionKind


@dataclass
class ActionRecord:
    """Trace d'une action exécutée."""
    coord: Coord
    action: ActionKind
    revealed: int = 0  # Cases passées à l'état nombre lors de la relecture
    duration: float = 0.0

    def to_dict(self) -> dict:
        return {
            "coord": self.coord.to_tuple(),
            "action": self.action.name,
            "revealed": self.revealed,
            "duration": self.duration,
        }

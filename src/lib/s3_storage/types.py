"""Types et énumérations pour le modèle de grille."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TileKind(str, Enum):
    """État logique d'une case."""
    UNREVEALED = "UNREVEALED"
    FLAGGED_MINE = "FLAGGED_MINE"
    NUMBER = "NUMBER"


# Représentation texte (affichage console, fixtures de tests)
KIND_TO_CHAR = {
    TileKind.UNREVEALED: "E",
    TileKind.FLAGGED_MINE: "M",
}


@dataclass(frozen=True)
class Tile:
    """Case de la grille : non révélée, mine marquée, ou nombre révélé (0-8)."""
    kind: TileKind
    value: Optional[int] = None

    def __post_init__(self):
        if self.kind == TileKind.NUMBER:
            if self.value is None or not 0 <= self.value <= 8:
                raise ValueError(f"Valeur de case invalide: {self.value}")
        elif self.value is not None:
            raise ValueError(f"Une case {self.kind.value} ne porte pas de valeur")

    @classmethod
    def number(cls, value: int) -> "Tile":
        return cls(TileKind.NUMBER, int(value))

    @property
    def is_unrevealed(self) -> bool:
        return self.kind == TileKind.UNREVEALED

    @property
    def is_flagged(self) -> bool:
        return self.kind == TileKind.FLAGGED_MINE

    @property
    def is_number(self) -> bool:
        return self.kind == TileKind.NUMBER

    def to_char(self) -> str:
        if self.kind == TileKind.NUMBER:
            return str(self.value)
        return KIND_TO_CHAR[self.kind]

    @classmethod
    def from_char(cls, char: str) -> "Tile":
        if char == "E":
            return UNREVEALED
        if char == "M":
            return FLAGGED_MINE
        if char.isdigit():
            return cls.number(int(char))
        raise ValueError(f"Caractère de case inconnu: {char!r}")


UNREVEALED = Tile(TileKind.UNREVEALED)
FLAGGED_MINE = Tile(TileKind.FLAGGED_MINE)

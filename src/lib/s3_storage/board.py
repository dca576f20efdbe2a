"""Grille de jeu : modèle possédé par la boucle de résolution."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Set, Tuple

from src.lib.s0_coordinates.types import Coord
from .types import Tile, TileKind, UNREVEALED, FLAGGED_MINE

# Offsets des 8 voisins (ligne, colonne)
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)

DEFAULT_NEIGHBOR_KINDS = frozenset({TileKind.UNREVEALED, TileKind.FLAGGED_MINE})


class Board:
    """Grille rectangulaire de cases, dimensions fixées à la construction."""

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Dimensions de grille invalides: {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._tiles: List[List[Tile]] = [[UNREVEALED for _ in range(cols)] for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Construit une grille depuis sa forme texte ("E", "M", chiffres ; espaces ignorés)."""
        cleaned = [line.replace(" ", "") for line in rows if line.strip()]
        if not cleaned:
            raise ValueError("Grille vide")
        width = len(cleaned[0])
        if any(len(line) != width for line in cleaned):
            raise ValueError("Lignes de longueurs différentes")
        board = cls(len(cleaned), width)
        for r, line in enumerate(cleaned):
            for c, char in enumerate(line):
                board._tiles[r][c] = Tile.from_char(char)
        return board

    # === Accès ===

    def in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord.row < self.rows and 0 <= coord.col < self.cols

    def _require(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise ValueError(f"Position {coord.to_tuple()} hors de la grille {self.rows}x{self.cols}")

    def get(self, coord: Coord) -> Tile:
        self._require(coord)
        return self._tiles[coord.row][coord.col]

    def __getitem__(self, coord: Coord) -> Tile:
        return self.get(coord)

    def positions(self) -> Iterator[Coord]:
        """Toutes les positions, en ordre ligne par ligne."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield Coord(r, c)

    # === Mutations ===

    def set_number(self, coord: Coord, value: int) -> bool:
        """
        Écrit un nombre révélé.
        Un nombre déjà connu ne change jamais ; une mine marquée n'est jamais révélée.
        Retourne True si la case a changé.
        """
        current = self.get(coord)
        tile = Tile.number(value)
        if current == tile:
            return False
        if current.is_number:
            raise ValueError(
                f"La case {coord.to_tuple()} vaut déjà {current.value}, impossible d'écrire {value}"
            )
        if current.is_flagged:
            raise ValueError(f"La case {coord.to_tuple()} est marquée comme mine")
        self._tiles[coord.row][coord.col] = tile
        return True

    def flag(self, coord: Coord) -> bool:
        """Marque une mine (état terminal). Retourne True si la case a changé."""
        current = self.get(coord)
        if current.is_flagged:
            return False
        if current.is_number:
            raise ValueError(f"Impossible de marquer la case révélée {coord.to_tuple()}")
        self._tiles[coord.row][coord.col] = FLAGGED_MINE
        return True

    # === Voisinage ===

    def neighbors(
        self,
        coord: Coord,
        kinds: Iterable[TileKind] = DEFAULT_NEIGHBOR_KINDS,
    ) -> List[Coord]:
        """
        Voisins (8-connexité) dont l'état appartient à `kinds`.
        Les bords ne sont pas repliés : une case de bord ou de coin n'examine
        que les voisins qui existent dans la grille.
        """
        self._require(coord)
        wanted = set(kinds)
        result = []
        for dr, dc in NEIGHBOR_OFFSETS:
            n = coord.offset(dr, dc)
            if self.in_bounds(n) and self._tiles[n.row][n.col].kind in wanted:
                result.append(n)
        return result

    # === Statistiques ===

    def count(self, kind: TileKind) -> int:
        return sum(1 for row in self._tiles for tile in row if tile.kind == kind)

    def unrevealed(self) -> Set[Coord]:
        return {c for c in self.positions() if self.get(c).is_unrevealed}

    @property
    def is_solved(self) -> bool:
        """Plus aucune case non révélée."""
        return self.count(TileKind.UNREVEALED) == 0

    def copy(self) -> "Board":
        clone = Board(self.rows, self.cols)
        clone._tiles = [list(row) for row in self._tiles]
        return clone

    def to_rows(self) -> List[str]:
        return [" ".join(tile.to_char() for tile in row) for row in self._tiles]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._tiles == other._tiles

    def __repr__(self) -> str:
        return f"Board({self.rows}x{self.cols}, unrevealed={self.count(TileKind.UNREVEALED)})"

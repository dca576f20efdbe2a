"""Types pour le module s0_coordinates."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Coord:
    """Coordonnées de grille (row, col)."""
    row: int
    col: int

    def __iter__(self):
        return iter((self.row, self.col))

    def offset(self, d_row: int, d_col: int) -> "Coord":
        return Coord(self.row + d_row, self.col + d_col)

    def to_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)


@dataclass
class ScreenPoint:
    """Point en coordonnées écran (pixels absolus)."""
    x: float
    y: float

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class CellBounds:
    """Rectangle en pixels d'une case, avec sa ligne d'échantillonnage."""
    left: int
    top: int
    width: int
    height: int
    scan_y: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def to_tuple(self) -> Tuple[int, int, int, int]:
        return (self.left, self.top, self.width, self.height)


@dataclass(frozen=True)
class GridGeometry:
    """Géométrie fixe d'une grille à l'écran (une par difficulté)."""
    rows: int
    cols: int
    tile_size: int
    origin: Tuple[int, int]  # (x, y) du coin supérieur gauche de la case (0, 0)
    sample_row: int = 12
    sample_drift: float = 0.0
    click_drift: float = 0.0

    def __post_init__(self):
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Dimensions de grille invalides: {self.rows}x{self.cols}")
        if self.tile_size <= 0:
            raise ValueError(f"Taille de case invalide: {self.tile_size}")
        if not 0 <= self.sample_row < self.tile_size:
            raise ValueError(
                f"Ligne d'échantillonnage {self.sample_row} hors de la case ({self.tile_size}px)"
            )

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def contains(self, coord: Coord) -> bool:
        return 0 <= coord.row < self.rows and 0 <= coord.col < self.cols

"""Conversion de coordonnées grille ↔ écran."""

from typing import Optional, Tuple

from .types import Coord, ScreenPoint, CellBounds, GridGeometry


class CoordinateConverter:
    """Convertisseur de coordonnées grille/écran pour une géométrie donnée."""

    def __init__(self, geometry: GridGeometry):
        self.geometry = geometry
        self.center_offset = geometry.tile_size // 2

    def _require(self, coord: Coord) -> None:
        if not self.geometry.contains(coord):
            raise ValueError(
                f"Position {coord.to_tuple()} hors de la grille {self.geometry.rows}x{self.geometry.cols}"
            )

    # === Conversions Grid → Screen ===

    def cell_bounds(self, coord: Coord) -> CellBounds:
        """Rectangle d'échantillonnage d'une case (dérive de colonne incluse)."""
        self._require(coord)
        geo = self.geometry
        left = geo.origin[0] + coord.col * geo.tile_size + int(coord.col * geo.sample_drift)
        top = geo.origin[1] + coord.row * geo.tile_size
        return CellBounds(
            left=left,
            top=top,
            width=geo.tile_size,
            height=geo.tile_size,
            scan_y=top + geo.sample_row,
        )

    def grid_to_screen(self, coord: Coord) -> ScreenPoint:
        """Centre cliquable d'une case."""
        self._require(coord)
        geo = self.geometry
        x = geo.origin[0] + coord.col * geo.tile_size + self.center_offset
        y = geo.origin[1] + coord.row * geo.tile_size + self.center_offset
        return ScreenPoint(x=x + int(coord.col * geo.click_drift), y=y)

    # === Conversions Screen → Grid ===

    def screen_to_grid(self, x: float, y: float) -> Optional[Coord]:
        """Case contenant un point écran, ou None hors de la grille."""
        geo = self.geometry
        col = int((x - geo.origin[0]) // geo.tile_size)
        row = int((y - geo.origin[1]) // geo.tile_size)
        coord = Coord(row, col)
        return coord if geo.contains(coord) else None

    def grid_extent(self) -> Tuple[int, int, int, int]:
        """Boîte (left, top, right, bottom) couverte par l'échantillonnage de la grille."""
        geo = self.geometry
        last = self.cell_bounds(Coord(geo.rows - 1, geo.cols - 1))
        return (geo.origin[0], geo.origin[1], last.right, last.bottom)

"""Module s0_coordinates : Conversion coordonnées grille ↔ écran."""

from .types import Coord, ScreenPoint, CellBounds, GridGeometry
from .converter import CoordinateConverter

__all__ = [
    # Types
    "Coord",
    "ScreenPoint",
    "CellBounds",
    "GridGeometry",
    # Converter
    "CoordinateConverter",
]

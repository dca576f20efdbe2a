"""Module s3_storage : Modèle de grille (cases et voisinage)."""

from .types import Tile, TileKind, UNREVEALED, FLAGGED_MINE
from .board import Board, NEIGHBOR_OFFSETS

__all__ = [
    # Types
    "Tile",
    "TileKind",
    "UNREVEALED",
    "FLAGGED_MINE",
    # Grille
    "Board",
    "NEIGHBOR_OFFSETS",
]

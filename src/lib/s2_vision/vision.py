"""Construction et rafraîchissement de la grille depuis une capture."""

import time
from typing import Optional

import numpy as np

from src.lib.s0_coordinates.converter import CoordinateConverter
from src.lib.s0_coordinates.types import Coord, GridGeometry
from src.lib.s1_capture.types import Snapshot
from src.lib.s3_storage.board import Board
from .sampler import TileSampler
from .types import RefreshResult


class BoardSnapshotBuilder:
    """Applique l'échantillonneur à chaque case de la grille."""

    def __init__(self, geometry: GridGeometry, sampler: Optional[TileSampler] = None):
        self.geometry = geometry
        self.converter = CoordinateConverter(geometry)
        self.sampler = sampler or TileSampler()

    def check_fits(self, snapshot: Snapshot) -> None:
        """Vérifie que la grille configurée tient entièrement dans la capture."""
        left, top, right, _ = self.converter.grid_extent()
        last = Coord(self.geometry.rows - 1, self.geometry.cols - 1)
        last_scan = self.converter.cell_bounds(last).scan_y
        if left < 0 or top < 0 or right > snapshot.width or last_scan >= snapshot.height:
            raise ValueError(
                f"La grille {self.geometry.rows}x{self.geometry.cols} (pixels {left},{top} → {right},{last_scan}) "
                f"dépasse la capture {snapshot.width}x{snapshot.height}"
            )

    def build(self, snapshot: Snapshot) -> Board:
        """Crée une grille neuve et lit toutes ses cases."""
        board = Board(self.geometry.rows, self.geometry.cols)
        self.refresh(board, snapshot)
        return board

    def refresh(self, board: Board, snapshot: Snapshot, keep_samples: bool = False) -> RefreshResult:
        """
        Relit les cases encore non révélées et écrit le résultat en place.
        Les nombres et les mines marquées ne changent jamais : ils ne sont pas relus.
        """
        if (board.rows, board.cols) != self.geometry.shape:
            raise ValueError(
                f"Grille {board.rows}x{board.cols} incompatible avec la géométrie "
                f"{self.geometry.rows}x{self.geometry.cols}"
            )
        self.check_fits(snapshot)

        start = time.time()
        pixels: np.ndarray = snapshot.pixels
        result = RefreshResult(sampled=0)

        for coord in board.positions():
            if not board.get(coord).is_unrevealed:
                continue
            sample = self.sampler.inspect(pixels, self.converter.cell_bounds(coord), coord)
            result.sampled += 1
            if keep_samples:
                result.samples.append(sample)
            if sample.tile.is_number and board.set_number(coord, sample.tile.value):
                result.changed.append(coord)

        result.metadata["duration"] = time.time() - start
        return result


# === API fonctionnelle ===

def build_board(snapshot: Snapshot, geometry: GridGeometry) -> Board:
    """Construit une grille depuis une capture (API simplifiée)."""
    return BoardSnapshotBuilder(geometry).build(snapshot)


def refresh_board(board: Board, snapshot: Snapshot, geometry: GridGeometry) -> RefreshResult:
    """Rafraîchit une grille depuis une capture (API simplifiée)."""
    return BoardSnapshotBuilder(geometry).refresh(board, snapshot)

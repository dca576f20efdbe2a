"""Échantillonnage d'une case : reconstruction de son état depuis les pixels."""

from typing import Optional

import numpy as np

from src.config import BACKGROUND_THRESHOLD
from src.lib.s0_coordinates.types import Coord, CellBounds
from src.lib.s3_storage.types import Tile, UNREVEALED
from .classifier import classify, pixel_average
from .types import ColorCategory, TileSample, digit_for


class TileSampler:
    """Lit une case le long de sa ligne de balayage."""

    def __init__(self, background_threshold: int = BACKGROUND_THRESHOLD):
        self.background_threshold = background_threshold

    def sample_tile(self, pixels: np.ndarray, bounds: CellBounds) -> Tile:
        """Retourne l'état de la case délimitée par `bounds`."""
        return self.inspect(pixels, bounds).tile

    def inspect(self, pixels: np.ndarray, bounds: CellBounds, coord: Optional[Coord] = None) -> TileSample:
        """Échantillonne une case et retourne le détail du verdict."""
        self._check_bounds(pixels, bounds)
        line = pixels[bounds.scan_y, bounds.left:bounds.right, :3]

        # Moyenne glissante entière sur les pixels de premier plan
        average = [0, 0, 0]
        count = 0
        for px in line:
            if self._is_background(px):
                continue
            count += 1
            average = [(avg * (count - 1) + int(v)) // count for avg, v in zip(average, px)]

        # Aucun pixel de premier plan : case grise
        category = classify(average) if count else ColorCategory.LIGHT_GRAY

        digit = digit_for(category)
        if digit is not None:
            tile = Tile.number(digit)
            probed = False
        else:
            tile = UNREVEALED if self._border_probe(pixels, bounds) else Tile.number(0)
            probed = True

        return TileSample(
            coord=coord,
            tile=tile,
            category=category,
            average=tuple(average),
            foreground_pixels=count,
            probed=probed,
        )

    def _is_background(self, px: np.ndarray) -> bool:
        threshold = self.background_threshold
        return int(px[0]) > threshold and int(px[1]) > threshold and int(px[2]) > threshold

    def _border_probe(self, pixels: np.ndarray, bounds: CellBounds) -> bool:
        """
        Une case non révélée a un liseré blanc sur son bord.
        Parcourt la ligne de balayage pixel par pixel depuis le bord gauche :
        True dès qu'un pixel blanc est trouvé.
        """
        for x in range(bounds.left, bounds.right):
            if classify(pixel_average(pixels, x, bounds.scan_y, 0)) == ColorCategory.WHITE:
                return True
        return False

    @staticmethod
    def _check_bounds(pixels: np.ndarray, bounds: CellBounds) -> None:
        height, width = pixels.shape[:2]
        if bounds.left < 0 or bounds.right > width or not 0 <= bounds.scan_y < height:
            raise ValueError(f"Case {bounds.to_tuple()} hors de l'image {width}x{height}")

"""Module s2_vision : Lecture des cases par seuillage de couleurs."""

from .types import (
    ColorCategory,
    CATEGORY_TO_DIGIT,
    AMBIGUOUS_CATEGORIES,
    TileSample,
    RefreshResult,
    digit_for,
)
from .classifier import classify, pixel_average
from .sampler import TileSampler
from .vision import BoardSnapshotBuilder, build_board, refresh_board

__all__ = [
    # Types
    "ColorCategory",
    "CATEGORY_TO_DIGIT",
    "AMBIGUOUS_CATEGORIES",
    "TileSample",
    "RefreshResult",
    "digit_for",
    # Classifieur
    "classify",
    "pixel_average",
    # Échantillonnage
    "TileSampler",
    "BoardSnapshotBuilder",
    "build_board",
    "refresh_board",
]

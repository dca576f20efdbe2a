"""Classification d'une couleur moyenne en catégorie sémantique.

Les seuils sont empiriques et calibrés pour le thème classique du jeu :
ils doivent rester identiques pour garder la compatibilité avec ce rendu.
"""

from typing import Sequence

import numpy as np

from .types import ColorCategory


def classify(sample: Sequence[int]) -> ColorCategory:
    """
    Retourne la catégorie d'un échantillon RGB (0-255).
    Les règles sont évaluées dans l'ordre, la première qui correspond l'emporte.
    """
    r, g, b = (int(v) for v in sample[:3])

    # Blanc
    if r > 195 and g > 195 and b > 195:
        return ColorCategory.WHITE
    # Rouges
    if r > 180 and g < 95 and b < 95:
        return ColorCategory.RED
    elif r > 105 and g < 60 and b < 60:
        return ColorCategory.BROWN
    # Verts
    if r < 95 and g > 105 and b < 95:
        return ColorCategory.GREEN
    elif r < 60 and g > 105 and b > 110:
        return ColorCategory.LIGHT_GREEN
    # Bleus
    if r < 95 and g < 95 and b > 180:
        return ColorCategory.BLUE
    elif r < 95 and g < 95 and b > 105:
        return ColorCategory.DARK_BLUE
    # Couleurs extrêmes (noir avant les gris pour que (0, 0, 0) reste noir)
    if r < 50 and g < 50 and b < 50:
        return ColorCategory.BLACK
    if r == g == b:
        if r < 150:
            return ColorCategory.LIGHT_GRAY
        if r > 150:
            return ColorCategory.GRAY

    return ColorCategory.UNKNOWN


def pixel_average(pixels: np.ndarray, x: int, y: int, depth: int = 3) -> tuple:
    """
    Moyenne RGB de la fenêtre (2*depth+1)² centrée sur (x, y).
    La fenêtre est tronquée aux bords de l'image ; depth=0 retourne le pixel lui-même.
    """
    height, width = pixels.shape[:2]
    if not (0 <= x < width and 0 <= y < height):
        raise ValueError(f"Pixel ({x}, {y}) hors de l'image {width}x{height}")
    if depth <= 0:
        return tuple(int(v) for v in pixels[y, x, :3])

    window = pixels[
        max(0, y - depth):min(height, y + depth + 1),
        max(0, x - depth):min(width, x + depth + 1),
        :3,
    ].astype(np.int64)
    mean = window.reshape(-1, 3).sum(axis=0) // (window.shape[0] * window.shape[1])
    return tuple(int(v) for v in mean)

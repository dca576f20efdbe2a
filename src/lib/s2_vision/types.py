"""Types pour le module s2_vision."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional, Any

from src.lib.s0_coordinates.types import Coord
from src.lib.s3_storage.types import Tile


class ColorCategory(IntEnum):
    """Catégories de couleur reconnues par le classifieur."""
    LIGHT_GRAY = 0
    BLUE = 1
    GREEN = 2
    RED = 3
    DARK_BLUE = 4
    BROWN = 5
    LIGHT_GREEN = 6
    BLACK = 7
    GRAY = 8
    UNKNOWN = 9
    WHITE = 10


# === Couleurs de chiffres ===

# Seules les six couleurs franches donnent un chiffre. Un 7 (noir) ou un 8 (gris) passe par
# la sonde de bord et, sans liseré blanc, est lu Number(0) : SIMPLE révélerait alors ses voisins.
CATEGORY_TO_DIGIT: Dict[ColorCategory, int] = {
    ColorCategory.BLUE: 1,
    ColorCategory.GREEN: 2,
    ColorCategory.RED: 3,
    ColorCategory.DARK_BLUE: 4,
    ColorCategory.BROWN: 5,
    ColorCategory.LIGHT_GREEN: 6,
}

# Catégories qui ne permettent pas de trancher entre "vide révélée" et "non révélée"
AMBIGUOUS_CATEGORIES = frozenset({
    ColorCategory.LIGHT_GRAY,
    ColorCategory.GRAY,
    ColorCategory.BLACK,
    ColorCategory.UNKNOWN,
    ColorCategory.WHITE,
})


def digit_for(category: ColorCategory) -> Optional[int]:
    """Chiffre associé à une couleur de nombre, None sinon."""
    return CATEGORY_TO_DIGIT.get(category)


@dataclass
class TileSample:
    """Détail d'un échantillonnage de case (debug)."""
    coord: Optional[Coord]
    tile: Tile
    category: ColorCategory
    average: tuple
    foreground_pixels: int
    probed: bool = False


@dataclass
class RefreshResult:
    """Résultat d'un rafraîchissement de grille."""
    sampled: int
    changed: List[Coord] = field(default_factory=list)
    samples: List[TileSample] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def change_count(self) -> int:
        return len(self.changed)

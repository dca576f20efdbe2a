"""Génération d'overlays visuels pour le debug."""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from PIL import Image, ImageDraw

from src.config import PATHS
from src.lib.s0_coordinates.converter import CoordinateConverter
from src.lib.s0_coordinates.types import GridGeometry
from src.lib.s1_capture.types import Snapshot
from src.lib.s3_storage.board import Board
from src.lib.s3_storage.types import TileKind
from src.lib.s4_solver.types import ActionKind, Deduction


@dataclass
class OverlayConfig:
    """Configuration des overlays."""
    alpha: int = 110
    colors: Dict[str, Tuple[int, int, int]] = None

    def __post_init__(self):
        if self.colors is None:
            self.colors = {
                "reveal": (0, 255, 0),       # Vert
                "flag": (255, 0, 0),         # Rouge
                "unrevealed": (128, 128, 128),
                "number": (0, 0, 255),       # Bleu
                "empty": (200, 200, 200),
                "scanline": (255, 0, 255),
            }


class OverlayRenderer:
    """Dessine l'état de la grille et les déductions sur une capture."""

    def __init__(self, geometry: GridGeometry, config: Optional[OverlayConfig] = None):
        self.geometry = geometry
        self.converter = CoordinateConverter(geometry)
        self.config = config or OverlayConfig()

    def render_board_overlay(
        self,
        snapshot: Snapshot,
        board: Board,
        output_path: Optional[str] = None,
    ) -> Image.Image:
        """Génère un overlay de l'état des cases (avec la ligne d'échantillonnage)."""
        overlay = snapshot.to_image().convert("RGBA")
        draw = ImageDraw.Draw(overlay, "RGBA")

        for coord in board.positions():
            bounds = self.converter.cell_bounds(coord)
            tile = board.get(coord)
            if tile.kind == TileKind.UNREVEALED:
                color = self.config.colors["unrevealed"]
            elif tile.kind == TileKind.FLAGGED_MINE:
                color = self.config.colors["flag"]
            elif tile.value >= 1:
                color = self.config.colors["number"]
            else:
                color = self.config.colors["empty"]

            box = [bounds.left, bounds.top, bounds.right - 1, bounds.bottom - 1]
            draw.rectangle(box, fill=(*color, self.config.alpha), outline=color)
            draw.line(
                [bounds.left, bounds.scan_y, bounds.right - 1, bounds.scan_y],
                fill=self.config.colors["scanline"],
            )
            draw.text((bounds.left + 2, bounds.top + 2), tile.to_char(), fill=(255, 255, 255))

        return self._finish(overlay, output_path)

    def render_deductions_overlay(
        self,
        snapshot: Snapshot,
        deductions: Iterable[Deduction],
        output_path: Optional[str] = None,
    ) -> Image.Image:
        """Génère un overlay des actions déduites (vert = révéler, rouge = marquer)."""
        overlay = snapshot.to_image().convert("RGBA")
        draw = ImageDraw.Draw(overlay, "RGBA")

        for deduction in deductions:
            bounds = self.converter.cell_bounds(deduction.coord)
            if deduction.action == ActionKind.FLAG:
                color = self.config.colors["flag"]
                symbol = "M"
            else:
                color = self.config.colors["reveal"]
                symbol = "R"
            draw.rectangle(
                [bounds.left, bounds.top, bounds.right - 1, bounds.bottom - 1],
                fill=(*color, self.config.alpha),
                outline=color,
                width=2,
            )
            draw.text(
                (bounds.left + bounds.width // 3, bounds.top + bounds.height // 4),
                symbol,
                fill=(255, 255, 255),
            )

        return self._finish(overlay, output_path)

    @staticmethod
    def _finish(overlay: Image.Image, output_path: Optional[str]) -> Image.Image:
        if output_path:
            Path(output_path).parent.mkdir(parents=True, exist_ok=True)
            overlay.convert("RGB").save(output_path)
        return overlay


def overlay_path(name: str, directory: str = PATHS['overlays']) -> str:
    """Chemin de sortie d'un overlay."""
    return str(Path(directory) / f"{name}.png")


# === API fonctionnelle ===

def render_board_overlay(
    snapshot: Snapshot,
    board: Board,
    geometry: GridGeometry,
    output_path: Optional[str] = None,
) -> Image.Image:
    """Génère un overlay de l'état de la grille."""
    return OverlayRenderer(geometry).render_board_overlay(snapshot, board, output_path)


def render_deductions_overlay(
    snapshot: Snapshot,
    deductions: Iterable[Deduction],
    geometry: GridGeometry,
    output_path: Optional[str] = None,
) -> Image.Image:
    """Génère un overlay des déductions."""
    return OverlayRenderer(geometry).render_deductions_overlay(snapshot, deductions, output_path)

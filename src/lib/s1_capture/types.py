"""Types pour le module s1_capture."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

import numpy as np
from PIL import Image


@dataclass
class Snapshot:
    """Capture brute de la surface de jeu (pixels RGB ou RGBA)."""
    pixels: np.ndarray  # (height, width, channels), uint8
    width: int
    height: int
    bits_per_pixel: int
    timestamp: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_array(cls, array: np.ndarray, timestamp: float = 0.0) -> "Snapshot":
        pixels = np.asarray(array, dtype=np.uint8)
        if pixels.ndim == 2:
            pixels = np.repeat(pixels[:, :, None], 3, axis=2)
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError(f"Image inattendue, forme {pixels.shape}")
        height, width, channels = pixels.shape
        return cls(
            pixels=pixels,
            width=width,
            height=height,
            bits_per_pixel=8 * channels,
            timestamp=timestamp,
        )

    @classmethod
    def from_image(cls, image: Image.Image, timestamp: float = 0.0) -> "Snapshot":
        if image.mode not in ("RGB", "RGBA"):
            image = image.convert("RGB")
        return cls.from_array(np.array(image), timestamp=timestamp)

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self.pixels[:, :, :3]))

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

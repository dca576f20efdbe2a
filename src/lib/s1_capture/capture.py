"""Fournisseurs de captures : écran complet, navigateur, image fixe."""

import io
import os
import time
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image, ImageGrab
from selenium.webdriver.remote.webdriver import WebDriver

from .types import Snapshot


class SnapshotProvider:
    """Interface : produit une capture complète de la surface de jeu à la demande."""

    def __init__(self, save_dir: Optional[str] = None):
        self.save_dir = save_dir
        self.capture_count = 0

    def capture(self) -> Snapshot:
        """Capture la surface de jeu (peut être lent/bloquant)."""
        snapshot = self._grab()
        self.capture_count += 1
        if self.save_dir:
            snapshot.metadata["saved_path"] = self._save_image(snapshot.to_image())
        return snapshot

    def _grab(self) -> Snapshot:
        raise NotImplementedError

    def _save_image(self, image: Image.Image) -> str:
        """Sauvegarde l'image sur disque."""
        os.makedirs(self.save_dir, exist_ok=True)
        filename = f"capture_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.png"
        path = os.path.join(self.save_dir, filename)
        image.save(path, format="PNG")
        return path


class ScreenCaptureBackend(SnapshotProvider):
    """Capture de l'écran complet (tous les moniteurs)."""

    def __init__(self, all_screens: bool = True, save_dir: Optional[str] = None):
        super().__init__(save_dir)
        self.all_screens = all_screens

    def _grab(self) -> Snapshot:
        timestamp = time.time()
        image = ImageGrab.grab(all_screens=self.all_screens)
        return Snapshot.from_image(image.convert("RGB"), timestamp=timestamp)


class BrowserCaptureBackend(SnapshotProvider):
    """Capture du viewport via le WebDriver."""

    def __init__(self, driver: Optional[WebDriver] = None, save_dir: Optional[str] = None):
        super().__init__(save_dir)
        self.driver = driver

    def set_driver(self, driver: WebDriver) -> None:
        """Configure le driver."""
        self.driver = driver

    def _grab(self) -> Snapshot:
        if not self.driver:
            raise RuntimeError("Driver non configuré. Utilisez set_driver() d'abord.")
        timestamp = time.time()
        raw_bytes = self.driver.get_screenshot_as_png()
        image = Image.open(io.BytesIO(raw_bytes))

        # Fond transparent → fond blanc
        if "A" in image.getbands():
            background = Image.new("RGBA", image.size, (255, 255, 255, 255))
            background.paste(image, mask=image.split()[-1])
            image = background
        return Snapshot.from_image(image.convert("RGB"), timestamp=timestamp)


class ImageSnapshotProvider(SnapshotProvider):
    """Capture fixe (fichier, image PIL ou tableau) pour les rejeux et les tests."""

    def __init__(self, source: Union[str, Path, Image.Image, np.ndarray], save_dir: Optional[str] = None):
        super().__init__(save_dir)
        self.set_source(source)

    def set_source(self, source: Union[str, Path, Image.Image, np.ndarray]) -> None:
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise FileNotFoundError(f"Image introuvable: {path}")
            source = Image.open(path).convert("RGB")
        if isinstance(source, Image.Image):
            self._snapshot = Snapshot.from_image(source)
        else:
            self._snapshot = Snapshot.from_array(source)

    def _grab(self) -> Snapshot:
        return Snapshot.from_array(self._snapshot.pixels.copy(), timestamp=time.time())

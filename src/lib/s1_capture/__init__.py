"""Module s1_capture : Captures de la surface de jeu."""

from .capture import (
    SnapshotProvider,
    ScreenCaptureBackend,
    BrowserCaptureBackend,
    ImageSnapshotProvider,
)
from .types import Snapshot

__all__ = [
    "SnapshotProvider",
    "ScreenCaptureBackend",
    "BrowserCaptureBackend",
    "ImageSnapshotProvider",
    "Snapshot",
]

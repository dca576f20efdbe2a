"""Module s7_debug : Debug, journaux et overlays visuels."""

from .overlays import OverlayRenderer, OverlayConfig, render_board_overlay, render_deductions_overlay, overlay_path
from .logger import DebugLogger, PassLog, ActionLog
from .board_printer import format_board

__all__ = [
    "OverlayRenderer",
    "OverlayConfig",
    "render_board_overlay",
    "render_deductions_overlay",
    "overlay_path",
    "DebugLogger",
    "PassLog",
    "ActionLog",
    "format_board",
]

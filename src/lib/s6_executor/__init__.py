"""Module s6_executor : Exécution des actions dans le jeu."""

from .types import ActionRecord
from .actuator import ActionActuator, DesktopActuator, BrowserActuator
from .executor import ActionEffect

__all__ = [
    "ActionRecord",
    "ActionActuator",
    "DesktopActuator",
    "BrowserActuator",
    "ActionEffect",
]

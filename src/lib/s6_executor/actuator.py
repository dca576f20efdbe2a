"""Actionneurs : transforment une action de grille en geste souris."""

import time
from typing import Optional

from selenium.webdriver.remote.webdriver import WebDriver

from src.config import WAIT_TIMES
from src.lib.s0_coordinates.converter import CoordinateConverter
from src.lib.s0_coordinates.types import Coord
from src.lib.s4_solver.types import ActionKind


class ActionActuator:
    """Interface : exécute une action (révéler/marquer) sur une case, de façon bloquante."""

    def __init__(self, converter: CoordinateConverter):
        self.converter = converter
        self.action_count = 0

    def act(self, coord: Coord, kind: ActionKind) -> None:
        """Clique au centre de la case : gauche pour révéler, droit pour marquer."""
        point = self.converter.grid_to_screen(coord)
        self.click_point(point.x, point.y, kind)
        self.action_count += 1

    def click_point(self, x: float, y: float, kind: ActionKind = ActionKind.REVEAL) -> None:
        raise NotImplementedError


class DesktopActuator(ActionActuator):
    """Clics système via pyautogui (déplacement du curseur puis appui/relâchement)."""

    def __init__(self, converter: CoordinateConverter, press_delay: float = WAIT_TIMES['press']):
        super().__init__(converter)
        # Import local : pyautogui se connecte à l'affichage dès son import
        import pyautogui

        pyautogui.FAILSAFE = True  # curseur dans le coin haut-gauche pour tout arrêter
        pyautogui.PAUSE = 0
        self._gui = pyautogui
        self.press_delay = press_delay

    def click_point(self, x: float, y: float, kind: ActionKind = ActionKind.REVEAL) -> None:
        button = "right" if kind == ActionKind.FLAG else "left"
        self._gui.moveTo(x, y)
        self._gui.mouseDown(button=button)
        time.sleep(self.press_delay)
        self._gui.mouseUp(button=button)


class BrowserActuator(ActionActuator):
    """Clics simulés via JavaScript dans la page du jeu."""

    # Les coordonnées reçues sont en pixels de capture : conversion en pixels CSS
    CLICK_SCRIPT = """
    const ratio = window.devicePixelRatio || 1;
    const x = arguments[0] / ratio;
    const y = arguments[1] / ratio;
    const button = arguments[2];

    const element = document.elementFromPoint(x, y);
    if (!element) return { success: false, error: 'No element at point' };

    function makeMouse(type) {
        return new MouseEvent(type, {
            bubbles: true,
            cancelable: true,
            view: window,
            clientX: x,
            clientY: y,
            button: button,
            buttons: button === 2 ? 2 : 1
        });
    }

    element.dispatchEvent(makeMouse('mousedown'));
    element.dispatchEvent(makeMouse('mouseup'));
    element.dispatchEvent(makeMouse(button === 2 ? 'contextmenu' : 'click'));
    return { success: true };
    """

    def __init__(self, converter: CoordinateConverter, driver: Optional[WebDriver] = None):
        super().__init__(converter)
        self.driver = driver

    def set_driver(self, driver: WebDriver) -> None:
        """Configure le driver."""
        self.driver = driver

    def click_point(self, x: float, y: float, kind: ActionKind = ActionKind.REVEAL) -> None:
        if not self.driver:
            raise RuntimeError("Driver non configuré. Utilisez set_driver() d'abord.")
        button = 2 if kind == ActionKind.FLAG else 0
        response = self.driver.execute_script(self.CLICK_SCRIPT, float(x), float(y), button)
        if not isinstance(response, dict) or not response.get("success"):
            error = response.get("error") if isinstance(response, dict) else "Réponse JS invalide"
            raise RuntimeError(f"Clic échoué en ({x}, {y}): {error}")

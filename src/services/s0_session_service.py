"""Service de session : initialisation, lancement de partie et nettoyage."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from src.config import BROWSER_CONFIG, DEFAULT_DIFFICULTY, DIFFICULTY_CONFIG, GAME_CONFIG, WAIT_TIMES
from src.config import get_geometry, resolve_difficulty
from src.lib.s0_browser import BrowserConfig, BrowserHandle, navigate_to, start_browser, stop_browser
from src.lib.s0_coordinates import Coord, CoordinateConverter, GridGeometry
from src.lib.s1_capture import BrowserCaptureBackend, ScreenCaptureBackend, SnapshotProvider
from src.lib.s2_vision import BoardSnapshotBuilder
from src.lib.s3_storage import Board
from src.lib.s4_solver import ActionKind
from src.lib.s6_executor import ActionActuator, ActionEffect, BrowserActuator, DesktopActuator
from src.lib.s7_debug import format_board

BACKENDS = ("desktop", "browser")


@dataclass
class Session:
    """Session de jeu active."""
    difficulty: int
    geometry: GridGeometry
    converter: CoordinateConverter
    provider: SnapshotProvider
    actuator: ActionActuator
    builder: BoardSnapshotBuilder
    effects: ActionEffect
    backend: str = "desktop"
    browser: Optional[BrowserHandle] = None
    board: Optional[Board] = None

    @property
    def driver(self):
        return self.browser.driver if self.browser else None

    @property
    def difficulty_name(self) -> str:
        return DIFFICULTY_CONFIG[self.difficulty]['name']


def create_session(
    difficulty: int = DEFAULT_DIFFICULTY,
    backend: str = "desktop",
    url: Optional[str] = None,
    headless: Optional[bool] = None,
    provider: Optional[SnapshotProvider] = None,
    actuator: Optional[ActionActuator] = None,
    settle_delay: float = WAIT_TIMES['settle'],
    verbose: bool = False,
) -> Session:
    """
    Crée une session : géométrie, capture, actionneur et relecture de la grille.

    `provider`/`actuator` remplacent les backends par défaut (rejeu d'images, jeu simulé).
    Le navigateur n'est démarré que s'il faut encore l'un des deux en mode "browser".
    """
    if backend not in BACKENDS:
        raise ValueError(f"Backend inconnu: {backend} (attendu: {', '.join(BACKENDS)})")

    difficulty = resolve_difficulty(difficulty)
    geometry = get_geometry(difficulty)
    converter = CoordinateConverter(geometry)

    # 1. Navigateur (backend "browser" uniquement)
    browser = None
    if backend == "browser" and (provider is None or actuator is None):
        config = BrowserConfig(url=url or BROWSER_CONFIG['url'])
        if headless is not None:
            config.headless = headless
        browser = start_browser(config)
        if not navigate_to(browser, config.url, timeout=config.page_load_timeout):
            stop_browser(browser)
            raise RuntimeError(f"Impossible de charger le jeu: {config.url}")

    # 2. Capture et actionneur
    if provider is None:
        provider = BrowserCaptureBackend(browser.driver) if browser else ScreenCaptureBackend()
    if actuator is None:
        actuator = BrowserActuator(converter, browser.driver) if browser else DesktopActuator(converter)

    # 3. Relecture de la grille après chaque action
    builder = BoardSnapshotBuilder(geometry)
    effects = ActionEffect(actuator, provider, builder, settle_delay=settle_delay, verbose=verbose)

    session = Session(
        difficulty=difficulty,
        geometry=geometry,
        converter=converter,
        provider=provider,
        actuator=actuator,
        builder=builder,
        effects=effects,
        backend=backend,
        browser=browser,
    )
    print(f"[SESSION] Session créée : {session.difficulty_name} "
          f"({geometry.rows}x{geometry.cols}), backend {backend}")
    return session


def smiley_position(geometry: GridGeometry) -> tuple:
    """Position écran du smiley (bouton de redémarrage), centré au-dessus de la grille."""
    x = GAME_CONFIG['smiley_x_base'] + (geometry.cols - 9) * GAME_CONFIG['smiley_x_per_column']
    return x, GAME_CONFIG['smiley_y']


def start_game(
    session: Session,
    bootstrap: bool = True,
    restart_delay: float = WAIT_TIMES['restart'],
    start_delay: float = WAIT_TIMES['game_start'],
) -> Board:
    """
    Lance une partie et lit la grille initiale.

    Avec `bootstrap`, clique sur le smiley pour repartir d'une grille neuve puis
    ouvre la case de départ configurée. Sans, lit la partie telle qu'elle est à l'écran.
    """
    if bootstrap:
        x, y = smiley_position(session.geometry)
        print(f"[SESSION] Redémarrage de la partie (smiley en {x:.0f}, {y})")
        session.actuator.click_point(x, y, ActionKind.REVEAL)
        time.sleep(restart_delay)

        first = Coord(*GAME_CONFIG['first_click'])
        print(f"[SESSION] Premier clic en {first.row + 1} {first.col + 1}")
        session.actuator.act(first, ActionKind.REVEAL)
        time.sleep(start_delay)

    print("[CAPTURE] Capture initiale")
    snapshot = session.provider.capture()
    session.effects.last_snapshot = snapshot
    session.board = session.builder.build(snapshot)

    print(format_board(session.board, "[VISION] Grille initiale :"))
    return session.board


def close_session(session: Optional[Session]) -> None:
    """Ferme une session proprement."""
    if session and session.browser:
        stop_browser(session.browser)
        session.browser = None
    print("[SESSION] Session fermée")

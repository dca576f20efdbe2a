"""Bot Démineur : capture → lecture → déductions → actions."""

from __future__ import annotations

from typing import Optional

from src.config import DEFAULT_DIFFICULTY, GAME_CONFIG, SOLVER_CONFIG
from src.lib.s7_debug import DebugLogger
from src.services import LoopResult, Session, close_session, create_session, run_game, start_game


class MinesweeperBot:
    """Bot de démineur : une session, une partie, un budget de passes."""

    def __init__(self):
        self.session: Optional[Session] = None
        self.debug_logger: Optional[DebugLogger] = None

    def run(
        self,
        difficulty: int = DEFAULT_DIFFICULTY,
        *,
        backend: str = "desktop",
        url: Optional[str] = None,
        headless: Optional[bool] = None,
        max_rounds: int = SOLVER_CONFIG['max_rounds'],
        bootstrap: bool = True,
        overlay_enabled: bool = False,
        verbose: bool = True,
        debug: bool = GAME_CONFIG['debug'],
    ) -> Optional[LoopResult]:
        """Pipeline principal. Retourne None si la partie n'a pas pu être lancée."""
        try:
            self.session = create_session(
                difficulty=difficulty,
                backend=backend,
                url=url,
                headless=headless,
                verbose=verbose,
            )
            start_game(self.session, bootstrap=bootstrap)
            if debug:
                self.debug_logger = DebugLogger()
            return run_game(
                self.session,
                max_rounds=max_rounds,
                verbose=verbose,
                overlay=overlay_enabled,
                debug_logger=self.debug_logger,
            )
        except Exception as e:
            # Erreurs WebDriver, FailSafeException de pyautogui, etc. : fermer la session
            print(f"[ERREUR] {e}")
            self.cleanup()
            return None

    def cleanup(self) -> None:
        """Ferme proprement la session."""
        if self.session:
            close_session(self.session)
            self.session = None

"""Effet d'une action : clic, délai de stabilisation, nouvelle capture, relecture."""

import time
from typing import Callable, List, Optional

from src.config import WAIT_TIMES
from src.lib.s0_coordinates.types import Coord
from src.lib.s1_capture.capture import SnapshotProvider
from src.lib.s1_capture.types import Snapshot
from src.lib.s2_vision.vision import BoardSnapshotBuilder
from src.lib.s3_storage.board import Board
from src.lib.s4_solver.effects import BoardEffects
from src.lib.s4_solver.types import ActionKind
from .actuator import ActionActuator
from .types import ActionRecord


class ActionEffect(BoardEffects):
    """Réalise les déductions dans le jeu puis relit la grille."""

    def __init__(
        self,
        actuator: ActionActuator,
        provider: SnapshotProvider,
        builder: BoardSnapshotBuilder,
        settle_delay: float = WAIT_TIMES['settle'],
        on_action: Optional[Callable[[ActionRecord], None]] = None,
        verbose: bool = False,
    ):
        self.actuator = actuator
        self.provider = provider
        self.builder = builder
        self.settle_delay = settle_delay
        self.on_action = on_action
        self.verbose = verbose
        self.history: List[ActionRecord] = []
        self.last_snapshot: Optional[Snapshot] = None

    def reveal(self, board: Board, coord: Coord) -> None:
        self._perform(board, coord, ActionKind.REVEAL)

    def flag(self, board: Board, coord: Coord) -> None:
        # La grille porte déjà la mine : une case marquée n'est jamais relue
        self._perform(board, coord, ActionKind.FLAG)

    def resample(self, board: Board) -> int:
        """Attend la fin des animations, capture et relit la grille. Retourne le nombre de cases changées."""
        if self.settle_delay > 0:
            time.sleep(self.settle_delay)
        self.last_snapshot = self.provider.capture()
        return self.builder.refresh(board, self.last_snapshot).change_count

    def _perform(self, board: Board, coord: Coord, kind: ActionKind) -> None:
        start = time.time()
        self.actuator.act(coord, kind)
        revealed = self.resample(board)

        record = ActionRecord(
            coord=coord,
            action=kind,
            revealed=revealed,
            duration=time.time() - start,
        )
        self.history.append(record)
        if self.verbose:
            verb = "Marquage" if kind == ActionKind.FLAG else "Révélation"
            print(f"[ACTION] {verb} {coord.row + 1} {coord.col + 1} → {revealed} case(s) relue(s)")
        if self.on_action:
            self.on_action(record)

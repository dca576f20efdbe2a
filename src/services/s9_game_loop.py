"""Boucle de résolution : passes successives sur la grille (SIMPLE puis PIVOT).

La boucle ne gère que :
- L'ordre de parcours des cases (ligne par ligne)
- Le mode courant et les ensembles de cases déjà traitées
- Le budget de passes

Les déductions (s4_solver) et leurs effets dans le jeu (s6_executor) sont des boîtes noires.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional, Set

from src.config import SOLVER_CONFIG
from src.lib.s0_coordinates.types import Coord
from src.lib.s3_storage.board import Board
from src.lib.s3_storage.types import TileKind
from src.lib.s4_solver import BoardEffects, Deduction, DeductionEngine, Strategy
from src.lib.s7_debug import DebugLogger, OverlayRenderer, format_board, overlay_path

from .s0_session_service import Session


class LoopOutcome(Enum):
    """Issue de la boucle une fois le budget de passes épuisé."""
    SOLVED = auto()      # Plus aucune case non révélée
    EXHAUSTED = auto()   # Budget épuisé, il reste des cases non révélées


@dataclass
class PassStats:
    """Bilan d'une passe."""
    strategy: Strategy
    changes: int = 0
    reveal_count: int = 0
    flag_count: int = 0


@dataclass
class LoopResult:
    """Résultat de la boucle de résolution."""
    outcome: LoopOutcome
    rounds: int
    total_changes: int
    final_mode: Strategy
    board: Board
    unrevealed_left: int
    duration: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def solved(self) -> bool:
        return self.outcome == LoopOutcome.SOLVED


class SolverLoop:
    """
    Enchaîne un nombre fixe de passes sur la grille.

    Mode SIMPLE au départ. Une passe sans aucun changement fait basculer en PIVOT ;
    un PIVOT réussi vide `pivot_visited` et ramène en SIMPLE. La boucle ne s'arrête
    jamais avant la fin du budget : une grille résolue donne simplement des passes vides.
    """

    def __init__(
        self,
        engine: Optional[DeductionEngine] = None,
        max_rounds: int = SOLVER_CONFIG['max_rounds'],
        refresher: Optional[Callable[[Board], int]] = None,
        logger: Optional[DebugLogger] = None,
        verbose: bool = False,
    ):
        if max_rounds < 0:
            raise ValueError(f"Budget de passes invalide: {max_rounds}")
        self.engine = engine or DeductionEngine()
        self.max_rounds = max_rounds
        self.refresher = refresher
        self.logger = logger
        self.verbose = verbose
        self.reset()

    def reset(self) -> None:
        """Remet la boucle dans son état initial (mode SIMPLE, ensembles vides)."""
        self.mode = Strategy.SIMPLE
        self.simple_visited: Set[Coord] = set()
        self.pivot_visited: Set[Coord] = set()
        self.deductions: List[Deduction] = []

    def is_eligible(self, board: Board, coord: Coord) -> bool:
        """Case nombre, non résolue, et pas déjà essayée en PIVOT si on est en PIVOT."""
        if not board.get(coord).is_number:
            return False
        if coord in self.simple_visited:
            return False
        if self.mode == Strategy.PIVOT and coord in self.pivot_visited:
            return False
        return True

    def run_pass(self, board: Board) -> PassStats:
        """Une passe complète, ligne par ligne."""
        stats = PassStats(strategy=self.mode)

        for coord in board.positions():
            if not self.is_eligible(board, coord):
                continue

            strategy = self.mode
            unrevealed_before = board.count(TileKind.UNREVEALED)
            result = self.engine.apply(strategy, board, coord)

            if strategy == Strategy.SIMPLE and not board.neighbors(coord, (TileKind.UNREVEALED,)):
                self.simple_visited.add(coord)

            # Une révélation non suivie d'effet (exécution à blanc, clic perdu) ne compte pas
            if result.changed and board.count(TileKind.UNREVEALED) < unrevealed_before:
                stats.changes += 1
                stats.reveal_count += result.reveal_count
                stats.flag_count += result.flag_count
                self.deductions.extend(result.deductions)
                self._log_deductions(result)
                if strategy == Strategy.PIVOT:
                    # Un changement peut débloquer des pivots déjà essayés
                    self.pivot_visited.clear()
                    self.mode = Strategy.SIMPLE
                    if self.verbose:
                        print(f"[SOLVER] PIVOT réussi en {coord.row + 1} {coord.col + 1} "
                              f"avec {result.pivot.row + 1} {result.pivot.col + 1} ({result.rule.name})")
            elif strategy == Strategy.PIVOT:
                self.pivot_visited.add(coord)

        if stats.changes == 0 and self.mode == Strategy.SIMPLE:
            self.mode = Strategy.PIVOT
            if self.verbose:
                print("[SOLVER] Grille bloquée en SIMPLE → passage en PIVOT")
        return stats

    def run(self, board: Board) -> LoopResult:
        """Exécute tout le budget de passes puis relit une dernière fois la grille."""
        self.reset()
        start = time.time()
        total_changes = 0

        for round_index in range(self.max_rounds):
            pass_start = time.time()
            stats = self.run_pass(board)
            total_changes += stats.changes

            if self.logger:
                self.logger.log_pass(
                    round=round_index + 1,
                    duration=time.time() - pass_start,
                    strategy=stats.strategy.name,
                    board_changes=stats.changes,
                    reveal_count=stats.reveal_count,
                    flag_count=stats.flag_count,
                    unrevealed_left=board.count(TileKind.UNREVEALED),
                    metadata={
                        "simple_visited": len(self.simple_visited),
                        "pivot_visited": len(self.pivot_visited),
                    },
                )
            if self.verbose and stats.changes:
                print(f"[SOLVER] Passe {round_index + 1} ({stats.strategy.name}) : "
                      f"{stats.changes} changement(s), {stats.reveal_count} révélation(s), {stats.flag_count} mine(s)")

        refreshed = self.refresher(board) if self.refresher else 0
        unrevealed_left = board.count(TileKind.UNREVEALED)
        outcome = LoopOutcome.SOLVED if unrevealed_left == 0 else LoopOutcome.EXHAUSTED

        result = LoopResult(
            outcome=outcome,
            rounds=self.max_rounds,
            total_changes=total_changes,
            final_mode=self.mode,
            board=board,
            unrevealed_left=unrevealed_left,
            duration=time.time() - start,
            metadata={"final_refresh": refreshed, "deductions": len(self.deductions)},
        )

        if self.verbose:
            print(f"[FIN] {outcome.name} : {total_changes} changement(s) en {self.max_rounds} passes, "
                  f"{unrevealed_left} case(s) non révélée(s)")
            print(format_board(board, "Grille finale :"))
        return result

    def _log_deductions(self, result) -> None:
        if not self.logger:
            return
        for deduction in result.deductions:
            self.logger.log_action(
                coord=deduction.coord.to_tuple(),
                action_type=deduction.action.name,
                strategy=result.strategy.name,
                rule=result.rule.name if result.rule else None,
            )


# === API fonctionnelle ===

def solve_board(
    board: Board,
    max_rounds: int = SOLVER_CONFIG['max_rounds'],
    effects: Optional[BoardEffects] = None,
) -> LoopResult:
    """
    Résout une grille en mémoire (sans jeu branché par défaut).
    Sans effets, seuls les marquages de mines modifient la grille : les révélations
    déduites restent sans suite et ne comptent pas comme changements.
    """
    return SolverLoop(DeductionEngine(effects), max_rounds=max_rounds).run(board)


def run_game(
    session: Session,
    max_rounds: int = SOLVER_CONFIG['max_rounds'],
    verbose: bool = True,
    overlay: bool = False,
    debug_logger: Optional[DebugLogger] = None,
) -> LoopResult:
    """Exécute la boucle de résolution sur la partie en cours de la session."""
    if session.board is None:
        raise RuntimeError("Partie non démarrée. Utilisez start_game() d'abord.")

    loop = SolverLoop(
        DeductionEngine(session.effects),
        max_rounds=max_rounds,
        refresher=session.effects.resample,
        logger=debug_logger,
        verbose=verbose,
    )
    result = loop.run(session.board)
    print(f"[GAME] {len(session.effects.history)} actions, issue : {result.outcome.name}")

    snapshot = session.effects.last_snapshot
    if overlay and snapshot is not None:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        renderer = OverlayRenderer(session.geometry)
        board_path = overlay_path(f"board_{stamp}")
        renderer.render_board_overlay(snapshot, session.board, board_path)
        renderer.render_deductions_overlay(snapshot, loop.deductions, overlay_path(f"deductions_{stamp}"))
        print(f"[OVERLAY] Export: {board_path}")

    if debug_logger:
        path = debug_logger.save_session(session.board.to_rows())
        print(f"[DEBUG] Session sauvegardée : {path}")
    return result

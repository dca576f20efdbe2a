"""Services du solveur Démineur."""

from .s0_session_service import Session, create_session, start_game, close_session, smiley_position
from .s9_game_loop import SolverLoop, LoopResult, LoopOutcome, PassStats, run_game, solve_board

__all__ = [
    "Session",
    "create_session",
    "start_game",
    "close_session",
    "smiley_position",
    "SolverLoop",
    "LoopResult",
    "LoopOutcome",
    "PassStats",
    "run_game",
    "solve_board",
]

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.bot_minesweeper import MinesweeperBot
from src.config import DEFAULT_DIFFICULTY, DIFFICULTY_CONFIG, SOLVER_CONFIG, resolve_difficulty
from src.services.s0_session_service import BACKENDS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solveur Démineur : capture écran → déductions → clics")

    parser.add_argument(
        "difficulty",
        nargs="?",
        default=str(DEFAULT_DIFFICULTY),
        help="Difficulté (%s). Toute autre valeur → %s" % (
            ", ".join(f"{k}={v['name']}" for k, v in DIFFICULTY_CONFIG.items()),
            DIFFICULTY_CONFIG[DEFAULT_DIFFICULTY]['name'],
        ),
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default="desktop",
        help="Capture/clics sur l'écran (desktop) ou dans un Chrome piloté (browser)",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="URL du jeu pour le backend browser",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Chrome sans fenêtre (backend browser)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=SOLVER_CONFIG['max_rounds'],
        help="Nombre de passes sur la grille (garde-fou)",
    )
    parser.add_argument(
        "--overlay",
        action="store_true",
        help="Exporter les overlays (états des cases, déductions) en fin de partie",
    )
    parser.add_argument(
        "--no-bootstrap",
        action="store_true",
        help="Ne pas redémarrer la partie : lire la grille telle qu'affichée",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="N'afficher que le bilan",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    bot = MinesweeperBot()
    try:
        result = bot.run(
            resolve_difficulty(args.difficulty),
            backend=args.backend,
            url=args.url,
            headless=True if args.headless else None,
            max_rounds=args.rounds,
            bootstrap=not args.no_bootstrap,
            overlay_enabled=args.overlay,
            verbose=not args.quiet,
        )
    finally:
        bot.cleanup()

    if result is None:
        print("[FIN] Échec")
        return 1
    print(f"[FIN] {'Succès' if result.solved else 'Grille non résolue'} "
          f"({result.unrevealed_left} case(s) non révélée(s))")
    return 0 if result.solved else 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nArrêt demandé par l'utilisateur.")
    except Exception as e:
        print(f"[ERREUR] Exception non capturée: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)

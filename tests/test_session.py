import pytest
from selenium.common.exceptions import WebDriverException

import src.bot_minesweeper as bot_module
import src.main as main_module
from src.config import GAME_CONFIG
from src.lib.s3_storage import TileKind
from src.lib.s7_debug import DebugLogger
from src.bot_minesweeper import MinesweeperBot
from src.main import build_parser, main
from src.services import close_session, create_session, run_game, smiley_position, start_game
from src.services.s9_game_loop import LoopOutcome
from simulated_game import FakeActuator, GameSnapshotProvider, make_geometry


def _session(game):
    return create_session(
        0,
        provider=GameSnapshotProvider(game),
        actuator=FakeActuator(game),
        settle_delay=0,
    )


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError):
        create_session(0, backend="telnet")


def test_smiley_is_centered_over_the_grid():
    assert smiley_position(make_geometry(9, 9)) == (150, GAME_CONFIG['smiley_y'])
    x, _ = smiley_position(make_geometry(16, 30))
    assert x == pytest.approx(150 + 21 * 12.666)


def test_start_game_restarts_then_opens_first_cell(beginner_game):
    session = _session(beginner_game)

    board = start_game(session, restart_delay=0, start_delay=0)

    assert beginner_game.restarts == 1
    assert (1, 2) in beginner_game.opened
    assert board == beginner_game.known_board()
    assert session.board is board


def test_start_game_without_bootstrap_reads_the_screen(beginner_game):
    session = _session(beginner_game)
    board = start_game(session, bootstrap=False)
    assert beginner_game.restarts == 0
    assert board.count(TileKind.UNREVEALED) == 81


def test_run_game_requires_a_started_game(beginner_game):
    with pytest.raises(RuntimeError):
        run_game(_session(beginner_game), verbose=False)


def test_whole_game_is_solved(beginner_game, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    session = _session(beginner_game)
    start_game(session, restart_delay=0, start_delay=0)

    result = run_game(
        session,
        max_rounds=10,
        verbose=False,
        overlay=True,
        debug_logger=DebugLogger(str(tmp_path / "logs")),
    )

    assert result.outcome == LoopOutcome.SOLVED
    assert session.board == beginner_game.solution_board()
    assert beginner_game.flags == beginner_game.mines
    assert not beginner_game.exploded
    assert len(list((tmp_path / "temp" / "overlays").glob("*.png"))) == 2
    assert len(list((tmp_path / "logs").glob("session_*.json"))) == 1
    close_session(session)


def test_cli_arguments():
    args = build_parser().parse_args(["2", "--backend", "browser", "--rounds", "10", "--overlay"])
    assert (args.difficulty, args.backend, args.rounds, args.overlay) == ("2", "browser", 10, True)
    assert not build_parser().parse_args([]).no_bootstrap


def test_bot_closes_the_session_on_driver_errors(beginner_game, monkeypatch):
    closed = []

    def failing_start(session, **kwargs):
        raise WebDriverException("capture impossible")

    monkeypatch.setattr(bot_module, "create_session", lambda **kwargs: _session(beginner_game))
    monkeypatch.setattr(bot_module, "start_game", failing_start)
    monkeypatch.setattr(bot_module, "close_session", closed.append)

    bot = MinesweeperBot()
    assert bot.run(0, verbose=False) is None
    assert len(closed) == 1
    assert bot.session is None


def test_main_cleans_up_when_interrupted(monkeypatch):
    cleaned = []

    class InterruptedBot:
        def run(self, *args, **kwargs):
            raise KeyboardInterrupt

        def cleanup(self):
            cleaned.append(True)

    monkeypatch.setattr(main_module, "MinesweeperBot", InterruptedBot)

    with pytest.raises(KeyboardInterrupt):
        main(["0", "--quiet"])
    assert cleaned == [True]

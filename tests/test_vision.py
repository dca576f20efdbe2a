import numpy as np
import pytest
from PIL import Image

from src.lib.s0_coordinates import Coord
from src.lib.s1_capture import ImageSnapshotProvider, Snapshot
from src.lib.s2_vision import BoardSnapshotBuilder, build_board
from src.lib.s3_storage import Board, TileKind
from simulated_game import make_geometry


def test_build_matches_what_the_player_sees(beginner_game):
    beginner_game.open(1, 2)
    snapshot = Snapshot.from_array(beginner_game.render())

    board = build_board(snapshot, beginner_game.geometry)

    assert board == beginner_game.known_board()
    assert board.get(Coord(0, 7)).value == 1
    assert board.get(Coord(0, 8)).is_unrevealed


def test_fresh_game_is_all_unrevealed(beginner_game):
    board = build_board(Snapshot.from_array(beginner_game.render()), beginner_game.geometry)
    assert board.count(TileKind.UNREVEALED) == 81


def test_refresh_only_touches_unrevealed_tiles(beginner_game):
    builder = BoardSnapshotBuilder(beginner_game.geometry)
    board = builder.build(Snapshot.from_array(beginner_game.render()))
    board.flag(Coord(8, 8))

    beginner_game.open(1, 2)
    result = builder.refresh(board, Snapshot.from_array(beginner_game.render()), keep_samples=True)

    expected = beginner_game.known_board()
    expected.flag(Coord(8, 8))
    assert board == expected
    assert result.change_count == len(beginner_game.opened)
    assert result.sampled == 80
    assert len(result.samples) == 80

    # Une seconde lecture de la même image ne change rien
    assert builder.refresh(board, Snapshot.from_array(beginner_game.render())).change_count == 0


def test_snapshot_too_small_for_the_grid():
    builder = BoardSnapshotBuilder(make_geometry(9, 9))
    with pytest.raises(ValueError):
        builder.build(Snapshot.from_array(np.zeros((100, 100, 3), dtype=np.uint8)))


def test_refresh_checks_each_new_capture(beginner_game):
    builder = BoardSnapshotBuilder(beginner_game.geometry)
    board = builder.build(Snapshot.from_array(beginner_game.render()))
    with pytest.raises(ValueError):
        builder.refresh(board, Snapshot.from_array(np.zeros((100, 100, 3), dtype=np.uint8)))


def test_board_shape_must_match_geometry(beginner_game):
    builder = BoardSnapshotBuilder(beginner_game.geometry)
    with pytest.raises(ValueError):
        builder.refresh(Board(3, 3), Snapshot.from_array(beginner_game.render()))


def test_image_provider_replays_a_saved_capture(beginner_game, tmp_path):
    beginner_game.open(1, 2)
    path = tmp_path / "capture.png"
    Image.fromarray(beginner_game.render()).save(path)

    provider = ImageSnapshotProvider(path)
    snapshot = provider.capture()

    assert provider.capture_count == 1
    assert snapshot.size == (snapshot.width, snapshot.height)
    assert snapshot.bits_per_pixel == 24
    assert build_board(snapshot, beginner_game.geometry) == beginner_game.known_board()


def test_image_provider_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ImageSnapshotProvider(tmp_path / "absent.png")


def test_rgba_and_gray_arrays_are_accepted():
    rgba = Snapshot.from_array(np.zeros((4, 5, 4), dtype=np.uint8))
    gray = Snapshot.from_array(np.zeros((4, 5), dtype=np.uint8))
    assert rgba.bits_per_pixel == 32
    assert gray.pixels.shape == (4, 5, 3)
    with pytest.raises(ValueError):
        Snapshot.from_array(np.zeros((4, 5, 2), dtype=np.uint8))

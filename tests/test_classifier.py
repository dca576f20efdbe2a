import numpy as np
import pytest

from src.lib.s2_vision import AMBIGUOUS_CATEGORIES, ColorCategory, classify, digit_for, pixel_average
from simulated_game import DIGIT_COLORS


def test_extreme_colors():
    assert classify((255, 255, 255)) == ColorCategory.WHITE
    assert classify((0, 0, 0)) == ColorCategory.BLACK
    assert classify((200, 30, 30)) == ColorCategory.RED


def test_classic_digit_palette_maps_to_digits():
    for digit, color in DIGIT_COLORS.items():
        assert digit_for(classify(color)) == digit


def test_grays_need_equal_channels():
    assert classify((100, 100, 100)) == ColorCategory.LIGHT_GRAY
    assert classify((192, 192, 192)) == ColorCategory.GRAY
    assert classify((150, 150, 150)) == ColorCategory.UNKNOWN
    assert classify((100, 101, 100)) == ColorCategory.UNKNOWN


def test_rules_are_ordered():
    # Rouge vif avant brun, bleu vif avant bleu foncé
    assert classify((190, 50, 50)) == ColorCategory.RED
    assert classify((120, 50, 50)) == ColorCategory.BROWN
    assert classify((10, 10, 200)) == ColorCategory.BLUE
    assert classify((10, 10, 120)) == ColorCategory.DARK_BLUE
    assert classify((10, 200, 10)) == ColorCategory.GREEN
    assert classify((10, 200, 200)) == ColorCategory.LIGHT_GREEN


def test_alpha_channel_is_ignored():
    assert classify((0, 0, 255, 0)) == ColorCategory.BLUE


def test_ambiguous_categories_have_no_digit():
    for category in AMBIGUOUS_CATEGORIES:
        assert digit_for(category) is None


def test_pixel_average_window_and_depth_zero():
    pixels = np.zeros((10, 10, 3), dtype=np.uint8)
    pixels[5, 5] = (90, 45, 9)

    assert pixel_average(pixels, 5, 5, 0) == (90, 45, 9)
    # Fenêtre 3x3 : moyenne entière
    assert pixel_average(pixels, 5, 5, 1) == (10, 5, 1)
    # Fenêtre tronquée au coin
    assert pixel_average(pixels, 0, 0, 3) == (0, 0, 0)


def test_pixel_average_outside_image():
    pixels = np.zeros((4, 4, 3), dtype=np.uint8)
    with pytest.raises(ValueError):
        pixel_average(pixels, 4, 0)

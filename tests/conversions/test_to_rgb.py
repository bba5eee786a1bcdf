import math

from colorcomponents.conversions.to_rgb import (
    hsb_to_rgb,
    hsi_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    luma_chroma_hue_to_rgb,
    sextant_rgb,
)
from colorcomponents.types.color_types import ACHROMATIC
from ..samples import samples_sextant_boundaries


def test_sextant_orderings():
    c, x = 1.0, 0.25
    assert sextant_rgb(0.5, c, x) == (c, x, 0.0)
    assert sextant_rgb(1.5, c, x) == (x, c, 0.0)
    assert sextant_rgb(2.5, c, x) == (0.0, c, x)
    assert sextant_rgb(3.5, c, x) == (0.0, x, c)
    assert sextant_rgb(4.5, c, x) == (x, 0.0, c)
    assert sextant_rgb(5.5, c, x) == (c, 0.0, x)


def test_sextant_full_turn_is_sextant_zero():
    assert sextant_rgb(6.0, 1.0, 0.0) == (1.0, 0.0, 0.0)
    assert sextant_rgb(6.0, 1.0, 0.0, wrap_full_turn=False) == (0.0, 0.0, 0.0)
    assert sextant_rgb(5.99, 1.0, 0.0, wrap_full_turn=False) == (1.0, 0.0, 0.0)


def test_sextant_out_of_range_is_black():
    assert sextant_rgb(-0.1, 1.0, 1.0) == (0.0, 0.0, 0.0)
    assert sextant_rgb(6.5, 1.0, 1.0) == (0.0, 0.0, 0.0)
    assert sextant_rgb(math.nan, 1.0, 1.0) == (0.0, 0.0, 0.0)


## HSL

def test_hsl_sextant_boundaries():
    for hue, (r, g, b) in samples_sextant_boundaries.items():
        assert hsl_to_rgb(hue, 1.0, 0.5) == (r, g, b, 255)


def test_hsl_extremes():
    assert hsl_to_rgb(200, 1.0, 1.0) == (255, 255, 255, 255)
    assert hsl_to_rgb(200, 1.0, 0.0) == (0, 0, 0, 255)
    assert hsl_to_rgb(0, 0.0, 0.5) == (127, 127, 127, 255)


def test_hsl_clamps_inputs():
    assert hsl_to_rgb(-30, 2.0, 0.5) == hsl_to_rgb(0, 1.0, 0.5)
    assert hsl_to_rgb(400, 1.0, 0.5) == hsl_to_rgb(360, 1.0, 0.5)
    assert hsl_to_rgb(120, 1.0, 0.5, alpha=3.0)[3] == 255
    assert hsl_to_rgb(120, 1.0, 0.5, alpha=-1.0)[3] == 0


def test_hsl_alpha_truncates():
    assert hsl_to_rgb(0, 1.0, 0.5, alpha=0.5)[3] == 127


def test_hsl_achromatic_round_trip_within_one():
    for level in range(256):
        r, g, b, _ = hsl_to_rgb(0, 0, level / 255)
        assert r == g == b
        assert abs(r - level) <= 1


## HSV

def test_hsv_sextant_boundaries():
    for hue, (r, g, b) in samples_sextant_boundaries.items():
        assert hsv_to_rgb(hue, 1.0, 1.0) == (r, g, b, 255)


def test_hsv_zero_saturation_is_gray():
    assert hsv_to_rgb(200, 0.0, 0.5) == (127, 127, 127, 255)
    assert hsv_to_rgb(200, 0.0, 1.0) == (255, 255, 255, 255)


def test_hsb_is_hsv():
    assert hsb_to_rgb(33, 0.4, 0.9, 0.6) == hsv_to_rgb(33, 0.4, 0.9, 0.6)


## HSI

def test_hsi_achromatic_offset_only():
    assert hsi_to_rgb(ACHROMATIC, 1.0, 1.0) == (255, 255, 255, 255)
    assert hsi_to_rgb(ACHROMATIC, 0.0, 0.7) == (0, 0, 0, 255)
    assert hsi_to_rgb(ACHROMATIC, 0.5, 0.75) == (63, 63, 63, 255)


def test_hsi_with_hue():
    # chroma 1 on red plus an offset of 0.5, red saturates at 255
    assert hsi_to_rgb(0, 1.0, 0.5) == (255, 127, 127, 255)
    # sextant boundary at 60 degrees: Z = 1 halves the chroma
    assert hsi_to_rgb(60, 1.0, 0.5) == (255, 255, 127, 255)


def test_hsi_full_turn_leaves_only_offset():
    # H' = 6 is outside the HSI sextant table: R1 = G1 = B1 = 0, m = 0.4 - 0.2
    assert hsi_to_rgb(360, 0.8, 0.4) == (51, 51, 51, 255)
    assert hsi_to_rgb(360, 0.8, 0.4) != hsi_to_rgb(0, 0.8, 0.4)


## Luma/Chroma/Hue

def test_luma_chroma_hue_primaries():
    assert luma_chroma_hue_to_rgb(0, 1.0, 0.30) == (255, 0, 0, 255)
    assert luma_chroma_hue_to_rgb(120, 1.0, 0.59) == (0, 255, 0, 255)
    assert luma_chroma_hue_to_rgb(240, 1.0, 0.11) == (0, 0, 255, 255)


def test_luma_chroma_hue_360_is_remapped_to_zero():
    assert luma_chroma_hue_to_rgb(360, 1.0, 0.30) == luma_chroma_hue_to_rgb(0, 1.0, 0.30)


def test_luma_chroma_hue_clamps_to_359():
    assert luma_chroma_hue_to_rgb(359.5, 0.5, 0.5) == luma_chroma_hue_to_rgb(359, 0.5, 0.5)
    assert luma_chroma_hue_to_rgb(-10, 0.5, 0.5) == luma_chroma_hue_to_rgb(0, 0.5, 0.5)


def test_luma_chroma_hue_achromatic():
    assert luma_chroma_hue_to_rgb(ACHROMATIC, 0.7, 1.0) == (255, 255, 255, 255)
    assert luma_chroma_hue_to_rgb(ACHROMATIC, 0.7, 0.5) == (127, 127, 127, 255)


## NaN inputs

def test_nan_scalars_count_as_zero():
    nan = float("nan")
    assert hsl_to_rgb(0, nan, 0.5) == (127, 127, 127, 255)
    assert hsv_to_rgb(0, 1.0, nan) == (0, 0, 0, 255)
    assert hsl_to_rgb(0, 1.0, 0.5, alpha=nan) == (255, 0, 0, 0)


def test_nan_hue_is_black_chroma():
    nan = float("nan")
    assert hsv_to_rgb(nan, 1.0, 1.0) == (0, 0, 0, 255)
    assert hsi_to_rgb(nan, 1.0, 0.5) == (127, 127, 127, 255)

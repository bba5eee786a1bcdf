import pytest

from colorcomponents import ACHROMATIC, ColorComponents, HSL, HSV
from ..samples import samples_rgb_hsl, samples_rgb_hsv, samples_sextant_boundaries


def test_hsl_getter():
    for rgb, hsl_expected in samples_rgb_hsl.items():
        hsl = ColorComponents(*rgb).hsl
        assert isinstance(hsl, HSL)
        assert tuple(hsl) == pytest.approx(hsl_expected)


def test_hsv_getter():
    for rgb, hsv_expected in samples_rgb_hsv.items():
        hsv = ColorComponents(*rgb).hsv
        assert isinstance(hsv, HSV)
        assert tuple(hsv) == pytest.approx(hsv_expected)
        assert ColorComponents(*rgb).hsb == hsv


def test_hsla_extends_hsl():
    color = ColorComponents(200, 100, 50, 255)
    assert color.hsla[:3] == tuple(color.hsl)
    assert color.hsva[:3] == tuple(color.hsv)


def test_sextant_boundaries():
    for hue, rgb in samples_sextant_boundaries.items():
        assert ColorComponents.from_hsl(hue, 1.0, 0.5) == ColorComponents(*rgb)
        assert ColorComponents.from_hsv(hue, 1.0, 1.0) == ColorComponents(*rgb)
        assert ColorComponents.from_hsb(hue, 1.0, 1.0) == ColorComponents(*rgb)


def test_hsl_round_trip():
    for rgb in samples_rgb_hsl:
        color = ColorComponents(*rgb)
        restored = ColorComponents.from_hsl(*color.hsla)
        for a, e in zip(restored.value, color.value):
            assert abs(a - e) <= 1


def test_hsv_round_trip():
    for rgb in samples_rgb_hsv:
        color = ColorComponents(*rgb)
        restored = ColorComponents.from_hsv(*color.hsva)
        for a, e in zip(restored.value, color.value):
            assert abs(a - e) <= 1


def test_achromatic_hsl():
    for level in (0, 17, 128, 255):
        h, s, l = ColorComponents(level, level, level).hsl
        assert (h, s) == (0.0, 0.0)
        restored = ColorComponents.from_hsl(h, s, l)
        assert all(abs(c - level) <= 1 for c in restored.value[:3])


def test_hsi():
    assert ColorComponents.from_hsi(0, 1.0, 0.5).value == (255, 127, 127, 255)
    assert ColorComponents.from_hsi(ACHROMATIC, 1.0, 1.0) == ColorComponents(255, 255, 255)


def test_luma_chroma_hue():
    assert ColorComponents.from_luma_chroma_hue(240, 1.0, 0.11) == ColorComponents(0, 0, 255)
    assert ColorComponents.from_luma_chroma_hue(ACHROMATIC, 0.0, 0.0) == ColorComponents(0, 0, 0)


def test_luma_chroma_hue_round_trip():
    color = ColorComponents(200, 100, 50, 255)
    hue, chroma, luma = color.luma_chroma_hue
    assert hue == pytest.approx(20.0)
    restored = ColorComponents.from_luma_chroma_hue(hue, chroma, luma)
    for a, e in zip(restored.value, color.value):
        assert abs(a - e) <= 1


def test_gray_luma_chroma_hue_is_achromatic():
    assert ColorComponents(90, 90, 90).luma_chroma_hue.hue is ACHROMATIC


def test_hue_constructors_clamp():
    assert ColorComponents.from_hsv(-90, 5.0, 5.0) == ColorComponents(255, 0, 0)
    assert ColorComponents.from_hsl(720, 1.0, 0.5) == ColorComponents(255, 0, 0)

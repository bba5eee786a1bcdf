import numpy as np

from ..types.color_types import ACHROMATIC, HueInfo, LumaChromaHue
from ..types.limits import BYTE_MAX, LUMA_WEIGHTS, SEXTANT_DEGREES
from .numbers import byte_to_unit, clamp_unit

RED, GREEN, BLUE = 0, 1, 2


def _unit_channels(red: int, green: int, blue: int) -> np.ndarray:
    return np.array([red, green, blue], dtype=np.float64) / BYTE_MAX


def _hue_degrees(channels: np.ndarray, chroma: float) -> float:
    """
    Hue angle in degrees for unit RGB channels.

    The dominant channel is the first one equal to the maximum, checked in
    R, G, B order. Zero chroma gives a hue of 0.
    """
    if chroma == 0:
        return 0.0

    r, g, b = (float(c) for c in channels)
    dominant = int(np.argmax(channels))

    if dominant == RED:
        return SEXTANT_DEGREES * (((g - b) / chroma) % 6)
    elif dominant == GREEN:
        return SEXTANT_DEGREES * ((b - r) / chroma) + 120
    else:
        return SEXTANT_DEGREES * ((r - g) / chroma) + 240


def rgb_to_hue_info(red: int, green: int, blue: int, alpha: int) -> HueInfo:
    """
    Decompose byte channels into the shared hue quantities.

    Args:
        red, green, blue, alpha: Byte channels in [0, 255]

    Returns:
        HueInfo: hue in [0, 360), both saturations, lightness, value and alpha in [0, 1]
    """
    channels = _unit_channels(red, green, blue)

    x_max = float(channels.max())
    x_min = float(channels.min())
    chroma = x_max - x_min
    lightness = (x_max + x_min) / 2

    hue = _hue_degrees(channels, chroma)

    saturation_value = 0.0 if x_max == 0 else chroma / x_max

    if lightness == 0 or lightness == 1:
        saturation_lightness = 0.0
    else:
        saturation_lightness = (x_max - lightness) / min(lightness, 1 - lightness)

    return HueInfo(
        hue,
        clamp_unit(saturation_value),
        clamp_unit(saturation_lightness),
        lightness,
        x_max,
        byte_to_unit(alpha),
    )


def rgb_to_luma_chroma_hue(red: int, green: int, blue: int) -> LumaChromaHue:
    """
    Decompose byte channels into (hue, chroma, luma).

    The hue is ACHROMATIC for grays. Luma uses the same weights as the
    Luma/Chroma/Hue composer, so composing the result reproduces the input.
    """
    channels = _unit_channels(red, green, blue)
    chroma = float(channels.max() - channels.min())
    luma = float(np.dot(channels, LUMA_WEIGHTS))

    hue = ACHROMATIC if chroma == 0 else _hue_degrees(channels, chroma)
    return LumaChromaHue(hue, chroma, clamp_unit(luma))

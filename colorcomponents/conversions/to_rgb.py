import math
from typing import Tuple

import numpy as np

from ..types.color_types import Hue, Scalar, is_achromatic
from ..types.limits import BYTE_MAX, HUE_360, LCH_HUE_MAX, LUMA_WEIGHTS, SEXTANT_DEGREES
from .numbers import clamp_hue, clamp_unit, unit_to_byte

ByteRGBA = Tuple[int, int, int, int]
UnitRGB = Tuple[float, float, float]


def hue_prime(hue: float) -> float:
    """Hue expressed in sextants (degrees / 60)."""
    return hue / SEXTANT_DEGREES


def sextant_rgb(h_prime: float, chroma: float, x: float, wrap_full_turn: bool = True) -> UnitRGB:
    """
    Provisional (R1, G1, B1) for a hue given in sextants.

    With ``wrap_full_turn`` a hue of exactly 6 (360 degrees) is the same angle
    as 0 and lands in sextant 0. Without it, 6 yields black like any other
    value outside [0, 6).
    """
    upper_ok = h_prime <= 6 if wrap_full_turn else h_prime < 6
    if not (0 <= h_prime and upper_ok):
        return 0.0, 0.0, 0.0

    hue_section = int(math.floor(h_prime)) % 6

    if hue_section == 0:
        return chroma, x, 0.0
    elif hue_section == 1:
        return x, chroma, 0.0
    elif hue_section == 2:
        return 0.0, chroma, x
    elif hue_section == 3:
        return 0.0, x, chroma
    elif hue_section == 4:
        return x, 0.0, chroma
    else:
        return chroma, 0.0, x


def _zigzag(h_prime: float) -> float:
    # 1 - |H' mod 2 - 1|
    return 1 - abs((h_prime % 2) - 1)


def _to_bytes(rgb1: UnitRGB, m: float, alpha: Scalar) -> ByteRGBA:
    """Add the offset, scale to bytes, clamp to [0, 255] and truncate toward zero."""
    scaled = (np.asarray(rgb1, dtype=np.float64) + m) * BYTE_MAX
    r, g, b = np.clip(scaled, 0, BYTE_MAX).astype(np.uint8)
    return int(r), int(g), int(b), unit_to_byte(alpha)


## HSL to RGB

def hsl_to_rgb(hue: Scalar, saturation: Scalar, lightness: Scalar, alpha: Scalar = 1.0) -> ByteRGBA:
    """
    Convert HSL to RGBA bytes.

    Args:
        hue: Hue in degrees, clamped to [0, 360]
        saturation: Saturation, clamped to [0, 1]
        lightness: Lightness, clamped to [0, 1]
        alpha: Alpha, clamped to [0, 1]

    Returns:
        Tuple[int, int, int, int]: (r, g, b, a) in [0, 255]
    """
    h = clamp_hue(hue)
    s = clamp_unit(saturation)
    l = clamp_unit(lightness)

    chroma = (1 - abs(2 * l - 1)) * s
    hp = hue_prime(h)
    x = chroma * _zigzag(hp)

    m = l - chroma / 2
    return _to_bytes(sextant_rgb(hp, chroma, x), m, alpha)


## HSV to RGB

def hsv_to_rgb(hue: Scalar, saturation: Scalar, value: Scalar, alpha: Scalar = 1.0) -> ByteRGBA:
    """
    Convert HSV (HSB) to RGBA bytes.

    Args:
        hue: Hue in degrees, clamped to [0, 360]
        saturation: Saturation, clamped to [0, 1]
        value: Value (brightness), clamped to [0, 1]
        alpha: Alpha, clamped to [0, 1]

    Returns:
        Tuple[int, int, int, int]: (r, g, b, a) in [0, 255]
    """
    h = clamp_hue(hue)
    s = clamp_unit(saturation)
    v = clamp_unit(value)

    chroma = v * s
    hp = hue_prime(h)
    x = chroma * _zigzag(hp)

    m = v - chroma
    return _to_bytes(sextant_rgb(hp, chroma, x), m, alpha)


hsb_to_rgb = hsv_to_rgb


## HSI to RGB

def hsi_to_rgb(hue: Hue, saturation: Scalar, intensity: Scalar, alpha: Scalar = 1.0) -> ByteRGBA:
    """
    Convert HSI to RGBA bytes.

    An ACHROMATIC hue skips the chroma step entirely, leaving only the offset
    ``intensity - (1 - saturation)``. A hue of 360 is not wrapped to 0, so it
    also leaves only the offset.
    """
    s = clamp_unit(saturation)
    i = clamp_unit(intensity)

    if is_achromatic(hue):
        rgb1 = (0.0, 0.0, 0.0)
    else:
        hp = hue_prime(clamp_hue(hue))
        z = _zigzag(hp)
        chroma = (2 * i * s) / (1 + z)
        rgb1 = sextant_rgb(hp, chroma, chroma * z, wrap_full_turn=False)

    m = i - (1 - s)
    return _to_bytes(rgb1, m, alpha)


## Luma/Chroma/Hue to RGB

def luma_chroma_hue_to_rgb(hue: Hue, chroma: Scalar, luma: Scalar, alpha: Scalar = 1.0) -> ByteRGBA:
    """
    Convert Luma/Chroma/Hue (Y'CH) to RGBA bytes.

    The formula needs a hue in [0, 360): 360 is remapped to 0 and the result is
    clamped to [0, 359]. The offset subtracts the luma of the provisional triple.
    """
    c = clamp_unit(chroma)
    y_prime = clamp_unit(luma)

    if is_achromatic(hue):
        rgb1 = (0.0, 0.0, 0.0)
    else:
        h = clamp_hue(0 if hue == HUE_360 else hue, LCH_HUE_MAX)
        hp = hue_prime(h)
        rgb1 = sextant_rgb(hp, c, c * _zigzag(hp))

    r1, g1, b1 = rgb1
    wr, wg, wb = LUMA_WEIGHTS
    m = y_prime - (wr * r1 + wg * g1 + wb * b1)
    return _to_bytes(rgb1, m, alpha)

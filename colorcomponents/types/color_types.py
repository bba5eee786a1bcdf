from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Union

Scalar = int | float


class Achromatic(Enum):
    """Marker for a color whose hue is undefined (zero chroma)."""
    ACHROMATIC = "achromatic"

    def __repr__(self) -> str:
        return "ACHROMATIC"


ACHROMATIC = Achromatic.ACHROMATIC

# A defined angle in degrees, or ACHROMATIC
Hue = Union[float, Achromatic]


def is_achromatic(hue: Hue) -> bool:
    return hue is ACHROMATIC


class ColorSpace(str, Enum):
    RGBA = "rgba"
    HEX = "hex"
    INT = "int"
    HSL = "hsl"
    HSLA = "hsla"
    HSV = "hsv"
    HSVA = "hsva"
    HSB = "hsb"
    HSBA = "hsba"
    HSI = "hsi"
    LCH = "lch"


class HSL(NamedTuple):
    hue: float
    saturation: float
    lightness: float


class HSLA(NamedTuple):
    hue: float
    saturation: float
    lightness: float
    alpha: float


class HSV(NamedTuple):
    hue: float
    saturation: float
    value: float


class HSVA(NamedTuple):
    hue: float
    saturation: float
    value: float
    alpha: float


HSB = HSV
HSBA = HSVA


class HSI(NamedTuple):
    hue: Hue
    saturation: float
    intensity: float


class LumaChromaHue(NamedTuple):
    hue: Hue
    chroma: float
    luma: float


class HueInfo(NamedTuple):
    """Everything the decomposer derives from one RGBA record.

    ``saturation_value`` is the HSV saturation and ``saturation_lightness`` the HSL
    one; ``value`` is the largest unit channel. All fields except ``hue`` are in
    ``[0, 1]``.
    """
    hue: float
    saturation_value: float
    saturation_lightness: float
    lightness: float
    value: float
    alpha: float

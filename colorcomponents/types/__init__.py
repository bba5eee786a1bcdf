from .color_types import (
    ACHROMATIC,
    Achromatic,
    ColorSpace,
    Hue,
    HueInfo,
    HSB,
    HSBA,
    HSI,
    HSL,
    HSLA,
    HSV,
    HSVA,
    LumaChromaHue,
    is_achromatic,
)

__all__ = [
    "ACHROMATIC",
    "Achromatic",
    "ColorSpace",
    "Hue",
    "HueInfo",
    "HSB",
    "HSBA",
    "HSI",
    "HSL",
    "HSLA",
    "HSV",
    "HSVA",
    "LumaChromaHue",
    "is_achromatic",
]

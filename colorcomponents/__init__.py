"""ColorComponents: RGBA color records with hex, HSL, HSV, HSI and luma/chroma/hue conversions."""

from .colors import ColorComponents
from .types.color_types import (
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
)
from .conversions import (
    rgb_to_hue_info,
    rgb_to_luma_chroma_hue,
    hsl_to_rgb,
    hsv_to_rgb,
    hsb_to_rgb,
    hsi_to_rgb,
    luma_chroma_hue_to_rgb,
    parse_hex_string,
    format_hex_string,
    pack_hex_int,
    unpack_hex_with_alpha,
    unpack_hex_without_alpha,
    convert,
)

__version__ = "0.1.0"

__all__ = [
    # color record
    "ColorComponents",
    # hue types
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
    # conversions
    "rgb_to_hue_info",
    "rgb_to_luma_chroma_hue",
    "hsl_to_rgb",
    "hsv_to_rgb",
    "hsb_to_rgb",
    "hsi_to_rgb",
    "luma_chroma_hue_to_rgb",
    "parse_hex_string",
    "format_hex_string",
    "pack_hex_int",
    "unpack_hex_with_alpha",
    "unpack_hex_without_alpha",
    "convert",
]

"""
ColorComponents Conversions
===========================

Conversion engine between RGBA byte channels and the supported representations.
Every conversion passes through the four byte channels; there is no direct
hue-to-hue or hex-to-hex path.

Conversion Functions
-------------------

RGB → hue models (decomposer):
    rgb_to_hue_info(r, g, b, a)
        Hue, HSV and HSL saturation, lightness, value and alpha in one pass
    rgb_to_luma_chroma_hue(r, g, b)
        Luma, chroma and hue (ACHROMATIC for grays)

Hue models → RGB (composer):
    hsl_to_rgb(h, s, l, a=1.0)
    hsv_to_rgb(h, s, v, a=1.0)          (alias: hsb_to_rgb)
    hsi_to_rgb(h, s, i, a=1.0)          h may be ACHROMATIC
    luma_chroma_hue_to_rgb(h, c, y, a=1.0)  h may be ACHROMATIC

Hex codec:
    parse_hex_string(text)              RRGGBBAA integer or None
    format_hex_string(r, g, b, a, with_alpha=False)
    pack_hex_int(r, g, b, a, with_alpha=True)
    unpack_hex_with_alpha(value)
    unpack_hex_without_alpha(value)

High-Level API
-------------
    convert(color, from_space, to_space)
        Universal converter routed through ColorComponents

Domain Policy
-------------
Inputs are never rejected for being out of range. Hues clamp to [0, 360],
unit scalars and alpha to [0, 1], and byte results clamp to [0, 255] before
truncating toward zero.

Examples
--------
>>> from colorcomponents.conversions import hsv_to_rgb, rgb_to_hue_info
>>> hsv_to_rgb(300, 1.0, 1.0)
(255, 0, 255, 255)
>>> rgb_to_hue_info(255, 0, 255, 255).hue
300.0
>>> from colorcomponents.conversions import convert
>>> convert("#00FF00", "hex", "hsl")
HSL(hue=120.0, saturation=1.0, lightness=0.5)
"""

# RGB → hue models
from .to_hue import rgb_to_hue_info, rgb_to_luma_chroma_hue

# Hue models → RGB
from .to_rgb import (
    hsl_to_rgb,
    hsv_to_rgb,
    hsb_to_rgb,
    hsi_to_rgb,
    luma_chroma_hue_to_rgb,
    sextant_rgb,
)

# Hex codec
from .hex_codec import (
    parse_hex_string,
    format_hex_string,
    pack_hex_int,
    unpack_hex_with_alpha,
    unpack_hex_without_alpha,
)

# High-level API
from .wrapper import convert, to_components, from_components

# Types
from ..types.color_types import ColorSpace

__all__ = [
    # RGB → hue models
    'rgb_to_hue_info',
    'rgb_to_luma_chroma_hue',

    # Hue models → RGB
    'hsl_to_rgb',
    'hsv_to_rgb',
    'hsb_to_rgb',
    'hsi_to_rgb',
    'luma_chroma_hue_to_rgb',
    'sextant_rgb',

    # Hex codec
    'parse_hex_string',
    'format_hex_string',
    'pack_hex_int',
    'unpack_hex_with_alpha',
    'unpack_hex_without_alpha',

    # High-level API
    'convert',
    'to_components',
    'from_components',

    # Types
    'ColorSpace',
]

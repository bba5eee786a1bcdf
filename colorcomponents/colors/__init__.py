"""
ColorComponents Color Record
============================

``ColorComponents`` holds one color as four byte channels (red, green, blue,
alpha) and converts it to and from every supported representation.

Features
--------
- Immutable instances (frozen after initialization)
- Byte channels clamped to [0, 255] on construction
- Hex strings (#RGB, #RRGGBB, #RRGGBBAA) and packed hex integers
- HSL, HSV/HSB, HSI and Luma/Chroma/Hue constructors
- HSL/HSLA, HSV/HSVA, HSB/HSBA and Luma/Chroma/Hue getters
- Equality, hashing and pickling through the packed RRGGBBAA integer

Usage
-----
>>> from colorcomponents import ColorComponents, ACHROMATIC
>>>
>>> color = ColorComponents(255, 136, 0)
>>> color.hex_string
'#FF8800'
>>> color.to_hex_string(with_alpha=True)
'#FF8800FF'
>>> hex(color.hex_int())
'0xff8800ff'
>>>
>>> ColorComponents.from_hex_string("F80") == ColorComponents.from_hex_string("#FF8800")
True
>>> ColorComponents.from_hex_string("12") is None
True
>>>
>>> ColorComponents.from_hsv(120, 1.0, 1.0).value
(0, 255, 0, 255)
>>> ColorComponents.from_hsi(ACHROMATIC, 1.0, 1.0).value
(255, 255, 255, 255)
>>>
>>> half = color.with_alpha(0.5)
>>> half.alpha, color.alpha
(127, 255)

Notes
-----
- All hue math runs on unit floats; bytes are produced by clamping to
  [0, 255] and truncating toward zero
- A round trip through hue space may land one step below the original byte
- Hex strings and integers always round-trip exactly
"""

from .color_base import ColorComponents
from . import color  # noqa: F401  attaches the hue constructors and getters

__all__ = ['ColorComponents']

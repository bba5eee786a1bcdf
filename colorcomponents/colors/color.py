from __future__ import annotations
from ..conversions.to_hue import rgb_to_hue_info, rgb_to_luma_chroma_hue
from ..conversions.to_rgb import hsi_to_rgb, hsl_to_rgb, hsv_to_rgb, luma_chroma_hue_to_rgb
from ..types.color_types import HSL, HSLA, HSV, HSVA, Hue, HueInfo, LumaChromaHue, Scalar
from .color_base import ColorComponents

## Hue constructors

def color_from_hsl(cls: type[ColorComponents], hue: Scalar, saturation: Scalar, lightness: Scalar,
                   alpha: Scalar = 1.0) -> ColorComponents:
    """
    Build a color from HSL.

    Args:
        hue: Degrees, clamped to [0, 360]
        saturation, lightness, alpha: Clamped to [0, 1]
    """
    return cls(*hsl_to_rgb(hue, saturation, lightness, alpha))


def color_from_hsv(cls: type[ColorComponents], hue: Scalar, saturation: Scalar, value: Scalar,
                   alpha: Scalar = 1.0) -> ColorComponents:
    """
    Build a color from HSV.

    Args:
        hue: Degrees, clamped to [0, 360]
        saturation, value, alpha: Clamped to [0, 1]
    """
    return cls(*hsv_to_rgb(hue, saturation, value, alpha))


def color_from_hsb(cls: type[ColorComponents], hue: Scalar, saturation: Scalar, brightness: Scalar,
                   alpha: Scalar = 1.0) -> ColorComponents:
    """HSB is HSV under another name."""
    return cls(*hsv_to_rgb(hue, saturation, brightness, alpha))


def color_from_hsi(cls: type[ColorComponents], hue: Hue, saturation: Scalar, intensity: Scalar,
                   alpha: Scalar = 1.0) -> ColorComponents:
    """
    Build a color from HSI.

    Pass ``ACHROMATIC`` as the hue for a color without one.
    """
    return cls(*hsi_to_rgb(hue, saturation, intensity, alpha))


def color_from_luma_chroma_hue(cls: type[ColorComponents], hue: Hue, chroma: Scalar, luma: Scalar,
                               alpha: Scalar = 1.0) -> ColorComponents:
    """
    Build a color from luma, chroma and hue.

    Pass ``ACHROMATIC`` as the hue for a color without one.
    """
    return cls(*luma_chroma_hue_to_rgb(hue, chroma, luma, alpha))


## Hue getters

def hue_info(self: ColorComponents) -> HueInfo:
    return rgb_to_hue_info(*self.value)


def hsl(self: ColorComponents) -> HSL:
    info = self.hue_info
    return HSL(info.hue, info.saturation_lightness, info.lightness)


def hsla(self: ColorComponents) -> HSLA:
    info = self.hue_info
    return HSLA(info.hue, info.saturation_lightness, info.lightness, info.alpha)


def hsv(self: ColorComponents) -> HSV:
    info = self.hue_info
    return HSV(info.hue, info.saturation_value, info.value)


def hsva(self: ColorComponents) -> HSVA:
    info = self.hue_info
    return HSVA(info.hue, info.saturation_value, info.value, info.alpha)


def luma_chroma_hue(self: ColorComponents) -> LumaChromaHue:
    return rgb_to_luma_chroma_hue(self.red, self.green, self.blue)


ColorComponents.from_hsl = classmethod(color_from_hsl)
ColorComponents.from_hsv = classmethod(color_from_hsv)
ColorComponents.from_hsb = classmethod(color_from_hsb)
ColorComponents.from_hsi = classmethod(color_from_hsi)
ColorComponents.from_luma_chroma_hue = classmethod(color_from_luma_chroma_hue)

ColorComponents.hue_info = property(hue_info)
ColorComponents.hsl = property(hsl)
ColorComponents.hsla = property(hsla)
ColorComponents.hsv = property(hsv)
ColorComponents.hsva = property(hsva)
ColorComponents.hsb = property(hsv)
ColorComponents.hsba = property(hsva)
ColorComponents.luma_chroma_hue = property(luma_chroma_hue)

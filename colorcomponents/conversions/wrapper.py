from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Dict, Sequence, Union

from ..types.color_types import ColorSpace

if TYPE_CHECKING:
    from ..colors.color_base import ColorComponents

ColorInput = Union[str, int, Sequence[Any]]

# Number of values each tuple space accepts (alpha optional where two are listed)
SPACE_ARITY: Dict[ColorSpace, tuple[int, ...]] = {
    ColorSpace.RGBA: (3, 4),
    ColorSpace.HSL: (3,),
    ColorSpace.HSLA: (4,),
    ColorSpace.HSV: (3,),
    ColorSpace.HSVA: (4,),
    ColorSpace.HSB: (3,),
    ColorSpace.HSBA: (4,),
    ColorSpace.HSI: (3, 4),
    ColorSpace.LCH: (3, 4),
}


def resolve_space(space: Union[str, ColorSpace]) -> ColorSpace:
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(str(space).lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {space}") from None


def _check_arity(values: Sequence[Any], space: ColorSpace) -> None:
    expected = SPACE_ARITY[space]
    if len(values) not in expected:
        allowed = " or ".join(str(n) for n in expected)
        raise ValueError(f"{space.value} expects {allowed} values, got {len(values)}")


def _from_hex(cls: type[ColorComponents], text: str) -> ColorComponents:
    color = cls.from_hex_string(text)
    if color is None:
        raise ValueError(f"Invalid hex color: {text!r}")
    return color


def _readers() -> Dict[ColorSpace, Callable[[Any], ColorComponents]]:
    from ..colors import ColorComponents  # local import to avoid cycles

    return {
        ColorSpace.RGBA: lambda v: ColorComponents(*v),
        ColorSpace.HEX: lambda v: _from_hex(ColorComponents, v),
        ColorSpace.INT: ColorComponents.from_hex_with_alpha,
        ColorSpace.HSL: lambda v: ColorComponents.from_hsl(*v),
        ColorSpace.HSLA: lambda v: ColorComponents.from_hsl(*v),
        ColorSpace.HSV: lambda v: ColorComponents.from_hsv(*v),
        ColorSpace.HSVA: lambda v: ColorComponents.from_hsv(*v),
        ColorSpace.HSB: lambda v: ColorComponents.from_hsb(*v),
        ColorSpace.HSBA: lambda v: ColorComponents.from_hsb(*v),
        ColorSpace.HSI: lambda v: ColorComponents.from_hsi(*v),
        ColorSpace.LCH: lambda v: ColorComponents.from_luma_chroma_hue(*v),
    }


# HSI has a composer but no decomposer
WRITERS: Dict[ColorSpace, Callable[[ColorComponents], Any]] = {
    ColorSpace.RGBA: lambda c: c.value,
    ColorSpace.HEX: lambda c: c.to_hex_string(with_alpha=True),
    ColorSpace.INT: lambda c: c.raw_value,
    ColorSpace.HSL: lambda c: c.hsl,
    ColorSpace.HSLA: lambda c: c.hsla,
    ColorSpace.HSV: lambda c: c.hsv,
    ColorSpace.HSVA: lambda c: c.hsva,
    ColorSpace.HSB: lambda c: c.hsb,
    ColorSpace.HSBA: lambda c: c.hsba,
    ColorSpace.LCH: lambda c: c.luma_chroma_hue,
}


def to_components(color: ColorInput, from_space: Union[str, ColorSpace]) -> ColorComponents:
    """
    Build the RGBA record for a color given in ``from_space``.

    Raises:
        ValueError: Unknown space, wrong number of values or an unparsable hex string
    """
    space = resolve_space(from_space)
    if space in SPACE_ARITY:
        _check_arity(color, space)  # type: ignore[arg-type]
    return _readers()[space](color)


def from_components(components: ColorComponents, to: Union[str, ColorSpace]) -> Any:
    """Read a representation of ``components`` in the target space."""
    space = resolve_space(to)
    writer = WRITERS.get(space)
    if writer is None:
        raise ValueError(f"Conversion to {space.value} is not supported")
    return writer(components)


def convert(color: ColorInput, from_space: Union[str, ColorSpace], to_space: Union[str, ColorSpace]) -> Any:
    """
    Convert a color between representations.

    Every conversion goes through the RGBA record; there is no direct
    hue-to-hue or hex-to-hex path.

    Args:
        color: A hex string, a packed RRGGBBAA integer or a tuple of values
        from_space: Space of ``color`` (e.g. "hex", "rgba", "hsl", "lch")
        to_space: Target space

    Returns:
        The target representation: a tuple, named tuple, string or integer
    """
    return from_components(to_components(color, from_space), to_space)

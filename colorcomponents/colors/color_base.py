from __future__ import annotations
from typing import Callable, ClassVar, Optional, Sequence, Tuple

from ..conversions.hex_codec import (
    format_hex_string,
    pack_hex_int,
    parse_hex_string,
    unpack_hex_with_alpha,
    unpack_hex_without_alpha,
)
from ..conversions.numbers import byte_to_unit, clamp_byte, unit_to_byte
from ..types.color_types import HSBA, HSB, HSL, HSLA, HSV, HSVA, HueInfo, LumaChromaHue, Scalar
from ..types.limits import OPAQUE_ALPHA


class ColorComponents:
    """
    A color as four byte channels: red, green, blue and alpha (0-255 each).

    Instances are immutable. Equality and hashing use the packed RRGGBBAA integer,
    which is also the persisted form (see ``raw_value``).
    """
    __slots__ = ('_red', '_green', '_blue', '_alpha', '_is_frozen')

    # attached in colors/color.py
    from_hsl: ClassVar[Callable[..., ColorComponents]]
    from_hsv: ClassVar[Callable[..., ColorComponents]]
    from_hsb: ClassVar[Callable[..., ColorComponents]]
    from_hsi: ClassVar[Callable[..., ColorComponents]]
    from_luma_chroma_hue: ClassVar[Callable[..., ColorComponents]]
    hue_info: HueInfo
    hsl: HSL
    hsla: HSLA
    hsv: HSV
    hsva: HSVA
    hsb: HSB
    hsba: HSBA
    luma_chroma_hue: LumaChromaHue

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = OPAQUE_ALPHA) -> None:
        # type enforcement and clamp
        self._red = clamp_byte(red)
        self._green = clamp_byte(green)
        self._blue = clamp_byte(blue)
        self._alpha = clamp_byte(alpha)

        # freeze instance — no more writes allowed
        self._is_frozen = True

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def red(self) -> int:
        return self._red

    @property
    def green(self) -> int:
        return self._green

    @property
    def blue(self) -> int:
        return self._blue

    @property
    def alpha(self) -> int:
        return self._alpha

    @property
    def value(self) -> Tuple[int, int, int, int]:
        return self._red, self._green, self._blue, self._alpha

    # ------------------ ALPHA ------------------
    def with_alpha(self, alpha: Scalar) -> ColorComponents:
        """
        Return a copy with a new alpha; the receiver is left untouched.

        Args:
            alpha: Opacity in [0, 1], clamped, scaled to a byte and truncated.
        """
        return self.__class__(self._red, self._green, self._blue, unit_to_byte(alpha))

    # ------------------ HEX STRINGS ------------------
    @classmethod
    def from_hex_string(cls, hex_string: str) -> Optional[ColorComponents]:
        """
        Parse ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` (``#`` optional).

        Returns None when the string has another length or non-hex characters.
        """
        packed = parse_hex_string(hex_string)
        if packed is None:
            return None
        return cls.from_hex_with_alpha(packed)

    @property
    def hex_string(self) -> str:
        """``#RRGGBB`` without alpha."""
        return self.to_hex_string(with_alpha=False)

    def to_hex_string(self, with_alpha: bool = False) -> str:
        return format_hex_string(*self.value, with_alpha=with_alpha)

    # ------------------ HEX INTEGERS ------------------
    @classmethod
    def from_hex_with_alpha(cls, hex_int: int) -> ColorComponents:
        """Build from an RRGGBBAA integer such as ``0xFF8800FF``."""
        return cls(*unpack_hex_with_alpha(hex_int))

    @classmethod
    def from_hex_without_alpha(cls, hex_int: int) -> ColorComponents:
        """Build from an RRGGBB integer such as ``0xFF8800``; alpha is opaque."""
        return cls(*unpack_hex_without_alpha(hex_int))

    def hex_int(self, with_alpha: bool = True) -> int:
        return pack_hex_int(*self.value, with_alpha=with_alpha)

    # ------------------ RAW VALUE ------------------
    @property
    def raw_value(self) -> int:
        return self.hex_int(with_alpha=True)

    @classmethod
    def from_raw_value(cls, raw_value: int) -> ColorComponents:
        return cls.from_hex_with_alpha(raw_value)

    # ------------------ UNIT ADAPTER ------------------
    @property
    def unit_components(self) -> Tuple[float, float, float, float]:
        """Channels as floats in [0, 1], the form platform color types expect."""
        return tuple(byte_to_unit(c) for c in self.value)  # type: ignore

    @classmethod
    def from_unit_components(cls, components: Sequence[Scalar]) -> ColorComponents:
        """
        Build from unit float components.

        Two components are gray plus alpha, three are RGB (opaque) and four are RGBA.
        """
        n = len(components)
        if n == 2:
            gray, a = components
            values = (gray, gray, gray, a)
        elif n == 3:
            values = (*components, 1.0)
        elif n == 4:
            values = tuple(components)
        else:
            raise ValueError(f"{cls.__name__} expects 2, 3 or 4 unit components, got {n}")
        return cls(*(unit_to_byte(v) for v in values))

    # ------------------ PROTOCOL ------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorComponents):
            return NotImplemented
        return self.raw_value == other.raw_value

    def __hash__(self) -> int:
        return hash(self.raw_value)

    def __reduce__(self):
        return (self.__class__, self.value)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(red={self._red}, green={self._green}, "
            f"blue={self._blue}, alpha={self._alpha})"
        )

"""
Hex string and packed integer codec.

Everything here is pure bit and digit repacking, so a record always survives a
round trip through either form unchanged.
"""
import re
import warnings
from typing import Optional, Tuple

from ..types.limits import (
    HEX_SHORT_DIGITS,
    HEX_WITH_ALPHA_DIGITS,
    HEX_WITHOUT_ALPHA_DIGITS,
    INT32_MIN,
    MASK_24,
    MASK_32,
    channel_shifts_with_alpha,
    channel_shifts_without_alpha,
    OPAQUE_ALPHA,
)

ByteRGBA = Tuple[int, int, int, int]

_HEX_DIGITS = re.compile(
    "|".join(
        f"[0-9A-F]{{{n}}}"
        for n in (HEX_SHORT_DIGITS, HEX_WITHOUT_ALPHA_DIGITS, HEX_WITH_ALPHA_DIGITS)
    )
)


def normalize_hex_digits(text: str) -> Optional[str]:
    """
    Normalize a hex color string to eight uppercase RRGGBBAA digits.

    Whitespace around the string and every ``#`` are dropped. Three digits are
    doubled (``F0A`` -> ``FF00AA``) and six digits get an opaque ``FF`` alpha.
    Returns None for any other length or for non-hex characters.
    """
    if not isinstance(text, str):
        raise TypeError(f"Hex color must be a string, got {type(text).__name__}")

    digits = text.strip().upper().replace("#", "")
    if _HEX_DIGITS.fullmatch(digits) is None:
        return None

    if len(digits) == HEX_SHORT_DIGITS:
        digits = "".join(d * 2 for d in digits)
    if len(digits) == HEX_WITHOUT_ALPHA_DIGITS:
        digits += "FF"
    return digits


def parse_hex_string(text: str) -> Optional[int]:
    """Parse a 3, 6 or 8 digit hex color into its packed RRGGBBAA integer."""
    digits = normalize_hex_digits(text)
    if digits is None:
        return None
    return int(digits, 16)


def format_hex_string(red: int, green: int, blue: int, alpha: int, with_alpha: bool = False) -> str:
    """Format byte channels as ``#RRGGBB`` or ``#RRGGBBAA``."""
    channels = (red, green, blue, alpha) if with_alpha else (red, green, blue)
    return "#" + "".join(f"{c:02X}" for c in channels)


def pack_hex_int(red: int, green: int, blue: int, alpha: int, with_alpha: bool = True) -> int:
    """Pack byte channels big-endian: RRGGBBAA, or RRGGBB when alpha is left out."""
    if with_alpha:
        shifts = channel_shifts_with_alpha
        return (
            (red << shifts["red"])
            | (green << shifts["green"])
            | (blue << shifts["blue"])
            | (alpha << shifts["alpha"])
        )
    shifts = channel_shifts_without_alpha
    return (red << shifts["red"]) | (green << shifts["green"]) | (blue << shifts["blue"])


def _warn_dropped_bits(value: int, form: str) -> None:
    warnings.warn(
        f"{value:#x} does not fit a packed {form} color; "
        "extra bits are ignored",
        UserWarning,
        stacklevel=3,
    )


def unpack_hex_with_alpha(value: int) -> ByteRGBA:
    """
    Unpack an RRGGBBAA integer.

    Signed 32-bit values unpack by their two's complement bits.
    """
    if not INT32_MIN <= value <= MASK_32:
        _warn_dropped_bits(value, "RRGGBBAA")

    shifts = channel_shifts_with_alpha
    return (
        (value >> shifts["red"]) & 0xFF,
        (value >> shifts["green"]) & 0xFF,
        (value >> shifts["blue"]) & 0xFF,
        (value >> shifts["alpha"]) & 0xFF,
    )


def unpack_hex_without_alpha(value: int) -> ByteRGBA:
    """Unpack an RRGGBB integer; alpha is always opaque."""
    if not 0 <= value <= MASK_24:
        _warn_dropped_bits(value, "RRGGBB")

    shifts = channel_shifts_without_alpha
    return (
        (value >> shifts["red"]) & 0xFF,
        (value >> shifts["green"]) & 0xFF,
        (value >> shifts["blue"]) & 0xFF,
        OPAQUE_ALPHA,
    )

"""Clamping helpers shared by every conversion.

Out-of-domain inputs are never rejected; they are pulled back to the nearest
valid value before any arithmetic happens. NaN counts as 0 everywhere except
hue, where it passes through and composes to black.
"""
import math

from boundednumbers import UnitFloat, clamp

from ..types.color_types import Scalar
from ..types.limits import BYTE_MAX, HUE_360


def _nan_to_zero(value: Scalar) -> float:
    value = float(value)
    return 0.0 if math.isnan(value) else value


def clamp_unit(value: Scalar) -> float:
    """Clamp a scalar to ``[0, 1]``."""
    return float(UnitFloat(_nan_to_zero(value)))


def clamp_hue(value: Scalar, upper: Scalar = HUE_360) -> float:
    """Clamp a hue angle in degrees to ``[0, upper]``."""
    value = float(value)
    if math.isnan(value):
        return value
    return float(clamp(value, 0, upper))


def clamp_byte(value: Scalar) -> int:
    return int(clamp(_nan_to_zero(value), 0, BYTE_MAX))


def unit_to_byte(value: Scalar) -> int:
    """Scale a unit scalar to a byte, truncating toward zero."""
    return int(clamp_unit(value) * BYTE_MAX)


def byte_to_unit(value: int) -> float:
    return value / BYTE_MAX

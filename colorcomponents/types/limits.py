# No dependencies
BYTE_MAX = 255

HUE_360 = 360
SEXTANT_DEGREES = 60
# Luma/Chroma/Hue composition is only defined for hues in [0, 360)
LCH_HUE_MAX = 359

# Rec. 601 luma weights (R, G, B)
LUMA_WEIGHTS = (0.30, 0.59, 0.11)

OPAQUE_ALPHA = BYTE_MAX

HEX_WITH_ALPHA_DIGITS = 8
HEX_WITHOUT_ALPHA_DIGITS = 6
HEX_SHORT_DIGITS = 3

MASK_32 = 0xFFFFFFFF
MASK_24 = 0xFFFFFF
INT32_MIN = -(1 << 31)

channel_shifts_with_alpha = {
    "red": 24,
    "green": 16,
    "blue": 8,
    "alpha": 0,
}

channel_shifts_without_alpha = {
    "red": 16,
    "green": 8,
    "blue": 0,
}

"""Basic colorcomponents usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from colorcomponents import ACHROMATIC, ColorComponents, convert


def demonstrate_hex() -> None:
    # Parse the three hex forms and write them back.
    accent = ColorComponents.from_hex_string("#FF8800")
    print("Parsed:", accent)
    print("Short form:", ColorComponents.from_hex_string("F80"))
    print("With alpha:", accent.with_alpha(0.5).to_hex_string(with_alpha=True))
    print("Packed int:", hex(accent.hex_int()))
    print("Invalid string:", ColorComponents.from_hex_string("12"))


def demonstrate_hue_models() -> None:
    accent = ColorComponents(200, 100, 50)
    print("HSL:", accent.hsl)
    print("HSV:", accent.hsv)
    print("Luma/Chroma/Hue:", accent.luma_chroma_hue)

    print("From HSL:", ColorComponents.from_hsl(20, 0.6, 0.49))
    print("From HSI (no hue):", ColorComponents.from_hsi(ACHROMATIC, 0.5, 0.75))
    print("From luma/chroma/hue:", ColorComponents.from_luma_chroma_hue(240, 1.0, 0.11))


def demonstrate_convert() -> None:
    print("hex -> hsla:", convert("#F0A", "hex", "hsla"))
    print("hsl -> int:", hex(convert((120, 1.0, 0.5), "hsl", "int")))


if __name__ == "__main__":
    demonstrate_hex()
    demonstrate_hue_models()
    demonstrate_convert()

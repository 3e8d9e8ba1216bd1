"""Basic chromascheme usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromascheme import (
    ColorRGB,
    ColorUnitRGB,
    ColorUnitGray,
    Palette,
    SchemeRegistry,
    find_schemes,
    load_scheme,
    locate,
    reverse,
    sample,
)


def demonstrate_colors() -> None:
    # Typed colors convert between spaces and measure their distance.
    accent = ColorRGB((255, 128, 64))
    print("RGB -> HSV (int):", accent.convert("hsv").value)
    print("RGB -> Lab:", accent.convert("lab").value)
    print("Distance to white:", accent.difference(ColorRGB((255, 255, 255))))


def demonstrate_sampling() -> None:
    fire = Palette(
        [ColorUnitRGB((0, 0, 0)), ColorUnitRGB((1, 0, 0)), ColorUnitRGB((1, 1, 0))],
        "custom",
        "black to red to yellow",
    )
    print("fire at 0.75:", sample(fire, 0.75).value)

    # Temperatures in kelvin, spread over the whole palette
    temps = np.array([[280.0, 300.0], [320.0, 340.0]])
    print("extrema image shape:", sample(fire, temps, "extrema").shape)
    print("explicit range:", sample(fire, 310.0, (280.0, 340.0)).value)

    mask = np.array([True, False, True])
    print("mask colors:", sample(fire, mask).value)
    print("gray input:", sample(fire, ColorUnitGray(0.5)).value)


def demonstrate_locate() -> None:
    bw = Palette.linspace(ColorUnitRGB((0, 0, 0)), ColorUnitRGB((1, 1, 1)), 9)
    teal = ColorUnitRGB((0.0, 0.5, 0.5))
    print("teal in black/white:", locate(bw, teal))
    print("teal in white/black:", locate(reverse(bw), teal))
    print("teal in kelvin:", locate(bw, teal, (280.0, 340.0)))


def demonstrate_registry() -> None:
    schemes = SchemeRegistry()
    load_scheme(schemes, "twotone", [(0, 0, 0), (1, 1, 1)], "custom", "black and white")
    load_scheme(schemes, "ocean", [(0, 0, 0.2), (0, 0.4, 1)], "sequential", "navy to sea blue")
    for match in find_schemes(schemes, "blue|white"):
        print(f"{match.name}: matched {match.field} ({match.text})")


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_sampling()
    demonstrate_locate()
    demonstrate_registry()

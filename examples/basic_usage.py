"""Basic colorrange usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from colorrange import (
    ColorRGB,
    ColorRange,
    blend,
    to_color,
    temperature_color_range,
)


def demonstrate_colors() -> None:
    # Parse the same color written four ways.
    for raw in ({"r": 255, "g": 128, "b": 64}, "rgb(255, 128, 64)", "#ff8040", [255, 128, 64]):
        print(f"{raw!r:>35} -> {to_color(raw)}")

    accent = ColorRGB(255, 128, 64)
    print("With alpha:", accent.with_alpha(0.4), accent.with_alpha(0.4).to_hex_string())
    print("Blend with blue:", blend(accent, ColorRGB(0, 0, 255), 0.25))


def demonstrate_ranges() -> None:
    temperatures = temperature_color_range()
    for celsius in (-30, -5, 13, 25, 45):
        color = temperatures.get_color(celsius)
        print(f"{celsius:>4} C -> {color.to_hex_string()} {color}")

    # Vectorized lookup over a whole column of readings.
    readings = np.linspace(-10, 30, 5)
    print("Batch:", temperatures.map.resolve_many(readings).tolist())

    traffic = ColorRange(["#00ff00", "#ffff00", "#ff0000"], [0, 50, 100])
    print("Load 75%:", traffic.get_color(75, alpha=0.5))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_ranges()

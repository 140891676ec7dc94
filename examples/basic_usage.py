"""Basic chromastops usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromastops import Gradient, HueMode, gradient, parse


def demonstrate_colors() -> None:
    # Parse loose inputs into colors and read their channels back.
    accent = parse("#ff8040")
    print("RGB channels:", accent.to_rgb())
    print("HSV channels:", accent.to_hsv())
    print("CSS:", parse("rgba(0, 128, 255, 0.5)").to_rgb_string())


def demonstrate_gradients() -> None:
    # Evenly spaced stops, sequence in RGB.
    strip = gradient("red", "blue")
    print("RGB sequence:", [c.to_hex_string() for c in strip.rgb(5)])

    # Positioned stops, hue-aware sequence along the shortest arc.
    sunset = Gradient.from_stops([
        {"color": "red", "pos": 0},
        {"color": "yellow", "pos": 0.25},
        {"color": "blue", "pos": 1},
    ])
    print("Substeps for 10 colors:", sunset.substeps(10))
    print("HSV sequence:", [c.to_hex_string() for c in sunset.hsv(10, HueMode.SHORT)])

    # Continuous sampling and the reversed gradient.
    print("Color at 0.6:", sunset.sample_at(0.6).to_rgb_string())
    print("Reversed at 0.4:", sunset.reversed().sample_at(0.4).to_rgb_string())

    # CSS output.
    print(sunset.to_css_string())
    print(sunset.to_css_string("radial"))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_gradients()

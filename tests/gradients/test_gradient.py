import numpy as np
import pytest

from chromastops import Gradient, HueMode, ColorSpace
from chromastops.colors import Color, DefaultColorModel
from chromastops.exceptions import InvalidStepCount, PositionOutOfRange

RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)


def hexes(colors):
    return [color.to_hex_string() for color in colors]


def test_rgb_sequence_steps_linearly(red_blue):
    colors = red_blue.to_sequence(5, "rgb")
    assert [c.to_rgb().r for c in colors] == [255, 191, 128, 64, 0]
    assert [c.to_rgb().b for c in colors] == [0, 64, 128, 191, 255]
    assert all(c.to_rgb().g == 0 for c in colors)


def test_rgb_alias(red_blue):
    assert red_blue.rgb(5) == red_blue.to_sequence(5, ColorSpace.RGB)


def test_sequence_reuses_stop_colors(red_yellow_blue):
    colors = red_yellow_blue.to_sequence(10)
    assert colors[0] is red_yellow_blue.stops[0].color
    assert colors[2] is red_yellow_blue.stops[1].color
    assert colors[-1] is red_yellow_blue.stops[-1].color


def test_hsv_sequence_default_is_clockwise(red_blue):
    colors = red_blue.to_sequence(5, "hsv")
    assert hexes(colors) == ["#ff0000", "#ffff00", "#00ff00", "#00ffff", "#0000ff"]


def test_hsv_sequence_short_arc(red_blue):
    colors = red_blue.hsv(5, "short")
    assert hexes(colors) == ["#ff0000", "#ff0080", "#ff00ff", "#8000ff", "#0000ff"]


def test_hsv_sequence_long_arc_matches_clockwise(red_blue):
    assert red_blue.hsv(5, "long") == red_blue.hsv(5, False)


def test_hsv_sequence_trigonometric_flag(red_blue):
    assert red_blue.hsv(5, True) == red_blue.hsv(5, HueMode.SHORT)
    assert red_blue.hsv(5, True) == red_blue.hsv(5, "ccw")


def test_hsv_falls_back_to_rgb_for_achromatic_segments():
    grad = Gradient.from_colors(["white", "red", "black"])
    assert grad.to_sequence(9, "hsv") == grad.to_sequence(9, "rgb")


def test_hsv_short_with_uneven_stops(red_yellow_blue):
    colors = red_yellow_blue.to_sequence(10, "hsv", "short")
    assert len(colors) == 10
    assert colors[0] == RED
    assert colors[-1] == BLUE
    assert colors[2] == Color(255, 255, 0)
    substeps = red_yellow_blue.substeps(10)
    assert substeps[0] < substeps[1]


@pytest.mark.parametrize("space, mode", [
    ("rgb", None),
    ("hsv", None),
    ("hsv", "short"),
    ("hsv", "long"),
    ("hsv", True),
])
def test_sequence_length_and_endpoints(rainbow, space, mode):
    first, last = rainbow.stops[0].color, rainbow.stops[-1].color
    for steps in range(len(rainbow), 60):
        colors = rainbow.to_sequence(steps, space, mode)
        assert len(colors) == steps
        assert colors[0] == first
        assert colors[-1] == last


@pytest.mark.parametrize("steps", [1, 0, -1])
def test_too_few_steps(red_blue, steps):
    with pytest.raises(InvalidStepCount):
        red_blue.to_sequence(steps, "rgb")


def test_fewer_steps_than_stops(rainbow):
    with pytest.raises(InvalidStepCount):
        rainbow.to_sequence(5)


def test_unknown_color_space(red_blue):
    with pytest.raises(ValueError):
        red_blue.to_sequence(5, "lab")


def test_unknown_hue_mode(red_blue):
    with pytest.raises(ValueError):
        red_blue.to_sequence(5, "hsv", "sideways")


def test_alpha_is_interpolated():
    grad = Gradient.from_colors(["rgba(255, 0, 0, 0)", "red"])
    alphas = [c.alpha for c in grad.rgb(5)]
    assert alphas == pytest.approx([0, 0.25, 0.5, 0.75, 1])


def test_to_array(red_blue):
    arr = red_blue.to_array(5)
    assert arr.shape == (5, 4)
    assert np.allclose(arr[0], [255, 0, 0, 1])
    assert np.allclose(arr[-1], [0, 0, 255, 1])
    assert np.allclose(arr[:, 0], [255, 191.25, 127.5, 63.75, 0])


def test_to_array_hsv_channels(red_blue):
    arr = red_blue.to_array(3, "hsv", channels="hsv")
    assert arr.shape == (3, 4)
    assert np.allclose(arr, [[0, 1, 1, 1], [120, 1, 1, 1], [240, 1, 1, 1]])


def test_to_array_hsv_channels_match_colors():
    grad = Gradient.from_colors(["rgba(255, 0, 0, 0.5)", "navy"])
    arr = grad.to_array(4, channels=ColorSpace.HSV)
    expected = [color.to_hsv() for color in grad.rgb(4)]
    assert np.allclose(arr, expected)


def test_to_array_unknown_channels(red_blue):
    with pytest.raises(ValueError):
        red_blue.to_array(3, channels="lab")


# ------------------ SAMPLING ------------------

@pytest.mark.parametrize("space", ["rgb", "hsv"])
def test_sample_endpoints(red_yellow_blue, space):
    assert red_yellow_blue.sample_at(0, space) == RED
    assert red_yellow_blue.sample_at(1, space) == BLUE


def test_sample_midpoint_rgb(red_blue):
    assert red_blue.sample_at(0.5).to_hex_string() == "#800080"
    assert red_blue.rgb_at(0.5) == red_blue.sample_at(0.5, "rgb")


def test_sample_midpoint_hsv(red_blue):
    assert red_blue.hsv_at(0.5).to_hex_string() == "#00ff00"


def test_sample_on_a_stop(red_yellow_blue):
    assert red_yellow_blue.sample_at(0.25) == Color(255, 255, 0)


def test_sample_is_quantized_on_segment_scale(red_blue):
    # 0.504 and 0.496 both land on index 50
    assert red_blue.sample_at(0.504) == red_blue.sample_at(0.496)


def test_sample_numpy_positions(red_blue):
    assert red_blue.sample_at(np.float32(0.5)) == red_blue.sample_at(0.5)
    assert red_blue.hsv_at(np.float64(0.25)) == red_blue.hsv_at(0.25)
    assert red_blue.sample_at(np.int64(1)) == Color(0, 0, 255)


@pytest.mark.parametrize("pos", [-0.01, 1.01, "0.5", None])
def test_sample_out_of_range(red_blue, pos):
    with pytest.raises(PositionOutOfRange):
        red_blue.sample_at(pos)


@pytest.mark.parametrize("space", ["rgb", "hsv"])
@pytest.mark.parametrize("pos", [0, 0.1, 0.25, 0.3, 0.5, 0.8, 0.99, 1])
def test_reversed_sampling_mirrors_original(red_yellow_blue, space, pos):
    original = red_yellow_blue.sample_at(1 - pos, space).to_rgb()
    mirrored = red_yellow_blue.reversed().sample_at(pos, space).to_rgb()
    assert np.allclose(original, mirrored, atol=4)


def test_deprecated_sampling_aliases(red_blue):
    with pytest.warns(DeprecationWarning):
        assert red_blue.rgbAt(0.5) == red_blue.rgb_at(0.5)
    with pytest.warns(DeprecationWarning):
        assert red_blue.hsvAt(0.5) == red_blue.hsv_at(0.5)


# ------------------ CSS ------------------

def test_css_linear(red_blue):
    assert red_blue.to_css_string("linear") == (
        "linear-gradient(to right, rgb(255, 0, 0) 0%, rgb(0, 0, 255) 100%)"
    )
    assert red_blue.to_css_string() == red_blue.to_css_string("linear")


def test_css_radial(red_blue):
    assert red_blue.css("radial") == (
        "radial-gradient(ellipse at center, rgb(255, 0, 0) 0%, rgb(0, 0, 255) 100%)"
    )


def test_css_custom_direction(red_yellow_blue):
    assert red_yellow_blue.to_css_string("linear", "45deg") == (
        "linear-gradient(45deg, rgb(255, 0, 0) 0%, rgb(255, 255, 0) 25%, rgb(0, 0, 255) 100%)"
    )


def test_css_includes_synthesized_stops_and_alpha():
    grad = Gradient.from_stops([
        {"color": "rgba(255, 0, 0, 0.5)", "pos": 0.125},
        {"color": "blue", "pos": 1},
    ])
    assert grad.to_css_string() == (
        "linear-gradient(to right, rgba(255, 0, 0, 0.5) 0%, "
        "rgba(255, 0, 0, 0.5) 12.5%, rgb(0, 0, 255) 100%)"
    )


def test_css_rejects_unknown_mode(red_blue):
    with pytest.raises(ValueError):
        red_blue.to_css_string("conic")


# ------------------ COLOR MODEL INJECTION ------------------

class RecordingModel(DefaultColorModel):
    def __init__(self):
        self.calls = []

    def parse(self, value):
        self.calls.append(("parse", value))
        return super().parse(value)

    def from_rgb(self, channels):
        self.calls.append(("from_rgb", channels))
        return super().from_rgb(channels)

    def from_hsv(self, channels):
        self.calls.append(("from_hsv", channels))
        return super().from_hsv(channels)


def test_color_model_is_used_everywhere():
    model = RecordingModel()
    grad = Gradient.from_colors(["red", "blue"], color_model=model)
    assert [name for name, _ in model.calls] == ["parse", "parse"]

    model.calls.clear()
    grad.to_sequence(4, "rgb")
    assert [name for name, _ in model.calls] == ["from_rgb", "from_rgb"]

    model.calls.clear()
    grad.to_sequence(4, "hsv")
    assert [name for name, _ in model.calls] == ["from_hsv", "from_hsv"]

    model.calls.clear()
    grad.hsv_at(0.3)
    assert [name for name, _ in model.calls] == ["from_hsv"]

    rev = grad.reversed()
    assert rev.color_model is model
    model.calls.clear()
    rev.rgb_at(0.3)
    assert [name for name, _ in model.calls] == ["from_rgb"]

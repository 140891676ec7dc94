import pytest

from chromastops.interpolation import stepize, interpolate
from chromastops.types import RGBA, HSVA, RGBA_MAX, HSVA_MAX


def test_stepize_divides_channel_differences():
    step = stepize(RGBA(255, 0, 0, 1), RGBA(0, 0, 255, 0), 4)
    assert step == RGBA(-63.75, 0.0, 63.75, -0.25)


def test_stepize_zero_steps():
    step = stepize(HSVA(10, 0.5, 0.5, 1), HSVA(20, 1, 1, 1), 0)
    assert step == HSVA(0.0, 0.0, 0.0, 0.0)


def test_stepize_accepts_fractional_steps():
    step = stepize(RGBA(0, 0, 0, 1), RGBA(100, 0, 0, 1), 12.5)
    assert step.r == pytest.approx(8.0)


def test_stepize_rejects_mismatched_shapes():
    with pytest.raises(ValueError):
        stepize(RGBA(0, 0, 0, 1), HSVA(0, 0, 0, 1), 2)


def test_interpolate_linear_rgb():
    start = RGBA(255, 0, 0, 1)
    step = stepize(start, RGBA(0, 0, 255, 1), 4)
    reds = [interpolate(step, start, i, RGBA_MAX).r for i in range(5)]
    assert reds == [255.0, 191.25, 127.5, 63.75, 0.0]


def test_interpolate_returns_same_tuple_type():
    start = HSVA(0, 1, 1, 1)
    result = interpolate(HSVA(10, 0, 0, 0), start, 1, HSVA_MAX)
    assert isinstance(result, HSVA)
    assert result == HSVA(10, 1, 1, 1)


def test_interpolate_lifts_negative_values():
    result = interpolate(HSVA(-30, 0, 0, 0), HSVA(10, 0.5, 0.5, 1), 1, HSVA_MAX)
    assert result.h == pytest.approx(340)


def test_interpolate_wraps_cyclic_channels():
    result = interpolate(HSVA(30, 0, 0, 0), HSVA(350, 0.5, 0.5, 1), 1, HSVA_MAX)
    assert result.h == pytest.approx(20)


def test_interpolate_does_not_wrap_unit_channels():
    result = interpolate(HSVA(0, 0.75, 0, 0), HSVA(0, 0.5, 0.5, 1), 1, HSVA_MAX)
    assert result.s == pytest.approx(1.25)


def test_interpolate_lifts_negative_unit_channels():
    result = interpolate(HSVA(0, -0.75, 0, 0), HSVA(0, 0.5, 0.5, 1), 1, HSVA_MAX)
    assert result.s == pytest.approx(0.75)

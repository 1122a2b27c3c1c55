import math

import pytest

from otodecks.style import (
    PLAY_BUTTON_OFF_COLOUR,
    PLAY_BUTTON_ON_COLOUR,
    PlayButton,
    RotarySlider,
    rotary_geometry,
)

START = -0.75 * math.pi
END = 0.75 * math.pi


def test_bounds_are_inset_by_ten():
    geo = rotary_geometry(5, 7, 200, 150, 0.5, START, END)
    assert geo.bounds == (15, 17, 180, 130)


def test_to_angle_spans_start_to_end():
    assert rotary_geometry(0, 0, 120, 120, 0.0, START, END).to_angle == pytest.approx(START)
    assert rotary_geometry(0, 0, 120, 120, 1.0, START, END).to_angle == pytest.approx(END)


@pytest.mark.parametrize("size", [30, 60, 120, 400])
def test_radius_relations(size):
    geo = rotary_geometry(0, 0, size, size * 2, 0.3, START, END)
    assert geo.line_width <= 8.0
    assert geo.radius == pytest.approx(min(geo.bounds[2], geo.bounds[3]) / 2)
    assert geo.arc_radius == pytest.approx(geo.radius - geo.line_width / 2)
    assert geo.inner_arc_radius == pytest.approx(geo.arc_radius - 10)
    assert geo.thumb_width == pytest.approx(geo.line_width * 1.2)


@pytest.mark.parametrize("pos", [0.0, 0.25, 0.5, 1.0])
def test_thumb_lies_on_arc(pos):
    geo = rotary_geometry(0, 0, 160, 100, pos, START, END)
    dx = geo.thumb_centre[0] - geo.centre[0]
    dy = geo.thumb_centre[1] - geo.centre[1]
    assert math.hypot(dx, dy) == pytest.approx(geo.arc_radius)


def test_half_position_thumb_points_up():
    geo = rotary_geometry(0, 0, 120, 120, 0.5, START, END)
    assert geo.thumb_centre[0] == pytest.approx(geo.centre[0])
    assert geo.thumb_centre[1] < geo.centre[1]


def test_full_circle_line_starts_at_centre():
    geo = rotary_geometry(0, 0, 120, 120, 0.2, -math.pi, math.pi)
    assert geo.line_start[0] == pytest.approx(geo.centre[0])
    assert geo.line_start[1] == pytest.approx(geo.centre[1])


def test_thumb_bounds_centred_on_thumb():
    geo = rotary_geometry(0, 0, 120, 120, 0.7, START, END)
    x, y, w, h = geo.thumb_bounds
    assert (x + w / 2, y + h / 2) == pytest.approx(geo.thumb_centre)
    assert w == h == pytest.approx(geo.thumb_width)


def test_slider_clamps_and_proportion():
    slider = RotarySlider()
    slider.set_range(0.5, 5.0)
    assert slider.set_value(10) == 5.0
    assert slider.proportion() == pytest.approx(1.0)
    assert slider.set_value(-1) == 0.5
    assert slider.proportion() == pytest.approx(0.0)


def test_slider_range_clamps_current_value():
    slider = RotarySlider()
    slider.set_value(8)
    slider.set_range(0.0, 1.0)
    assert slider.value == 1.0


def test_slider_notifies_only_on_change():
    heard = []
    slider = RotarySlider(listeners=[heard.append])
    slider.set_range(0.0, 1.0)
    slider.set_value(0.25)
    slider.set_value(0.25)
    assert heard == [0.25]


def test_slider_text_three_decimals():
    slider = RotarySlider()
    slider.set_range(0.0, 1.0)
    slider.set_value(0.5)
    assert slider.text == "0.500"


def test_slider_bad_range():
    with pytest.raises(ValueError):
        RotarySlider().set_range(2.0, 1.0)


def test_play_button_toggles():
    seen = []
    button = PlayButton(listeners=[lambda b: seen.append(b.toggle_state)])
    assert button.colour == PLAY_BUTTON_OFF_COLOUR
    assert button.click() is True
    assert button.colour == PLAY_BUTTON_ON_COLOUR
    assert button.click() is False
    assert seen == [True, False]
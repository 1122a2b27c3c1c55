"""Rotary slider drawing geometry and the deck's custom controls."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable

Colour = tuple[int, int, int]
Point = tuple[float, float]
Rect = tuple[float, float, float, float]

BACKGROUND_ARC_COLOUR: Colour = (34, 87, 122)
VALUE_ARC_COLOUR: Colour = (128, 237, 153)
THUMB_COLOUR: Colour = (56, 163, 165)
PLAY_BUTTON_OFF_COLOUR: Colour = (56, 163, 165)
PLAY_BUTTON_ON_COLOUR: Colour = (242, 149, 89)

BOUNDS_INSET = 10.0
MAX_LINE_WIDTH = 8.0
INNER_ARC_OFFSET = 10.0

TEXT_BOX_WIDTH = 100
TEXT_BOX_HEIGHT = 25
DECIMAL_PLACES = 3


def _arc_point(cx: float, cy: float, radius: float, angle: float) -> Point:
    # Angles run clockwise from twelve o'clock.
    return cx + radius * math.sin(angle), cy - radius * math.cos(angle)


def _arc_extent(cx: float, cy: float, radius: float, a0: float, a1: float) -> list[Point]:
    """Points that bound an arc: its ends and every quarter turn it passes."""
    lo, hi = min(a0, a1), max(a0, a1)
    quarter = math.pi / 2
    angles = [a0, a1]
    angles += [k * quarter for k in range(math.ceil(lo / quarter), math.floor(hi / quarter) + 1)]
    return [_arc_point(cx, cy, radius, a) for a in angles]


@dataclass(frozen=True)
class RotaryGeometry:
    """Everything needed to draw one rotary slider."""

    bounds: Rect
    centre: Point
    radius: float
    start_angle: float
    end_angle: float
    to_angle: float
    line_width: float
    arc_radius: float
    inner_arc_radius: float
    thumb_width: float
    thumb_centre: Point
    line_start: Point

    @property
    def thumb_bounds(self) -> Rect:
        tx, ty = self.thumb_centre
        half = self.thumb_width / 2
        return (tx - half, ty - half, self.thumb_width, self.thumb_width)


def rotary_geometry(
    x: float,
    y: float,
    width: float,
    height: float,
    slider_pos: float,
    start_angle: float,
    end_angle: float,
) -> RotaryGeometry:
    """Lay out the arcs, thumb and pointer line of a rotary slider."""
    bx = x + BOUNDS_INSET
    by = y + BOUNDS_INSET
    bw = max(0.0, width - 2 * BOUNDS_INSET)
    bh = max(0.0, height - 2 * BOUNDS_INSET)
    cx, cy = bx + bw / 2, by + bh / 2

    radius = min(bw, bh) / 2.0
    to_angle = start_angle + slider_pos * (end_angle - start_angle)
    line_width = min(MAX_LINE_WIDTH, radius * 0.5)
    arc_radius = radius - line_width * 0.5
    inner_radius = arc_radius - INNER_ARC_OFFSET

    extent = _arc_extent(cx, cy, arc_radius, start_angle, end_angle)
    extent += _arc_extent(cx, cy, inner_radius, start_angle, end_angle)
    xs = [p[0] for p in extent]
    ys = [p[1] for p in extent]
    line_start = ((min(xs) + max(xs)) / 2, (min(ys) + max(ys)) / 2)

    return RotaryGeometry(
        bounds=(bx, by, bw, bh),
        centre=(cx, cy),
        radius=radius,
        start_angle=start_angle,
        end_angle=end_angle,
        to_angle=to_angle,
        line_width=line_width,
        arc_radius=arc_radius,
        inner_arc_radius=inner_radius,
        thumb_width=line_width * 1.2,
        thumb_centre=_arc_point(cx, cy, arc_radius, to_angle),
        line_start=line_start,
    )


@dataclass
class RotarySlider:
    """A rotary-drag slider with its value shown below to three decimals."""

    minimum: float = 0.0
    maximum: float = 10.0
    value: float = 0.0
    decimal_places: int = DECIMAL_PLACES
    text_box_size: tuple[int, int] = (TEXT_BOX_WIDTH, TEXT_BOX_HEIGHT)
    listeners: list[Callable[[float], None]] = field(default_factory=list)

    def set_range(self, minimum: float, maximum: float) -> None:
        if maximum < minimum:
            raise ValueError("maximum must not be less than minimum")
        self.minimum = float(minimum)
        self.maximum = float(maximum)
        self.set_value(self.value)

    def set_value(self, value: float) -> float:
        """Set the value, clamped to the range; listeners hear of changes."""
        clamped = float(min(max(value, self.minimum), self.maximum))
        if clamped != self.value:
            self.value = clamped
            for listener in self.listeners:
                listener(clamped)
        return self.value

    def proportion(self) -> float:
        span = self.maximum - self.minimum
        if span == 0:
            return 0.0
        return (self.value - self.minimum) / span

    @property
    def text(self) -> str:
        return f"{self.value:.{self.decimal_places}f}"


@dataclass
class PlayButton:
    """A text button whose clicks toggle it between off and on."""

    text: str = ""
    toggle_state: bool = False
    listeners: list[Callable[["PlayButton"], None]] = field(default_factory=list)

    @property
    def colour(self) -> Colour:
        return PLAY_BUTTON_ON_COLOUR if self.toggle_state else PLAY_BUTTON_OFF_COLOUR

    def click(self) -> bool:
        """Toggle the state, tell the listeners, and return the new state."""
        self.toggle_state = not self.toggle_state
        for listener in self.listeners:
            listener(self)
        return self.toggle_state
import math
from dataclasses import dataclass

WHEEL_COLORS = [
    "#4bb6e0ff",
    "#A09D37",
    "#F4AF1B",
    "#FAF0A6",
    "#E6C229",
]
LIGHT_COLORS = {"#FAF0A6", "#E6C229"}

DARK_TEXT = "#2E4B1B"
LIGHT_TEXT = "white"
HIGHLIGHT_STROKE = "#065f46"
HIGHLIGHT_STROKE_WIDTH = 0.02

LABEL_RADIUS = 0.6
LABEL_FONT_SIZE = 0.12
LABEL_MAX_LENGTH = 12
LABEL_KEEP = 10


@dataclass(frozen=True)
class Slice:
    index: int
    label: str
    start: float
    end: float
    fill: str
    text_color: str
    highlighted: bool

    @property
    def mid_degrees(self):
        return (self.start + self.end) / 2 * 360


def slice_color(index):
    return WHEEL_COLORS[index % len(WHEEL_COLORS)]


def text_color_for(fill):
    return DARK_TEXT if fill in LIGHT_COLORS else LIGHT_TEXT


def truncate_label(text):
    text = str(text)
    if len(text) > LABEL_MAX_LENGTH:
        return text[:LABEL_KEEP] + ".."
    return text


def coordinates_for_fraction(fraction):
    return math.cos(2 * math.pi * fraction), math.sin(2 * math.pi * fraction)


def slice_bounds(index, count):
    # Fractions of a full turn, starting at 0 and running clockwise in screen space.
    if count < 1:
        raise ValueError("slice_bounds needs at least one option")
    return index / count, (index + 1) / count


def build_slices(options, winning_index=None):
    count = len(options)
    slices = []
    for index, option in enumerate(options):
        start, end = slice_bounds(index, count)
        fill = slice_color(index)
        slices.append(Slice(
            index=index,
            label=truncate_label(option),
            start=start,
            end=end,
            fill=fill,
            text_color=text_color_for(fill),
            highlighted=index == winning_index
        ))
    return slices


def slice_path(start, end):
    start_x, start_y = coordinates_for_fraction(start)
    end_x, end_y = coordinates_for_fraction(end)
    large_arc_flag = 1 if end - start > 0.5 else 0
    return " ".join([
        "M 0 0",
        f"L {start_x:.6f} {start_y:.6f}",
        f"A 1 1 0 {large_arc_flag} 1 {end_x:.6f} {end_y:.6f}",
        "L 0 0",
    ])

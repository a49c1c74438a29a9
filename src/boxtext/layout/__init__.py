"""Layout: wrapping, measurement and placement."""

from boxtext.layout.measure import Measurer
from boxtext.layout.placer import (
    LinePlacement,
    align_x,
    align_y,
    iter_placements,
    place_lines,
    stroke_offsets,
)
from boxtext.layout.wrap import wrap_text

__all__ = [
    "LinePlacement",
    "Measurer",
    "align_x",
    "align_y",
    "iter_placements",
    "place_lines",
    "stroke_offsets",
    "wrap_text",
]

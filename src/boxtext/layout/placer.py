"""Alignment math and per-line placement."""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator

from boxtext.config import BoxConfig
from boxtext.geometry import Rectangle
from boxtext.types import HorizontalAlignment, VerticalAlignment

logger = logging.getLogger(__name__)

# Empirical correction tying the background band to the visual baseline
# across font sizes and line heights
BACKGROUND_CALIBRATION = 13
BACKGROUND_CALIBRATION_FONT_SIZE = 50


@dataclass(frozen=True)
class LinePlacement:
    """
    Where one wrapped line and its decorations go on the canvas.

    Attributes:
        index: Zero-based line number.
        text: Line text.
        box: Measured ink box of the line (relative to its baseline origin).
        x: Absolute x of the baseline origin.
        y: Absolute y of the baseline origin.
        slot: The line's full pitch slot, used for the debug overlay.
        background: Background band, or None when no band is painted.
    """

    index: int
    text: str
    box: Rectangle
    x: float
    y: float
    slot: Rectangle
    background: Rectangle | None = None


def align_x(alignment: HorizontalAlignment, box_width: float, line_width: float) -> float:
    """Horizontal offset of a line inside the box."""
    if alignment == HorizontalAlignment.CENTER:
        return (box_width - line_width) / 2
    if alignment == HorizontalAlignment.RIGHT:
        return box_width - line_width
    return 0.0


def align_y(alignment: VerticalAlignment, box_height: float, text_height: float) -> float:
    """Vertical offset of the whole text block inside the box."""
    if alignment == VerticalAlignment.CENTER:
        return (box_height - text_height) / 2
    if alignment == VerticalAlignment.BOTTOM:
        return box_height - text_height
    return 0.0


def background_band(config: BoxConfig, slot_top: float, x: float, width: float) -> Rectangle:
    """
    Compute the background band behind a line.

    The band is one font size tall and sits at the bottom of the line's pitch
    slot, shifted by a calibration term that depends on the font size and
    line height.

    Args:
        config: Box configuration.
        slot_top: Absolute top of the line's pitch slot.
        x: Absolute left edge of the line.
        width: Measured line width.

    Returns:
        Band rectangle.
    """
    height = config.font_size
    correction = (
        (1 - config.line_height)
        * BACKGROUND_CALIBRATION
        * (config.font_size / BACKGROUND_CALIBRATION_FONT_SIZE)
    )
    y = slot_top + (config.line_height_px - height) + correction
    return Rectangle(x, y, width, height)


def stroke_offsets(size: int) -> list[tuple[int, int]]:
    """
    Offsets at which a stroke halo repaints the line.

    Covers the square [-size, size] x [-size, size], both ends included,
    so a halo of size s costs (2s + 1)^2 paints.
    """
    if size <= 0:
        return []
    span = range(-size, size + 1)
    return [(dx, dy) for dx in span for dy in span]


def iter_placements(
    lines: list[str],
    config: BoxConfig,
    measure_line: Callable[[str], Rectangle],
) -> Iterator[LinePlacement]:
    """
    Compute absolute positions line by line.

    Lines are measured lazily, so a caller that paints each placement as it
    arrives has painted every earlier line before the next one is measured.
    Background and debug rectangles are normalized, so a negative measured
    width (e.g. from negative letter spacing) never yields a negative extent.

    Args:
        lines: Wrapped lines in drawing order.
        config: Box configuration.
        measure_line: Returns the ink box used for horizontal alignment.

    Yields:
        One placement per line.
    """
    box = config.box
    line_height_px = config.line_height_px
    text_height = len(lines) * line_height_px
    y_align = align_y(config.align_y, box.height, text_height)
    y_shift = line_height_px * (1 - config.baseline)

    logger.debug(
        f"Placing {len(lines)} line(s): pitch={line_height_px}px, "
        f"text_height={text_height}px, y_align={y_align}"
    )

    for n, line in enumerate(lines):
        line_box = measure_line(line)
        x = box.x + align_x(config.align_x, box.width, line_box.width)
        slot_top = box.y + y_align + n * line_height_px

        background = None
        if line and config.background_color is not None:
            background = background_band(config, slot_top, x, line_box.width).normalized()

        yield LinePlacement(
            index=n,
            text=line,
            box=line_box,
            x=x,
            y=slot_top + y_shift,
            slot=Rectangle(x, slot_top, line_box.width, line_height_px).normalized(),
            background=background,
        )


def place_lines(
    lines: list[str],
    config: BoxConfig,
    measure_line: Callable[[str], Rectangle],
) -> list[LinePlacement]:
    """Compute absolute positions for every line at once."""
    return list(iter_placements(lines, config, measure_line))

"""Text box drawing."""

import logging
from typing import Any

from pydantic import ValidationError

from boxtext.color import Color, DebugColorSource, random_debug_colors
from boxtext.config import BoxConfig, ConfigurationError
from boxtext.geometry import Point, Rectangle
from boxtext.layout.measure import Measurer
from boxtext.layout.placer import LinePlacement, iter_placements, stroke_offsets
from boxtext.layout.wrap import wrap_text
from boxtext.render.base import FontMetrics, Rasterizer
from boxtext.types import HorizontalAlignment, TextWrapping, VerticalAlignment

logger = logging.getLogger(__name__)

# Stroke sizes above this repaint each line hundreds of times
EXPENSIVE_STROKE_SIZE = 10


class TextBox:
    """
    Draws multi-line text inside a rectangular box on a canvas.

    The box is configured through setters, each validated immediately, and
    then drawn any number of times with ``draw``. Drawing never changes the
    configuration.

        box = TextBox(image, PillowMetrics(), PillowRasterizer())
        box.set_box(20, 20, 360, 160)
        box.set_font_face("Roboto-Regular")
        box.set_font_size(32)
        box.set_text_align("center", "center")
        box.draw("Hello world")
    """

    def __init__(
        self,
        canvas: Any,
        metrics: FontMetrics,
        rasterizer: Rasterizer,
        debug_colors: DebugColorSource | None = None,
    ) -> None:
        """
        Initialize text box with default configuration.

        Args:
            canvas: Canvas handed to the rasterizer on every paint call.
            metrics: Font-metrics provider.
            rasterizer: Painter for text and rectangles.
            debug_colors: Source of debug overlay colors. Defaults to random colors.
        """
        self.canvas = canvas
        self.metrics = metrics
        self.rasterizer = rasterizer
        self.debug_colors = debug_colors or random_debug_colors()
        self._config = BoxConfig()

    @classmethod
    def from_config(
        cls,
        canvas: Any,
        config: BoxConfig,
        metrics: FontMetrics,
        rasterizer: Rasterizer,
        debug_colors: DebugColorSource | None = None,
    ) -> "TextBox":
        """Create a text box that starts from a copy of an existing configuration."""
        text_box = cls(canvas, metrics, rasterizer, debug_colors)
        text_box._config = config.model_copy(deep=True)
        return text_box

    @property
    def config(self) -> BoxConfig:
        """A copy of the current configuration."""
        return self._config.model_copy(deep=True)

    # ========================================================================
    # Setters
    # ========================================================================

    def _set(self, **values: Any) -> None:
        # Validate every value before assigning any of them
        try:
            candidate = self._config.model_copy(deep=True)
            for name, value in values.items():
                setattr(candidate, name, value)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e
        self._config = candidate

    def set_font_color(self, color: Color) -> None:
        self._set(font_color=color)

    def set_font_face(self, face: str) -> None:
        """
        Args:
            face: Registered font name or path to a font file.
        """
        self._set(font_face=face)

    def set_font_size(self, size: float) -> None:
        """
        Args:
            size: Font size in *pixels*.
        """
        self._set(font_size=size)

    def set_stroke_color(self, color: Color) -> None:
        self._set(stroke_color=color)

    def set_stroke_size(self, size: int) -> None:
        """
        Args:
            size: Stroke halo radius in *pixels*. 0 disables the stroke.
        """
        self._set(stroke_size=size)
        size = self._config.stroke_size
        if size > EXPENSIVE_STROKE_SIZE:
            logger.warning(f"Stroke size {size} repaints every line {(2 * size + 1) ** 2} times")

    def set_letter_spacing(self, spacing: int | None) -> None:
        self._set(letter_spacing=spacing)

    def set_text_shadow(self, color: Color, x_shift: float, y_shift: float) -> None:
        """
        Args:
            color: Shadow color.
            x_shift: Shadow offset in pixels. Positive values move the shadow right.
            y_shift: Shadow offset in pixels. Positive values move the shadow down.
        """
        self._set(text_shadow={"color": color, "offset": Point(x_shift, y_shift)})

    def set_background_color(self, color: Color) -> None:
        self._set(background_color=color)

    def set_line_height(self, line_height: float) -> None:
        """
        Args:
            line_height: Height of a single line as a multiple of the font size.
        """
        self._set(line_height=line_height)

    def set_baseline(self, baseline: float) -> None:
        """
        Args:
            baseline: Baseline position as a fraction of the line height, measured from the bottom.
        """
        self._set(baseline=baseline)

    def set_text_align(
        self,
        x: HorizontalAlignment | str = HorizontalAlignment.LEFT,
        y: VerticalAlignment | str = VerticalAlignment.TOP,
    ) -> None:
        """
        Set text alignment inside the box.

        Args:
            x: Horizontal alignment: left, center or right.
            y: Vertical alignment: top, center or bottom.

        Raises:
            ConfigurationError: If either value is not an allowed alignment.
        """
        try:
            align_x = HorizontalAlignment(x)
        except ValueError:
            raise ConfigurationError(f"Invalid horizontal alignment value: {x!r}") from None
        try:
            align_y = VerticalAlignment(y)
        except ValueError:
            raise ConfigurationError(f"Invalid vertical alignment value: {y!r}") from None
        self._set(align_x=align_x, align_y=align_y)

    def set_box(self, x: float, y: float, width: float, height: float) -> None:
        """
        Set text box position and dimensions, in pixels from the canvas's top-left corner.
        """
        self._set(box=Rectangle(x, y, width, height))

    def set_text_wrapping(self, wrapping: TextWrapping | str) -> None:
        try:
            mode = TextWrapping(wrapping)
        except ValueError:
            raise ConfigurationError(f"Invalid text wrapping value: {wrapping!r}") from None
        self._set(text_wrapping=mode)

    def enable_debug(self) -> None:
        """Fill the whole box and every line with debug colors when drawing."""
        self._set(debug=True)

    # ========================================================================
    # Drawing
    # ========================================================================

    def draw(self, text: str) -> list[LinePlacement]:
        """
        Draw text on the canvas.

        Args:
            text: Text to draw. May contain line breaks.

        Returns:
            Placement of every drawn line.

        Raises:
            ConfigurationError: If no font face has been set.
        """
        config = self._config
        if config.font_face is None:
            raise ConfigurationError("No font face has been specified.")

        measurer = Measurer(self.metrics, config.font_face, config.font_size_points)
        lines = wrap_text(text, config.text_wrapping, config.box.width, measurer.measure_box)
        logger.debug(f"Wrapped text into {len(lines)} line(s) for a {config.box.width}px wide box")

        if config.debug:
            self.rasterizer.paint_filled_rect(self.canvas, config.box, self.debug_colors("box"))

        spacing = config.letter_spacing
        if spacing:
            def measure_line(line: str) -> Rectangle:
                return measurer.measure_box_with_spacing(line, spacing)
        else:
            measure_line = measurer.measure_box

        # Each line is painted before the next one is measured
        placements: list[LinePlacement] = []
        for placement in iter_placements(lines, config, measure_line):
            self._draw_line(config, placement)
            placements.append(placement)

        return placements

    def _draw_line(self, config: BoxConfig, placement: LinePlacement) -> None:
        if placement.background is not None:
            self.rasterizer.paint_filled_rect(self.canvas, placement.background, config.background_color)

        if config.debug:
            self.rasterizer.paint_filled_rect(self.canvas, placement.slot, self.debug_colors("line"))

        if config.text_shadow is not None:
            offset = config.text_shadow.offset
            self._paint_line(
                config,
                Point(placement.x + offset.x, placement.y + offset.y),
                config.text_shadow.color,
                placement.text,
            )

        # The halo repaints the whole line once per offset
        for dx, dy in stroke_offsets(config.stroke_size):
            self.rasterizer.paint_text(
                self.canvas,
                config.font_face,
                config.font_size_points,
                Point(placement.x + dx, placement.y + dy),
                config.stroke_color,
                placement.text,
            )

        self._paint_line(config, Point(placement.x, placement.y), config.font_color, placement.text)

    def _paint_line(self, config: BoxConfig, position: Point, color: Color, text: str) -> None:
        face = config.font_face
        size_pt = config.font_size_points
        spacing = config.letter_spacing

        if not spacing:
            self.rasterizer.paint_text(self.canvas, face, size_pt, position, color, text)
            return

        # Advance by what was actually painted so every pass lands on the same glyph positions
        cursor = position.x
        for ch in text:
            painted = self.rasterizer.paint_text(self.canvas, face, size_pt, Point(cursor, position.y), color, ch)
            cursor += spacing + painted.width

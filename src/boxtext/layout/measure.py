"""Ink box measurement, with and without letter spacing."""

from functools import reduce

from boxtext.geometry import Rectangle
from boxtext.render.base import FontMetrics


class Measurer:
    """Measures strings for one font face and size."""

    def __init__(self, metrics: FontMetrics, face: str, size_pt: float) -> None:
        """
        Initialize measurer.

        Args:
            metrics: Font-metrics provider.
            face: Font face passed through to the provider.
            size_pt: Font size in points.
        """
        self.metrics = metrics
        self.face = face
        self.size_pt = size_pt

    def measure_box(self, text: str) -> Rectangle:
        """
        Measure the ink box of a string relative to its baseline origin.

        Args:
            text: Text to measure.

        Returns:
            Rectangle whose x is the left ink edge and y the upper ink edge.
        """
        x_left, y_lower, x_right, y_upper = self.metrics.measure(self.face, self.size_pt, text)
        return Rectangle(x_left, y_upper, x_right - x_left, y_lower - y_upper)

    def measure_box_with_spacing(self, text: str, spacing: int) -> Rectangle:
        """
        Measure a string drawn glyph by glyph with extra spacing.

        The vertical extent comes from measuring the whole string. The width is
        the sum of each glyph's own ink width plus the spacing, which is exactly
        how far the cursor moves when the glyphs are painted one at a time.

        Args:
            text: Text to measure.
            spacing: Extra pixels after every glyph.

        Returns:
            Ink box with the spacing-aware width.
        """
        whole = self.measure_box(text)
        width = reduce(lambda total, ch: total + self.measure_box(ch).width + spacing, text, 0)
        return whole.with_width(width)

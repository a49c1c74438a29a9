"""Abstract collaborators for font metrics and painting."""

from abc import ABC, abstractmethod
from typing import Any

from boxtext.color import Color
from boxtext.geometry import Point, Rectangle
from boxtext.types import BoundsCorners


class FontMetrics(ABC):
    """Measures the ink bounds of strings."""

    @abstractmethod
    def measure(self, face: str, size_pt: float, text: str) -> BoundsCorners:
        """
        Measure a string drawn unrotated with its baseline origin at (0, 0).

        Y grows downward, so the upper edge is usually negative.

        Args:
            face: Font face (registered name or font file path).
            size_pt: Font size in points.
            text: Text to measure.

        Returns:
            Ink bounds as (x_left, y_lower, x_right, y_upper).
        """
        pass


class Rasterizer(ABC):
    """Paints text and rectangles onto a canvas."""

    @abstractmethod
    def paint_text(
        self, canvas: Any, face: str, size_pt: float, position: Point, color: Color, text: str
    ) -> Rectangle:
        """
        Paint a string with its baseline origin at position.

        Args:
            canvas: Target canvas, mutated in place.
            face: Font face (registered name or font file path).
            size_pt: Font size in points.
            position: Baseline origin in pixels.
            color: Text color.
            text: Text to paint.

        Returns:
            Absolute ink box of what was painted.
        """
        pass

    @abstractmethod
    def paint_filled_rect(self, canvas: Any, rect: Rectangle, color: Color) -> None:
        """
        Fill a rectangle.

        Args:
            canvas: Target canvas, mutated in place.
            rect: Rectangle to fill, with non-negative extent.
            color: Fill color; translucent colors blend with the canvas.
        """
        pass

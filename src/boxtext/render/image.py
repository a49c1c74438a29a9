"""Font metrics and painting using Pillow."""

import logging
from functools import lru_cache
from typing import Callable, TypeVar

from PIL import Image, ImageDraw, ImageFont

from boxtext.color import Color
from boxtext.config import PIXELS_TO_POINTS
from boxtext.fonts import resolve_font_path
from boxtext.geometry import Point, Rectangle
from boxtext.render.base import FontMetrics, Rasterizer
from boxtext.types import BoundsCorners

logger = logging.getLogger(__name__)

# Left-baseline anchor: positions are baseline origins, like the metrics contract
BASELINE_ANCHOR = "ls"

T = TypeVar("T")


@lru_cache(maxsize=64)
def load_font(face: str, size_pt: float) -> ImageFont.FreeTypeFont:
    """
    Load a font face at a size, cached per (face, size).

    Args:
        face: Registered font name or font file path.
        size_pt: Font size in points.

    Returns:
        Pillow FreeType font sized in pixels.

    Raises:
        FileNotFoundError: If the face cannot be resolved to a font file.
        OSError: If Pillow cannot read the font file.
    """
    font_path = resolve_font_path(face)
    size_px = size_pt / PIXELS_TO_POINTS
    logger.debug(f"Loading font {font_path.name} at {size_px}px")
    return ImageFont.truetype(str(font_path), size_px)


class PillowMetrics(FontMetrics):
    """Ink bounds from Pillow's FreeType bindings."""

    def measure(self, face: str, size_pt: float, text: str) -> BoundsCorners:
        left, top, right, bottom = load_font(face, size_pt).getbbox(text, anchor=BASELINE_ANCHOR)
        return (left, bottom, right, top)


class PillowRasterizer(Rasterizer):
    """
    Paints onto a ``PIL.Image.Image``.

    Translucent colors blend with what is already on the canvas: RGB canvases
    are drawn on in RGBA mode, RGBA canvases get the paint composited from a
    transparent overlay. Coordinates are rounded to whole pixels.
    """

    def _paint(self, canvas: Image.Image, color: Color, paint: Callable[[ImageDraw.ImageDraw], T]) -> T:
        if canvas.mode == "RGBA" and color.alpha < 255:
            overlay = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
            result = paint(ImageDraw.Draw(overlay))
            canvas.alpha_composite(overlay)
            return result
        return paint(ImageDraw.Draw(canvas, "RGBA"))

    def paint_text(
        self, canvas: Image.Image, face: str, size_pt: float, position: Point, color: Color, text: str
    ) -> Rectangle:
        font = load_font(face, size_pt)
        xy = (round(position.x), round(position.y))

        def paint(draw: ImageDraw.ImageDraw) -> Rectangle:
            draw.text(xy, text, font=font, fill=color.rgba, anchor=BASELINE_ANCHOR)
            return Rectangle.from_corners(*draw.textbbox(xy, text, font=font, anchor=BASELINE_ANCHOR))

        return self._paint(canvas, color, paint)

    def paint_filled_rect(self, canvas: Image.Image, rect: Rectangle, color: Color) -> None:
        corners = [round(rect.left), round(rect.top), round(rect.right), round(rect.bottom)]
        self._paint(canvas, color, lambda draw: draw.rectangle(corners, fill=color.rgba))

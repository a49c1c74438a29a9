"""Font metrics from HarfBuzz shaping and FreeType sizing."""

import logging
from functools import lru_cache

import freetype
import uharfbuzz as hb

from boxtext.fonts import resolve_font_path
from boxtext.render.base import FontMetrics
from boxtext.types import BoundsCorners

logger = logging.getLogger(__name__)

# Rasterizers place points at 96 DPI, so a point is 4/3 of a pixel
TARGET_DPI = 96


@lru_cache(maxsize=64)
def _load_hb_font(face: str, size_pt: float) -> hb.Font:
    font_path = resolve_font_path(face)

    # Load font with FreeType to get the pixel size HarfBuzz should scale to
    ft_face = freetype.Face(str(font_path))
    ft_face.set_char_size(int(size_pt * 64), 0, TARGET_DPI, TARGET_DPI)  # 26.6 fixed-point format

    with open(font_path, "rb") as f:
        fontdata = f.read()

    hb_font = hb.Font(hb.Face(fontdata))
    # Scale to ppem so extents and advances come back in pixels
    hb_font.scale = (ft_face.size.x_ppem, ft_face.size.y_ppem)
    hb.ot_font_set_funcs(hb_font)
    logger.debug(f"Loaded {font_path.name} for shaping at {ft_face.size.y_ppem}ppem")
    return hb_font


class HarfBuzzMetrics(FontMetrics):
    """
    Ink bounds computed from shaped glyph positions and glyph extents.

    Independent of any rasterizer, which makes it useful for laying text out
    before a canvas exists.

    Glyphs without ink, such as spaces, measure zero wide, while
    ``PillowRasterizer`` reports the painted box of each glyph. With letter
    spacing set, pairing this provider with ``PillowRasterizer`` makes the
    measured line narrower than the painted one and shifts centre and right
    alignment. Use ``PillowMetrics`` with ``PillowRasterizer`` when spacing text.
    """

    def measure(self, face: str, size_pt: float, text: str) -> BoundsCorners:
        if not text:
            return (0.0, 0.0, 0.0, 0.0)

        hb_font = _load_hb_font(face, size_pt)

        buf = hb.Buffer()
        buf.add_str(text)
        buf.guess_segment_properties()
        hb.shape(hb_font, buf)

        # HarfBuzz coordinates: baseline at y=0, y grows upward,
        # y_bearing is the glyph top and height is negative
        xmin = ymin = float('inf')
        xmax = ymax = float('-inf')
        pen_x = 0

        for info, pos in zip(buf.glyph_infos, buf.glyph_positions):
            ext = hb_font.get_glyph_extents(info.codepoint)
            if ext and (ext.width != 0 or ext.height != 0):  # Skip zero-size glyphs like spaces
                glyph_left = pen_x + pos.x_offset + ext.x_bearing
                glyph_top = pos.y_offset + ext.y_bearing
                xmin = min(xmin, glyph_left)
                xmax = max(xmax, glyph_left + ext.width)
                ymax = max(ymax, glyph_top)
                ymin = min(ymin, glyph_top + ext.height)
            pen_x += pos.x_advance

        if xmin == float('inf'):
            # No visible glyphs (e.g., all spaces)
            return (0.0, 0.0, 0.0, 0.0)

        # Flip to y-down: lower edge is -ymin, upper edge is -ymax
        return (float(xmin), float(-ymin), float(xmax), float(-ymax))

"""High-level Python API."""

import logging

from PIL import Image

from boxtext.box import TextBox
from boxtext.color import Color, DebugColorSource
from boxtext.config import BoxConfig
from boxtext.geometry import Rectangle
from boxtext.render.image import PillowMetrics, PillowRasterizer

logger = logging.getLogger(__name__)

TRANSPARENT = Color(0, 0, 0, 0)


def render_text_image(
    text: str,
    width: int,
    height: int,
    config: BoxConfig,
    background: Color = TRANSPARENT,
    debug_colors: DebugColorSource | None = None,
) -> Image.Image:
    """
    Render text into a new image whose box covers the whole image.

    The configured box geometry is replaced with (0, 0, width, height); every
    other setting is used as is.

    Args:
        text: Text to draw. May contain line breaks.
        width: Image width in pixels.
        height: Image height in pixels.
        config: Box configuration (font face required).
        background: Image fill color. Default: transparent.
        debug_colors: Source of debug overlay colors when debug is enabled.

    Returns:
        RGBA image with the text drawn.
    """
    image = Image.new("RGBA", (width, height), background.rgba)
    box_config = config.model_copy(update={"box": Rectangle(0, 0, width, height)})

    text_box = TextBox.from_config(image, box_config, PillowMetrics(), PillowRasterizer(), debug_colors)
    placements = text_box.draw(text)
    logger.debug(f"Rendered {len(placements)} line(s) into {width}x{height} image")
    return image

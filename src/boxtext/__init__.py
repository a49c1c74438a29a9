"""Multi-line text layout inside a fixed box on a raster canvas."""

__version__ = "0.1.0"

# High-level Python API
from boxtext.api import render_text_image
from boxtext.box import TextBox
from boxtext.color import Color, fixed_debug_colors, random_debug_colors
from boxtext.config import BoxConfig, ConfigurationError, TextShadow, load_config
from boxtext.fonts import get_font_path, register_font, register_fonts
from boxtext.geometry import Point, Rectangle
from boxtext.layout.placer import LinePlacement
from boxtext.types import HorizontalAlignment, TextWrapping, VerticalAlignment

__all__ = [
    "BoxConfig",
    "Color",
    "ConfigurationError",
    "HorizontalAlignment",
    "LinePlacement",
    "Point",
    "Rectangle",
    "TextBox",
    "TextShadow",
    "TextWrapping",
    "VerticalAlignment",
    "fixed_debug_colors",
    "get_font_path",
    "load_config",
    "random_debug_colors",
    "register_font",
    "register_fonts",
    "render_text_image",
]

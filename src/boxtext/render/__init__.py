"""Rendering backends: font metrics providers and rasterizers."""

from boxtext.render.base import FontMetrics, Rasterizer
from boxtext.render.image import PillowMetrics, PillowRasterizer, load_font
from boxtext.render.shaping import HarfBuzzMetrics

__all__ = [
    "FontMetrics",
    "HarfBuzzMetrics",
    "PillowMetrics",
    "PillowRasterizer",
    "Rasterizer",
    "load_font",
]

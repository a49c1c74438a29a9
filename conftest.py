"""Shared test fixtures: fake collaborators with predictable geometry."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from boxtext.color import Color
from boxtext.geometry import Point, Rectangle
from boxtext.render.base import FontMetrics, Rasterizer

# Every glyph is GLYPH_WIDTH wide, rises ASCENT above the baseline and drops DESCENT below it
GLYPH_WIDTH = 10
ASCENT = 8
DESCENT = 2

SYSTEM_FONT_CANDIDATES = [
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
    Path("/usr/share/fonts/dejavu/DejaVuSans.ttf"),
    Path("/usr/share/fonts/TTF/DejaVuSans.ttf"),
    Path("/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf"),
    Path("/Library/Fonts/Arial.ttf"),
    Path("/System/Library/Fonts/Supplemental/Arial.ttf"),
    Path("C:/Windows/Fonts/arial.ttf"),
]


class FixedAdvanceMetrics(FontMetrics):
    """Monospaced metrics, with optional per-string width overrides."""

    def __init__(self, widths: dict[str, float] | None = None) -> None:
        self.widths = widths or {}
        self.calls: list[str] = []

    def measure(self, face, size_pt, text):
        self.calls.append(text)
        width = self.widths.get(text, GLYPH_WIDTH * len(text))
        return (0, DESCENT, width, -ASCENT)


@dataclass
class PaintCall:
    kind: str
    color: Color
    text: str | None = None
    position: Point | None = None
    rect: Rectangle | None = None


class RecordingRasterizer(Rasterizer):
    """Records paint calls and reports monospaced ink boxes."""

    def __init__(self) -> None:
        self.calls: list[PaintCall] = []

    def paint_text(self, canvas, face, size_pt, position, color, text):
        self.calls.append(PaintCall("text", color, text=text, position=Point(position.x, position.y)))
        return Rectangle(position.x, position.y - ASCENT, GLYPH_WIDTH * len(text), ASCENT + DESCENT)

    def paint_filled_rect(self, canvas, rect, color):
        self.calls.append(PaintCall("rect", color, rect=rect))

    def texts(self, color: Color | None = None) -> list[PaintCall]:
        return [c for c in self.calls if c.kind == "text" and (color is None or c.color == color)]

    def rects(self, color: Color | None = None) -> list[PaintCall]:
        return [c for c in self.calls if c.kind == "rect" and (color is None or c.color == color)]


@pytest.fixture
def metrics() -> FixedAdvanceMetrics:
    return FixedAdvanceMetrics()


@pytest.fixture
def rasterizer() -> RecordingRasterizer:
    return RecordingRasterizer()


@pytest.fixture
def system_font() -> Path:
    for candidate in SYSTEM_FONT_CANDIDATES:
        if candidate.is_file():
            return candidate
    pytest.skip("No TrueType font available on this system")

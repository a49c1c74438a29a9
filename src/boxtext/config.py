"""Text box configuration loading and validation."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from boxtext.color import BLACK, Color
from boxtext.geometry import Point, Rectangle
from boxtext.types import HorizontalAlignment, TextWrapping, VerticalAlignment

# Font sizes are configured in pixels; metrics and rasterizers expect points
PIXELS_TO_POINTS = 0.75


class ConfigurationError(ValueError):
    """Raised when a text box is configured with invalid or missing values."""


def _coerce_color(value: Any) -> Any:
    if isinstance(value, str):
        return Color.from_string(value)
    if isinstance(value, (list, tuple)):
        if len(value) not in (3, 4):
            raise ValueError(f"Color needs 3 or 4 channels, got {len(value)}")
        return Color(*value)
    return value


class TextShadow(BaseModel):
    """Drop shadow painted beneath each line."""

    model_config = ConfigDict(frozen=True)

    color: Color
    """Shadow color."""

    offset: Point = Field(default_factory=lambda: Point(0, 0))
    """Shadow position relative to the text. Positive x moves right, positive y moves down."""

    @field_validator("color", mode="before")
    @classmethod
    def _parse_color(cls, value: Any) -> Any:
        return _coerce_color(value)

    @field_validator("offset", mode="before")
    @classmethod
    def _parse_offset(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return Point(*value)
        return value


class BoxConfig(BaseModel):
    """
    Complete text box configuration.

    All parameters have defaults except the font face, which must be set before
    drawing. Assignments are validated immediately, so an invalid value fails
    when it is set rather than when the text is drawn:

        config = BoxConfig(font_face="Roboto-Regular", align_x="center")
        config.align_y = "middle"  # raises pydantic.ValidationError
    """

    model_config = ConfigDict(validate_assignment=True)

    # ========================================================================
    # Geometry
    # ========================================================================
    box: Rectangle = Field(default_factory=lambda: Rectangle(0, 0, 100, 100))
    """Target region on the canvas, in pixels."""

    # ========================================================================
    # Font
    # ========================================================================
    font_face: str | None = None
    """Registered font name or path to a TrueType/OpenType file."""

    font_size: float = Field(default=12, gt=0)
    """Font size in pixels."""

    font_color: Color = BLACK
    """Text color. Default: opaque black."""

    letter_spacing: int | None = None
    """Extra pixels between glyphs. None or 0 draws each line in a single call."""

    # ========================================================================
    # Layout
    # ========================================================================
    align_x: HorizontalAlignment = HorizontalAlignment.LEFT
    """Horizontal alignment of each line: left, center or right."""

    align_y: VerticalAlignment = VerticalAlignment.TOP
    """Vertical alignment of the text block: top, center or bottom."""

    text_wrapping: TextWrapping = TextWrapping.WRAP_WITH_OVERFLOW
    """Wrapping mode."""

    line_height: float = Field(default=1.25, gt=0)
    """Line pitch as a multiple of the font size."""

    baseline: float = Field(default=0.2, ge=0, le=1)
    """Baseline position as a fraction of the line height, measured from the line's bottom."""

    # ========================================================================
    # Decorations
    # ========================================================================
    stroke_size: int = Field(default=0, ge=0)
    """Stroke halo radius in pixels. 0 disables the stroke."""

    stroke_color: Color = BLACK
    """Stroke color. Default: opaque black."""

    text_shadow: TextShadow | None = None
    """Optional drop shadow."""

    background_color: Color | None = None
    """Optional band painted behind each non-empty line."""

    debug: bool = False
    """Fill the box and each line with debug colors."""

    @field_validator("font_color", "stroke_color", "background_color", mode="before")
    @classmethod
    def _parse_color(cls, value: Any) -> Any:
        return _coerce_color(value)

    @field_validator("box", mode="before")
    @classmethod
    def _parse_box(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return Rectangle(*value)
        return value

    # ========================================================================
    # Computed Properties
    # ========================================================================

    @property
    def font_size_points(self) -> float:
        """Font size converted to points for metrics and rasterizer calls."""
        return PIXELS_TO_POINTS * self.font_size

    @property
    def line_height_px(self) -> float:
        """Vertical pitch between successive lines, in pixels."""
        return self.line_height * self.font_size


def load_config(config_path: Path) -> BoxConfig:
    """
    Load a text box configuration from a TOML file.

    The file must contain a ``[box]`` table whose keys are BoxConfig fields.
    Colors may be hex strings or ``[r, g, b]``/``[r, g, b, a]`` lists, and the
    ``box`` key may be an ``[x, y, width, height]`` list:

        [box]
        box = [10, 10, 300, 120]
        font_face = "Roboto-Regular"
        font_size = 24
        font_color = "#202020"
        align_x = "center"
        text_shadow = { color = "#00000080", offset = [2, 2] }

    Args:
        config_path: Path to the TOML file.

    Returns:
        Validated BoxConfig.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigurationError: If the file content is invalid.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        try:
            config_dict = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {config_path}: {e}") from e

    if "box" not in config_dict:
        raise ConfigurationError(f"Missing [box] table in {config_path}")

    try:
        return BoxConfig.model_validate(config_dict["box"])
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e

"""Type aliases and closed option sets used across the boxtext package."""

from enum import Enum
from typing import Tuple

# Raw font-metrics result: (x_left, y_lower, x_right, y_upper) relative to the baseline origin
BoundsCorners = Tuple[float, float, float, float]


class HorizontalAlignment(str, Enum):
    """Horizontal placement of each line inside the box."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlignment(str, Enum):
    """Vertical placement of the whole text block inside the box."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class TextWrapping(str, Enum):
    """Line wrapping mode."""

    NO_WRAP = "NoWrap"
    """Draw the text as a single line, embedded line breaks included."""

    WRAP_WITH_OVERFLOW = "WrapWithOverflow"
    """Greedy word wrap; a single word wider than the box overflows."""

"""Color value type and debug color sources."""

import random
from dataclasses import dataclass
from itertools import cycle
from typing import Callable, Iterable, Literal

from PIL import ImageColor

# What a debug color is going to be painted on
DebugTarget = Literal["box", "line"]

# Returns the next debug color for the given target
DebugColorSource = Callable[[DebugTarget], "Color"]

# Opacity used for the translucent whole-box debug overlay
DEBUG_BOX_ALPHA = 94


@dataclass(frozen=True)
class Color:
    """
    RGBA color.

    Attributes:
        r: Red channel, 0-255.
        g: Green channel, 0-255.
        b: Blue channel, 0-255.
        alpha: Opacity, 0 (transparent) to 255 (opaque).
    """

    r: int
    g: int
    b: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel {name}={value} is outside 0-255")

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.alpha)

    @classmethod
    def from_string(cls, value: str) -> "Color":
        """
        Parse a color string with Pillow's color specifiers.

        Accepts "#rgb", "#rgba", "#rrggbb", "#rrggbbaa", "rgb(...)", "hsl(...)"
        and CSS color names such as "white" or "darkslategray".

        Args:
            value: Color string.

        Returns:
            Parsed Color.

        Raises:
            ValueError: If Pillow does not recognize the string.
        """
        try:
            return cls(*ImageColor.getcolor(value.strip(), "RGBA"))
        except ValueError as e:
            raise ValueError(f"Invalid color: {value!r}") from e


BLACK = Color(0, 0, 0)


def random_debug_colors(rng: random.Random | None = None) -> DebugColorSource:
    """
    Build a debug color source backed by a random generator.

    The whole box gets a light translucent color, lines get darker opaque ones.

    Args:
        rng: Random generator to draw from. Defaults to a fresh unseeded one.

    Returns:
        Callable returning a new color for each request.
    """
    rng = rng or random.Random()

    def next_color(target: DebugTarget) -> Color:
        if target == "box":
            return Color(rng.randint(180, 255), rng.randint(180, 255), rng.randint(180, 255), DEBUG_BOX_ALPHA)
        return Color(rng.randint(1, 180), rng.randint(1, 180), rng.randint(1, 180))

    return next_color


def fixed_debug_colors(colors: Iterable[Color]) -> DebugColorSource:
    """Build a debug color source that cycles through a fixed sequence, ignoring the target."""
    sequence = cycle(list(colors))
    return lambda target: next(sequence)

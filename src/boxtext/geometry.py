"""Rectangle and point primitives in pixel units."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle.

    Coordinates may be fractional; rasterizers round them at paint time.

    Attributes:
        x: Left edge in pixels.
        y: Top edge in pixels.
        width: Width in pixels.
        height: Height in pixels.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def with_width(self, width: float) -> "Rectangle":
        """Return a copy of this rectangle with a different width."""
        return replace(self, width=width)

    def normalized(self) -> "Rectangle":
        """Return the same area with non-negative width and height."""
        return Rectangle(
            min(self.left, self.right),
            min(self.top, self.bottom),
            abs(self.width),
            abs(self.height),
        )

    @classmethod
    def from_corners(cls, left: float, top: float, right: float, bottom: float) -> "Rectangle":
        """Build a rectangle from its left/top/right/bottom edges."""
        return cls(left, top, right - left, bottom - top)


@dataclass
class Point:
    """Pixel position. Mutable so it can serve as a drawing cursor."""

    x: float
    y: float

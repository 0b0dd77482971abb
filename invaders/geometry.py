"""Points, rectangles and the overlap test used for collisions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Point:
    """A position in screen coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Rect:
    """An axis-aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    width: float
    height: float

    def center(self) -> Point:
        """Return the centre point of the rectangle."""
        return Point(self.x + self.width / 2, self.y + self.height / 2)


def intersects(a: Rect, b: Rect) -> bool:
    """Return True if the two rectangles overlap; touching edges do not count."""
    x_overlap = a.x < b.x + b.width and b.x < a.x + a.width
    y_overlap = a.y < b.y + b.height and b.y < a.y + a.height
    return x_overlap and y_overlap
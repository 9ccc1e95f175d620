"""Geometric value objects for stroke rasterization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple


@dataclass(frozen=True)
class Point:
    """Immutable integer 2D point."""
    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> Tuple[int, int]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: Tuple[int, int]) -> Point:
        """Create from tuple."""
        return cls(int(t[0]), int(t[1]))


@dataclass(frozen=True)
class Rect:
    """Immutable pixel rectangle.

    Extents are inclusive pixel counts: a rectangle covering the single
    pixel (3, 4) is ``Rect(3, 4, 1, 1)``. ``Rect()`` is the empty rectangle.
    """
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def right(self) -> int:
        """Last column covered by the rectangle."""
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        """Last row covered by the rectangle."""
        return self.y + self.height - 1

    @property
    def center(self) -> Point:
        return Point(self.x + self.width // 2, self.y + self.height // 2)

    def contains(self, point: Point) -> bool:
        """Check if point is inside the rectangle."""
        return (self.x <= point.x < self.x + self.width and
                self.y <= point.y < self.y + self.height)

    def union(self, other: Rect) -> Rect:
        """Smallest rectangle enclosing both rectangles.

        An empty rectangle is the identity of the union.
        """
        if other.is_empty:
            return self
        if self.is_empty:
            return other
        x0 = min(self.x, other.x)
        y0 = min(self.y, other.y)
        x1 = max(self.x + self.width, other.x + other.width)
        y1 = max(self.y + self.height, other.y + other.height)
        return Rect(x0, y0, x1 - x0, y1 - y0)

    def __or__(self, other: Rect) -> Rect:
        return self.union(other)

    def inflate(self, dx: int, dy: int) -> Rect:
        """Grow the rectangle by dx/dy pixels on every side."""
        return Rect(self.x - dx, self.y - dy,
                    self.width + 2 * dx, self.height + 2 * dy)

    def to_tuple(self) -> Tuple[int, int, int, int]:
        """Convert to (x, y, width, height) tuple."""
        return (self.x, self.y, self.width, self.height)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> Rect:
        """Create the rectangle containing all points."""
        points = list(points)
        if not points:
            return cls()
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        x0, y0 = min(xs), min(ys)
        return cls(x0, y0, max(xs) - x0 + 1, max(ys) - y0 + 1)


@dataclass
class Stroke:
    """A stroke as an ordered sequence of integer points.

    Duplicated points are allowed and insertion order is significant.
    """
    points: List[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, idx) -> Point:
        return self.points[idx]

    def __setitem__(self, idx: int, point: Point) -> None:
        self.points[idx] = point

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def first(self) -> Point:
        """First point of stroke."""
        return self.points[0]

    @property
    def last(self) -> Point:
        """Last point of stroke."""
        return self.points[-1]

    def add_point(self, point: Point) -> None:
        self.points.append(point)

    def reset(self) -> None:
        """Drop every point."""
        self.points.clear()

    def copy(self) -> Stroke:
        return Stroke(list(self.points))

    def bounds(self) -> Rect:
        """Bounding rectangle of stroke (inclusive pixel extents)."""
        return Rect.from_points(self.points)

    def to_list(self) -> List[List[int]]:
        """Convert to nested list for JSON serialization."""
        return [[p.x, p.y] for p in self.points]

    @classmethod
    def from_tuples(cls, tuples: Iterable[Tuple[int, int]]) -> Stroke:
        """Create from an iterable of (x, y) tuples."""
        return cls([Point.from_tuple(t) for t in tuples])

"""Axis-aligned rectangle primitives used by the zoning core."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Inflated-overlap area (in grid squares) a pair must exceed to count as touching.
# Two rects sharing only a corner produce exactly this much overlap.
TOUCH_THRESHOLD = 0.25


@dataclass(frozen=True, slots=True)
class Point:
    """Plane point in world coordinates."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle compared and hashed by exact value."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_corners(cls, x0: float, y0: float, x1: float, y1: float) -> Rect:
        """Build a rect with non-negative extents from two opposite corners."""
        return cls(min(x0, x1), min(y0, y1), abs(x1 - x0), abs(y1 - y0))

    @property
    def x_min(self) -> float:
        return self.x

    @property
    def y_min(self) -> float:
        return self.y

    @property
    def x_max(self) -> float:
        return self.x + self.width

    @property
    def y_max(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def is_finite(self) -> bool:
        """Return whether every field is a finite number."""
        return all(math.isfinite(value) for value in (self.x, self.y, self.width, self.height))

    def quantized(self, digits: int) -> Rect:
        """Return a copy whose edges are rounded to ``digits`` decimals.

        Edges are rounded rather than the extents, so two rects computed to
        share an edge still share it after rounding.
        """
        x_min = round(self.x_min, digits)
        y_min = round(self.y_min, digits)
        x_max = round(self.x_max, digits)
        y_max = round(self.y_max, digits)
        return Rect(
            x_min,
            y_min,
            round(x_max - x_min, digits),
            round(y_max - y_min, digits),
        )

    def inflated(self, margin: float) -> Rect:
        """Grow the rect by ``margin`` on every side."""
        return Rect(
            self.x - margin,
            self.y - margin,
            self.width + 2 * margin,
            self.height + 2 * margin,
        )


EMPTY_RECT = Rect(0.0, 0.0, 0.0, 0.0)


def overlaps(a: Rect, b: Rect) -> bool:
    """Return whether the open coordinate ranges intersect on both axes."""
    return b.x_max > a.x_min and b.x_min < a.x_max and b.y_max > a.y_min and b.y_min < a.y_max


def overlap_region(a: Rect, b: Rect) -> Rect:
    """Return the largest rect inside both ``a`` and ``b``, or an empty rect."""
    if not overlaps(a, b):
        return EMPTY_RECT
    x_min = max(a.x_min, b.x_min)
    x_max = min(a.x_max, b.x_max)
    y_min = max(a.y_min, b.y_min)
    y_max = min(a.y_max, b.y_max)
    return Rect(x_min, y_min, max(0.0, x_max - x_min), max(0.0, y_max - y_min))


def normalized_size(rect: Rect, tolerance: float) -> float:
    """Return the rect size measured in grid squares."""
    return rect.width / tolerance * (rect.height / tolerance)


def contains_point(rect: Rect, point: Point) -> bool:
    """Half-open containment test, consistent with ``overlaps``."""
    return rect.x_min <= point.x < rect.x_max and rect.y_min <= point.y < rect.y_max


def is_touching(a: Rect, b: Rect, tolerance: float) -> bool:
    """Return whether two rects overlap or share an edge (corner contact excluded)."""
    if a == b:
        return True
    return _inflated_contact(a, b, tolerance) or _inflated_contact(b, a, tolerance)


def _inflated_contact(grown: Rect, other: Rect, tolerance: float) -> bool:
    inflated = grown.inflated(tolerance / 2)
    if not overlaps(inflated, other):
        return False
    return normalized_size(overlap_region(inflated, other), tolerance) > TOUCH_THRESHOLD


def cutout(shape: Rect, remove: Rect, tolerance: float = 1.0) -> list[Rect]:
    """Subtract ``remove`` from ``shape`` and return the disjoint remainders.

    Fragments are produced in a fixed order so repeated cutouts stay
    deterministic::

        -------------------------
        |          top          |
        |-----------------------|
        | left | overlap |right |
        |-----------------------|
        |        bottom         |
        -------------------------

    Top and bottom span the full width of ``shape``; left and right span only
    the overlap height.
    """
    if remove.width == 0 or remove.height == 0:
        return [shape]

    overlap = overlap_region(shape, remove)
    if overlap.width == 0 or overlap.height == 0:
        return [shape]
    if normalized_size(overlap, tolerance) >= normalized_size(shape, tolerance):
        return []

    fragments: list[Rect] = []

    top_height = overlap.y_min - shape.y_min
    if top_height > 0:
        fragments.append(Rect(shape.x_min, shape.y_min, shape.width, top_height))

    left_width = overlap.x_min - shape.x_min
    if left_width > 0:
        fragments.append(Rect(shape.x_min, overlap.y_min, left_width, overlap.height))

    right_width = shape.x_max - overlap.x_max
    if right_width > 0:
        fragments.append(Rect(overlap.x_max, overlap.y_min, right_width, overlap.height))

    bottom_height = shape.y_max - overlap.y_max
    if bottom_height > 0:
        fragments.append(Rect(shape.x_min, overlap.y_max, shape.width, bottom_height))

    return fragments

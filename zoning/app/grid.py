"""Grid snapping for drawn rectangles."""

from __future__ import annotations

from dataclasses import dataclass

from zoning.core.errors import InvalidToleranceError
from zoning.core.geometry import Point


@dataclass(frozen=True, slots=True)
class GridSnapper:
    """Snaps world coordinates to grid-cell corners."""

    cell_size: float = 1.0
    origin_x: float = 0.0
    origin_y: float = 0.0

    def __post_init__(self) -> None:
        if not self.cell_size > 0:
            raise InvalidToleranceError(f"cell_size must be positive, got {self.cell_size}")

    def nearest_corner(self, x: float, y: float) -> Point:
        """Return the grid corner closest to ``(x, y)``."""
        col = round((x - self.origin_x) / self.cell_size)
        row = round((y - self.origin_y) / self.cell_size)
        return Point(
            x=col * self.cell_size + self.origin_x,
            y=row * self.cell_size + self.origin_y,
        )

"""Pointer-driven zone drawing and deletion."""

from __future__ import annotations

import logging
from enum import StrEnum

from zoning.app.grid import GridSnapper
from zoning.core.geometry import Point, Rect
from zoning.core.zone_system import ZoneSystem

logger = logging.getLogger(__name__)


class DrawingMode(StrEnum):
    """What a completed drag does."""

    DRAW = "DRAW"
    DELETE = "DELETE"


class ZoneDrawingController:
    """Turns press/drag/release gestures into zone mutations.

    Both corners are snapped to the grid; the zone system only ever sees
    normalized, grid-aligned rects.
    """

    def __init__(
        self,
        zone_system: ZoneSystem,
        snapper: GridSnapper,
        mode: DrawingMode = DrawingMode.DRAW,
    ) -> None:
        self._zone_system = zone_system
        self._snapper = snapper
        self._mode = mode
        self._anchor: Point | None = None
        self._cursor: Point | None = None

    @property
    def mode(self) -> DrawingMode:
        return self._mode

    @property
    def is_drawing(self) -> bool:
        return self._anchor is not None

    @property
    def preview(self) -> Rect | None:
        """Rect currently being dragged out, if any."""
        if self._anchor is None or self._cursor is None:
            return None
        return Rect.from_corners(self._anchor.x, self._anchor.y, self._cursor.x, self._cursor.y)

    def set_mode(self, mode: DrawingMode) -> None:
        self._mode = DrawingMode(mode)

    def press(self, x: float, y: float) -> None:
        """Start a gesture at the grid corner nearest the pointer."""
        self._anchor = self._snapper.nearest_corner(x, y)
        self._cursor = self._anchor

    def drag(self, x: float, y: float) -> None:
        if self._anchor is None:
            return
        self._cursor = self._snapper.nearest_corner(x, y)

    def release(self, x: float | None = None, y: float | None = None) -> bool:
        """Finish the gesture and apply it. Returns whether zones changed."""
        if self._anchor is None:
            return False
        if x is not None and y is not None:
            self.drag(x, y)
        rect = self.preview
        self.cancel()
        if rect is None or rect.width == 0 or rect.height == 0:
            return False
        if self._mode is DrawingMode.DELETE:
            changed = self._zone_system.delete_rect(rect)
        else:
            changed = self._zone_system.add_rect(rect)
        logger.debug("zone_gesture_applied mode=%s rect=%s changed=%s", self._mode.value, rect, changed)
        return changed

    def cancel(self) -> None:
        self._anchor = None
        self._cursor = None

"""Zone orchestration over the rect partition.

Live rects never overlap. Adding a rect carves its area out of every rect it
overlaps, and deleting an area carves it out of every rect and then rebuilds
the unions of each zone the hole touched, since removing connecting rects
cannot be corrected locally.
"""

from __future__ import annotations

import logging
from collections import deque

from zoning.core.errors import InvalidRectangleError, InvalidToleranceError
from zoning.core.events import EventBus, ZoneChangeKind, ZonesChanged
from zoning.core.geometry import (
    Point,
    Rect,
    contains_point,
    cutout,
    is_touching,
    normalized_size,
    overlap_region,
)
from zoning.core.union_find import RectUnionFind

logger = logging.getLogger(__name__)

# Rects smaller than one grid square are never stored.
MIN_RECT_SIZE = 1.0


class ZoneSystem:
    """Owns the live rect set and its partition into distinct zones."""

    def __init__(
        self,
        tolerance: float = 1.0,
        *,
        precision: int | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        if not tolerance > 0:
            raise InvalidToleranceError(f"tolerance must be positive, got {tolerance}")
        self._tolerance = float(tolerance)
        self._precision = precision
        self._event_bus = event_bus
        self._uf = RectUnionFind()

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def rects(self) -> tuple[Rect, ...]:
        return tuple(self._uf)

    @property
    def rect_count(self) -> int:
        return len(self._uf)

    def size_of(self, rect: Rect) -> float:
        """Return a rect's size in grid squares."""
        return normalized_size(rect, self._tolerance)

    def add_rect(self, rect: Rect) -> bool:
        """Add a rect, cutting it out of any live rect it overlaps.

        Returns whether the live set changed.
        """
        rect = self._accept(rect)
        if self.size_of(rect) < MIN_RECT_SIZE:
            logger.debug("zone_add_rejected reason=below_minimum rect=%s", rect)
            return False
        if rect in self._uf:
            logger.debug("zone_add_rejected reason=already_present rect=%s", rect)
            return False

        self._drain(deque([rect]))
        logger.debug(
            "zone_rect_added rect=%s rects=%d areas=%d",
            rect,
            len(self._uf),
            self.get_distinct_areas(),
        )
        self._publish(ZoneChangeKind.ADDED, rect)
        return True

    def delete_rect(self, area: Rect) -> bool:
        """Remove ``area`` from every live rect and re-derive affected zones.

        Returns whether any rect was cut.
        """
        area = self._accept(area)
        pending: deque[Rect] = deque()
        sibling_batches: list[list[Rect]] = []
        for victim in self._uf:
            if victim in self._uf and self._overlap_size(victim, area) > 0:
                self._split(victim, area, pending, sibling_batches)
        if not sibling_batches:
            return False

        self._drain(pending, sibling_batches)

        rebuilt: set[Rect] = set()
        for rect in self._uf:
            if rect in rebuilt or not is_touching(rect, area, self._tolerance):
                continue
            zone = self._uf.members_of_zone(rect)
            self._recalculate_unions(zone)
            rebuilt.update(zone)

        logger.debug(
            "zone_area_deleted area=%s rects=%d areas=%d",
            area,
            len(self._uf),
            self.get_distinct_areas(),
        )
        self._publish(ZoneChangeKind.DELETED, area)
        return True

    def clear(self) -> bool:
        """Drop every live rect."""
        if not len(self._uf):
            return False
        for rect in self._uf:
            self._uf.remove(rect)
        self._publish(ZoneChangeKind.CLEARED, None)
        return True

    def get_distinct_areas(self) -> int:
        return self._uf.group_count()

    def get_area_point_is_in(self, point: Point) -> int | None:
        """Return the zone id of the first rect containing ``point``."""
        for rect in self._uf:
            if contains_point(rect, point):
                return self._uf.root(rect)
        return None

    def get_size_of_all_rects(self) -> int:
        """Total grid squares, truncated per rect before summing."""
        return sum(int(self.size_of(rect)) for rect in self._uf)

    def get_distinct_zone_rects(self) -> list[list[Rect]]:
        return self._uf.grouped_by_zone()

    def zone_of(self, rect: Rect) -> int:
        return self._uf.root(rect)

    def _accept(self, rect: Rect) -> Rect:
        if not rect.is_finite():
            raise InvalidRectangleError(f"rect must be finite, got {rect}")
        if rect.width <= 0 or rect.height <= 0:
            raise InvalidRectangleError(f"rect extents must be positive, got {rect}")
        return self._key(rect)

    def _key(self, rect: Rect) -> Rect:
        if self._precision is None:
            return rect
        return rect.quantized(self._precision)

    def _overlap_size(self, a: Rect, b: Rect) -> float:
        # Float noise below the key precision is not overlap.
        return self.size_of(self._key(overlap_region(a, b)))

    def _drain(
        self,
        pending: deque[Rect],
        sibling_batches: list[list[Rect]] | None = None,
    ) -> None:
        """Insert pending rects until none remain.

        Each inserted rect unions with its neighbours and cuts itself out of
        any rect it overlaps; the resulting fragments join the queue.
        """
        batches = sibling_batches if sibling_batches is not None else []
        while pending:
            rect = pending.popleft()
            if self.size_of(rect) < MIN_RECT_SIZE or rect in self._uf:
                continue
            self._uf.add(rect)
            self._calculate_unions(rect)
            for victim in self._uf:
                if victim == rect or victim not in self._uf:
                    continue
                if self._overlap_size(victim, rect) > 0:
                    self._split(victim, rect, pending, batches)

        for fragments in batches:
            live = [fragment for fragment in fragments if fragment in self._uf]
            for index, fragment in enumerate(live):
                for sibling in live[index + 1 :]:
                    if is_touching(fragment, sibling, self._tolerance):
                        self._uf.union(fragment, sibling)

    def _split(
        self,
        victim: Rect,
        cutter: Rect,
        pending: deque[Rect],
        batches: list[list[Rect]],
    ) -> None:
        fragments = [self._key(fragment) for fragment in cutout(victim, cutter, self._tolerance)]
        if victim in fragments:
            logger.debug("zone_split_skipped reason=unchanged_after_rounding victim=%s", victim)
            return
        self._uf.remove(victim)
        pending.extend(fragments)
        batches.append(fragments)

    def _calculate_unions(self, rect: Rect) -> None:
        for other in self._uf:
            if other != rect and is_touching(other, rect, self._tolerance):
                self._uf.union(rect, other)

    def _recalculate_unions(self, zone: list[Rect]) -> None:
        for rect in zone:
            self._uf.isolate(rect)
        for rect in zone:
            self._calculate_unions(rect)

    def _publish(self, kind: ZoneChangeKind, rect: Rect | None) -> None:
        if self._event_bus is None:
            return
        self._event_bus.publish(
            ZonesChanged(
                kind=kind,
                rect=rect,
                distinct_areas=self.get_distinct_areas(),
                rect_count=len(self._uf),
            )
        )

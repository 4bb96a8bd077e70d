"""Mesh buffers for drawing each distinct zone."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from zoning.core.events import EventBus, Subscription, ZonesChanged
from zoning.core.geometry import Rect
from zoning.core.zone_system import ZoneSystem

logger = logging.getLogger(__name__)

DEFAULT_ELEVATION = 0.5
ZONE_ALPHA = 0.4

# Two triangles per quad; corner order is (x0,y0), (x1,y0), (x0,y1), (x1,y1).
_QUAD_TRIANGLES = np.array([0, 2, 3, 1, 0, 3], dtype=np.int32)


@dataclass(frozen=True, slots=True)
class ZoneMesh:
    """Vertex and index buffers for a group of rects."""

    vertices: np.ndarray
    triangles: np.ndarray

    @property
    def quad_count(self) -> int:
        return len(self.vertices) // 4


@dataclass(frozen=True, slots=True)
class ZoneMeshLayer:
    """Drawable mesh for one distinct zone."""

    name: str
    color: tuple[float, float, float, float]
    mesh: ZoneMesh


def build_zone_mesh(rects: Sequence[Rect], elevation: float = DEFAULT_ELEVATION) -> ZoneMesh:
    """Build a quad per rect on the ``y = elevation`` plane."""
    vertices = np.zeros((len(rects) * 4, 3), dtype=np.float32)
    for index, rect in enumerate(rects):
        base = index * 4
        vertices[base] = (rect.x_min, elevation, rect.y_min)
        vertices[base + 1] = (rect.x_max, elevation, rect.y_min)
        vertices[base + 2] = (rect.x_min, elevation, rect.y_max)
        vertices[base + 3] = (rect.x_max, elevation, rect.y_max)
    offsets = np.repeat(np.arange(len(rects), dtype=np.int32) * 4, len(_QUAD_TRIANGLES))
    triangles = np.tile(_QUAD_TRIANGLES, len(rects)) + offsets
    return ZoneMesh(vertices=vertices, triangles=triangles.astype(np.int32))


class ZonePalette:
    """Random translucent colors, cached by zone index so redraws keep them."""

    def __init__(self, seed: int = 0, alpha: float = ZONE_ALPHA) -> None:
        self._rng = random.Random(seed)
        self._alpha = alpha
        self._colors: list[tuple[float, float, float, float]] = []

    def color_for(self, index: int) -> tuple[float, float, float, float]:
        while len(self._colors) <= index:
            self._colors.append((self._rng.random(), self._rng.random(), self._rng.random(), self._alpha))
        return self._colors[index]


class ZoneMeshRenderer:
    """Keeps one mesh layer per distinct zone in sync with a zone system."""

    def __init__(
        self,
        zone_system: ZoneSystem,
        palette: ZonePalette | None = None,
        elevation: float = DEFAULT_ELEVATION,
    ) -> None:
        self._zone_system = zone_system
        self._palette = palette or ZonePalette()
        self._elevation = elevation
        self._layers: tuple[ZoneMeshLayer, ...] = ()
        self._subscription: Subscription | None = None
        self.rebuild()

    @property
    def layers(self) -> tuple[ZoneMeshLayer, ...]:
        return self._layers

    def attach(self, bus: EventBus) -> Subscription:
        """Rebuild whenever the zone system publishes a change."""
        if self._subscription is None:
            self._subscription = bus.subscribe(ZonesChanged, self._on_zones_changed)
        return self._subscription

    def detach(self, bus: EventBus) -> None:
        if self._subscription is not None:
            bus.unsubscribe(self._subscription)
            self._subscription = None

    def rebuild(self) -> tuple[ZoneMeshLayer, ...]:
        layers = []
        for index, rects in enumerate(self._zone_system.get_distinct_zone_rects()):
            layers.append(
                ZoneMeshLayer(
                    name=f"Mesh {index}",
                    color=self._palette.color_for(index),
                    mesh=build_zone_mesh(rects, self._elevation),
                )
            )
        self._layers = tuple(layers)
        return self._layers

    def _on_zones_changed(self, event: ZonesChanged) -> None:
        self.rebuild()
        logger.debug("zone_meshes_rebuilt kind=%s layers=%d", event.kind.value, len(self._layers))

"""Explicit wiring of one zoning session."""

from __future__ import annotations

from dataclasses import dataclass

from zoning.app.drawing import ZoneDrawingController
from zoning.app.grid import GridSnapper
from zoning.app.summary import ZoneSummary
from zoning.core.events import EventBus
from zoning.core.zone_system import ZoneSystem
from zoning.infra.config import ZoningConfig
from zoning.render.mesh import ZoneMeshRenderer, ZonePalette


@dataclass(slots=True)
class ZoningSession:
    """One zone system and the collaborators that share it."""

    config: ZoningConfig
    event_bus: EventBus
    zone_system: ZoneSystem
    snapper: GridSnapper
    drawing: ZoneDrawingController
    renderer: ZoneMeshRenderer

    def summary(self) -> ZoneSummary:
        return ZoneSummary.from_zone_system(self.zone_system)


def build_zoning_session(config: ZoningConfig | None = None) -> ZoningSession:
    """Construct a zone system and hand it to the drawing and render surfaces."""
    config = config or ZoningConfig()
    event_bus = EventBus()
    zone_system = ZoneSystem(
        config.cell_size,
        precision=config.coord_precision,
        event_bus=event_bus,
    )
    snapper = GridSnapper(
        cell_size=config.cell_size,
        origin_x=config.grid_origin_x,
        origin_y=config.grid_origin_y,
    )
    renderer = ZoneMeshRenderer(
        zone_system,
        ZonePalette(seed=config.palette_seed),
        elevation=config.mesh_elevation,
    )
    renderer.attach(event_bus)
    return ZoningSession(
        config=config,
        event_bus=event_bus,
        zone_system=zone_system,
        snapper=snapper,
        drawing=ZoneDrawingController(zone_system, snapper),
        renderer=renderer,
    )

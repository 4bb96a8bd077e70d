from __future__ import annotations

import pytest

from zoning.core.events import EventBus, ZonesChanged
from zoning.core.zone_system import ZoneSystem


@pytest.fixture
def zone_system() -> ZoneSystem:
    return ZoneSystem(1.0)


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def recorded_events(event_bus: EventBus) -> list[ZonesChanged]:
    seen: list[ZonesChanged] = []
    event_bus.subscribe(ZonesChanged, seen.append)
    return seen

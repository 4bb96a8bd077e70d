from __future__ import annotations

from dataclasses import dataclass

from zoning.core.events import EventBus, ZoneChangeKind, ZonesChanged
from zoning.core.geometry import Rect
from zoning.core.zone_system import ZoneSystem


@dataclass(frozen=True, slots=True)
class BaseEvent:
    name: str


@dataclass(frozen=True, slots=True)
class DerivedEvent(BaseEvent):
    code: int


def test_event_bus_publish_invokes_subscribers() -> None:
    bus = EventBus()
    seen: list[str] = []
    bus.subscribe(BaseEvent, lambda event: seen.append(event.name))

    invoked = bus.publish(BaseEvent(name="hello"))

    assert invoked == 1
    assert seen == ["hello"]


def test_event_bus_supports_polymorphic_subscription() -> None:
    bus = EventBus()
    seen: list[str] = []
    bus.subscribe(BaseEvent, lambda event: seen.append(event.name))

    assert bus.publish(DerivedEvent(name="child", code=42)) == 1
    assert seen == ["child"]


def test_event_bus_unsubscribe_stops_dispatch() -> None:
    bus = EventBus()
    seen: list[str] = []
    subscription = bus.subscribe(BaseEvent, lambda event: seen.append(event.name))
    bus.unsubscribe(subscription)

    assert bus.publish(BaseEvent(name="ignored")) == 0
    assert seen == []


def test_zone_system_publishes_after_each_change(event_bus: EventBus, recorded_events: list[ZonesChanged]) -> None:
    zones = ZoneSystem(1.0, event_bus=event_bus)

    zones.add_rect(Rect(0, 0, 2, 2))
    zones.add_rect(Rect(5, 0, 2, 2))
    zones.delete_rect(Rect(0, 0, 2, 2))
    zones.clear()

    assert [event.kind for event in recorded_events] == [
        ZoneChangeKind.ADDED,
        ZoneChangeKind.ADDED,
        ZoneChangeKind.DELETED,
        ZoneChangeKind.CLEARED,
    ]
    assert [event.distinct_areas for event in recorded_events] == [1, 2, 1, 0]
    assert recorded_events[0].rect == Rect(0, 0, 2, 2)
    assert recorded_events[-1].rect is None
    assert recorded_events[-1].rect_count == 0


def test_zone_system_stays_quiet_when_nothing_changes(
    event_bus: EventBus, recorded_events: list[ZonesChanged]
) -> None:
    zones = ZoneSystem(1.0, event_bus=event_bus)
    zones.add_rect(Rect(0, 0, 0.5, 0.5))
    zones.delete_rect(Rect(3, 3, 1, 1))
    zones.clear()
    assert recorded_events == []

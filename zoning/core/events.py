"""Zone change notifications and a small in-process event bus."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeVar

from zoning.core.geometry import Rect

TEvent = TypeVar("TEvent")
EventHandler = Callable[[Any], None]


class ZoneChangeKind(StrEnum):
    """Mutator that produced a change."""

    ADDED = "ADDED"
    DELETED = "DELETED"
    CLEARED = "CLEARED"


@dataclass(frozen=True, slots=True)
class ZonesChanged:
    """Published synchronously at the end of a mutator that changed zones."""

    kind: ZoneChangeKind
    rect: Rect | None
    distinct_areas: int
    rect_count: int


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int


class EventBus:
    """Simple synchronous pub/sub keyed by event type."""

    def __init__(self) -> None:
        self._next_id = 1
        self._subscriptions: dict[int, tuple[type[object], EventHandler]] = {}

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Subscribe handler for an event type."""
        sub_id = self._next_id
        self._next_id += 1
        self._subscriptions[sub_id] = (event_type, handler)
        return Subscription(sub_id)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if present."""
        self._subscriptions.pop(subscription.id, None)

    def publish(self, event: object) -> int:
        """Publish one event and return number of invoked handlers."""
        invoked = 0
        for subscribed_type, handler in tuple(self._subscriptions.values()):
            if isinstance(event, subscribed_type):
                handler(event)
                invoked += 1
        return invoked

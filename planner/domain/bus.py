"""Simple synchronous in-process event bus."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable

Handler = Callable[[Any], None]


class EventBus:
    """Publish/subscribe bus for domain events.

    A handler subscribed to a class also receives instances of its
    subclasses. Handlers run synchronously, most specific class first and in
    registration order within a class.
    """

    def __init__(self) -> None:
        self._subscribers: dict[type, list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: type, handler: Handler) -> None:
        self._subscribers[event_type].append(handler)

    def publish(self, event: Any) -> int:
        """Deliver *event* and return how many handlers ran."""
        delivered = 0
        for cls in type(event).__mro__:
            for handler in self._subscribers.get(cls, []):
                handler(event)
                delivered += 1
        return delivered

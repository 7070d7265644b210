"""Domain event handlers, wired up at application startup."""

from __future__ import annotations

import logging

from planner.domain.bus import EventBus
from planner.domain.events import ConflictDetected, EventCreated, EventValidationFailed

logger = logging.getLogger(__name__)

_TIME_FORMAT = "%Y-%m-%d %H:%M"


class HandlerRegistry:
    """Wires logging handlers for schedule outcomes to the bus."""

    def __init__(self, bus: EventBus) -> None:
        self.bus = bus
        self._register()

    def _register(self) -> None:
        self.bus.subscribe(EventCreated, self.on_event_created)
        self.bus.subscribe(ConflictDetected, self.on_conflict_detected)
        self.bus.subscribe(EventValidationFailed, self.on_validation_failed)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def on_event_created(self, event: EventCreated) -> None:
        logger.info(
            "Event %s created (%s - %s)",
            event.title,
            event.start_time.strftime(_TIME_FORMAT),
            event.end_time.strftime(_TIME_FORMAT),
        )

    def on_conflict_detected(self, event: ConflictDetected) -> None:
        logger.warning(
            "Event %s overlaps with the event: %s", event.title, event.conflicting_title
        )

    def on_validation_failed(self, event: EventValidationFailed) -> None:
        logger.warning("Event %s rejected: %s", event.title, event.reason)

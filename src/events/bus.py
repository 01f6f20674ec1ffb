# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Event bus for group lifecycle notifications."""

import inspect
import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class GroupEvent(str, Enum):
    """Events emitted by the group store."""

    GROUP_CREATED = "group.created"
    GROUP_UPDATED = "group.updated"


@dataclass
class EventPayload:
    """Payload for a group event."""

    event_type: GroupEvent
    timestamp: datetime
    data: dict[str, Any]
    source: str | None = None  # None means from host app


# Type alias for event handlers
EventHandler = Callable[[EventPayload], Any]


class EventBus:
    """Central event bus for group events.

    Handlers may be sync or async. Every handler runs even if an earlier one
    fails; failures are logged with the subscriber id. When the bus is
    created with ``propagate_errors=True`` the first failure is re-raised to
    the publisher once all handlers have run.
    """

    def __init__(self, propagate_errors: bool = False) -> None:
        """Initialize the event bus.

        Args:
            propagate_errors: Re-raise handler failures from ``publish``
        """
        self.propagate_errors = propagate_errors
        self._handlers: dict[GroupEvent, list[tuple[str | None, EventHandler]]] = (
            defaultdict(list)
        )
        self._async_handlers: dict[
            GroupEvent, list[tuple[str | None, EventHandler]]
        ] = defaultdict(list)

    def subscribe(
        self,
        event_type: GroupEvent,
        handler: EventHandler,
        subscriber_id: str | None = None,
    ) -> None:
        """Subscribe to an event.

        Args:
            event_type: Event type to subscribe to
            handler: Function to call when event fires (sync or async)
            subscriber_id: Identifier of the subscriber (for tracking/unsubscribe)
        """
        if inspect.iscoroutinefunction(handler):
            self._async_handlers[event_type].append((subscriber_id, handler))
        else:
            self._handlers[event_type].append((subscriber_id, handler))

        logger.debug(
            f"Subscribed {subscriber_id or 'host'} to event {event_type.value}"
        )

    def unsubscribe(
        self,
        event_type: GroupEvent,
        handler: EventHandler,
        subscriber_id: str | None = None,
    ) -> None:
        """Unsubscribe a single handler from an event."""
        entry = (subscriber_id, handler)
        if entry in self._handlers[event_type]:
            self._handlers[event_type].remove(entry)
        if entry in self._async_handlers[event_type]:
            self._async_handlers[event_type].remove(entry)

    def unsubscribe_all(self, subscriber_id: str) -> None:
        """Remove all handlers registered under a subscriber id."""
        for registry in (self._handlers, self._async_handlers):
            for event_type in list(registry.keys()):
                registry[event_type] = [
                    (sid, handler)
                    for sid, handler in registry[event_type]
                    if sid != subscriber_id
                ]

        logger.debug(f"Unsubscribed all handlers for {subscriber_id}")

    async def publish(
        self,
        event_type: GroupEvent,
        data: dict[str, Any],
        source: str | None = None,
    ) -> None:
        """Publish an event to all subscribers.

        Args:
            event_type: Type of event
            data: Event data payload
            source: Name of the component that generated the event

        Raises:
            Exception: The first handler failure, if ``propagate_errors`` is set
        """
        payload = EventPayload(
            event_type=event_type,
            timestamp=datetime.now(UTC),
            data=data,
            source=source,
        )
        first_error: Exception | None = None

        for subscriber_id, handler in self._handlers.get(event_type, []):
            try:
                handler(payload)
            except Exception as e:
                logger.error(
                    f"Error in sync event handler for {event_type.value} "
                    f"(subscriber: {subscriber_id}): {e}"
                )
                first_error = first_error or e

        for subscriber_id, handler in self._async_handlers.get(event_type, []):
            try:
                await handler(payload)
            except Exception as e:
                logger.error(
                    f"Error in async event handler for {event_type.value} "
                    f"(subscriber: {subscriber_id}): {e}"
                )
                first_error = first_error or e

        if first_error is not None and self.propagate_errors:
            raise first_error

    def get_subscriber_count(self, event_type: GroupEvent) -> int:
        """Get the number of subscribers for an event type."""
        sync_count = len(self._handlers.get(event_type, []))
        async_count = len(self._async_handlers.get(event_type, []))
        return sync_count + async_count

    def get_subscribed_events(self, subscriber_id: str) -> list[GroupEvent]:
        """Get all events a subscriber is registered for."""
        events = set()
        for registry in (self._handlers, self._async_handlers):
            for event_type, handlers in registry.items():
                if any(sid == subscriber_id for sid, _ in handlers):
                    events.add(event_type)
        return list(events)


# Application event bus; reconciliation failures surface to the publisher
event_bus = EventBus(propagate_errors=True)

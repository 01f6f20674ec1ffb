# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the group event bus."""

from datetime import UTC, datetime

import pytest

from src.events import EventBus, EventPayload, GroupEvent


class TestGroupEvent:
    """Tests for GroupEvent enum."""

    def test_group_events(self):
        """Test group event values."""
        assert GroupEvent.GROUP_CREATED.value == "group.created"
        assert GroupEvent.GROUP_UPDATED.value == "group.updated"


class TestEventPayload:
    """Tests for EventPayload dataclass."""

    def test_create_payload(self):
        """Test creating an event payload."""
        now = datetime.now(UTC)
        payload = EventPayload(
            event_type=GroupEvent.GROUP_CREATED,
            timestamp=now,
            data={"group": "123"},
        )
        assert payload.event_type == GroupEvent.GROUP_CREATED
        assert payload.timestamp == now
        assert payload.data["group"] == "123"
        assert payload.source is None


class TestEventBus:
    """Tests for EventBus class."""

    @pytest.fixture
    def event_bus(self):
        """Create a fresh EventBus for each test."""
        return EventBus()

    def test_subscribe_sync_and_async_handlers(self, event_bus):
        """Test that sync and async handlers are both counted."""

        def sync_handler(payload):
            pass

        async def async_handler(payload):
            pass

        event_bus.subscribe(GroupEvent.GROUP_CREATED, sync_handler, "sub-1")
        event_bus.subscribe(GroupEvent.GROUP_CREATED, async_handler, "sub-2")
        assert event_bus.get_subscriber_count(GroupEvent.GROUP_CREATED) == 2
        assert event_bus.get_subscriber_count(GroupEvent.GROUP_UPDATED) == 0

    def test_unsubscribe_handler(self, event_bus):
        """Test unsubscribing a handler."""

        def handler(payload):
            pass

        event_bus.subscribe(GroupEvent.GROUP_UPDATED, handler, "sub")
        event_bus.unsubscribe(GroupEvent.GROUP_UPDATED, handler, "sub")
        assert event_bus.get_subscriber_count(GroupEvent.GROUP_UPDATED) == 0

    def test_unsubscribe_all_preserves_others(self, event_bus):
        """Test that unsubscribing one subscriber keeps the other's handlers."""

        def handler1(payload):
            pass

        async def handler2(payload):
            pass

        event_bus.subscribe(GroupEvent.GROUP_CREATED, handler1, "sub-1")
        event_bus.subscribe(GroupEvent.GROUP_UPDATED, handler2, "sub-1")
        event_bus.subscribe(GroupEvent.GROUP_CREATED, handler1, "sub-2")

        event_bus.unsubscribe_all("sub-1")

        assert event_bus.get_subscriber_count(GroupEvent.GROUP_CREATED) == 1
        assert event_bus.get_subscriber_count(GroupEvent.GROUP_UPDATED) == 0
        assert event_bus.get_subscribed_events("sub-1") == []

    def test_get_subscribed_events(self, event_bus):
        """Test getting events a subscriber is registered for."""

        async def handler(payload):
            pass

        event_bus.subscribe(GroupEvent.GROUP_CREATED, handler, "sub")
        event_bus.subscribe(GroupEvent.GROUP_UPDATED, handler, "sub")

        events = event_bus.get_subscribed_events("sub")

        assert set(events) == {GroupEvent.GROUP_CREATED, GroupEvent.GROUP_UPDATED}

    @pytest.mark.asyncio
    async def test_publish_to_handlers(self, event_bus):
        """Test publishing reaches sync and async handlers."""
        received = []

        def sync_handler(payload):
            received.append(("sync", payload))

        async def async_handler(payload):
            received.append(("async", payload))

        event_bus.subscribe(GroupEvent.GROUP_CREATED, sync_handler)
        event_bus.subscribe(GroupEvent.GROUP_CREATED, async_handler)

        await event_bus.publish(
            GroupEvent.GROUP_CREATED, {"group": "g1"}, source="tests"
        )

        assert [kind for kind, _ in received] == ["sync", "async"]
        assert received[0][1].data["group"] == "g1"
        assert received[1][1].source == "tests"

    @pytest.mark.asyncio
    async def test_publish_handler_error_does_not_stop_others(self, event_bus):
        """Test that one handler error doesn't stop other handlers."""
        received = []

        async def failing_handler(payload):
            raise ValueError("Handler failed")

        async def working_handler(payload):
            received.append(payload)

        event_bus.subscribe(GroupEvent.GROUP_UPDATED, failing_handler, "sub-1")
        event_bus.subscribe(GroupEvent.GROUP_UPDATED, working_handler, "sub-2")

        # Should not raise, and working handler should still be called
        await event_bus.publish(GroupEvent.GROUP_UPDATED, {"test": "data"})

        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_propagating_bus_raises_after_all_handlers(self):
        """Test that a propagating bus re-raises once every handler ran."""
        event_bus = EventBus(propagate_errors=True)
        received = []

        def failing_handler(payload):
            raise ValueError("Handler failed")

        async def working_handler(payload):
            received.append(payload)

        event_bus.subscribe(GroupEvent.GROUP_CREATED, failing_handler, "sub-1")
        event_bus.subscribe(GroupEvent.GROUP_CREATED, working_handler, "sub-2")

        with pytest.raises(ValueError, match="Handler failed"):
            await event_bus.publish(GroupEvent.GROUP_CREATED, {"test": "data"})

        assert len(received) == 1

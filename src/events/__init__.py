# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Group lifecycle events."""

from src.events.bus import EventBus, EventHandler, EventPayload, GroupEvent, event_bus

__all__ = [
    "EventBus",
    "EventHandler",
    "EventPayload",
    "GroupEvent",
    "event_bus",
]

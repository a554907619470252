"""Publish/subscribe channel between the device layer and its listeners."""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Callable
import logging

logger = logging.getLogger(__name__)


class EventType(Enum):
    DEVICE_ADDED = "device_added"  # data: DeviceControl
    DEVICE_REMOVED = "device_removed"  # data: DeviceControl
    DEVICE_STATE_CHANGED = "device_state_changed"  # data: StatusMessage
    INVALID_INPUT = "invalid_input"  # data: StatusMessage


@dataclass
class Event:
    type: EventType
    data: Any = None


Handler = Callable[[Event], None]


class EventBus:
    """Delivers each event to the handlers subscribed to its type, in order.

    A failing handler is logged and does not stop delivery to the rest.
    """

    def __init__(self):
        self._handlers: dict[EventType, list[Handler]] = {}

    def subscribe(self, event_type: EventType, handler: Handler) -> None:
        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, event_type: EventType, handler: Handler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: Event) -> None:
        for handler in list(self._handlers.get(event.type, [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Handler for {event.type.value} failed: {e}")

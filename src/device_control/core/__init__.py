"""Core modules for Device Control."""

from .events import EventBus, Event, EventType

__all__ = ["EventBus", "Event", "EventType"]

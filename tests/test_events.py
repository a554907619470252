from __future__ import annotations

from device_control.core import Event, EventBus, EventType


def test_publish_reaches_subscribers_of_that_type_only():
    bus = EventBus()
    changed, invalid = [], []
    bus.subscribe(EventType.DEVICE_STATE_CHANGED, changed.append)
    bus.subscribe(EventType.INVALID_INPUT, invalid.append)

    event = Event(EventType.DEVICE_STATE_CHANGED, data="light")
    bus.publish(event)

    assert changed == [event]
    assert invalid == []


def test_subscribe_twice_delivers_once():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.DEVICE_ADDED, received.append)
    bus.subscribe(EventType.DEVICE_ADDED, received.append)

    bus.publish(Event(EventType.DEVICE_ADDED))

    assert len(received) == 1


def test_unsubscribe():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.DEVICE_REMOVED, received.append)
    bus.unsubscribe(EventType.DEVICE_REMOVED, received.append)
    bus.unsubscribe(EventType.DEVICE_REMOVED, received.append)

    bus.publish(Event(EventType.DEVICE_REMOVED))

    assert received == []


def test_failing_handler_does_not_stop_others():
    bus = EventBus()
    received = []

    def _boom(event):
        raise RuntimeError("handler failed")

    bus.subscribe(EventType.DEVICE_ADDED, _boom)
    bus.subscribe(EventType.DEVICE_ADDED, received.append)

    bus.publish(Event(EventType.DEVICE_ADDED))

    assert len(received) == 1

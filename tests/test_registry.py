from __future__ import annotations

from device_control.devices import (
    DeviceRegistry,
    DeviceType,
    GarageDoorControl,
    LightControl,
    ThermostatControl,
    create_default_devices,
)


def _filled_registry() -> DeviceRegistry:
    registry = DeviceRegistry()
    for device in create_default_devices():
        registry.add_device(device)
    return registry


def test_holds_every_device_kind_in_insertion_order():
    registry = _filled_registry()

    assert len(registry) == 4
    assert registry.device_count == 4
    assert [d.device_type for d in registry] == list(DeviceType)


def test_iterating_turns_each_device_on_and_off():
    registry = _filled_registry()

    for device in registry:
        device.turn_on()
        assert device.is_active
        device.turn_off()
        assert not device.is_active

    assert registry.get_device("smart_lock").is_locked()
    assert registry.get_device("thermostat").get_temperature() == 20


def test_duplicate_id_is_rejected():
    registry = DeviceRegistry()

    assert registry.add_device(LightControl(device_id="hall"))
    assert not registry.add_device(GarageDoorControl(device_id="hall"))
    assert isinstance(registry.get_device("hall"), LightControl)


def test_remove_and_lookup():
    registry = _filled_registry()

    removed = registry.remove_device("light")
    assert isinstance(removed, LightControl)
    assert "light" not in registry
    assert registry.remove_device("light") is None
    assert registry.get_device("missing") is None


def test_get_devices_by_type():
    registry = DeviceRegistry()
    registry.add_device(ThermostatControl(device_id="up"))
    registry.add_device(ThermostatControl(device_id="down"))
    registry.add_device(LightControl(device_id="hall"))

    thermostats = registry.get_devices_by_type(DeviceType.THERMOSTAT)
    assert [d.device_id for d in thermostats] == ["up", "down"]
    assert registry.get_devices_by_type(DeviceType.SMART_LOCK) == []


def test_callbacks_and_clear():
    added, removed = [], []
    registry = DeviceRegistry()
    registry.on_device_added(added.append)
    registry.on_device_removed(removed.append)

    light = LightControl()
    registry.add_device(light)
    registry.clear()

    assert added == [light]
    assert removed == [light]
    assert len(registry) == 0


def test_failing_callback_does_not_block_registration():
    def _boom(device):
        raise RuntimeError("callback failed")

    registry = DeviceRegistry()
    registry.on_device_added(_boom)

    assert registry.add_device(LightControl(device_id="hall"))
    assert "hall" in registry

"""Construction helpers for device controls."""

from typing import Optional

from .base import DeviceControl, DeviceType
from .light import LightControl
from .thermostat import ThermostatControl
from .smart_lock import SmartLockControl
from .garage_door import GarageDoorControl

DEVICE_CLASSES: dict[DeviceType, type[DeviceControl]] = {
    DeviceType.LIGHT: LightControl,
    DeviceType.THERMOSTAT: ThermostatControl,
    DeviceType.SMART_LOCK: SmartLockControl,
    DeviceType.GARAGE_DOOR: GarageDoorControl,
}


def create_device(
    device_type: DeviceType,
    device_id: Optional[str] = None,
    name: Optional[str] = None,
) -> DeviceControl:
    """Create a device in its default state.

    Args:
        device_type: Kind of device to create
        device_id: Optional identifier
        name: Optional display name

    Returns:
        The new device
    """
    return DEVICE_CLASSES[device_type](device_id=device_id, name=name)


def create_default_devices() -> list[DeviceControl]:
    """Create one device of each kind: light, thermostat, lock, garage door."""
    return [create_device(device_type, device_id=device_type.value) for device_type in DeviceType]

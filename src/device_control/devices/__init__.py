"""Device control layer."""

from .base import DeviceControl, DeviceType, DeviceCapability, StatusMessage
from .light import LightControl
from .thermostat import ThermostatControl
from .smart_lock import SmartLockControl
from .garage_door import GarageDoorControl
from .factory import create_device, create_default_devices
from .registry import DeviceRegistry

__all__ = [
    "DeviceControl",
    "DeviceType",
    "DeviceCapability",
    "StatusMessage",
    "LightControl",
    "ThermostatControl",
    "SmartLockControl",
    "GarageDoorControl",
    "create_device",
    "create_default_devices",
    "DeviceRegistry",
]

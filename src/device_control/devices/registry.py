"""Collection of the devices owned by the application."""

from typing import Optional, Callable, Iterator
from .base import DeviceControl, DeviceType
import logging

logger = logging.getLogger(__name__)

DeviceCallback = Callable[[DeviceControl], None]


class DeviceRegistry:
    """Holds devices of any kind, keyed by ``device_id``.

    Iteration follows insertion order. Listeners registered with
    ``on_device_added`` / ``on_device_removed`` receive the device itself.
    """

    def __init__(self):
        self._devices: dict[str, DeviceControl] = {}
        self._added_listeners: list[DeviceCallback] = []
        self._removed_listeners: list[DeviceCallback] = []

    @property
    def devices(self) -> list[DeviceControl]:
        return list(self._devices.values())

    @property
    def device_count(self) -> int:
        return len(self._devices)

    def _notify(self, listeners: list[DeviceCallback], device: DeviceControl) -> None:
        for listener in listeners:
            try:
                listener(device)
            except Exception as e:
                logger.error(f"Registry listener failed for {device.device_id}: {e}")

    def add_device(self, device: DeviceControl) -> bool:
        """Register a device.

        Returns:
            False if another device already uses the same id
        """
        if device.device_id in self._devices:
            logger.debug(f"Device id {device.device_id} is taken, not adding {device!r}")
            return False

        self._devices[device.device_id] = device
        logger.info(f"Registered {device.name} ({device.device_id})")
        self._notify(self._added_listeners, device)
        return True

    def remove_device(self, device_id: str) -> Optional[DeviceControl]:
        """Unregister a device and return it, or None if the id is unknown."""
        device = self._devices.pop(device_id, None)

        if device:
            logger.info(f"Unregistered {device.name} ({device_id})")
            self._notify(self._removed_listeners, device)

        return device

    def get_device(self, device_id: str) -> Optional[DeviceControl]:
        return self._devices.get(device_id)

    def get_devices_by_type(self, device_type: DeviceType) -> list[DeviceControl]:
        return [d for d in self._devices.values() if d.device_type == device_type]

    def on_device_added(self, callback: DeviceCallback) -> None:
        self._added_listeners.append(callback)

    def on_device_removed(self, callback: DeviceCallback) -> None:
        self._removed_listeners.append(callback)

    def clear(self) -> None:
        for device_id in list(self._devices):
            self.remove_device(device_id)

    def __contains__(self, device_id: str) -> bool:
        return device_id in self._devices

    def __len__(self) -> int:
        return len(self._devices)

    def __iter__(self) -> Iterator[DeviceControl]:
        return iter(self._devices.values())

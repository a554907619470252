"""Garage door control."""

from typing import Optional, Any

from .base import DeviceControl, DeviceType
from ..i18n import _


class GarageDoorControl(DeviceControl):
    """A garage door that opens on ``turn_on`` and closes on ``turn_off``."""

    def __init__(self, device_id: Optional[str] = None, name: Optional[str] = None):
        super().__init__(device_id=device_id, name=name)
        self._open = False

    @property
    def device_type(self) -> DeviceType:
        return DeviceType.GARAGE_DOOR

    @property
    def is_active(self) -> bool:
        return self._open

    def is_open(self) -> bool:
        return self._open

    def _do_turn_on(self) -> None:
        self._open = True
        self._report(_("garage_door_open"))

    def _do_turn_off(self) -> None:
        self._open = False
        self._report(_("garage_door_closed"))

    def _state_dict(self) -> dict[str, Any]:
        return {"open": self._open}

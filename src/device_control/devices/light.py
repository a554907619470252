"""Light control."""

from typing import Optional, Any

from .base import DeviceControl, DeviceType
from ..i18n import _


class LightControl(DeviceControl):
    """A light that is either on or off. Starts off."""

    def __init__(self, device_id: Optional[str] = None, name: Optional[str] = None):
        super().__init__(device_id=device_id, name=name)
        self._on = False

    @property
    def device_type(self) -> DeviceType:
        return DeviceType.LIGHT

    @property
    def is_active(self) -> bool:
        return self._on

    def is_light_on(self) -> bool:
        return self._on

    def _do_turn_on(self) -> None:
        self._on = True
        self._report(_("light_on"))

    def _do_turn_off(self) -> None:
        self._on = False
        self._report(_("light_off"))

    def _state_dict(self) -> dict[str, Any]:
        return {"on": self._on}

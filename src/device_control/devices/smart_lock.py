"""Smart lock control."""

from typing import Optional, Any

from .base import DeviceControl, DeviceType
from ..i18n import _


class SmartLockControl(DeviceControl):
    """A door lock. Starts locked.

    "On" means unlocked and "off" means locked, so ``turn_on`` unlocks the
    door and ``turn_off`` locks it.
    """

    def __init__(self, device_id: Optional[str] = None, name: Optional[str] = None):
        super().__init__(device_id=device_id, name=name)
        self._locked = True

    @property
    def device_type(self) -> DeviceType:
        return DeviceType.SMART_LOCK

    @property
    def is_active(self) -> bool:
        return not self._locked

    def is_locked(self) -> bool:
        return self._locked

    def _do_turn_on(self) -> None:
        self._locked = False
        self._report(_("smart_lock_unlocked"))

    def _do_turn_off(self) -> None:
        self._locked = True
        self._report(_("smart_lock_locked"))

    def _state_dict(self) -> dict[str, Any]:
        return {"locked": self._locked}

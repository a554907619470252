"""Display text for device states and actions, and parsing of entry text."""

from typing import Optional
import logging

from ..devices.base import DeviceControl, DeviceType
from ..devices.thermostat import ThermostatControl
from ..i18n import _

logger = logging.getLogger(__name__)

# (state when active, state when inactive)
_STATE_KEYS = {
    DeviceType.LIGHT: ("state_on", "state_off"),
    DeviceType.THERMOSTAT: ("state_on", "state_off"),
    DeviceType.SMART_LOCK: ("state_unlocked", "state_locked"),
    DeviceType.GARAGE_DOOR: ("state_open", "state_closed"),
}

# (action that turns the device on, action that turns it off)
_ACTION_KEYS = {
    DeviceType.LIGHT: ("action_turn_on", "action_turn_off"),
    DeviceType.THERMOSTAT: ("action_turn_on", "action_turn_off"),
    DeviceType.SMART_LOCK: ("action_unlock", "action_lock"),
    DeviceType.GARAGE_DOOR: ("action_open", "action_close"),
}


def type_text(device: DeviceControl) -> str:
    return _(f"device_type_{device.device_type.value}")


def state_text(device: DeviceControl) -> str:
    """Current state of the device, e.g. "Locked" or "On"."""
    active_key, inactive_key = _STATE_KEYS[device.device_type]
    text = _(active_key if device.is_active else inactive_key)

    if isinstance(device, ThermostatControl):
        text += " • " + _("temperature_value", temperature=device.get_temperature())

    return text


def action_text(device: DeviceControl) -> str:
    """Label for the button that toggles the device."""
    on_key, off_key = _ACTION_KEYS[device.device_type]
    return _(off_key if device.is_active else on_key)


def parse_temperature(raw_value: str) -> Optional[int]:
    """Parse a temperature typed into the entry field.

    Range checking is left to the thermostat.

    Returns:
        The whole number entered, or None if the text is not one
    """
    try:
        return int(raw_value.strip())
    except ValueError:
        logger.warning(f"Ignoring non-numeric temperature input: {raw_value!r}")
        return None

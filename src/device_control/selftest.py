"""Built-in self-test run by the application entry point."""

import logging

from .devices.light import LightControl
from .devices.thermostat import ThermostatControl
from .devices.smart_lock import SmartLockControl
from .devices.garage_door import GarageDoorControl

logger = logging.getLogger(__name__)


class SelfTestError(AssertionError):
    """Raised when a device does not behave as expected."""


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise SelfTestError(message)


def _check_light() -> None:
    light = LightControl()
    _check(not light.is_light_on(), "light should start off")

    light.turn_on()
    _check(light.is_light_on(), "light should be on after turn_on")

    light.turn_off()
    _check(not light.is_light_on(), "light should be off after turn_off")


def _check_thermostat() -> None:
    thermostat = ThermostatControl()
    _check(thermostat.get_temperature() == 20, "thermostat should start at 20")

    thermostat.set_temperature(25)
    _check(thermostat.get_temperature() == 25, "thermostat should accept 25")

    # Out of range, must be rejected
    thermostat.set_temperature(35)
    _check(thermostat.get_temperature() == 25, "thermostat should reject 35")

    thermostat.turn_on()
    _check(thermostat.get_temperature() == 25, "turn_on should keep the temperature")

    thermostat.turn_off()
    _check(thermostat.get_temperature() == 25, "turn_off should keep the temperature")


def _check_smart_lock() -> None:
    lock = SmartLockControl()
    _check(lock.is_locked(), "smart lock should start locked")

    lock.turn_on()
    _check(not lock.is_locked(), "smart lock should be unlocked after turn_on")

    lock.turn_off()
    _check(lock.is_locked(), "smart lock should be locked after turn_off")


def _check_garage_door() -> None:
    door = GarageDoorControl()
    _check(not door.is_open(), "garage door should start closed")

    door.turn_on()
    _check(door.is_open(), "garage door should be open after turn_on")

    door.turn_off()
    _check(not door.is_open(), "garage door should be closed after turn_off")


def run_self_test() -> None:
    """Exercise every device kind on fresh instances.

    Raises:
        SelfTestError: On the first check that fails
    """
    logger.info("Running device self-test")
    _check_light()
    _check_thermostat()
    _check_smart_lock()
    _check_garage_door()

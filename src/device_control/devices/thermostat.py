"""Thermostat control with a bounded target temperature."""

from typing import Optional, Any

from .base import DeviceControl, DeviceType, DeviceCapability
from ..i18n import _


class ThermostatControl(DeviceControl):
    """A thermostat with a power state and a target temperature.

    The temperature always stays within ``MIN_TEMPERATURE`` and
    ``MAX_TEMPERATURE`` (inclusive). Turning the thermostat on or off leaves
    the temperature alone.
    """

    MIN_TEMPERATURE = 10
    MAX_TEMPERATURE = 30
    DEFAULT_TEMPERATURE = 20

    def __init__(self, device_id: Optional[str] = None, name: Optional[str] = None):
        super().__init__(device_id=device_id, name=name)
        self._on = False
        self._temperature = self.DEFAULT_TEMPERATURE

    @property
    def device_type(self) -> DeviceType:
        return DeviceType.THERMOSTAT

    @property
    def capabilities(self) -> set[DeviceCapability]:
        return {DeviceCapability.ON_OFF, DeviceCapability.TEMPERATURE}

    @property
    def is_active(self) -> bool:
        return self._on

    def is_on(self) -> bool:
        return self._on

    def get_temperature(self) -> int:
        return self._temperature

    def set_temperature(self, temperature: int) -> bool:
        """Set the target temperature.

        Out-of-range values are rejected with a diagnostic and leave the
        current temperature unchanged.

        Args:
            temperature: Target temperature in degrees Celsius

        Returns:
            True if the temperature was applied, False if it was out of range

        Raises:
            TypeError: If temperature is not an integer
        """
        if isinstance(temperature, bool) or not isinstance(temperature, int):
            raise TypeError(f"Temperature must be an integer, got {type(temperature).__name__}")

        if not self.MIN_TEMPERATURE <= temperature <= self.MAX_TEMPERATURE:
            self._report(
                _(
                    "thermostat_temperature_invalid",
                    minimum=self.MIN_TEMPERATURE,
                    maximum=self.MAX_TEMPERATURE,
                ),
                accepted=False,
            )
            return False

        self._temperature = temperature
        self._report(_("thermostat_temperature_set", temperature=temperature))
        return True

    def _do_turn_on(self) -> None:
        self._on = True
        self._report(_("thermostat_on"))

    def _do_turn_off(self) -> None:
        self._on = False
        self._report(_("thermostat_off"))

    def _state_dict(self) -> dict[str, Any]:
        return {"on": self._on, "temperature": self._temperature}

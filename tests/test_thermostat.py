from __future__ import annotations

import logging

import pytest

from device_control.devices import ThermostatControl


@pytest.mark.parametrize("temperature", [10, 11, 20, 25, 29, 30])
def test_in_range_temperature_is_applied(temperature):
    thermostat = ThermostatControl()

    assert thermostat.set_temperature(temperature) is True
    assert thermostat.get_temperature() == temperature


@pytest.mark.parametrize("temperature", [5, 9, 31, 35, -40, 100])
def test_out_of_range_temperature_is_rejected(temperature):
    thermostat = ThermostatControl()
    thermostat.set_temperature(25)

    assert thermostat.set_temperature(temperature) is False
    assert thermostat.get_temperature() == 25
    assert thermostat.last_status.accepted is False


def test_rejection_is_reported_as_warning(caplog):
    caplog.set_level(logging.INFO)
    thermostat = ThermostatControl(name="Upstairs")

    thermostat.set_temperature(35)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Invalid temperature. Temperature must be between 10 and 30." in warnings[0].getMessage()


def test_success_is_reported(caplog):
    caplog.set_level(logging.INFO)
    ThermostatControl().set_temperature(22)

    assert "Thermostat temperature set to: 22" in caplog.text


@pytest.mark.parametrize("value", [25.0, "25", None, True])
def test_non_integer_temperature_raises(value):
    thermostat = ThermostatControl()

    with pytest.raises(TypeError):
        thermostat.set_temperature(value)
    assert thermostat.get_temperature() == 20


def test_power_does_not_change_temperature():
    thermostat = ThermostatControl()
    thermostat.set_temperature(14)

    thermostat.turn_on()
    assert thermostat.is_on()
    assert thermostat.get_temperature() == 14

    thermostat.turn_off()
    assert not thermostat.is_on()
    assert thermostat.get_temperature() == 14


def test_temperature_can_be_set_while_off():
    thermostat = ThermostatControl()

    assert thermostat.set_temperature(18)
    assert not thermostat.is_on()


def test_end_to_end_scenario():
    thermostat = ThermostatControl()
    assert thermostat.get_temperature() == 20

    thermostat.set_temperature(25)
    assert thermostat.get_temperature() == 25

    thermostat.set_temperature(35)
    assert thermostat.get_temperature() == 25

    thermostat.turn_on()
    assert thermostat.get_temperature() == 25

    thermostat.turn_off()
    assert thermostat.get_temperature() == 25

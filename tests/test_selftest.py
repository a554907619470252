from __future__ import annotations

import pytest

from device_control import selftest
from device_control.selftest import SelfTestError, run_self_test


def test_self_test_passes():
    run_self_test()


def test_broken_thermostat_fails_self_test(monkeypatch):
    def _set_without_validation(self, temperature):
        self._temperature = temperature
        return True

    monkeypatch.setattr(selftest.ThermostatControl, "set_temperature", _set_without_validation)

    with pytest.raises(SelfTestError, match="reject 35"):
        run_self_test()


def test_broken_lock_fails_self_test(monkeypatch):
    monkeypatch.setattr(selftest.SmartLockControl, "_do_turn_on", lambda self: None)

    with pytest.raises(AssertionError, match="unlocked"):
        run_self_test()

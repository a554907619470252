from __future__ import annotations

from device_control.devices import LightControl, SmartLockControl, ThermostatControl
from device_control.gui.labels import action_text, parse_temperature, state_text, type_text
from device_control.i18n import Translator, _, get_available_languages, get_language, init_translator


def test_english_status_lines():
    assert _("light_on") == "Light is ON"
    assert _("thermostat_temperature_set", temperature=12) == "Thermostat temperature set to: 12"


def test_unknown_key_returns_key():
    assert _("no_such_key") == "no_such_key"


def test_swedish_status_lines():
    init_translator("sv")

    assert get_language() == "sv"
    light = LightControl()
    light.turn_on()
    assert light.last_status.text == "Lampan är PÅ"


def test_missing_language_falls_back_to_english():
    init_translator("xx")

    assert get_language() == "en"
    assert _("light_off") == "Light is OFF"


def test_available_languages():
    codes = [code for code, _name in get_available_languages()]
    assert codes == ["en", "sv"]


def test_state_and_action_labels():
    lock = SmartLockControl()
    assert state_text(lock) == "Locked"
    assert action_text(lock) == "Unlock"

    lock.turn_on()
    assert state_text(lock) == "Unlocked"
    assert action_text(lock) == "Lock"


def test_thermostat_label_includes_temperature():
    thermostat = ThermostatControl()
    thermostat.set_temperature(23)

    assert type_text(thermostat) == "Thermostat"
    assert state_text(thermostat) == "Off • 23 °C"


def test_parse_temperature_accepts_whole_numbers():
    assert parse_temperature("25") == 25
    assert parse_temperature("  12 ") == 12
    assert parse_temperature("35") == 35
    assert parse_temperature("-5") == -5


def test_parse_temperature_rejects_other_text(caplog):
    assert parse_temperature("warm") is None
    assert parse_temperature("21.5") is None
    assert parse_temperature("") is None
    assert "Ignoring non-numeric temperature input" in caplog.text


def test_unreadable_english_file_is_attempted_once(tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(Translator, "_directory", tmp_path)
    monkeypatch.setattr(Translator, "_translations", {})
    monkeypatch.setattr(Translator, "_language", "")
    monkeypatch.setattr(Translator, "_initialized", False)

    assert _("light_on") == "light_on"
    assert _("light_off") == "light_off"
    assert _("temperature_value", temperature=21) == "temperature_value"

    not_found = [r for r in caplog.records if "Translation file not found" in r.getMessage()]
    assert len(not_found) == 1

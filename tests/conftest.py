from __future__ import annotations

import pytest

from device_control.i18n import init_translator


@pytest.fixture(autouse=True)
def english_translations():
    init_translator("en")
    yield
    init_translator("en")

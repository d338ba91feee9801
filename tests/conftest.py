from __future__ import annotations

from datetime import datetime

import pytest

from daterange import config


@pytest.fixture(autouse=True)
def _restore_defaults():
    yield
    config.reset_defaults()


@pytest.fixture
def fixed_clock():
    """Pin the default reference date to 2020-01-17 15:30."""
    now = datetime(2020, 1, 17, 15, 30)
    config.set_default_clock(lambda: now)
    return now

from datetime import datetime

import pytest

from weekstrip import create_app
from weekstrip.utils.clock import FixedClock
from weekstrip.utils.dates import GregorianCalendar, SUNDAY

NOW = datetime(2022, 3, 9, 10, 30)


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def calendar(clock):
    return GregorianCalendar(first_weekday=SUNDAY, clock=clock)


@pytest.fixture
def app_config():
    return {
        "TESTING": True,
        "SECRET_KEY": "test",
        "FIRST_WEEKDAY": "sunday",
    }


@pytest.fixture
def app(app_config, clock):
    return create_app(app_config, clock=clock)


@pytest.fixture
def client(app):
    return app.test_client()

"""Shared pytest fixtures and markers for all tests."""

import itertools

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "exhaustive: marks tests that sweep the whole state grid"
    )


@pytest.fixture
def afternoon_state():
    """Sunny 14:00 start at the station with a healthy budget."""
    from dateplan.models.state import DateState, Location, Weather
    return DateState(
        time=14,
        location=Location.STATION,
        mood_partner=7,
        budget=8000,
        weather=Weather.SUNNY,
    )


@pytest.fixture
def evening_state():
    """Sunny 18:00 start at the station with a healthy budget."""
    from dateplan.models.state import DateState, Location, Weather
    return DateState(
        time=18,
        location=Location.STATION,
        mood_partner=7,
        budget=8000,
        weather=Weather.SUNNY,
    )


@pytest.fixture
def state_grid():
    """Every combination of a representative set of field values."""
    from dateplan.models.state import DateState, Location, Weather
    times = [13, 14, 16, 17, 18, 20, 22, 23]
    budgets = [0, 400, 500, 999, 1000, 2000, 2999, 3000, 4000, 8000]
    moods = [1, 2, 3, 5, 7, 9, 10]
    return [
        DateState(time=t, location=Location.STATION, mood_partner=m, budget=b, weather=w)
        for t, b, m, w in itertools.product(times, budgets, moods, Weather)
    ]

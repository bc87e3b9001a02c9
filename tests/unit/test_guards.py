"""Unit tests for dateplan.engine.guards."""

import pytest

from dateplan.engine.guards import (
    can_go_cafe,
    can_go_cinema,
    can_go_outdoor,
    can_go_park,
    can_go_restaurant,
    clamp,
    is_stormy,
    mood_change,
    weather_impact,
)
from dateplan.models.state import DateState, Weather


def make_state(time=14, budget=8000, mood=5, weather=Weather.SUNNY):
    return DateState(time=time, mood_partner=mood, budget=budget, weather=weather)


class TestClamp:
    """Tests for clamp."""

    @pytest.mark.parametrize(
        "value,expected",
        [(-3, 1), (0, 1), (1, 1), (5, 5), (10, 10), (11, 10), (100, 10)],
    )
    def test_clamp(self, value, expected):
        assert clamp(value, 1, 10) == expected


class TestMoodChange:
    """Tests for mood_change."""

    def test_positive_delta(self):
        assert mood_change(5, 3) == 8

    def test_positive_delta_saturates_at_ten(self):
        assert mood_change(9, 3) == 10

    def test_negative_delta(self):
        assert mood_change(5, -2) == 3

    def test_negative_delta_saturates_at_one(self):
        """A penalty larger than the mood bottoms out instead of wrapping."""
        assert mood_change(2, -3) == 1
        assert mood_change(1, -100) == 1

    def test_zero_delta(self):
        assert mood_change(6, 0) == 6


class TestWeather:
    """Tests for is_stormy and weather_impact."""

    def test_is_stormy(self):
        assert is_stormy(Weather.STORMY)
        for weather in (Weather.SUNNY, Weather.CLOUDY, Weather.RAINY):
            assert not is_stormy(weather)

    def test_weather_impact_table(self):
        assert weather_impact(Weather.SUNNY) == 2
        assert weather_impact(Weather.CLOUDY) == 0
        assert weather_impact(Weather.RAINY) == -1
        assert weather_impact(Weather.STORMY) == -3


class TestVenueGuards:
    """Tests for the venue guards."""

    def test_cafe_boundaries(self):
        assert can_go_cafe(make_state(time=16, budget=1000))
        assert not can_go_cafe(make_state(time=17, budget=1000))
        assert not can_go_cafe(make_state(time=14, budget=999))
        assert not can_go_cafe(make_state(time=14, weather=Weather.STORMY))

    def test_restaurant_boundaries(self):
        assert can_go_restaurant(make_state(time=18, budget=3000))
        assert not can_go_restaurant(make_state(time=17, budget=3000))
        assert not can_go_restaurant(make_state(time=18, budget=2999))
        assert not can_go_restaurant(make_state(time=20, weather=Weather.STORMY))

    def test_cinema_boundaries(self):
        assert can_go_cinema(make_state(time=18, budget=2000))
        assert not can_go_cinema(make_state(time=17, budget=2000))
        assert not can_go_cinema(make_state(time=18, budget=1999))
        assert not can_go_cinema(make_state(time=18, weather=Weather.STORMY))

    def test_park_boundaries(self):
        assert can_go_park(make_state(time=18, budget=0))
        assert not can_go_park(make_state(time=19))
        assert not can_go_park(make_state(time=14, weather=Weather.STORMY))

    def test_outdoor_window(self):
        assert can_go_outdoor(Weather.RAINY, 14)
        assert can_go_outdoor(Weather.SUNNY, 20)
        assert not can_go_outdoor(Weather.SUNNY, 13)
        assert not can_go_outdoor(Weather.SUNNY, 21)
        assert not can_go_outdoor(Weather.STORMY, 16)

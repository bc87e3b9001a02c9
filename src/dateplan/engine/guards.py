"""Guards and bounded arithmetic for the transition engine.

Every guard is a pure predicate over a state (or part of one). A transition
whose guard fails leaves the state untouched, so these predicates decide
whether a move happens at all.

Guard summary:
- Cafe:       time <= 16, budget >= 1000, not stormy
- Restaurant: time >= 18, budget >= 3000, not stormy
- Cinema:     time >= 18, budget >= 2000, not stormy
- Park:       not stormy, time <= 18
- Outdoor:    not stormy, 14 <= time <= 20
"""

from __future__ import annotations

from dateplan.models.state import DateState, Weather, clamp
from dateplan.parameters import (
    CAFE_COST,
    CAFE_LAST_HOUR,
    CINEMA_COST,
    CINEMA_FIRST_HOUR,
    MOOD_MAX,
    MOOD_MIN,
    OUTDOOR_FIRST_HOUR,
    OUTDOOR_LAST_HOUR,
    PARK_LAST_HOUR,
    RESTAURANT_COST,
    RESTAURANT_FIRST_HOUR,
)

_WEATHER_IMPACT: dict[Weather, int] = {
    Weather.SUNNY: 2,
    Weather.CLOUDY: 0,
    Weather.RAINY: -1,
    Weather.STORMY: -3,
}


def mood_change(current_mood: int, delta: int) -> int:
    """Apply a signed mood delta and clamp the result to [1, 10].

    Negative deltas subtract their magnitude, so a large penalty bottoms
    out at the minimum mood instead of wrapping.
    """
    if delta >= 0:
        new_mood = current_mood + delta
    else:
        new_mood = current_mood - abs(delta)
    return clamp(new_mood, MOOD_MIN, MOOD_MAX)


def is_stormy(weather: Weather) -> bool:
    return weather is Weather.STORMY


def weather_impact(weather: Weather) -> int:
    """Mood effect of the weather on an outdoor activity.

    Sunny +2, cloudy 0, rainy -1, stormy -3.
    """
    return _WEATHER_IMPACT[weather]


def can_go_cafe(state: DateState) -> bool:
    """Cafe is open until 16:00 and costs 1000."""
    return (
        state.time <= CAFE_LAST_HOUR
        and state.budget >= CAFE_COST
        and not is_stormy(state.weather)
    )


def can_go_restaurant(state: DateState) -> bool:
    """Dinner is served from 18:00 and costs 3000."""
    return (
        state.time >= RESTAURANT_FIRST_HOUR
        and state.budget >= RESTAURANT_COST
        and not is_stormy(state.weather)
    )


def can_go_cinema(state: DateState) -> bool:
    return (
        state.time >= CINEMA_FIRST_HOUR
        and state.budget >= CINEMA_COST
        and not is_stormy(state.weather)
    )


def can_go_park(state: DateState) -> bool:
    return not is_stormy(state.weather) and state.time <= PARK_LAST_HOUR


def can_go_outdoor(weather: Weather, time: int) -> bool:
    """Outdoor activities need calm weather and daylight (14:00-20:00)."""
    return not is_stormy(weather) and OUTDOOR_FIRST_HOUR <= time <= OUTDOOR_LAST_HOUR

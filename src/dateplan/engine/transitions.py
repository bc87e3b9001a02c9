"""Primitive state transitions.

Each transition is a pure ``DateState -> DateState`` function. When its guard
fails the input state is returned unchanged; a failed guard is a no-op, not
an error.

Effects when the guard holds:
- go_to_cafe:        CAFE, budget -1000, mood +1, time +1
- go_to_restaurant:  RESTAURANT, budget -3000, mood +3, time +2
- go_to_cinema:      CINEMA, budget -2000, mood +2, time +2
- go_to_park:        PARK, mood + (weather impact + 1), time +1
- emergency_shelter: STATION, mood -2, budget -500 (floored at 0), time +1
"""

from __future__ import annotations

import logging
from typing import Callable

from dateplan.engine.guards import (
    can_go_cafe,
    can_go_cinema,
    can_go_park,
    can_go_restaurant,
    mood_change,
    weather_impact,
)
from dateplan.models.state import DateState, Location
from dateplan.parameters import (
    CAFE_COST,
    CAFE_DURATION,
    CAFE_MOOD_BONUS,
    CINEMA_COST,
    CINEMA_DURATION,
    CINEMA_MOOD_BONUS,
    PARK_DURATION,
    PARK_MOOD_BONUS,
    RESTAURANT_COST,
    RESTAURANT_DURATION,
    RESTAURANT_MOOD_BONUS,
    SHELTER_COST,
    SHELTER_DURATION,
    SHELTER_MOOD_PENALTY,
)

logger = logging.getLogger(__name__)

Transition = Callable[[DateState], DateState]


def go_to_cafe(state: DateState) -> DateState:
    if not can_go_cafe(state):
        logger.debug(f"go_to_cafe skipped: time={state.time}, budget={state.budget}, weather={state.weather.value}")
        return state
    return state.with_changes(
        location=Location.CAFE,
        budget=state.budget - CAFE_COST,
        mood_partner=mood_change(state.mood_partner, CAFE_MOOD_BONUS),
        time=state.time + CAFE_DURATION,
    )


def go_to_restaurant(state: DateState) -> DateState:
    if not can_go_restaurant(state):
        logger.debug(f"go_to_restaurant skipped: time={state.time}, budget={state.budget}, weather={state.weather.value}")
        return state
    return state.with_changes(
        location=Location.RESTAURANT,
        budget=state.budget - RESTAURANT_COST,
        mood_partner=mood_change(state.mood_partner, RESTAURANT_MOOD_BONUS),
        time=state.time + RESTAURANT_DURATION,
    )


def go_to_cinema(state: DateState) -> DateState:
    if not can_go_cinema(state):
        logger.debug(f"go_to_cinema skipped: time={state.time}, budget={state.budget}, weather={state.weather.value}")
        return state
    return state.with_changes(
        location=Location.CINEMA,
        budget=state.budget - CINEMA_COST,
        mood_partner=mood_change(state.mood_partner, CINEMA_MOOD_BONUS),
        time=state.time + CINEMA_DURATION,
    )


def go_to_park(state: DateState) -> DateState:
    """Walk in the park. Free, but the weather decides how it goes."""
    if not can_go_park(state):
        logger.debug(f"go_to_park skipped: time={state.time}, weather={state.weather.value}")
        return state
    return state.with_changes(
        location=Location.PARK,
        mood_partner=mood_change(state.mood_partner, weather_impact(state.weather) + PARK_MOOD_BONUS),
        time=state.time + PARK_DURATION,
    )


def emergency_shelter(state: DateState) -> DateState:
    """Retreat to the station. Always applies.

    The budget is charged for the shelter but never drops below zero.
    """
    return state.with_changes(
        location=Location.STATION,
        mood_partner=mood_change(state.mood_partner, -SHELTER_MOOD_PENALTY),
        budget=max(state.budget - SHELTER_COST, 0),
        time=state.time + SHELTER_DURATION,
    )


# Registry of primitive transitions
PRIMITIVES: dict[str, Transition] = {
    "cafe": go_to_cafe,
    "restaurant": go_to_restaurant,
    "cinema": go_to_cinema,
    "park": go_to_park,
    "shelter": emergency_shelter,
}

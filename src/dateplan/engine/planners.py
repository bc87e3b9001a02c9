"""Composite planners.

A planner is a decision strategy that chains primitive transitions into one
outcome path. Planners branch on the same guards the primitives check, and
the primitives re-check them anyway; when an inner guard fails the primitive
simply leaves the state as it was.

Built-in planners:
- date_sequence: cafe, jump to 18:00, restaurant
- optimal_course: cafe if possible, jump to 18:00, restaurant or else cinema
- safe_date_plan: cafe-then-dinner only with budget to spare, shelter in storms
- weather_adaptive_plan: pick the activity that suits the weather
- risk_averse_plan: shelter, cafe or park, whichever is safest
- perfect_evening_date: restaurant, or cinema if dinner is out of reach
"""

from __future__ import annotations

import logging
from typing import Callable

from dateplan.engine.guards import can_go_cafe, can_go_restaurant, is_stormy
from dateplan.engine.transitions import (
    emergency_shelter,
    go_to_cafe,
    go_to_cinema,
    go_to_park,
    go_to_restaurant,
)
from dateplan.models.state import DateState, Weather
from dateplan.parameters import (
    CAFE_COST,
    CAFE_LAST_HOUR,
    CINEMA_COST,
    EVENING_HOUR,
    PARK_LAST_HOUR,
    RESTAURANT_COST,
    SAFE_PLAN_MIN_BUDGET,
)

logger = logging.getLogger(__name__)

Planner = Callable[[DateState], DateState]


def _skip_to_evening(state: DateState) -> DateState:
    """Jump the clock to 18:00, whatever time it was."""
    return state.with_changes(time=EVENING_HOUR)


def date_sequence(state: DateState) -> DateState:
    """Cafe, then dinner at 18:00."""
    state = go_to_cafe(state)
    state = _skip_to_evening(state)
    return go_to_restaurant(state)


def optimal_course(state: DateState) -> DateState:
    """Cafe if it is open, then dinner at 18:00, falling back to the cinema.

    The restaurant guard is evaluated on the post-cafe state with the clock
    already at 18:00.
    """
    state = go_to_cafe(state) if can_go_cafe(state) else state
    state = _skip_to_evening(state)
    if can_go_restaurant(state):
        return go_to_restaurant(state)
    logger.debug(f"optimal_course: restaurant unavailable (budget={state.budget}), trying cinema")
    return go_to_cinema(state)


def safe_date_plan(state: DateState) -> DateState:
    """Only commit to cafe and dinner with a comfortable budget.

    Without the budget the plan shelters in a storm and otherwise stays put.
    """
    if state.time <= CAFE_LAST_HOUR and state.budget >= SAFE_PLAN_MIN_BUDGET:
        after_cafe = _skip_to_evening(go_to_cafe(state))
        if after_cafe.budget >= RESTAURANT_COST:
            return go_to_restaurant(after_cafe)
        return after_cafe
    if is_stormy(state.weather):
        return emergency_shelter(state)
    return state


def weather_adaptive_plan(state: DateState) -> DateState:
    weather = state.weather
    if weather is Weather.SUNNY:
        return go_to_park(state) if state.time <= PARK_LAST_HOUR else state
    if weather is Weather.CLOUDY:
        return go_to_cafe(state)
    if weather is Weather.RAINY:
        return go_to_cinema(state) if state.is_evening else go_to_cafe(state)
    return emergency_shelter(state)


def risk_averse_plan(state: DateState) -> DateState:
    """Prefer the least risky move available."""
    if is_stormy(state.weather):
        return emergency_shelter(state)
    if state.budget >= CAFE_COST and state.time <= CAFE_LAST_HOUR:
        return go_to_cafe(state)
    if state.time <= PARK_LAST_HOUR:
        return go_to_park(state)
    return state


def perfect_evening_date(state: DateState) -> DateState:
    if state.is_evening and state.budget >= RESTAURANT_COST:
        return go_to_restaurant(state)
    if state.is_evening and state.budget >= CINEMA_COST:
        return go_to_cinema(state)
    return state


# Registry of built-in planners
PLANNERS: dict[str, Planner] = {
    "sequence": date_sequence,
    "optimal": optimal_course,
    "safe": safe_date_plan,
    "weather_adaptive": weather_adaptive_plan,
    "risk_averse": risk_averse_plan,
    "perfect_evening": perfect_evening_date,
}


def list_planners() -> list[str]:
    """Names of all built-in planners, in registry order."""
    return list(PLANNERS)


def get_planner(name: str) -> Planner:
    """Look up a planner by name.

    Raises:
        ValueError: If planner name is not recognized
    """
    try:
        return PLANNERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown planner: {name!r}. Available: {', '.join(PLANNERS)}"
        ) from None

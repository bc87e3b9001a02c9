"""Transition engine for the date planner.

This module contains the core logic including:
- guards: Preconditions and bounded arithmetic
- transitions: The five primitive state transitions
- planners: Composite strategies built from the primitives
- evaluation: Outcome classifiers and scoring

Usage:
    from dateplan.engine import optimal_course, evaluate
    from dateplan.models import DateState, Weather

    initial = DateState(time=14, mood_partner=7, budget=8000, weather=Weather.SUNNY)
    final = optimal_course(initial)
    print(evaluate(initial, final).score)
"""

from dateplan.engine.evaluation import (
    DateEvaluation,
    DateOutcome,
    classify_outcome,
    evaluate,
    evaluate_date_plan,
    is_complete_failure,
    is_date_successful,
    is_disaster,
)
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
from dateplan.engine.planners import (
    PLANNERS,
    Planner,
    date_sequence,
    get_planner,
    list_planners,
    optimal_course,
    perfect_evening_date,
    risk_averse_plan,
    safe_date_plan,
    weather_adaptive_plan,
)
from dateplan.engine.transitions import (
    PRIMITIVES,
    Transition,
    emergency_shelter,
    go_to_cafe,
    go_to_cinema,
    go_to_park,
    go_to_restaurant,
)

__all__ = [
    # Guards
    "clamp",
    "mood_change",
    "is_stormy",
    "weather_impact",
    "can_go_cafe",
    "can_go_restaurant",
    "can_go_cinema",
    "can_go_park",
    "can_go_outdoor",
    # Primitive transitions
    "Transition",
    "PRIMITIVES",
    "go_to_cafe",
    "go_to_restaurant",
    "go_to_cinema",
    "go_to_park",
    "emergency_shelter",
    # Planners
    "Planner",
    "PLANNERS",
    "date_sequence",
    "optimal_course",
    "safe_date_plan",
    "weather_adaptive_plan",
    "risk_averse_plan",
    "perfect_evening_date",
    "get_planner",
    "list_planners",
    # Evaluation
    "DateOutcome",
    "DateEvaluation",
    "is_date_successful",
    "is_disaster",
    "is_complete_failure",
    "classify_outcome",
    "evaluate_date_plan",
    "evaluate",
]

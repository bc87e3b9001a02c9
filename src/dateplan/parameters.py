"""Tunable constants for the date planner.

This module is the single source of truth for the costs, mood bonuses and
hour thresholds used by the transition engine and the scoring functions.

Usage:
    from dateplan.parameters import CAFE_COST, MOOD_MAX
"""

# =============================================================================
# MOOD
# =============================================================================

MOOD_MIN = 1
"""Lowest partner mood. Every mood change saturates here."""

MOOD_MAX = 10
"""Highest partner mood. Every mood change saturates here."""


# =============================================================================
# VENUE COSTS AND EFFECTS
# =============================================================================

CAFE_COST = 1000
CAFE_MOOD_BONUS = 1
CAFE_DURATION = 1
CAFE_LAST_HOUR = 16
"""Latest hour at which the cafe still serves."""

RESTAURANT_COST = 3000
RESTAURANT_MOOD_BONUS = 3
RESTAURANT_DURATION = 2
RESTAURANT_FIRST_HOUR = 18
"""Dinner is only served from this hour on."""

CINEMA_COST = 2000
CINEMA_MOOD_BONUS = 2
CINEMA_DURATION = 2
CINEMA_FIRST_HOUR = 18

PARK_MOOD_BONUS = 1
"""Added on top of the weather impact for a walk in the park."""
PARK_DURATION = 1
PARK_LAST_HOUR = 18

SHELTER_COST = 500
SHELTER_MOOD_PENALTY = 2
SHELTER_DURATION = 1

OUTDOOR_FIRST_HOUR = 14
OUTDOOR_LAST_HOUR = 20

EVENING_HOUR = 18
"""Composite planners jump the clock to this hour before dinner."""


# =============================================================================
# PLANNER THRESHOLDS
# =============================================================================

SAFE_PLAN_MIN_BUDGET = 4000
"""The safe plan only commits to a cafe-then-dinner evening above this."""


# =============================================================================
# EVALUATION
# =============================================================================

SUCCESS_MIN_MOOD = 7
DISASTER_MAX_MOOD = 3
COMPLETE_FAILURE_MAX_MOOD = 2

CURFEW_HOUR = 22
"""A date that runs past this hour is a disaster."""

HARD_CURFEW_HOUR = 23
"""A date that runs past this hour is a complete failure."""

MOOD_SCORE_WEIGHT = 10
BUDGET_EFFICIENCY_SCALE = 100
ON_TIME_BONUS = 50

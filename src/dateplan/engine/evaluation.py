"""Outcome classification and scoring.

Classifiers:
- Success:          mood >= 7 and budget > 0 and time <= 22
- Disaster:         mood <= 3 or budget == 0 or time > 22
- Complete failure: mood <= 2 or budget == 0 or time > 23

Score (evaluate_date_plan):
    mood_score        = final mood * 10
    budget_efficiency = final budget * 100 // initial budget (0 if initial budget is 0)
    time_efficiency   = 50 if final time <= 22 else 0
    score             = mood_score + budget_efficiency + time_efficiency

A complete failure is always a disaster, so classify_outcome checks the
classifiers from most to least severe.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dateplan.models.state import DateState
from dateplan.parameters import (
    BUDGET_EFFICIENCY_SCALE,
    COMPLETE_FAILURE_MAX_MOOD,
    CURFEW_HOUR,
    DISASTER_MAX_MOOD,
    HARD_CURFEW_HOUR,
    MOOD_SCORE_WEIGHT,
    ON_TIME_BONUS,
    SUCCESS_MIN_MOOD,
)


class DateOutcome(Enum):
    """How a date turned out."""

    COMPLETE_FAILURE = "complete_failure"
    DISASTER = "disaster"
    SUCCESS = "success"
    UNREMARKABLE = "unremarkable"


@dataclass(frozen=True)
class DateEvaluation:
    """Score breakdown for one date.

    Attributes:
        outcome: Classification of the final state
        mood_score: Final mood weighted by 10
        budget_efficiency: Percentage of the starting budget left over
        time_efficiency: Bonus for getting home before the curfew
    """

    outcome: DateOutcome
    mood_score: int
    budget_efficiency: int
    time_efficiency: int

    @property
    def score(self) -> int:
        return self.mood_score + self.budget_efficiency + self.time_efficiency

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "outcome": self.outcome.value,
            "mood_score": self.mood_score,
            "budget_efficiency": self.budget_efficiency,
            "time_efficiency": self.time_efficiency,
            "score": self.score,
        }


def is_date_successful(state: DateState) -> bool:
    return (
        state.mood_partner >= SUCCESS_MIN_MOOD
        and state.budget > 0
        and state.time <= CURFEW_HOUR
    )


def is_disaster(state: DateState) -> bool:
    return (
        state.mood_partner <= DISASTER_MAX_MOOD
        or state.budget == 0
        or state.time > CURFEW_HOUR
    )


def is_complete_failure(state: DateState) -> bool:
    return (
        state.mood_partner <= COMPLETE_FAILURE_MAX_MOOD
        or state.budget == 0
        or state.time > HARD_CURFEW_HOUR
    )


def classify_outcome(state: DateState) -> DateOutcome:
    """Classify a final state, most severe classification first."""
    if is_complete_failure(state):
        return DateOutcome.COMPLETE_FAILURE
    if is_disaster(state):
        return DateOutcome.DISASTER
    if is_date_successful(state):
        return DateOutcome.SUCCESS
    return DateOutcome.UNREMARKABLE


def _mood_score(final: DateState) -> int:
    return final.mood_partner * MOOD_SCORE_WEIGHT


def _budget_efficiency(initial: DateState, final: DateState) -> int:
    # Nothing to be efficient with when the date started broke
    if initial.budget <= 0:
        return 0
    return (final.budget * BUDGET_EFFICIENCY_SCALE) // initial.budget


def _time_efficiency(final: DateState) -> int:
    return ON_TIME_BONUS if final.time <= CURFEW_HOUR else 0


def evaluate_date_plan(initial: DateState, final: DateState) -> int:
    """Score a date from its initial and final states.

    Args:
        initial: State before the planner ran
        final: State after the planner ran

    Returns:
        Sum of mood score, budget efficiency and time efficiency
    """
    return _mood_score(final) + _budget_efficiency(initial, final) + _time_efficiency(final)


def evaluate(initial: DateState, final: DateState) -> DateEvaluation:
    """Full evaluation of a date: classification plus score breakdown."""
    return DateEvaluation(
        outcome=classify_outcome(final),
        mood_score=_mood_score(final),
        budget_efficiency=_budget_efficiency(initial, final),
        time_efficiency=_time_efficiency(final),
    )

"""Date planner models.

This module exports the core data structures for the engine.
"""

from .state import DateState, Location, Weather, clamp

__all__ = [
    # Enums
    "Weather",
    "Location",
    # State Models
    "DateState",
    # State Functions
    "clamp",
]

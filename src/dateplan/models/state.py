"""Date state models.

This module defines the closed enumerations and the immutable state record
used throughout the transition engine. States are never mutated in place:
every transition builds a new ``DateState`` from the old one.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dateplan.parameters import EVENING_HOUR, MOOD_MAX, MOOD_MIN


def clamp(value: int, min_val: int, max_val: int) -> int:
    """Clamp a value to the specified range."""
    if value < min_val:
        return min_val
    if value > max_val:
        return max_val
    return value


class Weather(str, Enum):
    """Weather for the whole date. Set once, never changed by transitions."""

    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    STORMY = "stormy"


class Location(str, Enum):
    """Where the couple currently is."""

    STATION = "station"
    CAFE = "cafe"
    RESTAURANT = "restaurant"
    CINEMA = "cinema"
    PARK = "park"


class DateState(BaseModel):
    """The world at one instant of the date.

    Attributes:
        time: Hour of the day, conceptually 14-23 (not enforced)
        location: Current location, starts at the station
        mood_partner: Partner mood (1-10, clamped on construction)
        budget: Remaining money, never negative
        weather: Weather for the whole date
    """

    model_config = ConfigDict(frozen=True)

    time: int
    location: Location = Field(default=Location.STATION)
    mood_partner: int = Field(ge=MOOD_MIN, le=MOOD_MAX)
    budget: int = Field(ge=0)
    weather: Weather

    @field_validator("mood_partner", mode="before")
    @classmethod
    def clamp_mood(cls, v):
        """Clamp integer partner mood to [1, 10].

        Anything else is left for the int field validation to reject.
        """
        if isinstance(v, int):
            return clamp(v, MOOD_MIN, MOOD_MAX)
        return v

    @property
    def is_evening(self) -> bool:
        """Dinner and cinema hours have started."""
        return self.time >= EVENING_HOUR

    def with_changes(self, **changes) -> DateState:
        """Return a copy of this state with the given fields replaced.

        Values are taken as-is; callers are responsible for clamping.
        """
        return self.model_copy(update=changes)

    # Serialization methods
    def to_json(self) -> str:
        """Serialize state to JSON string."""
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> DateState:
        """Deserialize state from JSON string."""
        return cls.model_validate_json(json_str)

    def to_dict(self) -> dict:
        """Serialize state to a JSON-compatible dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> DateState:
        """Deserialize state from dictionary."""
        return cls.model_validate(data)

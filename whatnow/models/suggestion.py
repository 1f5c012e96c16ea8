"""Suggestion context and result models for whatnow."""

from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field

from whatnow.errors import InvalidEnumValue
from whatnow.models.task import EnergyLevel, Task


class TimeAvailable(str, Enum):
    """How much time the user has right now."""
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


def parse_time_available(value: Any, field: str = "time_available") -> TimeAvailable:
    """Coerce a raw value into a TimeAvailable.

    Raises:
        InvalidEnumValue: If the value is not short, medium or long.
    """
    if isinstance(value, TimeAvailable):
        return value
    if isinstance(value, str):
        try:
            return TimeAvailable(value.strip().lower())
        except ValueError:
            pass
    raise InvalidEnumValue(field, value, [option.value for option in TimeAvailable])


class SuggestionContext(BaseModel):
    """The user's stated situation, assembled by the wizard."""

    model_config = ConfigDict(use_enum_values=True)

    time_available: TimeAvailable = Field(..., description="Time the user has available")
    energy_level: EnergyLevel = Field(..., description="User's current energy level")
    blockers: List[str] = Field(
        default_factory=list,
        description="Case-insensitive title substrings to avoid",
    )


class TaskSuggestion(BaseModel):
    """One ranked task with its score and the surfaced reason."""

    task: Task = Field(..., description="The originating task")
    score: int = Field(..., description="Additive score (unbounded, may be negative)")
    reason: str = Field(..., description="First applicable rationale")

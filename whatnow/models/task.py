"""Task data model for whatnow."""

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from whatnow.errors import InvalidEnumValue


class EnergyLevel(str, Enum):
    """Energy level enumeration (task demand or user capacity)."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Ordinal scale used for energy comparisons (index = rank)
ENERGY_LEVEL_ORDER: List[EnergyLevel] = [
    EnergyLevel.LOW,
    EnergyLevel.MEDIUM,
    EnergyLevel.HIGH,
]


def parse_energy_level(value: Any, field: str = "energy_level") -> EnergyLevel:
    """Coerce a raw value into an EnergyLevel.

    Accepts enum members and case-insensitive strings.

    Raises:
        InvalidEnumValue: If the value is not low, medium or high.
    """
    if isinstance(value, EnergyLevel):
        return value
    if isinstance(value, str):
        try:
            return EnergyLevel(value.strip().lower())
        except ValueError:
            pass
    raise InvalidEnumValue(field, value, [level.value for level in EnergyLevel])


def energy_rank(value: Any, field: str = "energy_level") -> int:
    """Position of a level on the low < medium < high scale."""
    return ENERGY_LEVEL_ORDER.index(parse_energy_level(value, field))


class Task(BaseModel):
    """Task as held by the caller; the engine only reads it."""

    model_config = ConfigDict(use_enum_values=True)

    id: str = Field(..., description="Unique task identifier, stable across calls")
    title: str = Field(..., description="Task title (also matched against blockers)")
    description: Optional[str] = Field(None, description="Task notes or description")
    completed: bool = Field(False, description="Whether the task is done")
    due_date: Optional[datetime] = Field(None, description="Due date (null = someday)")
    energy_level: Optional[EnergyLevel] = Field(
        None, description="Energy required to execute the task"
    )
    activation_energy: Optional[EnergyLevel] = Field(
        None, description="Difficulty of starting the task"
    )
    parent_task_id: Optional[str] = Field(
        None, description="ID of the containing task (weak reference)"
    )
    subtasks: List["Task"] = Field(default_factory=list, description="Ordered child tasks")
    project_id: Optional[str] = Field(None, description="Owning project ID")
    category_id: Optional[str] = Field(None, description="Category ID")
    created_at: Optional[datetime] = Field(None, description="Task creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Task last update timestamp")


Task.model_rebuild()

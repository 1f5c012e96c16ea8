"""Task creation factory for whatnow.

Centralizes building Task objects, either from keyword arguments or from the
loose records the application's storage layer hands over (camelCase keys,
ISO date strings, nested subtasks).
"""

import uuid
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from whatnow.models.task import EnergyLevel, Task, parse_energy_level


# Storage-layer key -> Task field
_FIELD_ALIASES = {
    "dueDate": "due_date",
    "energyLevel": "energy_level",
    "activationEnergy": "activation_energy",
    "parentTaskId": "parent_task_id",
    "projectId": "project_id",
    "categoryId": "category_id",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}

_LEVEL_FIELDS = ("energy_level", "activation_energy")


def _optional_level(value: Any, field: str) -> Optional[EnergyLevel]:
    if value is None or value == "":
        return None
    return parse_energy_level(value, field)


def create_task(
    title: str,
    task_id: Optional[str] = None,
    completed: bool = False,
    due_date: Optional[datetime] = None,
    energy_level: Optional[Any] = None,
    activation_energy: Optional[Any] = None,
    parent_task_id: Optional[str] = None,
    subtasks: Optional[List[Task]] = None,
    description: Optional[str] = None,
    project_id: Optional[str] = None,
    category_id: Optional[str] = None,
) -> Task:
    """Create a task with a fresh id and timestamps.

    Args:
        title: Task title (required)
        task_id: Explicit id (a UUID v4 is generated when omitted)
        completed: Whether the task is done
        due_date: Due date (None = someday)
        energy_level: Energy needed to execute ("low", "medium", "high")
        activation_energy: Difficulty of starting ("low", "medium", "high")
        parent_task_id: ID of the containing task
        subtasks: Child tasks
        description: Task notes
        project_id: Owning project ID
        category_id: Category ID

    Returns:
        Task object

    Raises:
        InvalidEnumValue: If a level is outside low/medium/high
    """
    now = datetime.utcnow()
    return Task(
        id=task_id or str(uuid.uuid4()),
        title=title,
        description=description,
        completed=completed,
        due_date=due_date,
        energy_level=_optional_level(energy_level, "energy_level"),
        activation_energy=_optional_level(activation_energy, "activation_energy"),
        parent_task_id=parent_task_id,
        subtasks=list(subtasks) if subtasks else [],
        project_id=project_id,
        category_id=category_id,
        created_at=now,
        updated_at=now,
    )


def task_from_dict(data: Mapping[str, Any]) -> Task:
    """Build a Task (and its subtasks) from a storage record.

    Keys may be camelCase (dueDate, energyLevel, ...) or snake_case. Unknown
    keys are ignored. Subtasks without a parentTaskId inherit their parent's id.

    Raises:
        InvalidEnumValue: If an energy field is outside low/medium/high
        pydantic.ValidationError: If required fields are missing or malformed
    """
    fields: Dict[str, Any] = {}
    for key, value in data.items():
        name = _FIELD_ALIASES.get(key, key)
        if name in Task.model_fields:
            fields[name] = value

    for name in _LEVEL_FIELDS:
        if name in fields:
            fields[name] = _optional_level(fields[name], name)

    children = []
    for child in fields.pop("subtasks", None) or []:
        if isinstance(child, Task):
            children.append(child)
            continue
        if "parentTaskId" not in child and "parent_task_id" not in child and "id" in fields:
            child = {**child, "parent_task_id": fields["id"]}
        children.append(task_from_dict(child))
    fields["subtasks"] = children

    if fields.get("due_date") == "":
        fields["due_date"] = None

    return Task(**fields)

"""Data models for whatnow."""

from whatnow.models.task import Task, EnergyLevel, ENERGY_LEVEL_ORDER, parse_energy_level, energy_rank
from whatnow.models.suggestion import TimeAvailable, SuggestionContext, TaskSuggestion, parse_time_available
from whatnow.models.wizard_state import WizardState

__all__ = [
    "Task",
    "EnergyLevel",
    "ENERGY_LEVEL_ORDER",
    "parse_energy_level",
    "energy_rank",
    "TimeAvailable",
    "SuggestionContext",
    "TaskSuggestion",
    "parse_time_available",
    "WizardState",
]

"""Pytest fixtures and configuration for whatnow tests."""

import pytest
from datetime import datetime, timezone

from whatnow.models.suggestion import SuggestionContext, TimeAvailable
from whatnow.models.task import Task, EnergyLevel


# Fixed reference time for date-based rules (noon UTC)
NOW = datetime(2026, 3, 10, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Reference time used for every scoring pass in a test."""
    return NOW


@pytest.fixture
def sample_task_base():
    """Base task data for creating test tasks.

    Returns a dict with default task attributes that can be overridden.
    """
    return {
        "id": "task-1",
        "title": "Test Task",
        "description": None,
        "completed": False,
        "due_date": None,
        "energy_level": None,
        "activation_energy": None,
        "parent_task_id": None,
        "subtasks": [],
    }


@pytest.fixture
def sample_task(sample_task_base):
    """Create a sample Task object for testing."""
    return Task(**sample_task_base)


@pytest.fixture
def energy_tasks(sample_task_base):
    """Three undated tasks whose energy and activation energy agree."""
    return [
        Task(**{**sample_task_base, "id": "t1", "title": "Easy Start",
                "energy_level": EnergyLevel.LOW, "activation_energy": EnergyLevel.LOW}),
        Task(**{**sample_task_base, "id": "t2", "title": "Big Project",
                "energy_level": EnergyLevel.HIGH, "activation_energy": EnergyLevel.HIGH}),
        Task(**{**sample_task_base, "id": "t3", "title": "Steady Work",
                "energy_level": EnergyLevel.MEDIUM, "activation_energy": EnergyLevel.MEDIUM}),
    ]


@pytest.fixture
def make_context():
    """Factory for suggestion contexts (medium time by default)."""
    def _make(energy_level=EnergyLevel.MEDIUM, blockers=None, time_available=TimeAvailable.MEDIUM):
        return SuggestionContext(
            time_available=time_available,
            energy_level=energy_level,
            blockers=blockers or [],
        )
    return _make

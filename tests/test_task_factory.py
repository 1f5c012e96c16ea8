"""Tests for task construction helpers."""

import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from whatnow.errors import InvalidEnumValue
from whatnow.models.suggestion import TimeAvailable, parse_time_available
from whatnow.models.task import EnergyLevel, energy_rank, parse_energy_level
from whatnow.models.task_factory import create_task, task_from_dict


class TestCreateTask:

    def test_defaults(self):
        task = create_task("Write report")

        assert task.title == "Write report"
        assert task.id
        assert task.completed is False
        assert task.due_date is None
        assert task.subtasks == []
        assert task.created_at is not None

    def test_levels_coerced(self):
        task = create_task("Write report", energy_level="HIGH", activation_energy=EnergyLevel.LOW)

        assert task.energy_level == "high"
        assert task.activation_energy == "low"

    def test_invalid_level(self):
        with pytest.raises(InvalidEnumValue) as exc_info:
            create_task("Write report", activation_energy="huge")
        assert exc_info.value.field == "activation_energy"

    def test_unique_ids(self):
        assert create_task("a").id != create_task("b").id


class TestTaskFromDict:

    def test_storage_record(self):
        record = {
            "id": "p1",
            "title": "Plan trip",
            "completed": False,
            "dueDate": "2026-03-10T09:00:00+00:00",
            "energyLevel": "medium",
            "activationEnergy": "low",
            "projectId": "travel",
            "createdAt": "2026-03-01T08:00:00+00:00",
            "updatedAt": "2026-03-01T08:00:00+00:00",
            "subtasks": [
                {"id": "c1", "title": "Book flights", "completed": True},
                {"id": "c2", "title": "Book hotel", "parentTaskId": "p1", "energyLevel": "low"},
            ],
        }
        task = task_from_dict(record)

        assert task.due_date == datetime(2026, 3, 10, 9, 0, tzinfo=timezone.utc)
        assert task.energy_level == "medium"
        assert task.activation_energy == "low"
        assert task.project_id == "travel"
        assert [c.id for c in task.subtasks] == ["c1", "c2"]
        assert task.subtasks[0].parent_task_id == "p1"
        assert task.subtasks[0].completed is True
        assert task.subtasks[1].energy_level == "low"

    def test_snake_case_and_blank_values(self):
        task = task_from_dict({
            "id": "t", "title": "T", "due_date": "", "energy_level": "", "extra": "ignored",
        })

        assert task.due_date is None
        assert task.energy_level is None

    def test_invalid_level(self):
        with pytest.raises(InvalidEnumValue):
            task_from_dict({"id": "t", "title": "T", "energyLevel": "turbo"})

    def test_missing_title(self):
        with pytest.raises(ValidationError):
            task_from_dict({"id": "t"})


class TestEnumParsing:

    def test_energy_rank(self):
        assert [energy_rank(v) for v in ("low", "medium", "high")] == [0, 1, 2]

    def test_parse_energy_level(self):
        assert parse_energy_level(" Medium ") == EnergyLevel.MEDIUM
        with pytest.raises(InvalidEnumValue):
            parse_energy_level(None)
        with pytest.raises(InvalidEnumValue):
            parse_energy_level(3)

    def test_parse_time_available(self):
        assert parse_time_available("LONG") == TimeAvailable.LONG
        with pytest.raises(InvalidEnumValue) as exc_info:
            parse_time_available("eternity")
        assert "short, medium, long" in str(exc_info.value)

"""Tests for task tree flattening."""

import pytest

from whatnow.engine.flatten import flatten_tasks, filter_incomplete
from whatnow.errors import MalformedTaskTree
from whatnow.models.task import Task


class TestFlattenTasks:
    """flatten_tasks() walks the tree depth-first, parents first."""

    def test_preorder(self, sample_task_base):
        a1 = Task(**{**sample_task_base, "id": "a1"})
        a2 = Task(**{**sample_task_base, "id": "a2"})
        a = Task(**{**sample_task_base, "id": "a", "subtasks": [a1, a2]})
        b1a = Task(**{**sample_task_base, "id": "b1a"})
        b1 = Task(**{**sample_task_base, "id": "b1", "subtasks": [b1a]})
        b = Task(**{**sample_task_base, "id": "b", "subtasks": [b1]})

        assert [t.id for t in flatten_tasks([a, b])] == ["a", "a1", "a2", "b", "b1", "b1a"]

    def test_empty(self):
        assert flatten_tasks([]) == []

    def test_shared_subtask_is_not_a_cycle(self, sample_task_base):
        shared = Task(**{**sample_task_base, "id": "shared"})
        a = Task(**{**sample_task_base, "id": "a", "subtasks": [shared]})
        b = Task(**{**sample_task_base, "id": "b", "subtasks": [shared]})

        assert [t.id for t in flatten_tasks([a, b])] == ["a", "shared", "b", "shared"]

    def test_self_reference_raises(self, sample_task_base):
        task = Task(**{**sample_task_base, "id": "loop"})
        task.subtasks.append(task)

        with pytest.raises(MalformedTaskTree) as exc_info:
            flatten_tasks([task])
        assert exc_info.value.task_id == "loop"

    def test_repeated_id_in_ancestry_raises(self, sample_task_base):
        inner = Task(**{**sample_task_base, "id": "x"})
        middle = Task(**{**sample_task_base, "id": "y", "subtasks": [inner]})
        outer = Task(**{**sample_task_base, "id": "x", "subtasks": [middle]})

        with pytest.raises(MalformedTaskTree):
            flatten_tasks([outer])

    def test_depth_limit(self, sample_task_base):
        node = Task(**{**sample_task_base, "id": "level-4"})
        for level in (3, 2, 1):
            node = Task(**{**sample_task_base, "id": f"level-{level}", "subtasks": [node]})

        assert len(flatten_tasks([node], max_depth=4)) == 4
        with pytest.raises(MalformedTaskTree):
            flatten_tasks([node], max_depth=3)

    def test_deep_chain_does_not_recurse(self, sample_task_base):
        node = Task(**{**sample_task_base, "id": "leaf"})
        for level in range(2000):
            node = Task(**{**sample_task_base, "id": f"n{level}", "subtasks": [node]})

        assert len(flatten_tasks([node], max_depth=5000)) == 2001

    def test_shared_subtasks_doubling_per_level_fail_fast(self, sample_task_base):
        node = Task(**{**sample_task_base, "id": "bottom"})
        for level in range(40):
            node = Task(**{**sample_task_base, "id": f"d{level}", "subtasks": [node, node]})

        with pytest.raises(MalformedTaskTree):
            flatten_tasks([node])
        with pytest.raises(MalformedTaskTree):
            flatten_tasks([node], max_nodes=100)

    def test_node_limit(self, sample_task_base):
        tasks = [Task(**{**sample_task_base, "id": f"t{i}"}) for i in range(5)]

        assert len(flatten_tasks(tasks, max_nodes=5)) == 5
        with pytest.raises(MalformedTaskTree) as exc_info:
            flatten_tasks(tasks, max_nodes=4)
        assert exc_info.value.task_id == "t4"


class TestFilterIncomplete:

    def test_keeps_order(self, sample_task_base):
        tasks = [
            Task(**{**sample_task_base, "id": "a"}),
            Task(**{**sample_task_base, "id": "b", "completed": True}),
            Task(**{**sample_task_base, "id": "c"}),
        ]
        assert [t.id for t in filter_incomplete(tasks)] == ["a", "c"]

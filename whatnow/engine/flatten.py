"""Task tree flattening for whatnow.

Produces the candidate pool the suggestion engine scores: every task in the
tree, parents before their subtasks, in depth-first order.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from whatnow import config
from whatnow.errors import MalformedTaskTree
from whatnow.models.task import Task

logger = logging.getLogger(__name__)


def flatten_tasks(
    tasks: Iterable[Task],
    max_depth: Optional[int] = None,
    max_nodes: Optional[int] = None,
) -> List[Task]:
    """Flatten a task tree into a single list.

    Walks the tree iteratively (no recursion), emitting each task followed by
    its subtasks in order. A task object listed under two different parents
    is emitted at both positions, so the number of emitted tasks is capped.

    Args:
        tasks: Top-level tasks
        max_depth: Deepest allowed nesting (defaults to WHATNOW_MAX_TREE_DEPTH)
        max_nodes: Most tasks a walk may emit (defaults to WHATNOW_MAX_TREE_NODES)

    Returns:
        All tasks in depth-first pre-order

    Raises:
        MalformedTaskTree: If a task is its own ancestor, the tree is too deep,
            or it expands to more tasks than allowed
    """
    limit = max_depth if max_depth is not None else config.MAX_TREE_DEPTH
    node_limit = max_nodes if max_nodes is not None else config.MAX_TREE_NODES
    flat: List[Task] = []

    # (task, ancestors from root to parent)
    stack: List[Tuple[Task, Tuple[Task, ...]]] = [(task, ()) for task in reversed(list(tasks))]

    while stack:
        task, ancestors = stack.pop()

        if any(ancestor is task or ancestor.id == task.id for ancestor in ancestors):
            logger.error(f"Cycle in task tree at task {task.id}")
            raise MalformedTaskTree(
                f"Task {task.id} is its own ancestor", task_id=task.id
            )
        if len(ancestors) >= limit:
            logger.error(f"Task tree deeper than {limit} levels at task {task.id}")
            raise MalformedTaskTree(
                f"Task tree exceeds maximum depth of {limit}", task_id=task.id
            )

        if len(flat) >= node_limit:
            logger.error(f"Task tree expands to more than {node_limit} tasks at task {task.id}")
            raise MalformedTaskTree(
                f"Task tree exceeds maximum size of {node_limit} tasks", task_id=task.id
            )

        flat.append(task)

        if task.subtasks:
            path = ancestors + (task,)
            for child in reversed(task.subtasks):
                stack.append((child, path))

    return flat


def filter_incomplete(tasks: Iterable[Task]) -> List[Task]:
    """Keep only tasks that are not completed, preserving order."""
    return [task for task in tasks if not task.completed]

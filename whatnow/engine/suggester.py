"""Task suggestion engine for whatnow.

Given the user's context (time, energy, blockers) and their task tree, scores
every incomplete task and returns them best first, each with a short reason.

This function is deterministic - for fixed tasks, context and `now` the output
is always the same.
"""

import logging
from datetime import datetime, tzinfo
from typing import AbstractSet, Iterable, List, Optional

from whatnow import config
from whatnow.engine.flatten import filter_incomplete, flatten_tasks
from whatnow.engine.rules import RuleOutcome, ScoringInputs, evaluate_rules, first_reason
from whatnow.models.suggestion import SuggestionContext, TaskSuggestion, parse_time_available
from whatnow.models.task import Task, parse_energy_level

logger = logging.getLogger(__name__)


def resolve_now(now: Optional[datetime] = None, zone: Optional[tzinfo] = None) -> datetime:
    """Return a timezone-aware reference time for one scoring pass.

    Args:
        now: Reference time (current time when None). Naive values are read
            as wall-clock time in `zone`.
        zone: Zone that defines the calendar day (system local time when None)

    Returns:
        Aware datetime in `zone`
    """
    if now is None:
        return datetime.now(zone) if zone is not None else datetime.now().astimezone()
    if now.tzinfo is None:
        return now.replace(tzinfo=zone) if zone is not None else now.astimezone()
    return now.astimezone(zone) if zone is not None else now


def build_scoring_inputs(
    context: SuggestionContext,
    now: datetime,
    incomplete_ids: AbstractSet[str] = frozenset(),
) -> ScoringInputs:
    """Validate the context and freeze what the rules need.

    `now` must already be resolved (see `resolve_now`).

    Raises:
        InvalidEnumValue: If the context holds an unknown energy or time value
    """
    parse_time_available(context.time_available, "context.time_available")
    return ScoringInputs(
        energy_level=parse_energy_level(context.energy_level, "context.energy_level"),
        blockers=tuple(b.strip().lower() for b in context.blockers if b and b.strip()),
        now=now,
        incomplete_ids=frozenset(incomplete_ids),
    )


def explain_task(
    task: Task,
    context: SuggestionContext,
    now: Optional[datetime] = None,
    incomplete_ids: AbstractSet[str] = frozenset(),
    time_zone: Optional[str] = None,
) -> List[RuleOutcome]:
    """All rules that fired for a task, in evaluation order.

    `now` and `time_zone` are resolved exactly as in `suggest`.
    """
    reference = resolve_now(now, config.get_time_zone(time_zone))
    return evaluate_rules(task, build_scoring_inputs(context, reference, incomplete_ids))


def score_task(
    task: Task,
    context: SuggestionContext,
    now: Optional[datetime] = None,
    incomplete_ids: AbstractSet[str] = frozenset(),
    time_zone: Optional[str] = None,
) -> TaskSuggestion:
    """Score a single task.

    Args:
        task: Task to score
        context: User's current context
        now: Reference time for date rules (defaults to now)
        incomplete_ids: IDs of incomplete tasks (for the parent rule)
        time_zone: IANA zone that defines "today" (defaults to WHATNOW_TIMEZONE)

    Returns:
        TaskSuggestion with summed score and the first triggered reason
    """
    reference = resolve_now(now, config.get_time_zone(time_zone))
    return _score(task, build_scoring_inputs(context, reference, incomplete_ids))


def _score(task: Task, inputs: ScoringInputs) -> TaskSuggestion:
    outcomes = evaluate_rules(task, inputs)
    return TaskSuggestion(
        task=task,
        score=sum(outcome.points for outcome in outcomes),
        reason=first_reason(outcomes),
    )


def suggest(
    tasks: Iterable[Task],
    context: SuggestionContext,
    now: Optional[datetime] = None,
    time_zone: Optional[str] = None,
) -> List[TaskSuggestion]:
    """Rank the incomplete tasks in a task tree for the given context.

    Steps:
    1. Flatten the tree (parents before subtasks)
    2. Drop completed tasks
    3. Score each remaining task with the ordered rule list
    4. Sort by descending score; ties keep flatten order

    The result is never truncated; see `top_suggestions`.

    Args:
        tasks: Top-level tasks (subtasks are reached through each task)
        context: User's time, energy and blockers
        now: Reference time, sampled once for the whole pass (defaults to now)
        time_zone: IANA zone that defines "today" (defaults to WHATNOW_TIMEZONE)

    Returns:
        List of suggestions, best first

    Raises:
        MalformedTaskTree: If the tree contains a cycle or is too deep
        InvalidEnumValue: If a task or the context holds an unknown level
    """
    reference = resolve_now(now, config.get_time_zone(time_zone))

    incomplete = filter_incomplete(flatten_tasks(tasks))
    inputs = build_scoring_inputs(context, reference, {task.id for task in incomplete})

    suggestions = [_score(task, inputs) for task in incomplete]
    # list.sort is stable, also with reverse=True
    suggestions.sort(key=lambda suggestion: suggestion.score, reverse=True)

    logger.debug(
        f"Scored {len(suggestions)} incomplete tasks "
        f"(energy={inputs.energy_level.value}, blockers={len(inputs.blockers)})"
    )
    return suggestions


def top_suggestions(
    suggestions: List[TaskSuggestion],
    limit: Optional[int] = None,
) -> List[TaskSuggestion]:
    """First `limit` suggestions (defaults to WHATNOW_SUGGESTION_LIMIT)."""
    count = limit if limit is not None else config.SUGGESTION_LIMIT
    return suggestions[:max(count, 0)]

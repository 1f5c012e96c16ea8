"""Scoring rules for the suggestion engine.

Each rule looks at one task in the light of the user's context and either
contributes a score delta with a message or stays silent. Rules are evaluated
in the fixed order of SCORING_RULES. All deltas are summed; the message shown
to the user is the one from the first rule that fired (see `first_reason`).
Do not reorder the list: the order decides which reason is surfaced.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import AbstractSet, Callable, List, NamedTuple, Optional

from whatnow.models.constants import (
    ACTIVATION_TOO_HIGH_POINTS,
    BLOCKER_POINTS,
    DEFAULT_REASON,
    DUE_SOON_POINTS,
    DUE_SOON_WINDOW,
    DUE_TODAY_POINTS,
    ENERGY_BELOW_POINTS,
    ENERGY_MATCH_POINTS,
    ENERGY_TOO_DEMANDING_POINTS,
    HIGH_ACTIVATION_FIT_POINTS,
    LOW_ACTIVATION_FIT_POINTS,
    MEDIUM_ACTIVATION_FIT_POINTS,
    OVERDUE_POINTS,
    PARENT_INCOMPLETE_POINTS,
)
from whatnow.models.task import EnergyLevel, Task, energy_rank, parse_energy_level


@dataclass(frozen=True)
class RuleOutcome:
    """A rule that fired for a task."""
    rule: str
    points: int
    reason: str


@dataclass(frozen=True)
class ScoringInputs:
    """Everything a rule may consult besides the task itself.

    `now` must be timezone-aware; its zone defines the calendar day.
    """
    energy_level: EnergyLevel
    blockers: tuple
    now: datetime
    incomplete_ids: AbstractSet[str]


class ScoringRule(NamedTuple):
    name: str
    evaluate: Callable[[Task, ScoringInputs], Optional[RuleOutcome]]


def _local_due(task: Task, now: datetime) -> Optional[datetime]:
    """Due date expressed in `now`'s zone (naive dates are taken as local)."""
    if task.due_date is None:
        return None
    if task.due_date.tzinfo is None:
        return task.due_date.replace(tzinfo=now.tzinfo)
    return task.due_date.astimezone(now.tzinfo)


def overdue_rule(task: Task, inputs: ScoringInputs) -> Optional[RuleOutcome]:
    due = _local_due(task, inputs.now)
    # Anything due earlier today counts as "due today", not overdue
    if due is not None and due < inputs.now and due.date() != inputs.now.date():
        return RuleOutcome("overdue", OVERDUE_POINTS, "Task is overdue")
    return None


def due_today_rule(task: Task, inputs: ScoringInputs) -> Optional[RuleOutcome]:
    due = _local_due(task, inputs.now)
    if due is not None and due.date() == inputs.now.date():
        return RuleOutcome("due_today", DUE_TODAY_POINTS, "Task is due today")
    return None


def due_soon_rule(task: Task, inputs: ScoringInputs) -> Optional[RuleOutcome]:
    due = _local_due(task, inputs.now)
    if due is not None and inputs.now < due <= inputs.now + DUE_SOON_WINDOW:
        return RuleOutcome("due_soon", DUE_SOON_POINTS, "Task is due soon")
    return None


def energy_rule(task: Task, inputs: ScoringInputs) -> Optional[RuleOutcome]:
    """Compare the energy a task needs with the user's current energy."""
    if task.energy_level is None:
        return None

    level = parse_energy_level(task.energy_level, "energy_level")
    task_rank = energy_rank(level)
    user_rank = energy_rank(inputs.energy_level)

    if task_rank == user_rank:
        return RuleOutcome(
            "energy",
            ENERGY_MATCH_POINTS,
            f"Task requires {level.value} energy which matches your current energy",
        )
    if task_rank > user_rank:
        return RuleOutcome(
            "energy",
            ENERGY_TOO_DEMANDING_POINTS,
            f"Task requires {level.value} energy which may be too demanding",
        )
    return RuleOutcome(
        "energy",
        ENERGY_BELOW_POINTS,
        f"Task requires {level.value} energy which is below your current level",
    )


def activation_energy_rule(task: Task, inputs: ScoringInputs) -> Optional[RuleOutcome]:
    """Favor tasks that are easy enough to start at the user's energy."""
    if task.activation_energy is None:
        return None

    activation = parse_energy_level(task.activation_energy, "activation_energy")
    user_level = inputs.energy_level

    if user_level == EnergyLevel.LOW:
        if activation == EnergyLevel.LOW:
            return RuleOutcome(
                "activation_energy",
                LOW_ACTIVATION_FIT_POINTS,
                "Low activation energy makes it easier to start with your current low energy",
            )
        return RuleOutcome(
            "activation_energy",
            ACTIVATION_TOO_HIGH_POINTS,
            f"Task activation energy ({activation.value}) may be too high for your current low energy",
        )

    if user_level == EnergyLevel.MEDIUM and activation == EnergyLevel.MEDIUM:
        return RuleOutcome(
            "activation_energy",
            MEDIUM_ACTIVATION_FIT_POINTS,
            "Medium activation energy fits your current energy",
        )

    if user_level == EnergyLevel.HIGH and activation == EnergyLevel.HIGH:
        return RuleOutcome(
            "activation_energy",
            HIGH_ACTIVATION_FIT_POINTS,
            "High activation energy tasks are suitable for your high energy",
        )

    return None


def blocker_rule(task: Task, inputs: ScoringInputs) -> Optional[RuleOutcome]:
    title = task.title.lower()
    if any(blocker in title for blocker in inputs.blockers):
        return RuleOutcome("blocker", BLOCKER_POINTS, "This task may be blocked")
    return None


def parent_incomplete_rule(task: Task, inputs: ScoringInputs) -> Optional[RuleOutcome]:
    # Completed or missing parents never penalize
    if task.parent_task_id and task.parent_task_id in inputs.incomplete_ids:
        return RuleOutcome(
            "parent_incomplete",
            PARENT_INCOMPLETE_POINTS,
            "Parent task is not completed yet",
        )
    return None


SCORING_RULES: List[ScoringRule] = [
    ScoringRule("overdue", overdue_rule),
    ScoringRule("due_today", due_today_rule),
    ScoringRule("due_soon", due_soon_rule),
    ScoringRule("energy", energy_rule),
    ScoringRule("activation_energy", activation_energy_rule),
    ScoringRule("blocker", blocker_rule),
    ScoringRule("parent_incomplete", parent_incomplete_rule),
]


def evaluate_rules(task: Task, inputs: ScoringInputs) -> List[RuleOutcome]:
    """Run every rule in order and collect the ones that fired."""
    outcomes = []
    for rule in SCORING_RULES:
        outcome = rule.evaluate(task, inputs)
        if outcome is not None:
            outcomes.append(outcome)
    return outcomes


def first_reason(outcomes: List[RuleOutcome]) -> str:
    """Reason surfaced to the user: the first rule that fired, not the largest."""
    if outcomes:
        return outcomes[0].reason
    return DEFAULT_REASON

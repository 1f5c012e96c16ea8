"""Suggestion engine for whatnow."""

from whatnow.engine.flatten import flatten_tasks, filter_incomplete
from whatnow.engine.rules import SCORING_RULES, RuleOutcome, ScoringRule, first_reason
from whatnow.engine.suggester import suggest, score_task, explain_task, top_suggestions

__all__ = [
    "flatten_tasks",
    "filter_incomplete",
    "SCORING_RULES",
    "RuleOutcome",
    "ScoringRule",
    "first_reason",
    "suggest",
    "score_task",
    "explain_task",
    "top_suggestions",
]

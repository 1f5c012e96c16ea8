"""Stateful wrapper around the wizard and the suggestion engine.

Holds one user's wizard progress and task collection. Leaving the blockers
step computes suggestions for the collected context; later task changes
recompute them.
"""

import logging
from datetime import datetime
from typing import Any, Iterable, List, Optional

from whatnow.engine.suggester import suggest, top_suggestions
from whatnow.models.constants import WIZARD_BLOCKERS_STEP
from whatnow.models.suggestion import SuggestionContext, TaskSuggestion
from whatnow.models.task import Task
from whatnow.models.wizard_state import WizardState
from whatnow.wizard import transitions

logger = logging.getLogger(__name__)


class WhatNowSession:
    """One run of the "What Now?" wizard over a task collection."""

    def __init__(
        self,
        tasks: Optional[Iterable[Task]] = None,
        time_zone: Optional[str] = None,
    ):
        self.tasks: List[Task] = list(tasks or [])
        self.time_zone = time_zone
        self.state: WizardState = transitions.initial_state()
        self.context: Optional[SuggestionContext] = None
        self.suggestions: List[TaskSuggestion] = []

    @property
    def step(self) -> int:
        return self.state.step

    @property
    def is_complete(self) -> bool:
        return transitions.is_complete(self.state)

    def select_time(self, value: Any) -> WizardState:
        self.state = transitions.select_time(self.state, value)
        return self.state

    def select_energy(self, value: Any) -> WizardState:
        self.state = transitions.select_energy(self.state, value)
        return self.state

    def add_blocker(self, text: str) -> WizardState:
        self.state = transitions.add_blocker(self.state, text)
        return self.state

    def remove_blocker(self, index: int) -> WizardState:
        self.state = transitions.remove_blocker(self.state, index)
        return self.state

    def advance(self, now: Optional[datetime] = None) -> WizardState:
        """Next step; leaving the blockers step runs the engine."""
        leaving_blockers = self.state.step == WIZARD_BLOCKERS_STEP
        self.state = transitions.advance(self.state)
        if leaving_blockers:
            self.context = transitions.to_context(self.state)
            self.refresh(now)
        return self.state

    def retreat(self) -> WizardState:
        self.state = transitions.retreat(self.state)
        return self.state

    def reset(self) -> WizardState:
        self.state = transitions.reset(self.state)
        self.context = None
        self.suggestions = []
        return self.state

    def update_tasks(self, tasks: Iterable[Task], now: Optional[datetime] = None) -> None:
        """Replace the task collection, recomputing suggestions if any exist."""
        self.tasks = list(tasks)
        if self.context is not None:
            self.refresh(now)

    def refresh(self, now: Optional[datetime] = None) -> List[TaskSuggestion]:
        """Recompute suggestions for the current context.

        Raises:
            RuntimeError: If no context has been collected yet
        """
        if self.context is None:
            raise RuntimeError("No context yet; finish the wizard first")
        self.suggestions = suggest(self.tasks, self.context, now=now, time_zone=self.time_zone)
        logger.debug(f"Session produced {len(self.suggestions)} suggestions")
        return self.suggestions

    def top(self, limit: Optional[int] = None) -> List[TaskSuggestion]:
        """Best suggestions to show (five unless configured otherwise)."""
        return top_suggestions(self.suggestions, limit)

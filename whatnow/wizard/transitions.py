"""State transitions for the "What Now?" wizard.

The wizard collects time available, energy level and blockers over four
steps (1 = time, 2 = energy, 3 = blockers, 4 = results). Every transition is
a total function: it takes a state and returns a new one, leaving the input
untouched. Enabling or disabling buttons is up to the caller; `can_advance`
reports what the UI would allow.
"""

from typing import Any, Optional

from whatnow.models.constants import (
    DEFAULT_ENERGY_LEVEL,
    DEFAULT_TIME_AVAILABLE,
    WIZARD_BLOCKERS_STEP,
    WIZARD_FIRST_STEP,
    WIZARD_RESULTS_STEP,
)
from whatnow.models.suggestion import SuggestionContext, parse_time_available
from whatnow.models.task import parse_energy_level
from whatnow.models.wizard_state import WizardState


def initial_state() -> WizardState:
    """Fresh wizard state: step 1, nothing selected."""
    return WizardState()


def select_time(state: WizardState, value: Any) -> WizardState:
    """Record the time available and move on to the energy step.

    Raises:
        InvalidEnumValue: If the value is not short, medium or long
    """
    time_available = parse_time_available(value)
    return state.model_copy(update={"time_available": time_available.value, "step": 2})


def select_energy(state: WizardState, value: Any) -> WizardState:
    """Record the energy level and move on to the blockers step.

    Raises:
        InvalidEnumValue: If the value is not low, medium or high
    """
    energy_level = parse_energy_level(value)
    return state.model_copy(update={"energy_level": energy_level.value, "step": 3})


def add_blocker(state: WizardState, text: str) -> WizardState:
    """Append a trimmed blocker; blank text leaves the state as is."""
    blocker = (text or "").strip()
    if not blocker:
        return state
    return state.model_copy(update={"blockers": [*state.blockers, blocker]})


def remove_blocker(state: WizardState, index: int) -> WizardState:
    """Drop the blocker at `index`; an index out of range changes nothing."""
    if index < 0 or index >= len(state.blockers):
        return state
    blockers = [b for i, b in enumerate(state.blockers) if i != index]
    return state.model_copy(update={"blockers": blockers})


def advance(state: WizardState) -> WizardState:
    """Go to the next step."""
    return state.model_copy(update={"step": state.step + 1})


def retreat(state: WizardState) -> WizardState:
    """Go back one step, never before step 1."""
    return state.model_copy(update={"step": max(WIZARD_FIRST_STEP, state.step - 1)})


def reset(state: Optional[WizardState] = None) -> WizardState:
    """Start over. The given state is ignored."""
    return initial_state()


def is_complete(state: WizardState) -> bool:
    """True once past the blockers step with time and energy chosen."""
    return (
        state.step > WIZARD_BLOCKERS_STEP
        and state.time_available is not None
        and state.energy_level is not None
    )


def can_advance(state: WizardState) -> bool:
    """Whether "Next" is available: a choice is needed on steps 1 and 2."""
    if state.step >= WIZARD_RESULTS_STEP:
        return False
    if state.step == 1 and state.time_available is None:
        return False
    if state.step == 2 and state.energy_level is None:
        return False
    return True


def progress(state: WizardState) -> float:
    """Fraction of the wizard completed, from 0.0 (step 1) to 1.0 (results)."""
    done = (state.step - WIZARD_FIRST_STEP) / (WIZARD_RESULTS_STEP - WIZARD_FIRST_STEP)
    return min(1.0, max(0.0, done))


def to_context(state: WizardState) -> SuggestionContext:
    """Build the engine's context, using medium for anything not chosen."""
    return SuggestionContext(
        time_available=state.time_available or DEFAULT_TIME_AVAILABLE,
        energy_level=state.energy_level or DEFAULT_ENERGY_LEVEL,
        blockers=list(state.blockers),
    )

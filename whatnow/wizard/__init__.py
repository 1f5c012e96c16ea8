"""The "What Now?" context wizard."""

from whatnow.wizard.transitions import (
    initial_state,
    select_time,
    select_energy,
    add_blocker,
    remove_blocker,
    advance,
    retreat,
    reset,
    is_complete,
    can_advance,
    progress,
    to_context,
)
from whatnow.wizard.session import WhatNowSession

__all__ = [
    "initial_state",
    "select_time",
    "select_energy",
    "add_blocker",
    "remove_blocker",
    "advance",
    "retreat",
    "reset",
    "is_complete",
    "can_advance",
    "progress",
    "to_context",
    "WhatNowSession",
]

"""Constants for whatnow.

This module centralizes the score weights, windows and defaults used by the
suggestion engine and the wizard.
"""

from datetime import timedelta

from whatnow.models.suggestion import TimeAvailable
from whatnow.models.task import EnergyLevel


# Date-based contributions
OVERDUE_POINTS = 50
DUE_TODAY_POINTS = 40
DUE_SOON_POINTS = 30
DUE_SOON_WINDOW = timedelta(hours=24)

# Task energy vs. user energy
ENERGY_MATCH_POINTS = 20
ENERGY_TOO_DEMANDING_POINTS = -10
ENERGY_BELOW_POINTS = 5

# Activation energy vs. user energy
LOW_ACTIVATION_FIT_POINTS = 20
ACTIVATION_TOO_HIGH_POINTS = -10
MEDIUM_ACTIVATION_FIT_POINTS = 15
HIGH_ACTIVATION_FIT_POINTS = 20

# Constraints
BLOCKER_POINTS = -30
PARENT_INCOMPLETE_POINTS = -10

DEFAULT_REASON = "Available task"

# Wizard
WIZARD_FIRST_STEP = 1
WIZARD_BLOCKERS_STEP = 3
WIZARD_RESULTS_STEP = 4
DEFAULT_TIME_AVAILABLE = TimeAvailable.MEDIUM
DEFAULT_ENERGY_LEVEL = EnergyLevel.MEDIUM

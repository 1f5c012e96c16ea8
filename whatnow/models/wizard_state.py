"""WizardState data model for whatnow."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from whatnow.models.suggestion import TimeAvailable
from whatnow.models.task import EnergyLevel


class WizardState(BaseModel):
    """Progress of the "What Now?" wizard.

    Steps: 1 = time, 2 = energy, 3 = blockers, 4 = results.
    """

    model_config = ConfigDict(use_enum_values=True)

    step: int = Field(1, ge=1, description="Current wizard step")
    time_available: Optional[TimeAvailable] = Field(None, description="Selected time option")
    energy_level: Optional[EnergyLevel] = Field(None, description="Selected energy level")
    blockers: List[str] = Field(default_factory=list, description="Blockers entered so far")

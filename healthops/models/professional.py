from pydantic import BaseModel, ConfigDict, Field
from typing import FrozenSet, Optional


class ProfessionalSummary(BaseModel):
    """
    Professional as seen by capacity planning.

    Only competencies take part in the computation; id and name are carried
    for display.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: Optional[str] = None
    competencies: FrozenSet[str] = Field(
        default_factory=frozenset,
        description='Validated competency tags, e.g. "MRI Prostate", "Coronary CT"',
    )

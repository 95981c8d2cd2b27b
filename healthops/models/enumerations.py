from enum import Enum

class Modality(str, Enum):
    """How the clinical service is delivered."""
    TELEMEDICINE = "telemedicine"  # Remote reporting
    ON_SITE = "on_site"            # Professionals at the facility
    HYBRID = "hybrid"

class Decision(str, Enum):
    """Participation verdict for a tender."""
    PARTICIPATE = "PARTICIPATE"
    REVIEW = "REVIEW"
    DO_NOT_PARTICIPATE = "DO_NOT_PARTICIPATE"

    @property
    def label(self) -> str:
        """Display text, e.g. "DO NOT PARTICIPATE"."""
        return self.value.replace("_", " ")

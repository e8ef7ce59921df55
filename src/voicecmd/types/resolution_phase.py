from enum import Enum
from enum import auto
from typing import final


@final
class ResolutionPhase(Enum):
    START = auto()
    EXACT_PHASE = auto()
    SLOTTED_PHASE = auto()
    DONE = auto()

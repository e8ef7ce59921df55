from collections.abc import Callable
from enum import Enum
from enum import auto
from typing import NamedTuple
from typing import Optional
from typing import final

from voicecmd.types.resolution_phase import ResolutionPhase


@final
class TraceEventKind(Enum):
    PHASE_ENTERED = auto()
    TEMPLATE_MALFORMED = auto()
    TEMPLATE_MATCHED = auto()
    EMPTY_SLOT = auto()
    ALIGNMENT_FAILED = auto()
    RESOLVED = auto()


@final
class TraceEvent(NamedTuple):
    phase: ResolutionPhase
    kind: TraceEventKind
    command_name: Optional[str] = None
    detail: str = ""


type TraceHook = Callable[[TraceEvent], None]

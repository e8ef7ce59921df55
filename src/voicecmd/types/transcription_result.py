from enum import StrEnum
from typing import NamedTuple
from typing import Optional
from typing import final


@final
class TranscriptionResult(NamedTuple):
    success: bool
    text: str
    message: Optional[str] = None
    language: Optional[str] = None
    confidence: Optional[float] = None


@final
class TranscriberStatus(StrEnum):
    READY = "ready"
    NOT_READY = "not_ready"
    UNREACHABLE = "unreachable"

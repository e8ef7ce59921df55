from abc import ABC
from abc import abstractmethod
from typing import Final
from typing import Optional
from typing import final

from voicecmd.types.transcription_result import TranscriberStatus
from voicecmd.types.transcription_result import TranscriptionResult


@final
class TranscriptionError(RuntimeError):
    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code: Final = status_code


class Transcriber(ABC):
    @abstractmethod
    async def transcribe(
        self,
        audio: bytes,
        *,
        filename: str,
        content_type: Optional[str] = None,
    ) -> TranscriptionResult:
        """
        Turns recorded speech into text. A result with `success=False` means that the
        service processed the request but could not produce a transcription.
        :raises TranscriptionError: If the service cannot be reached, times out, or
                                    answers with an error.
        """
        pass

    @abstractmethod
    async def check_health(self) -> TranscriberStatus:
        pass

import logging
from typing import Any
from typing import Final
from typing import Optional
from typing import final
from typing import override

import httpx

from voicecmd.transcription.transcriber import Transcriber
from voicecmd.transcription.transcriber import TranscriptionError
from voicecmd.types.transcription_result import TranscriberStatus
from voicecmd.types.transcription_result import TranscriptionResult

logger: Final = logging.getLogger(__name__)


def _optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@final
class WhisperClient(Transcriber):
    """
    Client for a Whisper transcription server exposing `POST /transcribe` (multipart
    field `audio`) and `GET /health`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 30.0,
        health_timeout_seconds: float = 2.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url: Final = base_url.rstrip("/")
        self._timeout_seconds: Final = timeout_seconds
        self._health_timeout_seconds: Final = health_timeout_seconds
        self._transport: Final = transport

    def _client(self, timeout_seconds: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout_seconds,
            transport=self._transport,
        )

    @override
    async def transcribe(
        self,
        audio: bytes,
        *,
        filename: str,
        content_type: Optional[str] = None,
    ) -> TranscriptionResult:
        files: Final = {"audio": (filename, audio, content_type or "application/octet-stream")}
        try:
            async with self._client(self._timeout_seconds) as client:
                response: Final = await client.post("/transcribe", files=files)
        except httpx.TimeoutException as e:
            raise TranscriptionError(f"Transcription timed out after {self._timeout_seconds} seconds") from e
        except httpx.HTTPError as e:
            raise TranscriptionError(f"Failed to reach transcription server at {self._base_url}: {e}") from e

        if response.is_error:
            try:
                details: Any = response.json()
            except ValueError:
                details = {"error": "Unknown error"}
            logger.error(f"Transcription server answered with HTTP {response.status_code}: {details}")
            raise TranscriptionError(
                f"Transcription server error ({response.status_code}): {details}",
                status_code=response.status_code,
            )

        try:
            body: Final = response.json()
        except ValueError as e:
            raise TranscriptionError("Transcription server returned a malformed response") from e
        if not isinstance(body, dict):
            raise TranscriptionError("Transcription server returned a malformed response")

        text: Final = body.get("transcription") or ""
        return TranscriptionResult(
            success=bool(body.get("success", False)),
            text=str(text),
            message=body.get("message"),
            language=body.get("language"),
            confidence=_optional_float(body.get("confidence")),
        )

    @override
    async def check_health(self) -> TranscriberStatus:
        try:
            async with self._client(self._health_timeout_seconds) as client:
                response: Final = await client.get("/health")
                body: Final = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Could not connect to transcription server at {self._base_url}: {e}")
            return TranscriberStatus.UNREACHABLE
        if isinstance(body, dict) and body.get("status") == "healthy" and body.get("model_loaded"):
            return TranscriberStatus.READY
        return TranscriberStatus.NOT_READY

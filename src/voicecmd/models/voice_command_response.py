from typing import Optional
from typing import final

from pydantic import BaseModel


@final
class VoiceCommandResponse(BaseModel):
    success: bool
    message: str
    request_id: str
    timestamp: str
    error: Optional[str] = None
    transcribed_text: str = ""
    command: Optional[str] = None
    parameter: Optional[str] = None
    workflow_id: Optional[str] = None
    language: Optional[str] = None
    confidence: Optional[float] = None
    processing_time_ms: Optional[int] = None
    transcription_time_ms: Optional[int] = None
    matching_time_ms: Optional[int] = None

from typing import final

from pydantic import BaseModel

from voicecmd.types.transcription_result import TranscriberStatus


@final
class ServiceInfoResponse(BaseModel):
    detail: str
    transcription_server: str
    version: str
    status: str
    timestamp: str


@final
class UserIdResponse(BaseModel):
    success: bool = True
    user_id: str
    message: str = "User ID generated successfully"
    timestamp: str


@final
class HealthResponse(BaseModel):
    api_status: str
    transcription_status: TranscriberStatus
    database_status: str
    timestamp: str

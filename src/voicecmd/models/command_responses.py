from datetime import datetime
from typing import final

from pydantic import BaseModel

from voicecmd.models.stored_command_model import StoredCommandModel


@final
class SaveCommandResponse(BaseModel):
    success: bool = True
    message: str = "Command saved successfully"
    id: int
    created_at: datetime
    request_id: str


@final
class DeleteCommandResponse(BaseModel):
    success: bool = True
    message: str = "Command deleted successfully"
    command: StoredCommandModel
    request_id: str


@final
class DeleteWorkflowCommandsResponse(BaseModel):
    success: bool = True
    message: str
    deleted_count: int
    commands: list[StoredCommandModel]
    workflow_id: str
    user_id: str
    request_id: str
    timestamp: str

from typing import Optional
from typing import final

from pydantic import BaseModel


@final
class SaveCommandRequest(BaseModel):
    user_id: Optional[str] = None
    command_name: Optional[str] = None
    has_parameter: bool = False
    parameter_name: Optional[str] = None
    workflow_id: Optional[str] = None


@final
class ExecuteCommandRequest(BaseModel):
    user_input: str = ""
    user_id: Optional[str] = None


@final
class DeleteWorkflowCommandsRequest(BaseModel):
    user_id: Optional[str] = None

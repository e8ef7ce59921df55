from datetime import datetime
from typing import Optional
from typing import Self
from typing import final

from pydantic import BaseModel

from voicecmd.types.stored_command import StoredCommand


@final
class StoredCommandModel(BaseModel):
    id: int
    user_id: str
    command_name: str
    has_parameter: bool
    parameter_name: Optional[str]
    workflow_id: str
    created_at: datetime

    @classmethod
    def from_stored_command(cls, command: StoredCommand) -> Self:
        return cls(**command._asdict())

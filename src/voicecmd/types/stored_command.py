from datetime import datetime
from typing import NamedTuple
from typing import Optional
from typing import final

from voicecmd.types.command_template import CommandTemplate


@final
class StoredCommand(NamedTuple):
    """
    Plain snapshot of a `VoiceCommand` row that stays usable after its database session
    has been closed (or the row has been deleted).
    """

    id: int
    user_id: str
    command_name: str
    has_parameter: bool
    parameter_name: Optional[str]
    workflow_id: str
    created_at: datetime

    def to_template(self) -> CommandTemplate:
        return CommandTemplate(
            command_name=self.command_name,
            has_parameter=self.has_parameter,
            parameter_name=self.parameter_name,
            workflow_id=self.workflow_id,
        )

from enum import StrEnum
from typing import NamedTuple
from typing import Optional
from typing import Self
from typing import final

from voicecmd.types.command_template import CommandTemplate


@final
class MatchMessage(StrEnum):
    EMPTY_COMMAND = "empty command"
    NO_COMMANDS_FOUND = "no commands found"
    READY = "ready"
    READY_WITH_PARAMETER = "ready with parameter"
    NO_MATCHING_COMMAND_FOUND = "no matching command found"


@final
class MatchResult(NamedTuple):
    success: bool
    message: MatchMessage
    command: Optional[str] = None
    # Substring of the original utterance, only set for slotted matches.
    parameter: Optional[str] = None
    workflow_id: Optional[str] = None

    @classmethod
    def failure(cls, message: MatchMessage) -> Self:
        return cls(success=False, message=message)

    @classmethod
    def exact(cls, template: CommandTemplate) -> Self:
        return cls(
            success=True,
            message=MatchMessage.READY,
            command=template.command_name,
            workflow_id=template.workflow_id,
        )

    @classmethod
    def slotted(cls, template: CommandTemplate, parameter: str) -> Self:
        return cls(
            success=True,
            message=MatchMessage.READY_WITH_PARAMETER,
            command=template.command_name,
            parameter=parameter,
            workflow_id=template.workflow_id,
        )

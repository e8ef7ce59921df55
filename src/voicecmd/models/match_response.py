from typing import Optional
from typing import Self
from typing import final

from pydantic import BaseModel

from voicecmd.types.match_result import MatchResult


@final
class MatchResponse(BaseModel):
    success: bool
    command: Optional[str] = None
    parameter: Optional[str] = None
    workflow_id: Optional[str] = None
    message: str

    @classmethod
    def from_match_result(cls, result: MatchResult) -> Self:
        return cls(
            success=result.success,
            command=result.command,
            parameter=result.parameter,
            workflow_id=result.workflow_id,
            message=str(result.message),
        )

from datetime import UTC
from datetime import datetime
from typing import Optional
from typing import final

from sqlalchemy import Column
from sqlalchemy import DateTime
from sqlmodel import Field

from voicecmd.database.metadata import SQLModel


def _utc_now() -> datetime:
    return datetime.now(UTC)


@final
class VoiceCommand(SQLModel, table=True):
    """A command phrase a user has bound to a workflow.

    For slotted commands, `parameter_name` is a literal substring of `command_name`
    (not a placeholder token) whose first occurrence marks the variable part.
    """

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(index=True)
    command_name: str
    has_parameter: bool = False
    parameter_name: Optional[str] = None
    workflow_id: str = Field(index=True)
    created_at: datetime = Field(
        default_factory=_utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

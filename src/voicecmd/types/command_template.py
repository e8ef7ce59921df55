from typing import NamedTuple
from typing import Optional
from typing import final


@final
class CommandTemplate(NamedTuple):
    command_name: str  # As authored, mixed case, may contain punctuation.
    has_parameter: bool
    # Literal substring of `command_name` whose first occurrence marks the slot.
    parameter_name: Optional[str]
    workflow_id: str

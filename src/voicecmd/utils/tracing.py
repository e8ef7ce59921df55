import logging
from typing import Final

from voicecmd.types.trace_event import TraceEvent
from voicecmd.types.trace_event import TraceHook

logger: Final = logging.getLogger(__name__)


def make_logging_trace_hook(request_id: str) -> TraceHook:
    def _log(event: TraceEvent) -> None:
        command: Final = f" '{event.command_name}'" if event.command_name is not None else ""
        detail: Final = f": {event.detail}" if event.detail else ""
        logger.debug(f"[{request_id}] {event.phase.name} {event.kind.name}{command}{detail}")

    return _log

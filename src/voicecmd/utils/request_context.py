import time
from datetime import UTC
from datetime import datetime
from uuid import uuid4


def new_request_id(kind: str) -> str:
    return f"{kind}-{uuid4().hex}"


def utc_timestamp() -> str:
    return datetime.now(UTC).isoformat()


def elapsed_ms(start: float) -> int:
    """Milliseconds since `start`, which has to come from `time.perf_counter()`."""
    return int((time.perf_counter() - start) * 1000)

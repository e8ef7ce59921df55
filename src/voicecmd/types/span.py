from typing import NamedTuple
from typing import final


@final
class Span(NamedTuple):
    """Inclusive index range into a string."""

    start: int
    end: int

    def slice(self, text: str) -> str:
        return text[self.start : self.end + 1]

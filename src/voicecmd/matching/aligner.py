from typing import Optional

from voicecmd.matching.normalizer import is_punctuation
from voicecmd.types.span import Span


def locate_punctuation_insensitive_span(
    original: str,
    normalized_target_first_index: int,
    normalized_target_last_index: int,
) -> Optional[Span]:
    """
    Maps an inclusive index range of the punctuation-stripped character stream of
    `original` back to the corresponding range inside `original` itself.

    Only punctuation removal is modeled. Every other character (whitespace included)
    occupies exactly one position in the stripped stream, so indices computed against
    whitespace-collapsed text can drift when `original` contains whitespace runs.
    Callers have to verify the returned span if that matters to them.
    :param original: The text before normalization.
    :param normalized_target_first_index: First index of the range in the stripped stream.
    :param normalized_target_last_index: Last index of the range in the stripped stream.
    :return: The matching span in `original` or `None` if `original` is exhausted first.
    """
    if normalized_target_first_index < 0 or normalized_target_last_index < normalized_target_first_index:
        return None

    start: Optional[int] = None
    end: Optional[int] = None
    stripped_position = 0
    for index, char in enumerate(original):
        if is_punctuation(char):
            continue
        if start is None and stripped_position == normalized_target_first_index:
            start = index
        if end is None and stripped_position == normalized_target_last_index:
            end = index
        if start is not None and end is not None:
            return Span(start=start, end=end)
        stripped_position += 1
    return None

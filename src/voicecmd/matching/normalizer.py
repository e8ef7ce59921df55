import re
from typing import Final

PUNCTUATION_CHARACTERS: Final = frozenset(",.?!;:\"'()[]{}-_/\\")

_WHITESPACE_RUN: Final = re.compile(r"\s+")

type NormalizedText = str


def is_punctuation(char: str) -> bool:
    return char in PUNCTUATION_CHARACTERS


def strip_punctuation(text: str) -> str:
    return "".join(char for char in text if not is_punctuation(char))


def normalize(text: str) -> NormalizedText:
    """
    Canonical form used for comparing command phrases with utterances: punctuation
    removed, whitespace runs collapsed to a single space, trimmed and lowercased.
    An empty result means that there is no usable input.
    """
    if not text:
        return ""
    collapsed: Final = _WHITESPACE_RUN.sub(" ", strip_punctuation(text))
    return collapsed.strip().lower()

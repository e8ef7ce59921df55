from typing import Final

import pytest

from voicecmd.matching.normalizer import PUNCTUATION_CHARACTERS
from voicecmd.matching.normalizer import is_punctuation
from voicecmd.matching.normalizer import normalize
from voicecmd.matching.normalizer import strip_punctuation


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Open, the DOOR!", "open the door"),
        ("open the door", "open the door"),
        ("  hello   world  ", "hello world"),
        ("tab\tand\nnewline", "tab and newline"),
        ("it's", "its"),
        ("a - b", "a b"),
        ("[Report] - (2024)", "report 2024"),
        ("C:\\Users/john_doe", "cusersjohndoe"),
        ('"quoted" {braces} ;semi; colon:', "quoted braces semi colon"),
        ("50% off & more", "50% off & more"),
        ("Ünïcode Straße", "ünïcode straße"),
        ("", ""),
        ("?!...", ""),
        ("  -- ,, ", ""),
    ],
)
def test_normalize(text: str, expected: str) -> None:
    assert normalize(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "Open, the DOOR!",
        "  Search for   Rust Ownership on the web. ",
        "[Report] - (2024)",
        "Ünïcode Straße",
        "",
        "?!",
    ],
)
def test_normalize_is_idempotent(text: str) -> None:
    once: Final = normalize(text)
    assert normalize(once) == once


def test_normalize_ignores_case_and_punctuation() -> None:
    assert normalize("Open, the DOOR!") == normalize("open the door")


def test_every_punctuation_character_is_recognized() -> None:
    assert PUNCTUATION_CHARACTERS == set(",.?!;:\"'()[]{}-_/\\")
    for char in PUNCTUATION_CHARACTERS:
        assert is_punctuation(char)
    for char in "aZ0 @#$%&*+=<>|~`^":
        assert not is_punctuation(char)


def test_strip_punctuation_keeps_whitespace_runs() -> None:
    assert strip_punctuation("Report - 2024.pdf") == "Report  2024pdf"

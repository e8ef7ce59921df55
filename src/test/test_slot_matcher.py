from typing import Final
from typing import Optional

import pytest

from voicecmd.matching.slot_matcher import SlotMatch
from voicecmd.matching.slot_matcher import SlotSpan
from voicecmd.matching.slot_matcher import match_slot


@pytest.mark.parametrize(
    ("command_name", "parameter_name", "expected"),
    [
        ("search for QUERY on the web", "QUERY", SlotSpan(prefix="search for ", suffix=" on the web")),
        ("open the File.txt", "File.txt", SlotSpan(prefix="open the ", suffix="")),
        ("QUERY please", "QUERY", SlotSpan(prefix="", suffix=" please")),
        ("go {place}", "place", SlotSpan(prefix="go ", suffix="")),
        # Only the first occurrence marks the slot.
        ("go go go", "go", SlotSpan(prefix="", suffix=" go go")),
        ("call(NAME)", "NAME", SlotSpan(prefix="call", suffix="")),
        # Malformed templates.
        ("open the door", "window", None),
        ("open the door", "?!", None),
        ("open the door", "", None),
    ],
)
def test_slot_span_from_template(command_name: str, parameter_name: str, expected: Optional[SlotSpan]) -> None:
    assert SlotSpan.from_template(command_name, parameter_name) == expected


def test_slot_match_reports_offset_in_normalized_utterance() -> None:
    slot_span: Final = SlotSpan(prefix="search for ", suffix=" on the web")
    slot_match: Final = slot_span.match("search for rust ownership on the web")
    assert slot_match == SlotMatch(value="rust ownership", offset=11)
    assert slot_match is not None
    assert slot_match.last_index == 24


def test_slot_match_offset_skips_leading_whitespace_of_slot() -> None:
    slot_span: Final = SlotSpan.from_template("call(NAME)", "NAME")
    assert slot_span is not None
    assert slot_span.match("call bob") == SlotMatch(value="bob", offset=5)


@pytest.mark.parametrize(
    ("command_name", "parameter_name", "normalized_utterance", "expected"),
    [
        ("search for QUERY on the web", "QUERY", "search for rust ownership on the web", "rust ownership"),
        ("QUERY please", "QUERY", "coffee please", "coffee"),
        ("go {place}", "place", "go to the office", "to the office"),
        # Prefix and suffix would overlap.
        ("play SONG now", "SONG", "play now", None),
        # Prefix and suffix touch, which leaves an empty slot.
        ("play-SONG-now", "SONG", "playnow", ""),
        ("open the File.txt now", "File.txt", "open the report2024pdf please", None),
        ("open the File.txt now", "File.txt", "close the report now", None),
        ("open the door", "window", "open the door", None),
    ],
)
def test_match_slot(
    command_name: str,
    parameter_name: str,
    normalized_utterance: str,
    expected: Optional[str],
) -> None:
    assert match_slot(command_name, parameter_name, normalized_utterance) == expected


def test_template_with_trailing_slot_accepts_any_continuation() -> None:
    # Without a suffix, everything after the prefix belongs to the slot.
    assert match_slot("open the File.txt", "File.txt", "open the report2024pdf please") == "report2024pdf please"

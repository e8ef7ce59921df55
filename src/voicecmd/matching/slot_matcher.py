from typing import Final
from typing import NamedTuple
from typing import Optional
from typing import Self
from typing import final

from voicecmd.matching.normalizer import NormalizedText
from voicecmd.matching.normalizer import normalize


@final
class SlotMatch(NamedTuple):
    value: NormalizedText  # Trimmed, may be empty.
    offset: int  # Index of `value` inside the normalized utterance.

    @property
    def last_index(self) -> int:
        return self.offset + len(self.value) - 1


@final
class SlotSpan(NamedTuple):
    """
    The fixed parts of a slotted command template in normalized form. The slot is
    whatever lies between `prefix` and `suffix`.
    """

    prefix: NormalizedText
    suffix: NormalizedText

    @classmethod
    def from_template(cls, command_name: str, parameter_name: str) -> Optional[Self]:
        """
        Derives the slot boundaries from the first occurrence of the parameter inside
        the command phrase. Returns `None` for malformed templates, i.e. if the
        normalized parameter is empty or does not occur in the normalized command.
        """
        normalized_command: Final = normalize(command_name)
        normalized_parameter: Final = normalize(parameter_name)
        if not normalized_parameter:
            return None
        parameter_index: Final = normalized_command.find(normalized_parameter)
        if parameter_index == -1:
            return None
        return cls(
            prefix=normalized_command[:parameter_index],
            suffix=normalized_command[parameter_index + len(normalized_parameter) :],
        )

    def match(self, normalized_utterance: NormalizedText) -> Optional[SlotMatch]:
        if len(self.prefix) + len(self.suffix) > len(normalized_utterance):
            # Prefix and suffix would overlap.
            return None
        if not normalized_utterance.startswith(self.prefix) or not normalized_utterance.endswith(self.suffix):
            return None
        raw: Final = normalized_utterance[len(self.prefix) : len(normalized_utterance) - len(self.suffix)]
        value: Final = raw.strip()
        return SlotMatch(value=value, offset=len(self.prefix) + len(raw) - len(raw.lstrip()))


def match_slot(
    template_command_name: str,
    template_parameter_name: str,
    normalized_utterance: NormalizedText,
) -> Optional[NormalizedText]:
    """
    Matches a normalized utterance against one slotted template and returns the
    normalized slot value (possibly empty), or `None` if the template does not match
    or is malformed.
    """
    slot_span: Final = SlotSpan.from_template(template_command_name, template_parameter_name)
    if slot_span is None:
        return None
    slot_match: Final = slot_span.match(normalized_utterance)
    if slot_match is None:
        return None
    return slot_match.value

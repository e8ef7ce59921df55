from collections.abc import Sequence
from typing import Final
from typing import NamedTuple
from typing import Optional
from typing import Self
from typing import final

from voicecmd.matching.aligner import locate_punctuation_insensitive_span
from voicecmd.matching.normalizer import NormalizedText
from voicecmd.matching.normalizer import normalize
from voicecmd.matching.slot_matcher import SlotMatch
from voicecmd.matching.slot_matcher import SlotSpan
from voicecmd.types.command_template import CommandTemplate
from voicecmd.types.match_result import MatchMessage
from voicecmd.types.match_result import MatchResult
from voicecmd.types.resolution_phase import ResolutionPhase
from voicecmd.types.trace_event import TraceEvent
from voicecmd.types.trace_event import TraceEventKind
from voicecmd.types.trace_event import TraceHook


@final
class Utterance(NamedTuple):
    original: str
    normalized: NormalizedText

    @classmethod
    def from_text(cls, text: str) -> Self:
        return cls(original=text, normalized=normalize(text))


@final
class PhaseOutcome(NamedTuple):
    next_phase: ResolutionPhase
    result: Optional[MatchResult] = None  # Only set when `next_phase` is `DONE`.


@final
class CommandResolver:
    """
    Resolves utterances against an ordered snapshot of command templates.

    Resolution is a small state machine: `START` rejects unusable input,
    `EXACT_PHASE` compares templates without a parameter verbatim (after
    normalization) and `SLOTTED_PHASE` tries the slotted templates. Within a phase,
    the first matching template in the given order wins; templates are never
    re-sorted.
    """

    def __init__(self, templates: Sequence[CommandTemplate], *, on_trace: Optional[TraceHook] = None) -> None:
        self._templates: Final = tuple(templates)
        self._on_trace: Final = on_trace

    def resolve(self, user_utterance: str) -> MatchResult:
        utterance: Final = Utterance.from_text(user_utterance)
        phase = ResolutionPhase.START
        while True:
            outcome = self.run_phase(phase, utterance)
            if outcome.next_phase != ResolutionPhase.DONE:
                phase = outcome.next_phase
                continue
            assert outcome.result is not None
            self._trace(phase, TraceEventKind.RESOLVED, detail=outcome.result.message)
            return outcome.result

    def run_phase(self, phase: ResolutionPhase, utterance: Utterance) -> PhaseOutcome:
        self._trace(phase, TraceEventKind.PHASE_ENTERED)
        match phase:
            case ResolutionPhase.START:
                return self._start(utterance)
            case ResolutionPhase.EXACT_PHASE:
                return self._exact_phase(utterance)
            case ResolutionPhase.SLOTTED_PHASE:
                return self._slotted_phase(utterance)
            case ResolutionPhase.DONE:
                raise ValueError("Resolution has already finished")

    def _start(self, utterance: Utterance) -> PhaseOutcome:
        if not utterance.normalized:
            return PhaseOutcome(ResolutionPhase.DONE, MatchResult.failure(MatchMessage.EMPTY_COMMAND))
        if not self._templates:
            return PhaseOutcome(ResolutionPhase.DONE, MatchResult.failure(MatchMessage.NO_COMMANDS_FOUND))
        return PhaseOutcome(ResolutionPhase.EXACT_PHASE)

    def _exact_phase(self, utterance: Utterance) -> PhaseOutcome:
        for template in self._templates:
            if template.has_parameter:
                continue
            if normalize(template.command_name) == utterance.normalized:
                self._trace(ResolutionPhase.EXACT_PHASE, TraceEventKind.TEMPLATE_MATCHED, template.command_name)
                return PhaseOutcome(ResolutionPhase.DONE, MatchResult.exact(template))
        return PhaseOutcome(ResolutionPhase.SLOTTED_PHASE)

    def _slotted_phase(self, utterance: Utterance) -> PhaseOutcome:
        for template in self._templates:
            if not template.has_parameter:
                continue
            if not template.parameter_name:
                self._trace(
                    ResolutionPhase.SLOTTED_PHASE,
                    TraceEventKind.TEMPLATE_MALFORMED,
                    template.command_name,
                    detail="missing parameter name",
                )
                continue
            slot_span = SlotSpan.from_template(template.command_name, template.parameter_name)
            if slot_span is None:
                self._trace(
                    ResolutionPhase.SLOTTED_PHASE,
                    TraceEventKind.TEMPLATE_MALFORMED,
                    template.command_name,
                    detail=f"parameter '{template.parameter_name}' does not occur in the command",
                )
                continue
            slot_match = slot_span.match(utterance.normalized)
            if slot_match is None:
                continue
            if not slot_match.value:
                self._trace(ResolutionPhase.SLOTTED_PHASE, TraceEventKind.EMPTY_SLOT, template.command_name)
                continue
            self._trace(
                ResolutionPhase.SLOTTED_PHASE,
                TraceEventKind.TEMPLATE_MATCHED,
                template.command_name,
                detail=slot_match.value,
            )
            parameter = self._recover_original_parameter(utterance, slot_match, template)
            return PhaseOutcome(ResolutionPhase.DONE, MatchResult.slotted(template, parameter))
        return PhaseOutcome(ResolutionPhase.DONE, MatchResult.failure(MatchMessage.NO_MATCHING_COMMAND_FOUND))

    def _recover_original_parameter(
        self,
        utterance: Utterance,
        slot_match: SlotMatch,
        template: CommandTemplate,
    ) -> str:
        """
        Returns the slot as spelled in the original utterance. Falls back to the
        normalized slot value if the span cannot be mapped back reliably.
        """
        span: Final = locate_punctuation_insensitive_span(
            utterance.original,
            slot_match.offset,
            slot_match.last_index,
        )
        if span is not None:
            candidate = span.slice(utterance.original)
            if normalize(candidate) == slot_match.value:
                return candidate
        self._trace(
            ResolutionPhase.SLOTTED_PHASE,
            TraceEventKind.ALIGNMENT_FAILED,
            template.command_name,
            detail=slot_match.value,
        )
        return slot_match.value

    def _trace(
        self,
        phase: ResolutionPhase,
        kind: TraceEventKind,
        command_name: Optional[str] = None,
        *,
        detail: str = "",
    ) -> None:
        if self._on_trace is not None:
            self._on_trace(TraceEvent(phase=phase, kind=kind, command_name=command_name, detail=detail))


def resolve(
    user_utterance: str,
    templates: Sequence[CommandTemplate],
    *,
    on_trace: Optional[TraceHook] = None,
) -> MatchResult:
    return CommandResolver(templates, on_trace=on_trace).resolve(user_utterance)

"""Finds the searched sail number in a results table and reads its rank."""

import re
from dataclasses import dataclass, field

from regatta_parser.extraction.formats import FormatProfile, TableFormat
from regatta_parser.extraction.models import Confidence, ExtractionIssue, ParticipantRecord
from regatta_parser.extraction.sail_number import (
    digits_pattern,
    normalize_sail_number,
    sail_number_digits,
    sail_number_pattern,
)
from regatta_parser.logging.logger import Log

_NUMBER_RE = re.compile(r"\b(\d{1,4})\b")
_LEADING_NUMBER_RE = re.compile(r"^\s*(\d{1,3})\b")


@dataclass(frozen=True)
class CandidateNumber:
    value: int
    offset: int


@dataclass
class LocatorResult:
    participant: ParticipantRecord | None = None
    confidence: Confidence = Confidence.LOW
    line_index: int | None = None
    line: str | None = None
    candidates: list[CandidateNumber] = field(default_factory=list)
    issues: list[ExtractionIssue] = field(default_factory=list)
    feedback: str | None = None


def find_sail_number_line(lines: list[str], sail_number: str) -> tuple[int, int] | None:
    """Return ``(line_index, offset)`` of the first line mentioning the sail number.

    A line matches on the full normalized sail number (whitespace tolerant) or
    on its bare digits. The offset is where the identifier starts.
    """
    full_re = sail_number_pattern(sail_number)
    digits_re = digits_pattern(sail_number)
    for index, line in enumerate(lines):
        hits = [
            m.start()
            for m in (
                full_re.search(line) if full_re else None,
                digits_re.search(line) if digits_re else None,
            )
            if m is not None
        ]
        if hits:
            # The digits sit after any nation prefix, so numbers in front of
            # the prefix still count as preceding the identifier.
            return index, max(hits)
    return None


def locate_rank_column(candidates: list[CandidateNumber], profile: FormatProfile) -> int | None:
    """Pick the rank among the numbers printed before the sail number."""
    if not candidates:
        return None
    if profile.kind is TableFormat.BIB_NUMBER and len(candidates) >= 2:
        return candidates[0].value
    if len(candidates) == 1:
        return candidates[0].value
    if profile.rank_column_index < len(candidates):
        return candidates[profile.rank_column_index].value
    return candidates[0].value


class ParticipantLocator:
    """Primary rank lookup for a single sailor."""

    def __init__(self, rank_bound: int = 500) -> None:
        self._rank_bound = rank_bound

    def locate(
        self,
        lines: list[str],
        sail_number: str,
        profile: FormatProfile,
        raw_text: str = "",
        sailor_name: str | None = None,
    ) -> LocatorResult:
        normalized = normalize_sail_number(sail_number)
        result = LocatorResult()

        found = find_sail_number_line(lines, sail_number) if normalized else None
        if found is None:
            result.issues.append(ExtractionIssue.PARTICIPANT_NOT_FOUND)
            result.feedback = self._not_found_feedback(sail_number, raw_text or "\n".join(lines))
            return result

        line_index, offset = found
        line = lines[line_index]
        result.line_index = line_index
        result.line = line
        Log.debug(f"Sail number {normalized} found in line {line_index}: {line[:120]!r}")

        result.candidates = [
            CandidateNumber(value=int(m.group(1)), offset=m.start())
            for m in _NUMBER_RE.finditer(line)
            if m.start() < offset
        ]
        if len(result.candidates) > 1:
            result.issues.append(ExtractionIssue.AMBIGUOUS_COLUMN_LAYOUT)

        rank = locate_rank_column(result.candidates, profile)
        confidence = Confidence.HIGH if len(result.candidates) == 1 else Confidence.MEDIUM
        if rank is not None and rank > self._rank_bound:
            Log.warning(f"Implausible rank {rank} for {normalized}, discarding")
            result.issues.append(ExtractionIssue.IMPLAUSIBLE_RANK)
            rank = None

        if rank is None or rank < 1:
            rank = self._leading_rank(line, offset)
            confidence = Confidence.MEDIUM

        if rank is None:
            result.issues.append(ExtractionIssue.PARTICIPANT_NOT_FOUND)
            result.feedback = f'No plausible rank next to sail number "{sail_number}".'
            return result

        result.participant = ParticipantRecord(
            rank=rank, sail_number=normalized, name=sailor_name or None
        )
        result.confidence = confidence
        return result

    def _leading_rank(self, line: str, offset: int) -> int | None:
        match = _LEADING_NUMBER_RE.match(line)
        if match is None or match.start(1) >= offset:
            return None
        rank = int(match.group(1))
        return rank if 0 < rank <= self._rank_bound else None

    @staticmethod
    def _not_found_feedback(sail_number: str, raw_text: str) -> str:
        feedback = f'Sail number "{sail_number}" not found.'
        digits = sail_number_digits(sail_number)
        if digits and digits in raw_text:
            return f"{feedback} The digits appear in the text, please correct manually."
        return f"{feedback} Please enter the result manually."

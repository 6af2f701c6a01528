"""Second pass over the sheet: the full field roster and its size."""

import re
from collections import Counter
from dataclasses import dataclass, field

from regatta_parser.extraction.formats import FormatProfile, TableFormat
from regatta_parser.extraction.models import ParticipantRecord

_BIB_ROW_RE = re.compile(r"^\s*(\d{1,3})\s+\d+\s+(?:([A-Z]{2,3})\s*)?(\d{4,6})\b")
_PLAIN_ROW_RE = re.compile(r"^\s*(\d{1,3})\s+.*?(?:([A-Z]{2,3})\s*)?(\d{4,6})\b")
_ENTRIES_RE = re.compile(r"(\d+)\s*(?:Entries|Teilnehmer|Meldungen|Boote)", re.IGNORECASE)


@dataclass
class CensusResult:
    participants: list[ParticipantRecord] = field(default_factory=list)
    total_participants: int | None = None


class ParticipantCensus:
    """Builds the rank/sail-number list of every row and infers the field size."""

    def __init__(self, rank_bound: int = 500, default_nation: str = "GER") -> None:
        self._rank_bound = rank_bound
        self._default_nation = default_nation

    def run(self, lines: list[str], profile: FormatProfile, text: str = "") -> CensusResult:
        row_re = _BIB_ROW_RE if profile.kind is TableFormat.BIB_NUMBER else _PLAIN_ROW_RE
        by_sail: dict[str, ParticipantRecord] = {}
        for line in lines:
            match = row_re.match(line)
            if match is None:
                continue
            rank = int(match.group(1))
            if not 0 < rank <= self._rank_bound:
                continue
            sail = (match.group(2) or self._default_nation) + match.group(3)
            by_sail.setdefault(sail, ParticipantRecord(rank=rank, sail_number=sail))

        participants = sorted(by_sail.values(), key=lambda p: p.rank)
        if participants:
            total = self.field_size([p.rank for p in participants])
        else:
            total = self.explicit_entry_count(text or "\n".join(lines))
        return CensusResult(participants=participants, total_participants=total)

    @staticmethod
    def field_size(ranks: list[int]) -> int | None:
        """Largest rank that occurs exactly once, else the largest rank."""
        if not ranks:
            return None
        counts = Counter(ranks)
        unique = [rank for rank, count in counts.items() if count == 1]
        return max(unique) if unique else max(ranks)

    def explicit_entry_count(self, text: str) -> int | None:
        for match in _ENTRIES_RE.finditer(text):
            count = int(match.group(1))
            if 0 < count <= self._rank_bound:
                return count
        return None

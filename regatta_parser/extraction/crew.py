import re
from typing import ClassVar

from regatta_parser.extraction.rules import ExtractionRule, first_match

_NAME = r"[A-ZÄÖÜa-zäöüß]+\s+[A-ZÄÖÜ][A-ZÄÖÜa-zäöüß]+"
_RANK_ROW_RE = re.compile(r"^\s*\d{1,3}\s")


class CrewExtractor:
    """Reads a crew partner's name next to the located results line."""

    RULES: ClassVar[list[ExtractionRule[str]]] = [
        ExtractionRule(
            "helm_slash_crew",
            re.compile(rf"({_NAME})\s*[/|]\s*({_NAME})"),
            lambda m: m.group(2).strip(),
        ),
        ExtractionRule(
            "crew_label",
            re.compile(
                r"(?:Crewmitglied|Vorschoter|Crew|Partner)[:\s]+"
                r"([A-ZÄÖÜa-zäöüß]+\s+[A-ZÄÖÜ][A-ZÄÖÜa-zäöüß]+)",
                re.IGNORECASE,
            ),
            lambda m: m.group(1).strip(),
        ),
    ]

    def extract(self, lines: list[str], line_index: int) -> str | None:
        """Try the matched line, then the following one unless it starts a new row."""
        found = first_match(self.RULES, lines[line_index])
        if found is None and line_index + 1 < len(lines):
            next_line = lines[line_index + 1]
            if not _RANK_ROW_RE.match(next_line):
                found = first_match(self.RULES, next_line)
        return found[1] if found else None

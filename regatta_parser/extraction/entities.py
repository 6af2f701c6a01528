"""Best-effort recovery of regatta name, date, boat class and race count.

Every extractor returns None when nothing plausible is found; absence is
never an error.
"""

import datetime
import re
from typing import ClassVar

from regatta_parser.extraction.boat_classes import find_boat_class
from regatta_parser.extraction.rules import ExtractionRule, first_match
from regatta_parser.logging.logger import Log

_WORD = r"[A-Za-zÄÖÜäöüß]+"
_AWARD = r"(?:Preis|Pokal|Cup|Trophy|Regatta|Festival|Meisterschaft)(?![A-Za-zÄÖÜäöüß])"
_PAGE_MARKER_RE = re.compile(r"^---.*---$|\bSeite\s+\d+|\bPage\s+\d+", re.IGNORECASE)

MONTHS: dict[str, int] = {
    "JAN": 1, "JANUAR": 1, "JANUARY": 1,
    "FEB": 2, "FEBRUAR": 2, "FEBRUARY": 2,
    "MÄR": 3, "MAR": 3, "MÄRZ": 3, "MAERZ": 3, "MARCH": 3,
    "APR": 4, "APRIL": 4,
    "MAI": 5, "MAY": 5,
    "JUN": 6, "JUNI": 6, "JUNE": 6,
    "JUL": 7, "JULI": 7, "JULY": 7,
    "AUG": 8, "AUGUST": 8,
    "SEP": 9, "SEPT": 9, "SEPTEMBER": 9,
    "OKT": 10, "OCT": 10, "OKTOBER": 10, "OCTOBER": 10,
    "NOV": 11, "NOVEMBER": 11,
    "DEZ": 12, "DEC": 12, "DEZEMBER": 12, "DECEMBER": 12,
}
# Longest first so "MÄRZ" wins over "MÄR".
_MONTH_ALTERNATION = "|".join(sorted(MONTHS, key=len, reverse=True))


def _iso_date(year: int, month: int, day: int) -> str | None:
    try:
        return datetime.date(year, month, day).isoformat()
    except ValueError:
        return None


def _expand_year(raw: str) -> int:
    return int(raw) + 2000 if len(raw) == 2 else int(raw)


def _award_name(match: re.Match[str]) -> str | None:
    name = match.group(1).strip(" -\t")
    return name if 5 < len(name) < 60 else None


def _textual_date(match: re.Match[str]) -> str | None:
    day, month_name, year = match.groups()
    return _iso_date(int(year), MONTHS[month_name.upper()], int(day))


def _numeric_date(match: re.Match[str]) -> str | None:
    day, month, year = match.groups()
    return _iso_date(_expand_year(year), int(month), int(day))


def _race_index(match: re.Match[str]) -> int | None:
    index = int(match.group(1))
    return index if 0 < index < 20 else None


class EntityExtractor:
    """Independent extractors for the regatta-level fields of a results sheet."""

    NAME_RULES: ClassVar[list[ExtractionRule[str]]] = [
        ExtractionRule(
            "award_with_year",
            re.compile(
                rf"({_WORD}(?:[ \t\-]+{_WORD})*[ \t\-]*{_AWARD}(?:[ \t\-]*\d{{4}})?)",
                re.IGNORECASE,
            ),
            _award_name,
        ),
        ExtractionRule(
            "award_token",
            re.compile(rf"({_WORD}{_AWARD})", re.IGNORECASE),
            _award_name,
        ),
    ]

    DATE_RULES: ClassVar[list[ExtractionRule[str]]] = [
        ExtractionRule(
            "textual_month",
            re.compile(
                rf"(?<!\d)(\d{{1,2}})[.\s\-/]*({_MONTH_ALTERNATION})\.?"
                rf"(?![A-Za-zÄÖÜäöü])[.\s\-/]*(\d{{4}})(?!\d)",
                re.IGNORECASE,
            ),
            _textual_date,
        ),
        ExtractionRule(
            "numeric",
            re.compile(r"(?<!\d)(\d{1,2})[.\-/](\d{1,2})[.\-/](\d{4}|\d{2})(?!\d)"),
            _numeric_date,
        ),
    ]

    RACE_RULES: ClassVar[list[ExtractionRule[int]]] = [
        ExtractionRule("race_column", re.compile(r"\bR(\d+)\b", re.IGNORECASE), _race_index),
        ExtractionRule(
            "wettfahrt_column", re.compile(r"\bWF\s*(\d+)\b", re.IGNORECASE), _race_index
        ),
    ]

    TITLE_SCAN_LINES: ClassVar[int] = 10

    def extract_name(self, text: str, lines: list[str]) -> str | None:
        found = first_match(self.NAME_RULES, text)
        if found is not None:
            rule_name, name = found
            Log.debug(f"Regatta name via {rule_name}: {name!r}")
            return name
        return self._title_line(lines)

    def extract_date(self, text: str) -> str | None:
        found = first_match(self.DATE_RULES, text)
        if found is None:
            return None
        rule_name, date = found
        Log.debug(f"Regatta date via {rule_name}: {date}")
        return date

    def extract_race_count(self, text: str) -> int | None:
        indices = {index for rule in self.RACE_RULES for index in rule.apply_all(text)}
        return max(indices) if indices else None

    def extract_boat_class(self, text: str) -> str | None:
        return find_boat_class(text)

    def _title_line(self, lines: list[str]) -> str | None:
        for line in lines[: self.TITLE_SCAN_LINES]:
            clean = line.strip()
            if not 8 < len(clean) < 50:
                continue
            if "http" in clean or _PAGE_MARKER_RE.search(clean):
                continue
            if clean.isdigit() or re.match(r"^Nr\.?\s", clean, re.IGNORECASE):
                continue
            return clean
        return None

"""Table layout classification for results sheets."""

import re
from dataclasses import dataclass
from enum import Enum

_VENDOR_RE = re.compile(r"manage2sail|Final Overall Results|Discard rule", re.IGNORECASE)
_BIB_LABEL_RE = re.compile(r"bug\.?\s*nr|startnr|start\.?\s*nr", re.IGNORECASE)
_RANK_LABEL_RE = re.compile(r"\bRk\.|\bRang\b|\bPlatz\b|\bPos\b", re.IGNORECASE)
_HEADER_HINTS = ("nr.", "rang", "platz", "rk.")
_COLUMN_SPLIT_RE = re.compile(r"\s{2,}|\t")


class TableFormat(str, Enum):
    GENERIC = "generic"
    BIB_NUMBER = "bib_number"
    VENDOR = "vendor"


@dataclass(frozen=True)
class FormatProfile:
    """Layout facts that drive rank-column selection and row parsing.

    Only ``kind is TableFormat.BIB_NUMBER`` and ``rank_column_index`` change
    how ranks and rows are read. ``is_vendor_export``, ``has_rank_column`` and
    the ``VENDOR`` tag are diagnostic and only logged.
    """

    kind: TableFormat = TableFormat.GENERIC
    is_vendor_export: bool = False
    has_bib_number: bool = False
    has_rank_column: bool = False
    rank_column_index: int = 0


def detect_format(lines: list[str], scan_lines: int = 20) -> FormatProfile:
    """Classify the table layout of a results sheet.

    Header labels are looked up in the first ``scan_lines`` lines. The vendor
    watermark is looked up everywhere, since exports print it in the footer.
    """
    head = lines[:scan_lines]
    head_text = "\n".join(head)

    is_vendor = any(_VENDOR_RE.search(line) for line in lines)
    has_bib = bool(_BIB_LABEL_RE.search(head_text))
    has_rank = bool(_RANK_LABEL_RE.search(head_text))

    if has_bib:
        kind = TableFormat.BIB_NUMBER
    elif is_vendor:
        kind = TableFormat.VENDOR
    else:
        kind = TableFormat.GENERIC

    return FormatProfile(
        kind=kind,
        is_vendor_export=is_vendor,
        has_bib_number=has_bib,
        has_rank_column=has_rank,
        rank_column_index=_rank_column_index(head),
    )


def _rank_column_index(head: list[str]) -> int:
    # Only the first header-looking line counts.
    for line in head:
        lowered = line.lower()
        if not any(hint in lowered for hint in _HEADER_HINTS):
            continue
        for index, column in enumerate(_COLUMN_SPLIT_RE.split(line)):
            col = column.strip().lower()
            if any(skip in col for skip in ("bug", "start", "segel")):
                continue
            if col in ("nr.", "nr", "rk.") or "rang" in col or "platz" in col:
                return index
        return 0
    return 0

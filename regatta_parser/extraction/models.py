import base64
import binascii
import re
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from enum import Enum

from regatta_parser.processor.exceptions import DocumentUnreadableError

PAGE_END_MARKER = "--- Page {number} End ---"
_PAGE_END_RE = re.compile(r"--- Page \d+ End ---")


class AcquisitionMethod(str, Enum):
    EMBEDDED_TEXT = "embedded_text"
    OCR = "ocr"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ExtractionIssue(str, Enum):
    """Recoverable conditions noted while extracting a result."""

    DOCUMENT_UNREADABLE = "document_unreadable"
    NO_TEXT_AVAILABLE = "no_text_available"
    PARTICIPANT_NOT_FOUND = "participant_not_found"
    AMBIGUOUS_COLUMN_LAYOUT = "ambiguous_column_layout"
    IMPLAUSIBLE_RANK = "implausible_rank"
    RANK_EXCEEDS_FIELD_SIZE = "rank_exceeds_field_size"
    UNEXPECTED_ERROR = "unexpected_error"


@dataclass(frozen=True)
class RawDocument:
    """An uploaded PDF as received from the client (base64 payload)."""

    payload: str
    page_count: int = 0

    @property
    def pdf_bytes(self) -> bytes:
        """Decode the payload.

        Raises:
            DocumentUnreadableError: if the payload is empty or not valid base64.
        """
        if not self.payload:
            raise DocumentUnreadableError("Document payload is empty")
        cleaned = "".join(self.payload.split())
        if cleaned.startswith("data:") and "," in cleaned:
            cleaned = cleaned.split(",", 1)[1]
        try:
            return base64.b64decode(cleaned, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise DocumentUnreadableError(f"Document payload is not valid base64: {exc}") from exc


@dataclass(frozen=True)
class ExtractedPage:
    """Ordered text lines of one page, tagged with how they were acquired."""

    number: int
    lines: list[str]
    method: AcquisitionMethod


def render_pages(pages: list[ExtractedPage]) -> str:
    """Join pages into one text, closing each page with a page-end marker."""
    chunks: list[str] = []
    for page in pages:
        body = "\n".join(page.lines)
        chunks.append(f"{body}\n{PAGE_END_MARKER.format(number=page.number)}\n")
    return "".join(chunks)


def content_length(pages: list[ExtractedPage] | None) -> int:
    """Number of text characters on the pages, page-end markers not counted."""
    if not pages:
        return 0
    return len("\n".join(line for page in pages for line in page.lines).strip())


def is_blank_text(text: str | None) -> bool:
    """True when ``text`` holds nothing but whitespace and page-end markers."""
    if not text:
        return True
    return all(
        _PAGE_END_RE.fullmatch(line.strip()) for line in text.splitlines() if line.strip()
    )


@dataclass(frozen=True)
class ParticipantRecord:
    rank: int
    sail_number: str
    name: str | None = None


@dataclass
class RegattaMetadata:
    name: str | None = None
    date: str | None = None
    boat_class: str | None = None
    race_count: int | None = None
    total_participants: int | None = None


@dataclass(frozen=True)
class EnrichmentContext:
    """Caller-supplied details copied into the output, never used for matching."""

    sailor_name: str | None = None
    boat_class: str | None = None


@dataclass
class ExtractionResult:
    """Outcome of one extraction call, consumed by the form-prefill UI."""

    success: bool = False
    metadata: RegattaMetadata = field(default_factory=RegattaMetadata)
    participant: ParticipantRecord | None = None
    crew: str | None = None
    all_results: list[ParticipantRecord] = field(default_factory=list)
    confidence: Confidence = Confidence.LOW
    feedback: str | None = None
    issues: list[ExtractionIssue] = field(default_factory=list)
    acquisition_method: AcquisitionMethod | None = None

    def note(self, issue: ExtractionIssue) -> None:
        if issue not in self.issues:
            self.issues.append(issue)

    def to_dict(self) -> dict[str, object]:
        data = asdict(self)
        data["confidence"] = self.confidence.value
        data["issues"] = [issue.value for issue in self.issues]
        data["acquisition_method"] = (
            self.acquisition_method.value if self.acquisition_method else None
        )
        return data


@dataclass(frozen=True)
class ProgressUpdate:
    status: str


ProgressCallback = Callable[[ProgressUpdate], None]

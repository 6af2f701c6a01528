"""Turns the text of a results sheet into one ExtractionResult."""

import re

from regatta_parser.config.settings import Settings
from regatta_parser.extraction.boat_classes import crew_size_for
from regatta_parser.extraction.census import ParticipantCensus
from regatta_parser.extraction.crew import CrewExtractor
from regatta_parser.extraction.entities import EntityExtractor
from regatta_parser.extraction.formats import detect_format
from regatta_parser.extraction.locator import ParticipantLocator
from regatta_parser.extraction.models import (
    AcquisitionMethod,
    EnrichmentContext,
    ExtractionIssue,
    ExtractionResult,
    RegattaMetadata,
    is_blank_text,
)
from regatta_parser.extraction.scorer import ConfidenceScorer
from regatta_parser.logging.logger import Log

_LINE_SPLIT_RE = re.compile(r"[\n\r]+")


class RegattaResultParser:
    """Runs format detection, entity extraction, rank lookup and census."""

    def __init__(
        self,
        *,
        rank_bound: int = 500,
        default_nation: str = "GER",
        format_scan_lines: int = 20,
    ) -> None:
        self._format_scan_lines = format_scan_lines
        self._entities = EntityExtractor()
        self._locator = ParticipantLocator(rank_bound=rank_bound)
        self._crew = CrewExtractor()
        self._census = ParticipantCensus(rank_bound=rank_bound, default_nation=default_nation)
        self._scorer = ConfidenceScorer()

    @classmethod
    def from_settings(cls, settings: Settings) -> "RegattaResultParser":
        return cls(
            rank_bound=settings.rank_sanity_bound,
            default_nation=settings.default_nation,
            format_scan_lines=settings.format_scan_lines,
        )

    def parse(
        self,
        text: str | None,
        sail_number: str,
        enrichment: EnrichmentContext | None = None,
        acquisition_method: AcquisitionMethod | None = None,
    ) -> ExtractionResult:
        enrichment = enrichment or EnrichmentContext()
        result = ExtractionResult(acquisition_method=acquisition_method)
        result.metadata.boat_class = enrichment.boat_class

        if is_blank_text(text):
            return self.degraded(
                "No text could be read from the document.",
                ExtractionIssue.NO_TEXT_AVAILABLE,
                result,
            )

        lines = [line for line in _LINE_SPLIT_RE.split(text) if line.strip()]
        profile = detect_format(lines, self._format_scan_lines)
        Log.info(
            f"Format: {profile.kind.value} (vendor={profile.is_vendor_export}, "
            f"bib={profile.has_bib_number}, rank_column={profile.has_rank_column})"
        )

        detected_class = self._entities.extract_boat_class(text)
        result.metadata = RegattaMetadata(
            name=self._entities.extract_name(text, lines),
            date=self._entities.extract_date(text),
            boat_class=detected_class or enrichment.boat_class,
            race_count=self._entities.extract_race_count(text),
        )

        if not sail_number.strip():
            result.feedback = "No sail number given."
            result.note(ExtractionIssue.PARTICIPANT_NOT_FOUND)
        else:
            located = self._locator.locate(
                lines, sail_number, profile, raw_text=text, sailor_name=enrichment.sailor_name
            )
            result.participant = located.participant
            result.confidence = located.confidence
            result.feedback = located.feedback
            for issue in located.issues:
                result.note(issue)
            if (
                located.participant is not None
                and located.line_index is not None
                and crew_size_for(enrichment.boat_class or detected_class) > 1
            ):
                result.crew = self._crew.extract(lines, located.line_index)

        census = self._census.run(lines, profile, text)
        result.all_results = census.participants
        result.metadata.total_participants = census.total_participants

        self._scorer.score(result, detected_class)
        Log.info(
            "Parsed results sheet",
            regatta=result.metadata.name,
            rank=result.participant.rank if result.participant else None,
            total=result.metadata.total_participants,
            confidence=result.confidence.value,
        )
        return result

    def degraded(
        self,
        feedback: str,
        issue: ExtractionIssue,
        partial: ExtractionResult | None = None,
    ) -> ExtractionResult:
        """An unsuccessful result that keeps whatever was already recovered."""
        result = partial or ExtractionResult()
        result.participant = None
        result.feedback = feedback
        result.note(issue)
        return self._scorer.score(result)

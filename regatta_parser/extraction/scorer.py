import datetime

from regatta_parser.extraction.models import Confidence, ExtractionIssue, ExtractionResult
from regatta_parser.logging.logger import Log


class ConfidenceScorer:
    """Final plausibility pass over an assembled result."""

    MIN_NAME_LENGTH = 3

    def score(
        self,
        result: ExtractionResult,
        detected_boat_class: str | None = None,
        today: datetime.date | None = None,
    ) -> ExtractionResult:
        """Cross-check rank against field size and fill placeholders.

        Mutates and returns ``result``. The regatta name is never left blank:
        it falls back to ``Regatta (<class>)`` or ``Regatta <dd.mm.yyyy>``.
        """
        participant = result.participant
        total = result.metadata.total_participants
        if participant is not None and total:
            if participant.rank > total:
                result.confidence = Confidence.LOW
                result.feedback = (
                    f"Please check: rank {participant.rank} "
                    f"with {total} participants?"
                )
                result.note(ExtractionIssue.RANK_EXCEEDS_FIELD_SIZE)
                Log.warning(f"Rank {participant.rank} exceeds field size {total}")
            else:
                result.confidence = Confidence.HIGH

        name = (result.metadata.name or "").strip()
        if len(name) < self.MIN_NAME_LENGTH:
            result.metadata.name = self.placeholder_name(detected_boat_class, today)

        result.success = participant is not None
        if not result.success:
            result.confidence = Confidence.LOW
        return result

    @staticmethod
    def placeholder_name(
        boat_class: str | None = None,
        today: datetime.date | None = None,
    ) -> str:
        if boat_class:
            return f"Regatta ({boat_class})"
        day = today or datetime.date.today()
        return f"Regatta {day:%d.%m.%Y}"

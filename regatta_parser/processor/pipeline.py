from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal

from regatta_parser.extraction.models import (
    AcquisitionMethod,
    EnrichmentContext,
    ExtractedPage,
    ExtractionResult,
    ProgressCallback,
    RawDocument,
)


@dataclass(slots=True)
class PipelineContext:
    document: RawDocument
    sail_number: str = ""
    enrichment: EnrichmentContext = field(default_factory=EnrichmentContext)
    on_progress: ProgressCallback | None = None
    raw_bytes: bytes = b""
    pages: list[ExtractedPage] | None = None
    acquisition_method: AcquisitionMethod | None = None
    text: str = ""
    result: ExtractionResult | None = None
    invoice_amount: Decimal | None = None
    ocr_attempted: bool = False
    error: Exception | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

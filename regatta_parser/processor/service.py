"""Entry points used by the form-prefill UI."""

from decimal import Decimal

from regatta_parser.config.settings import Settings
from regatta_parser.extraction.models import (
    EnrichmentContext,
    ExtractionIssue,
    ExtractionResult,
    ProgressCallback,
    RawDocument,
)
from regatta_parser.extraction.parser import RegattaResultParser
from regatta_parser.logging.logger import Log
from regatta_parser.processor.pipeline import PipelineContext
from regatta_parser.processor.processor import (
    Processor,
    build_invoice_processor,
    build_ocr_fallback,
    build_result_processor,
)


class ResultExtractionService:
    """Extracts regatta results and invoice totals from uploaded PDFs.

    Calls are independent of each other; the service holds no per-call state.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        result_processor: Processor | None = None,
        invoice_processor: Processor | None = None,
        parser: RegattaResultParser | None = None,
    ) -> None:
        self._parser = parser or RegattaResultParser.from_settings(settings)
        if result_processor is None or invoice_processor is None:
            ocr = build_ocr_fallback(settings)
            result_processor = result_processor or build_result_processor(
                settings, ocr=ocr, parser=self._parser
            )
            invoice_processor = invoice_processor or build_invoice_processor(settings, ocr=ocr)
        self._result_processor = result_processor
        self._invoice_processor = invoice_processor

    async def extract_result(
        self,
        payload: str,
        sail_number: str,
        enrichment: EnrichmentContext | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> ExtractionResult:
        """Find the sailor's result in a base64-encoded results PDF."""
        Log.info(f"Extracting result for sail number {sail_number!r}")
        context = PipelineContext(
            document=RawDocument(payload=payload),
            sail_number=sail_number,
            enrichment=enrichment or EnrichmentContext(),
            on_progress=on_progress,
        )
        context = await self._result_processor.process(context)
        if context.result is None:
            return self._parser.degraded(
                "No result could be extracted.", ExtractionIssue.UNEXPECTED_ERROR
            )
        return context.result

    async def extract_invoice_amount(
        self,
        payload: str,
        on_progress: ProgressCallback | None = None,
    ) -> Decimal | None:
        """Return the invoice total of a base64-encoded invoice PDF, if found."""
        context = PipelineContext(document=RawDocument(payload=payload), on_progress=on_progress)
        context = await self._invoice_processor.process(context)
        return context.invoice_amount

    def parse_text(
        self,
        text: str,
        sail_number: str,
        enrichment: EnrichmentContext | None = None,
    ) -> ExtractionResult:
        """Parse text that was already extracted elsewhere."""
        return self._parser.parse(text, sail_number, enrichment)

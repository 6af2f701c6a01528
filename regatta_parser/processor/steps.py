from dataclasses import replace

from regatta_parser.extraction.models import (
    AcquisitionMethod,
    ExtractionIssue,
    content_length,
    render_pages,
)
from regatta_parser.extraction.parser import RegattaResultParser
from regatta_parser.invoice.amount_extractor import InvoiceAmountExtractor
from regatta_parser.logging.logger import Log
from regatta_parser.ocr.fallback import OcrFallback
from regatta_parser.pdf.base import BasePdfExtractor
from regatta_parser.pdf.exceptions import PdfExtractionError
from regatta_parser.processor.exceptions import DocumentUnreadableError
from regatta_parser.processor.pipeline import PipelineContext, PipelineStep


class DecodeDocumentStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_bytes = context.document.pdf_bytes
        Log.info(f"Decoded {len(context.raw_bytes)} bytes of PDF payload")
        return context


class ExtractTextStep(PipelineStep):
    """Reads the embedded text layer; a parser failure leaves the text empty."""

    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        try:
            pages = self._pdf_extractor.extract(context.raw_bytes)
        except PdfExtractionError as exc:
            Log.warning(f"Text layer unavailable, OCR will be tried: {exc}")
            context.pages = None
            context.text = ""
            return context

        context.pages = pages
        context.acquisition_method = AcquisitionMethod.EMBEDDED_TEXT
        context.text = render_pages(pages)
        context.document = replace(context.document, page_count=len(pages))
        Log.info(f"Extracted {len(context.text)} chars from {len(pages)} pages")
        return context


class OcrFallbackStep(PipelineStep):
    """Runs OCR when the text layer is missing or shorter than ``min_text_length``."""

    def __init__(self, ocr: OcrFallback, min_text_length: int) -> None:
        self._ocr = ocr
        self._min_text_length = min_text_length

    def run(self, context: PipelineContext) -> PipelineContext:
        length = content_length(context.pages)
        if length >= self._min_text_length:
            return context
        Log.info(
            f"Only {length} chars of embedded text "
            f"(< {self._min_text_length}), starting OCR"
        )
        context.ocr_attempted = True
        pages = self._ocr.run(context.raw_bytes, context.on_progress)
        if pages:
            context.pages = pages
            context.acquisition_method = AcquisitionMethod.OCR
            context.text = render_pages(pages)
            if not context.document.page_count:
                context.document = replace(context.document, page_count=len(pages))
        return context


class ParseResultStep(PipelineStep):
    def __init__(self, parser: RegattaResultParser) -> None:
        self._parser = parser

    def run(self, context: PipelineContext) -> PipelineContext:
        context.result = self._parser.parse(
            context.text,
            context.sail_number,
            context.enrichment,
            context.acquisition_method,
        )
        return context


class OcrRetryStep(PipelineStep):
    """Second chance: OCR a text-layer document whose parse found no participant."""

    def __init__(self, ocr: OcrFallback, parser: RegattaResultParser) -> None:
        self._ocr = ocr
        self._parser = parser

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.result is None or context.result.participant is not None:
            return context
        if context.ocr_attempted:
            return context
        if context.acquisition_method is not AcquisitionMethod.EMBEDDED_TEXT:
            return context

        Log.info("No participant in the text layer, retrying with OCR")
        context.ocr_attempted = True
        pages = self._ocr.run(context.raw_bytes, context.on_progress)
        if not pages:
            return context

        retried = self._parser.parse(
            render_pages(pages),
            context.sail_number,
            context.enrichment,
            AcquisitionMethod.OCR,
        )
        if retried.participant is not None:
            Log.info(f"OCR retry found rank {retried.participant.rank}")
            context.pages = pages
            context.acquisition_method = AcquisitionMethod.OCR
            context.text = render_pages(pages)
            context.result = retried
        return context


class InvoiceAmountStep(PipelineStep):
    def __init__(self, extractor: InvoiceAmountExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.invoice_amount = self._extractor.extract(context.text)
        return context


class FailedExtractionStep(PipelineStep):
    """Turns a step failure into an unsuccessful result with partial metadata."""

    def __init__(self, parser: RegattaResultParser) -> None:
        self._parser = parser

    def run(self, context: PipelineContext) -> PipelineContext:
        if isinstance(context.error, DocumentUnreadableError):
            issue = ExtractionIssue.DOCUMENT_UNREADABLE
            feedback = "The document could not be read. Please enter the result manually."
        else:
            issue = ExtractionIssue.UNEXPECTED_ERROR
            feedback = f"Error while reading the results: {context.error_message}"
        context.result = self._parser.degraded(feedback, issue, context.result)
        context.result.acquisition_method = context.acquisition_method
        Log.error(f"Extraction failed ({issue.value}): {context.error_message}")
        return context


class FailedInvoiceStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.invoice_amount = None
        Log.error(f"Invoice extraction failed: {context.error_message}")
        return context

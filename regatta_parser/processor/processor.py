import asyncio

from regatta_parser.config.settings import Settings
from regatta_parser.extraction.parser import RegattaResultParser
from regatta_parser.invoice.amount_extractor import InvoiceAmountExtractor
from regatta_parser.logging.logger import Log
from regatta_parser.ocr.fallback import OcrFallback
from regatta_parser.ocr.rasterizer import PageRasterizer
from regatta_parser.ocr.tesseract_adapter import TesseractOcrEngine
from regatta_parser.pdf.factory import PdfExtractorFactory
from regatta_parser.processor.pipeline import PipelineContext, PipelineStep
from regatta_parser.processor.steps import (
    DecodeDocumentStep,
    ExtractTextStep,
    FailedExtractionStep,
    FailedInvoiceStep,
    InvoiceAmountStep,
    OcrFallbackStep,
    OcrRetryStep,
    ParseResultStep,
)


class Processor:
    """Runs pipeline steps strictly in order.

    Each step is awaited in a worker thread so PDF parsing, rendering and OCR
    do not block the event loop; only one step of a call runs at a time. When
    a step raises, ``failed_step`` turns the context into a degraded outcome
    and the exception does not reach the caller.
    """

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = steps
        self._failed_step = failed_step

    async def process(self, context: PipelineContext) -> PipelineContext:
        for step in self._steps:
            try:
                context = await asyncio.to_thread(step.run, context)
            except Exception as exc:
                Log.exception(f"Pipeline step failed: {exc}", step=type(step).__name__)
                context.error = exc
                context.error_message = str(exc)
                return self._failed_step.run(context)
        return context


def build_ocr_fallback(settings: Settings) -> OcrFallback:
    engine = TesseractOcrEngine(
        languages=settings.ocr_languages,
        tesseract_cmd=settings.tesseract_cmd,
    )
    return OcrFallback(engine=engine, rasterizer=PageRasterizer(scale=settings.ocr_render_scale))


def build_result_processor(
    settings: Settings,
    ocr: OcrFallback | None = None,
    parser: RegattaResultParser | None = None,
) -> Processor:
    """Build the results-sheet Processor with all required adapters."""
    ocr = ocr or build_ocr_fallback(settings)
    parser = parser or RegattaResultParser.from_settings(settings)
    steps: list[PipelineStep] = [
        DecodeDocumentStep(),
        ExtractTextStep(PdfExtractorFactory.create(settings)),
        OcrFallbackStep(ocr, settings.min_result_text_length),
        ParseResultStep(parser),
        OcrRetryStep(ocr, parser),
    ]
    return Processor(steps=steps, failed_step=FailedExtractionStep(parser))


def build_invoice_processor(settings: Settings, ocr: OcrFallback | None = None) -> Processor:
    """Build the invoice Processor; it shares text acquisition and OCR."""
    ocr = ocr or build_ocr_fallback(settings)
    steps: list[PipelineStep] = [
        DecodeDocumentStep(),
        ExtractTextStep(PdfExtractorFactory.create(settings)),
        OcrFallbackStep(ocr, settings.min_invoice_text_length),
        InvoiceAmountStep(InvoiceAmountExtractor.from_settings(settings)),
    ]
    return Processor(steps=steps, failed_step=FailedInvoiceStep())

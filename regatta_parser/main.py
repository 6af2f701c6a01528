import argparse
import asyncio
import base64
import json
import sys
from pathlib import Path

from regatta_parser.config.settings import Settings
from regatta_parser.extraction.models import EnrichmentContext, ProgressUpdate
from regatta_parser.logging.logger import Log
from regatta_parser.processor.service import ResultExtractionService


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="regatta-parser",
        description="Extract regatta results or invoice totals from PDF files.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    result = commands.add_parser("result", help="Find a sailor's rank in a results PDF")
    result.add_argument("pdf", type=Path)
    result.add_argument("--sail-number", required=True)
    result.add_argument("--sailor-name")
    result.add_argument("--boat-class")

    invoice = commands.add_parser("invoice", help="Read the total of an invoice PDF")
    invoice.add_argument("pdf", type=Path)
    return parser


def _print_progress(update: ProgressUpdate) -> None:
    Log.info(update.status)


async def _run(args: argparse.Namespace, service: ResultExtractionService) -> dict[str, object]:
    payload = base64.b64encode(args.pdf.read_bytes()).decode("ascii")
    if args.command == "invoice":
        amount = await service.extract_invoice_amount(payload, on_progress=_print_progress)
        return {"amount": str(amount) if amount is not None else None}

    enrichment = EnrichmentContext(sailor_name=args.sailor_name, boat_class=args.boat_class)
    result = await service.extract_result(
        payload, args.sail_number, enrichment, on_progress=_print_progress
    )
    return result.to_dict()


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> run one extraction."""
    args = _build_arg_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    if not args.pdf.is_file():
        Log.error(f"File not found: {args.pdf}")
        return 2

    service = ResultExtractionService(settings)
    output = asyncio.run(_run(args, service))
    json.dump(output, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

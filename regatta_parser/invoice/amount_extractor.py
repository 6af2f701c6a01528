"""Recovers the total of an entry-fee invoice.

The largest plausible currency figure is taken as the total. On invoices
with several line items this can pick an item instead.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import ClassVar

from regatta_parser.config.settings import Settings
from regatta_parser.extraction.rules import ExtractionRule
from regatta_parser.logging.logger import Log

_AMOUNT = r"(?<![\d.,])(\d{1,3}[.,]\d{2})(?![\d])"


def _to_decimal(match: re.Match[str]) -> Decimal | None:
    try:
        return Decimal(match.group(1).replace(",", "."))
    except InvalidOperation:
        return None


class InvoiceAmountExtractor:
    """Scans invoice text for currency amounts and returns the largest."""

    RULES: ClassVar[list[ExtractionRule[Decimal]]] = [
        ExtractionRule("amount_before_symbol", re.compile(rf"{_AMOUNT}\s*€"), _to_decimal),
        ExtractionRule("symbol_before_amount", re.compile(rf"€\s*{_AMOUNT}"), _to_decimal),
        ExtractionRule("eur_prefix", re.compile(rf"EUR\s*{_AMOUNT}", re.IGNORECASE), _to_decimal),
        ExtractionRule(
            "betrag_label", re.compile(rf"betrag[:\s]*{_AMOUNT}", re.IGNORECASE), _to_decimal
        ),
        ExtractionRule(
            "summe_label", re.compile(rf"summe[:\s]*{_AMOUNT}", re.IGNORECASE), _to_decimal
        ),
        ExtractionRule(
            "gesamt_label", re.compile(rf"gesamt[:\s]*{_AMOUNT}", re.IGNORECASE), _to_decimal
        ),
    ]

    def __init__(
        self,
        min_amount: Decimal = Decimal("5"),
        max_amount: Decimal = Decimal("500"),
    ) -> None:
        self._min_amount = min_amount
        self._max_amount = max_amount

    @classmethod
    def from_settings(cls, settings: Settings) -> "InvoiceAmountExtractor":
        return cls(
            min_amount=Decimal(str(settings.invoice_min_amount)),
            max_amount=Decimal(str(settings.invoice_max_amount)),
        )

    def candidates(self, text: str) -> list[Decimal]:
        return [
            amount
            for rule in self.RULES
            for amount in rule.apply_all(text)
            if self._min_amount < amount < self._max_amount
        ]

    def extract(self, text: str | None) -> Decimal | None:
        if not text:
            return None
        amounts = self.candidates(text)
        if not amounts:
            Log.info("No invoice amount found")
            return None
        total = max(amounts)
        Log.info(f"Invoice amount {total} chosen from {len(amounts)} candidates")
        return total

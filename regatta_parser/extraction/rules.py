"""Ordered, named pattern rules evaluated in priority order."""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ExtractionRule(Generic[T]):
    """A named regex plus a converter from its match to a value.

    The converter may return None to reject a match; the rule then tries the
    next occurrence of its pattern.
    """

    name: str
    pattern: re.Pattern[str]
    convert: Callable[[re.Match[str]], T | None]

    def apply(self, text: str) -> T | None:
        for match in self.pattern.finditer(text):
            value = self.convert(match)
            if value is not None:
                return value
        return None

    def apply_all(self, text: str) -> list[T]:
        values: list[T] = []
        for match in self.pattern.finditer(text):
            value = self.convert(match)
            if value is not None:
                values.append(value)
        return values


def first_match(rules: Iterable[ExtractionRule[T]], text: str) -> tuple[str, T] | None:
    """Return ``(rule_name, value)`` for the first rule that yields a value."""
    for rule in rules:
        value = rule.apply(text)
        if value is not None:
            return rule.name, value
    return None

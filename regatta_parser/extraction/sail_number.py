import re

_WHITESPACE_RE = re.compile(r"\s+")
_NON_DIGIT_RE = re.compile(r"\D")


def normalize_sail_number(sail_number: str) -> str:
    """Uppercase and strip all whitespace: ``"ger 12 345"`` -> ``"GER12345"``."""
    return _WHITESPACE_RE.sub("", sail_number).upper()


def sail_number_digits(sail_number: str) -> str:
    """Digits-only projection, matched against tables that print bare numbers."""
    return _NON_DIGIT_RE.sub("", sail_number)


def sail_number_pattern(sail_number: str) -> re.Pattern[str] | None:
    """Case-insensitive pattern for the normalized sail number.

    Whitespace is tolerated between characters so ``GER12345`` also finds
    ``GER 12345`` in a results line.
    """
    normalized = normalize_sail_number(sail_number)
    if not normalized:
        return None
    body = r"\s*".join(re.escape(ch) for ch in normalized)
    return re.compile(body, re.IGNORECASE)


def digits_pattern(sail_number: str) -> re.Pattern[str] | None:
    """Pattern for the digits-only projection, not embedded in a longer number."""
    digits = sail_number_digits(sail_number)
    if not digits:
        return None
    return re.compile(rf"(?<!\d){digits}(?!\d)")

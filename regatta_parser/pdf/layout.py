"""Reading-order reconstruction from positioned text fragments."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextFragment:
    """A run of text placed on the page.

    ``y`` is measured from the bottom of the page (PDF user space), so larger
    values are higher up.
    """

    x: float
    y: float
    text: str


def assemble_lines(fragments: list[TextFragment], line_gap: float = 5.0) -> list[str]:
    """Rebuild text lines from fragments.

    Fragments are ordered top to bottom, then left to right. A vertical jump
    larger than ``line_gap`` from the previous fragment starts a new line;
    fragments within the gap are joined with a single space.
    """
    ordered = sorted(
        (f for f in fragments if f.text.strip()),
        key=lambda f: (-f.y, f.x),
    )
    rows: list[list[TextFragment]] = []
    last_y: float | None = None
    for fragment in ordered:
        if last_y is None or abs(fragment.y - last_y) > line_gap:
            rows.append([fragment])
        else:
            rows[-1].append(fragment)
        last_y = fragment.y

    return [
        " ".join(f.text.strip() for f in sorted(row, key=lambda f: f.x))
        for row in rows
    ]

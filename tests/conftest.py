import base64
import io

import pytest
from reportlab.lib.pagesizes import A4, letter
from reportlab.pdfgen import canvas

RESULT_HEADER = "Rk.  Sail Number  Name  Club  R1  R2  R3  Total"
RESULT_ROWS = [
    "1 GER 13579 Lena Fischer SVN 1 2 1 4",
    "2 GER 24680 Paul Wagner YCM 2 1 3 6",
    "3 GER 11223 Mia Becker SCA 3 4 2 9",
    "4 GER 12345 Max Mustermann SVN 4 3 5 12",
    "5 GER 33445 Jonas Klein WSV 6 5 4 15",
    "6 GER 55667 Emma Wolf SCA 5 6 7 18",
    "7 GER 77889 Noah Braun YCM 7 8 6 21",
    "8 GER 99001 Lea Schulz SVN 8 7 9 24",
]


def _draw_lines(pdf: canvas.Canvas, lines: list[str], top: float = 800) -> None:
    y = top
    for line in lines:
        pdf.drawString(40, y, line)
        y -= 18


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def scattered_line_pdf_bytes() -> bytes:
    """One results row drawn as separate fragments, right to left."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(300, 700, "Mustermann")
    c.drawString(200, 701, "Max")
    c.drawString(100, 699, "GER12345")
    c.drawString(40, 700, "17")
    c.drawString(40, 660, "18")
    c.drawString(100, 660, "GER54321")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def results_pdf_bytes() -> bytes:
    """A results sheet with a title, date, header and eight rows."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    _draw_lines(
        c,
        [
            "Kieler Herbst Pokal 2024",
            "Optimist A - 14. September 2024",
            RESULT_HEADER,
            *RESULT_ROWS,
            "8 Entries",
        ],
    )
    c.save()
    return buf.getvalue()


@pytest.fixture()
def results_pdf_base64(results_pdf_bytes: bytes) -> str:
    return base64.b64encode(results_pdf_bytes).decode("ascii")


@pytest.fixture()
def invoice_pdf_base64() -> str:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    _draw_lines(
        c,
        [
            "Segelclub Musterhausen e.V. - Rechnung Nr. 2024-117",
            "Meldegeld Kieler Herbst Pokal, Optimist A, Segelnummer GER 12345",
            "Meldegeld            35,00 €",
            "Verpflegung          10,00 €",
            "Betrag: 45,00",
            "Bitte ueberweisen Sie den Betrag innerhalb von 14 Tagen.",
        ],
    )
    c.save()
    return base64.b64encode(buf.getvalue()).decode("ascii")

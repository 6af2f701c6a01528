import io

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from regatta_parser.ocr.rasterizer import PageRasterizer

SCANNED_LINES = [
    "Kieler Herbst Pokal 2024",
    "Rk. Sail Number Name Club Total",
    "1 GER 13579 Lena Fischer SVN 4",
    "2 GER 24680 Paul Wagner YCM 6",
    "3 GER 11223 Mia Becker SCA 9",
    "4 GER 12345 Max Mustermann SVN 12",
    "5 GER 33445 Jonas Klein WSV 15",
]


@pytest.fixture()
def scanned_results_pdf_bytes() -> bytes:
    """A results sheet with no text layer: the page is a single image."""
    text_pdf = io.BytesIO()
    c = canvas.Canvas(text_pdf, pagesize=A4)
    c.setFont("Helvetica", 16)
    y = 800
    for line in SCANNED_LINES:
        c.drawString(30, y, line)
        y -= 26
    c.save()

    _, image = next(PageRasterizer(scale=3.0).render(text_pdf.getvalue()))
    scanned = io.BytesIO()
    width, height = A4
    c = canvas.Canvas(scanned, pagesize=A4)
    c.drawImage(ImageReader(image), 0, 0, width=width, height=height)
    c.save()
    return scanned.getvalue()

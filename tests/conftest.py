import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _render(pages: list[str | None], compressed: bool) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter, pageCompression=1 if compressed else 0)
    for text in pages:
        if text is not None:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Single-page PDF with compressed content streams."""
    return _render(["Hello PDF World"], compressed=True)


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Two-page PDF with compressed content streams."""
    return _render(["Page one content", "Page two content"], compressed=True)


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Valid PDF with a single blank page."""
    return _render([None], compressed=True)


@pytest.fixture()
def uncompressed_pdf_bytes() -> bytes:
    """Single-page PDF whose content stream is stored as plain text."""
    return _render(["Hello PDF World"], compressed=False)


@pytest.fixture()
def uncompressed_multi_page_pdf_bytes() -> bytes:
    return _render(["Page one content", "Page two content"], compressed=False)

import io

import pdfplumber

from assignment_analysis.pdf.base import BasePdfExtractor
from assignment_analysis.pdf.exceptions import NoTextFoundError, PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts page text with pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not read the PDF: {exc}") from exc

        text = "\n".join(pages).strip()
        if not text:
            raise NoTextFoundError()
        return text

import pymupdf

from assignment_analysis.pdf.base import BasePdfExtractor
from assignment_analysis.pdf.exceptions import NoTextFoundError, PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts page text with PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass:
                    raise NoTextFoundError()
                pages = [page.get_text() for page in doc]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"PyMuPDF could not read the PDF: {exc}") from exc

        text = "\n".join(pages).strip()
        if not text:
            raise NoTextFoundError()
        return text

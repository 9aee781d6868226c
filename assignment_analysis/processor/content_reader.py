from assignment_analysis.logging.logger import Log
from assignment_analysis.pdf.base import BasePdfExtractor
from assignment_analysis.processor.exceptions import EmptyDocumentError, UnsupportedFileTypeError
from assignment_analysis.processor.models import RawDocument

TEXT_PLAIN = "text/plain"
APPLICATION_PDF = "application/pdf"


class ContentReader:
    """Turns a RawDocument into analyzable text, picking the path by content type."""

    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def read(self, document: RawDocument) -> str:
        """Return the document's text.

        Raises:
            UnsupportedFileTypeError: for anything but plain text and PDF.
            PdfExtractionError: if a PDF cannot be read (NoTextFoundError
                when it holds no extractable text).
            EmptyDocumentError: if the resulting text is blank.
        """
        if document.content_type == TEXT_PLAIN:
            content = document.data.decode("utf-8", errors="replace")
            Log.info(f"Extracted {len(content)} characters from text file {document.file_name}")
        elif document.content_type == APPLICATION_PDF:
            content = self._pdf_extractor.extract(document.data)
            Log.info(f"Extracted {len(content)} characters from PDF {document.file_name}")
        else:
            raise UnsupportedFileTypeError("Only PDF and text files are supported")

        if not content.strip():
            raise EmptyDocumentError("File appears to be empty or could not be read")
        return content

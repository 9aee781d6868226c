from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction engines."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract readable text from PDF bytes.

        Args:
            pdf_bytes: Raw uploaded file content, not necessarily a
                well-formed PDF.

        Returns:
            Non-empty, stripped text.

        Raises:
            NoTextFoundError: if the document yields no usable text.
            PdfExtractionError: if the engine fails for any other reason.
        """

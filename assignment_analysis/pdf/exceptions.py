class PdfExtractionError(Exception):
    """Raised when text cannot be extracted from a PDF."""


class NoTextFoundError(PdfExtractionError):
    """Raised when every extraction attempt came back empty.

    This is a judgement about the document itself (image-based, scanned or
    encrypted), so callers should not retry.
    """

    DEFAULT_MESSAGE = (
        "PDF appears to be image-based, scanned, or encrypted. "
        "No extractable text found."
    )

    def __init__(self, message: str = DEFAULT_MESSAGE) -> None:
        super().__init__(message)

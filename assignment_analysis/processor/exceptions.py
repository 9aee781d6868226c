class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class UnsupportedFileTypeError(ProcessorError):
    """Raised when a document's content type cannot be analyzed."""


class FileTooLargeError(ProcessorError):
    """Raised when an uploaded file exceeds the configured size limit."""


class EmptyDocumentError(ProcessorError):
    """Raised when a document yields no text to analyze."""

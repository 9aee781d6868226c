import mimetypes
from pathlib import Path
from typing import ClassVar

from assignment_analysis.processor.exceptions import FileTooLargeError, UnsupportedFileTypeError
from assignment_analysis.processor.models import RawDocument


class FileLoader:
    """Reads an uploaded file from disk after checking type and size."""

    ALLOWED_CONTENT_TYPES: ClassVar[frozenset[str]] = frozenset({
        "image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp",
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.ms-powerpoint",
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "text/plain",
        "application/zip", "application/x-zip-compressed", "application/x-rar-compressed",
        "video/mp4", "video/mkv", "video/avi", "video/mov",
    })
    DEFAULT_MAX_BYTES = 50 * 1024 * 1024

    def __init__(self, max_bytes: int = DEFAULT_MAX_BYTES) -> None:
        self._max_bytes = max_bytes

    def load(self, path: Path, content_type: str | None = None) -> RawDocument:
        """Read a file into a RawDocument.

        The content type is guessed from the file name when not given.

        Raises:
            FileNotFoundError: if the file does not exist.
            UnsupportedFileTypeError: if the content type is not allowed.
            FileTooLargeError: if the file is larger than the limit.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        resolved_type = (content_type or self._guess_content_type(path)).lower()
        if resolved_type not in self.ALLOWED_CONTENT_TYPES:
            raise UnsupportedFileTypeError(f"Unsupported file type: {resolved_type}")

        size = path.stat().st_size
        if size > self._max_bytes:
            raise FileTooLargeError(
                f"File is {size} bytes, limit is {self._max_bytes} bytes"
            )
        return RawDocument(file_name=path.name, content_type=resolved_type, data=path.read_bytes())

    @staticmethod
    def _guess_content_type(path: Path) -> str:
        guessed, _ = mimetypes.guess_type(path.name)
        return guessed or "application/octet-stream"

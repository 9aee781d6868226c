from pathlib import Path

import pytest

from assignment_analysis.processor.exceptions import FileTooLargeError, UnsupportedFileTypeError
from assignment_analysis.processor.file_loader import FileLoader


class TestLoadReturnsDocument:
    def test_reads_bytes_and_guesses_pdf_type(self, tmp_path: Path) -> None:
        path = tmp_path / "essay.pdf"
        path.write_bytes(b"%PDF test content")

        document = FileLoader().load(path)

        assert document.data == b"%PDF test content"
        assert document.content_type == "application/pdf"
        assert document.file_name == "essay.pdf"
        assert document.size == len(b"%PDF test content")

    def test_guesses_plain_text_type(self, tmp_path: Path) -> None:
        path = tmp_path / "essay.txt"
        path.write_text("hello")
        assert FileLoader().load(path).content_type == "text/plain"

    def test_declared_type_wins_over_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "upload.bin"
        path.write_bytes(b"%PDF")
        document = FileLoader().load(path, content_type="Application/PDF")
        assert document.content_type == "application/pdf"


class TestLoadRejects:
    def test_raises_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            FileLoader().load(tmp_path / "missing.pdf")

    def test_raises_for_disallowed_type(self, tmp_path: Path) -> None:
        path = tmp_path / "script.sh"
        path.write_text("echo hi")
        with pytest.raises(UnsupportedFileTypeError, match="Unsupported file type"):
            FileLoader().load(path, content_type="application/x-sh")

    def test_raises_for_unknown_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "mystery.zzz"
        path.write_bytes(b"\x00")
        with pytest.raises(UnsupportedFileTypeError, match="application/octet-stream"):
            FileLoader().load(path)

    def test_raises_when_over_size_limit(self, tmp_path: Path) -> None:
        path = tmp_path / "big.txt"
        path.write_bytes(b"x" * 11)
        with pytest.raises(FileTooLargeError, match="limit is 10 bytes"):
            FileLoader(max_bytes=10).load(path)

    def test_accepts_file_at_size_limit(self, tmp_path: Path) -> None:
        path = tmp_path / "exact.txt"
        path.write_bytes(b"x" * 10)
        assert FileLoader(max_bytes=10).load(path).size == 10

"""End-to-end processing of generated PDFs through the offline AI provider."""

from pathlib import Path

import pytest

from assignment_analysis.analysis.banding import ScoreBand
from assignment_analysis.config.settings import Settings
from assignment_analysis.pdf.exceptions import NoTextFoundError
from assignment_analysis.processor.file_loader import FileLoader
from assignment_analysis.processor.processor import build_processor


def _settings(pdf_engine: str) -> Settings:
    return Settings(  # type: ignore[call-arg]
        _env_file=None,
        pdf_engine=pdf_engine,
        analysis_provider="example",
    )


class TestProcessorIntegration:
    def test_heuristic_engine_analyzes_uncompressed_pdf(
        self, tmp_path: Path, uncompressed_pdf_bytes: bytes
    ) -> None:
        path = tmp_path / "essay.pdf"
        path.write_bytes(uncompressed_pdf_bytes)

        document = FileLoader().load(path)
        report = build_processor(_settings("heuristic")).process(document)

        assert report.success is True
        assert report.fields is not None
        assert report.fields.ai_score == "25%"
        assert report.band is ScoreBand.LOW
        assert report.file_size == len(uncompressed_pdf_bytes)

    @pytest.mark.parametrize("engine", ["pdfplumber", "pymupdf"])
    def test_library_engines_analyze_compressed_pdf(
        self, tmp_path: Path, sample_pdf_bytes: bytes, engine: str
    ) -> None:
        path = tmp_path / "essay.pdf"
        path.write_bytes(sample_pdf_bytes)

        report = build_processor(_settings(engine)).process(FileLoader().load(path))

        assert report.fields is not None
        assert report.fields.writing_quality_evaluation == "Good"

    def test_library_engine_rejects_blank_pdf(
        self, tmp_path: Path, empty_pdf_bytes: bytes
    ) -> None:
        path = tmp_path / "blank.pdf"
        path.write_bytes(empty_pdf_bytes)

        with pytest.raises(NoTextFoundError):
            build_processor(_settings("pdfplumber")).process(FileLoader().load(path))

    def test_text_file_skips_pdf_extraction(self, tmp_path: Path) -> None:
        path = tmp_path / "essay.txt"
        path.write_text("Monsoon winds bring heavy rain to the coast.")

        report = build_processor(_settings("heuristic")).process(FileLoader().load(path))

        assert report.analysis.startswith("AI Detection Score:")

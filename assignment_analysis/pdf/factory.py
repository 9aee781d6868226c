from typing import ClassVar

from assignment_analysis.config.settings import Settings
from assignment_analysis.pdf.base import BasePdfExtractor
from assignment_analysis.pdf.heuristic_extractor import HeuristicPdfExtractor
from assignment_analysis.pdf.pdfplumber_adapter import PdfPlumberAdapter
from assignment_analysis.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the PDF extraction engine named in settings."""

    ENGINES: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        "heuristic": HeuristicPdfExtractor,
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        engine_cls = cls.ENGINES.get(engine)
        if engine_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ENGINES)}"
            )
        return engine_cls()

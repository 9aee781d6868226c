from collections.abc import Sequence
from datetime import datetime, timezone

from assignment_analysis.analysis.factory import AnalyzerFactory
from assignment_analysis.config.settings import Settings
from assignment_analysis.pdf.factory import PdfExtractorFactory
from assignment_analysis.processor.content_reader import ContentReader
from assignment_analysis.processor.models import AnalysisReport, RawDocument
from assignment_analysis.processor.pipeline import PipelineContext, PipelineStep
from assignment_analysis.processor.steps import (
    AnalyzeStep,
    ClassifyScoreStep,
    LogFailureStep,
    ParseAnalysisStep,
    ReadContentStep,
)


class Processor:
    """Runs a document through the analysis pipeline.

    Pipeline: read content -> analyze -> parse -> classify score.
    """

    def __init__(
        self,
        steps: Sequence[PipelineStep],
        failed_step: PipelineStep | None = None,
    ) -> None:
        self._steps = list(steps)
        self._failed_step = failed_step

    def process(self, document: RawDocument) -> AnalysisReport:
        """Analyze a document and build its report.

        Any step error is handed to the failure step and then re-raised.
        """
        context = PipelineContext(document=document)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            if self._failed_step is not None:
                self._failed_step.run(context)
            raise

        return AnalysisReport(
            analysis=context.analysis,
            fields=context.fields,
            band=context.band,
            file_name=document.file_name,
            file_size=document.size,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with the configured PDF engine and AI provider."""
    content_reader = ContentReader(PdfExtractorFactory.create(settings))
    analyzer = AnalyzerFactory.create(settings)
    return Processor(
        steps=[
            ReadContentStep(content_reader),
            AnalyzeStep(analyzer),
            ParseAnalysisStep(),
            ClassifyScoreStep(),
        ],
        failed_step=LogFailureStep(),
    )

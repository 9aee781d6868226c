from assignment_analysis.analysis.analyzer import Analyzer
from assignment_analysis.analysis.banding import classify_ai_score
from assignment_analysis.analysis.parser import parse_analysis
from assignment_analysis.logging.logger import Log
from assignment_analysis.processor.content_reader import ContentReader
from assignment_analysis.processor.pipeline import PipelineContext, PipelineStep


class ReadContentStep(PipelineStep):
    def __init__(self, content_reader: ContentReader) -> None:
        self._content_reader = content_reader

    def run(self, context: PipelineContext) -> PipelineContext:
        context.content = self._content_reader.read(context.document)
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzer: Analyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.analysis = self._analyzer.analyze(context.content)
        Log.info(f"AI analysis completed for {context.document.file_name}")
        return context


class ParseAnalysisStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.fields = parse_analysis(context.analysis)
        if context.fields is None:
            Log.warning(f"AI returned no analysis text for {context.document.file_name}")
        elif not context.fields.to_payload():
            Log.warning(
                f"AI analysis for {context.document.file_name} contained no labelled fields"
            )
        return context


class ClassifyScoreStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        ai_score = context.fields.ai_score if context.fields is not None else None
        context.band = classify_ai_score(ai_score)
        Log.info(f"AI score {ai_score!r} classified as {context.band.label}")
        return context


class LogFailureStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        Log.exception(
            f"Analysis of {context.document.file_name} failed: {context.error_message}"
        )
        return context

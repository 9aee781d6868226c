from abc import ABC, abstractmethod
from dataclasses import dataclass

from assignment_analysis.analysis.banding import ScoreBand
from assignment_analysis.analysis.models import AnalysisFields
from assignment_analysis.processor.models import RawDocument


@dataclass(slots=True)
class PipelineContext:
    document: RawDocument
    content: str = ""
    analysis: str = ""
    fields: AnalysisFields | None = None
    band: ScoreBand = ScoreBand.UNKNOWN
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

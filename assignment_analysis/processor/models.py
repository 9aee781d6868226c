from dataclasses import dataclass, field

from assignment_analysis.analysis.banding import ScoreBand
from assignment_analysis.analysis.models import AnalysisFields


@dataclass(frozen=True)
class RawDocument:
    """An uploaded file as received: bytes plus declared content type."""

    file_name: str
    content_type: str
    data: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class AnalysisReport:
    """Result of analyzing a single document."""

    analysis: str
    fields: AnalysisFields | None
    band: ScoreBand
    file_name: str
    file_size: int
    timestamp: str
    success: bool = True

    def to_payload(self) -> dict[str, object]:
        return {
            "success": self.success,
            "analysis": self.analysis,
            "fields": self.fields.to_payload() if self.fields is not None else None,
            "aiScoreBand": {
                "band": self.band.key,
                "label": self.band.label,
                "color": self.band.color,
            },
            "fileName": self.file_name,
            "fileSize": self.file_size,
            "timestamp": self.timestamp,
        }

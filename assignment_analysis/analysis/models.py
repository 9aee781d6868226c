from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisFields:
    """The four labelled values parsed out of an AI analysis response.

    Each field is independent; any subset may be missing.
    """

    ai_score: str | None = None
    confidence_level: str | None = None
    originality_assessment: str | None = None
    writing_quality_evaluation: str | None = None

    def to_payload(self) -> dict[str, str]:
        """Serialize present fields with their client-facing keys."""
        payload = {
            "aiScore": self.ai_score,
            "confidenceLevel": self.confidence_level,
            "originalityAssessment": self.originality_assessment,
            "writingQualityEvaluation": self.writing_quality_evaluation,
        }
        return {key: value for key, value in payload.items() if value is not None}

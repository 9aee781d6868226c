class AnalysisError(Exception):
    """Base exception for AI analysis failures."""


class AnalysisServiceError(AnalysisError):
    """Raised when the AI provider call fails and no analysis text exists."""


class AnalysisTimeoutError(AnalysisServiceError):
    """Raised when the AI provider does not answer within the timeout."""

    DEFAULT_MESSAGE = "AI service request timed out. Please try again."

    def __init__(self, message: str = DEFAULT_MESSAGE) -> None:
        super().__init__(message)


class AnalysisRateLimitedError(AnalysisServiceError):
    """Raised when the AI provider rejects the call because of rate limiting."""

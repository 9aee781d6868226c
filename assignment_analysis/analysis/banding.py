import re
from enum import Enum

HIGH_THRESHOLD = 70
MODERATE_THRESHOLD = 40

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ScoreBand(Enum):
    """Severity tier of an AI detection score, with its display colour."""

    HIGH = ("high", "high AI usage", "red")
    MODERATE = ("moderate", "moderate", "yellow")
    LOW = ("low", "low", "green")
    UNKNOWN = ("unknown", "unknown", "gray")

    def __init__(self, key: str, label: str, color: str) -> None:
        self.key = key
        self.label = label
        self.color = color


def parse_leading_int(value: str | None) -> int | None:
    """Parse the integer at the start of value, ignoring any suffix such as '%'."""
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def classify_ai_score(ai_score: str | None) -> ScoreBand:
    score = parse_leading_int(ai_score)
    if score is None:
        return ScoreBand.UNKNOWN
    if score >= HIGH_THRESHOLD:
        return ScoreBand.HIGH
    if score >= MODERATE_THRESHOLD:
        return ScoreBand.MODERATE
    return ScoreBand.LOW

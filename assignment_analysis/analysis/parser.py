"""Parses the free-text response of the AI analysis prompt.

The provider is only asked (not forced) to answer with labelled lines, so
matching is deliberately loose: a label may appear anywhere in a line and
unrelated commentary is ignored.
"""

from dataclasses import replace

from assignment_analysis.analysis.models import AnalysisFields

EMPTY_VALUE = "N/A"

LABELS: tuple[tuple[str, str], ...] = (
    ("AI Detection Score:", "ai_score"),
    ("Confidence Level:", "confidence_level"),
    ("Originality Assessment:", "originality_assessment"),
    ("Writing Quality Evaluation:", "writing_quality_evaluation"),
)


def parse_analysis(text: str) -> AnalysisFields | None:
    """Extract labelled fields from an analysis response.

    Returns None for empty or blank input. A line fills at most one field,
    the first label found in it. When a label occurs on several lines the
    last one wins.
    """
    if not text or not text.strip():
        return None

    fields = AnalysisFields()
    for line in text.splitlines():
        if not line.strip():
            continue
        for label, attr in LABELS:
            if label in line:
                fields = replace(fields, **{attr: _value_after_colon(line)})
                break
    return fields


def _value_after_colon(line: str) -> str:
    value = line.split(":", 1)[1].strip()
    return value or EMPTY_VALUE

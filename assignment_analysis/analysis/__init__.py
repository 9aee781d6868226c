from assignment_analysis.analysis.analyzer import Analyzer
from assignment_analysis.analysis.banding import ScoreBand, classify_ai_score
from assignment_analysis.analysis.factory import AnalyzerFactory
from assignment_analysis.analysis.models import AnalysisFields
from assignment_analysis.analysis.parser import parse_analysis

__all__ = [
    "AnalysisFields",
    "Analyzer",
    "AnalyzerFactory",
    "ScoreBand",
    "classify_ai_score",
    "parse_analysis",
]

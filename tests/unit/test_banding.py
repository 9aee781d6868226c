import pytest

from assignment_analysis.analysis.banding import ScoreBand, classify_ai_score, parse_leading_int


class TestParseLeadingInt:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("85%", 85),
            (" 42 percent", 42),
            ("-3", -3),
            ("7.9", 7),
            ("N/A", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parses_leading_integer(self, value: str | None, expected: int | None) -> None:
        assert parse_leading_int(value) == expected


class TestClassifyAiScore:
    def test_high(self) -> None:
        assert classify_ai_score("72%") is ScoreBand.HIGH

    def test_moderate(self) -> None:
        assert classify_ai_score("55") is ScoreBand.MODERATE

    def test_low(self) -> None:
        assert classify_ai_score("10%") is ScoreBand.LOW

    def test_unknown_for_placeholder(self) -> None:
        assert classify_ai_score("N/A") is ScoreBand.UNKNOWN

    def test_unknown_for_missing_score(self) -> None:
        assert classify_ai_score(None) is ScoreBand.UNKNOWN

    @pytest.mark.parametrize(
        ("score", "band"),
        [
            ("39", ScoreBand.LOW),
            ("40", ScoreBand.MODERATE),
            ("69", ScoreBand.MODERATE),
            ("70", ScoreBand.HIGH),
        ],
    )
    def test_boundaries(self, score: str, band: ScoreBand) -> None:
        assert classify_ai_score(score) is band

    def test_band_display_attributes(self) -> None:
        assert ScoreBand.HIGH.label == "high AI usage"
        assert ScoreBand.HIGH.color == "red"
        assert ScoreBand.UNKNOWN.color == "gray"

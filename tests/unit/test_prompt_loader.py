"""Tests for prompt template loading."""

from pathlib import Path

import pytest

from assignment_analysis.analysis.exceptions import AnalysisError
from assignment_analysis.analysis.prompt_loader import load_prompt_template


class TestLoadPromptTemplate:
    def test_loads_default_template(self) -> None:
        template = load_prompt_template()
        assert "{content}" in template
        assert "Originality Assessment:" in template

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Hello {content}")
        assert load_prompt_template(custom) == "Hello {content}"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(AnalysisError, match="Failed to load prompt"):
            load_prompt_template(Path("/nonexistent/file.txt"))

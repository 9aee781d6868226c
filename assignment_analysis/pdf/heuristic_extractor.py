"""Best-effort text recovery from PDF bytes without a PDF parsing library.

The buffer is scanned with regular expressions for things that usually hold
text in uncompressed PDFs: string literals, hex strings, document metadata,
text-showing operators and plain runs of words. Nothing here understands
the PDF object model, so results on compressed, encrypted or scanned files
are empty or noisy.
"""

import re
from collections.abc import Callable
from typing import ClassVar

from assignment_analysis.logging.logger import Log
from assignment_analysis.pdf.base import BasePdfExtractor
from assignment_analysis.pdf.exceptions import NoTextFoundError

Strategy = Callable[[bytes], str | None]

_LITERAL_PATTERNS = (
    re.compile(r"\(([^)]+)\)"),
    re.compile(r"<([^>]+)>"),
)
# Only the first occurrence of each metadata key is used.
_METADATA_PATTERNS = tuple(
    re.compile(rf"/{key}\s*\(([^)]+)\)", re.IGNORECASE)
    for key in ("Subject", "Title", "Author")
)
_ANGLE_BRACKETS = re.compile(r"[<>]")
_HAS_LETTER = re.compile(r"[a-zA-Z]")
_MIN_FRAGMENT_LENGTH = 3

_MARKER_SCAN_LIMIT = 100_000
_OPERATOR_LITERAL = re.compile(r"(Td|Tm|Tj|TJ)[\s\S]*?\(([^)]+)\)")

_READABLE_RUN = re.compile(r"[a-zA-Z]{3,}(?:\s+[a-zA-Z]{3,}){2,}")


def _clean_fragment(raw: str) -> str:
    # Hex matches starting on "<<" carry dictionary brackets.
    unwrapped = _ANGLE_BRACKETS.sub("", raw)
    return unwrapped.replace("\\(", "(").replace("\\)", ")").strip()


def _keep_fragment(fragment: str) -> bool:
    return len(fragment) > _MIN_FRAGMENT_LENGTH and _HAS_LETTER.search(fragment) is not None


def simple_text_extraction(buffer: bytes) -> str | None:
    """Collect string literals, hex strings and metadata values.

    Latin-1 keeps one character per byte, so binary stream content cannot
    shift or break the matches.
    """
    content = buffer.decode("latin-1")
    fragments: list[str] = []

    for pattern in _LITERAL_PATTERNS:
        for match in pattern.finditer(content):
            fragment = _clean_fragment(match.group(1))
            if _keep_fragment(fragment):
                fragments.append(fragment)

    for pattern in _METADATA_PATTERNS:
        match = pattern.search(content)
        if match is None:
            continue
        fragment = _clean_fragment(match.group(1))
        if _keep_fragment(fragment):
            fragments.append(fragment)

    text = " ".join(fragments).strip()
    return text or None


def marker_text_extraction(buffer: bytes) -> str | None:
    """Collect the first string literal after each text positioning/show operator."""
    content = buffer[:_MARKER_SCAN_LIMIT].decode("utf-8", errors="replace")
    text = ""
    for match in _OPERATOR_LITERAL.finditer(content):
        text += match.group(2) + " "
    return text.strip() or None


def readable_run_extraction(buffer: bytes) -> str | None:
    """Collect runs of three or more consecutive words of three or more letters."""
    content = buffer.decode("utf-8", errors="replace")
    runs = [match.group(0) for match in _READABLE_RUN.finditer(content)]
    if not runs:
        return None
    text = " ".join(runs)
    return text if text.strip() else None


class HeuristicPdfExtractor(BasePdfExtractor):
    """Tries each strategy in order and returns the first non-empty result."""

    STRATEGIES: ClassVar[tuple[tuple[str, Strategy], ...]] = (
        ("simple", simple_text_extraction),
        ("marker", marker_text_extraction),
        ("readable_run", readable_run_extraction),
    )

    def extract(self, pdf_bytes: bytes) -> str:
        Log.debug(f"Heuristic extraction over {len(pdf_bytes)} bytes")
        for name, strategy in self.STRATEGIES:
            text = self._run_strategy(name, strategy, pdf_bytes)
            if text is not None and text.strip():
                Log.info(f"Extracted {len(text)} chars using {name} strategy")
                return text.strip()
        raise NoTextFoundError()

    @staticmethod
    def _run_strategy(name: str, strategy: Strategy, pdf_bytes: bytes) -> str | None:
        try:
            return strategy(pdf_bytes)
        except Exception as exc:
            Log.debug(f"{name} extraction failed: {exc}")
            return None

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from assignment_analysis.analysis.exceptions import AnalysisError
from assignment_analysis.config.settings import Settings
from assignment_analysis.logging.logger import Log
from assignment_analysis.pdf.exceptions import PdfExtractionError
from assignment_analysis.processor.exceptions import ProcessorError
from assignment_analysis.processor.file_loader import FileLoader
from assignment_analysis.processor.processor import build_processor


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="assignment-analysis",
        description="Check an assignment file for AI usage, originality and writing quality.",
    )
    parser.add_argument("file", type=Path, help="PDF or plain-text assignment")
    parser.add_argument(
        "--content-type",
        default=None,
        help="declared MIME type (guessed from the file name when omitted)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: load settings -> read file -> analyze -> print JSON report."""
    args = _parse_args(argv)

    try:
        settings = Settings()
        Log.configure(settings.log_level)
        document = FileLoader(settings.max_upload_bytes).load(args.file, args.content_type)
        Log.info(
            f"Processing file: {document.file_name}, Type: {document.content_type}, "
            f"Size: {document.size} bytes"
        )
        report = build_processor(settings).process(document)
    except (
        FileNotFoundError,
        ProcessorError,
        PdfExtractionError,
        AnalysisError,
        ValidationError,
        ValueError,
    ) as exc:
        print(json.dumps({"success": False, "error": str(exc)}, ensure_ascii=False))
        return 1

    print(json.dumps(report.to_payload(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

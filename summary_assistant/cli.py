from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import SummaryLength, SummaryOptions
from .loaders import ExtractionError, load_text_from_path
from .log import setup_logging
from .summarize import summarize


logger = logging.getLogger("summary_assistant.cli")

EXIT_OK = 0
EXIT_NOTHING_TO_SUMMARIZE = 1
EXIT_EXTRACTION_FAILED = 2
EXIT_WRITE_FAILED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="summary_assistant",
        description="Extractive summary, keywords and readability advice for a text document",
    )
    parser.add_argument("path", type=str, help="Document to summarize (.txt, .md, .rtf) or '-' for stdin")
    parser.add_argument("--length", choices=[m.value for m in SummaryLength], default=SummaryLength.MEDIUM.value)
    parser.add_argument("--bullets", action="store_true", help="Append the selected sentences as bullets")
    parser.add_argument("--keywords", action="store_true", help="Append the top keywords")
    parser.add_argument("--suggestions", action="store_true", help="Append improvement suggestions and readability")
    parser.add_argument("--out", type=str, default=None, help="Optional file to write the summary to")
    parser.add_argument("--log-dir", type=str, default=None, help="Also write logs to LOG_DIR/app.log")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(
        logging.DEBUG if args.verbose else logging.WARNING,
        log_dir=Path(args.log_dir) if args.log_dir else None,
    )

    try:
        text = sys.stdin.read() if args.path == "-" else load_text_from_path(args.path)
    except ExtractionError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_EXTRACTION_FAILED

    options = SummaryOptions(
        length=SummaryLength(args.length),
        include_bullets=args.bullets,
        include_keywords=args.keywords,
        include_suggestions=args.suggestions,
    )
    result = summarize(text, options)
    if result.is_empty:
        print(result.notice, file=sys.stderr)
        return EXIT_NOTHING_TO_SUMMARIZE

    if args.out:
        out_path = Path(args.out)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(result.summary_text, encoding="utf-8")
        except OSError as e:
            print(f"error: Failed to write {out_path}: {e.strerror or e}", file=sys.stderr)
            return EXIT_WRITE_FAILED
        logger.info("Wrote summary -> %s", out_path)
    else:
        print(result.summary_text)
    return EXIT_OK

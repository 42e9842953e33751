"""CLI entrypoint for the reference extraction module.

Usage:
    python -m src.references --text "Under RA 4136 Section 56 ..."
    python -m src.references --text-file answer.md --no-segments
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from src.utils._logging import configure_logging, get_logger

_log = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="references",
        description="Extract LTO/traffic-law citations from an assistant answer",
    )
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "--text",
        type=str,
        help="Answer text to scan (inline)",
    )
    input_group.add_argument(
        "--text-file",
        type=Path,
        help="Path to a file containing the answer text",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to references config YAML (default: configs/references.yaml)",
    )
    parser.add_argument(
        "--no-segments",
        action="store_true",
        help="Skip highlighting segments in the output",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate config and input, but skip extraction",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--console-log",
        action="store_true",
        help="Use human-readable console logging instead of JSON",
    )
    return parser


def _read_text(args: argparse.Namespace) -> str | None:
    if args.text is not None:
        return args.text
    try:
        return args.text_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _log.error("text_file_unreadable", path=str(args.text_file), error=str(exc))
        return None


def _run(args: argparse.Namespace) -> int:
    """Execute reference extraction and print the result as JSON."""
    from src.references._config import load_reference_config
    from src.references.pipeline import ReferenceExtractionPipeline

    config = load_reference_config(args.config)
    settings = config.settings
    if args.no_segments:
        settings = settings.model_copy(update={"include_segments": False})

    text = _read_text(args)
    if text is None:
        return 1
    if not text.strip():
        _log.error("empty_text")
        return 1

    _log.info(
        "reference_run_start",
        text_length=len(text),
        include_segments=settings.include_segments,
        dry_run=args.dry_run,
    )

    if args.dry_run:
        _log.info("dry_run_complete", text_preview=text[: settings.log_preview_chars])
        return 0

    result = ReferenceExtractionPipeline(settings).extract(text)
    sys.stdout.write(result.model_dump_json(indent=2) + "\n")
    return 0


def main() -> None:
    """CLI entrypoint."""
    parser = _build_parser()
    args = parser.parse_args()
    configure_logging(
        log_level=args.log_level,
        json_output=not args.console_log,
    )
    sys.exit(_run(args))


if __name__ == "__main__":
    main()

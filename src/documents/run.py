"""CLI entrypoint for the documents module.

Usage:
    python -m src.documents 05-fees-and-penalties_fines-schedule_chunk_0
    python -m src.documents ID [ID ...] --config configs/documents.yaml
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from src.utils._logging import configure_logging, get_logger

_log = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="documents",
        description="Resolve chunk document ids to titles and storage paths",
    )
    parser.add_argument(
        "document_ids",
        nargs="+",
        metavar="DOCUMENT_ID",
        help="Chunk document id(s), e.g. 07-local-ordinances_MMDA_Resolution_chunk_2",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to documents config YAML (default: configs/documents.yaml)",
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


def _run(args: argparse.Namespace) -> int:
    """Print one DocumentLink JSON line per document id."""
    from src.documents._config import load_document_config
    from src.documents._doc_ids import build_document_link
    from src.documents._exceptions import InvalidDocumentIdError

    config = load_document_config(args.config)

    failures = 0
    for document_id in args.document_ids:
        try:
            link = build_document_link(document_id, config.settings)
        except InvalidDocumentIdError as exc:
            _log.error("invalid_document_id", document_id=document_id, error=str(exc))
            failures += 1
            continue
        sys.stdout.write(link.model_dump_json() + "\n")

    _log.info("documents_resolved", total=len(args.document_ids), failed=failures)
    return 1 if failures else 0


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

"""Reference extraction: scan → normalise/de-duplicate → sort → segment.

``parse_legal_references`` is the pure entry point used per chat message.
``ReferenceExtractionPipeline`` wraps the same stages with timings, a content
hash and structured logging for batch and CLI use.
"""

from __future__ import annotations

import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from src.references._exceptions import ReferenceInputError
from src.references._models import ExtractionResult, ReferenceSettings
from src.references._normalizer import normalize_matches, sort_by_position
from src.references._scanner import scan_references
from src.references._segmenter import highlight_references
from src.utils._hashing import content_hash, short_hash
from src.utils._logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from src.references._models import ParsedReference

_log = get_logger(__name__)


def parse_legal_references(text: object) -> list[ParsedReference]:
    """Extract de-duplicated legal references from *text* in reading order.

    Never raises: ``None``, non-strings and text without citations all give
    an empty list.
    """
    raw_matches = scan_references(text)
    if not raw_matches:
        return []
    return sort_by_position(normalize_matches(raw_matches))


def get_unique_titles(references: Iterable[ParsedReference]) -> list[str]:
    """Titles in first-seen order with repeats removed."""
    return list(dict.fromkeys(ref.title for ref in references))


class ReferenceExtractionPipeline:
    """Run every extraction stage over one text and time each stage."""

    def __init__(self, settings: ReferenceSettings | None = None) -> None:
        self._settings = settings or ReferenceSettings()

    def extract(self, text: str) -> ExtractionResult:
        """Extract references (and segments, if enabled) from *text*.

        Raises:
            ReferenceInputError: If *text* is not a string.
        """
        if not isinstance(text, str):
            msg = f"Expected str, got {type(text).__name__}"
            raise ReferenceInputError(msg)

        result = ExtractionResult(text_hash=content_hash(text), text_length=len(text))

        t0 = time.perf_counter()
        raw_matches = scan_references(text)
        result.timings["scan_ms"] = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        result.references = sort_by_position(normalize_matches(raw_matches))
        result.timings["normalize_ms"] = (time.perf_counter() - t0) * 1000

        if self._settings.include_segments:
            t0 = time.perf_counter()
            result.segments = highlight_references(text, result.references)
            result.timings["segment_ms"] = (time.perf_counter() - t0) * 1000

        result.unique_titles = get_unique_titles(result.references)
        result.finished_at = datetime.now(UTC)

        _log.info(
            "references_extracted",
            text_hash=short_hash(text),
            text_length=result.text_length,
            raw_matches=len(raw_matches),
            references=len(result.references),
            segments=len(result.segments),
            elapsed_ms=result.elapsed_ms,
        )
        return result

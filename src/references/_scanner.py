"""Run every registry pattern over a text and collect raw matches."""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.references._models import RawMatch
from src.references._patterns import LEGAL_PATTERNS
from src.utils._logging import get_logger

if TYPE_CHECKING:
    from src.references._patterns import LegalPattern

_log = get_logger(__name__)


def scan_references(
    text: object,
    patterns: tuple[LegalPattern, ...] = LEGAL_PATTERNS,
) -> list[RawMatch]:
    """Return every match of every pattern, grouped by pattern in registry order.

    Patterns scan independently, so overlapping hits from two patterns are
    both reported. Anything that is not a non-empty string yields no matches.
    """
    if not isinstance(text, str) or not text:
        return []

    matches: list[RawMatch] = []
    for entry in patterns:
        for match in entry.pattern.finditer(text):
            matches.append(
                RawMatch(
                    reference_type=entry.reference_type,
                    full_match=match.group(0),
                    start_index=match.start(),
                )
            )

    _log.debug("references_scanned", raw_matches=len(matches), text_length=len(text))
    return matches

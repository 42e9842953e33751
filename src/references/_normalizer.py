"""Turn raw matches into de-duplicated, position-ordered references."""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.references._models import IconTag, ParsedReference, ReferenceType
from src.references._patterns import format_title
from src.utils._logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from src.references._models import RawMatch

_log = get_logger(__name__)

_ICONS: dict[ReferenceType, IconTag] = {
    ReferenceType.RA: IconTag.SCALE,
    ReferenceType.ADMIN_ORDER: IconTag.FILE_TEXT,
    ReferenceType.MEMO: IconTag.CLIPBOARD_LIST,
    ReferenceType.RESOLUTION: IconTag.BOOK_OPEN,
    ReferenceType.CIRCULAR: IconTag.CLIPBOARD_LIST,
    ReferenceType.UNKNOWN: IconTag.BOOK_OPEN,
}


def icon_for_type(reference_type: ReferenceType | str) -> IconTag:
    """Map a reference type to its icon tag, defaulting to ``book-open``."""
    try:
        return _ICONS.get(ReferenceType(reference_type), IconTag.BOOK_OPEN)
    except ValueError:
        return IconTag.BOOK_OPEN


def normalize_matches(raw_matches: Iterable[RawMatch]) -> list[ParsedReference]:
    """Format titles and drop repeats, keeping the first match per title.

    Titles compare exactly (case-sensitive). A later match with an already
    seen title is dropped even if its type or surface text differs.
    """
    references: list[ParsedReference] = []
    seen: set[str] = set()

    for raw in raw_matches:
        title = format_title(raw.reference_type, raw.full_match)
        if title in seen:
            _log.debug(
                "reference_duplicate_dropped",
                title=title,
                start_index=raw.start_index,
            )
            continue
        seen.add(title)
        references.append(
            ParsedReference(
                reference_type=raw.reference_type,
                title=title,
                full_match=raw.full_match,
                start_index=raw.start_index,
                end_index=raw.start_index + len(raw.full_match),
                icon=icon_for_type(raw.reference_type),
            )
        )

    return references


def sort_by_position(references: Iterable[ParsedReference]) -> list[ParsedReference]:
    """Stable sort by ``start_index`` so citations follow reading order."""
    return sorted(references, key=lambda ref: ref.start_index)

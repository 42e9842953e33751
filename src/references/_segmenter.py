"""Split a text into alternating plain and reference segments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.references._models import Segment
from src.utils._logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from src.references._models import ParsedReference

_log = get_logger(__name__)


def highlight_references(
    text: str,
    references: Sequence[ParsedReference],
) -> list[Segment]:
    """Partition *text* around *references* (sorted by ``start_index``).

    Joining the returned segment texts always gives back *text*. A reference
    that starts inside an earlier reference's span is left unhighlighted.
    """
    if not references:
        return [Segment(text=text, is_reference=False)]

    segments: list[Segment] = []
    last_index = 0

    for ref in references:
        if ref.start_index < last_index:
            _log.debug(
                "overlapping_reference_skipped",
                title=ref.title,
                start_index=ref.start_index,
                previous_end=last_index,
            )
            continue

        if ref.start_index > last_index:
            segments.append(Segment(text=text[last_index : ref.start_index]))

        segments.append(
            Segment(
                text=text[ref.start_index : ref.end_index],
                is_reference=True,
                reference=ref,
            )
        )
        last_index = ref.end_index

    if last_index < len(text):
        segments.append(Segment(text=text[last_index:]))

    return segments

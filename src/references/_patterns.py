"""Pattern registry for Philippine traffic-law citations.

Each entry pairs a detection regex with a formatter that turns the matched
text into the canonical title used for de-duplication and display.
Formatters are pure and fall back to the raw match when their sub-groups
cannot be found.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import NamedTuple

from src.references._models import ReferenceType


class LegalPattern(NamedTuple):
    """One registry entry: the type it yields, its trigger, its formatter."""

    reference_type: ReferenceType
    pattern: re.Pattern[str]
    formatter: Callable[[str], str]


# Case-insensitive, with ASCII-only \d, \b and letter classes.
_FLAGS = re.IGNORECASE | re.ASCII

# --- Detection patterns ---

# "RA 4136", "Republic Act 4136 Section 56", "RA 10930 Article 3b"
_RA_PATTERN = re.compile(
    r"\b(RA|Republic\s+Act)\s+(\d+)(?:\s+(Section|Article|Chapter)\s+(\d+(?:[a-z])?)?)?",
    _FLAGS,
)

# "Administrative Order No. 2021-01", "Order No. 12"
_ADMIN_ORDER_PATTERN = re.compile(
    r"\b(?:Administrative\s+)?Order\s+No\.\s+(\d+-\d+|\d+)",
    _FLAGS,
)

# "LTO Memorandum 2023-045", "LTO Memo 15-2020"
_MEMO_PATTERN = re.compile(
    r"\bLTO\s+(?:Memorandum|Memo)\s+(\d+-\d+)",
    _FLAGS,
)

# "LTO Circular 15-2020"
_CIRCULAR_PATTERN = re.compile(
    r"\bLTO\s+Circular\s+(\d+-\d+)",
    _FLAGS,
)

# "MMDA Resolution No. 16-01", "City Resolution 2019-A"
_RESOLUTION_PATTERN = re.compile(
    r"\b(?:MMDA|LTO|City|Municipal)\s+Resolution\s+(?:No\.\s+)?([A-Z0-9-]+)",
    _FLAGS,
)

# --- Sub-group extractors used by the formatters ---

_RA_PARTS = re.compile(
    r"(?:RA|Republic\s+Act)\s+(\d+)(?:\s+Section\s+(\d+))?",
    _FLAGS,
)
_ORDER_NUMBER = re.compile(r"No\.\s+(\d+-\d+|\d+)", _FLAGS)
_DASHED_NUMBER = re.compile(r"(\d+-\d+)", re.ASCII)
_RESOLUTION_ID = re.compile(r"Resolution\s+(?:No\.\s+)?([A-Z0-9-]+)", _FLAGS)


# --- Formatters ---


def format_ra(match: str) -> str:
    """``RA <n>`` or ``RA <n> Section <s>``; only the section digits are kept."""
    parts = _RA_PARTS.search(match)
    if parts is None:
        return match
    number, section = parts.group(1), parts.group(2)
    return f"RA {number} Section {section}" if section else f"RA {number}"


def format_admin_order(match: str) -> str:
    parts = _ORDER_NUMBER.search(match)
    return f"Admin Order No. {parts.group(1)}" if parts else match


def format_memo(match: str) -> str:
    parts = _DASHED_NUMBER.search(match)
    return f"LTO Memorandum {parts.group(1)}" if parts else match


def format_circular(match: str) -> str:
    parts = _DASHED_NUMBER.search(match)
    return f"LTO Circular {parts.group(1)}" if parts else match


def format_resolution(match: str) -> str:
    parts = _RESOLUTION_ID.search(match)
    return f"Resolution No. {parts.group(1)}" if parts else match


# Scan order; discovery order (and so which duplicate wins) follows it.
LEGAL_PATTERNS: tuple[LegalPattern, ...] = (
    LegalPattern(ReferenceType.RA, _RA_PATTERN, format_ra),
    LegalPattern(ReferenceType.ADMIN_ORDER, _ADMIN_ORDER_PATTERN, format_admin_order),
    LegalPattern(ReferenceType.MEMO, _MEMO_PATTERN, format_memo),
    LegalPattern(ReferenceType.CIRCULAR, _CIRCULAR_PATTERN, format_circular),
    LegalPattern(ReferenceType.RESOLUTION, _RESOLUTION_PATTERN, format_resolution),
)

_FORMATTERS: dict[ReferenceType, Callable[[str], str]] = {
    entry.reference_type: entry.formatter for entry in LEGAL_PATTERNS
}


def format_title(reference_type: ReferenceType, match: str) -> str:
    """Canonical title for *match*; unknown types keep the raw text."""
    formatter = _FORMATTERS.get(reference_type)
    return formatter(match) if formatter else match

"""Pydantic models for the legal reference extraction module."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, Field

# --- Enums ---


class ReferenceType(StrEnum):
    """Category of legal instrument recognised in assistant answers."""

    RA = "RA"
    ADMIN_ORDER = "AdminOrder"
    MEMO = "Memo"
    CIRCULAR = "Circular"
    RESOLUTION = "Resolution"
    UNKNOWN = "Unknown"


class IconTag(StrEnum):
    """Symbolic icon name; the presentation layer maps it to an asset."""

    SCALE = "scale"
    FILE_TEXT = "file-text"
    CLIPBOARD_LIST = "clipboard-list"
    BOOK_OPEN = "book-open"


REFERENCE_LABELS: dict[ReferenceType, str] = {
    ReferenceType.RA: "Law",
    ReferenceType.ADMIN_ORDER: "Admin Order",
    ReferenceType.MEMO: "Memorandum",
    ReferenceType.CIRCULAR: "Circular",
    ReferenceType.RESOLUTION: "Resolution",
    ReferenceType.UNKNOWN: "Reference",
}


def reference_label(reference_type: ReferenceType | str) -> str:
    """Return the short chip label for a reference type."""
    try:
        return REFERENCE_LABELS[ReferenceType(reference_type)]
    except ValueError:
        return REFERENCE_LABELS[ReferenceType.UNKNOWN]


# --- Extraction models ---


class RawMatch(BaseModel):
    """One regex hit reported by the scanner, before normalisation."""

    reference_type: ReferenceType
    full_match: str
    start_index: int


class ParsedReference(BaseModel):
    """A de-duplicated citation found in the source text."""

    reference_type: ReferenceType
    title: str
    full_match: str
    start_index: int
    end_index: int
    icon: IconTag = IconTag.BOOK_OPEN

    @property
    def label(self) -> str:
        return reference_label(self.reference_type)


class Segment(BaseModel):
    """A contiguous slice of the source text used for highlighting."""

    text: str
    is_reference: bool = False
    reference: ParsedReference | None = None


# --- Pipeline output ---


class ExtractionResult(BaseModel):
    """Output of ReferenceExtractionPipeline.extract()."""

    text_hash: str
    text_length: int = 0
    references: list[ParsedReference] = Field(default_factory=list)
    segments: list[Segment] = Field(default_factory=list)
    unique_titles: list[str] = Field(default_factory=list)
    timings: dict[str, float] = Field(default_factory=dict)
    started_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    finished_at: datetime | None = None

    @property
    def elapsed_ms(self) -> float:
        """Total elapsed time in milliseconds."""
        if self.finished_at is None:
            return 0.0
        return (self.finished_at - self.started_at).total_seconds() * 1000


# --- Config models ---


class ReferenceSettings(BaseModel):
    """Reference extraction settings from configs/references.yaml."""

    include_segments: bool = True
    log_preview_chars: int = 200


class ReferenceConfig(BaseModel):
    """Root model for configs/references.yaml."""

    settings: ReferenceSettings = Field(default_factory=ReferenceSettings)

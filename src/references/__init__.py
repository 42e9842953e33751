"""Legal reference extraction for assistant answers about traffic law."""

from src.references._models import (
    ExtractionResult,
    IconTag,
    ParsedReference,
    ReferenceConfig,
    ReferenceSettings,
    ReferenceType,
    Segment,
    reference_label,
)
from src.references._normalizer import icon_for_type
from src.references._segmenter import highlight_references
from src.references.pipeline import (
    ReferenceExtractionPipeline,
    get_unique_titles,
    parse_legal_references,
)

__all__ = [
    "ExtractionResult",
    "IconTag",
    "ParsedReference",
    "ReferenceConfig",
    "ReferenceExtractionPipeline",
    "ReferenceSettings",
    "ReferenceType",
    "Segment",
    "get_unique_titles",
    "highlight_references",
    "icon_for_type",
    "parse_legal_references",
    "reference_label",
]

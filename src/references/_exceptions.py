"""Exception hierarchy for the legal reference extraction module."""

from __future__ import annotations

from src.utils._exceptions import CitationEngineError


class ReferenceExtractionError(CitationEngineError):
    """Base exception for the reference extraction module."""


class ReferenceInputError(ReferenceExtractionError):
    """Text handed to the pipeline is not a string."""


class ReferenceConfigError(ReferenceExtractionError):
    """Invalid or missing reference extraction config."""

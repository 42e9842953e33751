"""Exception hierarchy for the documents module."""

from __future__ import annotations

from src.utils._exceptions import CitationEngineError


class DocumentError(CitationEngineError):
    """Base exception for the documents module."""


class InvalidDocumentIdError(DocumentError):
    """Document id is empty or not a string."""


class DocumentConfigError(DocumentError):
    """Invalid or missing documents config."""

from __future__ import annotations


class CitationEngineError(Exception):
    """Root exception for the LTO citation engine."""


class ConfigurationError(CitationEngineError):
    """Invalid or missing configuration."""


class ValidationError(CitationEngineError):
    """Input data failed validation."""

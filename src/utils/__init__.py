from __future__ import annotations

from src.utils._exceptions import (
    CitationEngineError,
    ConfigurationError,
    ValidationError,
)
from src.utils._hashing import content_hash, short_hash
from src.utils._logging import configure_logging, get_logger

__all__ = [
    "CitationEngineError",
    "ConfigurationError",
    "ValidationError",
    "configure_logging",
    "content_hash",
    "get_logger",
    "short_hash",
]

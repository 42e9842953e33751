"""Configuration loading for the documents module."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from src.documents._exceptions import DocumentConfigError
from src.documents._models import DocumentConfig
from src.utils._logging import get_logger

_log = get_logger(__name__)

_DEFAULT_CONFIG_PATH = Path("configs/documents.yaml")


def load_document_config(config_path: Path | None = None) -> DocumentConfig:
    """Load documents config from YAML, or defaults if the file is missing.

    Raises:
        DocumentConfigError: If the file cannot be read or parsed.
    """
    path = config_path or _DEFAULT_CONFIG_PATH

    if not path.exists():
        _log.info("document_config_not_found", path=str(path))
        return DocumentConfig()

    try:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return DocumentConfig(**raw)
    except Exception as exc:
        msg = f"Failed to load documents config from {path}: {exc}"
        raise DocumentConfigError(msg) from exc

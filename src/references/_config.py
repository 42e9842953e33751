"""Configuration loading for the reference extraction module."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from src.references._exceptions import ReferenceConfigError
from src.references._models import ReferenceConfig
from src.utils._logging import get_logger

_log = get_logger(__name__)

_DEFAULT_CONFIG_PATH = Path("configs/references.yaml")


def load_reference_config(config_path: Path | None = None) -> ReferenceConfig:
    """Load reference extraction config from a YAML file.

    Args:
        config_path: Path to YAML config. Defaults to configs/references.yaml.

    Returns:
        Parsed ReferenceConfig; defaults when the file does not exist.

    Raises:
        ReferenceConfigError: If the file cannot be read or parsed.
    """
    path = config_path or _DEFAULT_CONFIG_PATH

    if not path.exists():
        _log.info("reference_config_not_found", path=str(path))
        return ReferenceConfig()

    try:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return ReferenceConfig(**raw)
    except Exception as exc:
        msg = f"Failed to load reference config from {path}: {exc}"
        raise ReferenceConfigError(msg) from exc

"""Session-wide test setup."""

from __future__ import annotations

import pytest

from src.utils._logging import configure_logging


@pytest.fixture(autouse=True, scope="session")
def _route_logs_to_stderr() -> None:
    """Keep structlog output off stdout so CLI JSON can be parsed in tests."""
    configure_logging(log_level="WARNING", json_output=True)

"""Shared fixtures for document-id tests."""

from __future__ import annotations

import pytest

from src.documents._models import DocumentSettings


@pytest.fixture()
def document_settings() -> DocumentSettings:
    return DocumentSettings()

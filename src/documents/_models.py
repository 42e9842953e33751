"""Pydantic models for document-identifier handling."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Storage folders created by the ingestion job, keyed by folder name.
FOLDER_CATEGORIES: dict[str, str] = {
    "01-republic-acts": "Republic Acts",
    "02-administrative-orders": "Administrative Orders",
    "03-memorandum-circulars": "Memorandum Circulars",
    "04-citizens-charter-and-manuals": "Citizens Charter & Manuals",
    "05-fees-and-penalties": "Fees & Penalties",
    "06-insurance-and-civil-code": "Insurance & Civil Code",
    "07-local-ordinances": "Local Ordinances",
}


class DocumentId(BaseModel):
    """The parts of a retrieved chunk's ``documentId``."""

    document_id: str
    folder: str | None = None
    filename: str
    chunk_index: int | None = None

    @property
    def category(self) -> str | None:
        if self.folder is None:
            return None
        return FOLDER_CATEGORIES.get(self.folder)


class DocumentLink(BaseModel):
    """What a citation panel needs to show and download a source document."""

    document_id: str
    title: str
    storage_path: str
    chunk_index: int | None = None
    category: str | None = None


# --- Config models ---


class DocumentSettings(BaseModel):
    """Document path settings from configs/documents.yaml."""

    storage_root: str = "lto-documents"
    file_extension: str = ".pdf"


class DocumentConfig(BaseModel):
    """Root model for configs/documents.yaml."""

    settings: DocumentSettings = Field(default_factory=DocumentSettings)

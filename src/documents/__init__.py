"""Document-id helpers: readable titles and storage paths for cited chunks."""

from src.documents._doc_ids import (
    build_document_link,
    document_id_from_storage_path,
    format_doc_title,
    get_doc_storage_path,
    parse_document_id,
)
from src.documents._models import (
    FOLDER_CATEGORIES,
    DocumentConfig,
    DocumentId,
    DocumentLink,
    DocumentSettings,
)

__all__ = [
    "FOLDER_CATEGORIES",
    "DocumentConfig",
    "DocumentId",
    "DocumentLink",
    "DocumentSettings",
    "build_document_link",
    "document_id_from_storage_path",
    "format_doc_title",
    "get_doc_storage_path",
    "parse_document_id",
]

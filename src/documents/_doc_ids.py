"""Rewrite chunk ``documentId`` values into titles and storage paths.

Ingestion names every chunk ``{folder}_{filename}_chunk_{n}`` where the
folder is the storage sub-folder (``07-local-ordinances``) and the filename
is the PDF name without extension. Everything here is plain string
rewriting over that convention.
"""

from __future__ import annotations

import re

from src.documents._exceptions import InvalidDocumentIdError
from src.documents._models import DocumentId, DocumentLink, DocumentSettings
from src.utils._logging import get_logger

_log = get_logger(__name__)

_FOLDER_PREFIX = re.compile(r"^(\d+-[a-z-]+)_")
_CHUNK_SUFFIX = re.compile(r"_chunk_(\d+)$")
_FILE_EXTENSION = re.compile(r"\.[^/.]+$")

# Issuing agencies whose names stay upper-case in titles.
_ISSUER_ACRONYMS = frozenset({"LTO", "MMDA"})

_DEFAULT_SETTINGS = DocumentSettings()


def parse_document_id(document_id: str) -> DocumentId:
    """Split *document_id* into folder, filename and chunk index."""
    folder_match = _FOLDER_PREFIX.match(document_id)
    remainder = _FOLDER_PREFIX.sub("", document_id, count=1)
    chunk_match = _CHUNK_SUFFIX.search(remainder)
    return DocumentId(
        document_id=document_id,
        folder=folder_match.group(1) if folder_match else None,
        filename=_CHUNK_SUFFIX.sub("", remainder, count=1),
        chunk_index=int(chunk_match.group(1)) if chunk_match else None,
    )


def _title_case(word: str) -> str:
    if word.upper() in _ISSUER_ACRONYMS:
        return word.upper()
    return word[:1].upper() + word[1:].lower()


def format_doc_title(document_id: str) -> str:
    """Readable title for a document id.

    ``"07-local-ordinances_MMDA_Resolution_16-01_NCAP_Guidelines_chunk_2"``
    becomes ``"MMDA Resolution 16-01 Ncap Guidelines"``. Casing is per word,
    so acronyms other than the issuing agencies are lower-cased.
    """
    title = parse_document_id(document_id).filename.replace("_", " ")
    return " ".join(_title_case(word) for word in title.split(" "))


def get_doc_storage_path(
    document_id: str,
    *,
    storage_root: str = _DEFAULT_SETTINGS.storage_root,
    file_extension: str = _DEFAULT_SETTINGS.file_extension,
) -> str:
    """Object-storage path of the PDF a chunk was ingested from."""
    parsed = parse_document_id(document_id)
    filename = f"{parsed.filename}{file_extension}"
    if parsed.folder:
        return f"{storage_root}/{parsed.folder}/{filename}"
    return f"{storage_root}/{filename}"


def document_id_from_storage_path(
    path: str,
    *,
    storage_root: str = _DEFAULT_SETTINGS.storage_root,
) -> str:
    """Document id prefix ingestion assigns to the file at *path*.

    ``"lto-documents/05-fees-and-penalties/fines-schedule.pdf"`` gives
    ``"05-fees-and-penalties_fines-schedule"``; add ``_chunk_<n>`` per chunk.
    A path with no folder gives the bare stem rather than ``<file>_<stem>``.
    """
    relative = path.removeprefix(f"{storage_root}/")
    parts = relative.split("/")
    stem = _FILE_EXTENSION.sub("", parts[-1])
    if len(parts) < 2:
        return stem
    return f"{parts[0]}_{stem}"


def build_document_link(
    document_id: str,
    settings: DocumentSettings | None = None,
) -> DocumentLink:
    """Title, storage path and category for one cited chunk.

    Raises:
        InvalidDocumentIdError: If *document_id* is empty or not a string.
    """
    if not isinstance(document_id, str) or not document_id.strip():
        msg = f"Invalid document id: {document_id!r}"
        raise InvalidDocumentIdError(msg)

    settings = settings or _DEFAULT_SETTINGS
    parsed = parse_document_id(document_id)
    if parsed.folder is not None and parsed.category is None:
        _log.debug("unknown_document_folder", folder=parsed.folder, document_id=document_id)

    return DocumentLink(
        document_id=document_id,
        title=format_doc_title(document_id),
        storage_path=get_doc_storage_path(
            document_id,
            storage_root=settings.storage_root,
            file_extension=settings.file_extension,
        ),
        chunk_index=parsed.chunk_index,
        category=parsed.category,
    )

"""
Helper functions built on top of the documents store contract.

None of these raise for runtime conditions; failures come back as Results.
"""
import os
import tempfile
from pathlib import Path
from typing import Optional

from loguru import logger

from docstore.models.document import Document
from docstore.models.result import Result, SimpleResult
from docstore.storage.base import DocumentsStore


def load_bytes(store: DocumentsStore, document_name: str) -> Optional[bytes]:
    """Load a document's content, or None if it cannot be loaded."""
    result = store.load(document_name)
    return result.data.content if result.success else None


def load_string(store: DocumentsStore, document_name: str, encoding: str = "utf-8") -> Optional[str]:
    """
    Load a document's content decoded as text, or None if it cannot be loaded.

    Bytes that are invalid in `encoding` decode to U+FFFD.
    """
    content = load_bytes(store, document_name)
    if content is None:
        return None
    return content.decode(encoding, errors="replace")


def save_bytes(store: DocumentsStore, document_name: str, content: Optional[bytes]) -> SimpleResult:
    """Save raw bytes under the given document name."""
    if not document_name:
        return Result.error(message="A document name expected.")
    if content is None:
        return Result.error(message="A document content expected.")

    return store.save(Document(document_name, content))


def save_string(store: DocumentsStore, document_name: str, content: Optional[str], encoding: str = "utf-8") -> SimpleResult:
    """Save text under the given document name."""
    if not document_name:
        return Result.error(message="A document name expected.")
    if content is None:
        return Result.error(message="A document content expected.")

    return store.save(Document(document_name, content.encode(encoding)))


def archive(store: DocumentsStore, document_name: str, archive_store: Optional[DocumentsStore]) -> SimpleResult:
    """
    Move a document from a store into an archive store.

    The document is loaded from `store`, saved into `archive_store` and then
    deleted from `store`. When the final delete fails, the copy saved into the
    archive is deleted again so the archive returns to its previous state.
    That compensating delete is best effort: its failure is logged and the
    delete failure is what gets returned.

    Args:
        store: Store the document is moved out of
        document_name: Name of the document to archive
        archive_store: Store receiving the document

    Returns:
        Result of the first failing step, or success
    """
    if not document_name:
        return Result.error(message="A document name expected.")
    if archive_store is None:
        return Result.error(message="An archive documents store expected.")

    load_result = store.load(document_name)
    if not load_result.success:
        return load_result

    save_result = archive_store.save(load_result.data)
    if not save_result.success:
        return save_result

    delete_result = store.delete(document_name)
    if not delete_result.success:
        compensation = archive_store.delete(document_name)
        if compensation.success:
            logger.warning(f"Archiving of '{document_name}' failed, archived copy removed: {delete_result.message}")
        else:
            logger.warning(
                f"Archiving of '{document_name}' failed and the archived copy could not be removed: "
                f"{compensation.message}"
            )
        return delete_result

    logger.debug(f"Archived document '{document_name}' from '{store.name}' to '{archive_store.name}'")
    return Result.ok(
        message=f"The '{document_name}' document successfully archived to the '{archive_store.name}' documents store."
    )


def get_temp_file_name() -> Result[str]:
    """Create an empty temporary file and return its path."""
    try:
        fd, path = tempfile.mkstemp()
        os.close(fd)
    except OSError as e:
        return Result.error(message=f"A temporary file cannot be created. {e}")

    return Result.ok(path, message=f"The temporary file '{path}' created.")


def delete_temp_file(temp_file_path: Optional[str]) -> SimpleResult:
    """Delete a temporary file. A missing file is not an error."""
    if temp_file_path is None or not str(temp_file_path).strip():
        return Result.error(message="A temp file path expected.")

    path = Path(temp_file_path)
    if not path.exists():
        return Result.ok(message=f"The '{temp_file_path}' file not found.")

    try:
        path.unlink()
    except OSError as e:
        return Result.error(message=f"The '{temp_file_path}' file cannot be deleted. {e}")

    return Result.ok(message=f"The '{temp_file_path}' file deleted.")


def import_document(store: DocumentsStore, path: Optional[str], document_name: Optional[str]) -> SimpleResult:
    """Read an external file and save it into the store as a document."""
    if path is None or not str(path).strip():
        return Result.error(message="A path to a document expected.")
    if document_name is None or not document_name.strip():
        return Result.error(message="A document name expected.")

    source = Path(path)
    if not source.is_file():
        return Result.error(message=f"The '{path}' document not found.")

    try:
        content = source.read_bytes()
    except OSError as e:
        return Result.error(message=f"The '{path}' document import failed. {e}")

    return save_bytes(store, document_name, content)


def export_document(store: DocumentsStore, document_name: Optional[str], path: Optional[str]) -> SimpleResult:
    """Write a stored document to an external file."""
    if document_name is None or not document_name.strip():
        return Result.error(message="A document name expected.")
    if path is None or not str(path).strip():
        return Result.error(message="A path to a document expected.")

    load_result = store.load(document_name)
    if not load_result.success:
        return load_result

    try:
        Path(path).write_bytes(load_result.data.content)
    except OSError as e:
        return Result.error(message=f"The '{document_name}' document export failed. {e}")

    return Result.ok(message=f"The '{document_name}' document successfully exported to the '{path}' file.")

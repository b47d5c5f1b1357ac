"""
In-memory documents store implementation.
"""

from typing import Dict, Iterator, Optional

from loguru import logger

from docstore.exceptions import ConfigurationError
from docstore.models.document import Document
from docstore.models.result import Result, SimpleResult
from docstore.storage.base import DocumentsStore


class InMemoryDocumentsStore(DocumentsStore):
    """
    In-memory documents store.

    Documents are kept in a dictionary that survives close/open cycles; only
    their visibility depends on the opened state. Data is lost when the
    process ends.
    """

    def __init__(self, name: str):
        """
        Initialize in-memory store.

        Args:
            name: Store name.

        Raises:
            ConfigurationError: If the name is None or empty.
        """
        if not name:
            raise ConfigurationError("A documents store name expected.", config_key="name")

        self._name = name
        self._is_opened = False
        self._documents: Dict[str, Document] = {}
        logger.debug(f"Initialized InMemoryDocumentsStore '{name}'")

    @property
    def name(self) -> str:
        return self._name

    @property
    def count(self) -> int:
        return len(self._documents) if self._is_opened else 0

    @property
    def is_opened(self) -> bool:
        return self._is_opened

    @property
    def documents(self) -> Iterator[Document]:
        return self._iter_documents()

    def _iter_documents(self) -> Iterator[Document]:
        if not self._is_opened:
            return
        yield from list(self._documents.values())

    def open(self) -> SimpleResult:
        self._is_opened = True
        logger.debug(f"Opened in-memory documents store '{self._name}'")
        return Result.ok(message=f"The '{self._name}' documents store opened successfully.")

    def close(self) -> None:
        self._is_opened = False

    def has_document(self, document_name: Optional[str]) -> bool:
        return self._is_opened and bool(document_name) and document_name in self._documents

    def load(self, document_name: Optional[str]) -> Result[Document]:
        if not document_name:
            return Result.error(message="A document name expected.")

        if not self._is_opened:
            return self.not_opened_error()

        document = self._documents.get(document_name)
        if document is None:
            return Result.error(message=f"A document with name '{document_name}' not found.")

        logger.debug(f"Loaded document '{document_name}' from memory")
        return Result.ok(document, message=f"A document with name '{document_name}' loaded.")

    def save(self, document: Optional[Document]) -> SimpleResult:
        if document is None:
            return Result.error(message="A document expected.")

        if not self._is_opened:
            return self.not_opened_error()

        # Replace, don't merge; a re-saved name keeps no trace of the old entry
        self._documents.pop(document.name, None)
        self._documents[document.name] = document

        logger.debug(f"Saved document '{document.name}' to memory")
        return Result.ok(
            message=f"A document with name '{document.name}' successfully saved to the '{self._name}' documents store."
        )

    def rename(self, document_name: Optional[str], new_document_name: Optional[str]) -> SimpleResult:
        if not document_name:
            return Result.error(message="A document name expected.")
        if not new_document_name:
            return Result.error(message="A new document name expected.")

        if not self._is_opened:
            return self.not_opened_error()

        if document_name not in self._documents:
            return Result.error(message=f"A document with name '{document_name}' not found.")

        if new_document_name in self._documents:
            return Result.error(message=f"A document with name '{new_document_name}' already exists.")

        document = self._documents[document_name]
        self._documents[new_document_name] = Document(new_document_name, document.content)

        if self._remove(document_name):
            logger.debug(f"Renamed document '{document_name}' to '{new_document_name}' in memory")
            return Result.ok(message=f"A document with name '{document_name}' renamed to '{new_document_name}' successfully.")

        # Roll back the insert so the store ends in its original state
        self._remove(new_document_name)
        logger.warning(f"Rename of '{document_name}' in '{self._name}' rolled back")

        return Result.error(
            message=f"A document with name '{document_name}' cannot be removed from the '{self._name}' documents store."
        )

    def delete(self, document_name: Optional[str]) -> SimpleResult:
        if not document_name:
            return Result.error(message="A document name expected.")

        if not self._is_opened:
            return self.not_opened_error()

        if not self._remove(document_name):
            return Result.error(message=f"A document with name '{document_name}' not found or cannot be deleted.")

        logger.debug(f"Deleted document '{document_name}' from memory")
        return Result.ok(message=f"A document with name '{document_name}' successfully deleted.")

    def _remove(self, document_name: str) -> bool:
        """Remove an entry; False if it was not present."""
        return self._documents.pop(document_name, None) is not None

    def __repr__(self) -> str:
        return f"InMemoryDocumentsStore(name={self._name!r}, opened={self._is_opened}, documents={len(self._documents)})"

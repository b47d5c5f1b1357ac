"""
Abstract base class for documents store implementations.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from docstore.models.document import Document
from docstore.models.result import Result, SimpleResult


class DocumentsStore(ABC):
    """
    Abstract base class for documents stores.

    Defines the interface that all store implementations must follow. A store
    is constructed closed. While closed, no operation observes or mutates the
    stored documents: `has_document` returns False, `documents` yields nothing
    and every other operation returns a failed Result.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the store, fixed at construction."""
        pass

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of visible documents. Zero when closed."""
        pass

    @property
    @abstractmethod
    def is_opened(self) -> bool:
        pass

    @property
    @abstractmethod
    def documents(self) -> Iterator[Document]:
        """
        Lazily enumerate the stored documents.

        Returns:
            Iterator[Document]: A fresh iterator, empty when the store is closed.
        """
        pass

    @abstractmethod
    def open(self) -> SimpleResult:
        """
        Open the store, creating its backing storage if needed.

        Opening an already opened store succeeds.

        Returns:
            SimpleResult: Failed result, with the store left closed, if the
            backing storage cannot be prepared.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the store. Always succeeds."""
        pass

    @abstractmethod
    def has_document(self, document_name: Optional[str]) -> bool:
        """
        Check if a document exists in an opened store.

        Args:
            document_name: Document name.

        Returns:
            bool: True only if the store is opened and the document is present.
        """
        pass

    @abstractmethod
    def load(self, document_name: Optional[str]) -> Result[Document]:
        """
        Load a document.

        Args:
            document_name: Document name.

        Returns:
            Result[Document]: The loaded document as data on success.
        """
        pass

    @abstractmethod
    def save(self, document: Optional[Document]) -> SimpleResult:
        """
        Save a document, fully replacing any document with the same name.

        Args:
            document: Document to save.

        Returns:
            SimpleResult: On success, the message contains the document name.
        """
        pass

    @abstractmethod
    def rename(self, document_name: Optional[str], new_document_name: Optional[str]) -> SimpleResult:
        """
        Rename a document.

        Fails without side effects if the source is missing or the target
        already exists.

        Args:
            document_name: Current document name.
            new_document_name: New document name.

        Returns:
            SimpleResult: Outcome of the rename.
        """
        pass

    @abstractmethod
    def delete(self, document_name: Optional[str]) -> SimpleResult:
        """
        Delete a document.

        Args:
            document_name: Document name.

        Returns:
            SimpleResult: Outcome of the delete.
        """
        pass

    def not_opened_error(self) -> SimpleResult:
        """Failed result reported by operations invoked on a closed store."""
        return Result.error(message=f"The '{self.name}' documents store is not opened.")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, opened={self.is_opened})"

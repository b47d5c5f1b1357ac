"""
Documents store that archives documents instead of deleting them.
"""

from typing import Iterator, Optional

from loguru import logger

from docstore.exceptions import NullArgumentError
from docstore.models.document import Document
from docstore.models.result import Result, SimpleResult
from docstore.storage.base import DocumentsStore
from docstore.utils import document_io


class ArchivingDocumentsStore(DocumentsStore):
    """
    Composite store over a master store and an archive store.

    Everything except `open`, `close` and `delete` goes to the master store.
    `delete` moves the document into the archive store. The wrapped stores'
    lifecycles remain the caller's responsibility.
    """

    def __init__(self, master: DocumentsStore, archive_store: DocumentsStore):
        """
        Wrap two stores. Both are closed so the composite starts closed.

        Raises:
            NullArgumentError: If either store is None.
        """
        if master is None:
            raise NullArgumentError("master")
        if archive_store is None:
            raise NullArgumentError("archive_store")

        self._master = master
        self._archive = archive_store

        self._master.close()
        self._archive.close()

    @property
    def master(self) -> DocumentsStore:
        return self._master

    @property
    def archive(self) -> DocumentsStore:
        return self._archive

    @property
    def name(self) -> str:
        return self._master.name

    @property
    def count(self) -> int:
        return self._master.count

    @property
    def is_opened(self) -> bool:
        return self._master.is_opened and self._archive.is_opened

    @property
    def documents(self) -> Iterator[Document]:
        return self._master.documents

    def open(self) -> SimpleResult:
        master_result = self._master.open()
        if not master_result.success:
            return master_result

        archive_result = self._archive.open()
        if not archive_result.success:
            # Never leave master open while archive is closed
            self._master.close()
            logger.warning(f"Archive store '{self._archive.name}' failed to open, master '{self._master.name}' closed")
            return archive_result

        return Result.ok(
            message=f"The '{self.name}' archiving documents store, based on the '{self._master.name}' "
                    f"and the '{self._archive.name}' documents stores, opened successfully."
        )

    def close(self) -> None:
        self._master.close()
        self._archive.close()

    def has_document(self, document_name: Optional[str]) -> bool:
        return self._master.has_document(document_name)

    def load(self, document_name: Optional[str]) -> Result[Document]:
        return self._master.load(document_name)

    def save(self, document: Optional[Document]) -> SimpleResult:
        return self._master.save(document)

    def rename(self, document_name: Optional[str], new_document_name: Optional[str]) -> SimpleResult:
        return self._master.rename(document_name, new_document_name)

    def delete(self, document_name: Optional[str]) -> SimpleResult:
        """Move the document from the master store into the archive store."""
        return document_io.archive(self._master, document_name, self._archive)

    def __repr__(self) -> str:
        return f"ArchivingDocumentsStore(master={self._master!r}, archive={self._archive!r})"

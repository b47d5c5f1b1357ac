# tests/conftest.py
"""
Pytest configuration and shared fixtures
"""
from typing import Iterator, Optional

import pytest

from docstore.models.document import Document
from docstore.models.result import Result, SimpleResult
from docstore.storage.archiving import ArchivingDocumentsStore
from docstore.storage.base import DocumentsStore
from docstore.storage.local import OnDiskDocumentsStore
from docstore.storage.memory import InMemoryDocumentsStore

TEST_STORE_NAME = "test-store"
TEST_DOCUMENT_NAME = "test-document"


class FailingDocumentsStore(DocumentsStore):
    """Store whose every operation fails"""

    def __init__(self, name: str, is_opened: bool = False):
        self._name = name
        self._is_opened = is_opened

    @property
    def name(self) -> str:
        return self._name

    @property
    def count(self) -> int:
        return 0

    @property
    def is_opened(self) -> bool:
        return self._is_opened

    @property
    def documents(self) -> Iterator[Document]:
        return iter(())

    def open(self) -> SimpleResult:
        return Result.error(message=f"The '{self._name}' documents store cannot be opened.")

    def close(self) -> None:
        pass

    def has_document(self, document_name: Optional[str]) -> bool:
        return False

    def load(self, document_name: Optional[str]) -> Result[Document]:
        if not document_name:
            return Result.error(message="A document name expected.")
        return Result.error(message=f"A document with name '{document_name}' not found.")

    def save(self, document: Optional[Document]) -> SimpleResult:
        if document is None:
            return Result.error(message="A document expected.")
        return Result.error(message=f"The '{document.name}' document cannot be saved into the '{self._name}' documents store.")

    def rename(self, document_name: Optional[str], new_document_name: Optional[str]) -> SimpleResult:
        return Result.error(message=f"The '{document_name}' document cannot be renamed in the '{self._name}' documents store.")

    def delete(self, document_name: Optional[str]) -> SimpleResult:
        return Result.error(message=f"The '{document_name}' document cannot be deleted from the '{self._name}' documents store.")


@pytest.fixture
def sample_document():
    """A small document with three bytes of content"""
    return Document(TEST_DOCUMENT_NAME, bytes([1, 2, 3]))


@pytest.fixture
def memory_store():
    """An empty, closed in-memory store"""
    return InMemoryDocumentsStore(TEST_STORE_NAME)


@pytest.fixture
def memory_store_with_document(memory_store, sample_document):
    """An opened in-memory store holding the sample document"""
    assert memory_store.open().success
    assert memory_store.save(sample_document).success
    return memory_store


@pytest.fixture
def disk_location(tmp_path):
    """Scratch directory used as the on-disk store location"""
    location = tmp_path / "stores"
    location.mkdir()
    return location


@pytest.fixture
def disk_store(disk_location):
    """An empty, closed on-disk store"""
    return OnDiskDocumentsStore(TEST_STORE_NAME, disk_location)


@pytest.fixture
def disk_store_with_document(disk_store, sample_document):
    """An opened on-disk store holding the sample document"""
    assert disk_store.open().success
    assert disk_store.save(sample_document).success
    return disk_store


@pytest.fixture(params=["memory", "disk", "archiving"])
def any_store(request, disk_location):
    """An empty, closed store of every kind"""
    if request.param == "memory":
        return InMemoryDocumentsStore(TEST_STORE_NAME)
    if request.param == "disk":
        return OnDiskDocumentsStore(TEST_STORE_NAME, disk_location)
    return ArchivingDocumentsStore(
        InMemoryDocumentsStore(TEST_STORE_NAME),
        InMemoryDocumentsStore("test-archive")
    )


@pytest.fixture
def failing_store():
    """A closed store that fails every operation"""
    return FailingDocumentsStore("failing-store")

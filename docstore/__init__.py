"""Pluggable documents stores: in-memory, on-disk and archiving."""

from docstore.exceptions import (
    DocumentsStoreException,
    InvalidArgumentError,
    NullArgumentError,
    ConfigurationError,
    StorageError,
)
from docstore.models import Document, Result, SimpleResult
from docstore.storage.base import DocumentsStore
from docstore.storage.memory import InMemoryDocumentsStore
from docstore.storage.local import OnDiskDocumentsStore
from docstore.storage.archiving import ArchivingDocumentsStore
from docstore.storage.factory import StoreFactory

__all__ = [
    'DocumentsStoreException',
    'InvalidArgumentError',
    'NullArgumentError',
    'ConfigurationError',
    'StorageError',
    'Document',
    'Result',
    'SimpleResult',
    'DocumentsStore',
    'InMemoryDocumentsStore',
    'OnDiskDocumentsStore',
    'ArchivingDocumentsStore',
    'StoreFactory',
]

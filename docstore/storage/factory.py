"""
Factory for creating documents stores.
"""

from pathlib import Path
from typing import Dict, Optional, Type, Union

from loguru import logger

from docstore.core.config import Settings, get_settings
from docstore.exceptions import ConfigurationError
from docstore.storage.archiving import ArchivingDocumentsStore
from docstore.storage.base import DocumentsStore
from docstore.storage.local import OnDiskDocumentsStore
from docstore.storage.memory import InMemoryDocumentsStore


class StoreFactory:
    """
    Factory for creating documents stores by backend kind.
    """

    # Registry of stores by backend kind
    _stores: Dict[str, Type[DocumentsStore]] = {
        'memory': InMemoryDocumentsStore,
        'disk': OnDiskDocumentsStore,
    }

    # Backends constructed with a location argument
    _located = {'disk'}

    @classmethod
    def create(cls, kind: str, name: str, location: Optional[Union[str, Path]] = None) -> DocumentsStore:
        """
        Create a closed documents store.

        Args:
            kind: Backend kind (e.g., 'memory', 'disk').
            name: Store name.
            location: Parent directory, required by located backends.

        Returns:
            DocumentsStore: New, closed store.

        Raises:
            ConfigurationError: If the kind is unknown or the store arguments are invalid.
        """
        kind = kind.lower()
        store_class = cls._stores.get(kind)

        if store_class is None:
            raise ConfigurationError(
                f"Unknown store kind: {kind}. "
                f"Available kinds: {', '.join(cls._stores.keys())}",
                config_key="kind"
            )

        if kind in cls._located:
            store = store_class(name, location)
        else:
            store = store_class(name)

        logger.debug(f"Created store: {store!r}")
        return store

    @classmethod
    def create_archiving(cls, kind: str, name: str, archive_name: str,
                         location: Optional[Union[str, Path]] = None) -> ArchivingDocumentsStore:
        """
        Create an archiving store over two stores of the same kind.

        Args:
            kind: Backend kind of both stores.
            name: Master store name.
            archive_name: Archive store name.
            location: Parent directory, required by located backends.

        Returns:
            ArchivingDocumentsStore: New, closed composite store.
        """
        if name == archive_name:
            raise ConfigurationError(
                f"The archive store must differ from the master store '{name}'.",
                config_key="archive_name"
            )

        master = cls.create(kind, name, location)
        archive = cls.create(kind, archive_name, location)
        return ArchivingDocumentsStore(master, archive)

    @classmethod
    def from_settings(cls, settings: Settings = None) -> DocumentsStore:
        """
        Create the store described by the settings.

        Args:
            settings: Settings to use. If None, uses the global settings.

        Returns:
            DocumentsStore: New, closed store; archiving when an archive store name is configured.
        """
        if settings is None:
            settings = get_settings()

        if settings.archiving_enabled:
            return cls.create_archiving(
                settings.STORAGE_BACKEND,
                settings.STORE_NAME,
                settings.ARCHIVE_STORE_NAME,
                settings.STORAGE_LOCATION,
            )

        return cls.create(settings.STORAGE_BACKEND, settings.STORE_NAME, settings.STORAGE_LOCATION)

    @classmethod
    def register_store(cls, kind: str, store_class: Type[DocumentsStore], located: bool = False) -> None:
        """
        Register a new store backend.

        Args:
            kind: Backend kind name.
            store_class: Store class for this kind.
            located: Whether the class takes a location argument.
        """
        kind = kind.lower()
        cls._stores[kind] = store_class
        if located:
            cls._located.add(kind)
        else:
            cls._located.discard(kind)
        logger.info(f"Registered store for {kind}: {store_class.__name__}")

    @classmethod
    def supported_kinds(cls) -> list:
        """
        Get list of supported backend kinds.

        Returns:
            list: List of registered kinds.
        """
        return list(cls._stores.keys())

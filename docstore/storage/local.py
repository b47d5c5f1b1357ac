"""
Local filesystem documents store implementation.
"""

import os
import tempfile
from pathlib import Path
from typing import Iterator, Optional

from loguru import logger

from docstore.exceptions import ConfigurationError, StorageError
from docstore.models.document import Document
from docstore.models.result import Result, SimpleResult
from docstore.storage.base import DocumentsStore
from docstore.utils.validation import check_directory_path, validate_document_name


def _current_umask() -> int:
    """Read the process umask (os.umask can only be read by setting it)."""
    mask = os.umask(0)
    os.umask(mask)
    return mask


class OnDiskDocumentsStore(DocumentsStore):
    """
    Local filesystem-based documents store.

    Stores documents in a directory structure:
    {location}/{name}/
        - {document name} (raw document content)
        - ...
    """

    def __init__(self, name: str, location):
        """
        Initialize on-disk store. Nothing is created until the store is opened.

        Args:
            name: Store name, also the name of the store directory.
            location: Directory that holds the store directory.

        Raises:
            ConfigurationError: If the name or location is missing or invalid.
        """
        if not name:
            raise ConfigurationError("A documents store name expected.", config_key="name")
        if location is None or not str(location).strip():
            raise ConfigurationError("A documents store location expected.", config_key="location")

        check_directory_path(name, "documents store name")
        check_directory_path(str(location), "documents store location")

        self._name = name
        self.location = Path(location)
        self._is_opened = False
        logger.debug(f"Initialized OnDiskDocumentsStore '{name}' at {self.location}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def store_path(self) -> Path:
        """Get the directory holding the store's documents."""
        return self.location / self._name

    def _get_document_path(self, document_name: str) -> Path:
        """Get the path to a document file."""
        return self.store_path / document_name

    @staticmethod
    def _is_file(path: Path) -> bool:
        """Like Path.is_file, but False for any OSError (e.g. a name too long)."""
        try:
            return path.is_file()
        except OSError as e:
            logger.debug(f"Cannot stat {path}: {e}")
            return False

    @staticmethod
    def _exists(path: Path) -> bool:
        try:
            return path.exists()
        except OSError as e:
            logger.debug(f"Cannot stat {path}: {e}")
            return False

    @property
    def count(self) -> int:
        """
        Number of document files in the store directory.

        Raises:
            StorageError: If the directory cannot be listed.
        """
        if not self._is_opened or not self.store_path.is_dir():
            return 0
        try:
            return sum(1 for entry in self.store_path.iterdir() if entry.is_file())
        except OSError as e:
            raise StorageError(
                f"Failed to count documents: {e}",
                operation="count",
                path=str(self.store_path)
            ) from e

    @property
    def is_opened(self) -> bool:
        return self._is_opened

    @property
    def documents(self) -> Iterator[Document]:
        return self._iter_documents()

    def _iter_documents(self) -> Iterator[Document]:
        """
        Yield documents read from the store directory.

        A file removed between listing and reading is skipped.

        Raises:
            StorageError: If the directory or a file cannot be read.
        """
        if not self._is_opened or not self.store_path.is_dir():
            return

        try:
            entries = sorted(self.store_path.iterdir())
        except OSError as e:
            raise StorageError(
                f"Failed to list documents: {e}",
                operation="documents",
                path=str(self.store_path)
            ) from e

        for entry in entries:
            if not entry.is_file():
                continue
            try:
                content = entry.read_bytes()
            except FileNotFoundError:
                logger.warning(f"Document {entry.name} disappeared during enumeration, skipping")
                continue
            except OSError as e:
                raise StorageError(
                    f"Failed to read document {entry.name}: {e}",
                    operation="documents",
                    path=str(entry)
                ) from e
            yield Document(entry.name, content)

    def open(self) -> SimpleResult:
        if self._is_opened:
            return Result.ok(message=f"The '{self._name}' documents store is already opened.")

        store_path = self.store_path
        if store_path.is_dir():
            self._is_opened = True
            logger.info(f"Opened documents store '{self._name}' at {store_path}")
            return Result.ok(message=f"The documents store directory '{store_path}' found and will be used.")

        try:
            store_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Failed to create directory for documents store '{self._name}': {e}")
            return Result.error(message=f"The '{self._name}' documents store cannot be opened with an exception '{e}'.")

        self._is_opened = True
        logger.info(f"Created documents store '{self._name}' at {store_path}")
        return Result.ok(
            message=f"A new '{store_path}' working directory for the '{self._name}' documents store created successfully."
        )

    def close(self) -> None:
        self._is_opened = False

    def has_document(self, document_name: Optional[str]) -> bool:
        return (
            self._is_opened
            and validate_document_name(document_name).success
            and self._is_file(self._get_document_path(document_name))
        )

    def load(self, document_name: Optional[str]) -> Result[Document]:
        name_check = validate_document_name(document_name)
        if not name_check.success:
            return Result.error(message=name_check.message)

        if not self._is_opened:
            return self.not_opened_error()

        document_path = self._get_document_path(document_name)

        if not self._is_file(document_path):
            return Result.error(message=f"A document with name '{document_name}' not found.")

        try:
            document = Document(document_name, document_path.read_bytes())
        except OSError as e:
            logger.warning(f"Failed to load document '{document_name}': {e}")
            return Result.error(
                message=f"A document with the '{document_name}' name cannot be loaded with an exception '{e}'."
            )

        logger.debug(f"Loaded document: {document_name}")
        return Result.ok(document, message=f"A document with name '{document_name}' loaded from the '{document_path}' file.")

    def save(self, document: Optional[Document]) -> SimpleResult:
        if document is None:
            return Result.error(message="A document expected.")

        name_check = validate_document_name(document.name)
        if not name_check.success:
            return name_check

        if not self._is_opened:
            return self.not_opened_error()

        document_path = self._get_document_path(document.name)

        try:
            self._write_atomic(document_path, document.content)
        except OSError as e:
            logger.warning(f"Failed to save document '{document.name}': {e}")
            return Result.error(
                message=f"A document with the '{document.name}' name cannot be saved with an exception '{e}'."
            )

        logger.debug(f"Saved document: {document.name}")
        return Result.ok(
            message=f"A document with the '{document.name}' name successfully saved into the "
                    f"'{document_path}' file in the '{self._name}' documents store."
        )

    def _write_atomic(self, document_path: Path, content: bytes) -> None:
        """
        Write content to a temporary file, then move it over the document file.

        The temporary file lives in the store location, outside the store
        directory, so enumeration never sees it. mkstemp creates it with mode
        0600; it gets the umask default before the move so saved documents
        carry the same permissions as a plain open().
        """
        fd, temp_name = tempfile.mkstemp(prefix=".docstore-", suffix=".tmp", dir=self.location)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
            os.chmod(temp_name, 0o666 & ~_current_umask())
            os.replace(temp_name, document_path)
        except OSError:
            try:
                os.unlink(temp_name)
            except FileNotFoundError:
                pass
            raise

    def rename(self, document_name: Optional[str], new_document_name: Optional[str]) -> SimpleResult:
        name_check = validate_document_name(document_name)
        if not name_check.success:
            return name_check

        new_name_check = validate_document_name(new_document_name, "A new document name expected.")
        if not new_name_check.success:
            return new_name_check

        if not self._is_opened:
            return self.not_opened_error()

        document_path = self._get_document_path(document_name)
        if not self._is_file(document_path):
            return Result.error(message=f"A document with the '{document_name}' name not found or cannot be accessed.")

        new_document_path = self._get_document_path(new_document_name)
        if self._exists(new_document_path):
            return Result.error(message=f"A document with the '{new_document_name}' name already exists.")

        try:
            document_path.rename(new_document_path)
        except OSError as e:
            logger.warning(f"Failed to rename document '{document_name}': {e}")
            return Result.error(
                message=f"A document with the '{document_name}' name cannot be renamed with an exception '{e}'."
            )

        logger.debug(f"Renamed document '{document_name}' to '{new_document_name}'")
        return Result.ok(message=f"A document with name '{document_name}' renamed to '{new_document_name}' successfully.")

    def delete(self, document_name: Optional[str]) -> SimpleResult:
        name_check = validate_document_name(document_name)
        if not name_check.success:
            return name_check

        if not self._is_opened:
            return self.not_opened_error()

        document_path = self._get_document_path(document_name)
        if not self._is_file(document_path):
            return Result.error(message=f"A document with the '{document_name}' name not found or cannot be accessed.")

        try:
            document_path.unlink()
        except OSError as e:
            logger.warning(f"Failed to delete document '{document_name}': {e}")
            return Result.error(
                message=f"The document with the '{document_name}' name cannot be deleted with an exception '{e}'."
            )

        logger.info(f"Deleted document: {document_name}")
        return Result.ok(message=f"A document with the '{document_name}' name successfully deleted.")

    def __repr__(self) -> str:
        return f"OnDiskDocumentsStore(name={self._name!r}, location={str(self.location)!r}, opened={self._is_opened})"

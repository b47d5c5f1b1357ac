"""
Custom exceptions for docstore.

Runtime data conditions (missing documents, closed stores, I/O failures) are
reported through Result values. The exceptions below are reserved for
programming and setup errors.
"""


class DocumentsStoreException(Exception):
    """Base exception for all docstore errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class InvalidArgumentError(DocumentsStoreException, ValueError):
    """Raised when a constructor argument is missing or invalid."""

    def __init__(self, message: str, argument: str = None):
        self.argument = argument
        full_message = message
        if argument:
            full_message = f"{message} (argument: {argument})"
        super().__init__(full_message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, argument={self.argument!r})"


class NullArgumentError(InvalidArgumentError):
    """Raised when a required argument is None."""

    def __init__(self, argument: str):
        super().__init__("A value expected, got None", argument=argument)


class ConfigurationError(DocumentsStoreException):
    """Raised when a store is configured with an invalid name, location or kind."""

    def __init__(self, message: str, config_key: str = None):
        self.config_key = config_key
        full_message = message
        if config_key:
            full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(full_message)

    def __repr__(self) -> str:
        return f"ConfigurationError(message={self.message!r}, config_key={self.config_key!r})"


class StorageError(DocumentsStoreException):
    """Raised when documents enumeration hits an unrecoverable I/O failure."""

    def __init__(self, message: str, operation: str = None, path: str = None):
        self.operation = operation
        self.path = path
        full_message = message
        if operation:
            full_message = f"[{operation}] {message}"
        if path:
            full_message = f"{full_message} (path: {path})"
        super().__init__(full_message)

    def __repr__(self) -> str:
        return f"StorageError(message={self.message!r}, operation={self.operation!r}, path={self.path!r})"

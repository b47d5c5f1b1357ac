"""
Name and path validation for filesystem-backed stores.
"""
import os
from typing import FrozenSet, Optional

from docstore.exceptions import ConfigurationError
from docstore.models.result import Result, SimpleResult

# Wildcards are rejected on every platform
WILDCARD_CHARS = frozenset("*?")

_CONTROL_CHARS = frozenset(chr(c) for c in range(32))

if os.name == "nt":
    INVALID_PATH_CHARS: FrozenSet[str] = frozenset('|"<>') | _CONTROL_CHARS
    INVALID_FILE_NAME_CHARS: FrozenSet[str] = frozenset('<>:"/\\|') | _CONTROL_CHARS
else:
    INVALID_PATH_CHARS = frozenset("\0")
    INVALID_FILE_NAME_CHARS = frozenset("\0/")


def find_invalid_char(value: str, invalid_chars: FrozenSet[str]) -> Optional[str]:
    """Return the first character of `value` that is wildcard or in `invalid_chars`."""
    for c in value:
        if c in WILDCARD_CHARS or c in invalid_chars:
            return c
    return None


def validate_document_name(document_name: Optional[str], expected_message: str = "A document name expected.") -> SimpleResult:
    """
    Check that a document name can be used as a file name.

    Args:
        document_name: Name to check
        expected_message: Message reported for a missing or blank name

    Returns:
        Successful result carrying the name, or a failed result
        describing the first problem found
    """
    if document_name is None or not document_name.strip():
        return Result.error(message=expected_message)

    invalid = find_invalid_char(document_name, INVALID_FILE_NAME_CHARS)
    if invalid is not None:
        return Result.error(message=f"Invalid char {invalid!r} in the '{document_name}' document name found.")

    return Result.ok(document_name, message=document_name)


def check_directory_path(path: str, checked_value_name: str) -> None:
    """
    Validate a store name or location.

    Raises:
        ConfigurationError: If the path contains an invalid character
    """
    invalid = find_invalid_char(path, INVALID_PATH_CHARS)
    if invalid is not None:
        raise ConfigurationError(
            f"Invalid char {invalid!r} in {checked_value_name} '{path}' found.",
            config_key=checked_value_name
        )

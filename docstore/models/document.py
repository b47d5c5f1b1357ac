"""
Document data model.
"""

from dataclasses import dataclass

from docstore.exceptions import InvalidArgumentError, NullArgumentError


@dataclass(frozen=True)
class Document:
    """A named, immutable chunk of binary content."""

    name: str
    content: bytes

    def __post_init__(self):
        """Validate arguments and freeze the content."""
        if not self.name:
            raise InvalidArgumentError("A document name expected.", argument="name")
        if self.content is None:
            raise NullArgumentError("content")
        if not isinstance(self.content, bytes):
            object.__setattr__(self, "content", bytes(self.content))

    @classmethod
    def empty(cls) -> "Document":
        """Create an empty document."""
        return cls("empty", b"")

    @property
    def size(self) -> int:
        return len(self.content)

    def __repr__(self) -> str:
        return f"Document(name={self.name!r}, size={self.size})"

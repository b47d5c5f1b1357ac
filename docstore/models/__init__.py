"""Data models for docstore."""

from docstore.models.document import Document
from docstore.models.result import Result, SimpleResult

__all__ = ['Document', 'Result', 'SimpleResult']

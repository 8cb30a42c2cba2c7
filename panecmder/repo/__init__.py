"""Repository adapters serving pane listings and file content."""

from .base import ENTRY_TYPES, RepositoryAdapter, SupportsPassword
from .localfs import LocalRepository
from .paths import get_file_name, get_file_path

__all__ = [
    "ENTRY_TYPES",
    "LocalRepository",
    "RepositoryAdapter",
    "SupportsPassword",
    "get_file_name",
    "get_file_path",
]

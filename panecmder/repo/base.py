"""Repository contract every pane backend satisfies.

Adapters are plain classes matching :class:`RepositoryAdapter` structurally;
there is no shared base class. Failures are reported by raising the
exceptions in :mod:`panecmder.errors`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..model.types import Item, ItemConfig, ItemType

ENTRY_TYPES = (ItemType.NONE, ItemType.FILE, ItemType.DIRECTORY)


@runtime_checkable
class RepositoryAdapter(Protocol):
    """Operations the browser core needs from a backend."""

    def get_initial_location(self) -> ItemConfig:
        """Return the location shown when the pane is first loaded."""
        ...

    def get_list(self, location: ItemConfig) -> list[Item]:
        """List ``location``; the ``..`` entry (when any) comes first."""
        ...

    def get_file(self, location: ItemConfig, name: str) -> bytes:
        ...

    def update_file(self, location: ItemConfig, name: str, data: bytes) -> bool:
        """Create or overwrite ``name``; ``False`` means the backend refused."""
        ...

    def create_directory(self, location: ItemConfig, name: str) -> bool:
        ...

    def delete(self, location: ItemConfig, name: str) -> bool:
        """Delete a file or a directory with all of its content."""
        ...

    def get_entry_type(self, location: ItemConfig, name: str) -> ItemType:
        """Return one of ``ItemType.NONE``, ``ItemType.FILE``, ``ItemType.DIRECTORY``."""
        ...

    def is_empty_directory(self, location: ItemConfig, name: str) -> bool:
        ...

    def get_display_title(self, location: ItemConfig) -> str:
        ...


@runtime_checkable
class SupportsPassword(Protocol):
    """Optional capability of backends that raise ``AuthenticationRequired``."""

    def set_password(self, location: ItemConfig, password: str) -> None:
        ...


__all__ = ["ENTRY_TYPES", "RepositoryAdapter", "SupportsPassword"]

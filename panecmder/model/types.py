"""Domain datatypes shared by both panes and every repository adapter.

``ItemConfig`` identifies a browsable location, ``Item`` is one listed row.
Locations are frozen so a pane can keep its parent chain without aliasing.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum

PARENT_DIR_NAME = ".."


class Side(IntEnum):
    """Pane address; usable as an index into two-element sequences."""

    LEFT = 0
    RIGHT = 1

    @property
    def other(self) -> Side:
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class ItemType(Enum):
    """Kind of listed item, rendered as a single character."""

    FILE = "f"
    DIRECTORY = "d"
    APPLIANCE_CONFIGURATION = "A"
    DOMAIN = "D"
    FILESTORE = "F"
    NONE = "-"

    def __str__(self) -> str:
        return self.value

    @property
    def user_friendly(self) -> str:
        return _USER_FRIENDLY_NAMES[self]

    @property
    def is_container(self) -> bool:
        """Return whether the item can be entered to list its children."""
        return self is not ItemType.FILE


_USER_FRIENDLY_NAMES = {
    ItemType.FILE: "file",
    ItemType.DIRECTORY: "directory",
    ItemType.APPLIANCE_CONFIGURATION: "appliance configuration",
    ItemType.DOMAIN: "domain",
    ItemType.FILESTORE: "filestore",
    ItemType.NONE: "-",
}


@dataclass(frozen=True)
class ItemConfig:
    """Location of a file, directory, appliance, domain or filestore.

    Equality and hashing only look at ``path`` and the backend qualifiers.
    ``type``, ``name`` and ``parent`` describe how the location was reached and
    are ignored, so a location re-listed after a refresh still compares equal.
    """

    type: ItemType = field(default=ItemType.NONE, compare=False)
    name: str = field(default="", compare=False)
    path: str = ""
    appliance: str = ""
    domain: str = ""
    filestore: str = ""
    parent: ItemConfig | None = field(default=None, compare=False, repr=False)

    def child(self, item_type: ItemType, name: str, path: str) -> ItemConfig:
        """Return a location below this one sharing its backend qualifiers."""
        return replace(self, type=item_type, name=name, path=path, parent=self)

    def __str__(self) -> str:
        qualifiers = "/".join(part for part in (self.appliance, self.domain, self.filestore) if part)
        if qualifiers:
            return f"{self.type}:{qualifiers}:{self.path}"
        return f"{self.type}:{self.path}"


@dataclass
class Item:
    """One listed row: display metadata plus the location it points to."""

    name: str
    config: ItemConfig
    size: str = ""
    modified: str = ""
    selected: bool = False

    @property
    def type(self) -> ItemType:
        return self.config.type

    @property
    def is_parent_link(self) -> bool:
        return self.name == PARENT_DIR_NAME

    def display_string(self) -> str:
        """Return the row text used for rendering, filtering and searching."""
        return f"{self.config.type} {self.size:>10} {self.modified:>19} {self.name}"


__all__ = [
    "PARENT_DIR_NAME",
    "Side",
    "ItemType",
    "ItemConfig",
    "Item",
]

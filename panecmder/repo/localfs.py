"""Local filesystem repository adapter."""

from __future__ import annotations

import logging
import os
import shutil
import stat
import time
from pathlib import Path

from ..errors import BackendIOError, NotFoundError, ValidationError
from ..model.types import PARENT_DIR_NAME, Item, ItemConfig, ItemType
from .paths import get_file_path

MODIFIED_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


def _format_modified(mtime: float) -> str:
    return time.strftime(MODIFIED_FORMAT, time.localtime(mtime))


def _sort_key(item: Item) -> tuple[int, int, str]:
    """``..`` first, then directories, then files, each by folded name."""
    if item.is_parent_link:
        return (0, 0, "")
    kind = 0 if item.type is ItemType.DIRECTORY else 1
    return (1, kind, item.name.casefold())


class LocalRepository:
    """Browse and modify directories on the local machine."""

    name = "local filesystem"

    def __init__(self, initial_path: str | os.PathLike[str] = ".") -> None:
        self.initial_path = Path(initial_path)

    def __repr__(self) -> str:
        return f"LocalRepository({str(self.initial_path)!r})"

    def location_for_path(self, dir_path: str) -> ItemConfig:
        """Return a directory location whose parent snapshot points one level up."""
        parent = None
        if dir_path != os.sep:
            parent = ItemConfig(type=ItemType.DIRECTORY, path=get_file_path(dir_path, PARENT_DIR_NAME))
        return ItemConfig(type=ItemType.DIRECTORY, path=dir_path, parent=parent)

    def get_initial_location(self) -> ItemConfig:
        try:
            dir_path = str(self.initial_path.resolve())
        except OSError as exc:
            raise BackendIOError(f"Can't resolve initial path '{self.initial_path}': {exc}") from exc
        if not os.path.isdir(dir_path):
            raise ValidationError(f"Given path '{dir_path}' is not directory.")
        logger.debug("get_initial_location(), path: %s", dir_path)
        return self.location_for_path(dir_path)

    def get_display_title(self, location: ItemConfig) -> str:
        return location.path

    def get_list(self, location: ItemConfig) -> list[Item]:
        dir_path = location.path
        if not dir_path:
            raise ValidationError("Can't list location without a path.")
        logger.debug("get_list(%s)", dir_path)
        items: list[Item] = []
        try:
            with os.scandir(dir_path) as entries:
                for child in entries:
                    try:
                        is_dir = child.is_dir()
                        child_stat = child.stat()
                        size = str(child_stat.st_size)
                        modified = _format_modified(child_stat.st_mtime)
                    except OSError:
                        # Dangling symlinks and races with deletion.
                        is_dir = False
                        size = ""
                        modified = ""
                    item_type = ItemType.DIRECTORY if is_dir else ItemType.FILE
                    items.append(
                        Item(
                            name=child.name,
                            size=size,
                            modified=modified,
                            config=location.child(item_type, child.name, get_file_path(dir_path, child.name)),
                        )
                    )
        except FileNotFoundError as exc:
            raise NotFoundError(f"Directory '{dir_path}' not found.") from exc
        except OSError as exc:
            raise BackendIOError(f"Can't list directory '{dir_path}': {exc}") from exc

        if dir_path != os.sep:
            parent_config = location.parent or ItemConfig(
                type=ItemType.DIRECTORY, path=get_file_path(dir_path, PARENT_DIR_NAME)
            )
            items.append(Item(name=PARENT_DIR_NAME, config=self.location_for_path(parent_config.path)))
        items.sort(key=_sort_key)
        return items

    def _path(self, location: ItemConfig, name: str) -> str:
        if not name or name in {".", PARENT_DIR_NAME} or os.sep in name:
            raise ValidationError(f"Invalid entry name '{name}'.")
        return get_file_path(location.path, name)

    def get_file(self, location: ItemConfig, name: str) -> bytes:
        file_path = self._path(location, name)
        try:
            return Path(file_path).read_bytes()
        except FileNotFoundError as exc:
            raise NotFoundError(f"File '{file_path}' not found.") from exc
        except OSError as exc:
            raise BackendIOError(f"Can't read file '{file_path}': {exc}") from exc

    def update_file(self, location: ItemConfig, name: str, data: bytes) -> bool:
        file_path = self._path(location, name)
        try:
            Path(file_path).write_bytes(data)
        except OSError as exc:
            raise BackendIOError(f"Can't update file '{name}' on path '{location.path}': {exc}") from exc
        return True

    def create_directory(self, location: ItemConfig, name: str) -> bool:
        dir_path = self._path(location, name)
        try:
            mode = stat.S_IMODE(os.stat(location.path).st_mode)
            os.mkdir(dir_path, mode)
        except OSError as exc:
            raise BackendIOError(f"Can't create directory '{dir_path}': {exc}") from exc
        return True

    def delete(self, location: ItemConfig, name: str) -> bool:
        entry_path = self._path(location, name)
        entry_type = self.get_entry_type(location, name)
        try:
            if entry_type is ItemType.DIRECTORY:
                shutil.rmtree(entry_path)
            elif entry_type is ItemType.FILE:
                os.remove(entry_path)
            else:
                raise NotFoundError(f"Entry '{entry_path}' not found.")
        except OSError as exc:
            raise BackendIOError(f"Can't delete '{entry_path}': {exc}") from exc
        return True

    def get_entry_type(self, location: ItemConfig, name: str) -> ItemType:
        entry_path = self._path(location, name)
        try:
            entry_stat = os.stat(entry_path)
        except FileNotFoundError:
            return ItemType.NONE
        except OSError as exc:
            raise BackendIOError(f"Can't get type of '{entry_path}': {exc}") from exc
        if stat.S_ISDIR(entry_stat.st_mode):
            return ItemType.DIRECTORY
        return ItemType.FILE

    def is_empty_directory(self, location: ItemConfig, name: str) -> bool:
        dir_path = self._path(location, name)
        try:
            with os.scandir(dir_path) as entries:
                return next(entries, None) is None
        except NotADirectoryError:
            return False
        except OSError as exc:
            raise BackendIOError(f"Can't read directory '{dir_path}': {exc}") from exc

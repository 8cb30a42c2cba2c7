"""Recursive copy of pane items between two repositories.

Directories are created on the destination before their children are listed
and copied. Each operand (and each descendant) fails on its own: an error is
recorded as a status message and the remaining items are still copied.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .errors import BackendIOError, CommanderError, TargetTypeConflictError, ValidationError
from .model import Item, ItemConfig, ItemType, Model, Side
from .navigation import refresh_side
from .repo.base import RepositoryAdapter
from .repo.paths import get_file_path

MAX_COPY_DEPTH = 64

logger = logging.getLogger(__name__)


class OverwriteDecision(Enum):
    """Answer to an overwrite question; the ``-all`` variants last for the batch."""

    YES_ONCE = "y"
    YES_ALL = "ya"
    NO_ONCE = "n"
    NO_ALL = "na"

    @property
    def is_yes(self) -> bool:
        return self in (OverwriteDecision.YES_ONCE, OverwriteDecision.YES_ALL)

    @property
    def applies_to_all(self) -> bool:
        return self in (OverwriteDecision.YES_ALL, OverwriteDecision.NO_ALL)


def parse_overwrite_answer(answer: str | None) -> OverwriteDecision:
    """Map prompt text to a decision; unknown text and ``None`` mean no-once."""
    if answer is None:
        return OverwriteDecision.NO_ONCE
    try:
        return OverwriteDecision(answer.strip().lower())
    except ValueError:
        return OverwriteDecision.NO_ONCE


@dataclass
class CopyReport:
    """Outcome counters of one copy invocation."""

    created_dirs: list[str] = field(default_factory=list)
    copied_files: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)


class CopyOrchestrator:
    """Copies selected-or-current items from one pane's repository to the other's.

    ``confirm_overwrite`` receives the question text and returns the user's
    decision; a canceled prompt should be reported as ``NO_ONCE``.
    """

    def __init__(
        self,
        model: Model,
        repos: Sequence[RepositoryAdapter],
        confirm_overwrite: Callable[[str], OverwriteDecision],
    ) -> None:
        self.model = model
        self.repos = repos
        self.confirm_overwrite = confirm_overwrite
        self._batch_decision: OverwriteDecision | None = None
        self._from_repo: RepositoryAdapter | None = None
        self._to_repo: RepositoryAdapter | None = None
        self._report = CopyReport()
        self._dest_locations: set[ItemConfig] = set()

    def run(self, from_side: Side | None = None, to_side: Side | None = None) -> CopyReport:
        """Copy items of ``from_side`` into the location shown on ``to_side``."""
        if from_side is None:
            from_side = self.model.curr_side
        if to_side is None:
            to_side = from_side.other
        from_location = self.model.view_config(from_side)
        to_location = self.model.view_config(to_side)
        if from_location is None or to_location is None:
            raise ValidationError("Both panes must show a location before copying.")

        items = self.model.get_selected_or_current(from_side)
        self._batch_decision = None
        self._from_repo = self.repos[from_side]
        self._to_repo = self.repos[to_side]
        self._report = CopyReport()
        # Locations written by this batch; a source directory among them would be
        # copied into itself.
        self._dest_locations = {to_location} if self._shares_namespace() else set()

        self._status(
            f"Copy from '{from_location.path}' to '{to_location.path}', "
            f"items: {[item.name for item in items]}"
        )
        for item in items:
            if item.is_parent_link:
                continue
            self._copy_item(from_location, to_location, item, depth=0)

        try:
            refresh_side(self.model, to_side, self._to_repo)
        except CommanderError as exc:
            self._status(str(exc))
        return self._report

    def _status(self, message: str) -> None:
        self.model.add_status(message)

    def _fail(self, exc: CommanderError) -> None:
        message = str(exc)
        logger.debug("copy branch failed: %s", message)
        self._report.failures.append(message)
        self._status(message)

    def _shares_namespace(self) -> bool:
        """Return whether both repositories address the same tree of locations."""
        return self._from_repo is self._to_repo or type(self._from_repo) is type(self._to_repo)

    def _copy_item(self, from_location: ItemConfig, to_location: ItemConfig, item: Item, depth: int) -> None:
        try:
            if item.type is ItemType.DIRECTORY:
                self._copy_directory(to_location, item, depth)
            elif item.type is ItemType.FILE:
                self._copy_file(from_location, to_location, item.name)
            else:
                self._report.skipped.append(item.name)
                self._status(
                    f"Only files and directories can be copied, skipping "
                    f"{item.type.user_friendly} '{item.name}'."
                )
        except CommanderError as exc:
            self._fail(exc)

    def _copy_directory(self, to_location: ItemConfig, item: Item, depth: int) -> None:
        name = item.name
        source_location = item.config
        if source_location in self._dest_locations:
            raise ValidationError(f"ERROR: Can't copy directory '{source_location.path}' into itself.")
        if depth >= MAX_COPY_DEPTH:
            raise ValidationError(f"ERROR: Directory '{source_location.path}' is nested too deeply, not copied.")
        to_path = get_file_path(to_location.path, name)
        entry_type = self._to_repo.get_entry_type(to_location, name)
        if entry_type is ItemType.NONE:
            if not self._to_repo.create_directory(to_location, name):
                raise BackendIOError(f"ERROR: Directory '{to_path}' not created.")
            self._report.created_dirs.append(to_path)
            self._status(f"Directory '{to_path}' created.")
        elif entry_type is ItemType.DIRECTORY:
            self._status(f"Directory '{to_path}' already exists.")
        else:
            raise TargetTypeConflictError(
                f"Non dir '{to_path}' exists ({entry_type.user_friendly}), can't create dir."
            )

        dest_location = to_location.child(ItemType.DIRECTORY, name, to_path)
        if self._shares_namespace():
            self._dest_locations.add(dest_location)
        for child in self._from_repo.get_list(source_location):
            if child.is_parent_link:
                continue
            self._copy_item(source_location, dest_location, child, depth + 1)

    def _copy_file(self, from_location: ItemConfig, to_location: ItemConfig, name: str) -> None:
        entry_type = self._to_repo.get_entry_type(to_location, name)
        if entry_type is ItemType.DIRECTORY:
            raise TargetTypeConflictError(
                f"ERROR: File '{name}' could not be copied from '{from_location.path}' "
                f"to '{to_location.path}' - directory with same name exists."
            )
        if entry_type is ItemType.FILE:
            decision = self._overwrite_decision(name, to_location)
            if not decision.is_yes:
                self._report.skipped.append(name)
                self._status(f"Canceled overwrite of '{name}'")
                return
        elif entry_type is not ItemType.NONE:
            raise TargetTypeConflictError(
                f"ERROR: File '{name}' could not be copied to '{to_location.path}' - "
                f"{entry_type.user_friendly} with same name exists."
            )

        data = self._from_repo.get_file(from_location, name)
        if not self._to_repo.update_file(to_location, name, data):
            raise BackendIOError(
                f"ERROR: File '{name}' not copied from '{from_location.path}' to '{to_location.path}'."
            )
        self._report.copied_files.append(get_file_path(to_location.path, name))
        self._status(f"File '{name}' copied from '{from_location.path}' to '{to_location.path}'.")

    def _overwrite_decision(self, name: str, to_location: ItemConfig) -> OverwriteDecision:
        if self._batch_decision is not None:
            return self._batch_decision
        decision = self.confirm_overwrite(
            f"Confirm overwrite of file '{name}' at '{to_location.path}' (y/ya/n/na): "
        )
        if decision.applies_to_all:
            self._batch_decision = decision
        return decision

"""Logical-key action handlers.

Each handler mutates the model, calls the pane repositories or runs an
external program. Errors from the error taxonomy end only the current action
and become the status line; a canceled prompt makes the action a no-op.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from .. import extprogs
from ..config import Config
from ..copying import CopyOrchestrator, OverwriteDecision, parse_overwrite_answer
from ..dialog import DialogResult
from ..errors import (
    AuthenticationRequired,
    BackendIOError,
    CommanderError,
    UserCanceled,
    ValidationError,
)
from ..input import LogicalKey
from ..model import Item, ItemConfig, ItemType, Model, Side
from ..navigation import refresh_side, show_history_view, show_location
from ..repo.base import RepositoryAdapter, SupportsPassword

logger = logging.getLogger(__name__)

T = TypeVar("T")

STATUS_HISTORY_NAME = "status-history.txt"


@dataclass(frozen=True)
class ActionContext:
    """State and bound operations required by the action handlers.

    ``ask(question, answer, masked)`` runs a prompt; ``disable_tui_mode`` and
    ``enable_tui_mode`` hand the terminal to external programs and back.
    """

    model: Model
    repos: Sequence[RepositoryAdapter]
    config: Config
    ask: Callable[[str, str, bool], DialogResult]
    disable_tui_mode: Callable[[], None]
    enable_tui_mode: Callable[[], None]


class ActionHandler:
    """Dispatch logical keys to their handlers."""

    def __init__(self, context: ActionContext) -> None:
        self.context = context
        self.model = context.model
        self._handlers: dict[LogicalKey, Callable[[], bool | None]] = {
            LogicalKey.QUIT: lambda: True,
            LogicalKey.CANCEL: lambda: None,
            LogicalKey.TOGGLE_SIDE: self.model.toggle_side,
            LogicalKey.TOGGLE_SELECT: self.model.toggle_current,
            LogicalKey.UP: self.model.nav_up,
            LogicalKey.DOWN: self.model.nav_down,
            LogicalKey.LEFT: self.model.scroll_left,
            LogicalKey.RIGHT: self.model.scroll_right,
            LogicalKey.PAGE_UP: self.model.nav_pg_up,
            LogicalKey.PAGE_DOWN: self.model.nav_pg_down,
            LogicalKey.HOME: self.model.nav_top,
            LogicalKey.END: self.model.nav_bottom,
            LogicalKey.SELECT_UP: self.select_up,
            LogicalKey.SELECT_DOWN: self.select_down,
            LogicalKey.SELECT_PAGE_UP: self.select_page_up,
            LogicalKey.SELECT_PAGE_DOWN: self.select_page_down,
            LogicalKey.SELECT_HOME: self.select_home,
            LogicalKey.SELECT_END: self.select_end,
            LogicalKey.ACTIVATE: self.enter_current,
            LogicalKey.REFRESH: self.refresh_current,
            LogicalKey.VIEW: self.view_current,
            LogicalKey.EDIT: self.edit_current,
            LogicalKey.COPY: self.copy_current,
            LogicalKey.SET_FILTER: self.set_filter,
            LogicalKey.SEARCH: self.search,
            LogicalKey.SEARCH_NEXT: lambda: self.search_again(forward=True),
            LogicalKey.SEARCH_PREV: lambda: self.search_again(forward=False),
            LogicalKey.CREATE_DIRECTORY: self.create_directory,
            LogicalKey.CREATE_FILE: self.create_file,
            LogicalKey.DELETE: self.delete_selected,
            LogicalKey.SHOW_STATUS_HISTORY: self.show_status_history,
            LogicalKey.VIEW_BACK: lambda: self.navigate_history(forward=False),
            LogicalKey.VIEW_FORWARD: lambda: self.navigate_history(forward=True),
        }

    def handle(self, key: LogicalKey) -> bool:
        """Run the handler for ``key`` and return ``True`` when the app should quit."""
        try:
            return bool(self._handlers[key]())
        except UserCanceled:
            logger.debug("%s canceled by user", key.name)
        except CommanderError as exc:
            logger.debug("%s failed: %s", key.name, exc)
            self.model.add_status(str(exc))
        return False

    # -- helpers -------------------------------------------------------------

    @property
    def side(self) -> Side:
        return self.model.curr_side

    @property
    def repo(self) -> RepositoryAdapter:
        return self.context.repos[self.side]

    def _ask(self, question: str, answer: str = "", masked: bool = False) -> str:
        """Return the submitted answer or raise ``UserCanceled``."""
        result = self.context.ask(question, answer, masked)
        if not result.submitted:
            raise UserCanceled(question)
        return result.answer

    def _decision(self, question: str) -> OverwriteDecision:
        result = self.context.ask(question, "", False)
        return parse_overwrite_answer(result.answer if result.submitted else None)

    def _current_location(self) -> ItemConfig:
        location = self.model.view_config(self.side)
        if location is None:
            raise ValidationError("No location shown in current pane.")
        return location

    def _current_file(self) -> Item:
        item = self.model.current_item()
        if item is None or item.type is not ItemType.FILE:
            raise ValidationError("Only files can be viewed or edited.")
        return item

    def with_password(self, side: Side, operation: Callable[[], T]) -> T:
        """Run ``operation``; on ``AuthenticationRequired`` ask for a password and retry once."""
        try:
            return operation()
        except AuthenticationRequired as exc:
            repo = self.context.repos[side]
            if not isinstance(repo, SupportsPassword):
                raise
            password = self._ask("Please enter password: ", "", True)
            if not password:
                raise UserCanceled("empty password") from exc
            repo.set_password(exc.location, password)
            return operation()

    def _refresh(self, side: Side) -> None:
        self.with_password(side, lambda: refresh_side(self.model, side, self.context.repos[side]))

    # -- selection -----------------------------------------------------------

    def select_up(self) -> None:
        self.model.toggle_current()
        self.model.nav_up()

    def select_down(self) -> None:
        self.model.toggle_current()
        self.model.nav_down()

    def select_page_up(self) -> None:
        self.model.sel_pg_up()
        self.model.nav_pg_up()

    def select_page_down(self) -> None:
        self.model.sel_pg_down()
        self.model.nav_pg_down()

    def select_home(self) -> None:
        self.model.sel_to_top()
        self.model.nav_top()

    def select_end(self) -> None:
        self.model.sel_to_bottom()
        self.model.nav_bottom()

    # -- repository actions --------------------------------------------------

    def load_initial(self, side: Side) -> None:
        """Show the repository's initial location on ``side``."""
        repo = self.context.repos[side]

        def load() -> None:
            show_location(self.model, side, repo, repo.get_initial_location())

        self.with_password(side, load)

    def enter_current(self) -> None:
        item = self.model.current_item()
        if item is None or not item.type.is_container:
            return
        side = self.side
        self.with_password(
            side, lambda: show_location(self.model, side, self.context.repos[side], item.config, item.name)
        )

    def navigate_history(self, forward: bool) -> None:
        side = self.side
        self.with_password(
            side, lambda: show_history_view(self.model, side, self.context.repos[side], forward)
        )

    def refresh_current(self) -> None:
        location = self._current_location()
        self._refresh(self.side)
        self.model.add_status(f"Directory ({location.path}) refreshed.")

    def view_current(self) -> None:
        item = self._current_file()
        location = self._current_location()
        data = self.repo.get_file(location, item.name)
        config = self.context.config
        if config.highlight:
            data = extprogs.highlight_content(item.name, data, config.style)
        extprogs.view(
            config.viewer,
            item.name,
            data,
            self.context.disable_tui_mode,
            self.context.enable_tui_mode,
        )

    def edit_current(self) -> None:
        item = self._current_file()
        location = self._current_location()
        data = self.repo.get_file(location, item.name)
        changed = extprogs.edit(
            self.context.config.editor,
            item.name,
            data,
            self.context.disable_tui_mode,
            self.context.enable_tui_mode,
        )
        if changed is None:
            self.model.add_status(f"File '{item.name}' not changed.")
            return
        if not self.repo.update_file(location, item.name, changed):
            raise BackendIOError(f"ERROR: File '{item.name}' not updated.")
        self.model.add_status(f"File '{item.name}' updated.")
        self._refresh(self.side)

    def copy_current(self) -> None:
        CopyOrchestrator(self.model, self.context.repos, self._decision).run(self.side, self.side.other)

    def _create(self, question: str, item_type: ItemType) -> None:
        location = self._current_location()
        name = self._ask(question).strip()
        if not name:
            return
        if self.repo.get_entry_type(location, name) is not ItemType.NONE:
            raise ValidationError(f"Item '{name}' already exists.")
        if item_type is ItemType.DIRECTORY:
            created = self.repo.create_directory(location, name)
        else:
            created = self.repo.update_file(location, name, b"")
        if not created:
            raise BackendIOError(f"ERROR: {item_type.user_friendly.capitalize()} '{name}' not created.")
        self.model.add_status(f"{item_type.user_friendly.capitalize()} '{name}' created.")
        self._refresh(self.side)
        self.model.set_current_item_by_name(self.side, name)

    def create_directory(self) -> None:
        self._create("Enter directory name: ", ItemType.DIRECTORY)

    def create_file(self) -> None:
        self._create("Enter file name: ", ItemType.FILE)

    def delete_selected(self) -> None:
        location = self._current_location()
        items = self.model.get_selected_or_current(self.side)
        batch: OverwriteDecision | None = None
        for item in items:
            if item.is_parent_link:
                continue
            try:
                kind = item.type.user_friendly
                if batch is None:
                    question = f"Confirm deletion of {kind} '{item.name}' (y/ya/n/na): "
                    if item.type is ItemType.DIRECTORY and not self.repo.is_empty_directory(location, item.name):
                        question = (
                            f"Confirm deletion of non-empty {kind} '{item.name}' "
                            f"and all of its content (y/ya/n/na): "
                        )
                    decision = self._decision(question)
                    if decision.applies_to_all:
                        batch = decision
                else:
                    decision = batch
                if not decision.is_yes:
                    self.model.add_status(f"Canceled deletion of {kind} '{item.name}'.")
                    continue
                if not self.repo.delete(location, item.name):
                    raise BackendIOError(f"ERROR: {kind.capitalize()} '{item.name}' not deleted.")
                self.model.add_status(f"Deleted {kind} '{item.name}'.")
            except CommanderError as exc:
                self.model.add_status(str(exc))
        self._refresh(self.side)

    # -- filter and search ---------------------------------------------------

    def set_filter(self) -> None:
        filter_text = self._ask("Filter by: ", self.model.current_filter())
        self.model.set_current_filter(filter_text)

    def _search(self, forward: bool) -> None:
        search_by = self.model.search_by
        if not search_by:
            return
        found = self.model.search_next(search_by) if forward else self.model.search_prev(search_by)
        if not found:
            self.model.add_status(f"Item '{search_by}' not found.")

    def search(self) -> None:
        self.model.search_by = self._ask("Search by: ")
        self._search(forward=True)

    def search_again(self, forward: bool) -> None:
        if not self.model.search_by:
            self.model.search_by = self._ask("Search by: ")
        self._search(forward)

    # -- status history ------------------------------------------------------

    def show_status_history(self) -> None:
        history = "\n".join(self.model.statuses()) + "\n"
        extprogs.view(
            self.context.config.viewer,
            STATUS_HISTORY_NAME,
            history.encode("utf-8"),
            self.context.disable_tui_mode,
            self.context.enable_tui_mode,
        )

"""Two-pane navigation model.

Owns both :class:`PaneView` objects, the active side, the viewport size, the
status log and the last search string. Navigation, selection and search
operate on the active side; every transition is total and keeps the pane
invariants documented in :mod:`panecmder.model.pane`.
"""

from __future__ import annotations

import logging

from .pane import NO_CURSOR, PaneView
from .status import StatusLog
from .types import Item, ItemConfig, Side

HORIZ_SCROLL_STEP = 10

logger = logging.getLogger(__name__)


class Model:
    """Browsing state of both panes."""

    def __init__(self, item_max_rows: int = 20, cols: int = 80) -> None:
        self.panes: tuple[PaneView, PaneView] = (PaneView(), PaneView())
        self.curr_side = Side.LEFT
        self.item_max_rows = max(1, item_max_rows)
        self.cols = max(1, cols)
        self.search_by = ""
        self.status = StatusLog()

    # -- pane access -------------------------------------------------------

    def pane(self, side: Side) -> PaneView:
        return self.panes[side]

    @property
    def other_side(self) -> Side:
        return self.curr_side.other

    @property
    def current_pane(self) -> PaneView:
        return self.panes[self.curr_side]

    def is_current_side(self, side: Side) -> bool:
        return side == self.curr_side

    def view_config(self, side: Side) -> ItemConfig | None:
        return self.panes[side].location

    def title(self, side: Side) -> str:
        return self.panes[side].title

    # -- view history ------------------------------------------------------

    def set_current_view(self, side: Side, location: ItemConfig, title: str) -> None:
        """Replace the view at the history position.

        Replacing it with a different location drops the views after it.
        """
        pane = self.panes[side]
        pane.title = title
        if not pane.history:
            pane.history.append(location)
            pane.history_idx = 0
        elif len(pane.history) < pane.history_idx + 1:
            pane.history.append(location)
        elif pane.history[pane.history_idx] != location:
            pane.history[pane.history_idx] = location
            del pane.history[pane.history_idx + 1:]
        logger.debug(
            "set_current_view(%s, %s), history size: %d, idx: %d",
            side.name, location, len(pane.history), pane.history_idx,
        )

    def add_next_view(self, side: Side, location: ItemConfig, title: str) -> None:
        """Move to ``location`` as the next view; the previous view is reused when it matches."""
        pane = self.panes[side]
        prev_idx = pane.history_idx - 1
        if 0 <= prev_idx < len(pane.history) and pane.history[prev_idx] == location:
            self.nav_view_back(side)
        else:
            pane.history_idx += 1
        self.set_current_view(side, location, title)

    def nav_view_idx(self, side: Side, idx: int) -> ItemConfig | None:
        pane = self.panes[side]
        pane.history_idx = max(0, min(idx, len(pane.history) - 1))
        return pane.location

    def nav_view_back(self, side: Side) -> ItemConfig | None:
        return self.nav_view_idx(side, self.panes[side].history_idx - 1)

    def nav_view_forward(self, side: Side) -> ItemConfig | None:
        return self.nav_view_idx(side, self.panes[side].history_idx + 1)

    def view_history(self, side: Side) -> list[ItemConfig]:
        return list(self.panes[side].history)

    def view_history_idx(self, side: Side) -> int:
        return self.panes[side].history_idx

    def current_item(self, side: Side | None = None) -> Item | None:
        if side is None:
            side = self.curr_side
        return self.panes[side].current_item()

    def visible_items(self, side: Side) -> list[Item]:
        return self.panes[side].visible_items(self.item_max_rows)

    def visible_item_count(self, side: Side) -> int:
        return self.panes[side].visible_row_count(self.item_max_rows)

    # -- item set and filter -----------------------------------------------

    def set_items(self, side: Side, items: list[Item]) -> None:
        """Replace one pane's items, reapply its filter and re-clamp."""
        logger.debug("set_items(%s), %d items", side.name, len(items))
        self.panes[side].set_items(items, self.item_max_rows)

    def set_filter(self, side: Side, filter_text: str) -> None:
        logger.debug("set_filter(%s, %r)", side.name, filter_text)
        self.panes[side].set_filter(filter_text, self.item_max_rows)

    def set_current_filter(self, filter_text: str) -> None:
        self.set_filter(self.curr_side, filter_text)

    def current_filter(self) -> str:
        return self.current_pane.filter_text

    def resize(self, item_max_rows: int, cols: int) -> None:
        """Apply a new viewport size and keep both cursors visible."""
        self.item_max_rows = max(1, item_max_rows)
        self.cols = max(1, cols)
        for pane in self.panes:
            pane.clamp(self.item_max_rows)

    def set_current_item_by_name(self, side: Side, name: str) -> bool:
        pane = self.panes[side]
        idx = pane.index_of_name(name)
        if idx is None:
            return False
        pane.move_to(idx, self.item_max_rows)
        return True

    def set_current_item_by_config(self, side: Side, config: ItemConfig) -> bool:
        """Put the cursor on the item pointing at ``config``; top when missing."""
        pane = self.panes[side]
        idx = pane.index_of_config(config)
        pane.move_to(0 if idx is None else idx, self.item_max_rows)
        return idx is not None

    # -- cursor movement ---------------------------------------------------

    def _nav(self, side: Side, delta: int) -> None:
        self.panes[side].move(delta, self.item_max_rows)

    def nav_up(self) -> None:
        self._nav(self.curr_side, -1)

    def nav_down(self) -> None:
        self._nav(self.curr_side, 1)

    def nav_pg_up(self) -> None:
        self._nav(self.curr_side, -self.visible_item_count(self.curr_side) + 1)

    def nav_pg_down(self) -> None:
        self._nav(self.curr_side, self.visible_item_count(self.curr_side) - 1)

    def nav_top(self) -> None:
        self.nav_top_for_side(self.curr_side)

    def nav_top_for_side(self, side: Side) -> None:
        self._nav(side, -self.panes[side].count)

    def nav_bottom(self) -> None:
        self._nav(self.curr_side, self.current_pane.count)

    def scroll_left(self) -> None:
        pane = self.current_pane
        pane.horiz_scroll = max(0, pane.horiz_scroll - HORIZ_SCROLL_STEP)

    def scroll_right(self) -> None:
        self.current_pane.horiz_scroll += HORIZ_SCROLL_STEP

    def toggle_side(self) -> None:
        self.curr_side = self.curr_side.other

    # -- selection ---------------------------------------------------------

    def is_selectable(self, side: Side | None = None) -> bool:
        """A pane is selectable once it shows a location and has a current item."""
        if side is None:
            side = self.curr_side
        pane = self.panes[side]
        return pane.location is not None and pane.current_item() is not None

    def toggle_current(self) -> None:
        if not self.is_selectable():
            return
        item = self.current_pane.current_item()
        item.selected = not item.selected

    def _sel_range(self, first_idx: int, last_idx: int) -> None:
        if self.is_selectable():
            self.current_pane.select_range(first_idx, last_idx)

    def sel_pg_up(self) -> None:
        cursor = self.current_pane.cursor
        self._sel_range(cursor - self.visible_item_count(self.curr_side) + 2, cursor)

    def sel_pg_down(self) -> None:
        cursor = self.current_pane.cursor
        self._sel_range(cursor, cursor + self.visible_item_count(self.curr_side) - 2)

    def sel_to_top(self) -> None:
        self._sel_range(0, self.current_pane.cursor)

    def sel_to_bottom(self) -> None:
        self._sel_range(self.current_pane.cursor, self.current_pane.count - 1)

    def get_selected_items(self, side: Side) -> list[Item]:
        return self.panes[side].selected_items()

    def get_selected_or_current(self, side: Side | None = None) -> list[Item]:
        """Return selected items, or the current item alone when none are selected."""
        if side is None:
            side = self.curr_side
        selected = self.get_selected_items(side)
        if selected:
            return selected
        current = self.current_item(side)
        return [current] if current is not None else []

    # -- search ------------------------------------------------------------

    def search_next(self, search_text: str) -> bool:
        """Move to the next item after the cursor containing ``search_text``.

        Never wraps. Returns ``False`` when nothing matched or the cursor
        could not move.
        """
        pane = self.current_pane
        if pane.cursor == NO_CURSOR or not search_text:
            return False
        needle = search_text.lower()
        for idx in range(pane.cursor + 1, pane.count):
            if needle in pane.filtered[idx].display_string().lower():
                pane.move(idx - pane.cursor, self.item_max_rows)
                return True
        return False

    def search_prev(self, search_text: str) -> bool:
        """Move to the previous item before the cursor containing ``search_text``."""
        pane = self.current_pane
        if pane.cursor == NO_CURSOR or not search_text:
            return False
        needle = search_text.lower()
        for idx in range(pane.cursor - 1, -1, -1):
            if needle in pane.filtered[idx].display_string().lower():
                pane.move(idx - pane.cursor, self.item_max_rows)
                return True
        return False

    # -- status ------------------------------------------------------------

    def add_status(self, status: str) -> None:
        self.status.add(status)

    def last_status(self) -> str:
        return self.status.last()

    def statuses(self) -> list[str]:
        return self.status.history()

"""Per-pane browsing state: item set, filter, cursor and scroll window.

Every method keeps three invariants:

* ``cursor`` indexes ``filtered`` or equals :data:`NO_CURSOR` when it is empty;
* ``top`` keeps the cursor row inside the visible window;
* the filtered view always keeps the ``..`` entry and shares ``Item`` objects
  with ``items``, so selection flags survive filter changes.
"""

from __future__ import annotations

from .types import Item, ItemConfig

NO_CURSOR = -1


def matches_filter(item: Item, filter_text: str) -> bool:
    """Return whether ``item`` survives ``filter_text`` (case-insensitive)."""
    if item.is_parent_link or not filter_text:
        return True
    return filter_text.lower() in item.display_string().lower()


class PaneView:
    """One side's visible state."""

    def __init__(self) -> None:
        self.items: list[Item] = []
        self.filter_text = ""
        self.filtered: list[Item] = []
        self.cursor = NO_CURSOR
        self.top = 0
        self.horiz_scroll = 0
        self.history: list[ItemConfig] = []
        self.history_idx = 0
        self.title = ""

    @property
    def location(self) -> ItemConfig | None:
        """Return the view at the history position, or ``None`` before the first one."""
        if 0 <= self.history_idx < len(self.history):
            return self.history[self.history_idx]
        return None

    @property
    def count(self) -> int:
        return len(self.filtered)

    def visible_row_count(self, max_rows: int) -> int:
        """Return how many rows are shown given the viewport height."""
        return max(0, min(max_rows, len(self.filtered)))

    def set_items(self, items: list[Item], max_rows: int) -> None:
        self.items = list(items)
        self.apply_filter(max_rows)

    def set_filter(self, filter_text: str, max_rows: int) -> None:
        self.filter_text = filter_text
        self.apply_filter(max_rows)

    def apply_filter(self, max_rows: int) -> None:
        self.filtered = [item for item in self.items if matches_filter(item, self.filter_text)]
        self.clamp(max_rows)

    def clamp(self, max_rows: int) -> None:
        """Re-establish cursor and window invariants after any mutation."""
        if not self.filtered:
            self.cursor = NO_CURSOR
            self.top = 0
            return
        self.cursor = max(0, min(self.cursor, len(self.filtered) - 1))
        rows = max(1, self.visible_row_count(max_rows))
        max_top = max(0, len(self.filtered) - rows)
        self.top = max(0, min(self.top, max_top))
        if self.cursor < self.top:
            self.top = self.cursor
        elif self.cursor > self.top + rows - 1:
            self.top = self.cursor - rows + 1

    def move(self, delta: int, max_rows: int) -> None:
        """Move the cursor by ``delta`` rows and let the window follow it."""
        if not self.filtered:
            self.cursor = NO_CURSOR
            self.top = 0
            return
        new_cursor = max(0, min(self.cursor + delta, len(self.filtered) - 1))
        rows = max(1, self.visible_row_count(max_rows))
        first_visible = self.top
        last_visible = self.top + rows - 1
        if new_cursor > last_visible:
            self.top = new_cursor - rows + 1
        elif new_cursor < first_visible:
            self.top = new_cursor
        self.cursor = new_cursor

    def move_to(self, idx: int, max_rows: int) -> None:
        if self.cursor == NO_CURSOR:
            self.cursor = 0
        self.move(idx - self.cursor, max_rows)

    def current_item(self) -> Item | None:
        if self.cursor == NO_CURSOR or not self.filtered:
            return None
        return self.filtered[self.cursor]

    def visible_items(self, max_rows: int) -> list[Item]:
        return self.filtered[self.top:self.top + self.visible_row_count(max_rows)]

    def select_range(self, first_idx: int, last_idx: int) -> None:
        """Set every item in the clamped range to the negated current flag.

        The new flag is sampled once from the cursor item before assignment,
        so repeating the same call flips a uniform range back.
        """
        current = self.current_item()
        if current is None:
            return
        new_selected = not current.selected
        first_idx = max(0, first_idx)
        last_idx = min(last_idx, len(self.filtered) - 1)
        for idx in range(first_idx, last_idx + 1):
            self.filtered[idx].selected = new_selected

    def selected_items(self) -> list[Item]:
        """Return selected items of the filtered view, never including ``..``."""
        return [item for item in self.filtered if item.selected and not item.is_parent_link]

    def index_of_name(self, name: str) -> int | None:
        for idx, item in enumerate(self.filtered):
            if item.name == name:
                return idx
        return None

    def index_of_config(self, config: ItemConfig) -> int | None:
        for idx, item in enumerate(self.filtered):
            if item.is_parent_link:
                continue
            if item.config == config:
                return idx
        return None

"""Loading repository listings into model panes.

Shared by the action handlers and the copy engine; has no UI concerns.
"""

from __future__ import annotations

import logging

from .model import PARENT_DIR_NAME, Item, ItemConfig, Model, Side
from .repo.base import RepositoryAdapter

logger = logging.getLogger(__name__)


def show_location(
    model: Model,
    side: Side,
    repo: RepositoryAdapter,
    location: ItemConfig,
    entered_name: str = "",
) -> None:
    """List ``location`` and make it the current view of ``side``.

    Entering ``..`` puts the cursor on the location that was shown before;
    any other entry puts it on the first row. Adapter errors propagate and
    leave the pane untouched.
    """
    items = repo.get_list(location)
    title = repo.get_display_title(location)
    old_location = model.view_config(side)
    model.set_items(side, items)
    model.add_next_view(side, location, title)
    if entered_name == PARENT_DIR_NAME and old_location is not None:
        model.set_current_item_by_config(side, old_location)
    else:
        model.nav_top_for_side(side)
    logger.debug("show_location(%s, %s), %d items", side.name, location, len(items))


def show_history_view(model: Model, side: Side, repo: RepositoryAdapter, forward: bool) -> bool:
    """Show the previous or next location of the pane's view history.

    Returns ``False`` when the history has no view in that direction. When
    listing fails the history position is restored before the error
    propagates.
    """
    old_idx = model.view_history_idx(side)
    old_location = model.view_config(side)
    location = model.nav_view_forward(side) if forward else model.nav_view_back(side)
    if location is None or model.view_history_idx(side) == old_idx:
        return False
    try:
        items = repo.get_list(location)
    except Exception:
        model.nav_view_idx(side, old_idx)
        raise
    model.set_items(side, items)
    model.set_current_view(side, location, repo.get_display_title(location))
    if old_location is not None:
        model.set_current_item_by_config(side, old_location)
    logger.debug("show_history_view(%s, forward=%s), %s", side.name, forward, location)
    return True


def refresh_side(model: Model, side: Side, repo: RepositoryAdapter) -> bool:
    """Re-list the location shown on ``side`` keeping the cursor item when possible.

    Returns ``False`` when the pane has no location yet.
    """
    location = model.view_config(side)
    if location is None:
        return False
    current: Item | None = model.current_item(side)
    items = repo.get_list(location)
    model.set_items(side, items)
    model.set_current_view(side, location, repo.get_display_title(location))
    if current is not None:
        model.set_current_item_by_name(side, current.name)
    return True

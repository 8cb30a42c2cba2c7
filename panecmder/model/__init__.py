"""Navigation model: data types, pane views and the two-pane model."""

from .model import HORIZ_SCROLL_STEP, Model
from .pane import NO_CURSOR, PaneView, matches_filter
from .status import MAX_STATUS_COUNT, StatusLog
from .types import PARENT_DIR_NAME, Item, ItemConfig, ItemType, Side

__all__ = [
    "HORIZ_SCROLL_STEP",
    "MAX_STATUS_COUNT",
    "NO_CURSOR",
    "PARENT_DIR_NAME",
    "Item",
    "ItemConfig",
    "ItemType",
    "Model",
    "PaneView",
    "Side",
    "StatusLog",
    "matches_filter",
]

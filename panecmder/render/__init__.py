"""Rendering: frame snapshots and the ANSI frame writer."""

from .frame import compose_frame, item_rows_for_height, render_frame
from .snapshot import DialogSnapshot, FrameSnapshot, PaneSnapshot, RowSnapshot, build_snapshot
from .theme import DEFAULT_THEME, PLAIN_THEME, UITheme, resolve_theme

__all__ = [
    "DEFAULT_THEME",
    "DialogSnapshot",
    "FrameSnapshot",
    "PLAIN_THEME",
    "PaneSnapshot",
    "RowSnapshot",
    "UITheme",
    "build_snapshot",
    "compose_frame",
    "item_rows_for_height",
    "render_frame",
    "resolve_theme",
]

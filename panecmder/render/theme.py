"""UI theme definitions for the two-pane frame."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame writer."""

    name: str
    reset: str
    reverse: str
    divider: str
    title_active: str
    title_inactive: str
    filter: str
    row_current: str
    row_selected: str
    row_current_selected: str
    status: str
    dialog_border: str
    dialog_cursor: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    divider="\033[2m",
    title_active="\033[30;42m",
    title_inactive="\033[1m",
    filter="\033[2;38;5;250m",
    row_current="\033[30;42m",
    row_selected="\033[31m",
    row_current_selected="\033[31;42m",
    status="\033[7m",
    dialog_border="\033[38;5;45m",
    dialog_cursor="\033[7m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    reverse="\033[7m",
    divider="",
    title_active="\033[7m",
    title_inactive="",
    filter="",
    row_current="\033[7m",
    row_selected="\033[1m",
    row_current_selected="\033[1;7m",
    status="\033[7m",
    dialog_border="",
    dialog_cursor="\033[7m",
)


def resolve_theme(*, no_color: bool = False) -> UITheme:
    """Return the monochrome theme when colors are disabled."""
    if no_color:
        return PLAIN_THEME
    return DEFAULT_THEME


__all__ = ["UITheme", "DEFAULT_THEME", "PLAIN_THEME", "resolve_theme"]

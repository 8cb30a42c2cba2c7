"""ANSI frame writer for the two-pane view.

Layout, top to bottom: pane titles, filter line, item rows, status line.
An active dialog is drawn as a bordered box over the middle of the frame.
"""

from __future__ import annotations

import os
import sys

from .snapshot import DialogSnapshot, FrameSnapshot, PaneSnapshot, RowSnapshot
from .text import build_status_line, display_width, fit_columns, slice_columns
from .theme import DEFAULT_THEME, UITheme

HEADER_ROWS = 2
FOOTER_ROWS = 1
DIVIDER = "│"
DIALOG_MARGIN = 10
DIALOG_BORDER = "*"


def item_rows_for_height(height: int) -> int:
    """Return how many item rows fit a terminal of ``height`` rows."""
    return max(1, height - HEADER_ROWS - FOOTER_ROWS)


def pane_widths(width: int) -> tuple[int, int]:
    left = max(1, width // 2)
    right = max(1, width - left - len(DIVIDER))
    return left, right


def _styled(style: str, text: str, theme: UITheme) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def _row_style(row: RowSnapshot, pane: PaneSnapshot, theme: UITheme) -> str:
    is_current = row.is_current and pane.active
    if is_current and row.selected:
        return theme.row_current_selected
    if is_current:
        return theme.row_current
    if row.selected:
        return theme.row_selected
    return ""


def _pane_cells(pane: PaneSnapshot, width: int, item_rows: int, theme: UITheme) -> list[str]:
    title_style = theme.title_active if pane.active else theme.title_inactive
    cells = [_styled(title_style, fit_columns(pane.title, width), theme)]
    if pane.filter_text:
        filter_line = f"Filter: {pane.filter_text} ({pane.item_count})"
        cells.append(_styled(theme.filter, fit_columns(filter_line, width), theme))
    else:
        cells.append(" " * width)
    for row_idx in range(item_rows):
        if row_idx < len(pane.rows):
            row = pane.rows[row_idx]
            text = fit_columns(row.text, width, pane.horiz_scroll)
            cells.append(_styled(_row_style(row, pane, theme), text, theme))
        else:
            cells.append(" " * width)
    return cells


def _dialog_rows(dialog: DialogSnapshot, width: int, theme: UITheme) -> list[str]:
    box_width = max(8, width - 2 * DIALOG_MARGIN)
    inner = box_width - 4
    border = _styled(theme.dialog_border, DIALOG_BORDER * box_width, theme)
    side = _styled(theme.dialog_border, DIALOG_BORDER, theme)
    blank = f"{side}{' ' * (box_width - 2)}{side}"

    line = dialog.question + dialog.shown_answer
    cursor_pos = len(dialog.question) + dialog.cursor_idx
    if cursor_pos >= len(line):
        line += " "
    # Keep the cursor inside the box when the answer is long.
    start = max(0, display_width(line[: cursor_pos + 1]) - inner)
    before = slice_columns(line[:cursor_pos], start, inner)
    cursor_ch = line[cursor_pos]
    after = slice_columns(line[cursor_pos + 1 :], 0, max(0, inner - display_width(before) - display_width(cursor_ch)))
    shown = f"{before}{_styled(theme.dialog_cursor, cursor_ch, theme)}{after}"
    pad = " " * max(0, inner - display_width(before) - display_width(cursor_ch) - display_width(after))
    text_row = f"{side} {shown}{pad} {side}"
    return [border, blank, text_row, blank, border]


def compose_frame(
    snapshot: FrameSnapshot,
    width: int,
    height: int,
    theme: UITheme = DEFAULT_THEME,
) -> list[str]:
    """Return the frame as ``height`` styled rows."""
    width = max(3, width)
    item_rows = item_rows_for_height(height)
    left_width, right_width = pane_widths(width)
    left_cells = _pane_cells(snapshot.panes[0], left_width, item_rows, theme)
    right_cells = _pane_cells(snapshot.panes[1], right_width, item_rows, theme)
    divider = _styled(theme.divider, DIVIDER, theme)
    rows = [f"{left}{divider}{right}" for left, right in zip(left_cells, right_cells)]

    if snapshot.dialog is not None:
        dialog_rows = _dialog_rows(snapshot.dialog, width, theme)
        first = max(0, len(rows) // 2 - len(dialog_rows) // 2)
        margin = " " * DIALOG_MARGIN if width > 2 * DIALOG_MARGIN + 8 else ""
        for offset, dialog_row in enumerate(dialog_rows):
            if first + offset < len(rows):
                rows[first + offset] = f"{margin}{dialog_row}"

    rows.append(_styled(theme.status, build_status_line(snapshot.status, width), theme))
    return rows[: max(1, height)]


def render_frame(
    snapshot: FrameSnapshot,
    width: int,
    height: int,
    theme: UITheme = DEFAULT_THEME,
    fd: int | None = None,
) -> None:
    """Write a fully composed frame to the terminal."""
    out: list[str] = ["\033[H\033[J"]
    out.append("\r\n".join(compose_frame(snapshot, width, height, theme)))
    if fd is None:
        fd = sys.stdout.fileno()
    os.write(fd, "".join(out).encode("utf-8", errors="replace"))

"""Display-width aware text shaping for pane rows.

Row text is plain (styles are applied per row by the frame writer), so these
helpers only need to account for wide and combining characters.
"""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks and control characters consume no columns, East Asian
    wide/fullwidth characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.category(ch) == "Cc":
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def slice_columns(text: str, start_cols: int, max_cols: int) -> str:
    """Return the part of ``text`` visible in a ``max_cols`` viewport at ``start_cols``.

    A wide character cut by either viewport edge is dropped rather than shown
    half-width.
    """
    if max_cols <= 0 or not text:
        return ""
    start_cols = max(0, start_cols)
    out: list[str] = []
    col = 0
    shown = 0
    for ch in text:
        w = char_display_width(ch)
        if col < start_cols:
            col += w
            continue
        if shown + w > max_cols:
            break
        out.append(ch)
        shown += w
        col += w
    return "".join(out)


def fit_columns(text: str, width: int, start_cols: int = 0) -> str:
    """Slice ``text`` and right-pad it with spaces to exactly ``width`` columns."""
    if width <= 0:
        return ""
    visible = slice_columns(text, start_cols, width)
    return visible + " " * (width - display_width(visible))


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    """Return ``left_text`` and ``right_text`` spread over one ``width``-wide row."""
    usable = max(1, width - 1)
    if usable <= display_width(right_text):
        return fit_columns(right_text, usable)
    left_limit = max(0, usable - display_width(right_text) - 1)
    left = slice_columns(left_text, 0, left_limit)
    gap = " " * (usable - display_width(left) - display_width(right_text))
    return f"{left}{gap}{right_text}"

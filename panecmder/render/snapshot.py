"""Immutable description of one frame, built from the model.

The core never draws; it hands a :class:`FrameSnapshot` to the frame writer.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..dialog import InputDialogSession
from ..model import Model, Side


@dataclass(frozen=True)
class RowSnapshot:
    text: str
    is_current: bool
    selected: bool


@dataclass(frozen=True)
class PaneSnapshot:
    title: str
    rows: tuple[RowSnapshot, ...]
    active: bool
    horiz_scroll: int
    filter_text: str
    item_count: int


@dataclass(frozen=True)
class DialogSnapshot:
    question: str
    shown_answer: str
    cursor_idx: int


@dataclass(frozen=True)
class FrameSnapshot:
    panes: tuple[PaneSnapshot, PaneSnapshot]
    status: str
    dialog: DialogSnapshot | None = None

    def pane(self, side: Side) -> PaneSnapshot:
        return self.panes[side]


def _pane_snapshot(model: Model, side: Side) -> PaneSnapshot:
    pane = model.pane(side)
    rows = tuple(
        RowSnapshot(
            text=item.display_string(),
            is_current=pane.top + row_idx == pane.cursor,
            selected=item.selected,
        )
        for row_idx, item in enumerate(model.visible_items(side))
    )
    return PaneSnapshot(
        title=model.title(side),
        rows=rows,
        active=model.is_current_side(side),
        horiz_scroll=pane.horiz_scroll,
        filter_text=pane.filter_text,
        item_count=pane.count,
    )


def build_snapshot(model: Model, dialog: InputDialogSession | None = None) -> FrameSnapshot:
    """Capture both panes, the last status and an active dialog."""
    dialog_snapshot = None
    if dialog is not None and dialog.active:
        dialog_snapshot = DialogSnapshot(
            question=dialog.question,
            shown_answer=dialog.shown_answer,
            cursor_idx=dialog.cursor_idx,
        )
    return FrameSnapshot(
        panes=(_pane_snapshot(model, Side.LEFT), _pane_snapshot(model, Side.RIGHT)),
        status=model.last_status(),
        dialog=dialog_snapshot,
    )

"""Single-line text prompt used for questions, filters, search and passwords.

A session moves ``IDLE -> EDITING -> {SUBMITTED, CANCELED}``. The cursor
counts characters, not bytes, so multi-byte input edits as one unit.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

MASK_CHAR = "*"

_SUBMIT_KEYS = frozenset({"ENTER_CR", "ENTER_LF"})
_CANCEL_KEYS = frozenset({"ESC", "CTRL_C"})


class DialogState(Enum):
    IDLE = "idle"
    EDITING = "editing"
    SUBMITTED = "submitted"
    CANCELED = "canceled"


@dataclass(frozen=True)
class DialogResult:
    state: DialogState
    answer: str

    @property
    def submitted(self) -> bool:
        return self.state is DialogState.SUBMITTED

    @property
    def canceled(self) -> bool:
        return self.state is DialogState.CANCELED


class InputDialogSession:
    """Editable answer buffer with a character cursor."""

    def __init__(self) -> None:
        self.state = DialogState.IDLE
        self.question = ""
        self.answer = ""
        self.cursor_idx = 0
        self.masked = False

    def start(self, question: str, answer: str = "", masked: bool = False) -> None:
        """Begin editing ``answer`` with the cursor placed after its last character."""
        self.state = DialogState.EDITING
        self.question = question
        self.answer = answer
        self.cursor_idx = len(answer)
        self.masked = masked

    @property
    def active(self) -> bool:
        return self.state is DialogState.EDITING

    @property
    def shown_answer(self) -> str:
        """Return the answer as it should be drawn, masked when requested."""
        if self.masked:
            return MASK_CHAR * len(self.answer)
        return self.answer

    def insert(self, text: str) -> None:
        if not self.active:
            return
        idx = self.cursor_idx
        self.answer = self.answer[:idx] + text + self.answer[idx:]
        self.cursor_idx += len(text)

    def backspace(self) -> None:
        if not self.active or self.cursor_idx == 0:
            return
        idx = self.cursor_idx
        self.answer = self.answer[: idx - 1] + self.answer[idx:]
        self.cursor_idx -= 1

    def delete(self) -> None:
        if not self.active or self.cursor_idx >= len(self.answer):
            return
        idx = self.cursor_idx
        self.answer = self.answer[:idx] + self.answer[idx + 1 :]

    def move_left(self) -> None:
        if self.active and self.cursor_idx > 0:
            self.cursor_idx -= 1

    def move_right(self) -> None:
        if self.active and self.cursor_idx < len(self.answer):
            self.cursor_idx += 1

    def home(self) -> None:
        if self.active:
            self.cursor_idx = 0

    def end(self) -> None:
        if self.active:
            self.cursor_idx = len(self.answer)

    def submit(self) -> None:
        if self.active:
            self.state = DialogState.SUBMITTED

    def cancel(self) -> None:
        if not self.active:
            return
        self.state = DialogState.CANCELED
        self.answer = ""
        self.cursor_idx = 0

    def result(self) -> DialogResult:
        return DialogResult(self.state, self.answer)

    def handle_key(self, token: str) -> DialogState:
        """Apply one decoded key token and return the resulting state."""
        if not token or not self.active:
            return self.state
        if token in _SUBMIT_KEYS:
            self.submit()
        elif token in _CANCEL_KEYS:
            self.cancel()
        elif token == "BACKSPACE":
            self.backspace()
        elif token == "DELETE":
            self.delete()
        elif token == "LEFT":
            self.move_left()
        elif token == "RIGHT":
            self.move_right()
        elif token in {"HOME", "CTRL_A"}:
            self.home()
        elif token in {"END", "CTRL_E"}:
            self.end()
        elif len(token) == 1 and token.isprintable():
            self.insert(token)
        return self.state


def ask_user_input(
    question: str,
    answer: str = "",
    masked: bool = False,
    *,
    read_key: Callable[[], str],
    draw: Callable[[InputDialogSession], None],
) -> DialogResult:
    """Run a nested prompt loop until the answer is submitted or canceled.

    ``read_key`` returns one key token (``""`` on poll timeout). An ``OSError``
    from it cancels the prompt.
    """
    session = InputDialogSession()
    session.start(question, answer, masked)
    while session.active:
        draw(session)
        try:
            token = read_key()
        except OSError:
            logger.warning("input failed while asking %r, canceling", question, exc_info=True)
            session.cancel()
            break
        session.handle_key(token)
    logger.debug("ask_user_input(%r) -> %s", question, session.state.name)
    return session.result()

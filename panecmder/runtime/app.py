"""Runtime composition layer.

Builds the model and both repositories, wires prompts and rendering into the
action handlers, then starts the main loop.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence

from ..config import Config
from ..dialog import DialogResult, InputDialogSession, ask_user_input
from ..errors import CommanderError
from ..input import default_key_registry, read_key
from ..model import Model, Side
from ..render import build_snapshot, item_rows_for_height, render_frame, resolve_theme
from ..repo.base import RepositoryAdapter
from .actions import ActionContext, ActionHandler
from .loop import POLL_TIMEOUT_MS, RuntimeLoopCallbacks, ShutdownFlag, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def run_app(
    repos: Sequence[RepositoryAdapter],
    config: Config,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> Model:
    """Run the interactive two-pane browser over ``repos`` (left, right)."""
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if stdout_fd is None:
        stdout_fd = sys.stdout.fileno()

    terminal = TerminalController(stdin_fd, stdout_fd)
    theme = resolve_theme(no_color=bool(os.environ.get("NO_COLOR")))
    columns, rows = terminal.size()
    model = Model()
    shutdown = ShutdownFlag()

    def poll_key() -> str:
        if shutdown.requested:
            return "ESC"
        return read_key(stdin_fd, timeout_ms=POLL_TIMEOUT_MS)

    def render(snapshot, width: int, height: int) -> None:
        render_frame(snapshot, width, height, theme, fd=stdout_fd)

    def draw_dialog(session: InputDialogSession) -> None:
        width, height = terminal.size()
        render(build_snapshot(model, session), width, height)

    def ask(question: str, answer: str, masked: bool) -> DialogResult:
        return ask_user_input(question, answer, masked, read_key=poll_key, draw=draw_dialog)

    actions = ActionHandler(
        ActionContext(
            model=model,
            repos=repos,
            config=config,
            ask=ask,
            disable_tui_mode=terminal.disable_tui_mode,
            enable_tui_mode=terminal.enable_tui_mode,
        )
    )

    def load_initial_locations() -> None:
        for side in (Side.LEFT, Side.RIGHT):
            try:
                actions.load_initial(side)
            except CommanderError as exc:
                logger.warning("can't load initial %s location: %s", side.name, exc)
                model.add_status(str(exc))

    callbacks = RuntimeLoopCallbacks(
        read_key=poll_key,
        terminal_size=terminal.size,
        render=render,
        handle_key=actions.handle,
        on_start=load_initial_locations,
    )

    model.resize(item_rows_for_height(rows), columns)
    previous_handlers = shutdown.install()
    try:
        run_main_loop(model, terminal, default_key_registry(), callbacks, shutdown)
    finally:
        ShutdownFlag.restore(previous_handlers)
    return model

"""Main interactive event loop for the terminal UI.

Polls input with a short timeout so a shutdown request is noticed between
keys; all feature logic lives in the injected callbacks.
"""

from __future__ import annotations

import logging
import signal
from collections.abc import Callable
from dataclasses import dataclass

from ..input import KeyComboRegistry, LogicalKey
from ..model import Model
from ..render import FrameSnapshot, build_snapshot, item_rows_for_height
from .terminal import TerminalController

POLL_TIMEOUT_MS = 100

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    read_key: Callable[[], str]
    terminal_size: Callable[[], tuple[int, int]]
    render: Callable[[FrameSnapshot, int, int], None]
    handle_key: Callable[[LogicalKey], bool]
    on_start: Callable[[], None] | None = None


class ShutdownFlag:
    """Set by signal handlers or the quit key; checked between input polls."""

    def __init__(self) -> None:
        self.requested = False

    def request(self, signum: int | None = None, frame=None) -> None:
        logger.debug("shutdown requested (signal %s)", signum)
        self.requested = True

    def install(self, signals: tuple[int, ...] = (signal.SIGINT, signal.SIGTERM)) -> dict[int, object]:
        """Route ``signals`` to :meth:`request`; return the previous handlers."""
        previous = {}
        for signum in signals:
            previous[signum] = signal.signal(signum, self.request)
        return previous

    @staticmethod
    def restore(previous: dict[int, object]) -> None:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def dispatch_token(
    model: Model,
    registry: KeyComboRegistry,
    token: str,
    handle_key: Callable[[LogicalKey], bool],
) -> bool:
    """Resolve ``token`` and run its action; return ``True`` when quitting."""
    key = registry.resolve(token)
    if key is None:
        model.add_status(f"Key '{token}' is not bound.")
        return False
    logger.debug("dispatch %r -> %s", token, key.name)
    return handle_key(key)


def run_main_loop(
    model: Model,
    terminal: TerminalController,
    registry: KeyComboRegistry,
    callbacks: RuntimeLoopCallbacks,
    shutdown: ShutdownFlag,
) -> None:
    """Run the interactive loop until quit, a shutdown request or an input failure."""
    with terminal.raw_mode():
        if callbacks.on_start is not None:
            callbacks.on_start()
        last_size: tuple[int, int] | None = None
        dirty = True
        while not shutdown.requested:
            size = callbacks.terminal_size()
            if size != last_size:
                last_size = size
                columns, rows = size
                model.resize(item_rows_for_height(rows), columns)
                dirty = True
            if dirty:
                callbacks.render(build_snapshot(model), *size)
                dirty = False

            try:
                token = callbacks.read_key()
            except OSError:
                logger.exception("reading input failed, leaving main loop")
                break
            if not token:
                continue
            if dispatch_token(model, registry, token, callbacks.handle_key):
                shutdown.request()
            dirty = True

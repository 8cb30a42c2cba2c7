"""Raw-mode and alternate-screen control for the two-pane UI.

The saved tty state is restored whenever TUI mode is left.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty


class TerminalController:
    """Manage terminal mode transitions around the interactive session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Remember the tty attributes of ``stdin_fd`` for later restore."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._tui_active = False

    @property
    def tui_active(self) -> bool:
        return self._tui_active

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")
        self._tui_active = True

    def disable_tui_mode(self) -> None:
        """Show the cursor, restore the main screen and the saved tty state."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        self._tui_active = False

    def size(self) -> tuple[int, int]:
        """Return ``(columns, rows)`` of the terminal."""
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError:
            size = shutil.get_terminal_size((80, 24))
        return size.columns, size.lines

    @contextlib.contextmanager
    def raw_mode(self):
        """Run the enclosed block in TUI mode, restoring the terminal on exit."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()

"""External viewer and editor programs.

File content is handed over through temporary files; the caller leaves TUI
mode around each run. Failures raise :class:`BackendIOError`.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import tempfile
from collections.abc import Callable
from pathlib import Path

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .errors import BackendIOError, ValidationError

TEMP_PREFIX = "panecmder-"
FALLBACK_STYLE = "monokai"

logger = logging.getLogger(__name__)


def _split_command(command: str) -> list[str]:
    cmd = shlex.split(command)
    if not cmd:
        raise ValidationError("External command is not configured.")
    return cmd


def _temp_name(name: str) -> str:
    return f"{TEMP_PREFIX}{os.path.basename(name) or 'item'}"


def decode_text(data: bytes) -> str | None:
    """Return ``data`` as text, or ``None`` when it looks binary."""
    if b"\x00" in data:
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def _style_or_fallback(style: str) -> str:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        logger.warning("unknown pygments style %r, using %s", style, FALLBACK_STYLE)
        return FALLBACK_STYLE
    return style


def highlight_content(name: str, data: bytes, style: str = FALLBACK_STYLE) -> bytes:
    """Colorize text content for a terminal pager; binary content is returned as-is."""
    text = decode_text(data)
    if text is None:
        return data
    try:
        lexer = get_lexer_for_filename(name, text, stripnl=False)
    except ClassNotFound:
        lexer = TextLexer(stripnl=False)
    formatter = Terminal256Formatter(style=_style_or_fallback(style))
    return highlight(text, lexer, formatter).encode("utf-8")


def run_command(
    command: str,
    path: Path,
    disable_tui_mode: Callable[[], None],
    enable_tui_mode: Callable[[], None],
) -> None:
    """Run ``command path`` with the terminal handed over to the program."""
    cmd = [*_split_command(command), str(path)]
    logger.debug("run_command(%s)", cmd)
    disable_tui_mode()
    try:
        completed = subprocess.run(cmd, check=False)
    except OSError as exc:
        raise BackendIOError(f"Can't run '{command}': {exc}") from exc
    finally:
        enable_tui_mode()
    if completed.returncode != 0:
        logger.warning("%s exited with %d", cmd, completed.returncode)


def view(
    command: str,
    name: str,
    data: bytes,
    disable_tui_mode: Callable[[], None],
    enable_tui_mode: Callable[[], None],
) -> None:
    """Show ``data`` in the viewer through a temporary file named after ``name``."""
    with tempfile.TemporaryDirectory(prefix=TEMP_PREFIX) as tmp_dir:
        tmp_path = Path(tmp_dir) / _temp_name(name)
        try:
            tmp_path.write_bytes(data)
        except OSError as exc:
            raise BackendIOError(f"Can't prepare '{name}' for viewing: {exc}") from exc
        run_command(command, tmp_path, disable_tui_mode, enable_tui_mode)


def edit(
    command: str,
    name: str,
    data: bytes,
    disable_tui_mode: Callable[[], None],
    enable_tui_mode: Callable[[], None],
) -> bytes | None:
    """Edit ``data`` in the editor; return new content, or ``None`` when unchanged.

    A change is detected by the temporary file's modification time.
    """
    with tempfile.TemporaryDirectory(prefix=TEMP_PREFIX) as tmp_dir:
        tmp_path = Path(tmp_dir) / _temp_name(name)
        try:
            tmp_path.write_bytes(data)
            # Back-date the file so a save within the same second still counts.
            before = tmp_path.stat().st_mtime - 1
            os.utime(tmp_path, (before, before))
            before_ns = tmp_path.stat().st_mtime_ns
        except OSError as exc:
            raise BackendIOError(f"Can't prepare '{name}' for editing: {exc}") from exc
        run_command(command, tmp_path, disable_tui_mode, enable_tui_mode)
        try:
            if tmp_path.stat().st_mtime_ns == before_ns:
                return None
            return tmp_path.read_bytes()
        except OSError as exc:
            raise BackendIOError(f"Can't read edited '{name}': {exc}") from exc

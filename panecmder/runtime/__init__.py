"""Public runtime orchestration entry points.

Groups the interactive bootstrap (`run_app`) and the event loop contracts
used by tests and composition code.
"""

from __future__ import annotations


def run_app(*args, **kwargs):
    """Lazily import the app entrypoint so ``termios`` is only needed at runtime."""
    from .app import run_app as _run_app

    return _run_app(*args, **kwargs)


__all__ = ["run_app"]

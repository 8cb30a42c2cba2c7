"""Bounded history of status-line messages."""

from __future__ import annotations

import logging
from collections import deque

MAX_STATUS_COUNT = 1000

logger = logging.getLogger(__name__)


class StatusLog:
    """Keeps the newest ``max_entries`` status messages, oldest first."""

    def __init__(self, max_entries: int = MAX_STATUS_COUNT) -> None:
        self.max_entries = max(1, max_entries)
        self._entries: deque[str] = deque(maxlen=self.max_entries)

    def add(self, status: str) -> None:
        logger.info("status: %s", status)
        self._entries.append(status)

    def last(self) -> str:
        """Return the newest message, or an empty string before the first one."""
        if not self._entries:
            return ""
        return self._entries[-1]

    def history(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

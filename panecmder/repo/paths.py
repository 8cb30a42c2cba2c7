"""Separator-aware path joining used by adapters and the copy engine."""

from __future__ import annotations

import os


def get_file_path(parent_path: str, file_name: str, separator: str = os.sep) -> str:
    """Join ``file_name`` onto ``parent_path``.

    ``"."`` and ``""`` return the parent unchanged and ``".."`` strips the last
    component, stopping at the root separator.
    """
    if file_name in {"", "."}:
        return parent_path
    if file_name == "..":
        last_sep_idx = parent_path.rfind(separator)
        if last_sep_idx != -1 and len(parent_path) > 1:
            if last_sep_idx == 0:
                return separator
            return parent_path[:last_sep_idx]
        return parent_path
    if not parent_path:
        return file_name
    if parent_path.endswith(separator):
        return parent_path + file_name
    return parent_path + separator + file_name


def get_file_name(full_path: str, separator: str = os.sep) -> str:
    """Return the last path component, or the separator for the root."""
    stripped = full_path.rstrip(separator)
    if not stripped:
        return separator
    return stripped.rsplit(separator, 1)[-1]

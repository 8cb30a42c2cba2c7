"""Logical key names and the default key-token bindings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class LogicalKey(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    SELECT_UP = "select_up"
    SELECT_DOWN = "select_down"
    SELECT_PAGE_UP = "select_page_up"
    SELECT_PAGE_DOWN = "select_page_down"
    SELECT_HOME = "select_home"
    SELECT_END = "select_end"
    TOGGLE_SIDE = "toggle_side"
    TOGGLE_SELECT = "toggle_select"
    ACTIVATE = "activate"
    CANCEL = "cancel"
    REFRESH = "refresh"
    VIEW = "view"
    EDIT = "edit"
    COPY = "copy"
    SET_FILTER = "set_filter"
    SEARCH = "search"
    SEARCH_NEXT = "search_next"
    SEARCH_PREV = "search_prev"
    QUIT = "quit"
    CREATE_DIRECTORY = "create_directory"
    CREATE_FILE = "create_file"
    DELETE = "delete"
    SHOW_STATUS_HISTORY = "show_status_history"
    VIEW_BACK = "view_back"
    VIEW_FORWARD = "view_forward"


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single logical key."""

    combos: tuple[str, ...]
    key: LogicalKey


DEFAULT_BINDINGS: tuple[KeyComboBinding, ...] = (
    KeyComboBinding(("q", "CTRL_C"), LogicalKey.QUIT),
    KeyComboBinding(("TAB",), LogicalKey.TOGGLE_SIDE),
    KeyComboBinding(("ENTER_CR", "ENTER_LF"), LogicalKey.ACTIVATE),
    KeyComboBinding((" ",), LogicalKey.TOGGLE_SELECT),
    KeyComboBinding(("ESC",), LogicalKey.CANCEL),
    KeyComboBinding(("i", "UP"), LogicalKey.UP),
    KeyComboBinding(("k", "DOWN"), LogicalKey.DOWN),
    KeyComboBinding(("j", "LEFT"), LogicalKey.LEFT),
    KeyComboBinding(("l", "RIGHT"), LogicalKey.RIGHT),
    KeyComboBinding(("u", "PAGE_UP"), LogicalKey.PAGE_UP),
    KeyComboBinding(("o", "PAGE_DOWN"), LogicalKey.PAGE_DOWN),
    KeyComboBinding(("a", "HOME"), LogicalKey.HOME),
    KeyComboBinding(("z", "END"), LogicalKey.END),
    KeyComboBinding(("I", "SHIFT_UP"), LogicalKey.SELECT_UP),
    KeyComboBinding(("K", "SHIFT_DOWN"), LogicalKey.SELECT_DOWN),
    KeyComboBinding(("U", "SHIFT_PAGE_UP"), LogicalKey.SELECT_PAGE_UP),
    KeyComboBinding(("O", "SHIFT_PAGE_DOWN"), LogicalKey.SELECT_PAGE_DOWN),
    KeyComboBinding(("A", "SHIFT_HOME"), LogicalKey.SELECT_HOME),
    KeyComboBinding(("Z", "SHIFT_END"), LogicalKey.SELECT_END),
    KeyComboBinding(("f",), LogicalKey.SET_FILTER),
    KeyComboBinding(("/",), LogicalKey.SEARCH),
    KeyComboBinding(("n",), LogicalKey.SEARCH_NEXT),
    KeyComboBinding(("p",), LogicalKey.SEARCH_PREV),
    KeyComboBinding(("2", "F2"), LogicalKey.REFRESH),
    KeyComboBinding(("3", "F3"), LogicalKey.VIEW),
    KeyComboBinding(("4", "F4"), LogicalKey.EDIT),
    KeyComboBinding(("5", "F5"), LogicalKey.COPY),
    KeyComboBinding(("7", "F7"), LogicalKey.CREATE_DIRECTORY),
    KeyComboBinding(("8", "F8"), LogicalKey.CREATE_FILE),
    KeyComboBinding(("x", "DELETE"), LogicalKey.DELETE),
    KeyComboBinding(("m",), LogicalKey.SHOW_STATUS_HISTORY),
    KeyComboBinding((",", "ALT_LEFT"), LogicalKey.VIEW_BACK),
    KeyComboBinding((".", "ALT_RIGHT"), LogicalKey.VIEW_FORWARD),
)


class KeyComboRegistry:
    """Token to logical-key table with optional token normalization."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize = normalize if normalize is not None else self._identity
        self._keys: dict[str, LogicalKey] = {}

    @staticmethod
    def _identity(token: str) -> str:
        return token

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting earlier bindings of the same tokens."""
        for combo in binding.combos:
            self._keys[self._normalize(combo)] = binding.key
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def resolve(self, token: str) -> LogicalKey | None:
        """Return the logical key bound to ``token``, or ``None``."""
        return self._keys.get(self._normalize(token))

    def tokens_for(self, key: LogicalKey) -> list[str]:
        return [token for token, bound in self._keys.items() if bound is key]


def default_key_registry() -> KeyComboRegistry:
    return KeyComboRegistry().register_bindings(*DEFAULT_BINDINGS)

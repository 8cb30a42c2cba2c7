"""Input-layer public API: key decoding and logical key bindings."""

from .keys import DEFAULT_BINDINGS, KeyComboBinding, KeyComboRegistry, LogicalKey, default_key_registry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "DEFAULT_BINDINGS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "LogicalKey",
    "default_key_registry",
]

"""Input-layer public API for key decoding and interaction handlers.

Exports are split between low-level terminal decoding (`read_key`) and the
focus-aware handlers used by the runtime loop.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import DEFAULT_SCROLL_STEP, KeyActions, handle_command_key, handle_key, handle_panel_key

__all__ = [
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "DEFAULT_SCROLL_STEP",
    "KeyActions",
    "handle_command_key",
    "handle_panel_key",
    "handle_key",
]

"""Built-in command registration entrypoint."""

from __future__ import annotations

from ..core import Editor
from ..keymap import DEFAULT_MODE_BINDINGS
from .editing import register_editing_commands
from .ex import register_ex_commands
from .modes import register_mode_commands

__all__ = [
    "bind_default_keys",
    "register_builtin_commands",
    "register_editing_commands",
    "register_ex_commands",
    "register_mode_commands",
]


def register_builtin_commands(editor: Editor) -> None:
    """Register all built-in commands and the default mode bindings."""
    register_editing_commands(editor)
    register_mode_commands(editor)
    register_ex_commands(editor)
    bind_default_keys(editor)


def bind_default_keys(editor: Editor) -> None:
    """Bind default keys, keeping any binding already present."""
    for mode, bindings in DEFAULT_MODE_BINDINGS.items():
        keymap = editor.state.mode_keymaps.setdefault(mode, {})
        for key, command_name in bindings:
            if key in keymap:
                continue
            editor.bind_key(key, command_name, mode=mode)

"""modalpad package."""

import logging

__all__ = [
    "Buffer",
    "CommandInfo",
    "Editor",
    "EditorState",
    "KeyBindingInfo",
    "Mode",
    "parse_key",
]
__version__ = "0.1.0"

from .buffer import Buffer
from .core import CommandInfo, Editor, KeyBindingInfo
from .keymap import parse_key
from .state import EditorState, Mode

logging.getLogger(__name__).addHandler(logging.NullHandler())

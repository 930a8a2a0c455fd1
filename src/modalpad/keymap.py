"""Key symbol parsing and the default per-mode key bindings."""

from __future__ import annotations

from .state import Mode

KeySymbol = str

NAMED_KEYS = frozenset({"up", "down", "left", "right", "enter", "escape", "backspace"})

KEY_ALIASES = {
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
    "enter": "enter",
    "return": "enter",
    "ret": "enter",
    "c-m": "enter",
    "\n": "enter",
    "\r": "enter",
    "escape": "escape",
    "esc": "escape",
    "\x1b": "escape",
    "backspace": "backspace",
    "bs": "backspace",
    "del": "backspace",
    "\x7f": "backspace",
    "\b": "backspace",
    "space": " ",
}

DEFAULT_MODE_BINDINGS: dict[Mode, tuple[tuple[str, str], ...]] = {
    Mode.NORMAL: (
        ("q", "quit"),
        ("i", "enter-insert-mode"),
        (":", "enter-command-mode"),
        ("up", "previous-line"),
        ("down", "next-line"),
        ("left", "backward-char"),
        ("right", "forward-char"),
    ),
    Mode.INSERT: (
        ("escape", "enter-normal-mode"),
        ("enter", "newline"),
        ("backspace", "delete-backward-char"),
        ("up", "previous-line"),
        ("down", "next-line"),
        ("left", "backward-char"),
        ("right", "forward-char"),
    ),
    Mode.COMMAND: (
        ("enter", "execute-command-line"),
        ("escape", "cancel-command-line"),
        ("backspace", "command-line-backspace"),
    ),
}

# Commands receiving printable keys that have no explicit binding.
SELF_INSERT_COMMANDS: dict[Mode, str] = {
    Mode.INSERT: "self-insert-char",
    Mode.COMMAND: "command-line-insert",
}


def parse_key(token: str) -> KeySymbol:
    """Normalize a key name or character into a canonical key symbol."""
    if not token:
        raise ValueError("empty key token")

    if len(token) == 1:
        return KEY_ALIASES.get(token, token)

    symbol = KEY_ALIASES.get(token.strip().lower())
    if symbol is None:
        raise ValueError(f"unknown key: {token}")
    return symbol


def is_printable(symbol: KeySymbol) -> bool:
    return len(symbol) == 1 and symbol.isprintable()


def format_key(symbol: KeySymbol) -> str:
    """Render a key symbol for messages."""
    if symbol in NAMED_KEYS:
        return f"<{symbol}>"
    return symbol

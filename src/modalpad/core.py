"""Modal editor core: command registry, hooks and key dispatch."""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .buffer import Buffer
from .keymap import SELF_INSERT_COMMANDS, KeySymbol, format_key, is_printable, parse_key
from .state import EditorState, Mode

Command = Callable[..., object]
Hook = Callable[..., object]
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandInfo:
    """Command registration metadata."""

    name: str
    fn: Command
    doc: str
    signature: str
    module: str


@dataclass(frozen=True)
class KeyBindingInfo:
    """Resolved key binding metadata."""

    key: KeySymbol
    command_name: str
    mode: Mode


class Editor:
    """Live editor runtime driven one key event at a time."""

    def __init__(self, state: EditorState | None = None) -> None:
        self.state = state or EditorState()
        self._commands: dict[str, CommandInfo] = {}
        self._hooks: dict[str, list[Hook]] = defaultdict(list)

    @classmethod
    def open(cls, path: str | Path) -> Editor:
        """Create an editor on the file at PATH.

        Raises OSError when an existing file cannot be read.
        """
        buffer = Buffer.load(path)
        return cls(EditorState(buffer=buffer, file_path=str(path)))

    def command(self, name: str, fn: Command) -> None:
        doc = inspect.getdoc(fn) or "(undocumented command)"
        module_name = str(getattr(fn, "__module__", ""))
        try:
            signature = str(inspect.signature(fn))
        except (TypeError, ValueError):
            signature = "(...)"

        self._commands[name] = CommandInfo(
            name=name,
            fn=fn,
            doc=doc,
            signature=signature,
            module=module_name,
        )

    def get_command_info(self, name: str) -> CommandInfo:
        command = self._commands.get(name)
        if command is None:
            raise KeyError(f"unknown command: {name}")
        return command

    def run(self, name: str, *args: object) -> object:
        info = self._commands.get(name)
        if info is None:
            raise KeyError(f"unknown command: {name}")
        self.emit("before-command", name, args)
        result = info.fn(self, *args)
        self.emit("after-command", name, args, result)
        return result

    def on(self, event: str, fn: Hook) -> None:
        self._hooks[event].append(fn)

    def emit(self, event: str, *args: object) -> None:
        for fn in self._hooks.get(event, []):
            try:
                fn(self, *args)
            except Exception:
                logger.exception("hook failed for event %s", event)

    def bind_key(self, key: str, command_name: str, *, mode: Mode | str) -> None:
        if command_name not in self._commands:
            raise KeyError(f"unknown command: {command_name}")

        symbol = parse_key(key)
        self.state.mode_keymaps.setdefault(Mode(mode), {})[symbol] = command_name

    def resolve_key(self, key: str, *, mode: Mode | str | None = None) -> str:
        return self.describe_key(key, mode=mode).command_name

    def describe_key(self, key: str, *, mode: Mode | str | None = None) -> KeyBindingInfo:
        symbol = parse_key(key)
        target = self.state.mode if mode is None else Mode(mode)

        command_name = self.state.mode_keymaps.get(target, {}).get(symbol)
        if command_name is None:
            raise KeyError(f"unbound key in {target.value} mode: {format_key(symbol)}")
        return KeyBindingInfo(key=symbol, command_name=command_name, mode=target)

    def handle_key(self, key: str) -> bool:
        """Process one key event in the active mode.

        Returns True once a command has requested the end of the session.
        Keys without a binding in the active mode are ignored.
        """
        try:
            symbol = parse_key(key)
        except ValueError:
            logger.debug("ignored unknown key %r", key)
            return self.state.quit_requested

        mode = self.state.mode
        command_name = self.state.mode_keymaps.get(mode, {}).get(symbol)
        if command_name is not None:
            self.run(command_name)
        elif is_printable(symbol) and mode in SELF_INSERT_COMMANDS:
            self.run(SELF_INSERT_COMMANDS[mode], symbol)
        else:
            logger.debug("ignored key %s in %s mode", format_key(symbol), mode.value)

        self.state.scroll_to_cursor()
        return self.state.quit_requested

    @property
    def commands(self) -> list[str]:
        return sorted(self._commands)

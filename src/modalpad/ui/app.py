"""Textual TUI application for modalpad."""

from __future__ import annotations

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from ..commands import register_builtin_commands
from ..core import Editor
from .controller import UIController
from .render import Frame, render_frame

TEXTUAL_KEYS = {
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
    "enter": "enter",
    "escape": "escape",
    "backspace": "backspace",
    "ctrl+h": "backspace",
}


def _key_to_symbol(key: str, character: str | None) -> str | None:
    symbol = TEXTUAL_KEYS.get(key)
    if symbol is not None:
        return symbol
    if character and len(character) == 1 and character.isprintable():
        return character
    return None


class EditorView(Static):
    can_focus = True


class ModalPadApp(App[None]):
    """Full-screen Textual frontend for the modal editor."""

    CSS = """
    Screen {
        layout: vertical;
        padding: 0;
    }

    #editor {
        width: 1fr;
        height: 1fr;
        padding: 0;
    }
    """

    def __init__(self, editor: Editor | None = None) -> None:
        super().__init__()
        self.editor = editor or Editor()
        register_builtin_commands(self.editor)
        self.controller = UIController(self.editor)
        self._quit_requested = False
        self.last_frame: Frame | None = None

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    def compose(self) -> ComposeResult:
        yield EditorView(id="editor")

    def on_mount(self) -> None:
        if self.editor.state.file_path:
            self.title = self.editor.state.file_path
        self.query_one("#editor", EditorView).focus()
        self._refresh_view()

    def on_resize(self, event: events.Resize) -> None:
        if not self.query("#editor"):
            return
        self._refresh_view()

    def on_key(self, event: events.Key) -> None:
        symbol = _key_to_symbol(event.key, event.character)
        if symbol is None:
            return

        event.stop()
        event.prevent_default()
        if self.controller.handle_key(symbol):
            self._quit_requested = True
            self.exit()
            return
        self._refresh_view()

    def _refresh_view(self) -> None:
        width, height = self.size
        self.controller.resize(width, height)
        frame = render_frame(
            self.controller.snapshot(),
            width,
            height,
            self.controller.styles(),
        )
        self.last_frame = frame
        self.query_one("#editor", EditorView).update(frame.to_text())

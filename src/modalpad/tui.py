"""TUI entrypoint."""

from __future__ import annotations

from .core import Editor
from .ui.app import ModalPadApp


def run_tui(editor: Editor) -> None:
    app = ModalPadApp(editor)
    app.run()

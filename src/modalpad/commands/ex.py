"""Colon-command interpreter and the save/quit commands behind it."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core import Editor
from ..state import Mode

logger = logging.getLogger(__name__)

SAVED_NOTICE = "File saved"
INVALID_COMMAND_NOTICE = "Invalid command"


def save_buffer(editor: Editor) -> bool:
    """Write the buffer to the session file, reporting the outcome as a notice.

    A failed write leaves the session running and returns False.
    """
    state = editor.state
    if not state.file_path:
        state.notice = "Error saving file: no file name"
        return False

    try:
        state.buffer.save(state.file_path)
    except OSError as exc:
        logger.warning("cannot save %s: %s", state.file_path, exc)
        state.notice = f"Error saving file: {exc.strerror or exc}"
        return False

    state.notice = SAVED_NOTICE
    editor.emit("buffer-saved", state.file_path)
    return True


def request_quit(editor: Editor) -> None:
    editor.state.quit_requested = True


def _write(editor: Editor) -> None:
    save_buffer(editor)


def _write_quit(editor: Editor) -> None:
    if save_buffer(editor):
        request_quit(editor)


EX_COMMANDS: dict[str, Callable[[Editor], None]] = {
    "w": _write,
    "q": request_quit,
    "wq": _write_quit,
}


def parse_ex_command(text: str) -> Callable[[Editor], None] | None:
    """Look up TEXT as an exact colon command."""
    return EX_COMMANDS.get(text)


def execute_ex_command(editor: Editor, text: str) -> None:
    """Run the colon command TEXT and return to Normal mode."""
    state = editor.state
    state.mode = Mode.NORMAL
    state.command_line = ""

    handler = parse_ex_command(text)
    if handler is None:
        logger.debug("invalid command %r", text)
        state.notice = INVALID_COMMAND_NOTICE
        return
    handler(editor)


def register_ex_commands(editor: Editor) -> None:
    """Register save and quit commands."""

    def save_buffer_command(ed: Editor) -> str:
        """Save the buffer to its file and return the resulting notice."""
        save_buffer(ed)
        return ed.state.notice

    def quit_command(ed: Editor) -> None:
        """End the editing session."""
        request_quit(ed)

    def ex_command(ed: Editor, *parts: object) -> None:
        """Run a colon command given as arguments, e.g. `ex wq`."""
        execute_ex_command(ed, " ".join(str(part) for part in parts))

    editor.command("save-buffer", save_buffer_command)
    editor.command("quit", quit_command)
    editor.command("ex", ex_command)

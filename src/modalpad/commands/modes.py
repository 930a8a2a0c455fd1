"""Built-in mode transition and command-line editing commands."""

from __future__ import annotations

from ..core import Editor
from ..state import Mode
from .ex import execute_ex_command


def register_mode_commands(editor: Editor) -> None:
    """Register commands that switch modes or edit the command line."""

    def enter_insert_mode(ed: Editor) -> None:
        """Switch to Insert mode."""
        ed.state.mode = Mode.INSERT
        ed.state.notice = ""

    def enter_command_mode(ed: Editor) -> None:
        """Switch to Command mode with an empty command line."""
        ed.state.mode = Mode.COMMAND
        ed.state.command_line = ""
        ed.state.notice = ""

    def enter_normal_mode(ed: Editor) -> None:
        """Switch back to Normal mode."""
        ed.state.mode = Mode.NORMAL

    def cancel_command_line(ed: Editor) -> None:
        """Discard the command line and return to Normal mode."""
        ed.state.mode = Mode.NORMAL
        ed.state.command_line = ""

    def command_line_insert(ed: Editor, char: str) -> None:
        """Append CHAR to the command line."""
        ed.state.command_line += str(char)

    def command_line_backspace(ed: Editor) -> None:
        """Remove the last char of the command line."""
        ed.state.command_line = ed.state.command_line[:-1]

    def execute_command_line(ed: Editor) -> None:
        """Run the command line through the colon-command interpreter."""
        execute_ex_command(ed, ed.state.command_line)

    editor.command("enter-insert-mode", enter_insert_mode)
    editor.command("enter-command-mode", enter_command_mode)
    editor.command("enter-normal-mode", enter_normal_mode)
    editor.command("cancel-command-line", cancel_command_line)
    editor.command("command-line-insert", command_line_insert)
    editor.command("command-line-backspace", command_line_backspace)
    editor.command("execute-command-line", execute_command_line)

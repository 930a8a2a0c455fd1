"""Built-in cursor movement, editing and variable commands."""

from __future__ import annotations

from ..core import Editor


def register_editing_commands(editor: Editor) -> None:
    """Register movement and buffer mutation commands."""

    def forward_char(ed: Editor) -> None:
        """Move point right, wrapping to the start of the next line."""
        ed.state.move_right()

    def backward_char(ed: Editor) -> None:
        """Move point left, wrapping to the end of the previous line."""
        ed.state.move_left()

    def next_line(ed: Editor) -> None:
        """Move point down one line, clamping the column to the line length."""
        ed.state.move_down()

    def previous_line(ed: Editor) -> None:
        """Move point up one line, clamping the column to the line length."""
        ed.state.move_up()

    def self_insert_char(ed: Editor, char: str) -> None:
        """Insert CHAR at point."""
        state = ed.state
        for ch in str(char):
            state.buffer.insert_char(state.cursor.row, state.cursor.col, ch)
            state.cursor.col += 1

    def newline(ed: Editor) -> None:
        """Split the line at point and move to the start of the new line."""
        state = ed.state
        state.buffer.split_line(state.cursor.row, state.cursor.col)
        state.set_cursor(state.cursor.row + 1, 0)

    def delete_backward_char(ed: Editor) -> None:
        """Delete the char before point, joining with the previous line at column 0."""
        state = ed.state
        row, col = state.buffer.delete_char(state.cursor.row, state.cursor.col)
        state.set_cursor(row, col)

    def set_var(ed: Editor, key: str, *value: object) -> None:
        """Set variable KEY to joined VALUE parts."""
        ed.state.variables[key] = " ".join(str(v) for v in value)

    def get_var(ed: Editor, key: str) -> object:
        """Get variable KEY from editor state."""
        return ed.state.variables.get(key)

    editor.command("forward-char", forward_char)
    editor.command("backward-char", backward_char)
    editor.command("next-line", next_line)
    editor.command("previous-line", previous_line)
    editor.command("self-insert-char", self_insert_char)
    editor.command("newline", newline)
    editor.command("delete-backward-char", delete_backward_char)
    editor.command("set", set_var)
    editor.command("get", get_var)

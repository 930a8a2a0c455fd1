from pathlib import Path

import pytest

from modalpad.buffer import Buffer
from modalpad.commands import register_builtin_commands
from modalpad.core import Editor
from modalpad.state import EditorState, Mode


def _editor(lines: list[str] | None = None, *, path: str | None = None) -> Editor:
    editor = Editor(EditorState(buffer=Buffer(lines), file_path=path))
    register_builtin_commands(editor)
    editor.state.resize(24)
    return editor


def _press(editor: Editor, *keys: str) -> bool:
    done = False
    for key in keys:
        done = editor.handle_key(key)
    return done


def test_builtin_commands_smoke() -> None:
    editor = _editor()
    editor.run("enter-insert-mode")
    editor.run("self-insert-char", "hi")
    editor.run("newline")
    editor.run("self-insert-char", "there")
    assert editor.state.buffer.lines == ("hi", "there")

    editor.run("set", "cursor.style", "bold")
    assert editor.run("get", "cursor.style") == "bold"


def test_runtime_command_metadata() -> None:
    editor = Editor()

    def echo_value(_ed: Editor, value: str) -> str:
        """Return VALUE as a string."""
        return value

    editor.command("echo-value", echo_value)

    info = editor.get_command_info("echo-value")
    assert info.name == "echo-value"
    assert info.doc == "Return VALUE as a string."
    assert "value: str" in info.signature
    assert "echo-value" in editor.commands

    with pytest.raises(KeyError, match="unknown command: nope"):
        editor.run("nope")


def test_open_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("one\ntwo\n", encoding="utf-8")

    editor = Editor.open(path)
    assert editor.state.buffer.lines == ("one", "two")
    assert editor.state.file_path == str(path)


def test_open_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        Editor.open(tmp_path)


def test_normal_mode_transitions() -> None:
    editor = _editor(["abc"])

    assert not _press(editor, "i")
    assert editor.state.mode is Mode.INSERT

    _press(editor, "escape", ":")
    assert editor.state.mode is Mode.COMMAND
    assert editor.state.command_line == ""

    _press(editor, "escape")
    assert editor.state.mode is Mode.NORMAL

    assert _press(editor, "q")


def test_escape_discards_typed_command(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    editor = _editor(["abc"], path=str(path))

    assert not _press(editor, ":", "w", "q", "escape")
    assert editor.state.mode is Mode.NORMAL
    assert editor.state.command_line == ""
    assert not editor.state.quit_requested
    assert not path.exists()


def test_insert_mode_typing_and_newline() -> None:
    editor = _editor()
    _press(editor, "i", "h", "i", "enter", "q", ":")

    assert editor.state.buffer.lines == ("hi", "q:")
    assert (editor.state.cursor.row, editor.state.cursor.col) == (1, 2)
    assert editor.state.mode is Mode.INSERT


def test_insert_mode_newline_splits_at_cursor() -> None:
    editor = _editor(["hello world"])
    editor.state.set_cursor(0, 5)
    _press(editor, "i", "enter")

    assert editor.state.buffer.lines == ("hello", " world")
    assert (editor.state.cursor.row, editor.state.cursor.col) == (1, 0)


def test_insert_mode_backspace_joins_lines() -> None:
    editor = _editor(["ab", "cd"])
    editor.state.set_cursor(1, 0)
    _press(editor, "i", "backspace")

    assert editor.state.buffer.lines == ("abcd",)
    assert (editor.state.cursor.row, editor.state.cursor.col) == (0, 2)

    _press(editor, "backspace")
    assert editor.state.buffer.lines == ("acd",)
    assert (editor.state.cursor.row, editor.state.cursor.col) == (0, 1)


def test_backspace_at_document_start_is_noop() -> None:
    editor = _editor(["ab"])
    _press(editor, "i", "backspace")
    assert editor.state.buffer.lines == ("ab",)
    assert (editor.state.cursor.row, editor.state.cursor.col) == (0, 0)


def test_arrows_move_in_normal_and_insert_modes() -> None:
    editor = _editor(["abc", "de"])
    _press(editor, "right", "right", "down")
    assert (editor.state.cursor.row, editor.state.cursor.col) == (1, 2)

    _press(editor, "i", "up", "left")
    assert (editor.state.cursor.row, editor.state.cursor.col) == (0, 1)


def test_unbound_keys_are_ignored() -> None:
    editor = _editor(["abc"])

    assert not _press(editor, "x", "enter", "backspace", "page-up")
    assert editor.state.mode is Mode.NORMAL
    assert editor.state.buffer.lines == ("abc",)

    _press(editor, ":", "up")
    assert editor.state.mode is Mode.COMMAND
    assert (editor.state.cursor.row, editor.state.cursor.col) == (0, 0)


def test_command_line_editing() -> None:
    editor = _editor()
    _press(editor, ":", "backspace", "w", "x", "backspace", "q")
    assert editor.state.command_line == "wq"
    assert editor.state.buffer.lines == ("",)


def test_newline_scrolls_viewport() -> None:
    editor = _editor()
    editor.state.resize(5)
    _press(editor, "i", *["enter"] * 6)

    assert editor.state.cursor.row == 6
    assert editor.state.viewport.scroll_offset == 4


def test_joining_backspace_scrolls_viewport_up() -> None:
    editor = _editor([f"line {n}" for n in range(12)])
    editor.state.resize(5)
    editor.state.set_cursor(10, 0)
    editor.state.viewport.scroll_offset = 10

    _press(editor, "i", "backspace")

    assert editor.state.cursor.row == 9
    assert editor.state.viewport.scroll_offset == editor.state.cursor.row


def test_entering_a_mode_clears_notice() -> None:
    editor = _editor()
    editor.state.notice = "Invalid command"
    _press(editor, "i")
    assert editor.state.notice == ""

    editor.state.notice = "File saved"
    _press(editor, "escape", ":")
    assert editor.state.notice == ""


def test_hook_failure_isolated(caplog: pytest.LogCaptureFixture) -> None:
    editor = Editor()

    def explode(_ed: Editor, *_args: object) -> None:
        raise RuntimeError("hook boom")

    def echo(_ed: Editor, value: str) -> str:
        return value

    editor.command("echo", echo)
    editor.on("before-command", explode)

    with caplog.at_level("ERROR"):
        assert editor.run("echo", "ok") == "ok"
    assert "hook failed for event before-command" in caplog.text


def test_hooks_see_every_dispatched_command() -> None:
    editor = _editor()
    seen: list[str] = []
    editor.on("after-command", lambda _ed, name, _args, _result: seen.append(name))

    _press(editor, "i", "a", "escape")
    assert seen == ["enter-insert-mode", "self-insert-char", "enter-normal-mode"]

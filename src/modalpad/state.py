"""Core state model for modalpad."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .buffer import Buffer

STATUS_BAR_ROWS = 2

DEFAULT_VARIABLES: dict[str, object] = {
    "gutter.style": "bright_blue",
    "cursor.style": "reverse",
    "status.style": "white on blue",
}


class Mode(Enum):
    """Input modes of the editor."""

    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"

    @property
    def label(self) -> str:
        return self.value.upper()


@dataclass
class Cursor:
    """Buffer position of the next edit; COL may equal the line length."""

    row: int = 0
    col: int = 0


@dataclass
class Viewport:
    """Topmost drawn row and how many rows fit in the text area."""

    scroll_offset: int = 0
    visible_rows: int = 1

    def follow(self, row: int) -> None:
        if row < self.scroll_offset:
            self.scroll_offset = row
        elif row >= self.scroll_offset + self.visible_rows:
            self.scroll_offset = row - self.visible_rows + 1


@dataclass
class EditorState:
    """Runtime mutable editor state."""

    buffer: Buffer = field(default_factory=Buffer)
    file_path: str | None = None
    mode: Mode = Mode.NORMAL
    cursor: Cursor = field(default_factory=Cursor)
    viewport: Viewport = field(default_factory=Viewport)
    command_line: str = ""
    notice: str = ""
    quit_requested: bool = False
    variables: dict[str, object] = field(default_factory=lambda: dict(DEFAULT_VARIABLES))
    mode_keymaps: dict[Mode, dict[str, str]] = field(
        default_factory=lambda: {mode: {} for mode in Mode}
    )

    def current_line(self) -> str:
        return self.buffer.line(self.cursor.row)

    def move_up(self) -> None:
        if self.cursor.row > 0:
            self.cursor.row -= 1
            self._clamp_col()
        self.scroll_to_cursor()

    def move_down(self) -> None:
        if self.cursor.row < len(self.buffer) - 1:
            self.cursor.row += 1
            self._clamp_col()
        self.scroll_to_cursor()

    def move_left(self) -> None:
        if self.cursor.col > 0:
            self.cursor.col -= 1
        elif self.cursor.row > 0:
            self.cursor.row -= 1
            self.cursor.col = len(self.current_line())
        self.scroll_to_cursor()

    def move_right(self) -> None:
        if self.cursor.col < len(self.current_line()):
            self.cursor.col += 1
        elif self.cursor.row < len(self.buffer) - 1:
            self.cursor.row += 1
            self.cursor.col = 0
        self.scroll_to_cursor()

    def set_cursor(self, row: int, col: int) -> None:
        """Place the cursor, clamping both coordinates into the buffer."""
        self.cursor.row = max(0, min(row, len(self.buffer) - 1))
        self.cursor.col = col
        self._clamp_col()
        self.scroll_to_cursor()

    def scroll_to_cursor(self) -> None:
        self.viewport.follow(self.cursor.row)

    def resize(self, height: int) -> None:
        """Derive the text-area height from the terminal HEIGHT."""
        self.viewport.visible_rows = max(1, height - STATUS_BAR_ROWS)
        self.scroll_to_cursor()

    def _clamp_col(self) -> None:
        self.cursor.col = max(0, min(self.cursor.col, len(self.current_line())))

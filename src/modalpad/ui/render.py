"""Frame rendering: project editor snapshots into Rich text rows."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.text import Text

from ..state import DEFAULT_VARIABLES, STATUS_BAR_ROWS, Mode

if TYPE_CHECKING:
    from .controller import UISnapshot

LINE_NUMBER_WIDTH = 4
GUTTER_SEPARATOR = " │ "
GUTTER_WIDTH = LINE_NUMBER_WIDTH + len(GUTTER_SEPARATOR)
TRUNCATION_MARKER = "..."

STYLE_VARIABLES = {
    "gutter": "gutter.style",
    "cursor": "cursor.style",
    "status": "status.style",
}


@dataclass(frozen=True)
class RenderStyles:
    """Resolved Rich styles used for one frame."""

    gutter: Style
    cursor: Style
    status: Style


@dataclass(frozen=True)
class Frame:
    """One full screen of rows plus the screen cursor cell."""

    rows: tuple[Text, ...]
    cursor_x: int
    cursor_y: int

    def to_text(self) -> Text:
        joiner = Text("\n", no_wrap=True, overflow="crop", end="")
        return joiner.join(self.rows)


def resolve_styles(variables: Mapping[str, object]) -> tuple[RenderStyles, list[str]]:
    """Parse style variables, falling back to defaults for invalid values."""
    resolved: dict[str, Style] = {}
    warnings: list[str] = []

    for attr, variable in STYLE_VARIABLES.items():
        default = str(DEFAULT_VARIABLES[variable])
        raw = str(variables.get(variable, default))
        try:
            resolved[attr] = Style.parse(raw)
        except StyleSyntaxError:
            resolved[attr] = Style.parse(default)
            warnings.append(f"invalid {variable}; fallback to {default}")

    return RenderStyles(**resolved), warnings


def fit_line(line: str, width: int) -> str:
    """Truncate LINE to WIDTH columns, marking the cut."""
    if len(line) <= width:
        return line
    keep = max(0, width - len(TRUNCATION_MARKER))
    return (line[:keep] + TRUNCATION_MARKER)[:width]


def status_line(snapshot: UISnapshot) -> str:
    text = f"-- {snapshot.mode.label} -- {snapshot.row + 1}:{snapshot.col + 1} --"
    if snapshot.mode is Mode.COMMAND:
        return f"{text} :{snapshot.message}"
    if snapshot.message:
        return f"{text} {snapshot.message}"
    return text


def render_frame(snapshot: UISnapshot, width: int, height: int, styles: RenderStyles) -> Frame:
    """Render SNAPSHOT into a WIDTH x HEIGHT frame.

    The text area holds `snapshot.visible_rows` rows, each a right-aligned
    line number and separator followed by the line text; the last two rows
    are the status bar. When HEIGHT leaves less than two rows below the text
    area the blank band is dropped first, then the status line.
    """
    text_width = max(0, width - GUTTER_WIDTH)
    rows: list[Text] = []

    for offset in range(snapshot.visible_rows):
        row = Text(no_wrap=True, overflow="crop", end="")
        if offset < len(snapshot.lines):
            number = snapshot.scroll_offset + offset + 1
            row.append(f"{number:>{LINE_NUMBER_WIDTH}}{GUTTER_SEPARATOR}", style=styles.gutter)
            row.append(fit_line(snapshot.lines[offset], text_width))
        rows.append(row)

    status_rows = [
        Text(" " * width, style=styles.status, no_wrap=True, end=""),
        Text(status_line(snapshot)[:width].ljust(width), style=styles.status, no_wrap=True, end=""),
    ]
    reserved = min(STATUS_BAR_ROWS, max(0, height - snapshot.visible_rows))
    rows.extend(status_rows[STATUS_BAR_ROWS - reserved :])

    cursor_x = min(snapshot.col + GUTTER_WIDTH, max(0, width - 1))
    cursor_y = snapshot.row - snapshot.scroll_offset
    if 0 <= cursor_y < snapshot.visible_rows:
        cursor_row = rows[cursor_y]
        if len(cursor_row.plain) <= cursor_x:
            cursor_row.append(" " * (cursor_x + 1 - len(cursor_row.plain)))
        cursor_row.stylize(styles.cursor, cursor_x, cursor_x + 1)

    return Frame(rows=tuple(rows), cursor_x=cursor_x, cursor_y=cursor_y)

"""UI adapter that maps terminal input to editor operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core import Editor
from ..state import Mode
from .render import RenderStyles, resolve_styles

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UISnapshot:
    """Immutable editor state for rendering one frame."""

    lines: tuple[str, ...]
    row: int
    col: int
    scroll_offset: int
    visible_rows: int
    mode: Mode
    message: str
    file_path: str | None


class UIController:
    """Stateful adapter between UI events and editor core APIs."""

    def __init__(self, editor: Editor) -> None:
        self.editor = editor
        self._width = 0
        self._height = 0
        self._reported_warnings: set[str] = set()

    @property
    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self.editor.state.resize(height)

    def handle_key(self, key: str) -> bool:
        """Forward one key symbol; True means the session is over."""
        return self.editor.handle_key(key)

    def snapshot(self) -> UISnapshot:
        state = self.editor.state
        start = state.viewport.scroll_offset
        visible = state.viewport.visible_rows
        message = state.command_line if state.mode is Mode.COMMAND else state.notice

        return UISnapshot(
            lines=state.buffer.lines[start : start + visible],
            row=state.cursor.row,
            col=state.cursor.col,
            scroll_offset=start,
            visible_rows=visible,
            mode=state.mode,
            message=message,
            file_path=state.file_path,
        )

    def styles(self) -> RenderStyles:
        styles, warnings = resolve_styles(self.editor.state.variables)
        for warning in warnings:
            if warning in self._reported_warnings:
                continue
            self._reported_warnings.add(warning)
            logger.warning(warning)
        return styles

"""Line buffer holding the document being edited."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


class Buffer:
    """Ordered sequence of text lines; never empty."""

    def __init__(self, lines: Iterable[str] | None = None) -> None:
        self._lines: list[str] = list(lines) if lines is not None else []
        if not self._lines:
            self._lines = [""]

    @classmethod
    def load(cls, source: str | Path) -> Buffer:
        """Read SOURCE into a buffer, or start an empty one when it does not exist.

        Raises OSError when the file exists but cannot be read.
        """
        path = Path(source)
        if not path.exists():
            logger.info("new file %s", path)
            return cls()

        with path.open(encoding=ENCODING) as handle:
            text = handle.read()
        buffer = cls(_split_records(text))
        logger.info("loaded %s (%d lines)", path, len(buffer))
        return buffer

    def save(self, destination: str | Path) -> None:
        """Write every line, each terminated by a newline, to DESTINATION."""
        path = Path(destination)
        with path.open("w", encoding=ENCODING) as handle:
            handle.write("".join(f"{line}\n" for line in self._lines))
        logger.info("saved %s (%d lines)", path, len(self._lines))

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def line(self, row: int) -> str:
        return self._lines[row]

    def insert_char(self, row: int, col: int, char: str) -> None:
        line = self._lines[row]
        if not 0 <= col <= len(line):
            raise IndexError(f"column {col} out of range for line {row}")
        self._lines[row] = line[:col] + char + line[col:]

    def split_line(self, row: int, col: int) -> None:
        line = self._lines[row]
        if not 0 <= col <= len(line):
            raise IndexError(f"column {col} out of range for line {row}")
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])

    def delete_char(self, row: int, col: int) -> tuple[int, int]:
        """Delete the character before (ROW, COL), joining lines at column 0.

        Returns the position left behind by the deletion.
        """
        if col > 0:
            line = self._lines[row]
            self._lines[row] = line[: col - 1] + line[col:]
            return row, col - 1

        if row == 0:
            return row, col

        current = self._lines.pop(row)
        previous = self._lines[row - 1]
        self._lines[row - 1] = previous + current
        return row - 1, len(previous)


def _split_records(text: str) -> list[str]:
    records = text.split("\n")
    # A final newline terminates the last record rather than opening a new one.
    if text.endswith("\n"):
        records.pop()
    return records

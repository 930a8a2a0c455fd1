"""Top-level CLI entrypoint dispatcher."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence

from textual.logging import TextualHandler

from .core import Editor
from .tui import run_tui

LOG_FILE_ENV = "MODALPAD_LOG_FILE"
LOG_LEVEL_ENV = "MODALPAD_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send package logs to MODALPAD_LOG_FILE, or to the Textual devtools console."""
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    log_file = os.environ.get(LOG_FILE_ENV)

    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = TextualHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("modalpad")
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="modalpad", usage="%(prog)s <file_path>")
    parser.add_argument("paths", nargs="*", metavar="file_path")
    args, extra = parser.parse_known_args(argv)

    if extra or len(args.paths) != 1:
        parser.print_usage()
        return

    configure_logging()
    path = args.paths[0]
    try:
        editor = Editor.open(path)
    except OSError as exc:
        logger.error("cannot open %s: %s", path, exc)
        raise SystemExit(f"modalpad: cannot open {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        logger.error("cannot decode %s: %s", path, exc)
        raise SystemExit(f"modalpad: cannot open {path}: not UTF-8 text") from exc

    run_tui(editor)

"""Command history persisted to a line-oriented file.

One command per line, newline-terminated, no escaping. The whole history
is written once when the shell exits, replacing the previous file. Bytes
that are not valid UTF-8 are carried through unchanged with
``surrogateescape``.
"""
from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from sta_shell.repl.editor import LineEditor

logger = logging.getLogger(__name__)

HISTORY_ENCODING = "utf-8"
HISTORY_ERRORS = "surrogateescape"


class HistoryStore:
    """Loads and saves the editor's history.

    A history file that cannot be read or written is reported on the
    diagnostic stream and never stops the shell.

    Parameters
    ----------
    path:
        The history file.
    editor:
        The line editor owning the in-memory history.
    console:
        Where the save notice is printed. Defaults to stdout.
    err_console:
        Where read and write failures are reported. Defaults to stderr.
    """

    def __init__(
        self,
        path: Path,
        editor: LineEditor,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.path = Path(path)
        self._editor = editor
        self._console = console or Console()
        self._err_console = err_console or Console(stderr=True)

    def load(self) -> int:
        """Append the file's non-empty lines to the editor's history.

        Returns the number of entries loaded. A missing or unreadable file
        loads nothing.
        """
        loaded = 0
        try:
            with self.path.open("r", encoding=HISTORY_ENCODING, errors=HISTORY_ERRORS) as stream:
                for line in stream:
                    if line.endswith("\n"):
                        line = line[:-1]
                    if not line:
                        continue
                    self._editor.add_history(line)
                    loaded += 1
        except FileNotFoundError:
            logger.debug("No history file at %s", self.path)
            return 0
        except OSError as exc:
            self._report("read", exc)
            return 0
        logger.debug("Loaded %d history entries from %s", loaded, self.path)
        return loaded

    def save(self) -> int:
        """Write the editor's whole history to the file.

        Returns the entry count, or 0 when the file cannot be written.
        """
        self._console.print("Saving command history", highlight=False)
        entries = [entry for entry in self._editor.history() if entry]
        try:
            with self.path.open("w", encoding=HISTORY_ENCODING, errors=HISTORY_ERRORS) as stream:
                for entry in entries:
                    stream.write(f"{entry}\n")
        except OSError as exc:
            self._report("save", exc)
            return 0
        logger.debug("Saved %d history entries to %s", len(entries), self.path)
        return len(entries)

    def _report(self, action: str, exc: OSError) -> None:
        self._err_console.print(
            f"Warning: could not {action} command history {self.path}: {exc.strerror or exc}",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

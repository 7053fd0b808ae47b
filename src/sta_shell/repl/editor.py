"""Line-editing front ends for the interactive loop.

``ReadlineEditor`` drives GNU readline (or libedit on macOS) through the
standard-library ``readline`` module: line editing, history navigation and
tab completion. The loop only talks to the ``LineEditor`` interface, so
tests can feed it scripted input.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any

from sta_shell.interp.base import Interpreter
from sta_shell.repl.completion import CompletionCursor, CompletionProvider

logger = logging.getLogger(__name__)

Completer = Callable[[str, int], "str | None"]

# Tcl word separators; "::" stays inside a word so namespaced names complete.
COMPLETER_DELIMS = " \t\n[]{};\"$"


class LineEditor(ABC):
    """Reads lines and keeps the in-memory history."""

    @abstractmethod
    def read_line(self, prompt: str) -> str | None:
        """Block for one line. Return None at end of input."""

    @abstractmethod
    def add_history(self, line: str) -> None:
        """Append ``line`` to the in-memory history."""

    @abstractmethod
    def history(self) -> list[str]:
        """Return the in-memory history, oldest first."""

    @abstractmethod
    def set_completer(self, completer: Completer | None) -> None:
        """Install ``completer`` for tab completion."""


class ReadlineEditor(LineEditor):
    """``LineEditor`` backed by the ``readline`` module."""

    def __init__(self) -> None:
        import readline

        self._readline: Any = readline
        # The loop decides what goes into the history.
        readline.set_auto_history(False)
        readline.set_completer_delims(COMPLETER_DELIMS)
        if "libedit" in (readline.__doc__ or ""):
            readline.parse_and_bind("bind ^I rl_complete")
        else:
            readline.parse_and_bind("tab: complete")

    def read_line(self, prompt: str) -> str | None:
        try:
            return input(prompt)
        except EOFError:
            print()
            return None

    def add_history(self, line: str) -> None:
        self._readline.add_history(line)

    def history(self) -> list[str]:
        length = self._readline.get_current_history_length()
        entries = (self._readline.get_history_item(index) for index in range(1, length + 1))
        return [entry for entry in entries if entry]

    def set_completer(self, completer: Completer | None) -> None:
        self._readline.set_completer(completer)


class ShellCompleter:
    """readline-style ``complete(text, state)`` over the domain command list.

    Domain command names come first, in list order. Once the list is
    exhausted, the interpreter's own command names starting with ``text``
    are offered, skipping any already returned.
    """

    def __init__(self, provider: CompletionProvider, interpreter: Interpreter) -> None:
        self._provider = provider
        self._interpreter = interpreter
        self._cursor: CompletionCursor | None = None
        self._offered: set[str] = set()
        self._fallback: Iterator[str] | None = None

    def complete(self, text: str, state: int) -> str | None:
        if state == 0 or self._cursor is None:
            self._cursor = self._provider.start(text)
            self._offered = set()
            self._fallback = None

        name = self._provider.advance(self._cursor)
        if name is not None:
            self._offered.add(name)
            return name

        if self._fallback is None:
            names = sorted(
                command
                for command in self._interpreter.command_names()
                if command.startswith(text) and command not in self._offered
            )
            self._fallback = iter(names)
        return next(self._fallback, None)

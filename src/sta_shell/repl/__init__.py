"""Interactive loop, line editing, completion and history."""
from __future__ import annotations

from sta_shell.repl.completion import EXTRA_COMMANDS, CompletionCursor, CompletionProvider
from sta_shell.repl.editor import LineEditor, ReadlineEditor, ShellCompleter
from sta_shell.repl.history import HistoryStore
from sta_shell.repl.loop import InteractiveLoop

__all__ = [
    "EXTRA_COMMANDS",
    "CompletionCursor",
    "CompletionProvider",
    "HistoryStore",
    "InteractiveLoop",
    "LineEditor",
    "ReadlineEditor",
    "ShellCompleter",
]

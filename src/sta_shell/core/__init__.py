"""Core domain objects: the session, its exit flag and the engine handle.

Submodules in core/ should not import from repl/, bootstrap/ or cli/.
"""
from __future__ import annotations

from sta_shell.core.errors import BundleFormatError, SessionError, StaShellError
from sta_shell.core.engine import AnalysisEngine
from sta_shell.core.session import (
    InterpreterSession,
    ShellState,
    Termination,
    make_exit_command,
)

__all__ = [
    "AnalysisEngine",
    "BundleFormatError",
    "InterpreterSession",
    "SessionError",
    "ShellState",
    "StaShellError",
    "Termination",
    "make_exit_command",
]

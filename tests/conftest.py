"""Shared test fixtures for sta-shell.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. ``FakeInterpreter`` and ``FakeEditor`` stand
in for Tcl and readline so unit tests run without either.
"""
from __future__ import annotations

import io
import logging
from collections.abc import Iterable

import pytest
from rich.console import Console

from sta_shell.core.engine import AnalysisEngine
from sta_shell.core.session import InterpreterSession
from sta_shell.interp.base import CommandFunc, EvalResult, Interpreter
from sta_shell.repl.editor import Completer, LineEditor


class FakeInterpreter(Interpreter):
    """Records what it is asked to do.

    A script whose first word is a created command calls that command with
    the remaining words. Scripts listed in ``failing`` return an error; all
    other scripts succeed with an empty result.
    """

    def __init__(self, failing: Iterable[str] = ()) -> None:
        self.failing = set(failing)
        self.events: list[str] = []
        self.evaluated: list[str] = []
        self.commands: dict[str, CommandFunc] = {}
        self.initialized = False
        self.closed = False
        self._error_info = ""

    def initialize(self) -> None:
        self.initialized = True
        self.events.append("initialize")

    def eval(self, script: str) -> EvalResult:
        self.evaluated.append(script)
        self.events.append(f"eval:{script}")
        if script in self.failing:
            self._error_info = f"error in {script}\n    while executing\n\"{script}\""
            return EvalResult.failure(f"error in {script}")
        words = script.split()
        if words and words[0] in self.commands:
            try:
                result = self.commands[words[0]](*words[1:])
            except Exception as exc:
                return EvalResult.failure(str(exc))
            return EvalResult.success("" if result is None else str(result))
        return EvalResult.success()

    def create_command(self, name: str, func: CommandFunc) -> None:
        self.commands[name] = func
        self.events.append(f"command:{name}")

    def command_names(self) -> list[str]:
        return ["after", "exit", "proc", "puts", "set", "source", *self.commands]

    def error_info(self) -> str:
        return self._error_info

    def quote(self, word: str) -> str:
        return "{" + word + "}"

    def close(self) -> None:
        self.closed = True


class FakeEditor(LineEditor):
    """Feeds scripted lines; an exception instance in the script is raised."""

    def __init__(self, lines: Iterable[str | BaseException] = ()) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.entries: list[str] = []
        self.completer: Completer | None = None
        self.completer_history: list[Completer | None] = []

    def read_line(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if not self._lines:
            return None
        line = self._lines.pop(0)
        if isinstance(line, BaseException):
            raise line
        return line

    def add_history(self, line: str) -> None:
        self.entries.append(line)

    def history(self) -> list[str]:
        return list(self.entries)

    def set_completer(self, completer: Completer | None) -> None:
        self.completer = completer
        self.completer_history.append(completer)


def make_console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture(autouse=True)
def reset_engine_singleton():
    """Keep the process-wide engine from leaking between tests."""
    yield
    AnalysisEngine.set_engine(None)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo ``configure_logging`` so caplog keeps seeing package records."""
    logger = logging.getLogger("sta_shell")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture()
def interpreter() -> FakeInterpreter:
    return FakeInterpreter()


@pytest.fixture()
def make_interpreter() -> type[FakeInterpreter]:
    return FakeInterpreter


@pytest.fixture()
def make_editor() -> type[FakeEditor]:
    return FakeEditor


@pytest.fixture()
def console() -> Console:
    return make_console()


@pytest.fixture()
def err_console() -> Console:
    return make_console()


@pytest.fixture()
def session(interpreter: FakeInterpreter, console: Console, err_console: Console) -> InterpreterSession:
    return InterpreterSession(interpreter, console=console, err_console=err_console)


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "sta_shell"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"

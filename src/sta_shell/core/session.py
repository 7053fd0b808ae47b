"""The interpreter session: one interpreter, one engine, one exit flag.

A session is created once per process and lives until the interactive loop
ends. It owns the ``Termination`` flag that the host-level ``exit`` command
sets, and the analysis-engine reference bound during bootstrap.
"""
from __future__ import annotations

import logging
from enum import Enum, auto
from os import PathLike

from rich.console import Console

from sta_shell.core.engine import AnalysisEngine
from sta_shell.core.errors import SessionError
from sta_shell.interp.base import EvalResult, Interpreter

logger = logging.getLogger(__name__)


class ShellState(Enum):
    RUNNING = auto()
    TERMINATING = auto()


class Termination:
    """Monotonic RUNNING -> TERMINATING flag."""

    def __init__(self) -> None:
        self._state = ShellState.RUNNING

    @property
    def state(self) -> ShellState:
        return self._state

    @property
    def requested(self) -> bool:
        return self._state is ShellState.TERMINATING

    def request(self) -> None:
        if self._state is ShellState.RUNNING:
            logger.debug("Termination requested")
        self._state = ShellState.TERMINATING


def make_exit_command(termination: Termination):
    """Return the host-level ``exit`` command bound to ``termination``.

    Any arguments (such as an exit code) are accepted and ignored; the
    shell shuts down normally once the current evaluation completes.
    """

    def command_exit(*args: str) -> str:
        termination.request()
        return ""

    return command_exit


class InterpreterSession:
    """Owns the interpreter for the lifetime of the shell.

    Parameters
    ----------
    interpreter:
        The interpreter backend. ``initialize`` is called by the
        bootstrapper, not here.
    console:
        Destination for echoed output. Defaults to stdout.
    err_console:
        The diagnostic stream. Defaults to stderr.
    """

    def __init__(
        self,
        interpreter: Interpreter,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.interpreter = interpreter
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.termination = Termination()
        self._engine: AnalysisEngine | None = None
        self._closed = False

    @property
    def engine(self) -> AnalysisEngine | None:
        return self._engine

    @property
    def closed(self) -> bool:
        return self._closed

    def bind_engine(self, engine: AnalysisEngine) -> None:
        """Bind ``engine`` to this session. Allowed exactly once."""
        if self._engine is not None:
            raise SessionError("An analysis engine is already bound to this session.")
        self._engine = engine
        engine.bind_interpreter(self.interpreter)
        logger.debug("Bound engine %s", type(engine).__qualname__)

    def eval(self, script: str) -> EvalResult:
        if self._closed:
            raise SessionError("Cannot evaluate in a closed session.")
        return self.interpreter.eval(script)

    def eval_reported(self, script: str) -> EvalResult:
        """Evaluate ``script``, writing any error text to the diagnostic stream."""
        result = self.eval(script)
        if not result.ok:
            self.report_error(result.text)
        return result

    def source_echo_verbose(self, path: str | PathLike[str]) -> EvalResult:
        """Source ``path``, printing each command and its result as it runs."""
        word = self.interpreter.quote(str(path))
        return self.eval_reported(f"source -echo -verbose {word}")

    def report_error(self, text: str) -> None:
        self.err_console.print(text, markup=False, highlight=False, soft_wrap=True)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.interpreter.close()
        logger.debug("Session closed")

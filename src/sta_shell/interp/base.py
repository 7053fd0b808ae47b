"""Interpreter abstraction used by the shell.

The shell never evaluates commands itself. Every bootstrap step and every
interactive line is handed to an ``Interpreter`` implementation, which
reports back an ``EvalResult`` instead of raising. Backends wrap a concrete
command language (see ``sta_shell.interp.tcl``); tests substitute a fake.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto


class EvalStatus(Enum):
    """Completion status of a single evaluation."""

    OK = auto()
    ERROR = auto()


@dataclass(frozen=True)
class EvalResult:
    """Outcome of evaluating a script.

    Parameters
    ----------
    status:
        Whether the evaluation succeeded.
    text:
        The interpreter's result string, or its error message when
        ``status`` is ``ERROR``.
    """

    status: EvalStatus
    text: str = ""

    @classmethod
    def success(cls, text: str = "") -> EvalResult:
        return cls(EvalStatus.OK, text)

    @classmethod
    def failure(cls, text: str) -> EvalResult:
        return cls(EvalStatus.ERROR, text)

    @property
    def ok(self) -> bool:
        """Return True if the evaluation completed without error."""
        return self.status is EvalStatus.OK


CommandFunc = Callable[..., object]


class Interpreter(ABC):
    """An embedded command interpreter hosting one shell session."""

    @abstractmethod
    def initialize(self) -> None:
        """Create and initialize the underlying runtime.

        Must be called once before any other method.
        """

    @abstractmethod
    def eval(self, script: str) -> EvalResult:
        """Evaluate ``script`` as one unit and report the outcome."""

    @abstractmethod
    def create_command(self, name: str, func: CommandFunc) -> None:
        """Register ``func`` as interpreter command ``name``.

        The command receives its words as positional string arguments.
        An exception raised by ``func`` becomes an interpreter error whose
        text is the exception message. Registering an existing name
        replaces the previous command.
        """

    @abstractmethod
    def command_names(self) -> list[str]:
        """Return the names of all commands visible from the global scope."""

    @abstractmethod
    def error_info(self) -> str:
        """Return the backtrace recorded for the most recent error."""

    @abstractmethod
    def quote(self, word: str) -> str:
        """Quote ``word`` so it evaluates back to itself as a single word."""

    @abstractmethod
    def close(self) -> None:
        """Release the runtime. The interpreter is unusable afterwards."""

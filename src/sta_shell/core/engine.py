"""The analysis-engine handle shared between the host and its commands.

The engine itself lives outside this package. Embedding applications
subclass ``AnalysisEngine`` (or pass any object with the same methods) and
install it with ``AnalysisEngine.set_engine`` before the shell starts.
"""
from __future__ import annotations

import logging
from typing import ClassVar

from sta_shell.interp.base import Interpreter

logger = logging.getLogger(__name__)


class AnalysisEngine:
    """Process-wide analysis engine singleton.

    The default implementation only records what the shell hands it: the
    thread count and the interpreter it is bound to.
    """

    _instance: ClassVar[AnalysisEngine | None] = None

    def __init__(self) -> None:
        self.thread_count = 1
        self.interpreter: Interpreter | None = None

    @classmethod
    def set_engine(cls, engine: AnalysisEngine | None) -> None:
        """Install ``engine`` as the process-wide singleton."""
        cls._instance = engine

    @classmethod
    def engine(cls) -> AnalysisEngine | None:
        """Return the installed singleton, or None."""
        return cls._instance

    def make_components(self) -> None:
        """Build the engine's internal components. No-op by default."""

    def set_thread_count(self, count: int) -> None:
        logger.debug("Engine thread count set to %d", count)
        self.thread_count = count

    def bind_interpreter(self, interpreter: Interpreter) -> None:
        self.interpreter = interpreter

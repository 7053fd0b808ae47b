"""The registrar used when no embedding application supplies one.

It defines only host-level commands in the ``sta`` namespace; analysis
commands come from the application's own registrar.
"""
from __future__ import annotations

from sta_shell.core.engine import AnalysisEngine
from sta_shell.interp.base import Interpreter
from sta_shell.plugins.registry import registrars


def _version(*args: str) -> str:
    from sta_shell import __version__

    return __version__


def _thread_count(*args: str) -> str:
    engine = AnalysisEngine.engine()
    return str(engine.thread_count if engine is not None else 1)


@registrars.register("builtin")
def register_builtin_commands(interp: Interpreter) -> None:
    interp.create_command("sta::version", _version)
    interp.create_command("sta::thread_count", _thread_count)

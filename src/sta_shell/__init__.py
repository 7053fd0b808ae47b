"""sta-shell: interactive Tcl command shell host for a static timing analyzer.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import sys
    import sta_shell

    def register_commands(interp):
        interp.create_command("sta::report_checks", report_checks)

    sys.exit(sta_shell.sta_main(sys.argv, registrar=register_commands))

    sta_shell.__version__
    '0.1.0'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from sta_shell.core import AnalysisEngine, InterpreterSession  # noqa: E402
from sta_shell.interp import EvalResult, Interpreter, TclInterpreter  # noqa: E402
from sta_shell.shell import sta_main  # noqa: E402

__all__ = [
    "__version__",
    "AnalysisEngine",
    "EvalResult",
    "Interpreter",
    "InterpreterSession",
    "TclInterpreter",
    "sta_main",
]

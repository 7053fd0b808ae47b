"""Tcl backend for the shell, built on the ``tkinter.Tcl`` interpreter.

``tkinter.Tcl()`` creates a Tcl interpreter without loading Tk, so no
window system is needed. ``tkinter`` is imported lazily in ``initialize``
so that importing this module never requires Tcl to be installed.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sta_shell.core.errors import SessionError
from sta_shell.interp.base import CommandFunc, EvalResult, Interpreter

if TYPE_CHECKING:
    import tkinter

logger = logging.getLogger(__name__)

HIDDEN_COMMAND_PREFIX = "::_sta_shell_py_"

COMMAND_PROC_BODY = """\
lassign [%s {*}$args] code result
if { $code } {
  return -code error $result
}
return $result
"""


class TclInterpreter(Interpreter):
    """``Interpreter`` backed by a real Tcl interpreter."""

    def __init__(self) -> None:
        self._root: tkinter.Tk | None = None

    @property
    def _tk(self) -> Any:
        if self._root is None:
            raise SessionError("Tcl interpreter is not initialized or already closed.")
        return self._root.tk

    def initialize(self) -> None:
        import tkinter

        # Tcl() runs Tcl_Init, which sources the library's init.tcl.
        self._root = tkinter.Tcl()
        logger.debug("Initialized Tcl %s", self._tk.call("info", "patchlevel"))

    def eval(self, script: str) -> EvalResult:
        import tkinter

        try:
            result = self._tk.eval(script)
        except tkinter.TclError as exc:
            return EvalResult.failure(str(exc))
        return EvalResult.success(str(result))

    def create_command(self, name: str, func: CommandFunc) -> None:
        """Register ``func`` as Tcl command ``name``.

        ``_tkinter`` turns an exception raised by a Python command into a
        Tcl error with an empty message. To keep the message, ``func`` is
        registered under a hidden name that returns a ``{code result}``
        pair, and ``name`` is a proc that raises the error in Tcl.
        """
        tk = self._tk
        hidden = HIDDEN_COMMAND_PREFIX + name.replace(":", "_")

        def invoke(*args: str) -> tuple[int, Any]:
            try:
                result = func(*args)
            except Exception as exc:
                logger.debug("Command %r failed", name, exc_info=True)
                return 1, str(exc) or type(exc).__name__
            return 0, "" if result is None else result

        tk.createcommand(hidden, invoke)
        namespace = name.rpartition("::")[0]
        if namespace:
            tk.call("namespace", "eval", namespace, "")
        tk.call("proc", name, "args", COMMAND_PROC_BODY % tk.call("list", hidden))
        logger.debug("Created Tcl command %r", name)

    def command_names(self) -> list[str]:
        names = self._tk.splitlist(self._tk.call("info", "commands"))
        return [name for name in names if not ("::" + name).startswith(HIDDEN_COMMAND_PREFIX)]

    def error_info(self) -> str:
        import tkinter

        try:
            return str(self._tk.globalgetvar("errorInfo"))
        except tkinter.TclError:
            return ""

    def quote(self, word: str) -> str:
        return str(self._tk.call("list", word))

    def close(self) -> None:
        if self._root is not None:
            self._root = None
            logger.debug("Released Tcl interpreter")

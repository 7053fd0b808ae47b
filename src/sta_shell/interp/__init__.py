"""Interpreter abstraction and the Tcl backend."""
from __future__ import annotations

from sta_shell.interp.base import CommandFunc, EvalResult, EvalStatus, Interpreter
from sta_shell.interp.tcl import TclInterpreter

__all__ = ["CommandFunc", "EvalResult", "EvalStatus", "Interpreter", "TclInterpreter"]

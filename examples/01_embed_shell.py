#!/usr/bin/env python3
"""Example: Embedding sta-shell in an analysis application

Provides a small analysis engine and one domain command, then hands the
command line to ``sta_main``. The shell does not echo command results,
so print them with ``puts``. Inside the shell try::

    sta> puts [report_checks]
    sta> puts [thread_count]
    sta> exit

Usage:
    python examples/01_embed_shell.py -threads max

Requirements:
    pip install sta-shell
"""
from __future__ import annotations

import sys

from sta_shell import AnalysisEngine, Interpreter, sta_main
from sta_shell.plugins import register_builtin_commands


class ToyEngine(AnalysisEngine):
    def make_components(self) -> None:
        self.paths: list[tuple[str, float]] = [
            ("in1 -> reg1/D", 0.42),
            ("reg1/Q -> out1", -0.07),
        ]


def register_toy_commands(interp: Interpreter) -> None:
    register_builtin_commands(interp)

    def report_checks(*args: str) -> str:
        engine = AnalysisEngine.engine()
        lines = [f"{slack:>7.2f}  {path}" for path, slack in engine.paths]
        return "\n".join(["  slack  path", *lines])

    interp.create_command("sta::report_checks", report_checks)


def main() -> int:
    return sta_main(sys.argv, engine=ToyEngine(), registrar=register_toy_commands)


if __name__ == "__main__":
    sys.exit(main())

"""Process-level entry for embedding applications.

An application that provides its own analysis engine and commands calls
``sta_main`` from its ``main``::

    from sta_shell import AnalysisEngine, sta_main

    def register_timing_commands(interp):
        interp.create_command("sta::report_checks", report_checks)

    sys.exit(sta_main(sys.argv, engine=TimingEngine(),
                      registrar=register_timing_commands))
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from rich.console import Console

from sta_shell.args.scanner import resolve_thread_count
from sta_shell.bootstrap.bootstrapper import Bootstrapper
from sta_shell.config import ShellConfig
from sta_shell.core.engine import AnalysisEngine
from sta_shell.core.session import InterpreterSession
from sta_shell.interp.base import Interpreter
from sta_shell.interp.tcl import TclInterpreter
from sta_shell.plugins.builtin import register_builtin_commands
from sta_shell.plugins.registry import CommandRegistrar
from sta_shell.repl.editor import LineEditor, ReadlineEditor
from sta_shell.repl.history import HistoryStore
from sta_shell.repl.loop import InteractiveLoop

logger = logging.getLogger(__name__)

USAGE_FLAGS = (
    ("-help", "show help and exit"),
    ("-version", "show version and exit"),
    ("-no_init", "do not read .sta init file"),
    ("-no_splash", "do not show the startup banner"),
    ("-x cmd", "evaluate cmd"),
    ("-f cmd_file", "source cmd_file"),
    ("-threads count|max", "use count threads"),
)


def usage_text(prog: str) -> str:
    lines = [f"Usage: {prog} [-help] [-version] [-no_init] [-no_splash] [-x cmd] [-f cmd_file]"]
    for flag, description in USAGE_FLAGS:
        lines.append(f"  {flag:<18} {description}")
    return "\n".join(lines)


def sta_main(
    args: Sequence[str],
    *,
    engine: AnalysisEngine | None = None,
    registrar: CommandRegistrar = register_builtin_commands,
    config: ShellConfig | None = None,
    interpreter: Interpreter | None = None,
    editor: LineEditor | None = None,
    console: Console | None = None,
    err_console: Console | None = None,
) -> int:
    """Run the shell for ``args`` (``args[0]`` is the program name).

    Installs ``engine`` as the process-wide engine, forwards ``-threads``,
    bootstraps one interpreter session and runs the interactive loop until
    ``exit`` or end of input. Returns the process exit status.
    """
    config = config or ShellConfig()
    console = console or Console()
    err_console = err_console or Console(stderr=True)

    engine = engine or AnalysisEngine()
    AnalysisEngine.set_engine(engine)
    engine.make_components()

    threads = resolve_thread_count(args)
    if threads.warning:
        err_console.print(threads.warning, highlight=False)
    if threads.exists:
        engine.set_thread_count(threads.count)

    session = InterpreterSession(
        interpreter or TclInterpreter(), console=console, err_console=err_console
    )
    Bootstrapper(registrar, engine, config).run(session, args)

    editor = editor or ReadlineEditor()
    history = HistoryStore(config.history_path, editor, console=console, err_console=err_console)
    InteractiveLoop(session, editor, history, config.prompt).run()
    return 0

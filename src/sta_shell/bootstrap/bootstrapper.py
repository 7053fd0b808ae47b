"""Fixed, ordered initialization of an interpreter session.

The sequence is:

 1. ``init_interp``        initialize the interpreter runtime
 2. ``exit_command``       register the host ``exit`` command
 3. ``register_commands``  run the domain-command registrar
 4. ``bind_engine``        bind the analysis engine into the session
 5. ``eval_bundle``        decode and evaluate the embedded init script
 6. ``show_splash``        print the banner          (skipped by -no_splash)
 7. ``import_commands``    publish sta::* into the global namespace
 8. ``source_init``        source ~/.sta             (skipped by -no_init)
 9. ``eval_cmd``           evaluate ``-x cmd``
10. ``source_file``        source ``-f file``

Steps always run in this order, whatever the order of the flags on the
command line, so ``-x`` is evaluated before ``-f`` is sourced. A failing
init script (step 5) ends the process; failures in steps 6-10 are printed
to the diagnostic stream and the sequence carries on.
"""
from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from rich.markup import escape

from sta_shell.args.scanner import has_flag, key_value
from sta_shell.bundle.decoder import evaluate_bundle
from sta_shell.bundle.init_scripts import TCL_INITS
from sta_shell.config import ShellConfig
from sta_shell.core.engine import AnalysisEngine
from sta_shell.core.session import InterpreterSession, make_exit_command
from sta_shell.plugins.registry import CommandRegistrar

logger = logging.getLogger(__name__)

NO_SPLASH_FLAG = "-no_splash"
NO_INIT_FLAG = "-no_init"
EVAL_KEY = "-x"
FILE_KEY = "-f"

BUNDLE_EXIT_STATUS = 1

StepAction = Callable[[InterpreterSession, "str | None"], None]


@dataclass(frozen=True)
class BootstrapStep:
    """One initialization action.

    Parameters
    ----------
    name:
        Identifier used in logs.
    action:
        Called with the session and, for keyed steps, the key's value.
    skip_flag:
        The step is skipped when this flag is present.
    value_key:
        The step runs only when this key has a value.
    """

    name: str
    action: StepAction
    skip_flag: str | None = None
    value_key: str | None = None

    def applies(self, args: Sequence[str]) -> tuple[bool, str | None]:
        """Return whether the step runs for ``args``, and its value."""
        if self.skip_flag is not None and has_flag(args, self.skip_flag):
            return False, None
        if self.value_key is not None:
            value = key_value(args, self.value_key)
            return value is not None, value
        return True, None


class Bootstrapper:
    """Runs the initialization sequence against a new session.

    Parameters
    ----------
    registrar:
        The embedding application's domain-command registrar.
    engine:
        The analysis engine to bind into the session.
    config:
        Shell settings; supplies the init-file path.
    bundle:
        Encoded init-script fragments.
    """

    def __init__(
        self,
        registrar: CommandRegistrar,
        engine: AnalysisEngine,
        config: ShellConfig | None = None,
        bundle: Iterable[str] = TCL_INITS,
    ) -> None:
        self._registrar = registrar
        self._engine = engine
        self._config = config or ShellConfig()
        self._bundle = bundle

    def steps(self) -> list[BootstrapStep]:
        return [
            BootstrapStep("init_interp", self._init_interp),
            BootstrapStep("exit_command", self._exit_command),
            BootstrapStep("register_commands", self._register_commands),
            BootstrapStep("bind_engine", self._bind_engine),
            BootstrapStep("eval_bundle", self._eval_bundle),
            BootstrapStep("show_splash", self._show_splash, skip_flag=NO_SPLASH_FLAG),
            BootstrapStep("import_commands", self._import_commands),
            BootstrapStep("source_init", self._source_init, skip_flag=NO_INIT_FLAG),
            BootstrapStep("eval_cmd", self._eval_cmd, value_key=EVAL_KEY),
            BootstrapStep("source_file", self._source_file, value_key=FILE_KEY),
        ]

    def run(self, session: InterpreterSession, args: Sequence[str]) -> list[str]:
        """Run every applicable step and return the names of those that ran."""
        executed: list[str] = []
        for step in self.steps():
            runs, value = step.applies(args)
            if not runs:
                logger.debug("Skipping bootstrap step %s", step.name)
                continue
            logger.debug("Running bootstrap step %s", step.name)
            step.action(session, value)
            executed.append(step.name)
        return executed

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _init_interp(self, session: InterpreterSession, value: str | None) -> None:
        session.interpreter.initialize()

    def _exit_command(self, session: InterpreterSession, value: str | None) -> None:
        session.interpreter.create_command("exit", make_exit_command(session.termination))

    def _register_commands(self, session: InterpreterSession, value: str | None) -> None:
        self._registrar(session.interpreter)

    def _bind_engine(self, session: InterpreterSession, value: str | None) -> None:
        session.bind_engine(self._engine)

    def _eval_bundle(self, session: InterpreterSession, value: str | None) -> None:
        result = evaluate_bundle(session.interpreter, self._bundle)
        if result.fatal:
            session.err_console.print(
                f"[red]Error:[/red] embedded init script: {escape(result.detail)}.",
                highlight=False,
            )
            session.err_console.print(
                "       The init script bundle is corrupt or does not match this "
                "version; regenerate sta_shell/bundle/init_scripts.py and reinstall.",
                highlight=False,
            )
            sys.exit(BUNDLE_EXIT_STATUS)

    def _show_splash(self, session: InterpreterSession, value: str | None) -> None:
        session.eval_reported("sta::show_splash")

    def _import_commands(self, session: InterpreterSession, value: str | None) -> None:
        session.eval_reported("sta::define_sta_cmds")
        session.eval_reported("namespace import sta::*")

    def _source_init(self, session: InterpreterSession, value: str | None) -> None:
        init_path = self._config.init_path
        if not init_path.is_file():
            logger.debug("No init file at %s", init_path)
            return
        session.source_echo_verbose(init_path)

    def _eval_cmd(self, session: InterpreterSession, value: str | None) -> None:
        if value is not None:
            session.eval_reported(value)

    def _source_file(self, session: InterpreterSession, value: str | None) -> None:
        if value is not None:
            session.source_echo_verbose(value)

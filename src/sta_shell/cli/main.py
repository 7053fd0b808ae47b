"""CLI entry point for sta-shell.

Invoked as::

    sta-shell [-help] [-version] [-no_init] [-no_splash] [-x cmd] [-f cmd_file]
              [-threads count|max]

or, during development::

    python -m sta_shell.cli.main

Flags are single-dash words scanned from the raw argument list, so click's
own option parsing and ``--help`` are turned off and every argument is
passed through untouched. Unknown arguments are ignored.
"""
from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from sta_shell.args.scanner import has_flag

console = Console()
err_console = Console(stderr=True)

PROG_NAME = "sta-shell"


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": [],
    }
)
@click.argument("argv", nargs=-1, type=click.UNPROCESSED)
def cli(argv: tuple[str, ...]) -> None:
    """Interactive static timing analysis command shell."""
    from sta_shell import __version__
    from sta_shell.config import ShellConfig
    from sta_shell.logging_config import configure_logging
    from sta_shell.plugins.registry import RegistrarNotFoundError, registrars
    from sta_shell.shell import sta_main, usage_text

    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else PROG_NAME
    args = (prog, *argv)

    if has_flag(args, "-help"):
        console.print(usage_text(prog), markup=False, highlight=False)
        sys.exit(0)
    if has_flag(args, "-version"):
        console.print(__version__, highlight=False)
        sys.exit(0)

    config = ShellConfig.from_env()
    configure_logging(config.log_level, err_console)

    registrars.load_entrypoints()
    try:
        registrar = registrars.get(config.registrar)
    except RegistrarNotFoundError as exc:
        err_console.print(f"[red]Error:[/red] {escape(exc.args[0])}")
        sys.exit(1)

    sys.exit(
        sta_main(args, registrar=registrar, config=config, console=console, err_console=err_console)
    )


if __name__ == "__main__":
    cli()

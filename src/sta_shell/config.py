"""Shell configuration.

The history and init-file locations are fixed. Only the log level and the
registrar name used by the console script can be changed, through the
environment.
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

DEFAULT_PROMPT: Final[str] = "sta> "
HISTORY_FILENAME: Final[str] = ".history_sta"
INIT_FILENAME: Final[str] = ".sta"

LOG_LEVEL_ENV: Final[str] = "STA_SHELL_LOG_LEVEL"
REGISTRAR_ENV: Final[str] = "STA_SHELL_REGISTRAR"


def default_init_path() -> Path:
    return Path.home() / INIT_FILENAME


@dataclass(frozen=True)
class ShellConfig:
    """Settings for one shell process.

    Parameters
    ----------
    prompt:
        Prompt shown by the interactive loop.
    history_path:
        History file, relative to the working directory.
    init_path:
        User init file sourced at startup unless ``-no_init`` is given.
    log_level:
        Level name for the ``sta_shell`` loggers.
    registrar:
        Name of the registrar the console script looks up.
    """

    prompt: str = DEFAULT_PROMPT
    history_path: Path = Path(HISTORY_FILENAME)
    init_path: Path = field(default_factory=default_init_path)
    log_level: str = "WARNING"
    registrar: str = "builtin"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ShellConfig:
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get(LOG_LEVEL_ENV, "WARNING").upper(),
            registrar=env.get(REGISTRAR_ENV, "builtin"),
        )

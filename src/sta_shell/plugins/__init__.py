"""Registrar subsystem for sta-shell.

Registrars define the domain command set. Third-party packages provide
them through ``importlib.metadata`` entry-points under the
"sta_shell.registrars" group.

Example
-------
Declare a registrar in pyproject.toml:

.. code-block:: toml

    [project.entry-points."sta_shell.registrars"]
    timing = "my_package.commands:register_timing_commands"
"""
from __future__ import annotations

from sta_shell.plugins.builtin import register_builtin_commands
from sta_shell.plugins.registry import (
    ENTRYPOINT_GROUP,
    CommandRegistrar,
    RegistrarAlreadyRegisteredError,
    RegistrarNotFoundError,
    RegistrarRegistry,
    registrars,
)

__all__ = [
    "ENTRYPOINT_GROUP",
    "CommandRegistrar",
    "RegistrarAlreadyRegisteredError",
    "RegistrarNotFoundError",
    "RegistrarRegistry",
    "register_builtin_commands",
    "registrars",
]

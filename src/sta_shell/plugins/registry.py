"""Registrar registry for sta-shell.

A *registrar* is the one callable an embedding application supplies to
define its domain commands. It receives the freshly initialized
``Interpreter`` and registers commands on it; the shell calls it exactly
once per process, before the embedded init script runs.

Registrars are registered by name, either with the ``@register`` decorator
at import time or lazily from installed packages that declare entry-points
in their own ``pyproject.toml`` under the "sta_shell.registrars" group.

Example
-------
Register a registrar with the decorator::

    from sta_shell.plugins.registry import registrars

    @registrars.register("timing")
    def register_timing_commands(interp):
        interp.create_command("sta::report_checks", report_checks)

Declare one from another package::

    [project.entry-points."sta_shell.registrars"]
    timing = "my_package.commands:register_timing_commands"

Retrieve it by name::

    registrar = registrars.get("timing")
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable
from typing import Final

from sta_shell.interp.base import Interpreter

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP: Final[str] = "sta_shell.registrars"

CommandRegistrar = Callable[[Interpreter], None]


class RegistrarNotFoundError(KeyError):
    """Raised when a requested registrar name is not in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.registrar_name = name
        self.available = available
        super().__init__(
            f"Registrar {name!r} is not registered. "
            f"Available registrars: {', '.join(available) or '(none)'}. "
            "Check that the package is installed and its entry-points are declared."
        )


class RegistrarAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str) -> None:
        self.registrar_name = name
        super().__init__(
            f"Registrar {name!r} is already registered. "
            "Use a unique name or explicitly deregister the existing entry first."
        )


class RegistrarRegistry:
    """Name-keyed registry of domain-command registrars."""

    def __init__(self) -> None:
        self._registrars: dict[str, CommandRegistrar] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[CommandRegistrar], CommandRegistrar]:
        """Return a decorator that registers the decorated function.

        Raises
        ------
        RegistrarAlreadyRegisteredError
            If ``name`` is already in use.
        TypeError
            If the decorated object is not callable.
        """

        def decorator(func: CommandRegistrar) -> CommandRegistrar:
            self.register_registrar(name, func)
            return func

        return decorator

    def register_registrar(self, name: str, func: CommandRegistrar) -> None:
        """Register ``func`` under ``name`` without decorator syntax."""
        if name in self._registrars:
            raise RegistrarAlreadyRegisteredError(name)
        if not callable(func):
            raise TypeError(f"Cannot register {func!r} under {name!r}: it is not callable.")
        self._registrars[name] = func
        logger.debug(
            "Registered registrar %r -> %s",
            name,
            getattr(func, "__qualname__", repr(func)),
        )

    def deregister(self, name: str) -> None:
        if name not in self._registrars:
            raise RegistrarNotFoundError(name, self.list_registrars())
        del self._registrars[name]
        logger.debug("Deregistered registrar %r", name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> CommandRegistrar:
        """Return the registrar registered under ``name``.

        Raises
        ------
        RegistrarNotFoundError
            If no registrar is registered under ``name``.
        """
        try:
            return self._registrars[name]
        except KeyError:
            raise RegistrarNotFoundError(name, self.list_registrars()) from None

    def list_registrars(self) -> list[str]:
        return sorted(self._registrars)

    def __contains__(self, name: object) -> bool:
        return name in self._registrars

    def __len__(self) -> int:
        return len(self._registrars)

    def __repr__(self) -> str:
        return f"RegistrarRegistry(registrars={self.list_registrars()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Discover and register registrars declared as package entry-points.

        Names that are already registered are skipped, so repeated calls
        are idempotent. Entry-points that fail to import are logged and
        skipped.
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._registrars:
                logger.debug("Entry-point %r already registered; skipping.", ep.name)
                continue
            try:
                func = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_registrar(ep.name, func)
            except (RegistrarAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered; skipping.",
                    ep.name,
                )


registrars = RegistrarRegistry()

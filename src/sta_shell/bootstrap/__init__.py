"""Session bootstrap sequence."""
from __future__ import annotations

from sta_shell.bootstrap.bootstrapper import BootstrapStep, Bootstrapper

__all__ = ["BootstrapStep", "Bootstrapper"]

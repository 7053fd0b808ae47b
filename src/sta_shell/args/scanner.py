"""Flag scanning over raw process arguments.

The shell does not parse its command line into a namespace. Each consumer
asks for the flag it cares about; arguments nobody asks about are simply
never inspected. ``args[0]`` is the program name and is always skipped.
"""
from __future__ import annotations

import os
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Final

THREADS_KEY: Final[str] = "-threads"
THREADS_WARNING: Final[str] = "Warning: -threads must be max or a positive integer."

_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9]+")


def has_flag(args: Sequence[str], name: str) -> bool:
    """Return True if any argument after the program name equals ``name``."""
    return any(arg == name for arg in args[1:])


def key_value(args: Sequence[str], name: str) -> str | None:
    """Return the argument following the first occurrence of ``name``.

    Returns None if ``name`` is absent, or if its first occurrence is the
    last argument.
    """
    for index in range(1, len(args)):
        if args[index] == name:
            if index + 1 < len(args):
                return args[index + 1]
            return None
    return None


@dataclass(frozen=True)
class ThreadSetting:
    """Result of resolving ``-threads``.

    Parameters
    ----------
    count:
        The thread count to use. 1 unless a valid value was given.
    exists:
        True if a valid value was given and should be forwarded.
    warning:
        Diagnostic text for an invalid value, otherwise None.
    """

    count: int = 1
    exists: bool = False
    warning: str | None = None


def resolve_thread_count(
    args: Sequence[str],
    processor_count: Callable[[], int | None] = os.cpu_count,
) -> ThreadSetting:
    """Resolve ``-threads <count|max>`` from ``args``.

    ``max`` maps to the detected processor count and a run of ASCII digits
    to its integer value. Anything else produces a warning and the default.
    """
    value = key_value(args, THREADS_KEY)
    if value is None:
        return ThreadSetting()
    if value == "max":
        return ThreadSetting(count=processor_count() or 1, exists=True)
    if _DIGITS.fullmatch(value):
        return ThreadSetting(count=int(value), exists=True)
    return ThreadSetting(warning=THREADS_WARNING)

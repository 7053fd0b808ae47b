"""Command-line flag scanning."""
from __future__ import annotations

from sta_shell.args.scanner import (
    THREADS_WARNING,
    ThreadSetting,
    has_flag,
    key_value,
    resolve_thread_count,
)

__all__ = ["THREADS_WARNING", "ThreadSetting", "has_flag", "key_value", "resolve_thread_count"]

"""Prefix completion over the compiled-in domain command names.

Completion state is an explicit ``CompletionCursor``. The caller starts a
cursor for a prefix and keeps it for as long as it wants more candidates
for that prefix::

    provider = CompletionProvider()
    cursor = provider.start("get_")
    while (name := provider.advance(cursor)) is not None:
        ...
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

EXTRA_COMMANDS: Final[tuple[str, ...]] = (
    "all_clocks",
    "all_inputs",
    "all_outputs",
    "all_registers",
    "check_setup",
    "create_clock",
    "create_generated_clock",
    "create_voltage_area",
    "current_design",
    "current_instance",
    "define_corners",
    "get_clocks",
    "get_fanin",
    "get_fanout",
    "get_nets",
    "get_pins",
    "get_ports",
    "read_liberty",
    "read_parasitics",
    "read_sdc",
    "read_sdf",
    "read_spef",
    "read_verilog",
    "report_annotated_delay",
    "report_cell",
    "report_checks",
    "report_path",
    "report_slack",
    "set_input_delay",
    "write_sdc",
    "write_sdf",
)


@dataclass
class CompletionCursor:
    """Scan position for one prefix."""

    prefix: str
    index: int = 0

    @property
    def prefix_length(self) -> int:
        return len(self.prefix)


class CompletionProvider:
    """Yields command names starting with a literal, case-sensitive prefix."""

    def __init__(self, commands: Sequence[str] = EXTRA_COMMANDS) -> None:
        self._commands = tuple(commands)

    @property
    def commands(self) -> tuple[str, ...]:
        return self._commands

    def start(self, prefix: str) -> CompletionCursor:
        return CompletionCursor(prefix)

    def advance(self, cursor: CompletionCursor) -> str | None:
        """Return the next match for ``cursor``, or None when exhausted."""
        length = cursor.prefix_length
        while cursor.index < len(self._commands):
            name = self._commands[cursor.index]
            cursor.index += 1
            if name[:length] == cursor.prefix:
                return name
        return None

    def matches(self, prefix: str) -> list[str]:
        cursor = self.start(prefix)
        found = []
        while (name := self.advance(cursor)) is not None:
            found.append(name)
        return found

"""Ranking of outbound commands by the profile's ``command-order``."""

from __future__ import annotations

from typing import Iterable

from gridmap.model.commands import Command

LOWEST_PRIORITY = 65535


class CommandPriorityMap:
    """Rank of each external key in a declared order (0 = first).

    Keys missing from the order rank ``LOWEST_PRIORITY``.  A key listed
    twice keeps its last position.
    """

    def __init__(self, command_order: Iterable[str] | None = None) -> None:
        self._ranks: dict[str, int] = {}
        for index, key in enumerate(command_order or ()):
            self._ranks[key] = index

    def get_priority(self, key: str) -> int:
        return self._ranks.get(key, LOWEST_PRIORITY)

    def __contains__(self, key: str) -> bool:
        return key in self._ranks

    def __len__(self) -> int:
        return len(self._ranks)


def command_priority(command: Command) -> int:
    """Best (lowest) priority among a command's outputs."""
    return min((o.priority for o in command.outputs), default=LOWEST_PRIORITY)


def order_commands(commands: Iterable[Command]) -> list[Command]:
    """Commands sorted for delivery; equal ranks keep their read order."""
    return sorted(commands, key=command_priority)

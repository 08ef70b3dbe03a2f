"""Command enumeration and delta table.

The vocabulary is closed: :class:`Command` lists every command the driver
accepts and :data:`COMMAND_DELTAS` maps each one to its signed health change.
Lookups by raw name go through :meth:`Command.parse`.
"""

from enum import StrEnum
from typing import Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap


class Command(StrEnum):
    """Named health operations; values are the display / dispatch names."""

    HEAL = "Heal"
    MINOR_ATTACK = "Minor_Attack"
    MAJOR_ATTACK = "Major_Attack"
    CRITICAL_ATTACK = "Critical_Attack"

    @classmethod
    def parse(cls, name: str) -> Optional["Command"]:
        """Return the command called ``name`` or ``None`` if unknown."""
        try:
            return cls(name)
        except ValueError:
            return None


COMMAND_DELTAS: PMap[Command, int] = pmap(
    {
        Command.HEAL: 15,
        Command.MINOR_ATTACK: -20,
        Command.MAJOR_ATTACK: -50,
        Command.CRITICAL_ATTACK: -101,
    }
)
"""Command → signed health delta."""


def delta_for(command: Command) -> int:
    """Signed health change applied by ``command``."""
    return COMMAND_DELTAS[command]

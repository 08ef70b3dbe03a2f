"""Core invocation surface.

:func:`run_command` lifts the current health into an ``Outcome`` and chains a
single executor step through it. It performs no session bookkeeping; see
:mod:`health_monad.session` for that.
"""

from typing import Optional

from health_monad.commands import Command, delta_for
from health_monad.executor import make_step
from health_monad.narration import LoggingNarrator, Narrator
from health_monad.outcome import Outcome
from health_monad.types import HealthValue


def run_command(
    name: str, current_health: HealthValue, narrator: Optional[Narrator] = None
) -> Outcome:
    """Run command ``name`` against ``current_health``.

    Args:
        name (str): One of the :class:`~health_monad.commands.Command` values.
        current_health (HealthValue): Health before the command. A value
            ``<= 0`` lifts to ``ABSENT`` and the step is skipped.
        narrator (Narrator | None): Sink for executor narration; defaults to
            a :class:`~health_monad.narration.LoggingNarrator`.

    Returns:
        Outcome: Result of the one-step chain.

    Raises:
        ValueError: If ``name`` is not a known command.
    """
    command = Command.parse(name)
    if command is None:
        raise ValueError(f"Unknown command: {name!r}")

    if narrator is None:
        narrator = LoggingNarrator()

    step = make_step(delta_for(command), command.value, narrator)
    return Outcome.of(current_health).chain(step)

"""Session state and command reducer.

This module is the *driver* side of the demo. A :class:`Session` is a frozen
snapshot of everything the player sees (health, game-over flag, narration
history); :func:`execute_command` is a pure reducer that returns a new
``Session`` for each command.

Policy the core leaves to the caller lives here:

* commands are refused once ``game_over`` is set (health is never touched
  again until :func:`reset_session`);
* an ``ABSENT`` outcome becomes ``health=0, game_over=True``;
* an ``Alive`` outcome becomes the new health.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional

import structlog
from pyrsistent import pvector
from pyrsistent.typing import PVector

from health_monad.commands import Command
from health_monad.config import DEFAULT_INITIAL_HEALTH
from health_monad.driver import run_command
from health_monad.narration import (
    NarrationEvent,
    Narrator,
    RecordingNarrator,
    TeeNarrator,
)
from health_monad.types import HealthValue

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Session:
    """Immutable session snapshot.

    Attributes:
        health (HealthValue): Current health; positive while alive, 0 once
            terminated.
        game_over (bool): Set when a command drove health to zero or below.
        initial_health (int): Health restored by :func:`reset_session`.
        turn (int): Number of commands applied so far.
        log (PVector[NarrationEvent]): Narration history, oldest first.
    """

    health: HealthValue = DEFAULT_INITIAL_HEALTH
    game_over: bool = False
    initial_health: int = DEFAULT_INITIAL_HEALTH
    turn: int = 0
    log: PVector[NarrationEvent] = pvector()


def new_session(
    initial_health: int = DEFAULT_INITIAL_HEALTH, narrator: Optional[Narrator] = None
) -> Session:
    """Create a fresh session.

    Raises:
        ValueError: If ``initial_health`` is not positive.
    """
    if initial_health <= 0:
        raise ValueError(f"Initial health must be positive, got {initial_health}")

    recorder = RecordingNarrator()
    _narrator(recorder, narrator).info(
        f"--- Game Reset. Initial Health: {initial_health} ---"
    )
    logger.debug("session_reset", initial_health=initial_health)
    return Session(
        health=initial_health,
        initial_health=initial_health,
        log=recorder.events,
    )


def reset_session(session: Session, narrator: Optional[Narrator] = None) -> Session:
    """Start over from ``session.initial_health``."""
    return new_session(session.initial_health, narrator)


def execute_command(
    session: Session, name: str, narrator: Optional[Narrator] = None
) -> Session:
    """Apply command ``name`` to ``session``.

    Args:
        session (Session): Previous snapshot.
        name (str): Raw command name (e.g. from a button).
        narrator (Narrator | None): Optional extra sink; events are always
            recorded into the returned session's ``log`` as well.

    Returns:
        Session: Next snapshot. Unknown command names return ``session``
            itself, unchanged.
    """
    recorder = RecordingNarrator()
    out = _narrator(recorder, narrator)

    if session.game_over:
        out.failure("GAME OVER. Please reset to continue.")
        return _append_log(session, recorder)

    command = Command.parse(name)
    if command is None:
        logger.debug("unknown_command_ignored", command=name)
        return session

    out.info(
        f"--- DRIVER: Executing Command: {command.value} (Health: {session.health}) ---"
    )
    outcome = run_command(command.value, session.health, out)
    final_health = outcome.extract()

    if final_health is None:
        out.failure("MONAD CHAIN BROKEN! Game Over.")
        session = replace(session, health=0, game_over=True)
    else:
        session = replace(session, health=final_health)
        out.success(f"DRIVER: Command success. State updated to {session.health}.")

    session = replace(session, turn=session.turn + 1)
    logger.debug(
        "command_applied",
        command=command.value,
        health=session.health,
        game_over=session.game_over,
        turn=session.turn,
    )
    return _append_log(session, recorder)


def log_events(session: Session) -> Iterable[NarrationEvent]:
    """Narration history of ``session``, oldest first."""
    return iter(session.log)


def _narrator(recorder: RecordingNarrator, extra: Optional[Narrator]) -> Narrator:
    if extra is None:
        return recorder
    return TeeNarrator(recorder, extra)


def _append_log(session: Session, recorder: RecordingNarrator) -> Session:
    return replace(session, log=session.log.extend(recorder.events))

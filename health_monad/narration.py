"""Narration events and sinks.

The core reports progress through the narrow :class:`Narrator` protocol
(``info`` / ``success`` / ``failure``). What happens to the text is up to the
driver: :class:`RecordingNarrator` keeps an immutable history that the session
stores, :class:`LoggingNarrator` forwards to structlog, and
:class:`TeeNarrator` fans out to several sinks at once.
"""

from dataclasses import dataclass, field
from typing import Protocol, Tuple

import structlog
from pyrsistent import pvector
from pyrsistent.typing import PVector

from health_monad.types import NarrationLevel


@dataclass(frozen=True)
class NarrationEvent:
    """Single line of narration.

    Attributes:
        level (NarrationLevel): Classification used for styling.
        text (str): Human readable message.
    """

    level: NarrationLevel
    text: str


class Narrator(Protocol):
    def info(self, text: str) -> None: ...

    def success(self, text: str) -> None: ...

    def failure(self, text: str) -> None: ...


@dataclass
class RecordingNarrator:
    """Collects events in emission order."""

    events: PVector[NarrationEvent] = field(default_factory=pvector)

    def _record(self, level: NarrationLevel, text: str) -> None:
        self.events = self.events.append(NarrationEvent(level=level, text=text))

    def info(self, text: str) -> None:
        self._record(NarrationLevel.INFO, text)

    def success(self, text: str) -> None:
        self._record(NarrationLevel.SUCCESS, text)

    def failure(self, text: str) -> None:
        self._record(NarrationLevel.FAILURE, text)


class LoggingNarrator:
    """Writes narration to a structlog logger.

    ``failure`` maps to ``warning`` so terminations surface even when verbose
    logging is off.
    """

    def __init__(self, name: str = "health_monad.narration") -> None:
        self._log = structlog.get_logger(name)

    def info(self, text: str) -> None:
        self._log.info(text, outcome=NarrationLevel.INFO.value)

    def success(self, text: str) -> None:
        self._log.info(text, outcome=NarrationLevel.SUCCESS.value)

    def failure(self, text: str) -> None:
        self._log.warning(text, outcome=NarrationLevel.FAILURE.value)


class TeeNarrator:
    def __init__(self, *narrators: Narrator) -> None:
        self.narrators: Tuple[Narrator, ...] = narrators

    def info(self, text: str) -> None:
        for narrator in self.narrators:
            narrator.info(text)

    def success(self, text: str) -> None:
        for narrator in self.narrators:
            narrator.success(text)

    def failure(self, text: str) -> None:
        for narrator in self.narrators:
            narrator.failure(text)


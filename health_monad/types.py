"""Common type aliases and enumerations.

``StepFn`` is the central extension point: any callable that lifts a live
health value into a new :class:`health_monad.outcome.Outcome` can be chained.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING, Union


# Forward declaration for StepFn typing to avoid circular imports:
if TYPE_CHECKING:
    from health_monad.outcome import Outcome

HealthValue = Union[int, float]

StepFn = Callable[[HealthValue], "Outcome"]


class NarrationLevel(StrEnum):
    """Severity of a narration event (mirrored as a CSS class in the UI)."""

    INFO = auto()
    SUCCESS = auto()
    FAILURE = auto()

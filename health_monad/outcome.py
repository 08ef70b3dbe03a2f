"""Fallible health container.

An :class:`Outcome` is a tagged variant with exactly two cases:

* :class:`Alive` wraps a strictly positive health value.
* :class:`Absent` marks a terminated computation. A single shared instance,
  :data:`ABSENT`, is used everywhere.

Construction goes through :meth:`Outcome.of`, which collapses any value that is
not a positive real number into ``ABSENT``; an ``Alive`` holding ``<= 0`` can
never be built through the public surface. :meth:`Outcome.chain` is the only
place where termination is propagated: once a chain reaches ``ABSENT`` every
later step is skipped and the same object is handed back.

Outcomes are frozen dataclasses. Every chaining step creates a new value; none
is ever mutated in place.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Optional

from health_monad.types import HealthValue, StepFn


class Outcome(ABC):
    """Base of the ``Alive | Absent`` sum type; not instantiable itself."""

    __slots__ = ()

    @staticmethod
    def of(value: object) -> "Outcome":
        """Lift a raw value into an ``Outcome``.

        Args:
            value (object): Candidate health value. Anything other than a real
                number strictly greater than zero (including ``None``,
                booleans and NaN) yields ``ABSENT``.

        Returns:
            Outcome: ``Alive(value)`` for positive numbers, otherwise ``ABSENT``.
        """
        if _is_positive(value):
            return Alive(value)  # type: ignore[arg-type]
        return ABSENT

    @abstractmethod
    def chain(self, step: StepFn) -> "Outcome": ...

    @abstractmethod
    def extract(self) -> Optional[HealthValue]: ...

    @property
    def is_alive(self) -> bool:
        return isinstance(self, Alive)

    @property
    def is_absent(self) -> bool:
        return isinstance(self, Absent)


@dataclass(frozen=True)
class Alive(Outcome):
    """Live health value, always a real number ``> 0``."""

    value: HealthValue

    def __post_init__(self) -> None:
        if not _is_positive(self.value):
            raise ValueError(f"Alive requires a positive number, got {self.value!r}")

    def chain(self, step: StepFn) -> Outcome:
        """Run ``step`` on the held value and return its ``Outcome``.

        Raises:
            TypeError: If ``step`` returns something other than an ``Outcome``.
        """
        result = step(self.value)
        if not isinstance(result, Outcome):
            raise TypeError(
                f"Chained step must return an Outcome, got {type(result).__name__}"
            )
        return result

    def extract(self) -> Optional[HealthValue]:
        return self.value


@dataclass(frozen=True)
class Absent(Outcome):
    """Terminated computation; chaining never revives it."""

    def chain(self, step: StepFn) -> Outcome:
        return self

    def extract(self) -> Optional[HealthValue]:
        return None


ABSENT = Absent()


def _is_positive(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return value > 0


def chain_all(outcome: Outcome, steps: Iterable[StepFn]) -> Outcome:
    """Chain ``steps`` in order, stopping at the first absent result.

    Steps after termination are never invoked, so lazily produced iterables
    are not consumed past that point.
    """
    for step in steps:
        if outcome.is_absent:
            break
        outcome = outcome.chain(step)
    return outcome

"""Step execution.

:func:`apply_step` is the pure computation behind every command: add a signed
delta to the current health and classify the result. It narrates exactly once
per call and returns a fresh :class:`~health_monad.outcome.Outcome`; nothing
else is touched.
"""

from health_monad.narration import Narrator
from health_monad.outcome import Outcome
from health_monad.types import HealthValue, StepFn


def format_delta(delta: HealthValue) -> str:
    return f"+{delta}" if delta > 0 else f"{delta}"


def apply_step(
    current_value: HealthValue, delta: HealthValue, label: str, narrator: Narrator
) -> Outcome:
    """Apply ``delta`` to ``current_value``.

    Args:
        current_value (HealthValue): Live health taken from an ``Alive`` outcome.
        delta (HealthValue): Signed change to apply.
        label (str): Display name used in the narration only.
        narrator (Narrator): Receives one ``success`` or ``failure`` event.

    Returns:
        Outcome: ``Alive(next)`` when ``next > 0``. Otherwise ``Outcome.of(0)``,
            i.e. ``ABSENT``; the raw overshoot only appears in the narration.
    """
    next_value = current_value + delta
    arithmetic = f"{label}: {current_value} {format_delta(delta)} = {next_value}"

    if next_value <= 0:
        narrator.failure(
            f"(Executor) {arithmetic}. New Health is {next_value}. FATAL ERROR!"
        )
        return Outcome.of(0)

    narrator.success(f"(Executor) {arithmetic}. Success: New Health is {next_value}.")
    return Outcome.of(next_value)


def make_step(delta: HealthValue, label: str, narrator: Narrator) -> StepFn:
    """Bind ``delta`` / ``label`` / ``narrator`` into a chainable step."""

    def step(current_value: HealthValue) -> Outcome:
        return apply_step(current_value, delta, label, narrator)

    step.__name__ = f"step_{label.lower()}"
    return step

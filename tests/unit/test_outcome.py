import math

import pytest

from health_monad.outcome import ABSENT, Absent, Alive, Outcome, chain_all
from tests.test_utils import CountingStep


@pytest.mark.parametrize("value", [1, 0.5, 80, 10**9])
def test_of_positive_is_alive(value: float) -> None:
    outcome = Outcome.of(value)
    assert isinstance(outcome, Alive)
    assert outcome.is_alive
    assert outcome.extract() == value


@pytest.mark.parametrize("value", [0, -1, -0.1, -71, None, math.nan, True, "5"])
def test_of_non_positive_is_absent(value: object) -> None:
    outcome = Outcome.of(value)
    assert outcome is ABSENT
    assert outcome.is_absent
    assert outcome.extract() is None


def test_of_absence_marker_stays_absent() -> None:
    assert Outcome.of(ABSENT.extract()) is ABSENT


def test_absent_short_circuits() -> None:
    step = CountingStep(Outcome.of(42))
    result = ABSENT.chain(step)
    assert result is ABSENT
    assert step.calls == []


def test_absent_instances_compare_equal() -> None:
    assert Absent() == ABSENT
    assert Absent().chain(CountingStep(Outcome.of(1))) == ABSENT


def test_alive_chain_returns_step_result() -> None:
    produced = Outcome.of(7)
    step = CountingStep(produced)
    result = Outcome.of(3).chain(step)
    assert result is produced
    assert step.calls == [3]


def test_alive_chain_can_terminate() -> None:
    step = CountingStep(ABSENT)
    assert Outcome.of(3).chain(step) is ABSENT
    assert step.calls == [3]


def test_chain_rejects_non_outcome() -> None:
    with pytest.raises(TypeError):
        Outcome.of(3).chain(lambda value: value + 1)  # type: ignore[arg-type,return-value]


def test_outcomes_are_frozen() -> None:
    outcome = Outcome.of(5)
    with pytest.raises(AttributeError):
        outcome.value = 10  # type: ignore[misc]


def test_chain_all_runs_every_step_while_alive() -> None:
    result = chain_all(
        Outcome.of(10),
        [lambda v: Outcome.of(v + 5), lambda v: Outcome.of(v * 2)],
    )
    assert result == Alive(30)


def test_chain_all_stops_after_termination() -> None:
    first = CountingStep(ABSENT)
    second = CountingStep(Outcome.of(99))
    result = chain_all(Outcome.of(10), [first, second])
    assert result is ABSENT
    assert first.calls == [10]
    assert second.calls == []


def test_chain_all_without_steps_returns_input() -> None:
    start = Outcome.of(4)
    assert chain_all(start, []) is start


@pytest.mark.parametrize("value", [0, -5, -0.5, math.nan, True, None, "5"])
def test_alive_rejects_non_positive(value: object) -> None:
    with pytest.raises(ValueError):
        Alive(value)  # type: ignore[arg-type]


def test_alive_accepts_positive() -> None:
    assert Alive(1).extract() == 1


def test_outcome_base_is_not_instantiable() -> None:
    with pytest.raises(TypeError):
        Outcome()  # type: ignore[abstract]


def test_every_outcome_is_alive_or_absent() -> None:
    for outcome in (Outcome.of(3), Outcome.of(-3)):
        assert outcome.is_alive != outcome.is_absent

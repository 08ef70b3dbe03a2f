import pytest

from health_monad.commands import COMMAND_DELTAS, Command, delta_for
from health_monad.driver import run_command
from health_monad.narration import RecordingNarrator
from health_monad.outcome import ABSENT, Alive


def test_delta_table() -> None:
    assert dict(COMMAND_DELTAS) == {
        Command.HEAL: 15,
        Command.MINOR_ATTACK: -20,
        Command.MAJOR_ATTACK: -50,
        Command.CRITICAL_ATTACK: -101,
    }


def test_every_command_has_a_delta() -> None:
    for command in Command:
        assert isinstance(delta_for(command), int)


@pytest.mark.parametrize(
    "name, command",
    [
        ("Heal", Command.HEAL),
        ("Minor_Attack", Command.MINOR_ATTACK),
        ("Major_Attack", Command.MAJOR_ATTACK),
        ("Critical_Attack", Command.CRITICAL_ATTACK),
    ],
)
def test_parse_known(name: str, command: Command) -> None:
    assert Command.parse(name) is command


@pytest.mark.parametrize("name", ["heal", "Fireball", "", "HEAL"])
def test_parse_unknown(name: str) -> None:
    assert Command.parse(name) is None


def test_run_command_alive() -> None:
    narrator = RecordingNarrator()
    assert run_command("Minor_Attack", 100, narrator) == Alive(80)
    assert len(narrator.events) == 1


def test_run_command_absent() -> None:
    narrator = RecordingNarrator()
    assert run_command("Critical_Attack", 30, narrator) is ABSENT


def test_run_command_skips_step_for_dead_health() -> None:
    narrator = RecordingNarrator()
    assert run_command("Heal", 0, narrator) is ABSENT
    assert len(narrator.events) == 0


def test_run_command_rejects_unknown_name() -> None:
    narrator = RecordingNarrator()
    with pytest.raises(ValueError):
        run_command("Fireball", 100, narrator)
    assert len(narrator.events) == 0


def test_delta_for_matches_table() -> None:
    assert delta_for(Command.CRITICAL_ATTACK) == -101

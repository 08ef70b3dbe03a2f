import pytest

from health_monad.config import DEFAULT_INITIAL_HEALTH, GameConfig


def test_defaults() -> None:
    config = GameConfig()
    assert config.initial_health == DEFAULT_INITIAL_HEALTH == 100
    assert not config.verbose
    assert not config.log_json


def test_from_env_empty() -> None:
    assert GameConfig.from_env({}) == GameConfig()


def test_from_env_overrides() -> None:
    config = GameConfig.from_env(
        {
            "HEALTH_MONAD_INITIAL_HEALTH": "250",
            "HEALTH_MONAD_VERBOSE": "yes",
            "HEALTH_MONAD_LOG_JSON": "1",
        }
    )
    assert config == GameConfig(initial_health=250, verbose=True, log_json=True)


def test_from_env_flag_falsey() -> None:
    assert not GameConfig.from_env({"HEALTH_MONAD_VERBOSE": "off"}).verbose


@pytest.mark.parametrize("value", ["0", "-5", "abc"])
def test_from_env_rejects_bad_health(value: str) -> None:
    with pytest.raises(ValueError):
        GameConfig.from_env({"HEALTH_MONAD_INITIAL_HEALTH": value})

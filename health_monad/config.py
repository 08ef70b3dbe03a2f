"""Game configuration defaults.

``GameConfig`` is a plain frozen dataclass so the Streamlit config tab can
``replace`` it field by field. :meth:`GameConfig.from_env` lets headless runs
pick settings up from ``HEALTH_MONAD_*`` environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_INITIAL_HEALTH = 100

ENV_PREFIX = "HEALTH_MONAD_"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class GameConfig:
    """Session and logging settings.

    Attributes:
        initial_health (int): Health a fresh or reset session starts with.
        verbose (bool): Emit DEBUG logs from ``health_monad`` loggers.
        log_json (bool): Render logs as JSON lines instead of console output.
    """

    initial_health: int = DEFAULT_INITIAL_HEALTH
    verbose: bool = False
    log_json: bool = False

    def __post_init__(self) -> None:
        if self.initial_health <= 0:
            raise ValueError(
                f"initial_health must be positive, got {self.initial_health}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """Build a config from environment variables, falling back to defaults.

        Raises:
            ValueError: If ``HEALTH_MONAD_INITIAL_HEALTH`` is not a positive integer.
        """
        env = os.environ if environ is None else environ
        initial_health = env.get(f"{ENV_PREFIX}INITIAL_HEALTH")
        return cls(
            initial_health=(
                int(initial_health)
                if initial_health is not None
                else DEFAULT_INITIAL_HEALTH
            ),
            verbose=_flag(env.get(f"{ENV_PREFIX}VERBOSE")),
            log_json=_flag(env.get(f"{ENV_PREFIX}LOG_JSON")),
        )


def _flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY

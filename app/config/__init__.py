import streamlit as st

from health_monad.config import GameConfig
from health_monad.utils.logging import configure_logging

from .session_factory import make_session_and_reset

__all__ = [
    "make_session_and_reset",
    "set_default_config",
    "get_config_from_widgets",
]


def set_default_config() -> None:
    if "config" not in st.session_state:
        config = GameConfig.from_env()
        configure_logging(verbose=config.verbose, log_json=config.log_json)
        st.session_state["config"] = config


def get_config_from_widgets() -> GameConfig:
    current: GameConfig = st.session_state["config"]
    st.subheader("Session")
    initial_health = st.number_input(
        "Initial health",
        min_value=1,
        value=current.initial_health,
        step=1,
        help="Health a new or reset session starts with.",
        key="initial_health_input",
    )
    st.subheader("Logging")
    verbose = st.checkbox("Verbose", value=current.verbose, key="verbose_input")
    log_json = st.checkbox("JSON logs", value=current.log_json, key="log_json_input")
    return GameConfig(
        initial_health=int(initial_health), verbose=verbose, log_json=log_json
    )

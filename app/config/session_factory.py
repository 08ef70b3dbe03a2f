import streamlit as st

from health_monad.config import GameConfig
from health_monad.narration import LoggingNarrator
from health_monad.session import new_session
from health_monad.utils.logging import configure_logging


def make_session_and_reset(config: GameConfig) -> None:
    """Start a fresh session for ``config``.

    Centralizes session_state bookkeeping (session, narrator, prev_health) so
    the page script only reads from it.
    """
    configure_logging(verbose=config.verbose, log_json=config.log_json)
    narrator = LoggingNarrator()
    session = new_session(config.initial_health, narrator)
    st.session_state["narrator"] = narrator
    st.session_state["session"] = session
    st.session_state["prev_health"] = session.health

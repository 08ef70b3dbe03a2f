import os
import streamlit as st

from dataclasses import asdict
from pyrsistent import thaw

from config import (
    set_default_config,
    get_config_from_widgets,
    make_session_and_reset,
)
from components import command_buttons, display_health, display_log
from health_monad.config import GameConfig
from health_monad.session import Session, reset_session

script_dir: str = os.path.dirname(os.path.realpath(__file__))

st.set_page_config(layout="wide", page_title="Health Monad")

with open(os.path.join(script_dir, "styles.css")) as f:
    st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


# --------- Main App ---------

set_default_config()
tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    config: GameConfig = get_config_from_widgets()

    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["config"] = config
        make_session_and_reset(config)
    st.divider()

with tab_game:
    if "session" not in st.session_state:
        make_session_and_reset(st.session_state["config"])

    left_col, right_col = st.columns([0.35, 0.65])

    with left_col:
        if st.button("🔁 Reset", key="reset_btn", use_container_width=True):
            st.session_state["session"] = reset_session(
                st.session_state["session"], st.session_state["narrator"]
            )
        st.divider()
        command_buttons(st.session_state["session"])

    session: Session = st.session_state["session"]

    with left_col:
        display_health(session)

    with right_col:
        st.subheader("Log")
        display_log(session)

with tab_state:
    session = st.session_state["session"]
    state = asdict(session)
    state["log"] = [asdict(event) for event in thaw(session.log)]
    st.json(state, expanded=1)

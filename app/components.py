import html

import streamlit as st

from health_monad.commands import COMMAND_DELTAS, Command
from health_monad.executor import format_delta
from health_monad.session import Session, execute_command, log_events

COMMAND_ICONS = {
    Command.HEAL: "💚",
    Command.MINOR_ATTACK: "🗡️",
    Command.MAJOR_ATTACK: "⚔️",
    Command.CRITICAL_ATTACK: "☠️",
}


def do_command(command: Command) -> None:
    session: Session = st.session_state["session"]
    st.session_state["session"] = execute_command(
        session, command.value, st.session_state["narrator"]
    )


def command_buttons(session: Session) -> None:
    columns = st.columns(len(Command))
    for column, command in zip(columns, Command):
        with column:
            label = (
                f"{COMMAND_ICONS[command]} {command.value.replace('_', ' ')} "
                f"({format_delta(COMMAND_DELTAS[command])})"
            )
            st.button(
                label,
                key=f"{command.value.lower()}_btn",
                disabled=session.game_over,
                on_click=do_command,
                args=(command,),
                use_container_width=True,
            )


def display_health(session: Session) -> None:
    prev_health = st.session_state["prev_health"]
    st.metric(
        "Health",
        session.health,
        delta=session.health - prev_health if session.turn else None,
    )
    if session.health < prev_health:
        st.toast(f"Taking {prev_health - session.health} damage!", icon="🔥")
    st.session_state["prev_health"] = session.health
    if session.game_over:
        st.error("💀 **Game Over!** Reset to play again. 💀")


def display_log(session: Session) -> None:
    lines = [
        f'<span class="step-{event.level.value}">{html.escape(event.text)}</span>'
        for event in log_events(session)
    ]
    st.markdown(
        f'<div class="log">{"<br>".join(lines)}</div>', unsafe_allow_html=True
    )

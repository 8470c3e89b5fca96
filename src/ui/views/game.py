"""Game page — transcript of the session plus the command bar."""

from __future__ import annotations

import streamlit as st

from src.engine.base import EventKind
from src.engine.errors import IntegrityFault
from src.ui.components.command_bar import render_command_bar
from src.ui.components.transcript import render_transcript
from src.ui.render import render_events


def _submit(command: str) -> None:
    """Feed one command to the session and append the rendered output."""
    ss = st.session_state
    session = ss["session"]
    ss["transcript"].append(f"Your selection: {command}")
    try:
        events = session.submit(command)
    except IntegrityFault as exc:
        ss["transcript"].append(f"Protocol integrity fault: {exc}")
        return

    ss["transcript"].extend(render_events(events))
    prompts = [e for e in events if e.kind == EventKind.PROMPT]
    if prompts:
        ss["last_prompt"] = prompts[-1]


def _return_home() -> None:
    """Drop the finished session and go home."""
    ss = st.session_state
    for key in ("session", "transcript", "last_prompt"):
        ss.pop(key, None)
    ss["page"] = "home"
    st.rerun()


def render_game_page() -> None:
    """Render the main game page."""
    ss = st.session_state
    session = ss.get("session")

    if session is None:
        ss["page"] = "home"
        st.rerun()
        return

    render_transcript(ss["transcript"])

    if session.is_finished:
        if st.button("New Game", type="primary", use_container_width=True):
            _return_home()
        return

    command = render_command_bar(ss["last_prompt"].data["options"], key=len(ss["transcript"]))
    if command is not None:
        _submit(command)
        st.rerun()

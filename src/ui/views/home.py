"""Home page — dice input and game start."""

from __future__ import annotations

import streamlit as st

from src.config import get_settings
from src.engine.dice import DicePool
from src.engine.errors import ValidationError
from src.engine.session import GameSession
from src.ui.render import render_events


def render_home_page() -> None:
    """Render the landing page with the startup dice input."""
    st.title("Fair Dice")
    st.caption("Non-transitive dice with provably fair rolls")

    with st.form("start_form"):
        dice_input = st.text_input(
            "Dice values",
            placeholder="2,2,4,4,9,9",
            help="Comma-separated integers, at least three.",
        )
        submitted = st.form_submit_button("Start Game", type="primary")

    if submitted:
        try:
            session, events = GameSession.start(dice_input, settings=get_settings())
        except ValidationError as exc:
            st.error(f"Invalid input: {exc}")
            return

        ss = st.session_state
        ss["session"] = session
        ss["transcript"] = render_events(events)
        ss["last_prompt"] = events[-1]
        ss["page"] = "game"
        st.rerun()

    with st.expander("The dice"):
        st.markdown(
            "\n".join(
                "- [" + ", ".join(str(v) for v in faces) + "]"
                for faces in DicePool.PRESET_FACES
            )
        )
        st.markdown(
            "Each die beats one of the others more often than not, "
            "so no die is best. Type `?` during the game for the odds."
        )

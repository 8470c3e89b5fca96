"""Fair Dice — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st


_RULES = """\
**Goal:** roll higher than the computer!

**Fairness:** every random number the computer needs is committed first.
It shows you an **HMAC** of its number, you add your own number, then it
reveals the number and the **KEY** so you can recompute the HMAC yourself.

**Rounds:**
1. Guess the computer's 0/1 selection to see who moves first
2. Pick one of the three dice; the computer takes the first one left
3. Each side rolls once; the strictly higher roll wins, ties go to the computer
"""


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Fair Dice",
        page_icon="🎲",
        layout="centered",
    )

    from src.config import configure_logging, get_settings
    configure_logging(get_settings())

    if "page" not in st.session_state:
        st.session_state["page"] = "home"

    # Page routing (lazy imports to avoid circular deps)
    page = st.session_state["page"]

    if page == "home":
        from src.ui.views.home import render_home_page
        render_home_page()
    elif page == "game":
        from src.ui.views.game import render_game_page
        render_game_page()
    else:
        st.session_state["page"] = "home"
        st.rerun()

    with st.sidebar:
        st.markdown("### Rules")
        st.markdown(_RULES)


if __name__ == "__main__":
    main()

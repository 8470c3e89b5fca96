"""Transcript component — the session output so far."""

from __future__ import annotations

import streamlit as st


def render_transcript(lines: list[str]) -> None:
    """Render the transcript as a fixed-width block, newest line last."""
    st.code("\n".join(lines), language=None)

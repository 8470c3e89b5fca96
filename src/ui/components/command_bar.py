"""Command bar — one button per accepted option plus exit/help and free text."""

from __future__ import annotations

from typing import Sequence

import streamlit as st


def render_command_bar(options: Sequence[tuple[str, str]], key: int) -> str | None:
    """Render the commands for the current prompt.

    Args:
        options: ``(command, label)`` pairs accepted by the current phase.
        key: Suffix that keeps widget keys unique across reruns.

    Returns:
        The command to submit, or ``None`` if nothing was chosen.
    """
    cols = st.columns(len(options))
    for col, (command, label) in zip(cols, options):
        with col:
            if st.button(label, key=f"btn_opt_{command}_{key}", use_container_width=True):
                return command

    help_col, exit_col = st.columns(2)
    with help_col:
        if st.button("? Help", key=f"btn_help_{key}", use_container_width=True):
            return "?"
    with exit_col:
        if st.button("X Exit", key=f"btn_exit_{key}", use_container_width=True):
            return "x"

    typed = st.text_input("Or type a selection", key=f"txt_cmd_{key}")
    if typed:
        return typed
    return None

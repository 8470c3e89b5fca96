"""UI components for Fair Dice."""

from src.ui.components.command_bar import render_command_bar
from src.ui.components.transcript import render_transcript

__all__ = [
    "render_command_bar",
    "render_transcript",
]

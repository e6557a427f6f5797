"""Qt UI components for the quiz player application."""

from .dialog_helpers import confirm_quit_quiz, show_error, show_info
from .player_main_window import PlayerMainWindow
from .question_renderer import render_answer_summary, render_question

__all__ = [
    "PlayerMainWindow",
    "confirm_quit_quiz",
    "show_error",
    "show_info",
    "render_answer_summary",
    "render_question",
]

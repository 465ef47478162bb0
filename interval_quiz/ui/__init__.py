"""Qt UI components for the interval trainer."""

from .dialog_helpers import (
    confirm_end_round,
    show_info,
    show_warning,
)
from .qt_scheduler import QtScheduler
from .question_renderer import render_question, render_review
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "QtScheduler",
    "confirm_end_round",
    "show_info",
    "show_warning",
    "render_question",
    "render_review",
]

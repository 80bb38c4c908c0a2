"""Qt UI components for the quiz window."""

from .dialog_helpers import show_error, show_info
from .question_renderer import render_question_document
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "show_error",
    "show_info",
    "render_question_document",
]

"""Question and review rendering utilities for the quiz web view."""

from __future__ import annotations

from typing import Sequence

from interval_quiz.core.markdown_renderer import renderer
from interval_quiz.core.models import AnswerFeedback, FeedbackStatus, IntervalQuestion
from interval_quiz.core.services.review import RoundReview, render_review_markdown

_FEEDBACK_PREFIX = {
    FeedbackStatus.CORRECT: "✔",
    FeedbackStatus.INCORRECT: "✘",
    FeedbackStatus.INVALID: "⚠",
}


def render_question(
    question: IntervalQuestion,
    number: int,
    total: int,
    feedback: AnswerFeedback | None = None,
    font_size: int = 14,
) -> str:
    """Render a quiz prompt, plus feedback for the last submission if any.

    Args:
        question: The question on screen
        number: 1-based position of the question in the round
        total: Number of questions in the round
        feedback: Outcome of the last submission, if any
        font_size: Font size in points for the prompt (default 14)

    Returns:
        HTML string ready for display in QWebEngineView
    """
    markdown_lines = [f"*Question {number} of {total}*", f"### {question.text}"]
    if feedback is not None:
        markdown_lines.append(f"**{_FEEDBACK_PREFIX[feedback.status]} {feedback.message}**")
    markdown = "\n\n".join(markdown_lines)
    return renderer.render_full_document(markdown, font_size=font_size)


def render_review(review: RoundReview, questions: Sequence[IntervalQuestion], font_size: int = 14) -> str:
    markdown = render_review_markdown(review, questions)
    return renderer.render_full_document(markdown, title="Round review", font_size=font_size)

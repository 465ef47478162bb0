"""State transitions for a single quiz round.

Every function takes a ``QuizState`` and returns a new one; nothing here
touches the UI or the timer, so rounds can be replayed in tests.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from interval_quiz.core.models import (
    AnswerFeedback,
    FeedbackStatus,
    IntervalQuestion,
    QuizPhase,
    QuizState,
)
from interval_quiz.core.music_theory import normalize_note


def start_round(questions: Sequence[IntervalQuestion]) -> QuizState:
    if not questions:
        raise ValueError("Quiz must contain at least one question.")
    return QuizState(questions=tuple(questions))


def current_question(state: QuizState) -> IntervalQuestion | None:
    if state.is_finished:
        return None
    return state.questions[state.current_index]


def remaining_questions(state: QuizState) -> int:
    """Number of questions still to be shown after the current one."""
    if state.is_finished:
        return 0
    return state.total - state.current_index - 1


def submit_answer(state: QuizState, text: str) -> QuizState:
    """Score ``text`` against the current question.

    Unrecognised notes leave the question open so the player can try again.
    """
    if state.phase is not QuizPhase.ANSWERING:
        return state

    question = state.questions[state.current_index]
    normalized = normalize_note(text)
    if normalized is None:
        feedback = AnswerFeedback(
            status=FeedbackStatus.INVALID,
            submitted_text=text,
            expected_answer=None,
            message=f"'{text.strip()}' is not a note. Use C, C#, Db, ... B.",
        )
        return replace(state, feedback=feedback)

    is_correct = normalized == question.answer
    answered = replace(question, user_answer=normalized, correct=is_correct)
    questions = state.questions[: state.current_index] + (answered,) + state.questions[state.current_index + 1 :]
    if is_correct:
        feedback = AnswerFeedback(
            status=FeedbackStatus.CORRECT,
            submitted_text=text,
            expected_answer=question.answer,
            message=f"Correct! The answer is {question.answer}.",
        )
    else:
        feedback = AnswerFeedback(
            status=FeedbackStatus.INCORRECT,
            submitted_text=text,
            expected_answer=question.answer,
            message=f"Not quite: you answered {normalized}, the answer is {question.answer}.",
        )
    return replace(
        state,
        questions=questions,
        score=state.score + (1 if is_correct else 0),
        phase=QuizPhase.FEEDBACK,
        feedback=feedback,
    )


def advance(state: QuizState) -> QuizState:
    """Leave the feedback screen for the next question or the end of the round."""
    if state.phase is not QuizPhase.FEEDBACK:
        return state
    next_index = state.current_index + 1
    if next_index >= state.total:
        return replace(state, phase=QuizPhase.FINISHED, feedback=None)
    return replace(state, current_index=next_index, phase=QuizPhase.ANSWERING, feedback=None)

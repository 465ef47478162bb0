"""End-of-round statistics for the review screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from interval_quiz.core.models import IntervalQuestion, QuestionDirection
from interval_quiz.core.music_theory import INTERVALS


@dataclass(slots=True)
class IntervalBreakdown:
    """Per-interval tally."""

    name: str
    asked: int = 0
    correct: int = 0


@dataclass(slots=True)
class RoundReview:
    """Immutable snapshot returned to the review panel."""

    total_questions: int
    correct_answers: int
    active_ms: float
    breakdown: list[IntervalBreakdown]

    @property
    def accuracy_percentage(self) -> float:
        if not self.total_questions:
            return 0.0
        return (self.correct_answers / self.total_questions) * 100

    @property
    def active_seconds(self) -> float:
        return self.active_ms / 1000

    @property
    def average_seconds_per_question(self) -> float:
        if not self.total_questions:
            return 0.0
        return self.active_seconds / self.total_questions


def build_review(questions: Sequence[IntervalQuestion], active_ms: float) -> RoundReview:
    """Summarize a round; unanswered questions count as asked but not correct."""
    tallies = {interval.name: IntervalBreakdown(name=interval.name) for interval in INTERVALS}
    for question in questions:
        entry = tallies[question.interval.name]
        entry.asked += 1
        if question.correct:
            entry.correct += 1

    return RoundReview(
        total_questions=len(questions),
        correct_answers=sum(1 for q in questions if q.correct),
        active_ms=active_ms,
        breakdown=[entry for entry in tallies.values() if entry.asked],
    )


def format_elapsed(seconds: float) -> str:
    """Format seconds as ``m:ss``."""
    whole = int(seconds)
    return f"{whole // 60}:{whole % 60:02d}"


def render_review_markdown(review: RoundReview, questions: Sequence[IntervalQuestion]) -> str:
    lines = [
        f"## Score: {review.correct_answers} / {review.total_questions} "
        f"({review.accuracy_percentage:.0f}%)",
        "",
        f"Active time: **{format_elapsed(review.active_seconds)}** "
        f"(avg {review.average_seconds_per_question:.1f}s per question)",
        "",
        "| # | Question | Your answer | Correct answer | Result |",
        "|---|----------|-------------|----------------|--------|",
    ]
    for number, question in enumerate(questions, start=1):
        given = question.user_answer or "—"
        result = "✔" if question.correct else "✘"
        lines.append(f"| {number} | {question.text} | {given} | {question.answer} | {result} |")

    lines.extend(["", "| Interval | Correct | Asked |", "|----------|---------|-------|"])
    for entry in review.breakdown:
        lines.append(f"| {entry.name} | {entry.correct} | {entry.asked} |")

    forward = sum(1 for q in questions if q.direction is QuestionDirection.FORWARD)
    lines.extend(["", f"{forward} forward and {len(questions) - forward} reverse questions."])
    return "\n".join(lines)

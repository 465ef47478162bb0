"""Random generation of interval questions and quiz rounds."""

from __future__ import annotations

import random

from interval_quiz.constants.quiz_constants import DEFAULT_QUESTION_COUNT, FORWARD_PROBABILITY
from interval_quiz.core.models import IntervalQuestion, QuestionDirection
from interval_quiz.core.music_theory import INTERVALS, NOTES, IntervalDef, transpose

_default_rng = random.Random()


def build_question(root: str, interval: IntervalDef, direction: QuestionDirection) -> IntervalQuestion:
    """Create the question for ``root`` and ``interval`` in the given direction."""
    target = transpose(root, interval.semitones)
    if direction is QuestionDirection.FORWARD:
        return IntervalQuestion(
            text=f"What is the {interval.name} of {root}?",
            answer=target,
            interval=interval,
            direction=direction,
            root=root,
            target=target,
        )
    return IntervalQuestion(
        text=f"{target} is the {interval.name} of which note?",
        answer=root,
        interval=interval,
        direction=direction,
        root=root,
        target=target,
    )


def generate_question(rng: random.Random | None = None) -> IntervalQuestion:
    """Pick an interval, a root and a direction uniformly at random."""
    rng = rng or _default_rng
    interval = rng.choice(INTERVALS)
    root = rng.choice(NOTES)
    if rng.random() < FORWARD_PROBABILITY:
        direction = QuestionDirection.FORWARD
    else:
        direction = QuestionDirection.REVERSE
    return build_question(root, interval, direction)


def generate_quiz(count: int = DEFAULT_QUESTION_COUNT, rng: random.Random | None = None) -> list[IntervalQuestion]:
    """Generate ``count`` independent questions. Repeats are allowed."""
    if count < 1:
        raise ValueError("A quiz round needs at least one question.")
    rng = rng or _default_rng
    return [generate_question(rng) for _ in range(count)]

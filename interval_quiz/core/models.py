"""Domain models for the interval quiz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from interval_quiz.core.music_theory import IntervalDef


class QuestionDirection(str, Enum):
    """Whether the prompt gives the root (forward) or the target (reverse)."""

    FORWARD = "forward"
    REVERSE = "reverse"


class QuizPhase(Enum):
    ANSWERING = "answering"
    FEEDBACK = "feedback"
    FINISHED = "finished"


class FeedbackStatus(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class IntervalQuestion:
    """Single interval question; answer fields are filled once it is answered."""

    text: str
    answer: str  # canonical sharp spelling
    interval: IntervalDef
    direction: QuestionDirection
    root: str
    target: str
    user_answer: str | None = None
    correct: bool | None = None

    @property
    def is_answered(self) -> bool:
        return self.user_answer is not None


@dataclass(frozen=True, slots=True)
class AnswerFeedback:
    """Outcome of a submission, shown to the player until the next action."""

    status: FeedbackStatus
    submitted_text: str
    expected_answer: str | None
    message: str


@dataclass(frozen=True, slots=True)
class QuizState:
    """Snapshot of a quiz round; transitions return a new instance."""

    questions: tuple[IntervalQuestion, ...]
    current_index: int = 0
    score: int = 0
    phase: QuizPhase = QuizPhase.ANSWERING
    feedback: AnswerFeedback | None = None

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def is_finished(self) -> bool:
        return self.phase is QuizPhase.FINISHED

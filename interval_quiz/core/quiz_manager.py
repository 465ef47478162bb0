"""Business logic for running interval quiz rounds from the UI."""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from threading import RLock
from typing import Callable

from interval_quiz.core.active_timer import ActiveTimer, RepeatingScheduler
from interval_quiz.core.models import AnswerFeedback, IntervalQuestion, QuizPhase, QuizState
from interval_quiz.core.question_generator import generate_quiz
from interval_quiz.core.services import quiz_session
from interval_quiz.core.services.review import RoundReview, build_review
from interval_quiz.core.settings import QuizSettings

logger = logging.getLogger(__name__)


class QuizManager:
    """Facade over quiz generation, round transitions and the active timer.

    The active timer runs while a question is on screen and pauses while
    feedback is displayed.
    """

    def __init__(
        self,
        settings: QuizSettings | None = None,
        *,
        rng: random.Random | None = None,
        scheduler: RepeatingScheduler | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        # Re-entrant: the timer reports a tick synchronously from inside calls below.
        self._lock = RLock()
        self._rng = rng or random.Random()
        self._settings = QuizSettings()
        self._state: QuizState | None = None
        self._review: RoundReview | None = None
        self._tick_listener: Callable[[int], None] | None = None

        timer_kwargs = {"scheduler": scheduler}
        if clock is not None:
            timer_kwargs["clock"] = clock
        self._timer = ActiveTimer(self._handle_tick, **timer_kwargs)

        self.apply_settings(settings or QuizSettings())

    # --- Settings ---

    def apply_settings(self, settings: QuizSettings) -> None:
        with self._lock:
            previous_seed = self._settings.shuffle_seed
            self._settings = settings
            if settings.shuffle_seed is not None and settings.shuffle_seed != previous_seed:
                self._rng.seed(settings.shuffle_seed)

    def get_settings(self) -> QuizSettings:
        with self._lock:
            return self._settings

    def set_tick_listener(self, listener: Callable[[int], None] | None) -> None:
        with self._lock:
            self._tick_listener = listener

    # --- Round lifecycle ---

    def start_quiz(self) -> IntervalQuestion:
        with self._lock:
            questions = generate_quiz(self._settings.question_count, self._rng)
            self._state = quiz_session.start_round(questions)
            self._review = None
            self._timer.start()
            logger.info("Started quiz round with %d questions", len(questions))
            return questions[0]

    def submit_answer(self, text: str) -> AnswerFeedback:
        with self._lock:
            state = self._require_state()
            if state.phase is not QuizPhase.ANSWERING:
                raise RuntimeError("The current question has already been answered.")
            new_state = quiz_session.submit_answer(state, text)
            self._state = new_state
            if new_state.phase is QuizPhase.FEEDBACK:
                self._timer.end_segment()
            return new_state.feedback

    def next_question(self) -> IntervalQuestion | None:
        """Move past the feedback screen; returns ``None`` once the round is over."""
        with self._lock:
            state = self._require_state()
            if state.is_finished:
                return None
            new_state = quiz_session.advance(state)
            self._state = new_state
            if new_state.is_finished:
                self._complete_round()
                return None
            if new_state.phase is QuizPhase.ANSWERING:
                self._timer.begin_segment()
            return quiz_session.current_question(new_state)

    def finish_quiz(self) -> RoundReview:
        """End the round now, leaving unanswered questions unscored."""
        with self._lock:
            state = self._require_state()
            if not state.is_finished:
                self._state = replace(state, phase=QuizPhase.FINISHED, feedback=None)
                self._complete_round()
            return self._review

    # --- Queries ---

    def has_active_round(self) -> bool:
        with self._lock:
            return self._state is not None and not self._state.is_finished

    def get_state(self) -> QuizState | None:
        with self._lock:
            return self._state

    def get_current_question(self) -> IntervalQuestion | None:
        with self._lock:
            if self._state is None:
                return None
            return quiz_session.current_question(self._state)

    def get_remaining_question_count(self) -> int:
        with self._lock:
            if self._state is None:
                return 0
            return quiz_session.remaining_questions(self._state)

    def get_elapsed_ms(self) -> float:
        with self._lock:
            return self._timer.get_elapsed_ms()

    def get_review(self) -> RoundReview | None:
        with self._lock:
            return self._review

    # --- Internals ---

    def _require_state(self) -> QuizState:
        if self._state is None:
            raise RuntimeError("No quiz round has been started.")
        return self._state

    def _complete_round(self) -> None:
        active_ms = self._timer.finalize()
        self._review = build_review(self._state.questions, active_ms)
        logger.info(
            "Quiz round finished: %d/%d correct in %.1fs",
            self._review.correct_answers,
            self._review.total_questions,
            self._review.active_seconds,
        )

    def _handle_tick(self, elapsed_seconds: int) -> None:
        with self._lock:
            listener = self._tick_listener
        if listener is not None:
            listener(elapsed_seconds)

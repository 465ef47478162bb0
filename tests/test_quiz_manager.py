import random
import unittest

from interval_quiz.core.models import FeedbackStatus, QuizPhase
from interval_quiz.core.quiz_manager import QuizManager
from interval_quiz.core.settings import QuizSettings

from timing_fakes import FakeClock, ManualScheduler


class TestQuizManager(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.scheduler = ManualScheduler()
        self.manager = QuizManager(
            QuizSettings(question_count=3),
            rng=random.Random(5),
            scheduler=self.scheduler,
            clock=self.clock,
        )

    def _answer_current(self, correct=True):
        question = self.manager.get_current_question()
        if correct:
            return self.manager.submit_answer(question.answer)
        wrong = "C" if question.answer != "C" else "D"
        return self.manager.submit_answer(wrong)

    def test_requires_started_round(self):
        self.assertFalse(self.manager.has_active_round())
        self.assertIsNone(self.manager.get_current_question())
        with self.assertRaises(RuntimeError):
            self.manager.submit_answer("C")

    def test_start_quiz_uses_question_count(self):
        first = self.manager.start_quiz()
        state = self.manager.get_state()
        self.assertEqual(state.total, 3)
        self.assertEqual(first, state.questions[0])
        self.assertTrue(self.manager.has_active_round())
        self.assertEqual(self.manager.get_remaining_question_count(), 2)

    def test_full_round_measures_only_answering_time(self):
        self.manager.start_quiz()
        for correct in (True, False, True):
            self.clock.advance(2000)  # thinking
            self._answer_current(correct)
            self.clock.advance(30_000)  # reading feedback
            self.manager.next_question()

        self.assertFalse(self.manager.has_active_round())
        review = self.manager.get_review()
        self.assertEqual(review.total_questions, 3)
        self.assertEqual(review.correct_answers, 2)
        self.assertEqual(review.active_ms, 6000)
        self.assertEqual(self.scheduler.active, [])

    def test_invalid_answer_keeps_timer_running(self):
        self.manager.start_quiz()
        feedback = self.manager.submit_answer("xyz")
        self.assertIs(feedback.status, FeedbackStatus.INVALID)
        self.clock.advance(500)
        self.assertEqual(self.manager.get_elapsed_ms(), 500)
        self.assertIs(self.manager.get_state().phase, QuizPhase.ANSWERING)

    def test_submit_twice_raises(self):
        self.manager.start_quiz()
        self._answer_current()
        with self.assertRaises(RuntimeError):
            self._answer_current()

    def test_finish_quiz_early(self):
        self.manager.start_quiz()
        self.clock.advance(1000)
        self._answer_current()
        review = self.manager.finish_quiz()
        self.assertEqual(review.correct_answers, 1)
        self.assertEqual(review.total_questions, 3)
        self.assertEqual(review.active_ms, 1000)
        self.assertTrue(self.manager.get_state().is_finished)
        self.assertIs(self.manager.finish_quiz(), review)

    def test_tick_listener_receives_seconds(self):
        ticks = []
        self.manager.set_tick_listener(ticks.append)
        self.manager.start_quiz()
        self.clock.advance(3200)
        self.scheduler.fire()
        self.assertEqual(ticks[0], 0)
        self.assertEqual(ticks[-1], 3)

    def test_shuffle_seed_reproduces_rounds(self):
        settings = QuizSettings(question_count=4, shuffle_seed=11)
        first = QuizManager(settings, clock=self.clock)
        second = QuizManager(settings, clock=self.clock)
        first.start_quiz()
        second.start_quiz()
        self.assertEqual(first.get_state().questions, second.get_state().questions)

    def test_next_question_after_round_end_is_a_noop(self):
        ticks = []
        self.manager.set_tick_listener(ticks.append)
        self.manager.start_quiz()
        for _ in range(3):
            self._answer_current()
            self.manager.next_question()
        review = self.manager.get_review()
        ticks.clear()
        self.clock.advance(4000)
        self.assertIsNone(self.manager.next_question())
        self.assertIs(self.manager.get_review(), review)
        self.assertEqual(ticks, [])
        self.assertEqual(self.manager.get_elapsed_ms(), review.active_ms)

    def test_reapplying_same_seed_does_not_restart_sequence(self):
        settings = QuizSettings(question_count=4, shuffle_seed=11)
        manager = QuizManager(settings, clock=self.clock)
        manager.start_quiz()
        first_round = manager.get_state().questions
        manager.apply_settings(settings.model_copy(update={"game_font_size": 20}))
        manager.start_quiz()
        self.assertNotEqual(manager.get_state().questions, first_round)

    def test_changing_seed_reseeds(self):
        manager = QuizManager(QuizSettings(question_count=4, shuffle_seed=11), clock=self.clock)
        manager.start_quiz()
        manager.apply_settings(QuizSettings(question_count=4, shuffle_seed=12))
        manager.start_quiz()
        reference = QuizManager(QuizSettings(question_count=4, shuffle_seed=12), clock=self.clock)
        reference.start_quiz()
        self.assertEqual(manager.get_state().questions, reference.get_state().questions)

    def test_new_round_resets_review(self):
        self.manager.start_quiz()
        self.manager.finish_quiz()
        self.assertIsNotNone(self.manager.get_review())
        self.manager.start_quiz()
        self.assertIsNone(self.manager.get_review())
        self.assertEqual(self.manager.get_state().score, 0)


if __name__ == "__main__":
    unittest.main()

import threading
import time
import unittest

from interval_quiz.core.active_timer import ActiveTimer, ThreadingScheduler

from timing_fakes import FakeClock, ManualScheduler


class TestActiveTimerAccumulation(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.timer = ActiveTimer(clock=self.clock)

    def test_two_segments_with_pause(self):
        self.timer.start()
        self.clock.advance(1500)
        self.timer.end_segment()
        self.clock.advance(10_000)  # feedback on screen
        self.timer.begin_segment()
        self.clock.advance(2500)
        self.assertEqual(self.timer.finalize(), 4000)

    def test_begin_segment_twice_does_not_double_count(self):
        self.timer.start()
        self.clock.advance(1000)
        self.timer.begin_segment()
        self.clock.advance(1000)
        self.timer.begin_segment()
        self.assertEqual(self.timer.finalize(), 2000)

    def test_end_segment_when_paused_is_noop(self):
        self.timer.start()
        self.clock.advance(700)
        self.timer.end_segment()
        self.clock.advance(300)
        self.timer.end_segment()
        self.assertEqual(self.timer.get_elapsed_ms(), 700)
        self.assertFalse(self.timer.is_running)

    def test_elapsed_includes_open_segment_without_mutating(self):
        self.timer.start()
        self.clock.advance(250)
        self.assertEqual(self.timer.get_elapsed_ms(), 250)
        self.clock.advance(250)
        self.assertEqual(self.timer.get_elapsed_ms(), 500)
        self.assertTrue(self.timer.is_running)

    def test_start_resets_previous_total(self):
        self.timer.start()
        self.clock.advance(5000)
        self.timer.finalize()
        self.timer.start()
        self.clock.advance(100)
        self.assertEqual(self.timer.finalize(), 100)

    def test_finalize_twice_returns_same_total(self):
        self.timer.start()
        self.clock.advance(900)
        self.assertEqual(self.timer.finalize(), 900)
        self.clock.advance(900)
        self.assertEqual(self.timer.finalize(), 900)

    def test_backwards_clock_never_reduces_total(self):
        self.timer.start()
        self.clock.advance(-50)
        self.assertEqual(self.timer.finalize(), 0)

    def test_backwards_clock_never_reduces_live_reading(self):
        self.timer.start()
        self.clock.advance(2000)
        self.timer.end_segment()
        self.timer.begin_segment()
        self.clock.advance(-500)
        self.assertEqual(self.timer.get_elapsed_ms(), 2000)


class TestActiveTimerTicks(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.scheduler = ManualScheduler()
        self.ticks: list[int] = []
        self.timer = ActiveTimer(self.ticks.append, clock=self.clock, scheduler=self.scheduler)

    def test_begin_segment_before_start_is_ignored(self):
        self.timer.begin_segment()
        self.clock.advance(5000)
        self.assertEqual(self.ticks, [])
        self.assertEqual(self.scheduler.scheduled, [])
        self.assertFalse(self.timer.is_running)
        self.assertEqual(self.timer.get_elapsed_ms(), 0)

    def test_segments_after_finalize_are_ignored(self):
        self.timer.start()
        self.clock.advance(1000)
        self.assertEqual(self.timer.finalize(), 1000)
        self.ticks.clear()
        self.timer.begin_segment()
        self.clock.advance(5000)
        self.timer.end_segment()
        self.assertEqual(self.ticks, [])
        self.assertEqual(self.timer.get_elapsed_ms(), 1000)
        self.assertFalse(self.timer.is_started)

    def test_stale_scheduled_tick_after_finalize_is_suppressed(self):
        self.timer.start()
        loop = self.scheduler.scheduled[0]
        self.timer.finalize()
        self.ticks.clear()
        loop.callback()
        self.assertEqual(self.ticks, [])

    def test_start_schedules_one_second_loop(self):
        self.timer.start()
        self.assertEqual(len(self.scheduler.active), 1)
        self.assertEqual(self.scheduler.active[0].interval_ms, 1000)
        self.assertEqual(self.ticks, [0])

    def test_ticks_report_whole_seconds(self):
        self.timer.start()
        self.clock.advance(1999)
        self.scheduler.fire()
        self.clock.advance(1)
        self.scheduler.fire()
        self.assertEqual(self.ticks, [0, 1, 2])

    def test_finalize_cancels_loop(self):
        self.timer.start()
        self.timer.finalize()
        self.assertEqual(self.scheduler.active, [])
        tick_count = len(self.ticks)
        self.scheduler.fire()
        self.assertEqual(len(self.ticks), tick_count)

    def test_restart_cancels_previous_loop(self):
        self.timer.start()
        first = self.scheduler.scheduled[0]
        self.timer.start()
        self.assertTrue(first.cancelled)
        self.assertEqual(len(self.scheduler.active), 1)


class TestThreadingScheduler(unittest.TestCase):
    def test_ticks_survive_concurrent_segment_changes(self):
        errors = []
        previous_hook = threading.excepthook
        threading.excepthook = errors.append
        self.addCleanup(setattr, threading, "excepthook", previous_hook)

        def slow_clock():
            time.sleep(0.0005)
            return time.monotonic() * 1000

        ticks = []
        timer = ActiveTimer(ticks.append, clock=slow_clock, scheduler=ThreadingScheduler(), tick_interval_ms=1)
        timer.start()
        deadline = time.monotonic() + 0.5
        while time.monotonic() < deadline:
            timer.end_segment()
            timer.begin_segment()
        timer.finalize()

        self.assertEqual(errors, [])
        self.assertTrue(ticks)
        self.assertTrue(all(tick >= 0 for tick in ticks))

    def test_runs_until_cancelled(self):
        calls: list[int] = []
        work = ThreadingScheduler().schedule(10, lambda: calls.append(1))
        deadline = time.monotonic() + 2
        while not calls and time.monotonic() < deadline:
            time.sleep(0.01)
        work.cancel()
        self.assertTrue(calls)


if __name__ == "__main__":
    unittest.main()

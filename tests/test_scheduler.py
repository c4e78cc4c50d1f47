import threading
import unittest

from game import ManualScheduler, ThreadingScheduler


class TestManualScheduler(unittest.TestCase):
    def test_given_callbacks_when_advancing_then_run_in_due_order(self):
        s = ManualScheduler()
        ran = []
        s.schedule(1000, lambda: ran.append("slow"))
        s.schedule(500, lambda: ran.append("fast"))
        self.assertEqual(s.next_delay(), 500)
        self.assertEqual(s.advance(499), 0)
        self.assertEqual(s.advance(1), 1)
        self.assertEqual(ran, ["fast"])
        self.assertEqual(s.next_delay(), 500)
        s.advance(10_000)
        self.assertEqual(ran, ["fast", "slow"])
        self.assertEqual(s.now_ms, 10_500)
        self.assertIsNone(s.next_delay())

    def test_given_cancelled_handle_then_never_runs(self):
        s = ManualScheduler()
        ran = []
        h = s.schedule(10, lambda: ran.append(1))
        self.assertEqual(s.pending(), 1)
        h.cancel()
        self.assertFalse(h.active)
        self.assertEqual(s.pending(), 0)
        s.advance(100)
        self.assertEqual(ran, [])

    def test_given_callback_scheduling_more_work_then_runs_when_due(self):
        s = ManualScheduler()
        ran = []
        s.schedule(10, lambda: s.schedule(10, lambda: ran.append("second")))
        s.advance(15)
        self.assertEqual(ran, [])
        s.advance(5)
        self.assertEqual(ran, ["second"])


class TestThreadingScheduler(unittest.TestCase):
    def test_given_short_delay_then_callback_fires(self):
        done = threading.Event()
        handle = ThreadingScheduler().schedule(10, done.set)
        self.assertTrue(done.wait(2.0))
        self.assertTrue(handle.fired)

    def test_given_cancel_before_due_then_callback_skipped(self):
        done = threading.Event()
        handle = ThreadingScheduler().schedule(200, done.set)
        handle.cancel()
        self.assertFalse(done.wait(0.4))
        self.assertFalse(handle.fired)


if __name__ == '__main__':
    unittest.main(verbosity=2)

import unittest
import sys
import os

# Add path to source
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.presence import HandsLostLatch, PresenceDebouncer
from domain.enums import Presence


class TestPresenceDebouncer(unittest.TestCase):
    def setUp(self):
        self.debouncer = PresenceDebouncer(loss_threshold=5)

    def test_starts_absent(self):
        self.assertIs(self.debouncer.presence, Presence.ABSENT)
        self.assertFalse(self.debouncer.mark_missed())

    def test_acquisition_is_immediate(self):
        self.assertTrue(self.debouncer.mark_seen())
        self.assertTrue(self.debouncer.is_live)
        self.assertFalse(self.debouncer.mark_seen())

    def test_short_dropout_never_reports_absent(self):
        for misses in range(0, 6):
            with self.subTest(misses=misses):
                debouncer = PresenceDebouncer(loss_threshold=5)
                debouncer.mark_seen()
                for _ in range(misses):
                    self.assertFalse(debouncer.mark_missed())
                    self.assertTrue(debouncer.is_live)
                self.assertFalse(debouncer.mark_seen())
                self.assertEqual(debouncer.misses, 0)

    def test_long_dropout_reports_absent_once(self):
        self.debouncer.mark_seen()
        edges = [self.debouncer.mark_missed() for _ in range(20)]
        self.assertEqual(edges.count(True), 1)
        self.assertTrue(edges[5])          # sixth consecutive miss
        self.assertIs(self.debouncer.presence, Presence.ABSENT)

    def test_zero_threshold_loses_on_first_miss(self):
        debouncer = PresenceDebouncer(loss_threshold=0)
        debouncer.mark_seen()
        self.assertTrue(debouncer.mark_missed())

    def test_reacquire_after_loss(self):
        self.debouncer.mark_seen()
        for _ in range(6):
            self.debouncer.mark_missed()
        self.assertTrue(self.debouncer.mark_seen())

    def test_reset(self):
        self.debouncer.mark_seen()
        self.debouncer.reset()
        self.assertIs(self.debouncer.presence, Presence.ABSENT)


class TestHandsLostLatch(unittest.TestCase):
    def test_does_not_fire_before_any_hand(self):
        latch = HandsLostLatch()
        for _ in range(5):
            self.assertFalse(latch.update((Presence.ABSENT, Presence.ABSENT)))

    def test_fires_once_on_edge(self):
        latch = HandsLostLatch()
        latch.update((Presence.LIVE, Presence.ABSENT))
        fired = [latch.update((Presence.ABSENT, Presence.ABSENT)) for _ in range(10)]
        self.assertEqual(fired, [True] + [False] * 9)

    def test_rearms_after_a_hand_returns(self):
        latch = HandsLostLatch()
        latch.update((Presence.LIVE, Presence.LIVE))
        self.assertTrue(latch.update((Presence.ABSENT, Presence.ABSENT)))
        latch.update((Presence.ABSENT, Presence.LIVE))
        self.assertTrue(latch.update((Presence.ABSENT, Presence.ABSENT)))

    def test_one_role_live_is_not_lost(self):
        latch = HandsLostLatch()
        latch.update((Presence.LIVE, Presence.LIVE))
        self.assertFalse(latch.update((Presence.LIVE, Presence.ABSENT)))


if __name__ == '__main__':
    unittest.main()

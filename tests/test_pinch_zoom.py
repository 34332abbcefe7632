import unittest
import sys
import os

# Add path to source
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.enums import PinchState, ReleaseReason
from gestures.base import SecondarySample
from gestures.pinch_zoom import PinchZoomGesture, strict_pinch_gate
from tests.hands import hand_points


def sample(distance, velocity=0.0, gate=True):
    return SecondarySample(
        position=(0.5, 0.5),
        pinch_distance=distance,
        pinch_velocity=velocity,
        gate_holds=gate,
    )


def feed(gesture, distances, gate=True):
    """Feed distances with velocity derived frame to frame."""
    readings, previous = [], None
    for d in distances:
        velocity = 0.0 if previous is None else d - previous
        readings.append(gesture.update(sample(d, velocity, gate)))
        previous = d
    return readings


class TestStrictPinchGate(unittest.TestCase):
    def test_curled_hand_passes(self):
        self.assertTrue(strict_pinch_gate(hand_points(curled=True)))

    def test_open_hand_fails(self):
        self.assertFalse(strict_pinch_gate(hand_points(curled=False)))

    def test_single_uncurled_finger_fails(self):
        points = hand_points(curled=True)
        open_points = hand_points(curled=False)
        points[16] = open_points[16]     # ring tip extended
        self.assertFalse(strict_pinch_gate(points))


class TestPinchZoomGesture(unittest.TestCase):
    def setUp(self):
        self.gesture = PinchZoomGesture(
            engage_threshold=0.05,
            release_threshold=0.08,
            clutch_velocity=0.02,
        )

    def test_starts_idle_with_neutral_scale(self):
        reading = self.gesture.update(sample(0.12))
        self.assertIs(reading.state, PinchState.IDLE)
        self.assertEqual(reading.scale_factor, 1.0)
        self.assertIsNone(reading.transition)

    def test_engages_once_at_crossing(self):
        distances = [0.10, 0.09, 0.08, 0.07, 0.06, 0.055, 0.049, 0.045, 0.04, 0.035]
        readings = feed(self.gesture, distances)
        engaged = [i for i, r in enumerate(readings) if r.transition is PinchState.ENGAGED]
        self.assertEqual(engaged, [6])
        self.assertTrue(all(r.state is PinchState.IDLE for r in readings[:6]))
        self.assertTrue(all(r.state is PinchState.ENGAGED for r in readings[6:]))
        self.assertAlmostEqual(self.gesture.zoom_start_distance, 0.049)

    def test_releases_once_past_release_threshold(self):
        feed(self.gesture, [0.04])
        # slow opening so the clutch never fires
        distances = [0.045, 0.05, 0.06, 0.07, 0.075, 0.079, 0.085, 0.09, 0.1]
        readings = feed(self.gesture, distances)
        released = [i for i, r in enumerate(readings) if r.transition is PinchState.IDLE]
        self.assertEqual(released, [6])
        self.assertIs(readings[6].release_reason, ReleaseReason.DISTANCE)
        self.assertTrue(all(r.state is PinchState.IDLE for r in readings[6:]))

    def test_hysteresis_band_holds_engaged(self):
        feed(self.gesture, [0.04])
        readings = feed(self.gesture, [0.055, 0.06, 0.065, 0.06, 0.055])
        self.assertTrue(all(r.state is PinchState.ENGAGED for r in readings))

    def test_no_reengage_inside_band(self):
        feed(self.gesture, [0.04, 0.09])
        readings = feed(self.gesture, [0.075, 0.07, 0.06, 0.055])
        self.assertTrue(all(r.state is PinchState.IDLE for r in readings))

    def test_clutch_release(self):
        self.gesture.update(sample(0.04))
        reading = self.gesture.update(sample(0.07, velocity=0.03))
        self.assertIs(reading.state, PinchState.IDLE)
        self.assertIs(reading.transition, PinchState.IDLE)
        self.assertIs(reading.release_reason, ReleaseReason.CLUTCH)

    def test_velocity_below_clutch_keeps_engaged(self):
        self.gesture.update(sample(0.04))
        reading = self.gesture.update(sample(0.055, velocity=0.015))
        self.assertIs(reading.state, PinchState.ENGAGED)

    def test_closing_fast_is_not_a_clutch(self):
        self.gesture.update(sample(0.045))
        reading = self.gesture.update(sample(0.01, velocity=-0.035))
        self.assertIs(reading.state, PinchState.ENGAGED)

    def test_gate_required_to_engage(self):
        readings = feed(self.gesture, [0.06, 0.04, 0.03], gate=False)
        self.assertTrue(all(r.state is PinchState.IDLE for r in readings))

    def test_uncurling_releases(self):
        self.gesture.update(sample(0.04))
        reading = self.gesture.update(sample(0.04, gate=False))
        self.assertIs(reading.state, PinchState.IDLE)
        self.assertIs(reading.release_reason, ReleaseReason.GATE)

    def test_scale_factor(self):
        self.gesture.update(sample(0.04))
        self.assertAlmostEqual(self.gesture.update(sample(0.06, velocity=0.02)).scale_factor, 1.5)
        self.assertAlmostEqual(self.gesture.update(sample(0.02, velocity=-0.04)).scale_factor, 0.5)

    def test_scale_factor_round_trip(self):
        start = 0.0375
        first = self.gesture.update(sample(start))
        self.assertEqual(first.scale_factor, 1.0)
        self.gesture.update(sample(0.06, velocity=0.0225 / 2))
        back = self.gesture.update(sample(start, velocity=-0.0225))
        self.assertIs(back.state, PinchState.ENGAGED)
        self.assertEqual(back.scale_factor, 1.0)

    def test_near_zero_reference_is_guarded(self):
        gesture = PinchZoomGesture(min_reference=1e-3)
        gesture.update(sample(1e-5))
        reading = gesture.update(sample(0.03, velocity=0.01))
        self.assertIs(reading.state, PinchState.ENGAGED)
        self.assertEqual(reading.scale_factor, 1.0)

    def test_reset(self):
        self.gesture.update(sample(0.04))
        self.gesture.reset()
        self.assertIs(self.gesture.state, PinchState.IDLE)
        self.assertIsNone(self.gesture.zoom_start_distance)


if __name__ == '__main__':
    unittest.main()

import unittest
from types import SimpleNamespace
import sys
import os

# Add path to source
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.enums import GestureEvent, Handedness, PinchState
from domain.errors import GestureEngineError, MalformedObservationError
from domain.models import (
    FrameObservation,
    HandDetection,
    HandsLost,
    PrimaryHandUpdate,
    SecondaryHandUpdate,
)
from tests.hands import hand_points, make_hand


class TestHandDetection(unittest.TestCase):
    def test_accepts_21_points(self):
        det = HandDetection(hand_points(), "Left")
        self.assertEqual(len(det.landmarks), 21)
        self.assertIs(det.handedness, Handedness.LEFT)

    def test_accepts_3d_points(self):
        points = [(x, y, -0.01) for x, y in hand_points()]
        det = HandDetection(points)
        self.assertEqual(len(det.landmarks[0]), 3)

    def test_wrong_keypoint_count_is_rejected(self):
        with self.assertRaises(MalformedObservationError):
            HandDetection(hand_points()[:20])

    def test_malformed_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            HandDetection([])
        self.assertTrue(issubclass(MalformedObservationError, GestureEngineError))

    def test_bad_coordinates_are_rejected(self):
        points = hand_points()
        points[3] = (0.5,)
        with self.assertRaises(MalformedObservationError):
            HandDetection(points)

        points[3] = (0.5, float("nan"))
        with self.assertRaises(MalformedObservationError):
            HandDetection(points)

        points[3] = "xy"
        with self.assertRaises(MalformedObservationError):
            HandDetection(points)

    def test_unknown_label(self):
        self.assertIs(HandDetection(hand_points(), "Both").handedness, Handedness.UNKNOWN)
        self.assertIs(HandDetection(hand_points(), "right").handedness, Handedness.RIGHT)


class TestHandedness(unittest.TestCase):
    def test_mirrored(self):
        self.assertIs(Handedness.LEFT.mirrored(), Handedness.RIGHT)
        self.assertIs(Handedness.RIGHT.mirrored(), Handedness.LEFT)
        self.assertIs(Handedness.UNKNOWN.mirrored(), Handedness.UNKNOWN)


class TestFrameObservation(unittest.TestCase):
    def test_empty_frame(self):
        obs = FrameObservation()
        self.assertTrue(obs.is_empty)
        self.assertEqual(len(obs), 0)

    def test_more_than_two_hands_is_rejected(self):
        hands = tuple(make_hand() for _ in range(3))
        with self.assertRaises(MalformedObservationError):
            FrameObservation(detections=hands)

    def test_non_detection_is_rejected(self):
        with self.assertRaises(MalformedObservationError):
            FrameObservation(detections=(hand_points(),))

    def test_from_landmarker_result(self):
        def landmarks(points):
            return [SimpleNamespace(x=x, y=y, z=0.0) for x, y in points]

        result = SimpleNamespace(
            hand_landmarks=[landmarks(hand_points((0.3, 0.5))), landmarks(hand_points((0.7, 0.5)))],
            handedness=[
                [SimpleNamespace(category_name="Left", score=0.97)],
                [SimpleNamespace(category_name="Right", score=0.88)],
            ],
        )
        obs = FrameObservation.from_landmarker_result(result, frame_index=7, timestamp=1.5)

        self.assertEqual(len(obs), 2)
        self.assertEqual(obs.frame_index, 7)
        self.assertEqual(obs.timestamp, 1.5)
        self.assertIs(obs.detections[0].handedness, Handedness.LEFT)
        self.assertIs(obs.detections[1].handedness, Handedness.RIGHT)
        self.assertAlmostEqual(obs.detections[1].score, 0.88)

    def test_from_empty_landmarker_result(self):
        result = SimpleNamespace(hand_landmarks=[], handedness=[])
        self.assertTrue(FrameObservation.from_landmarker_result(result).is_empty)

    def test_from_landmarker_result_with_bad_hand(self):
        result = SimpleNamespace(
            hand_landmarks=[[SimpleNamespace(x=0.1, y=0.1, z=0.0)] * 5],
            handedness=[[SimpleNamespace(category_name="Left", score=0.9)]],
        )
        with self.assertRaises(MalformedObservationError):
            FrameObservation.from_landmarker_result(result)


class TestEvents(unittest.TestCase):
    def test_event_kinds(self):
        self.assertIs(PrimaryHandUpdate((0.5, 0.5)).kind, GestureEvent.PRIMARY_UPDATE)
        self.assertIs(HandsLost().kind, GestureEvent.HANDS_LOST)
        update = SecondaryHandUpdate((0.5, 0.5), PinchState.ENGAGED, 1.2, (0.0, 0.0))
        self.assertIs(update.kind, GestureEvent.SECONDARY_UPDATE)
        self.assertTrue(update.is_pinching)


if __name__ == '__main__':
    unittest.main()

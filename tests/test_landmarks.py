"""
Test cases for landmark conversion and finger predicates.
"""
import unittest
import sys
from pathlib import Path
from types import SimpleNamespace

sys.path.insert(0, str(Path(__file__).parent.parent))

from signscribe.errors import MalformedLandmarksError
from signscribe.landmarks import (
    Finger,
    distance_between,
    finger,
    is_finger_curled,
    is_finger_extended,
    tips_level,
    tips_together,
    to_landmarks,
)
from signscribe.types import Handedness, Landmark


def upright_finger(tip_y: float, mcp_y: float = 0.5, x: float = 0.5) -> Finger:
    return Finger(tip=Landmark(x, tip_y), joint=Landmark(x, (tip_y + mcp_y) / 2), mcp=Landmark(x, mcp_y))


class TestToLandmarks(unittest.TestCase):
    """Test conversion of raw tracker output."""

    def test_from_tuples(self):
        points = [(i / 100.0, i / 50.0) for i in range(21)]
        landmarks = to_landmarks(points)
        self.assertEqual(len(landmarks), 21)
        self.assertEqual(landmarks[10], Landmark(0.1, 0.2, 0.0))

    def test_from_mediapipe_like_objects(self):
        points = [SimpleNamespace(x=0.5, y=0.25, z=-0.01) for _ in range(21)]
        landmarks = to_landmarks(points)
        self.assertEqual(landmarks[0], Landmark(0.5, 0.25, -0.01))

    def test_wrong_count(self):
        with self.assertRaises(MalformedLandmarksError) as ctx:
            to_landmarks([(0.5, 0.5, 0.0)] * 20)
        self.assertEqual(ctx.exception.count, 20)
        self.assertEqual(ctx.exception.expected, 21)

    def test_point_with_wrong_coordinate_count(self):
        for bad_point in [(0.5,), (0.5, 0.5, 0.0, 1.0)]:
            points = [(0.5, 0.5, 0.0)] * 20 + [bad_point]
            with self.assertRaises(MalformedLandmarksError):
                to_landmarks(points)

    def test_landmarks_are_immutable(self):
        landmark = Landmark(0.1, 0.2, 0.3)
        with self.assertRaises(AttributeError):
            landmark.x = 0.5

    def test_finger_picks_thumb_ip(self):
        landmarks = to_landmarks([(i / 100.0, 0.0) for i in range(21)])
        thumb = finger(landmarks, "thumb")
        self.assertEqual((thumb.tip.x, thumb.joint.x, thumb.mcp.x), (0.04, 0.03, 0.02))
        pinky = finger(landmarks, "pinky")
        self.assertEqual((pinky.tip.x, pinky.joint.x, pinky.mcp.x), (0.2, 0.18, 0.17))


class TestFingerPredicates(unittest.TestCase):
    """Test extended / curled thresholds."""

    def test_extended(self):
        self.assertTrue(is_finger_extended(upright_finger(0.3)))
        self.assertFalse(is_finger_extended(upright_finger(0.42)))

    def test_curled(self):
        self.assertTrue(is_finger_curled(upright_finger(0.55)))
        self.assertTrue(is_finger_curled(upright_finger(0.47)))
        self.assertFalse(is_finger_curled(upright_finger(0.3)))

    def test_dead_zone(self):
        f = upright_finger(0.425)
        self.assertFalse(is_finger_extended(f))
        self.assertFalse(is_finger_curled(f))

    def test_distance_is_three_dimensional(self):
        self.assertAlmostEqual(distance_between(Landmark(0, 0, 0), Landmark(0.3, 0.4, 0)), 0.5)
        self.assertAlmostEqual(distance_between(Landmark(0, 0, 0), Landmark(0, 0, 0.2)), 0.2)

    def test_tips_level(self):
        fingers = [upright_finger(0.3, x=0.4), upright_finger(0.33, x=0.45), upright_finger(0.36, x=0.5)]
        self.assertTrue(tips_level(fingers, 0.05))
        self.assertFalse(tips_level(fingers, 0.02))

    def test_tips_together(self):
        fingers = [upright_finger(0.3, x=0.40), upright_finger(0.3, x=0.42), upright_finger(0.3, x=0.44)]
        self.assertTrue(tips_together(fingers, 0.04))
        self.assertFalse(tips_together(fingers, 0.01))


class TestHandedness(unittest.TestCase):

    def test_from_label(self):
        self.assertIs(Handedness.from_label("Left"), Handedness.LEFT)
        self.assertIs(Handedness.from_label("right"), Handedness.RIGHT)

    def test_unknown_label_warns(self):
        for label in (None, "", "Ambidextrous"):
            with self.assertLogs("signscribe.types", level="WARNING"):
                self.assertIs(Handedness.from_label(label), Handedness.RIGHT)


if __name__ == '__main__':
    unittest.main()

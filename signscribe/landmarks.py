"""
Hand landmark tracking and geometric finger predicates.
"""
import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import cv2
import numpy as np

from .errors import MalformedLandmarksError, ProviderUnavailableError
from .types import HandObservation, Handedness, Landmark

logger = logging.getLogger(__name__)

NUM_LANDMARKS = 21

WRIST = 0
THUMB_CMC, THUMB_MCP, THUMB_IP, THUMB_TIP = 1, 2, 3, 4
INDEX_MCP, INDEX_PIP, INDEX_DIP, INDEX_TIP = 5, 6, 7, 8
MIDDLE_MCP, MIDDLE_PIP, MIDDLE_DIP, MIDDLE_TIP = 9, 10, 11, 12
RING_MCP, RING_PIP, RING_DIP, RING_TIP = 13, 14, 15, 16
PINKY_MCP, PINKY_PIP, PINKY_DIP, PINKY_TIP = 17, 18, 19, 20

# (tip, middle joint, mcp); the thumb's middle joint is its ip
FINGER_INDICES = {
    "thumb": (THUMB_TIP, THUMB_IP, THUMB_MCP),
    "index": (INDEX_TIP, INDEX_PIP, INDEX_MCP),
    "middle": (MIDDLE_TIP, MIDDLE_PIP, MIDDLE_MCP),
    "ring": (RING_TIP, RING_PIP, RING_MCP),
    "pinky": (PINKY_TIP, PINKY_PIP, PINKY_MCP),
}

HAND_CONNECTIONS: List[Tuple[int, int]] = [
    # thumb
    (0, 1), (1, 2), (2, 3), (3, 4),
    # index
    (0, 5), (5, 6), (6, 7), (7, 8),
    # middle
    (5, 9), (9, 10), (10, 11), (11, 12),
    # ring
    (9, 13), (13, 14), (14, 15), (15, 16),
    # pinky
    (13, 17), (17, 18), (18, 19), (19, 20),
    # palm base
    (0, 17),
]


@dataclass(frozen=True)
class Finger:
    """Key joints of one finger."""
    tip: Landmark
    joint: Landmark  # pip, or ip for the thumb
    mcp: Landmark


def to_landmarks(points: Iterable) -> Tuple[Landmark, ...]:
    """
    Convert raw tracker output into an immutable landmark set.

    Args:
        points: MediaPipe landmark objects (with x, y, z attributes),
            Landmark instances or (x, y[, z]) tuples

    Returns:
        Tuple of 21 Landmarks

    Raises:
        MalformedLandmarksError: if the input does not hold exactly 21 points,
            or a point tuple does not have 2 or 3 coordinates
    """
    converted = []
    for p in points:
        if isinstance(p, Landmark):
            converted.append(p)
        elif hasattr(p, "x") and hasattr(p, "y"):
            converted.append(Landmark(float(p.x), float(p.y), float(getattr(p, "z", 0.0))))
        else:
            values = tuple(float(v) for v in p)
            if len(values) not in (2, 3):
                raise MalformedLandmarksError.bad_point(len(values))
            converted.append(Landmark(*values))

    if len(converted) != NUM_LANDMARKS:
        raise MalformedLandmarksError(len(converted), NUM_LANDMARKS)
    return tuple(converted)


def check_landmarks(landmarks: Sequence[Landmark]) -> None:
    """Raise MalformedLandmarksError unless exactly 21 landmarks are present."""
    if landmarks is None:
        raise MalformedLandmarksError(0, NUM_LANDMARKS)
    if len(landmarks) != NUM_LANDMARKS:
        raise MalformedLandmarksError(len(landmarks), NUM_LANDMARKS)


def finger(landmarks: Sequence[Landmark], name: str) -> Finger:
    """Pick the joints of the named finger out of a landmark set."""
    tip, joint, mcp = FINGER_INDICES[name]
    return Finger(tip=landmarks[tip], joint=landmarks[joint], mcp=landmarks[mcp])


def distance_between(a: Landmark, b: Landmark) -> float:
    """Euclidean distance in 3-D landmark space."""
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2)


def is_finger_extended(f: Finger, margin: float = 0.1) -> bool:
    """Tip is notably higher than the base knuckle (smaller y is higher)."""
    return f.tip.y < f.mcp.y - margin


def is_finger_curled(f: Finger, margin: float = 0.05) -> bool:
    """
    Tip is at or below the base knuckle.

    The curled margin is smaller than the extended margin, so a finger whose
    tip sits between the two is neither extended nor curled.
    """
    return f.tip.y > f.mcp.y - margin


def tips_level(fingers: Sequence[Finger], tolerance: float) -> bool:
    """Adjacent fingertips differ in height by less than tolerance."""
    return all(abs(a.tip.y - b.tip.y) < tolerance for a, b in zip(fingers, fingers[1:]))


def tips_together(fingers: Sequence[Finger], max_distance: float) -> bool:
    """Adjacent fingertips are closer than max_distance."""
    return all(distance_between(a.tip, b.tip) < max_distance for a, b in zip(fingers, fingers[1:]))


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 2, model_complexity: int = 1,
                 min_detection_conf: float = 0.5, min_tracking_conf: float = 0.5):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect
            model_complexity: MediaPipe Hands model complexity (0 or 1)
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking

        Raises:
            ProviderUnavailableError: if MediaPipe Hands cannot be created
        """
        try:
            import mediapipe as mp  # type: ignore
        except ImportError as e:
            raise ProviderUnavailableError("MediaPipe is not installed") from e

        if not hasattr(mp, "solutions"):
            raise ProviderUnavailableError(
                "Installed mediapipe build does not provide `mp.solutions.hands`"
            )

        try:
            self.mp_hands = mp.solutions.hands
            self.hands = self.mp_hands.Hands(
                static_image_mode=False,
                max_num_hands=max_num_hands,
                model_complexity=model_complexity,
                min_detection_confidence=min_detection_conf,
                min_tracking_confidence=min_tracking_conf
            )
        except Exception as e:
            raise ProviderUnavailableError(f"Could not initialize MediaPipe Hands: {e}") from e

        logger.info(f"🖐️  MediaPipe Hands ready (max_num_hands={max_num_hands})")

    def process(self, frame_bgr: np.ndarray) -> List[HandObservation]:
        """
        Process a frame and return the tracked hands.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            One HandObservation per detected hand, in tracker order (empty if none)
        """
        # Convert BGR to RGB for MediaPipe
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)

        if not results.multi_hand_landmarks:
            return []

        handedness_list = results.multi_handedness or []
        observations: List[HandObservation] = []
        for i, hand_landmarks in enumerate(results.multi_hand_landmarks):
            label: Optional[str] = None
            score: Optional[float] = None
            if i < len(handedness_list) and handedness_list[i].classification:
                c = handedness_list[i].classification[0]
                label = getattr(c, "label", None)
                score = float(getattr(c, "score", 0.0))

            try:
                landmarks = to_landmarks(hand_landmarks.landmark)
            except MalformedLandmarksError as e:
                logger.warning(f"Skipped tracked hand {i}: {e}")
                continue

            observations.append(HandObservation(
                landmarks=landmarks,
                handedness=Handedness.from_label(label),
                score=score,
            ))

        return observations

    def close(self) -> None:
        self.hands.close()

    def __enter__(self) -> "HandsTracker":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def draw_landmarks(frame: np.ndarray, landmarks: Sequence[Landmark]) -> np.ndarray:
    """
    Draw hand landmarks and bone connections on the frame.

    Args:
        frame: Input frame
        landmarks: Normalized landmarks of one hand

    Returns:
        Frame with landmarks drawn
    """
    height, width = frame.shape[:2]
    points = [(int(lm.x * width), int(lm.y * height)) for lm in landmarks]

    for a, b in HAND_CONNECTIONS:
        if a < len(points) and b < len(points):
            cv2.line(frame, points[a], points[b], (7, 193, 255), 2, cv2.LINE_AA)

    for px, py in points:
        cv2.circle(frame, (px, py), 3, (63, 31, 0), -1, lineType=cv2.LINE_AA)

    return frame

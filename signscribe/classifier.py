"""
Static handshape classification from a single frame of hand landmarks.
"""
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .config import ClassifierConfig
from .landmarks import (
    WRIST,
    Finger,
    check_landmarks,
    finger,
    is_finger_curled,
    is_finger_extended,
    tips_level,
    tips_together,
)
from .types import GestureLabel, Handedness, Landmark

logger = logging.getLogger(__name__)


class HandShape:
    """Per-frame finger state derived from one landmark set."""

    def __init__(self, landmarks: Sequence[Landmark], cfg: ClassifierConfig):
        self.cfg = cfg
        self.wrist = landmarks[WRIST]
        self.thumb = finger(landmarks, "thumb")
        self.index = finger(landmarks, "index")
        self.middle = finger(landmarks, "middle")
        self.ring = finger(landmarks, "ring")
        self.pinky = finger(landmarks, "pinky")

    @property
    def four_fingers(self) -> List[Finger]:
        return [self.index, self.middle, self.ring, self.pinky]

    def extended(self, f: Finger) -> bool:
        return is_finger_extended(f, self.cfg.extended_margin)

    def curled(self, f: Finger) -> bool:
        return is_finger_curled(f, self.cfg.curled_margin)

    def four_extended(self) -> bool:
        return all(self.extended(f) for f in self.four_fingers)


def _is_yes(h: HandShape) -> bool:
    # Closed fist, thumb up
    return h.extended(h.thumb) and all(h.curled(f) for f in h.four_fingers)


def _is_no(h: HandShape) -> bool:
    # Index pointing, everything else down
    return (h.extended(h.index) and
            not h.extended(h.middle) and
            not h.extended(h.ring) and
            not h.extended(h.pinky) and
            not h.extended(h.thumb))


def _is_hello(h: HandShape) -> bool:
    # Open hand, fingers even, thumb splayed outward
    return (h.four_extended() and
            h.thumb.tip.x > h.thumb.joint.x and
            tips_level(h.four_fingers, h.cfg.level_tolerance))


def _is_thank_you(h: HandShape) -> bool:
    # Flat hand, fingers pressed together
    return (h.four_extended() and
            tips_level(h.four_fingers, h.cfg.level_tolerance) and
            tips_together(h.four_fingers, h.cfg.together_distance))


def _is_i_love_you(h: HandShape) -> bool:
    return (h.extended(h.index) and
            not h.extended(h.middle) and
            not h.extended(h.ring) and
            h.extended(h.pinky) and
            h.extended(h.thumb))


def _is_please(h: HandShape) -> bool:
    # Flat hand held low, near the chest
    return (h.four_extended() and
            tips_level(h.four_fingers, h.cfg.flat_level_tolerance) and
            h.wrist.y > h.cfg.chest_wrist_y)


Rule = Tuple[GestureLabel, Callable[[HandShape], bool]]

# Evaluated in order, first match wins
RULES: List[Rule] = [
    (GestureLabel.YES, _is_yes),
    (GestureLabel.NO, _is_no),
    (GestureLabel.HELLO, _is_hello),
    (GestureLabel.THANK_YOU, _is_thank_you),
    (GestureLabel.I_LOVE_YOU, _is_i_love_you),
    (GestureLabel.PLEASE, _is_please),
]


class GestureClassifier:
    """
    Maps one hand's landmarks to a gesture label.

    Stateless: the same landmarks always produce the same label.
    """

    def __init__(self, cfg: Optional[ClassifierConfig] = None, rules: Optional[List[Rule]] = None):
        self.cfg = cfg or ClassifierConfig()
        self.rules = list(rules) if rules is not None else list(RULES)

    def classify(self, landmarks: Sequence[Landmark],
                 handedness: Handedness) -> GestureLabel:
        """
        Classify a single frame's handshape.

        Args:
            landmarks: Exactly 21 normalized landmarks
            handedness: Reported hand; recorded for diagnostics only

        Returns:
            The first matching gesture label, or GestureLabel.NONE

        Raises:
            MalformedLandmarksError: if the landmark set is incomplete
        """
        check_landmarks(landmarks)
        shape = HandShape(landmarks, self.cfg)

        for label, matches in self.rules:
            if matches(shape):
                logger.debug(f"Classified {handedness.value} hand as {label.name}")
                return label

        return GestureLabel.NONE


_default_classifier = GestureClassifier()


def classify(landmarks: Sequence[Landmark], handedness: Handedness) -> GestureLabel:
    """Classify with the default thresholds."""
    return _default_classifier.classify(landmarks, handedness)

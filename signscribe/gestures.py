"""
Gesture stabilization: turns the noisy per-frame label stream into committed transcript entries.
"""
import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Sequence, Tuple

from .classifier import GestureClassifier
from .config import Cfg, DebounceConfig
from .errors import MalformedLandmarksError
from .types import GestureLabel, HandObservation

logger = logging.getLogger(__name__)


@dataclass
class DebounceState:
    """Streak tracking for the gesture currently being held."""
    last_gesture: GestureLabel = GestureLabel.NONE
    last_commit_time: float = 0.0  # seconds
    consecutive_count: int = 0
    last_committed: Optional[GestureLabel] = None

    def reset(self) -> None:
        self.last_gesture = GestureLabel.NONE
        self.last_commit_time = 0.0
        self.consecutive_count = 0
        self.last_committed = None


class GestureDebouncer:
    """
    Decides when an observed gesture becomes a committed one.

    Features:
    - Commit after N consistent detections once the cooldown has passed
    - Unconditional commit after the longer timeout, so intermittent
      detections still make progress
    - "No gesture" frames are skipped instead of breaking a streak
    - Repeats of the last committed gesture are suppressed
    """

    def __init__(self, cfg: Optional[DebounceConfig] = None, state: Optional[DebounceState] = None):
        self.cfg = cfg or DebounceConfig()
        self.state = state if state is not None else DebounceState()

    def observe(self, label: GestureLabel, t_now: float,
                last_committed: Optional[GestureLabel] = None) -> Optional[GestureLabel]:
        """
        Feed one classified frame.

        Args:
            label: Classifier output for this frame
            t_now: Current timestamp in seconds
            last_committed: Most recent transcript entry; defaults to the last
                label this debouncer emitted

        Returns:
            The label if it was committed on this frame, None otherwise
        """
        state = self.state

        if label is GestureLabel.NONE:
            return None

        if label is not state.last_gesture:
            state.last_gesture = label
            state.consecutive_count = 1
            state.last_commit_time = t_now
            return None

        state.consecutive_count += 1
        elapsed_ms = (t_now - state.last_commit_time) * 1000.0

        # Clock went backwards
        if elapsed_ms < 0:
            return None

        held = (state.consecutive_count >= self.cfg.min_consecutive and
                elapsed_ms > self.cfg.cooldown_ms)
        if not (held or elapsed_ms > self.cfg.timeout_ms):
            return None

        state.consecutive_count = 0
        state.last_commit_time = t_now

        previous = last_committed if last_committed is not None else state.last_committed
        if previous is label:
            logger.debug(f"Suppressed repeat of {label.name}")
            return None

        state.last_committed = label
        return label

    def reset(self) -> None:
        self.state.reset()


class Transcript:
    """Append-only list of committed gestures."""

    def __init__(self, separator: str = "\n\n"):
        self.separator = separator
        self._entries: List[GestureLabel] = []

    def append(self, label: GestureLabel) -> None:
        if label is GestureLabel.NONE:
            raise ValueError("Cannot append GestureLabel.NONE to a transcript")
        self._entries.append(label)

    def last(self) -> Optional[GestureLabel]:
        return self._entries[-1] if self._entries else None

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> Tuple[GestureLabel, ...]:
        return tuple(self._entries)

    def text(self) -> str:
        return self.separator.join(label.text for label in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)


class TranslationSession:
    """
    Runs classification and debouncing for one camera session and owns its transcript.
    """

    def __init__(self, cfg: Optional[Cfg] = None, classifier: Optional[GestureClassifier] = None):
        """Initialize a stopped session from configuration."""
        self.cfg = cfg or Cfg()
        self.classifier = classifier or GestureClassifier(self.cfg.classifier)
        self.debouncer = GestureDebouncer(self.cfg.debounce)
        self.transcript = Transcript(self.cfg.transcript.separator)
        self.history: Deque[GestureLabel] = deque(maxlen=self.cfg.transcript.history_size)
        self.active = False

    def start(self) -> None:
        self.reset()
        self.active = True
        logger.info("▶️  Translation session started")

    def stop(self) -> None:
        self.active = False
        self.reset()
        logger.info("⏹️  Translation session stopped")

    def reset(self) -> None:
        """Clear transcript, history and debounce state without changing the running state."""
        self.debouncer.reset()
        self.transcript.clear()
        self.history.clear()

    @property
    def transcript_text(self) -> str:
        return self.transcript.text()

    def process_frame(self, hands: Optional[Sequence[HandObservation]],
                      t_now: float) -> Tuple[GestureLabel, Optional[GestureLabel]]:
        """
        Process one frame's tracking result.

        Only the first reported hand is classified.

        Args:
            hands: Hands reported by the tracker (None or empty if no hand detected)
            t_now: Current timestamp in seconds

        Returns:
            Tuple of (frame_label, committed_label)
        """
        if not self.active:
            return GestureLabel.NONE, None

        label = GestureLabel.NONE
        if hands:
            hand = hands[0]
            try:
                label = self.classifier.classify(hand.landmarks, hand.handedness)
            except MalformedLandmarksError as e:
                logger.warning(f"Rejected frame: {e}")
                return GestureLabel.NONE, None

        if label:
            self.history.append(label)

        committed = self.debouncer.observe(label, t_now, self.transcript.last())
        if committed:
            self.transcript.append(committed)
            logger.info(f"✅ Committed gesture: {committed.text}")

        return label, committed

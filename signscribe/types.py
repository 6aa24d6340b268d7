"""
Type definitions for the sign gesture translation pipeline.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Tuple, runtime_checkable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Landmark:
    """A single normalized hand landmark (0..1 per axis, origin top-left)."""
    x: float
    y: float
    z: float = 0.0


class Handedness(Enum):
    """Which hand the tracker reported."""
    LEFT = "Left"
    RIGHT = "Right"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "Handedness":
        """Parse a tracker label such as 'Left' or 'right'. Unknown labels map to RIGHT."""
        normalized = (label or "").strip().lower()
        if normalized == "left":
            return cls.LEFT
        if normalized != "right":
            logger.warning(f"Unknown handedness label {label!r}, assuming Right")
        return cls.RIGHT


class GestureLabel(Enum):
    """Closed vocabulary of recognized handshapes."""
    YES = "Yes"
    NO = "No"
    HELLO = "Hello"
    THANK_YOU = "Thank you"
    I_LOVE_YOU = "I love you"
    PLEASE = "Please"
    NONE = "none"

    @property
    def text(self) -> str:
        """Transcript text for this label."""
        return self.value

    def __bool__(self) -> bool:
        return self is not GestureLabel.NONE


@dataclass(frozen=True)
class HandObservation:
    """One tracked hand in one frame."""
    landmarks: Tuple[Landmark, ...]  # length 21
    handedness: Handedness
    score: Optional[float] = None


@runtime_checkable
class TranscriptSinkProto(Protocol):
    """Abstract protocol for consumers of committed gestures."""

    async def commit(self, label: GestureLabel, transcript_text: str) -> None:
        """Receive a newly committed gesture and the full transcript text."""
        ...

    async def clear(self) -> None:
        """The transcript was cleared by a session reset."""
        ...

"""
Sign Gesture Translation

Classifies static ASL-style handshapes from MediaPipe hand landmarks,
stabilizes the per-frame labels and accumulates them into a transcript.
"""

__version__ = "0.1.0"

from .types import GestureLabel, Handedness, HandObservation, Landmark, TranscriptSinkProto
from .errors import MalformedLandmarksError, ProviderUnavailableError
from .config import load_config, Cfg
from .classifier import GestureClassifier, classify
from .gestures import DebounceState, GestureDebouncer, Transcript, TranslationSession
from .sinks import ConsoleTranscriptSink

__all__ = [
    "GestureLabel",
    "Handedness",
    "HandObservation",
    "Landmark",
    "TranscriptSinkProto",
    "MalformedLandmarksError",
    "ProviderUnavailableError",
    "load_config",
    "Cfg",
    "GestureClassifier",
    "classify",
    "DebounceState",
    "GestureDebouncer",
    "Transcript",
    "TranslationSession",
    "ConsoleTranscriptSink",
]

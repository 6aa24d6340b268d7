"""
Configuration management for the sign gesture translation pipeline.
"""
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int = 0
    width: int = 640
    height: int = 480
    fps: int = 30
    mirror: bool = True


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int = 2
    model_complexity: int = 1
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5


@dataclass
class ClassifierConfig:
    """
    Geometric thresholds for handshape classification.

    All values are in normalized landmark units. They were tuned empirically
    against a single webcam setup and should be treated as calibration constants.
    """
    extended_margin: float = 0.1   # tip must sit this far above its mcp
    curled_margin: float = 0.05    # tip below mcp - margin counts as curled
    level_tolerance: float = 0.05  # Hello / Thank you fingertip height spread
    together_distance: float = 0.04
    flat_level_tolerance: float = 0.04  # Please
    chest_wrist_y: float = 0.6


@dataclass
class DebounceConfig:
    """Gesture commit timing configuration."""
    min_consecutive: int = 3
    cooldown_ms: int = 1000
    timeout_ms: int = 3000


@dataclass
class TranscriptConfig:
    """Transcript rendering configuration."""
    separator: str = "\n\n"
    history_size: int = 10


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool = True
    show_transcript: bool = True
    window_name: str = "SignScribe"


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig = field(default_factory=CameraConfig)
    mediapipe: MediaPipeConfig = field(default_factory=MediaPipeConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    debounce: DebounceConfig = field(default_factory=DebounceConfig)
    transcript: TranscriptConfig = field(default_factory=TranscriptConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def default_config_path() -> Path:
    """Path of config.default.yaml in the project root."""
    return Path(__file__).parent.parent / "config.default.yaml"


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses config.default.yaml

    Returns:
        Configuration object with all settings
    """
    if path is None:
        path = default_config_path()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    return _dict_to_config(data or {})


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object. Missing sections keep their defaults."""
    return Cfg(
        camera=CameraConfig(**(data.get('camera') or {})),
        mediapipe=MediaPipeConfig(**(data.get('mediapipe') or {})),
        classifier=ClassifierConfig(**(data.get('classifier') or {})),
        debounce=DebounceConfig(**(data.get('debounce') or {})),
        transcript=TranscriptConfig(**(data.get('transcript') or {})),
        display=DisplayConfig(**(data.get('display') or {})),
        logging=LoggingConfig(**(data.get('logging') or {})),
    )

"""
Main application: live webcam sign gesture translation.
"""
import argparse
import asyncio
import logging
import sys
import time
from typing import List, Optional

import cv2

from .config import load_config
from .errors import ProviderUnavailableError
from .gestures import TranslationSession
from .landmarks import HandsTracker, draw_landmarks
from .sinks import ConsoleTranscriptSink
from .types import TranscriptSinkProto

logger = logging.getLogger(__name__)


class SignTranslatorApp:
    """Main application class for sign gesture translation."""

    def __init__(self, config_path: Optional[str] = None, camera_index: Optional[int] = None,
                 sinks: Optional[List[TranscriptSinkProto]] = None):
        """Initialize the application with configuration."""
        self.config = load_config(config_path)
        if camera_index is not None:
            self.config.camera.index = camera_index

        logging.basicConfig(level=getattr(logging, self.config.logging.level.upper(), logging.INFO))

        self.tracker = HandsTracker(
            max_num_hands=self.config.mediapipe.max_num_hands,
            model_complexity=self.config.mediapipe.model_complexity,
            min_detection_conf=self.config.mediapipe.min_detection_confidence,
            min_tracking_conf=self.config.mediapipe.min_tracking_confidence
        )
        self.session = TranslationSession(self.config)
        self.sinks: List[TranscriptSinkProto] = sinks if sinks is not None else [ConsoleTranscriptSink()]

        # Initialize camera
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            self.tracker.close()
            raise ProviderUnavailableError(f"Failed to open camera {self.config.camera.index}")

    async def start(self) -> None:
        self.session.start()
        await self._notify_clear()

    async def stop(self) -> None:
        self.session.stop()
        await self._notify_clear()

    async def reset(self) -> None:
        self.session.reset()
        await self._notify_clear()

    async def _notify_clear(self) -> None:
        for sink in self.sinks:
            await sink.clear()

    async def run(self):
        """Run the main application loop."""
        print(f"Starting {self.config.display.window_name}")
        print("🤟 Recognized signs: Yes, No, Hello, Thank you, I love you, Please")
        print("Press SPACE to start/stop, 'r' to reset, 'q' to quit")

        await self.start()

        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    raise ProviderUnavailableError("Failed to read frame from camera")

                if self.config.camera.mirror:
                    frame = cv2.flip(frame, 1)

                hands = self.tracker.process(frame)
                t_now = time.time()

                label, committed = self.session.process_frame(hands, t_now)

                if committed:
                    for sink in self.sinks:
                        await sink.commit(committed, self.session.transcript_text)

                if hands and self.config.display.show_landmarks:
                    for hand in hands:
                        frame = draw_landmarks(frame, hand.landmarks)

                self._draw_status(frame, label, bool(hands))

                cv2.imshow(self.config.display.window_name, frame)

                key = cv2.waitKey(1) & 0xFF
                if key == ord('q'):
                    break
                elif key == ord('r'):
                    await self.reset()
                elif key == ord(' '):
                    if self.session.active:
                        await self.stop()
                    else:
                        await self.start()
        finally:
            self.close()

    def _draw_status(self, frame, label, hand_seen: bool) -> None:
        if not self.session.active:
            status_text = "Paused"
        elif not hand_seen:
            status_text = "No hand detected"
        elif label:
            status_text = f"Seeing: {label.text}"
        else:
            status_text = "No recognized sign"

        cv2.putText(frame, status_text, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7,
                    (0, 255, 0) if label else (255, 255, 255), 2)

        if self.config.display.show_transcript:
            entries = [entry.text for entry in self.session.transcript.entries[-5:]]
            for i, text in enumerate(entries):
                cv2.putText(frame, text, (10, 70 + i * 25), cv2.FONT_HERSHEY_SIMPLEX, 0.6,
                            (255, 255, 255), 2)

        cv2.putText(frame, "SPACE start/stop | r reset | q quit", (10, frame.shape[0] - 20),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)

    def close(self) -> None:
        """Release camera, tracker and windows."""
        if self.cap.isOpened():
            self.cap.release()
        self.tracker.close()
        cv2.destroyAllWindows()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Translate ASL handshapes from a webcam into text.")
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument("--camera", type=int, default=None, help="Camera index override")
    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""
    args = parse_args(argv)

    try:
        app = SignTranslatorApp(config_path=args.config, camera_index=args.camera)
        await app.run()
    except FileNotFoundError as e:
        print(f"❌ {e}")
        return 1
    except ProviderUnavailableError as e:
        print(f"❌ Hand tracking unavailable: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nApplication interrupted by user")

    return 0


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()

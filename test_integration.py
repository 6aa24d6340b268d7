"""
Integration test to verify all components can be imported and work together.
"""
import asyncio
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent / "tests"))

from signscribe.types import GestureLabel, TranscriptSinkProto
from signscribe.config import load_config
from signscribe.gestures import TranslationSession
from signscribe.sinks import ConsoleTranscriptSink
from synthetic_hands import hello_hand, observe, thank_you_hand


async def run_integration() -> bool:
    """Wire config, session and sink together on a synthetic frame stream."""
    print("Testing integration of sign translation components...")

    # 1. Configuration
    print("\n1. Testing configuration loading...")
    config = load_config()
    print(f"✓ Config loaded: debounce={config.debounce.min_consecutive}x / "
          f"{config.debounce.cooldown_ms}ms / {config.debounce.timeout_ms}ms")

    # 2. Sink
    print("\n2. Testing console sink...")
    sink = ConsoleTranscriptSink(show_transcript=True)
    assert isinstance(sink, TranscriptSinkProto)
    print("✓ ConsoleTranscriptSink implements TranscriptSinkProto")

    # 3. Session over a synthetic ~30 fps stream
    print("\n3. Testing translation session...")
    session = TranslationSession(config)
    session.start()

    frames = [hello_hand()] * 45 + [None] * 10 + [thank_you_hand()] * 45
    t = 0.0
    for landmarks in frames:
        hands = [observe(landmarks)] if landmarks is not None else []
        _, committed = session.process_frame(hands, t)
        if committed:
            await sink.commit(committed, session.transcript_text)
        t += 1 / 30.0

    assert session.transcript.entries == (GestureLabel.HELLO, GestureLabel.THANK_YOU), session.transcript.entries
    assert sink.commit_count == 2
    print(f"✓ Transcript: {session.transcript_text!r}")

    # 4. Reset
    session.reset()
    await sink.clear()
    assert session.transcript_text == ""
    print("✓ Reset cleared the transcript")

    print("\n✅ All integration checks passed")
    return True


def test_integration():
    assert asyncio.run(run_integration())


if __name__ == "__main__":
    success = asyncio.run(run_integration())
    sys.exit(0 if success else 1)

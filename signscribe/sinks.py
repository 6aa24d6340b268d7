"""
Transcript sink that prints committed gestures instead of rendering them.
"""
from .types import GestureLabel


class ConsoleTranscriptSink:
    """Console sink that prints each committed gesture."""

    def __init__(self, show_transcript: bool = False):
        """Initialize the console sink."""
        self.show_transcript = show_transcript
        self.commit_count = 0
        self.clear_count = 0
        self.last_text = ""

    async def commit(self, label: GestureLabel, transcript_text: str) -> None:
        """Print the committed gesture."""
        self.commit_count += 1
        self.last_text = transcript_text
        print(f"[Transcript] {label.text} (entry #{self.commit_count})")
        if self.show_transcript:
            print(transcript_text)

    async def clear(self) -> None:
        """Print that the transcript was cleared."""
        self.clear_count += 1
        self.commit_count = 0
        self.last_text = ""
        print("[Transcript] cleared")

    def reset_counters(self) -> None:
        """Reset counters for testing."""
        self.commit_count = 0
        self.clear_count = 0

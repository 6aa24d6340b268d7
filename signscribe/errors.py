"""
Exceptions raised by the sign gesture translation pipeline.
"""
from typing import Optional


class MalformedLandmarksError(ValueError):
    """A hand landmark set did not contain exactly 21 points of 2 or 3 coordinates."""

    def __init__(self, count: int, expected: int = 21, message: Optional[str] = None):
        super().__init__(message or f"Expected {expected} hand landmarks, got {count}")
        self.count = count
        self.expected = expected

    @classmethod
    def bad_point(cls, coordinates: int) -> "MalformedLandmarksError":
        """A single point had the wrong number of coordinates."""
        return cls(coordinates, 3, f"Expected a landmark with 2 or 3 coordinates, got {coordinates}")


class ProviderUnavailableError(RuntimeError):
    """The camera or hand-tracking provider could not be initialized or stopped delivering frames."""

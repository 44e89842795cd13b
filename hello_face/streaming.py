"""Frames streamed from the daemon during a capture session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FaceBox:
    """Bounding box of a detected face, in pixels, with its confidence."""

    x: int
    y: int
    width: int
    height: int
    confidence: float

    def contains(self, px: int, py: int) -> bool:
        """Tell whether a point lies inside the box (right and bottom edges excluded)."""
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    def center(self) -> tuple[int, int]:
        """Return the centre point of the box."""
        return self.x + self.width // 2, self.y + self.height // 2

    def completion_percent(self, frame_num: int, total_frames: int) -> float:
        """Percentage of a capture reached at the given frame."""
        if total_frames == 0:
            return 0.0
        return frame_num / total_frames * 100.0


@dataclass
class CaptureFrame:
    """One frame of a capture, with its detection result."""

    frame_number: int
    total_frames: int
    frame_data: bytes
    width: int
    height: int
    face_detected: bool
    face_box: FaceBox | None
    quality_score: float
    timestamp_ms: int
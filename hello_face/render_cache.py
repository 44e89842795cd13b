"""Rendering caches: last rendered frame and bounding-box visibility."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FrameCache:
    """Remembers which frame was last rendered."""

    cached_frame_id: int | None = None
    is_valid: bool = False

    def is_valid_for(self, frame_id: int) -> bool:
        """Tell whether the cache holds the given frame."""
        return self.is_valid and self.cached_frame_id == frame_id

    def mark_valid(self, frame_id: int) -> None:
        """Record that the given frame has been rendered."""
        self.cached_frame_id = frame_id
        self.is_valid = True

    def invalidate(self) -> None:
        """Drop the cached frame, e.g. when a new frame arrives."""
        self.is_valid = False


@dataclass
class BoundingBoxCache:
    """Decides whether the face box is drawn, based on detection confidence."""

    bbox: tuple[int, int, int, int] | None = None
    should_draw: bool = False
    confidence_threshold: float = 0.7

    def update(self, detected: bool, confidence: float) -> None:
        """Draw only when a face is detected with enough confidence."""
        self.should_draw = detected and confidence >= self.confidence_threshold

    def should_draw_bbox(self) -> bool:
        """Tell whether the bounding box should be drawn."""
        return self.should_draw
"""Live preview state: progress, detection status and bounding-box overlay."""

from __future__ import annotations

from dataclasses import dataclass

from hello_face.streaming import CaptureFrame, FaceBox

_GREEN = bytes((0, 255, 0))
_THICKNESS = 2
_PREVIEW_MAX_HEIGHT = 480


def lerp(current: float, target: float, speed: float) -> float:
    """Move current towards target by a fraction speed, snapping when very close."""
    if abs(current - target) < 0.001:
        return target
    return current + (target - current) * speed


def ease_out_quad(t: float) -> float:
    """Quadratic ease-out curve."""
    return 1.0 - (1.0 - t) * (1.0 - t)


def clamp_01(value: float) -> float:
    """Clamp a value into [0.0, 1.0]."""
    return min(max(value, 0.0), 1.0)


def _paint(
    frame_data: bytearray, width: int, rows: range, columns: range
) -> None:
    """Paint the given rectangle of RGB24 pixels green, skipping pixels past the end."""
    if not columns:
        return
    pixel_limit = len(frame_data) // 3
    for y in rows:
        first = y * width + columns.start
        last = min(y * width + columns.stop, pixel_limit)
        if last > first:
            frame_data[3 * first : 3 * last] = _GREEN * (last - first)


@dataclass
class PreviewState:
    """What the preview currently shows."""

    current_frame: CaptureFrame | None = None
    width: int = 640
    height: int = 480

    def update_frame(self, frame: CaptureFrame) -> None:
        """Show a new frame."""
        self.width = frame.width
        self.height = frame.height
        self.current_frame = frame

    def progress_percent(self) -> float:
        """Fraction of the capture done, from 0.0 to 1.0."""
        frame = self.current_frame
        if frame is None or frame.total_frames == 0:
            return 0.0
        return (frame.frame_number + 1) / frame.total_frames

    def progress_text(self) -> str:
        """Progress as 'done/total frames'."""
        frame = self.current_frame
        if frame is None:
            return "0/0 frames"
        return f"{frame.frame_number + 1}/{frame.total_frames} frames"

    def detection_status(self) -> str:
        """Human-readable detection status of the current frame."""
        frame = self.current_frame
        if frame is None:
            return "En attente de capture..."
        if not frame.face_detected:
            return "⚠ Aucun visage détecté"
        confidence = frame.face_box.confidence * 100.0 if frame.face_box else 0.0
        return f"✓ Visage détecté (confiance: {confidence:.1f}%)"

    def get_display_data(self) -> bytearray | None:
        """RGB24 data of the current frame with the face box drawn, or None."""
        if self.current_frame is None:
            return None
        data = bytearray(self.current_frame.frame_data)
        self.draw_bounding_box(data)
        return data

    def draw_bounding_box(self, frame_data: bytearray) -> None:
        """Draw the current frame's face box, if any, onto RGB24 data in place."""
        frame = self.current_frame
        if frame is not None and frame.face_box is not None:
            self._draw_box_rect(frame_data, frame.face_box, frame.width)

    @staticmethod
    def _draw_box_rect(frame_data: bytearray, face_box: FaceBox, width: int) -> None:
        left = face_box.x
        top = face_box.y
        right = min(face_box.x + face_box.width, width)
        bottom = min(face_box.y + face_box.height, _PREVIEW_MAX_HEIGHT)

        columns = range(left, right)
        _paint(frame_data, width, range(top, min(top + _THICKNESS, bottom)), columns)
        _paint(frame_data, width, range(max(bottom - _THICKNESS, 0), bottom), columns)
        rows = range(top, bottom)
        _paint(frame_data, width, rows, range(left, min(left + _THICKNESS, right)))
        _paint(frame_data, width, rows, range(max(right - _THICKNESS, 0), right))
"""Fast stub detector for low-latency live preview."""

from __future__ import annotations

from hello_face.core import FaceDetector, FaceRegion, InvalidFrame, _scaled


class StubDetector(FaceDetector):
    """Reports a central face when the region's first channel has mid-range brightness."""

    def __init__(self) -> None:
        self._name = "stub-detector"
        self._version = "0.1.0"

    @property
    def name(self) -> str:
        return self._name

    @property
    def model_version(self) -> str:
        return self._version

    def detect(
        self, frame_data: bytes, width: int, height: int, channels: int
    ) -> list[FaceRegion]:
        if not frame_data or width == 0 or height == 0 or channels == 0:
            return []

        expected_size = width * height * channels
        if len(frame_data) < expected_size:
            raise InvalidFrame(
                f"Taille frame invalide: {len(frame_data)} < {expected_size}"
            )

        face_width = _scaled(width, 0.3)
        face_height = _scaled(height, 0.4)
        face_x = (width - face_width) // 2
        face_y = (height - face_height) // 2
        box = (face_x, face_y, face_width, face_height)

        if not self._has_contrast(frame_data, width, channels, box):
            return []
        return [FaceRegion(bounding_box=box, confidence=0.85)]

    @staticmethod
    def _has_contrast(
        frame_data: bytes,
        width: int,
        channels: int,
        box: tuple[int, int, int, int],
    ) -> bool:
        x, y, w, h = box
        total = 0
        count = 0
        for row in range(y, y + h):
            start = (row * width + x) * channels
            samples = frame_data[start : start + w * channels : channels]
            total += sum(samples)
            count += len(samples)
        if count == 0:
            return False
        average = total // count
        return 50 < average < 200
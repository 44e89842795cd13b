"""Face recognition primitives: detections, embeddings, results and simple backends."""

from __future__ import annotations

import json
import math
import struct
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence

HISTOGRAM_BINS = 32


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _scaled(size: int, factor: float) -> int:
    """Scale a pixel size by a factor in single precision, truncating toward zero."""
    return int(_f32(_f32(float(size)) * _f32(factor)))


@dataclass
class FaceRegion:
    """A detected face: bounding box (x, y, width, height), confidence and landmarks."""

    bounding_box: tuple[int, int, int, int]
    confidence: float
    landmarks: list[tuple[float, float]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "bounding_box": list(self.bounding_box),
            "confidence": self.confidence,
            "landmarks": [list(point) for point in self.landmarks],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FaceRegion:
        x, y, w, h = data["bounding_box"]
        return cls(
            bounding_box=(int(x), int(y), int(w), int(h)),
            confidence=float(data["confidence"]),
            landmarks=[(float(px), float(py)) for px, py in data["landmarks"]],
        )


@dataclass
class EmbeddingMetadata:
    """How and when an embedding was extracted."""

    model: str
    model_version: str
    extracted_at: int
    quality_score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "model_version": self.model_version,
            "extracted_at": self.extracted_at,
            "quality_score": self.quality_score,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmbeddingMetadata:
        return cls(
            model=str(data["model"]),
            model_version=str(data["model_version"]),
            extracted_at=int(data["extracted_at"]),
            quality_score=float(data["quality_score"]),
        )


@dataclass
class Embedding:
    """A face signature: a feature vector with its metadata."""

    vector: list[float]
    metadata: EmbeddingMetadata

    def to_dict(self) -> dict[str, Any]:
        return {"vector": list(self.vector), "metadata": self.metadata.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Embedding:
        return cls(
            vector=[float(v) for v in data["vector"]],
            metadata=EmbeddingMetadata.from_dict(data["metadata"]),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> Embedding:
        return cls.from_dict(json.loads(text))


class MatchResult:
    """Outcome of a face verification."""


@dataclass(frozen=True)
class MatchSuccess(MatchResult):
    score: float
    method: str

    def __str__(self) -> str:
        return f"Succès ({self.method}): score {self.score:.2f}"


@dataclass(frozen=True)
class NoFace(MatchResult):
    def __str__(self) -> str:
        return "Aucun visage détecté"


@dataclass(frozen=True)
class LowConfidence(MatchResult):
    score: float
    required_threshold: float

    def __str__(self) -> str:
        return f"Confiance insuffisante: {self.score:.2f} < {self.required_threshold:.2f}"


@dataclass(frozen=True)
class AbortedByUser(MatchResult):
    def __str__(self) -> str:
        return "Annulé par l'utilisateur"


@dataclass(frozen=True)
class InternalError(MatchResult):
    message: str

    def __str__(self) -> str:
        return f"Erreur interne: {self.message}"


class FaceError(Exception):
    """Base error of the recognition engine."""


class DetectionFailed(FaceError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Détection échouée: {reason}")
        self.reason = reason


class EmbeddingFailed(FaceError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Extraction d'embedding échouée: {reason}")
        self.reason = reason


class InvalidFrame(FaceError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Frame invalide: {reason}")
        self.reason = reason


class NoBackendAvailable(FaceError):
    def __init__(self) -> None:
        super().__init__("Aucun backend disponible")


class ConfigError(FaceError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Erreur de configuration: {reason}")
        self.reason = reason


class FaceDetector(ABC):
    """Finds faces in a raw frame."""

    @abstractmethod
    def detect(
        self, frame_data: bytes, width: int, height: int, channels: int
    ) -> list[FaceRegion]:
        """Return the face regions found in the frame."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the detector."""

    @property
    @abstractmethod
    def model_version(self) -> str:
        """Version of the detection model."""


class EmbeddingExtractor(ABC):
    """Turns a face region into an embedding."""

    @abstractmethod
    def extract(
        self,
        face_region: FaceRegion,
        frame_data: bytes,
        width: int,
        height: int,
        channels: int,
    ) -> Embedding:
        """Return the embedding of the given face region."""

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Name of the extraction model."""

    @property
    @abstractmethod
    def model_version(self) -> str:
        """Version of the extraction model."""

    @property
    @abstractmethod
    def embedding_dimension(self) -> int:
        """Length of the produced vectors."""


class SimilarityMetric(ABC):
    """Scores how alike two embeddings are; higher means more similar."""

    @abstractmethod
    def compare(self, embedding1: Embedding, embedding2: Embedding) -> float:
        """Return the similarity of two embeddings."""

    @property
    @abstractmethod
    def metric_name(self) -> str:
        """Name of the metric."""


@dataclass
class VerificationConfig:
    """Thresholds and limits for a verification."""

    confidence_threshold: float = 0.95
    similarity_threshold: float = 0.6
    detection_timeout_ms: int = 5000
    max_attempts: int = 3
    context: str = "default"


class SimpleDetector(FaceDetector):
    """Prototype detector returning a fixed central region."""

    name = "SimpleDetector"
    model_version = "0.1"

    def detect(
        self, frame_data: bytes, width: int, height: int, channels: int
    ) -> list[FaceRegion]:
        region = (
            _scaled(width, 0.25),
            _scaled(height, 0.2),
            _scaled(width, 0.5),
            _scaled(height, 0.6),
        )
        return [FaceRegion(bounding_box=region, confidence=0.8)]


def _region_pixels(
    frame_data: Sequence[int],
    width: int,
    height: int,
    channels: int,
    region: tuple[int, int, int, int],
) -> Iterator[tuple[int, int, int]]:
    """Yield (r, g, b) for each pixel of the region whose three bytes lie in the frame."""
    x, y, w, h = region
    x_end = min(x + w, width)
    y_end = min(y + h, height)
    if x_end <= x:
        return
    for py in range(y, y_end):
        if channels == 0:
            if len(frame_data) > 2:
                r, g, b = frame_data[0], frame_data[1], frame_data[2]
                for _ in range(x, x_end):
                    yield r, g, b
            continue
        start = (py * width + x) * channels
        stop = (py * width + x_end) * channels
        yield from zip(
            frame_data[start:stop:channels],
            frame_data[start + 1 : stop + 1 : channels],
            frame_data[start + 2 : stop + 2 : channels],
        )


class SimpleEmbedder(EmbeddingExtractor):
    """Prototype extractor: normalised 32-bin histograms of each RGB channel."""

    model_name = "SimpleHistogram"
    model_version = "0.1"
    embedding_dimension = 3 * HISTOGRAM_BINS

    def extract(
        self,
        face_region: FaceRegion,
        frame_data: bytes,
        width: int,
        height: int,
        channels: int,
    ) -> Embedding:
        hist_r = [0] * HISTOGRAM_BINS
        hist_g = [0] * HISTOGRAM_BINS
        hist_b = [0] * HISTOGRAM_BINS
        for r, g, b in _region_pixels(
            frame_data, width, height, channels, face_region.bounding_box
        ):
            hist_r[r >> 3] += 1
            hist_g[g >> 3] += 1
            hist_b[b >> 3] += 1

        _, _, w, h = face_region.bounding_box
        total = float(w * h)
        counts = hist_r + hist_g + hist_b
        if total == 0.0:
            vector = [math.nan] * len(counts)
        else:
            vector = [count / total for count in counts]

        return Embedding(
            vector=vector,
            metadata=EmbeddingMetadata(
                model="histogram",
                model_version="0.1",
                extracted_at=int(time.time()),
                quality_score=0.7,
            ),
        )
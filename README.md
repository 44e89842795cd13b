# hello_face

Building blocks for a face authentication front end. The package has no
third-party dependencies.

## Modules

- `hello_face.core`
  - `FaceRegion`, `EmbeddingMetadata` and `Embedding`, with `to_dict` /
    `from_dict`; `Embedding` also has `to_json` / `from_json`.
  - Match results: `MatchSuccess`, `NoFace`, `LowConfidence`,
    `AbortedByUser` and `InternalError`, all subclasses of `MatchResult`.
    `str()` gives a short message in French, for example
    `Succès (cosine): score 0.85`.
  - Errors: `FaceError` and its subclasses `DetectionFailed`,
    `EmbeddingFailed`, `InvalidFrame`, `NoBackendAvailable` and `ConfigError`.
  - Abstract interfaces: `FaceDetector`, `EmbeddingExtractor` and
    `SimilarityMetric`.
  - `VerificationConfig`, with defaults of a 0.95 confidence threshold, a 0.6
    similarity threshold, a 5000 ms timeout, 3 attempts and context
    `"default"`.
  - `SimpleDetector`, which always returns one fixed central region with
    confidence 0.8.
  - `SimpleEmbedder`, which returns a 96-value vector: one 32-bin histogram
    for each of R, G and B over the face region, normalised by the region's
    area.
- `hello_face.stub_detector`: `StubDetector`. It returns nothing for an empty
  frame or a zero size, and raises `InvalidFrame` when the data is shorter than
  `width * height * channels`. Otherwise it reports a central face, with
  confidence 0.85, when the average first-channel value of that region is
  strictly between 50 and 200.
- `hello_face.streaming`: `CaptureFrame`, a frame streamed during capture,
  and `FaceBox`, with `contains`, `center` and `completion_percent`.
- `hello_face.preview`: `PreviewState` holds the current `CaptureFrame`. It
  reports `progress_percent()`, `progress_text()` and `detection_status()`,
  and `get_display_data()` returns a copy of the RGB24 data with the face box
  outlined in green. The module also provides the animation helpers `lerp`,
  `ease_out_quad` and `clamp_01`.
- `hello_face.render_cache`: `FrameCache`, which records the last rendered
  frame id, and `BoundingBoxCache`, which draws the box only for a detection
  with confidence at or above its threshold (0.7 by default).
- `hello_face.ui`: the `Screen` enum (`HOME`, `ENROLLMENT`, `SETTINGS`,
  `MANAGE_FACES`).
- `hello_face.button_state`: `ButtonState`, with `opacity()` and `scale()`, and
  `ButtonStates`. All buttons default to `NORMAL`.
  `ButtonStates.initial()` disables the stop-capture button.
- `hello_face.animation_ticker`: `AnimationTicker` puts `AnimationEvent.TICK`
  on a queue about every 16 ms from a background thread while it runs. Use
  `start()` and `stop()`, or use it as a context manager. `try_tick()` returns
  a pending event or `None` without blocking.
- `hello_face.config`: `GuiConfig`, with settings for enrollment, detection,
  the camera device and the storage path. `GuiConfig.load(path=None)` reads a
  JSON file and returns the defaults when the file does not exist. It raises
  `ValueError` on malformed values. `save(path=None)` writes the file and
  creates its directory if needed. Without a path, the file is `config.json`
  under `default_storage_path()`, which is `linux-hello` in the user's
  configuration directory.
- `hello_face.launcher`: `resolve_qml_path`, `build_environment` and `main`.

## Installation

```
pip install .
```

## Example

```python
from hello_face.stub_detector import StubDetector

frame = bytes([120]) * (640 * 480 * 3)
for region in StubDetector().detect(frame, 640, 480, 3):
    print(region.bounding_box, region.confidence)
```

```python
from hello_face.core import SimpleDetector, SimpleEmbedder, Embedding

detector, embedder = SimpleDetector(), SimpleEmbedder()
region = detector.detect(frame, 640, 480, 3)[0]
embedding = embedder.extract(region, frame, 640, 480, 3)
restored = Embedding.from_json(embedding.to_json())
```

## Configuration interface

```
linux-hello-config
```

This runs `qml6` on the installed
`/usr/share/linux-hello/qml-modules/Linux/Hello/main.qml` when that file
exists. Otherwise it uses `qml/main.qml` under the directory named by
`LINUX_HELLO_SOURCE_DIR`, or under the current directory if that variable is
not set. The Qt and QML environment variables the interface expects are set
for the run. The command waits for `qml6` to exit, and exits with status 1 if
`qml6` cannot be started. The QML files themselves are not part of this
package.

## What this package does not do

- It does not capture from a camera.
- It does not run an authentication service and does not talk to one.
- It does not store enrolled faces.
- It provides no similarity metric, only the `SimilarityMetric` interface.
- The detectors and the embedder are simple prototypes, not trained models.